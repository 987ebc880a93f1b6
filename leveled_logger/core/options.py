"""
Configuration options

Each option is a plain callable that mutates a LoggerOptions record.
Options are applied in order, so the last one to touch a field wins.
"""

from typing import Any, Callable, Union

from leveled_logger.core.log_flags import LogFlags
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerOptions

Option = Callable[[LoggerOptions], None]


def with_level(level: Union[LogLevel, str, int]) -> Option:
    """Set the minimum level; anything below it is dropped."""
    level = LogLevel.coerce(level)

    def apply(options: LoggerOptions) -> None:
        options.level = level

    return apply


def with_info_log_file(destination: Any) -> Option:
    """Add a destination for DEBUG and INFO lines, next to stdout."""

    def apply(options: LoggerOptions) -> None:
        options.info_log_file = destination

    return apply


def with_error_log_file(destination: Any) -> Option:
    """Add a destination for WARN, ERROR and FATAL lines, next to stderr."""

    def apply(options: LoggerOptions) -> None:
        options.error_log_file = destination

    return apply


def with_log_flags(flags: Union[LogFlags, int]) -> Option:
    """Replace the header flag set."""

    def apply(options: LoggerOptions) -> None:
        options.log_flags = flags

    return apply
