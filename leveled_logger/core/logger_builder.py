"""Logger builder pattern"""

from typing import Any, List, Optional, Union

from leveled_logger.core.logger import Logger
from leveled_logger.core.log_flags import LogFlags
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerOptions
from leveled_logger.core.options import (
    Option,
    with_error_log_file,
    with_info_log_file,
    with_level,
    with_log_flags,
)


def new_logger(*options: Option, default_level: Optional[LogLevel] = None) -> Logger:
    """
    Build a logger from option functions.

    Args:
        *options: Callables from leveled_logger.core.options, applied in order
        default_level: Starting minimum level; falls back to DEFAULT_LEVEL

    Example:
        logger = new_logger(
            with_level(LogLevel.WARN),
            with_error_log_file("logs/errors.log"),
        )
    """
    record = LoggerOptions.defaults(default_level)
    for option in options:
        option(record)
    return Logger(record.freeze())


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, default_level: Optional[LogLevel] = None):
        self._default_level = default_level
        self._options: List[Option] = []

    def with_level(self, level: Union[LogLevel, str, int]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._options.append(with_level(level))
        return self

    def with_info_log_file(self, destination: Any) -> "LoggerBuilder":
        """
        Also send DEBUG and INFO lines to destination.

        Args:
            destination: A file path, or any object with write(str).
                         Objects with close() are closed by Logger.close().

        Returns:
            Self for method chaining
        """
        self._options.append(with_info_log_file(destination))
        return self

    def with_error_log_file(self, destination: Any) -> "LoggerBuilder":
        """Also send WARN, ERROR and FATAL lines to destination."""
        self._options.append(with_error_log_file(destination))
        return self

    def with_log_flags(self, flags: Union[LogFlags, int]) -> "LoggerBuilder":
        """Set the header flags."""
        self._options.append(with_log_flags(flags))
        return self

    def with_option(self, option: Option) -> "LoggerBuilder":
        """
        Add a raw option function.

        Example:
            def quiet(options):
                options.level = LogLevel.ERROR

            logger = LoggerBuilder().with_option(quiet).build()
        """
        self._options.append(option)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return new_logger(*self._options, default_level=self._default_level)
