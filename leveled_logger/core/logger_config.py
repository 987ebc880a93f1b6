"""
Logger configuration management

LoggerOptions is the mutable record option functions write into while a
logger is being built; LoggerConfig is the immutable snapshot the logger
keeps afterwards.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from leveled_logger.core.log_flags import ALL_FLAGS, DEFAULT_FLAGS, LogFlags
from leveled_logger.core.log_level import LogLevel

# Read once per construction; later changes do not reach existing loggers.
DEFAULT_LEVEL: LogLevel = LogLevel.DEBUG


def _check_flags(flags: Union[LogFlags, int]) -> LogFlags:
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise ValueError(f"log_flags must be an int, got {type(flags).__name__}")
    if flags < 0 or int(flags) & ~int(ALL_FLAGS):
        raise ValueError(f"Invalid log flags: {flags!r}")
    return LogFlags(int(flags))


@dataclass(frozen=True)
class LoggerConfig:
    """
    Logger configuration snapshot.

    info_log_file and error_log_file are extra destinations for the
    DEBUG/INFO group and the WARN/ERROR/FATAL group respectively. Each is
    either a path or an object with a write(str) method.
    """

    min_level: LogLevel = LogLevel.DEBUG
    info_log_file: Optional[Any] = None
    error_log_file: Optional[Any] = None
    log_flags: LogFlags = DEFAULT_FLAGS

    def __post_init__(self):
        """Validate configuration after initialization."""
        # frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "min_level", LogLevel.coerce(self.min_level))
        object.__setattr__(self, "log_flags", _check_flags(self.log_flags))

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration using the current DEFAULT_LEVEL."""
        return cls(min_level=DEFAULT_LEVEL)

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            log_flags=LogFlags.DATE | LogFlags.MICROSECONDS | LogFlags.LONG_FILE,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(min_level=LogLevel.WARN)


@dataclass
class LoggerOptions:
    """Mutable options record; see leveled_logger.core.options."""

    level: LogLevel = LogLevel.DEBUG
    info_log_file: Optional[Any] = None
    error_log_file: Optional[Any] = None
    log_flags: LogFlags = DEFAULT_FLAGS

    @classmethod
    def defaults(cls, default_level: Optional[LogLevel] = None) -> "LoggerOptions":
        """Starting point for a new logger."""
        level = DEFAULT_LEVEL if default_level is None else default_level
        return cls(level=level, log_flags=DEFAULT_FLAGS)

    def freeze(self) -> LoggerConfig:
        """Snapshot the current values."""
        return LoggerConfig(
            min_level=self.level,
            info_log_file=self.info_log_file,
            error_log_file=self.error_log_file,
            log_flags=self.log_flags,
        )
