"""
Core module for leveled logger

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder / new_logger: Logger construction
- LogLevel: Severity enumeration
- LogFlags: Header formatting flags
- LoggerConfig: Configuration snapshot
"""

from leveled_logger.core.errors import LoggerError, CloseError
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_flags import LogFlags, DEFAULT_FLAGS, STD_FLAGS
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder, new_logger
from leveled_logger.core.logger_config import LoggerConfig, LoggerOptions
from leveled_logger.core.options import (
    with_level,
    with_info_log_file,
    with_error_log_file,
    with_log_flags,
)

__all__ = [
    "Logger",
    "LoggerBuilder",
    "new_logger",
    "LogEntry",
    "LogLevel",
    "LogFlags",
    "DEFAULT_FLAGS",
    "STD_FLAGS",
    "LoggerConfig",
    "LoggerOptions",
    "LoggerError",
    "CloseError",
    "with_level",
    "with_info_log_file",
    "with_error_log_file",
    "with_log_flags",
]
