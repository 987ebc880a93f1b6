"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - A small synchronous leveled logging utility
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder, new_logger
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_flags import LogFlags, DEFAULT_FLAGS, STD_FLAGS
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.errors import LoggerError, CloseError
from leveled_logger.core.options import (
    with_level,
    with_info_log_file,
    with_error_log_file,
    with_log_flags,
)

# Import submodules (not all classes by default)
from leveled_logger import formatters
from leveled_logger import writers

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
    "LoggerError",
    "CloseError",
    "with_level",
    "with_info_log_file",
    "with_error_log_file",
    "with_log_flags",
    "formatters",
    "writers",
]
