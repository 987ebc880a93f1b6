"""Writers module - Log output destinations"""

from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.file_writer import FileWriter
from leveled_logger.writers.multi_writer import MultiWriter
from leveled_logger.writers.level_sink import LevelSink, find_caller

__all__ = ["ConsoleWriter", "FileWriter", "MultiWriter", "LevelSink", "find_caller"]
