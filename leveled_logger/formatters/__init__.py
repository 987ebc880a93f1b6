"""
Log formatters module

Formatters turn a LogEntry into the text line handed to writers.
"""

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.line_formatter import LineFormatter

__all__ = [
    "BaseFormatter",
    "LineFormatter",
]
