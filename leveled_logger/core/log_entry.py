"""
Log entry data structure

One record on its way from a logging call to the formatter.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any

from leveled_logger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    file_name holds the full path of the calling source file; formatters
    decide whether to shorten it.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
        }
