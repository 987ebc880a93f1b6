"""
Log level enumeration

Ordered severities used for filtering, each with a fixed output tag.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordering matters: a logger drops every message whose level is
    strictly lower than its configured minimum.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive, "warning" accepted)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, value: Union["LogLevel", str, int]) -> "LogLevel":
        """Accept a LogLevel, its name or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid log level: {value!r}") from None

    @property
    def tag(self) -> str:
        """Fixed-width prefix written in front of every line of this level."""
        return LEVEL_TAGS[self]


LEVEL_TAGS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG: ",
    LogLevel.INFO: "INFO : ",
    LogLevel.WARN: "WARN : ",
    LogLevel.ERROR: "ERROR: ",
    LogLevel.FATAL: "FATAL: ",
}

LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
