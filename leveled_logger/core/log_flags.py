"""
Formatting flags

Bitset selecting which header fields precede each log message.
"""

from enum import IntFlag


class LogFlags(IntFlag):
    """
    Header field flags.

    DATE          2009/01/23
    TIME          01:23:23
    MICROSECONDS  01:23:23.123123 (implies TIME)
    LONG_FILE     /a/b/c/d.py:23
    SHORT_FILE    d.py:23 (overrides LONG_FILE)
    UTC           use UTC rather than the local time zone
    MSG_PREFIX    move the level tag from line start to just before the message
    """

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONG_FILE = 8
    SHORT_FILE = 16
    UTC = 32
    MSG_PREFIX = 64

    @property
    def wants_location(self) -> bool:
        """True when caller file/line has to be looked up."""
        return bool(self & (LogFlags.LONG_FILE | LogFlags.SHORT_FILE))


ALL_FLAGS = (
    LogFlags.DATE
    | LogFlags.TIME
    | LogFlags.MICROSECONDS
    | LogFlags.LONG_FILE
    | LogFlags.SHORT_FILE
    | LogFlags.UTC
    | LogFlags.MSG_PREFIX
)

STD_FLAGS = LogFlags.DATE | LogFlags.TIME

DEFAULT_FLAGS = LogFlags.DATE | LogFlags.MICROSECONDS | LogFlags.SHORT_FILE
