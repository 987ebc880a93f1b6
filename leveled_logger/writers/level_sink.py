"""
Per-level sink

Binds a formatter (carrying the level tag) to the writer group for that
level, and resolves the caller location for each line.
"""

import inspect
from datetime import datetime
from typing import Any, Tuple

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import LogLevel
from leveled_logger.formatters.line_formatter import LineFormatter

UNKNOWN_LOCATION = ("???", 0, "")


def find_caller(depth: int) -> Tuple[str, int, str]:
    """
    Return (file name, line number, function name) of a frame up the stack.

    depth 0 is the function that called find_caller, 1 its caller, and
    so on. Walking past the outermost frame yields UNKNOWN_LOCATION.
    """
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame is not None else None
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        code = frame.f_code
        return code.co_filename, frame.f_lineno, code.co_name
    finally:
        del frame


class LevelSink:
    """Render messages for one level and forward them to its writers."""

    def __init__(self, level: LogLevel, writer: Any, formatter: LineFormatter):
        self.level = level
        self.writer = writer
        self.formatter = formatter

    def output(self, calldepth: int, message: str) -> None:
        """
        Write one message.

        calldepth counts frames above output(): 1 is output's caller.
        Must be called with the logger lock held.
        """
        now = datetime.now()
        if self.formatter.flags.wants_location:
            file_name, line_number, function_name = find_caller(calldepth)
        else:
            file_name, line_number, function_name = "", 0, ""

        entry = LogEntry(
            level=self.level,
            message=message,
            timestamp=now,
            file_name=file_name,
            line_number=line_number,
            function_name=function_name,
        )
        self.writer.write(self.formatter.format(entry))

    def __repr__(self) -> str:
        return f"LevelSink({self.level.name}, {self.writer!r})"
