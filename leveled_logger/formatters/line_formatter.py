"""
Line formatter

Produces one text line per entry:

    <tag><date> <time> <file>:<line>: <message>

Which header fields appear is controlled by LogFlags.
"""

import os
from datetime import timezone

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_flags import DEFAULT_FLAGS, LogFlags
from leveled_logger.formatters.base_formatter import BaseFormatter


class LineFormatter(BaseFormatter):
    """
    Format log entries as a tagged, single-line header plus message.

    Example:
        formatter = LineFormatter("INFO : ")
        formatter.format(entry)
        # "INFO : 2024/05/01 13:45:12.123456 main.py:10: started\\n"
    """

    def __init__(self, prefix: str = "", flags: LogFlags = DEFAULT_FLAGS):
        """
        Initialize line formatter.

        Args:
            prefix: Text placed at the start of the line, or just before
                    the message when MSG_PREFIX is set
            flags: Header fields to render
        """
        self.prefix = prefix
        self.flags = LogFlags(flags)

    def format_header(self, entry: LogEntry) -> str:
        """Render everything that precedes the message."""
        flags = self.flags
        parts = []

        if not flags & LogFlags.MSG_PREFIX:
            parts.append(self.prefix)

        if flags & (LogFlags.DATE | LogFlags.TIME | LogFlags.MICROSECONDS):
            ts = entry.timestamp
            if flags & LogFlags.UTC:
                ts = ts.astimezone(timezone.utc)
            if flags & LogFlags.DATE:
                parts.append(ts.strftime("%Y/%m/%d "))
            if flags & (LogFlags.TIME | LogFlags.MICROSECONDS):
                parts.append(ts.strftime("%H:%M:%S"))
                if flags & LogFlags.MICROSECONDS:
                    parts.append(f".{ts.microsecond:06d}")
                parts.append(" ")

        if flags.wants_location:
            file_name = entry.file_name or "???"
            if flags & LogFlags.SHORT_FILE:
                file_name = os.path.basename(file_name)
            parts.append(f"{file_name}:{entry.line_number}: ")

        if flags & LogFlags.MSG_PREFIX:
            parts.append(self.prefix)

        return "".join(parts)

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry, guaranteeing exactly one trailing newline
        unless the message already carries its own.
        """
        line = self.format_header(entry) + entry.message
        if not line.endswith("\n"):
            line += "\n"
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(prefix={self.prefix!r}, flags={self.flags!r})"
