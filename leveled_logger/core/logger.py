"""
Main Logger class - synchronous leveled logger

DEBUG and INFO lines go to stdout (plus an optional info file), WARN,
ERROR and FATAL lines go to stderr (plus an optional error file). Every
line carries the location of the code that made the logging call.
"""

from __future__ import annotations
from typing import Optional, List, Any, Dict
import os
import sys
import threading

from leveled_logger.core.errors import CloseError
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.rendering import render, render_line, render_format
from leveled_logger.formatters.line_formatter import LineFormatter
from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.file_writer import FileWriter
from leveled_logger.writers.level_sink import LevelSink
from leveled_logger.writers.multi_writer import MultiWriter

# Frames between LevelSink.output() and the user's call site:
# output <- Logger._log <- Logger.<level method> <- caller.
_CALL_DEPTH = 3

LOW_LEVELS = (LogLevel.DEBUG, LogLevel.INFO)
HIGH_LEVELS = (LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL)


class Logger:
    """
    Leveled logger with per-level destination groups.

    Thread Safety:
        Writes and close() are serialized by one non-reentrant lock.
        Logging from inside a destination's write() deadlocks.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._level = self._config.min_level
        self._depth = 0
        self._lock = threading.Lock()
        self._closers: List[Any] = []

        opened: Dict[str, Any] = {}
        low = MultiWriter(ConsoleWriter.stdout())
        high = MultiWriter(ConsoleWriter.stderr())
        try:
            for group, destination in (
                (low, self._config.info_log_file),
                (high, self._config.error_log_file),
            ):
                if destination is None:
                    continue
                writer = self._open_destination(destination, opened)
                group.writers.append(writer)
                if callable(getattr(writer, "close", None)) and not any(
                    writer is c for c in self._closers
                ):
                    self._closers.append(writer)
        except Exception:
            # only files opened here are released; caller-supplied objects stay open
            for writer in opened.values():
                writer.close()
            raise

        flags = self._config.log_flags
        self._sinks: Dict[LogLevel, LevelSink] = {}
        for level in LogLevel:
            group = low if level in LOW_LEVELS else high
            self._sinks[level] = LevelSink(level, group, LineFormatter(level.tag, flags))

    @staticmethod
    def _open_destination(destination: Any, opened: Dict[str, Any]) -> Any:
        """Turn a path into a FileWriter; pass writer objects through."""
        if isinstance(destination, (str, os.PathLike)):
            key = os.path.abspath(os.fspath(destination))
            if key not in opened:
                opened[key] = FileWriter(destination)
            return opened[key]
        return destination

    @property
    def config(self) -> LoggerConfig:
        """Configuration snapshot the logger was built from."""
        return self._config

    @property
    def level(self) -> LogLevel:
        """Minimum level that reaches the destinations."""
        return self._level

    @property
    def depth(self) -> int:
        """Extra caller depth applied to every call."""
        return self._depth

    def set_depth(self, depth: int) -> None:
        """
        Set an extra caller depth for every call on this logger.

        Use when all logging goes through a wrapper of your own that is
        depth frames deep, so reported locations point past the wrapper.

        Raises:
            ValueError: If depth is negative
        """
        if depth < 0:
            raise ValueError("depth must be more than or equal to 0")
        self._depth = depth

    def enabled_for(self, level: LogLevel) -> bool:
        """True when messages at level would be written."""
        return level >= self._level

    def _log(self, level: LogLevel, message: str, depth: int = 0) -> None:
        if level < self._level:
            return

        with self._lock:
            self._sinks[level].output(_CALL_DEPTH + self._depth + depth, message)

    def log(self, level: LogLevel, message: str, depth: int = 0) -> None:
        """
        Log a pre-rendered message at the given level.

        FATAL messages logged this way are written but do not exit.
        """
        self._log(level, message, depth)

    def debug(self, *values: Any) -> None:
        """Log values concatenated without separators."""
        self._log(LogLevel.DEBUG, render(*values))

    def debugln(self, *values: Any) -> None:
        """Log values separated by spaces."""
        self._log(LogLevel.DEBUG, render_line(*values))

    def debugf(self, template: str, *args: Any) -> None:
        """Log a printf-style template."""
        self._log(LogLevel.DEBUG, render_format(template, *args))

    def debug_depth(self, depth: int, *values: Any) -> None:
        """Like debug(), reporting the frame depth levels above the caller."""
        self._log(LogLevel.DEBUG, render(*values), depth)

    def info(self, *values: Any) -> None:
        self._log(LogLevel.INFO, render(*values))

    def infoln(self, *values: Any) -> None:
        self._log(LogLevel.INFO, render_line(*values))

    def infof(self, template: str, *args: Any) -> None:
        self._log(LogLevel.INFO, render_format(template, *args))

    def info_depth(self, depth: int, *values: Any) -> None:
        self._log(LogLevel.INFO, render(*values), depth)

    def warn(self, *values: Any) -> None:
        self._log(LogLevel.WARN, render(*values))

    def warnln(self, *values: Any) -> None:
        self._log(LogLevel.WARN, render_line(*values))

    def warnf(self, template: str, *args: Any) -> None:
        self._log(LogLevel.WARN, render_format(template, *args))

    def warn_depth(self, depth: int, *values: Any) -> None:
        self._log(LogLevel.WARN, render(*values), depth)

    def error(self, *values: Any) -> None:
        self._log(LogLevel.ERROR, render(*values))

    def errorln(self, *values: Any) -> None:
        self._log(LogLevel.ERROR, render_line(*values))

    def errorf(self, template: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, render_format(template, *args))

    def error_depth(self, depth: int, *values: Any) -> None:
        self._log(LogLevel.ERROR, render(*values), depth)

    def fatal(self, *values: Any) -> None:
        """Log at FATAL, close every destination and exit with status 1."""
        self._log(LogLevel.FATAL, render(*values))
        self._exit()

    def fatalln(self, *values: Any) -> None:
        self._log(LogLevel.FATAL, render_line(*values))
        self._exit()

    def fatalf(self, template: str, *args: Any) -> None:
        self._log(LogLevel.FATAL, render_format(template, *args))
        self._exit()

    def fatal_depth(self, depth: int, *values: Any) -> None:
        self._log(LogLevel.FATAL, render(*values), depth)
        self._exit()

    def _exit(self) -> None:
        try:
            self.close()
        except CloseError:
            # each failure was already reported on stderr
            pass
        sys.exit(1)

    def flush(self) -> None:
        """Flush every destination."""
        with self._lock:
            for sink in (self._sinks[LogLevel.INFO], self._sinks[LogLevel.ERROR]):
                sink.writer.flush()

    def close(self) -> None:
        """
        Close every destination the logger owns.

        Console streams are never closed. All destinations are attempted
        even if some fail; calling close() again is a no-op.

        Raises:
            CloseError: If at least one destination failed to close
        """
        with self._lock:
            failures = []
            for closer in self._closers:
                try:
                    closer.close()
                except Exception as e:
                    print(f"Failed to close log {closer!r}: {e}", file=sys.stderr)
                    failures.append((closer, e))
            self._closers = []

        if failures:
            raise CloseError(failures)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(level={self._level.name}, flags={self._config.log_flags!r})"
