"""Console writer"""

import sys
from typing import TextIO


class ConsoleWriter:
    """
    Write rendered lines to a console stream.

    The stream belongs to the process, so this writer has no close().
    """

    def __init__(self, stream: TextIO = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr)
        """
        self.stream = stream or sys.stderr

    @classmethod
    def stdout(cls) -> "ConsoleWriter":
        """Writer bound to the current sys.stdout."""
        return cls(sys.stdout)

    @classmethod
    def stderr(cls) -> "ConsoleWriter":
        """Writer bound to the current sys.stderr."""
        return cls(sys.stderr)

    def write(self, text: str):
        """Write text and flush."""
        self.stream.write(text)
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        name = getattr(self.stream, "name", None) or type(self.stream).__name__
        return f"ConsoleWriter({name})"
