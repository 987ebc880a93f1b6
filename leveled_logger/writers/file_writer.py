"""File writer"""

import os
from pathlib import Path
from typing import Union


class FileWriter:
    """Write rendered lines to a file the logger owns."""

    def __init__(
        self,
        filepath: Union[str, os.PathLike],
        mode: str = "a",
        encoding: str = "utf-8",
        auto_flush: bool = True
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            auto_flush: Flush after every write
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.auto_flush = auto_flush
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, text: str):
        """Write text to file; a no-op once closed."""
        if self._file:
            self._file.write(text)
            if self.auto_flush:
                self._file.flush()

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            try:
                self._file.close()
            finally:
                self._file = None

    def __repr__(self) -> str:
        return f"FileWriter({str(self.filepath)!r})"
