"""Fan-out writer"""

import sys
from typing import Any, List


def _report(message: str) -> None:
    # stderr may itself be the broken destination
    try:
        print(message, file=sys.stderr)
    except Exception:
        pass


class MultiWriter:
    """
    Duplicate every write to a group of destinations.

    A destination that raises does not stop the others; the failure is
    reported on stderr and the write carries on.
    """

    def __init__(self, *writers: Any):
        self.writers: List[Any] = list(writers)

    def write(self, text: str):
        """Write text to every destination in order."""
        for writer in self.writers:
            try:
                writer.write(text)
            except Exception as e:
                _report(f"Writer error: {writer!r}: {e}")

    def flush(self):
        """Flush every destination that supports it."""
        for writer in self.writers:
            if not hasattr(writer, "flush"):
                continue
            try:
                writer.flush()
            except Exception as e:
                _report(f"Flush error: {writer!r}: {e}")

    def __len__(self) -> int:
        return len(self.writers)

    def __repr__(self) -> str:
        return f"MultiWriter({', '.join(repr(w) for w in self.writers)})"
