"""Logger exceptions"""

from typing import Any, List, Tuple


class LoggerError(Exception):
    """Base class for errors raised by the logger."""


class CloseError(LoggerError):
    """
    Raised by Logger.close() when one or more destinations failed to close.

    Every destination is still attempted; failures holds one
    (destination, exception) pair per destination that raised.
    """

    def __init__(self, failures: List[Tuple[Any, BaseException]]):
        self.failures = list(failures)
        super().__init__(f"failed to close {len(self.failures)} log destination(s)")
