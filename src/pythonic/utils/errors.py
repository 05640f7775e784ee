"""
Error types for the Pythonic string library.
"""

from typing import Optional


class PythonicError(Exception):
    """Base exception for all Pythonic errors."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.argument:
            return f"[{self.argument}] {self.message}"
        return self.message


class StrArgumentError(PythonicError, TypeError):
    """Raised when an argument is not text (a ``str`` or a ``StrView``)."""

    pass


class InvalidViewError(PythonicError, ValueError):
    """
    Raised when a view is constructed with bounds outside its source.

    A view must satisfy ``0 <= start <= stop <= len(source)``.
    """

    def __init__(self, message: str, source_length: int, start: int, stop: int) -> None:
        self.source_length = source_length
        self.start = start
        self.stop = stop
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (start={self.start}, stop={self.stop}, length={self.source_length})"
