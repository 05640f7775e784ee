"""
Zero-copy string views.

A ``StrView`` is a read-only window ``[start, stop)`` over a source ``str``.
Functions that only narrow their input (``split``, ``strip`` and friends)
return views so no characters are copied; ``str(view)`` materialises an
owned copy when one is needed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple, Union

from pythonic.utils.errors import InvalidViewError, StrArgumentError


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class StrView:
    """
    Immutable view over a contiguous run of characters.

    Attributes:
        source: The string being viewed
        start: 0-indexed offset of the first character in source
        stop: 0-indexed offset one past the last character in source
    """

    source: str
    start: int
    stop: int

    def __post_init__(self) -> None:
        if not isinstance(self.source, str):
            raise StrArgumentError(
                f"expected str, got {type(self.source).__name__}", "source"
            )
        if not 0 <= self.start <= self.stop <= len(self.source):
            raise InvalidViewError(
                "view bounds out of range", len(self.source), self.start, self.stop
            )

    @classmethod
    def of(cls, text: Text) -> StrView:
        """Return a view covering the whole of text."""
        if isinstance(text, StrView):
            return text
        if not isinstance(text, str):
            raise StrArgumentError(f"expected str or StrView, got {type(text).__name__}", "text")
        return cls(text, 0, len(text))

    def __len__(self) -> int:
        return self.stop - self.start

    def __bool__(self) -> bool:
        return self.stop > self.start

    def __str__(self) -> str:
        return self.source[self.start : self.stop]

    def __repr__(self) -> str:
        return f"StrView({str(self)!r})"

    def __iter__(self) -> Iterator[str]:
        source = self.source
        for i in range(self.start, self.stop):
            yield source[i]

    def __getitem__(self, key: Union[int, slice]) -> Union[str, StrView]:
        if isinstance(key, slice):
            lo, hi, step = key.indices(len(self))
            if step != 1:
                return str(self)[key]
            hi = max(lo, hi)
            return StrView(self.source, self.start + lo, self.start + hi)

        length = len(self)
        if key < 0:
            key += length
        if not 0 <= key < length:
            raise IndexError("StrView index out of range")
        return self.source[self.start + key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrView):
            if len(self) != len(other):
                return False
            return str(self) == str(other)
        if isinstance(other, str):
            if len(self) != len(other):
                return False
            return self.source.startswith(other, self.start, self.stop)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (StrView, str)):
            return str(self) < str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


Text = Union[str, StrView]


def coerce_text(value: object, name: str) -> str:
    """
    Return the characters of a text argument as a ``str``.

    Args:
        value: A str or StrView
        name: Argument name used in the error message

    Raises:
        StrArgumentError: If value is neither a str nor a StrView
    """
    if isinstance(value, str):
        return value
    if isinstance(value, StrView):
        return str(value)
    raise StrArgumentError(f"expected str or StrView, got {type(value).__name__}", name)


def coerce_span(value: object, name: str) -> Tuple[str, int, int]:
    """
    Return ``(source, lo, hi)`` for a text argument without copying.

    For a plain str the span covers the whole string; for a view it is the
    view's window over its source.

    Raises:
        StrArgumentError: If value is neither a str nor a StrView
    """
    if isinstance(value, str):
        return value, 0, len(value)
    if isinstance(value, StrView):
        return value.source, value.start, value.stop
    raise StrArgumentError(f"expected str or StrView, got {type(value).__name__}", name)
