"""
Pythonic Strings - Tokenization.

Splitting text into fields or lines, and joining fields back together.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import List

from pythonic.config import LINE_BREAKS
from pythonic.strings.view import StrView, Text, coerce_span, coerce_text
from pythonic.utils.errors import StrArgumentError

logger = logging.getLogger("pythonic.strings")


def split(s: Text, delimiter: Text = " ") -> List[StrView]:
    """
    Split text on every occurrence of a literal delimiter.

    Consecutive delimiters produce empty fields; nothing is coalesced. When
    the delimiter does not occur the result holds the whole input. An empty
    delimiter yields one view per character.

    Args:
        s: Text to split
        delimiter: Literal separator (default: a single space)

    Returns:
        Views into s, in left-to-right order

    Examples:
        >>> [str(v) for v in split("hello world !")]
        ['hello', 'world', '!']
        >>> [str(v) for v in split("a,,b", ",")]
        ['a', '', 'b']
    """
    source, lo, hi = coerce_span(s, "s")
    sep = coerce_text(delimiter, "delimiter")

    if not sep:
        logger.debug(f"split() called with an empty delimiter, splitting {hi - lo} characters")
        return [StrView(source, i, i + 1) for i in range(lo, hi)]

    fields = []
    pos = lo
    while True:
        found = source.find(sep, pos, hi)
        if found == -1:
            fields.append(StrView(source, pos, hi))
            return fields
        fields.append(StrView(source, pos, found))
        pos = found + len(sep)


def splitlines(s: Text, keepends: bool = False) -> List[str]:
    r"""
    Split text at line boundaries.

    A boundary is ``\n``, ``\r`` or the pair ``\r\n``, which counts as a
    single boundary. A final line without a terminator is still returned,
    while a trailing terminator does not add an empty line.

    Args:
        s: Text to split
        keepends: Keep each line's terminator exactly as it appeared

    Returns:
        Owned lines; an empty input gives an empty list

    Examples:
        >>> splitlines("hello\r\nworld\r\n", True)
        ['hello\r\n', 'world\r\n']
        >>> splitlines("")
        []
    """
    source, lo, hi = coerce_span(s, "s")

    lines = []
    pos = lo
    while pos < hi:
        end = pos
        while end < hi and source[end] not in LINE_BREAKS:
            end += 1

        if end == hi:
            lines.append(source[pos:hi])
            break

        # "\r\n" is one terminator
        after = end + 1
        if source[end] == "\r" and after < hi and source[after] == "\n":
            after += 1

        lines.append(source[pos:after] if keepends else source[pos:end])
        pos = after

    return lines


def join(parts: Iterable[Text], separator: Text = "") -> str:
    """
    Concatenate text parts with a separator between consecutive parts.

    Examples:
        >>> join(["a", "b", "c"], ", ")
        'a, b, c'
        >>> join([])
        ''
    """
    sep = coerce_text(separator, "separator")
    if isinstance(parts, (str, StrView)) or not isinstance(parts, Iterable):
        raise StrArgumentError(
            f"expected an iterable of text parts, got {type(parts).__name__}", "parts"
        )
    return sep.join(coerce_text(part, "parts") for part in parts)
