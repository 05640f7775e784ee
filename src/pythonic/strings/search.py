"""
Pythonic Strings - Searching, counting and replacing.

``find``, ``rfind`` and ``count`` operate inside a window ``[start, end)``
given as absolute indices into the text. Windows are clamped to the text:
negative bounds become 0 and an ``end`` of None (or past the end) becomes
the text length. A ``start`` at or past the end of the text, or an ``end``
before ``start``, leaves nothing to search.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from pythonic.config import NPOS
from pythonic.strings.view import Text, coerce_span, coerce_text

logger = logging.getLogger("pythonic.strings")


def _window(length: int, start: int, end: Optional[int]) -> Optional[Tuple[int, int]]:
    """Clamp ``[start, end)`` to a text of the given length, None if empty."""
    if start < 0 or (end is not None and end < 0):
        logger.debug(f"Clamping negative search window [{start}, {end}) to 0")
    start = max(start, 0)
    if start >= length:
        return None
    end = length if end is None else min(max(end, 0), length)
    if end < start:
        logger.debug(f"Empty search window: end {end} precedes start {start}")
        return None
    return start, end


def find(s: Text, sub: Text, start: int = 0, end: Optional[int] = None) -> int:
    """
    Find the lowest index of sub within the window ``[start, end)``.

    Args:
        s: Text to search
        sub: Literal substring to look for
        start: First index of the window (default: 0)
        end: Index one past the window (default: end of text)

    Returns:
        Absolute index into s of the first match, or NPOS

    Examples:
        >>> find("hello world hello", "hello", 1)
        12
        >>> find("hello world hello", "hello", 1, 10)
        -1
        >>> find("abc", "")
        0
    """
    source, lo, hi = coerce_span(s, "s")
    needle = coerce_text(sub, "sub")

    window = _window(hi - lo, start, end)
    if window is None:
        return NPOS

    pos = source.find(needle, lo + window[0], lo + window[1])
    return NPOS if pos == -1 else pos - lo


def rfind(s: Text, sub: Text, start: int = 0, end: Optional[int] = None) -> int:
    """
    Find the highest index of sub within the window ``[start, end)``.

    An empty sub matches at the end of the window.

    Examples:
        >>> rfind("hello world hello", "hello")
        12
        >>> rfind("hello world hello", "hello", 0, 10)
        0
        >>> rfind("abc", "")
        3
    """
    source, lo, hi = coerce_span(s, "s")
    needle = coerce_text(sub, "sub")

    window = _window(hi - lo, start, end)
    if window is None:
        return NPOS

    pos = source.rfind(needle, lo + window[0], lo + window[1])
    return NPOS if pos == -1 else pos - lo


def count(s: Text, sub: Text, start: int = 0, end: Optional[int] = None) -> int:
    """
    Count non-overlapping occurrences of sub within the window.

    Matches are taken left to right and the cursor skips past each match,
    so overlapping occurrences are counted once. An empty sub counts every
    gap around and between characters.

    Examples:
        >>> count("aaaa", "aa")
        2
        >>> count("abc", "")
        4
    """
    source, lo, hi = coerce_span(s, "s")
    needle = coerce_text(sub, "sub")
    length = hi - lo

    if not needle and start == 0 and end is None:
        return length + 1

    window = _window(length, start, end)
    if window is None:
        return 0
    if not needle:
        return window[1] - window[0] + 1

    return source.count(needle, lo + window[0], lo + window[1])


def replace(s: Text, old: Text, new: Text) -> str:
    """
    Replace every non-overlapping occurrence of old with new.

    An empty old leaves the text unchanged.

    Examples:
        >>> replace("hellohello", "hello", "")
        ''
        >>> replace("aaa", "aa", "b")
        'ba'
    """
    text = coerce_text(s, "s")
    needle = coerce_text(old, "old")
    replacement = coerce_text(new, "new")
    if not needle:
        return text
    return text.replace(needle, replacement)
