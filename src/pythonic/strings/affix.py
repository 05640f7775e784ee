"""
Pythonic Strings - Prefixes, suffixes and stripping.
"""

from __future__ import annotations

from typing import FrozenSet

from pythonic.config import WHITESPACE
from pythonic.strings.view import StrView, Text, coerce_span, coerce_text


def startswith(s: Text, prefix: Text) -> bool:
    """Check if text starts with prefix. An empty prefix always matches."""
    source, lo, hi = coerce_span(s, "s")
    return source.startswith(coerce_text(prefix, "prefix"), lo, hi)


def endswith(s: Text, suffix: Text) -> bool:
    """Check if text ends with suffix. An empty suffix always matches."""
    source, lo, hi = coerce_span(s, "s")
    return source.endswith(coerce_text(suffix, "suffix"), lo, hi)


def removeprefix(s: Text, prefix: Text) -> str:
    """
    Return a copy of text with one leading prefix removed, if present.

    Examples:
        >>> removeprefix("TestCase", "Test")
        'Case'
        >>> removeprefix("TestCase", "Case")
        'TestCase'
    """
    source, lo, hi = coerce_span(s, "s")
    head = coerce_text(prefix, "prefix")
    if source.startswith(head, lo, hi):
        lo += len(head)
    return source[lo:hi]


def removesuffix(s: Text, suffix: Text) -> str:
    """
    Return a copy of text with one trailing suffix removed, if present.

    Examples:
        >>> removesuffix("setup.py", ".py")
        'setup'
    """
    source, lo, hi = coerce_span(s, "s")
    tail = coerce_text(suffix, "suffix")
    if source.endswith(tail, lo, hi):
        hi -= len(tail)
    return source[lo:hi]


def _leading(source: str, lo: int, hi: int, chars: FrozenSet[str]) -> int:
    while lo < hi and source[lo] in chars:
        lo += 1
    return lo


def _trailing(source: str, lo: int, hi: int, chars: FrozenSet[str]) -> int:
    while hi > lo and source[hi - 1] in chars:
        hi -= 1
    return hi


def strip(s: Text, chars: Text = WHITESPACE) -> StrView:
    """
    Remove leading and trailing characters found in chars.

    Args:
        s: Text to strip
        chars: Set of characters to remove (default: ASCII whitespace)

    Returns:
        A view into s; empty when every character was stripped

    Examples:
        >>> str(strip("  hello  "))
        'hello'
        >>> str(strip("xxhixx", "x"))
        'hi'
    """
    source, lo, hi = coerce_span(s, "s")
    charset = frozenset(coerce_text(chars, "chars"))
    lo = _leading(source, lo, hi, charset)
    return StrView(source, lo, _trailing(source, lo, hi, charset))


def lstrip(s: Text, chars: Text = WHITESPACE) -> StrView:
    """Remove leading characters found in chars, returning a view."""
    source, lo, hi = coerce_span(s, "s")
    charset = frozenset(coerce_text(chars, "chars"))
    return StrView(source, _leading(source, lo, hi, charset), hi)


def rstrip(s: Text, chars: Text = WHITESPACE) -> StrView:
    """Remove trailing characters found in chars, returning a view."""
    source, lo, hi = coerce_span(s, "s")
    charset = frozenset(coerce_text(chars, "chars"))
    return StrView(source, lo, _trailing(source, lo, hi, charset))
