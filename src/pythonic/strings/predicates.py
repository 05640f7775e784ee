"""
Pythonic Strings - Classification predicates.

Every predicate is false for empty text.
"""

from __future__ import annotations

from collections.abc import Callable

from pythonic.strings import charclass
from pythonic.strings.view import Text, coerce_span


def _all_chars(s: Text, predicate: Callable[[str], bool]) -> bool:
    source, lo, hi = coerce_span(s, "s")
    if lo == hi:
        return False
    return all(predicate(source[i]) for i in range(lo, hi))


def _cased(s: Text, wanted: Callable[[str], bool]) -> bool:
    """At least one letter, and every letter satisfies wanted."""
    source, lo, hi = coerce_span(s, "s")
    has_cased = False
    for i in range(lo, hi):
        c = source[i]
        if charclass.isalpha(c):
            if not wanted(c):
                return False
            has_cased = True
    return has_cased


def islower(s: Text) -> bool:
    """Check if text has letters and all of them are lowercase."""
    return _cased(s, charclass.islower)


def isupper(s: Text) -> bool:
    """Check if text has letters and all of them are uppercase."""
    return _cased(s, charclass.isupper)


def isspace(s: Text) -> bool:
    """Check if text is non-empty and contains only ASCII whitespace."""
    return _all_chars(s, charclass.isspace)


def isalpha(s: Text) -> bool:
    """Check if text is non-empty and contains only ASCII letters."""
    return _all_chars(s, charclass.isalpha)


def isdigit(s: Text) -> bool:
    """Check if text is non-empty and contains only ASCII digits."""
    return _all_chars(s, charclass.isdigit)


def isalnum(s: Text) -> bool:
    """Check if text is non-empty and contains only ASCII letters or digits."""
    return _all_chars(s, charclass.isalnum)
