"""
ASCII character classification.

Mirrors the C-locale ``<cctype>`` predicates: only the 128 ASCII code
points are ever classified or case-mapped. Anything else is neither a
letter, a digit nor whitespace, and passes through case mapping untouched.
"""

import string

from pythonic.config import WHITESPACE

SPACE = frozenset(WHITESPACE)
UPPER = frozenset(string.ascii_uppercase)
LOWER = frozenset(string.ascii_lowercase)
ALPHA = UPPER | LOWER
DIGIT = frozenset(string.digits)
ALNUM = ALPHA | DIGIT

TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
SWAP_CASE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def isspace(c: str) -> bool:
    return c in SPACE


def isupper(c: str) -> bool:
    return c in UPPER


def islower(c: str) -> bool:
    return c in LOWER


def isalpha(c: str) -> bool:
    return c in ALPHA


def isdigit(c: str) -> bool:
    return c in DIGIT


def isalnum(c: str) -> bool:
    return c in ALNUM


def toupper(c: str) -> str:
    """Uppercase a single ASCII letter; other characters are returned as-is."""
    return c.translate(TO_UPPER)


def tolower(c: str) -> str:
    """Lowercase a single ASCII letter; other characters are returned as-is."""
    return c.translate(TO_LOWER)
