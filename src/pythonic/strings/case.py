"""
Pythonic Strings - Case conversion.

All conversions are ASCII-only and return a new string.
"""

from __future__ import annotations

from pythonic.strings import charclass
from pythonic.strings.view import Text, coerce_text


def lower(s: Text) -> str:
    """Convert ASCII letters to lowercase."""
    return coerce_text(s, "s").translate(charclass.TO_LOWER)


def upper(s: Text) -> str:
    """Convert ASCII letters to uppercase."""
    return coerce_text(s, "s").translate(charclass.TO_UPPER)


def capitalize(s: Text) -> str:
    """
    Uppercase the first character and lowercase the rest.

    Examples:
        >>> capitalize("hELLO wORLD")
        'Hello world'
    """
    text = coerce_text(s, "s")
    if not text:
        return ""
    return charclass.toupper(text[0]) + text[1:].translate(charclass.TO_LOWER)


def swapcase(s: Text) -> str:
    """Flip the case of every ASCII letter."""
    return coerce_text(s, "s").translate(charclass.SWAP_CASE)


def title(s: Text) -> str:
    """
    Convert to title case using whitespace as the only word boundary.

    The first character of the text and the first character after any
    whitespace are uppercased; every other character is lowercased.
    Digits and punctuation do not start a new word.

    Examples:
        >>> title("hello wORLD")
        'Hello World'
        >>> title("123 abc")
        '123 Abc'
        >>> title("it's o'neil")
        "It's O'neil"
    """
    result = []
    new_word = True
    for c in coerce_text(s, "s"):
        if charclass.isspace(c):
            result.append(c)
            new_word = True
        elif new_word:
            result.append(charclass.toupper(c))
            new_word = False
        else:
            result.append(charclass.tolower(c))
    return "".join(result)
