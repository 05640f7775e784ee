"""
Pythonic Strings.

Provides the string method set as plain functions over ``str`` or
``StrView`` arguments.
"""

from pythonic.config import NPOS, WHITESPACE
from pythonic.strings.affix import *
from pythonic.strings.case import *
from pythonic.strings.predicates import *
from pythonic.strings.search import *
from pythonic.strings.tokenize import *
from pythonic.strings.view import StrView, Text

__all__ = [
    # Views
    "StrView", "Text", "NPOS", "WHITESPACE",
    # Tokenization
    "split", "splitlines", "join",
    # Prefix / suffix / whitespace
    "startswith", "endswith", "removeprefix", "removesuffix",
    "strip", "lstrip", "rstrip",
    # Case
    "lower", "upper", "capitalize", "swapcase", "title",
    # Search
    "find", "rfind", "count", "replace",
    # Predicates
    "islower", "isupper", "isspace", "isalpha", "isdigit", "isalnum",
]
