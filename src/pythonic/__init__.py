"""
Pythonic - familiar string methods with precisely specified semantics.

Pythonic provides the scripting-language string toolbox (split, strip, case
conversion, search, join and predicate checks) as plain functions with
byte-wise ASCII behavior. View-returning operations hand back zero-copy
``StrView`` objects; every other operation returns a fresh ``str``.
"""

from pythonic import strings
from pythonic.strings import NPOS, StrView

__version__ = "0.1.0"
__all__ = [
    "strings",
    "StrView",
    "NPOS",
]
