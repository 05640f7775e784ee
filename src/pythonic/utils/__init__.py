"""
Pythonic Utilities Package.

Common utilities for error handling.
"""

from pythonic.utils.errors import (
    InvalidViewError,
    PythonicError,
    StrArgumentError,
)

__all__ = [
    "PythonicError",
    "StrArgumentError",
    "InvalidViewError",
]
