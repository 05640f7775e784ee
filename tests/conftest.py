"""
Pytest configuration and shared fixtures for Pythonic tests.
"""

from typing import List

import pytest

from pythonic.strings import StrView

# Characters placed around a string when it is wrapped in a view, so tests
# catch functions that read outside the view's window.
PADDING = "#\n "


def embedded_view(text: str) -> StrView:
    """Build a view of text sitting in the middle of a larger source."""
    source = PADDING + text + PADDING
    return StrView(source, len(PADDING), len(PADDING) + len(text))


@pytest.fixture(params=["str", "view"])
def as_text(request):
    """
    Factory fixture turning a plain string into each accepted input kind.

    Tests using it run once with plain ``str`` arguments and once with
    ``StrView`` arguments embedded in a padded source.
    """

    def _as_text(text: str):
        if request.param == "view":
            return embedded_view(text)
        return text

    return _as_text


@pytest.fixture
def as_strings():
    """Fixture converting a list of views into a list of plain strings."""

    def _as_strings(views: List) -> List[str]:
        return [str(v) for v in views]

    return _as_strings


# =============================================================================
# Sample Corpus
# =============================================================================


SAMPLE_TEXTS = [
    "",
    " ",
    "hello",
    "hello world !",
    "  padded both sides\t\n",
    "MiXeD CaSe 123",
    "a,b,,c,",
    "line one\nline two\r\nline three\r",
    "aaaa",
    "\t\v\f\r\n ",
    "café naïve",
    "123 abc",
]


@pytest.fixture(params=SAMPLE_TEXTS, ids=repr)
def sample_text(request) -> str:
    """Parametrized fixture over the shared sample corpus."""
    return request.param
