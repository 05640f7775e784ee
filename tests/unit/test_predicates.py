"""
Unit tests for the classification predicates.
"""

import pytest

from pythonic.strings import isalnum, isalpha, isdigit, islower, isspace, isupper


@pytest.mark.parametrize("func", [islower, isupper, isspace, isalpha, isdigit, isalnum])
def test_empty_is_false(func, as_text):
    """Test every predicate rejects empty text."""
    assert func(as_text("")) is False


class TestCasedPredicates:
    """Tests for islower and isupper."""

    def test_islower(self, as_text):
        """Test all-lowercase letters."""
        assert islower(as_text("hello"))
        assert not islower(as_text("Hello"))

    def test_isupper(self, as_text):
        """Test all-uppercase letters."""
        assert isupper(as_text("HELLO"))
        assert not isupper(as_text("HELLo"))

    def test_non_letters_ignored(self, as_text):
        """Test digits and punctuation do not disqualify."""
        assert islower(as_text("abc 123!"))
        assert isupper(as_text("ABC-123"))

    def test_requires_a_letter(self, as_text):
        """Test text without letters is neither case."""
        assert not islower(as_text("123"))
        assert not isupper(as_text("  !"))

    def test_non_ascii_letters_not_cased(self, as_text):
        """Test non-ASCII letters are treated as uncased."""
        assert not islower(as_text("é"))
        assert islower(as_text("éa"))
        assert isupper(as_text("ßA"))


class TestCharacterPredicates:
    """Tests for isspace, isalpha, isdigit and isalnum."""

    @pytest.mark.parametrize(
        "text,expected",
        [(" \t\n\r\v\f", True), (" a ", False), (" ", False)],
    )
    def test_isspace(self, as_text, text, expected):
        """Test ASCII whitespace only."""
        assert isspace(as_text(text)) is expected

    @pytest.mark.parametrize(
        "text,expected",
        [("abcXYZ", True), ("abc1", False), ("ab c", False), ("é", False)],
    )
    def test_isalpha(self, as_text, text, expected):
        """Test ASCII letters only."""
        assert isalpha(as_text(text)) is expected

    @pytest.mark.parametrize(
        "text,expected",
        [("0123456789", True), ("12.5", False), ("-1", False), ("²", False)],
    )
    def test_isdigit(self, as_text, text, expected):
        """Test ASCII digits only."""
        assert isdigit(as_text(text)) is expected

    @pytest.mark.parametrize(
        "text,expected",
        [("abc123", True), ("abc_123", False), ("abc 123", False)],
    )
    def test_isalnum(self, as_text, text, expected):
        """Test ASCII letters and digits only."""
        assert isalnum(as_text(text)) is expected
