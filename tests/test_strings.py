"""
Tests for text helpers.
"""

import pytest

from primaids.exceptions import InvalidArgumentError, PrimaidsError
from primaids.strings import is_empty


class TestIsEmpty:
    """Test the None/whitespace predicate."""

    def test_none_is_empty(self):
        """None counts as empty."""
        assert is_empty(None) is True

    def test_empty_string_is_empty(self):
        assert is_empty("") is True

    def test_whitespace_only_is_empty(self):
        """Tabs, newlines and spaces are all trimmed."""
        assert is_empty("\t\n ") is True

    def test_text_is_not_empty(self):
        assert is_empty("a") is False
        assert is_empty("  a  ") is False

    def test_non_string_raises(self):
        """Anything other than None or str is rejected."""
        with pytest.raises(InvalidArgumentError, match="value was not None or a string"):
            is_empty(1)

    def test_error_is_type_error(self):
        """Callers catching TypeError or PrimaidsError still see the failure."""
        with pytest.raises(TypeError):
            is_empty(b"bytes")
        with pytest.raises(PrimaidsError):
            is_empty([])
