"""
Unit tests for cpcregions.numeric module.

Tests number detection, coercion and sentinel matching.
"""

from __future__ import annotations

import numpy as np
import pytest

from cpcregions.numeric import looks_like_number, matches_sentinel, to_number


class TestLooksLikeNumber:
    """Tests for looks_like_number function."""

    @pytest.mark.parametrize(
        "value", [0, 3, -9999, 2.5, "42", "-9999.0", " 1e3 ", np.float64(1.5)]
    )
    def test_numbers(self, value):
        """Numbers, numpy scalars and numeric strings look like numbers."""
        assert looks_like_number(value)

    @pytest.mark.parametrize(
        "value", [None, True, False, np.bool_(True), "", "NEW ENGLAND", [1], {}]
    )
    def test_non_numbers(self, value):
        """None, booleans, text and containers do not."""
        assert not looks_like_number(value)


class TestToNumber:
    """Tests for to_number function."""

    def test_integral_string_becomes_int(self):
        """Integral strings are converted to int."""
        result = to_number("101")
        assert result == 101
        assert isinstance(result, int)

    def test_decimal_string_becomes_float(self):
        """Non-integral strings are converted to float."""
        assert to_number("71.5") == pytest.approx(71.5)

    def test_numpy_scalar_becomes_python(self):
        """numpy scalars are unwrapped."""
        result = to_number(np.int64(7))
        assert result == 7
        assert type(result) is int

    def test_numbers_pass_through(self):
        """Python numbers are returned unchanged."""
        assert to_number(2.25) == 2.25

    def test_non_number_raises(self):
        """to_number raises ValueError for text."""
        with pytest.raises(ValueError, match="does not look like a number"):
            to_number("PACIFIC")


class TestMatchesSentinel:
    """Tests for matches_sentinel function."""

    def test_numeric_sentinel_compares_numerically(self):
        """A numeric sentinel matches any numeric spelling of itself."""
        assert matches_sentinel("-9999.0", -9999, True)
        assert matches_sentinel(-9999.0, "-9999", True)
        assert not matches_sentinel(-9998, -9999, True)

    def test_numeric_sentinel_ignores_text(self):
        """Text never matches a numeric sentinel."""
        assert not matches_sentinel("MISSING", -9999, True)

    def test_text_sentinel_compares_as_string(self):
        """Non-numeric sentinels compare as text."""
        assert matches_sentinel("NA", "NA", False)
        assert not matches_sentinel("na", "NA", False)

    def test_none_never_matches(self):
        """None as value or sentinel never matches."""
        assert not matches_sentinel(None, -9999, True)
        assert not matches_sentinel(-9999, None, False)
