"""
Unit tests for cpcregions.regionset module.

Tests value storage, missing-data handling, queries, table rendering and
arithmetic on RegionSet objects.
"""

from __future__ import annotations

import logging
import operator

import pytest

from cpcregions.catalog import new_ids, new_names
from cpcregions.exceptions import (
    InvalidRegionIDError,
    MissingArgumentError,
    NonNumericOperandError,
    SchemeMismatchError,
    UnsupportedOperatorError,
)
from cpcregions.regionset import RegionSet
from cpcregions.scheme import Scheme

LETTERS = Scheme.from_pairs(
    "Letters", [("A", "Alpha"), ("BB", "Bravo"), ("C", "Charlie")]
)


def make(values=None, sentinel=None):
    return RegionSet(LETTERS, values=values, sentinel=sentinel)


class TestConstruction:
    """Tests for building RegionSet objects."""

    def test_new_set_is_all_absent(self):
        """A new RegionSet has every region absent and no sentinel."""
        regions = make()
        assert len(regions) == 3
        assert regions.sentinel is None
        assert all(regions.is_missing(i) for i in regions.ids())

    def test_missing_scheme_raises(self):
        """A scheme is required."""
        with pytest.raises(MissingArgumentError):
            RegionSet(None)

    def test_initial_values_and_sentinel(self):
        """Constructor values are filtered through the sentinel."""
        regions = make({"A": 1, "BB": -9999}, sentinel=-9999)
        assert regions.get_value("A") == 1
        assert regions.is_missing("BB")

    def test_key_set_is_fixed(self):
        """IDs come from the scheme and never change."""
        regions = make({"A": 1})
        regions.set_values({"Z": 5})
        assert regions.ids() == ["A", "BB", "C"]
        assert not regions.exists("Z")
        assert "A" in regions
        assert list(regions) == ["A", "BB", "C"]


class TestSetValues:
    """Tests for the change methods."""

    def test_set_value_unknown_id_raises(self):
        """set_value raises for IDs outside the scheme."""
        with pytest.raises(InvalidRegionIDError, match="'Z' is an invalid regional ID"):
            make().set_value("Z", 1)

    def test_set_value_boolean_id_raises(self):
        """True is not accepted as region 1."""
        regions = new_ids("CensusDivisions")
        assert not regions.exists(True)
        with pytest.raises(InvalidRegionIDError, match="True is an invalid"):
            regions.set_value(True, 5.0)
        assert regions.is_missing(1)

    def test_set_values_skips_unknown_ids(self, caplog):
        """set_values reports unknown IDs and applies the rest."""
        regions = make()
        with caplog.at_level(logging.WARNING, logger="cpcregions.regionset"):
            regions.set_values({"A": 1, "Z": 2, "C": 3})
        assert regions.get_value("A") == 1
        assert regions.get_value("C") == 3
        assert "'Z' is an invalid regional ID" in caplog.text

    def test_set_values_requires_mapping(self):
        """set_values rejects anything but a mapping."""
        with pytest.raises(MissingArgumentError):
            make().set_values([("A", 1)])

    def test_set_value_none_makes_absent(self):
        """Storing None marks a region absent."""
        regions = make({"A": 1})
        regions.set_value("A", None)
        assert regions.is_missing("A")

    def test_initialize(self):
        """initialize sets every region to the same value."""
        regions = make()
        regions.initialize(0.0)
        assert regions.get_values() == {"A": 0.0, "BB": 0.0, "C": 0.0}

    def test_initialize_with_sentinel_clears(self):
        """Initializing to the sentinel leaves every region absent."""
        regions = make({"A": 1}, sentinel=-9999)
        regions.initialize(-9999)
        assert not any(regions.is_not_missing(i) for i in regions.ids())

    def test_numericize(self):
        """numericize drops present non-numeric values."""
        regions = make({"A": "1.5", "BB": "N/A", "C": 3})
        regions.numericize()
        assert regions.get_value("A") == "1.5"
        assert regions.is_missing("BB")
        assert regions.get_value("C") == 3

    def test_truncate_to_int(self):
        """truncate_to_int truncates toward zero and skips text."""
        regions = make({"A": 3.7, "BB": -3.7, "C": "word"})
        assert regions.truncate_to_int() is regions
        assert regions.get_value("A") == 3
        assert regions.get_value("BB") == -3
        assert regions.get_value("C") == "word"

    def test_truncate_to_int_numeric_text(self):
        """Numeric strings are truncated too."""
        regions = make({"A": "2.9"}).truncate_to_int()
        assert regions.get_value("A") == 2


class TestMissingData:
    """Tests for sentinel handling."""

    def test_get_value_of_absent_region(self):
        """Absent regions report the sentinel, or None without one."""
        assert make().get_value("A") is None
        assert make(sentinel=-9999).get_value("A") == -9999

    def test_stored_sentinel_is_absent(self):
        """Storing a value equal to the sentinel marks the region absent."""
        regions = make(sentinel=-9999)
        regions.set_value("A", "-9999.0")
        assert regions.is_missing("A")
        assert regions.get_value("A") == -9999

    def test_set_missing_converts_existing_values(self):
        """Declaring a sentinel makes matching stored values absent."""
        regions = make({"A": -999, "BB": 4})
        regions.set_missing(-999)
        assert regions.is_missing("A")
        assert regions.is_not_missing("BB")
        assert regions.get_missing() == -999

    def test_absent_stays_absent_after_sentinel_change(self):
        """Changing the sentinel keeps absent regions absent."""
        regions = make({"A": -999}, sentinel=-999)
        regions.set_missing(-9999)
        assert regions.get_value("A") == -9999

    def test_set_missing_none_is_ignored(self):
        """set_missing(None) leaves the sentinel unchanged."""
        regions = make(sentinel=-9999)
        regions.set_missing(None)
        assert regions.sentinel == -9999

    def test_text_sentinel(self):
        """A non-numeric sentinel compares as text."""
        regions = make({"A": "NA", "BB": "x"}, sentinel="NA")
        assert regions.is_missing("A")
        assert regions.get_value("A") == "NA"

    def test_is_missing_value(self):
        """is_missing_value compares against the sentinel."""
        assert make(sentinel=-9999).is_missing_value("-9999")
        assert not make(sentinel=-9999).is_missing_value(0)
        assert make().is_missing_value(None)
        assert not make().is_missing_value(-9999)

    def test_unknown_id_queries_warn(self, caplog):
        """Single-ID queries report unknown IDs and return None."""
        regions = make({"A": 1})
        with caplog.at_level(logging.WARNING, logger="cpcregions.regionset"):
            assert regions.get_value("Z") is None
            assert regions.is_missing("Z") is None
            assert regions.is_not_missing("Z") is None
        assert "RegionSet.get_value: 'Z' is an invalid regional ID" in caplog.text
        assert "RegionSet.is_missing" in caplog.text


class TestQueries:
    """Tests for query methods."""

    def test_ids_numeric_sort(self):
        """Numeric schemes list IDs in numeric order."""
        regions = new_ids("CensusDivisions")
        assert regions.ids() == list(range(1, 10))
        assert regions.ids_numeric

    def test_get_values_snapshot(self):
        """get_values returns a copy carrying the sentinel for absent regions."""
        regions = make({"A": 1}, sentinel=-9999)
        snapshot = regions.get_values()
        snapshot["A"] = 99
        assert regions.get_values() == {"A": 1, "BB": -9999, "C": -9999}

    def test_is_complete(self):
        """is_complete is True only when no region is absent."""
        regions = make({"A": 1, "BB": 2})
        assert not regions.is_complete()
        regions.set_value("C", 3)
        assert regions.is_complete()

    def test_is_complete_contiguous(self):
        """Non-contiguous regions do not count for is_complete_contiguous."""
        states = new_ids("States")
        states.initialize(1.0)
        states.set_value("AK", None)
        assert not states.is_complete()
        assert states.is_complete_contiguous()
        assert len(states.contiguous_ids()) == 48

    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ({"A": 1, "BB": 1, "C": 1}, True),
            ({"A": 1, "BB": "1.0", "C": 1.0}, True),
            ({"A": 1, "BB": 2, "C": 1}, False),
            ({"A": 1, "BB": 1}, False),
            ({}, True),
        ],
    )
    def test_all_equal(self, values, expected):
        """all_equal compares every value, absent ones included."""
        assert make(values).all_equal() is expected

    def test_is_numeric(self):
        """is_numeric checks all present values."""
        assert make({"A": 1, "BB": "2.5"}).is_numeric()
        assert not make({"A": 1, "BB": "two"}).is_numeric()
        assert make().is_numeric()

    def test_is_numeric_single_region(self):
        """is_numeric with an ID tests that region, or the sentinel if absent."""
        regions = make({"A": "x"}, sentinel=-9999)
        assert not regions.is_numeric("A")
        assert regions.is_numeric("BB")
        assert not make({"A": 1}).is_numeric("BB")
        with pytest.raises(InvalidRegionIDError):
            regions.is_numeric("Z")

    def test_copy_is_independent(self):
        """copy keeps scheme, values and sentinel but not identity."""
        original = make({"A": 1}, sentinel=-9999)
        clone = original.copy()
        clone.set_value("A", 2)
        assert original.get_value("A") == 1
        assert clone.scheme == original.scheme
        assert clone.sentinel == -9999

    def test_repr(self):
        """repr summarises scheme and completeness."""
        assert repr(make({"A": 1})) == (
            "RegionSet(scheme='Letters', regions=3, present=1, sentinel=None)"
        )


class TestRenderTable:
    """Tests for render_table."""

    def test_text_table(self):
        """Text tables pad the ID column and mark absent values."""
        table = make({"A": 1, "C": 3}).render_table()
        assert table.splitlines() == ["A   1", "BB  MISSING", "C   3"]

    def test_text_table_with_header(self):
        """A header adds a title line and an underline."""
        table = make({"A": 1}, sentinel=-9999).render_table(("ID", "Value"))
        lines = table.splitlines()
        assert lines[0] == "ID  Value"
        assert lines[1] == "-" * len("ID  Value")
        assert lines[3] == "BB  -9999"

    def test_html_table(self):
        """HTML output is a bare escaped table."""
        table = make({"A": "<b>"}).render_table(("ID", "Value"), html=True)
        assert table.startswith('<html>\n<table border="1">')
        assert "<tr><th>ID</th><th>Value</th></tr>" in table
        assert "<tr><td>A</td><td>&lt;b&gt;</td></tr>" in table
        assert table.endswith("</table>\n</html>")


class TestArithmetic:
    """Tests for elementwise arithmetic."""

    @pytest.mark.parametrize(
        ("op", "expected"),
        [
            (operator.add, {"A": 12, "BB": 24}),
            (operator.sub, {"A": 8, "BB": 16}),
            (operator.mul, {"A": 20, "BB": 80}),
            (operator.truediv, {"A": 5.0, "BB": 5.0}),
        ],
    )
    def test_two_sets(self, op, expected):
        """Operators act region by region."""
        result = op(make({"A": 10, "BB": 20}), make({"A": 2, "BB": 4}))
        for region_id, value in expected.items():
            assert result.get_value(region_id) == pytest.approx(value)

    def test_absent_propagates(self):
        """A region absent in either operand is absent in the result."""
        result = make({"A": 1, "BB": 2}) + make({"A": 1, "C": 3})
        assert result.get_value("A") == 2
        assert result.is_missing("BB")
        assert result.is_missing("C")

    def test_add_then_subtract_restores_present_values(self):
        """Adding then subtracting a set gives back the shared regions only."""
        a = make({"A": 1.5, "BB": 2})
        b = make({"A": 0.25, "C": 3})
        result = (a + b) - b
        assert result.get_value("A") == pytest.approx(1.5)
        assert result.is_missing("BB")
        assert result.is_missing("C")
        assert a.get_value("BB") == 2

    def test_scalar_and_reflected(self):
        """Scalars work on either side."""
        regions = make({"A": 4, "BB": "2"})
        assert (regions - 1).get_value("A") == 3
        assert (10 - regions).get_value("A") == 6
        assert (1 / regions).get_value("BB") == pytest.approx(0.5)
        assert (2 * regions).get_value("BB") == 4
        assert (regions + "1.5").get_value("A") == pytest.approx(5.5)

    def test_chained_expression(self):
        """Expressions compose into new RegionSets."""
        celsius = make({"A": 100, "BB": 0})
        fahrenheit = celsius * (9 / 5) + 32
        assert fahrenheit.get_value("A") == pytest.approx(212)
        assert fahrenheit.get_value("BB") == pytest.approx(32)
        assert celsius.get_value("A") == 100

    def test_named_methods(self):
        """Named methods match the operators, reflected included."""
        regions = make({"A": 8})
        assert regions.divide(2).get_value("A") == pytest.approx(4)
        assert regions.divide(2, reflected=True).get_value("A") == pytest.approx(0.25)
        assert regions.subtract(make({"A": 3})).get_value("A") == 5

    def test_result_is_new_object(self):
        """Arithmetic never modifies its operands."""
        left = make({"A": 1})
        result = left + 1
        assert result is not left
        assert left.get_value("A") == 1

    def test_sentinel_inherited_from_both_sets(self):
        """The right sentinel is kept only when the left set shares it."""
        result = make({"A": 1}, sentinel=-9999) + make({"A": 2}, sentinel=-9999)
        assert result.sentinel == -9999
        assert result.get_value("BB") == -9999

    def test_sentinel_rule_is_asymmetric(self):
        """Only the right operand's sentinel is considered."""
        left_only = make({"A": 1}, sentinel=-9999) + make({"A": 2})
        right_only = make({"A": 1}) + make({"A": 2}, sentinel=-9999)
        assert left_only.sentinel is None
        assert right_only.sentinel is None

    def test_scalar_keeps_sentinel(self):
        """Scalar arithmetic keeps the set's sentinel."""
        result = make({"A": 1}, sentinel=-9999) + 1
        assert result.sentinel == -9999
        assert result.get_value("BB") == -9999

    def test_scalar_equal_to_sentinel(self):
        """A scalar equal to the sentinel yields a wholly absent result."""
        result = make({"A": 1, "BB": 2, "C": 3}, sentinel=-9999) * -9999
        assert not any(result.is_not_missing(i) for i in result.ids())

    def test_result_equal_to_sentinel_is_absent(self):
        """A computed value equal to the sentinel is stored as absent."""
        result = make({"A": -10000}, sentinel=-9999) + 1
        assert result.is_missing("A")

    def test_division_by_zero(self):
        """Dividing by a present zero raises."""
        with pytest.raises(ZeroDivisionError):
            make({"A": 1}) / make({"A": 0})

    def test_different_schemes_raise(self):
        """Sets from different schemes cannot be combined."""
        with pytest.raises(SchemeMismatchError):
            new_ids("States") + new_ids("StatesCONUS")

    def test_non_numeric_set_raises(self):
        """Sets holding text cannot take part in arithmetic."""
        with pytest.raises(NonNumericOperandError):
            new_names("CensusDivisions") + 1
        with pytest.raises(NonNumericOperandError):
            make({"A": 1}) + make({"A": "one"})

    def test_non_numeric_scalar_raises(self):
        """Only numeric scalars are accepted."""
        with pytest.raises(NonNumericOperandError):
            make({"A": 1}) + "one"
        with pytest.raises(NonNumericOperandError):
            make({"A": 1}) * [2]


class TestUnsupportedOperators:
    """Tests for operators RegionSet refuses."""

    @pytest.mark.parametrize(
        ("op", "symbol"),
        [
            (operator.eq, "=="),
            (operator.ne, "!="),
            (operator.lt, "<"),
            (operator.le, "<="),
            (operator.gt, ">"),
            (operator.ge, ">="),
            (operator.floordiv, "//"),
            (operator.mod, "%"),
            (operator.pow, r"\*\*"),
        ],
    )
    def test_binary_operators_raise(self, op, symbol):
        """Unsupported binary operators raise UnsupportedOperatorError."""
        with pytest.raises(UnsupportedOperatorError, match=f"Operator {symbol} cannot"):
            op(make({"A": 1}), 2)

    @pytest.mark.parametrize("op", [operator.neg, operator.pos, abs])
    def test_unary_operators_raise(self, op):
        """Unary operators raise UnsupportedOperatorError."""
        with pytest.raises(UnsupportedOperatorError):
            op(make({"A": 1}))

    def test_hashable(self):
        """RegionSets hash by identity."""
        regions = make()
        assert hash(regions) == hash(regions)
