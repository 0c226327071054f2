"""
RegionSet: a scheme-tagged mapping from region ID to an optional value.

A RegionSet stores one value per region of its :class:`~cpcregions.scheme.Scheme`.
The key set is fixed when the object is built; values can be changed for the
lifetime of the object, but regions are never added or removed.

Missing data
------------
``None`` is the internal absent marker. A *sentinel* (for example ``-9999``)
may be declared with :meth:`RegionSet.set_missing`; it is the value reported
for absent regions and any incoming value equal to it is stored as absent.

Arithmetic
----------
``+``, ``-``, ``*`` and ``/`` work between two RegionSets of the same scheme
and between a RegionSet and a number, returning a new RegionSet::

    >>> fahrenheit = celsius * (9 / 5) + 32

A region absent in either operand is absent in the result. Every other
operator raises :class:`~cpcregions.exceptions.UnsupportedOperatorError`.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable, Iterator, Mapping
from html import escape
from typing import Any

from .exceptions import (
    InvalidRegionIDError,
    MissingArgumentError,
    NonNumericOperandError,
    SchemeMismatchError,
    UnsupportedOperatorError,
)
from .numeric import looks_like_number, matches_sentinel, to_number
from .scheme import Scheme

logger = logging.getLogger(__name__)

__all__ = ["RegionSet"]

_ALL = object()


class RegionSet:
    """
    Values keyed by the region IDs of a scheme.

    Parameters
    ----------
    scheme
        The scheme defining the (immutable) set of region IDs.
    values
        Optional initial values; processed like :meth:`set_values`.
    sentinel
        Optional missing-data sentinel; processed like :meth:`set_missing`.

    Examples
    --------
    >>> from cpcregions.catalog import new_ids
    >>> temps = new_ids("States")
    >>> temps.set_missing(-9999)
    >>> temps.set_value("MD", 71.5)
    >>> temps.get_value("MD")
    71.5
    >>> temps.get_value("VA")
    -9999
    """

    __slots__ = ("_data", "_scheme", "_sentinel", "_sentinel_numeric")

    def __init__(
        self,
        scheme: Scheme,
        values: Mapping[Any, Any] | None = None,
        sentinel: Any = None,
    ) -> None:
        if scheme is None:
            msg = "RegionSet requires a scheme"
            raise MissingArgumentError(msg)
        self._scheme = scheme
        self._data: dict[Any, Any] = dict.fromkeys(scheme.ids)
        self._sentinel: Any = None
        self._sentinel_numeric = False
        if sentinel is not None:
            self.set_missing(sentinel)
        if values is not None:
            self.set_values(values)

    # --- Change methods ---

    def initialize(self, value: Any) -> None:
        """
        Set every region to ``value``.

        If ``value`` is the missing sentinel every region becomes absent.
        """
        if value is None or self.is_missing_value(value):
            value = None
        for region_id in self._data:
            self._data[region_id] = value

    def set_missing(self, sentinel: Any) -> None:
        """
        Declare the value that represents missing data.

        Stored values equal to the new sentinel become absent. Values already
        absent stay absent. ``None`` leaves the current sentinel unchanged.

        Parameters
        ----------
        sentinel
            Numeric sentinels compare numerically, anything else compares as
            text.
        """
        if sentinel is None:
            return
        numeric = looks_like_number(sentinel)
        for region_id, value in self._data.items():
            if matches_sentinel(value, sentinel, numeric):
                self._data[region_id] = None
        self._sentinel = sentinel
        self._sentinel_numeric = numeric

    def set_value(self, region_id: Any, value: Any) -> None:
        """
        Set the value of one region.

        Raises
        ------
        InvalidRegionIDError
            If ``region_id`` is not part of the scheme.
        """
        canonical = self._scheme.resolve(region_id)
        if canonical is None:
            raise InvalidRegionIDError(region_id, self._scheme.name)
        self._store(canonical, value)

    def set_values(self, values: Mapping[Any, Any]) -> None:
        """
        Set the values of several regions from a mapping.

        Unknown IDs are reported and skipped; the rest of the mapping is still
        applied.

        Raises
        ------
        MissingArgumentError
            If ``values`` is not a mapping.
        """
        if not isinstance(values, Mapping):
            msg = f"set_values requires a mapping of region IDs, got {values!r}"
            raise MissingArgumentError(msg)
        for region_id, value in values.items():
            canonical = self._scheme.resolve(region_id)
            if canonical is None:
                logger.warning(
                    f"{region_id!r} is an invalid regional ID for scheme "
                    f"'{self._scheme.name}'"
                )
                continue
            self._store(canonical, value)

    def numericize(self) -> None:
        """Mark every present non-numeric value as absent."""
        for region_id, value in self._data.items():
            if value is not None and not looks_like_number(value):
                self._data[region_id] = None

    def truncate_to_int(self) -> RegionSet:
        """
        Truncate every present numeric value toward zero, in place.

        Non-numeric values are left untouched.

        Returns
        -------
        RegionSet
            ``self``, to allow chaining.
        """
        for region_id, value in self._data.items():
            if value is None or not looks_like_number(value):
                continue
            number = to_number(value)
            if isinstance(number, float) and not math.isfinite(number):
                continue
            self._store(region_id, math.trunc(number))
        return self

    def _store(self, canonical: Any, value: Any) -> None:
        if matches_sentinel(value, self._sentinel, self._sentinel_numeric):
            value = None
        self._data[canonical] = value

    # --- Query methods ---

    @property
    def scheme(self) -> Scheme:
        """Scheme the region IDs belong to."""
        return self._scheme

    @property
    def sentinel(self) -> Any:
        """Missing-data sentinel, or ``None`` if none was declared."""
        return self._sentinel

    @property
    def ids_numeric(self) -> bool:
        """Whether region IDs sort numerically."""
        return self._scheme.ids_numeric

    def get_missing(self) -> Any:
        """Return the missing-data sentinel (``None`` if unset)."""
        return self._sentinel

    def exists(self, region_id: Any) -> bool:
        """Whether ``region_id`` is a region of this set."""
        return self._scheme.resolve(region_id) is not None

    def ids(self) -> list[Any]:
        """Region IDs, numerically or lexically ascending."""
        return self._scheme.sorted_ids()

    def contiguous_ids(self) -> list[Any]:
        """Region IDs of the scheme's contiguous subset, sorted."""
        return self._scheme.sorted_contiguous_ids()

    def get_value(self, region_id: Any) -> Any:
        """
        Value of one region.

        Absent regions report the sentinel, or ``None`` when no sentinel is
        set. An unknown ID is reported and ``None`` is returned.
        """
        canonical = self._resolve_or_warn(region_id, "get_value")
        if canonical is None:
            return None
        value = self._data[canonical]
        if value is None:
            return self._sentinel
        return value

    def get_values(self) -> dict[Any, Any]:
        """
        Snapshot of all values keyed by region ID, in :meth:`ids` order.

        Absent regions carry the sentinel when one is set.
        """
        result = {}
        for region_id in self.ids():
            value = self._data[region_id]
            result[region_id] = self._sentinel if value is None else value
        return result

    def is_complete(self) -> bool:
        """True if no region is absent."""
        return all(value is not None for value in self._data.values())

    def is_complete_contiguous(self) -> bool:
        """True if no region of the contiguous subset is absent."""
        return all(self._data[i] is not None for i in self.contiguous_ids())

    def all_equal(self) -> bool:
        """True if every stored value (absent ones included) is the same."""
        values = list(self._data.values())
        if not values:
            return False
        first = values[0]
        return all(_same(value, first) for value in values[1:])

    def is_missing(self, region_id: Any) -> bool | None:
        """
        Whether a region is absent.

        An unknown ID is reported and ``None`` is returned.
        """
        canonical = self._resolve_or_warn(region_id, "is_missing")
        if canonical is None:
            return None
        return self._data[canonical] is None

    def is_not_missing(self, region_id: Any) -> bool | None:
        """
        Whether a region has a value.

        An unknown ID is reported and ``None`` is returned.
        """
        canonical = self._resolve_or_warn(region_id, "is_not_missing")
        if canonical is None:
            return None
        return self._data[canonical] is not None

    def is_missing_value(self, candidate: Any) -> bool:
        """
        Whether ``candidate`` equals this set's sentinel.

        Two ``None`` values are equal: with no sentinel declared, ``None`` is
        the missing value.
        """
        if self._sentinel is None or candidate is None:
            return self._sentinel is None and candidate is None
        return matches_sentinel(candidate, self._sentinel, self._sentinel_numeric)

    def is_numeric(self, region_id: Any = _ALL) -> bool:
        """
        Whether data are numeric.

        With no argument, True if every present value looks like a number.
        With a region ID, tests that region's value; an absent region tests
        the sentinel instead.

        Raises
        ------
        InvalidRegionIDError
            If ``region_id`` is given and is not part of the scheme.
        """
        if region_id is _ALL:
            return all(
                looks_like_number(value)
                for value in self._data.values()
                if value is not None
            )
        canonical = self._scheme.resolve(region_id)
        if canonical is None:
            raise InvalidRegionIDError(region_id, self._scheme.name)
        value = self._data[canonical]
        if value is None:
            return looks_like_number(self._sentinel)
        return looks_like_number(value)

    def _resolve_or_warn(self, region_id: Any, method: str) -> Any:
        canonical = self._scheme.resolve(region_id)
        if canonical is None:
            logger.warning(
                f"RegionSet.{method}: {region_id!r} is an invalid regional ID "
                f"for scheme '{self._scheme.name}'"
            )
        return canonical

    # --- Presentation ---

    def render_table(
        self, header: tuple[str, str] | None = None, *, html: bool = False
    ) -> str:
        """
        Format the data as a two-column table, one region per row.

        A debugging aid, not a data format. Absent values are shown as the
        sentinel, or ``MISSING`` when no sentinel is set.

        Parameters
        ----------
        header
            Optional ``(id_title, value_title)`` header row.
        html
            Produce a bare HTML ``<table>`` instead of plain text.
        """
        rows = [
            (str(region_id), "MISSING" if value is None else str(value))
            for region_id, value in self.get_values().items()
        ]
        if html:
            lines = ["<html>", '<table border="1">']
            if header is not None:
                lines.append(
                    f"<tr><th>{escape(str(header[0]))}</th>"
                    f"<th>{escape(str(header[1]))}</th></tr>"
                )
            for region_id, value in rows:
                lines.append(
                    f"<tr><td>{escape(region_id)}</td><td>{escape(value)}</td></tr>"
                )
            lines.extend(["</table>", "</html>"])
            return "\n".join(lines)

        id_width = max(len(region_id) for region_id, _ in rows)
        if header is not None:
            id_width = max(id_width, len(str(header[0])))
        lines = []
        if header is not None:
            title = f"{str(header[0]):<{id_width}}  {header[1]}"
            lines.extend([title, "-" * len(title)])
        for region_id, value in rows:
            lines.append(f"{region_id:<{id_width}}  {value}")
        return "\n".join(lines)

    def copy(self) -> RegionSet:
        """Independent copy with the same scheme, values and sentinel."""
        result = RegionSet(self._scheme)
        result._data = dict(self._data)
        result._sentinel = self._sentinel
        result._sentinel_numeric = self._sentinel_numeric
        return result

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, region_id: Any) -> bool:
        return self.exists(region_id)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.ids())

    def __repr__(self) -> str:
        present = sum(value is not None for value in self._data.values())
        return (
            f"RegionSet(scheme={self._scheme.name!r}, regions={len(self)}, "
            f"present={present}, sentinel={self._sentinel!r})"
        )

    # --- Arithmetic ---

    def add(self, other: Any, *, reflected: bool = False) -> RegionSet:
        """Elementwise sum with another RegionSet or a number."""
        return self._arithmetic(other, operator.add, reflected)

    def subtract(self, other: Any, *, reflected: bool = False) -> RegionSet:
        """
        Elementwise difference. With ``reflected=True`` computes
        ``other - self``.
        """
        return self._arithmetic(other, operator.sub, reflected)

    def multiply(self, other: Any, *, reflected: bool = False) -> RegionSet:
        """Elementwise product with another RegionSet or a number."""
        return self._arithmetic(other, operator.mul, reflected)

    def divide(self, other: Any, *, reflected: bool = False) -> RegionSet:
        """
        Elementwise quotient. With ``reflected=True`` computes ``other / self``.

        Raises
        ------
        ZeroDivisionError
            If a present divisor is zero.
        """
        return self._arithmetic(other, operator.truediv, reflected)

    def _arithmetic(
        self, other: Any, op: Callable[[Any, Any], Any], reflected: bool
    ) -> RegionSet:
        if not self.is_numeric():
            msg = (
                "Cannot use a RegionSet with non-numeric data in an arithmetic "
                f"operation (scheme '{self._scheme.name}')"
            )
            raise NonNumericOperandError(msg)

        result = RegionSet(self._scheme)

        if isinstance(other, RegionSet):
            if not other.is_numeric():
                msg = (
                    "Cannot use a RegionSet with non-numeric data in an arithmetic "
                    f"operation (scheme '{other.scheme.name}')"
                )
                raise NonNumericOperandError(msg)
            if other.scheme != self._scheme:
                msg = (
                    f"Cannot use a '{self._scheme.name}' RegionSet and a "
                    f"'{other.scheme.name}' RegionSet in an arithmetic operation"
                )
                raise SchemeMismatchError(msg)

            if other.sentinel is not None and self.is_missing_value(other.sentinel):
                result.set_missing(other.sentinel)

            for region_id, mine in self._data.items():
                theirs = other._data[region_id]
                if mine is None or theirs is None:
                    continue
                left, right = to_number(mine), to_number(theirs)
                if reflected:
                    left, right = right, left
                result._store(region_id, op(left, right))
            return result

        if not looks_like_number(other):
            msg = f"Invalid arithmetic operation between a RegionSet and {other!r}"
            raise NonNumericOperandError(msg)

        if self._sentinel is not None:
            result.set_missing(self._sentinel)
        if self.is_missing_value(other):
            return result

        scalar = to_number(other)
        for region_id, mine in self._data.items():
            if mine is None:
                continue
            left, right = to_number(mine), scalar
            if reflected:
                left, right = right, left
            result._store(region_id, op(left, right))
        return result

    def __add__(self, other: Any) -> RegionSet:
        return self.add(other)

    def __radd__(self, other: Any) -> RegionSet:
        return self.add(other, reflected=True)

    def __sub__(self, other: Any) -> RegionSet:
        return self.subtract(other)

    def __rsub__(self, other: Any) -> RegionSet:
        return self.subtract(other, reflected=True)

    def __mul__(self, other: Any) -> RegionSet:
        return self.multiply(other)

    def __rmul__(self, other: Any) -> RegionSet:
        return self.multiply(other, reflected=True)

    def __truediv__(self, other: Any) -> RegionSet:
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> RegionSet:
        return self.divide(other, reflected=True)

    # --- Everything else is rejected ---

    def __eq__(self, other: object) -> bool:
        raise UnsupportedOperatorError("==")

    def __ne__(self, other: object) -> bool:
        raise UnsupportedOperatorError("!=")

    def __lt__(self, other: object) -> bool:
        raise UnsupportedOperatorError("<")

    def __le__(self, other: object) -> bool:
        raise UnsupportedOperatorError("<=")

    def __gt__(self, other: object) -> bool:
        raise UnsupportedOperatorError(">")

    def __ge__(self, other: object) -> bool:
        raise UnsupportedOperatorError(">=")

    def __floordiv__(self, other: Any) -> RegionSet:
        raise UnsupportedOperatorError("//")

    __rfloordiv__ = __floordiv__

    def __mod__(self, other: Any) -> RegionSet:
        raise UnsupportedOperatorError("%")

    __rmod__ = __mod__

    def __pow__(self, other: Any) -> RegionSet:
        raise UnsupportedOperatorError("**")

    __rpow__ = __pow__

    def __matmul__(self, other: Any) -> RegionSet:
        raise UnsupportedOperatorError("@")

    __rmatmul__ = __matmul__

    def __neg__(self) -> RegionSet:
        raise UnsupportedOperatorError("unary -")

    def __pos__(self) -> RegionSet:
        raise UnsupportedOperatorError("unary +")

    def __abs__(self) -> RegionSet:
        raise UnsupportedOperatorError("abs()")

    __hash__ = object.__hash__


def _same(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if looks_like_number(a) and looks_like_number(b):
        return to_number(a) == to_number(b)
    return str(a) == str(b)
