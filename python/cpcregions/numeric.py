"""
Numeric helpers shared by the regions data model.

Readers hand region values over as text as often as numbers, so numeric-ness
is decided by whether a value *looks like* a number rather than by its type.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

__all__ = [
    "looks_like_number",
    "matches_sentinel",
    "to_number",
]


def looks_like_number(value: Any) -> bool:
    """
    Test whether a value can be used as a number.

    Parameters
    ----------
    value
        Candidate value.

    Returns
    -------
    bool
        True for real numbers (including numpy scalars) and for strings that
        parse as a float. ``None`` and booleans are not numbers.

    Examples
    --------
    >>> looks_like_number(3)
    True
    >>> looks_like_number("-9999")
    True
    >>> looks_like_number("NEW ENGLAND")
    False
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


def to_number(value: Any) -> int | float:
    """
    Coerce a value that looks like a number into an ``int`` or ``float``.

    Integral strings become ``int``; numpy scalars become their Python
    equivalents.

    Raises
    ------
    ValueError
        If the value does not look like a number.
    """
    if not looks_like_number(value):
        msg = f"{value!r} does not look like a number"
        raise ValueError(msg)
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return float(value)
    return value


def matches_sentinel(value: Any, sentinel: Any, sentinel_numeric: bool) -> bool:
    """
    Compare a value against a missing-data sentinel.

    Numeric sentinels compare numerically (``-9999`` matches ``"-9999.0"``),
    other sentinels compare as strings. A ``None`` value or sentinel never
    matches here.
    """
    if value is None or sentinel is None:
        return False
    if sentinel_numeric:
        return looks_like_number(value) and to_number(value) == to_number(sentinel)
    return str(value) == str(sentinel)
