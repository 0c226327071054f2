"""
Validation helpers for region configuration files.

This module provides:
- The configuration schema number and its check
- Unknown key detection
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import IncompatibleSchemaError, ValidationError

logger = logging.getLogger(__name__)

__all__ = [
    "SCHEMA_VERSION",
    "check_schema",
    "find_unknown_keys",
]

SCHEMA_VERSION = 1


def check_schema(value: Any, source: str = "configuration") -> int:
    """
    Check the ``schema`` number of a configuration file.

    Files without a ``schema`` key are read as the current schema.

    Parameters
    ----------
    value
        The ``schema`` value from the file, or ``None`` if it has none.
    source
        Where the value came from, for error messages.

    Returns
    -------
    int
        The schema number.

    Raises
    ------
    ValidationError
        If ``value`` is not an integer.
    IncompatibleSchemaError
        If ``value`` is not a schema this package reads.

    Examples
    --------
    >>> check_schema(1)
    1
    >>> check_schema(2)
    Traceback (most recent call last):
        ...
    IncompatibleSchemaError: ...
    """
    if value is None:
        logger.debug(f"{source} has no schema number, reading as {SCHEMA_VERSION}")
        return SCHEMA_VERSION
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{source}: 'schema' must be an integer, got {value!r}"
        raise ValidationError(msg)
    if value != SCHEMA_VERSION:
        raise IncompatibleSchemaError(value, SCHEMA_VERSION)
    return value


def find_unknown_keys(data: dict[str, object], known_keys: set[str]) -> list[str]:
    """
    Keys of ``data`` that are not in ``known_keys``, sorted.

    Examples
    --------
    >>> find_unknown_keys({"schemes": {}, "scheme": {}}, {"schemes"})
    ['scheme']
    """
    return sorted(set(data.keys()) - known_keys)
