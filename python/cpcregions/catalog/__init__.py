"""
Catalog of region schemes and RegionSet constructors.

Importing this package registers the built-in schemes (``CensusDivisions``,
``ClimateDivisions``, ``ForecastDivisions``, ``States`` and ``StatesCONUS``)
and the cross-references between them.

Example:
    >>> from cpcregions.catalog import new_names, new_with_container_ids
    >>> new_names("States").get_value("MD")
    'Maryland'
    >>> new_with_container_ids("ClimateDivisions", "States").get_value(1801)
    'MD'
"""

from __future__ import annotations

import logging
from typing import Any

from ..regionset import RegionSet
from ..scheme import CrossReference, Scheme
from . import schemes
from .registry import (
    SchemeRegistry,
    register_cross_reference,
    register_scheme,
    scheme_registry,
)
from .stations import (
    new_station_names,
    new_stations,
    new_stations_from_file,
    parse_reference_lines,
    read_reference_file,
    station_scheme,
)

logger = logging.getLogger(__name__)

__all__ = [
    "SchemeRegistry",
    "get_cross_reference",
    "new_ids",
    "new_names",
    "new_station_names",
    "new_stations",
    "new_stations_from_file",
    "new_with_container_ids",
    "parse_reference_lines",
    "read_reference_file",
    "register_cross_reference",
    "register_scheme",
    "scheme_registry",
    "schemes",
    "station_scheme",
]


def new_ids(scheme: str | Scheme, *, sentinel: Any = None) -> RegionSet:
    """
    Create a RegionSet with every region of ``scheme`` absent.

    Parameters
    ----------
    scheme
        A :class:`Scheme` or the name of a registered scheme.
    sentinel
        Optional missing-data sentinel to declare on the new set.

    Raises
    ------
    SchemeNotFoundError
        If ``scheme`` is a name that is not registered.
    """
    return RegionSet(scheme_registry.get(scheme), sentinel=sentinel)


def new_names(scheme: str | Scheme) -> RegionSet:
    """Create a RegionSet whose values are the catalogued region names."""
    resolved = scheme_registry.get(scheme)
    return RegionSet(resolved, dict(zip(resolved.ids, resolved.names)))


def get_cross_reference(
    fine: str | Scheme, coarse: str | Scheme
) -> CrossReference:
    """Look up the registered cross-reference from ``fine`` onto ``coarse``."""
    return scheme_registry.get_cross_reference(fine, coarse)


def new_with_container_ids(fine: str | Scheme, coarse: str | Scheme) -> RegionSet:
    """
    Create a RegionSet in the ``fine`` scheme holding containing coarse IDs.

    Parameters
    ----------
    fine
        Scheme of the contained regions.
    coarse
        Scheme of the containing regions.

    Raises
    ------
    SchemeNotFoundError
        If no cross-reference is registered for the pair.
    """
    cross_reference = get_cross_reference(fine, coarse)
    logger.debug(f"Building container IDs for {cross_reference.label}")
    return RegionSet(cross_reference.fine, dict(cross_reference.mapping))
