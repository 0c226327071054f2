"""
Regional data containers for U.S. climate analysis.

Values are stored per region of a fixed partition (climate divisions, states,
census divisions, forecast divisions or a user station list) in a
:class:`RegionSet`, combined with elementwise arithmetic, and area- or
population-weighted into coarser partitions with :mod:`cpcregions.weighted`.
"""

from __future__ import annotations

from .catalog import (
    get_cross_reference,
    new_ids,
    new_names,
    new_station_names,
    new_stations,
    new_stations_from_file,
    new_with_container_ids,
    scheme_registry,
)
from .exceptions import (
    DuplicateIDError,
    IncompleteWeightsError,
    InvalidRegionIDError,
    MissingArgumentError,
    NonNumericOperandError,
    RegionsError,
    SchemeMismatchError,
    SchemeNotFoundError,
    UnsupportedOperatorError,
)
from .regionset import RegionSet
from .scheme import CrossReference, Scheme
from .weighted import aggregate, aggregate_to_scalar

__all__ = [
    "CrossReference",
    "DuplicateIDError",
    "IncompleteWeightsError",
    "InvalidRegionIDError",
    "MissingArgumentError",
    "NonNumericOperandError",
    "RegionSet",
    "RegionsError",
    "Scheme",
    "SchemeMismatchError",
    "SchemeNotFoundError",
    "UnsupportedOperatorError",
    "aggregate",
    "aggregate_to_scalar",
    "get_cross_reference",
    "new_ids",
    "new_names",
    "new_station_names",
    "new_stations",
    "new_stations_from_file",
    "new_with_container_ids",
    "scheme_registry",
]
