"""
Built-in partition schemes and the cross-references between them.

The supported hierarchy is::

    Stations -> ClimateDivisions -> States -> CensusDivisions -> nation
                ClimateDivisions -> ForecastDivisions

``StatesCONUS`` is the 48-state variant of ``States`` used for weighted work
confined to the contiguous United States. All objects defined here are
registered with :data:`~cpcregions.catalog.registry.scheme_registry` on
import.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..scheme import CrossReference, Scheme
from .registry import register_cross_reference, register_scheme
from .tables import (
    CENSUS_DIVISION_MEMBERS,
    CENSUS_DIVISIONS,
    CLIMATE_DIVISION_FORECAST_DIVISIONS,
    CLIMATE_DIVISIONS,
    CONUS_STATE_CODES,
    FORECAST_DIVISIONS,
    NON_CONTIGUOUS_STATES,
    STATES,
)

__all__ = [
    "CENSUS_DIVISIONS_SCHEME",
    "CLIMATE_DIVISIONS_SCHEME",
    "CLIMATE_DIVISIONS_TO_FORECAST_DIVISIONS",
    "CLIMATE_DIVISIONS_TO_STATES",
    "CLIMATE_DIVISIONS_TO_STATES_CONUS",
    "FORECAST_DIVISIONS_SCHEME",
    "STATES_CONUS_SCHEME",
    "STATES_CONUS_TO_CENSUS_DIVISIONS",
    "STATES_SCHEME",
    "STATES_TO_CENSUS_DIVISIONS",
]


def _scheme(
    name: str,
    table: Iterable[tuple[Any, str]],
    ids_numeric: bool,
    contiguous_ids: tuple[str, ...] | None = None,
) -> Scheme:
    table = list(table)
    return register_scheme(
        Scheme(
            name=name,
            ids=tuple(region_id for region_id, _ in table),
            names=tuple(region_name for _, region_name in table),
            ids_numeric=ids_numeric,
            contiguous_ids=contiguous_ids,
        )
    )


CENSUS_DIVISIONS_SCHEME = _scheme("CensusDivisions", CENSUS_DIVISIONS, True)
CLIMATE_DIVISIONS_SCHEME = _scheme("ClimateDivisions", CLIMATE_DIVISIONS, True)
FORECAST_DIVISIONS_SCHEME = _scheme("ForecastDivisions", FORECAST_DIVISIONS, True)
STATES_SCHEME = _scheme("States", STATES, False, contiguous_ids=CONUS_STATE_CODES)
STATES_CONUS_SCHEME = _scheme(
    "StatesCONUS",
    [pair for pair in STATES if pair[0] not in NON_CONTIGUOUS_STATES],
    False,
)

_STATE_OF_CLIMATE_DIVISION = {
    stcd: CONUS_STATE_CODES[stcd // 100 - 1] for stcd, _ in CLIMATE_DIVISIONS
}
_CENSUS_DIVISION_OF_STATE = {
    state: division
    for division, members in CENSUS_DIVISION_MEMBERS.items()
    for state in members
}

CLIMATE_DIVISIONS_TO_STATES = register_cross_reference(
    CrossReference(CLIMATE_DIVISIONS_SCHEME, STATES_SCHEME, _STATE_OF_CLIMATE_DIVISION)
)
CLIMATE_DIVISIONS_TO_STATES_CONUS = register_cross_reference(
    CrossReference(
        CLIMATE_DIVISIONS_SCHEME, STATES_CONUS_SCHEME, _STATE_OF_CLIMATE_DIVISION
    )
)
CLIMATE_DIVISIONS_TO_FORECAST_DIVISIONS = register_cross_reference(
    CrossReference(
        CLIMATE_DIVISIONS_SCHEME,
        FORECAST_DIVISIONS_SCHEME,
        CLIMATE_DIVISION_FORECAST_DIVISIONS,
    )
)
STATES_TO_CENSUS_DIVISIONS = register_cross_reference(
    CrossReference(STATES_SCHEME, CENSUS_DIVISIONS_SCHEME, _CENSUS_DIVISION_OF_STATE)
)
STATES_CONUS_TO_CENSUS_DIVISIONS = register_cross_reference(
    CrossReference(
        STATES_CONUS_SCHEME,
        CENSUS_DIVISIONS_SCHEME,
        {
            state: division
            for state, division in _CENSUS_DIVISION_OF_STATE.items()
            if state not in NON_CONTIGUOUS_STATES
        },
    )
)
