"""
Weighted aggregation of RegionSet data onto coarser schemes.

Fine-scale values are averaged into the coarse regions that contain them,
each fine region contributing in proportion to its weight (typically its
area or population)::

    >>> from cpcregions.weighted import states_from_climate_divisions
    >>> state_temps = states_from_climate_divisions(division_temps, areas)

Weights must be numeric and complete. A coarse region is absent in the result
if any of its contributing fine regions is absent in the data; fine regions
with zero weight never contribute.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .catalog.schemes import (
    CLIMATE_DIVISIONS_TO_FORECAST_DIVISIONS,
    CLIMATE_DIVISIONS_TO_STATES,
    CLIMATE_DIVISIONS_TO_STATES_CONUS,
    STATES_CONUS_TO_CENSUS_DIVISIONS,
    STATES_TO_CENSUS_DIVISIONS,
)
from .exceptions import (
    IncompleteWeightsError,
    MissingArgumentError,
    NonNumericOperandError,
    SchemeMismatchError,
)
from .numeric import to_number
from .regionset import RegionSet
from .scheme import CrossReference, Scheme

logger = logging.getLogger(__name__)

__all__ = [
    "aggregate",
    "aggregate_to_scalar",
    "census_divisions_from_states",
    "census_divisions_from_states_conus",
    "conus_from_states",
    "forecast_divisions_from_climate_divisions",
    "states_conus_from_climate_divisions",
    "states_from_climate_divisions",
]


def _check_operands(
    method: str, data: RegionSet, weights: RegionSet, scheme: Scheme | None = None
) -> None:
    if data is None or weights is None:
        msg = f"{method} requires both data and weights"
        raise MissingArgumentError(msg)
    if not isinstance(data, RegionSet) or not isinstance(weights, RegionSet):
        msg = f"{method}: data and weights must be RegionSet objects"
        raise MissingArgumentError(msg)

    expected = data.scheme if scheme is None else scheme
    if data.scheme != expected or weights.scheme != expected:
        msg = (
            f"{method}: data ('{data.scheme.name}') and weights "
            f"('{weights.scheme.name}') must both use scheme '{expected.name}'"
        )
        raise SchemeMismatchError(msg)
    if not (data.is_numeric() and weights.is_numeric()):
        msg = f"{method}: data and weights must have numeric data"
        raise NonNumericOperandError(msg)


def _arrays(
    data: RegionSet, weights: RegionSet, ids: list[Any], included: set[Any]
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Weight, value and absent-mask arrays over ``ids``.

    Regions outside ``included`` get a zero weight and a zero value. The
    inputs are read, never modified.
    """
    weight_values = np.zeros(len(ids))
    data_values = np.zeros(len(ids))
    absent = np.zeros(len(ids), dtype=bool)
    for i, region_id in enumerate(ids):
        if region_id not in included:
            continue
        weight_values[i] = to_number(weights.get_value(region_id))
        if data.is_missing(region_id):
            absent[i] = True
        else:
            data_values[i] = to_number(data.get_value(region_id))
    return weight_values, data_values, absent


def _factors(weight_values: np.ndarray, totals: np.ndarray) -> np.ndarray:
    """Normalised weighting factors; zero wherever the total is zero."""
    return np.divide(
        weight_values,
        totals,
        out=np.zeros_like(weight_values),
        where=totals != 0,
    )


def aggregate(
    data: RegionSet,
    weights: RegionSet,
    cross_reference: CrossReference,
    *,
    contiguous_only: bool = False,
) -> RegionSet:
    """
    Weighted average of fine-scheme data into each containing coarse region.

    Parameters
    ----------
    data
        Numeric values in ``cross_reference.fine``.
    weights
        Numeric, complete weights in ``cross_reference.fine``.
    cross_reference
        Containment mapping from the fine scheme onto the coarse scheme.
    contiguous_only
        Weights need only be complete over the fine scheme's contiguous
        regions. Non-contiguous regions with an absent weight are treated as
        zero weight; those with a weight still take part.

    Returns
    -------
    RegionSet
        Values in ``cross_reference.coarse`` carrying the sentinel of
        ``data``. A coarse region is absent if a contributing fine region is
        absent in ``data``, or if it contains no fine regions. A coarse region
        whose weights sum to zero is 0.

    Raises
    ------
    MissingArgumentError
        If an argument is missing.
    SchemeMismatchError
        If data or weights are not in the fine scheme.
    NonNumericOperandError
        If data or weights hold non-numeric values.
    IncompleteWeightsError
        If a required weight is absent.

    Examples
    --------
    >>> xref = get_cross_reference("States", "CensusDivisions")
    >>> result = aggregate(data, weights, xref)
    """
    if cross_reference is None:
        msg = "aggregate requires a cross-reference"
        raise MissingArgumentError(msg)
    _check_operands("aggregate", data, weights, cross_reference.fine)

    fine_ids = cross_reference.fine.sorted_ids()
    if contiguous_only:
        if not weights.is_complete_contiguous():
            msg = (
                f"Weights for {cross_reference.label} are missing data in the "
                "contiguous regions"
            )
            raise IncompleteWeightsError(msg)
        included = set(cross_reference.fine.sorted_contiguous_ids())
        included.update(i for i in fine_ids if weights.is_not_missing(i))
    else:
        if not weights.is_complete():
            msg = f"Weights for {cross_reference.label} cannot have missing data"
            raise IncompleteWeightsError(msg)
        included = set(fine_ids)

    coarse_ids = cross_reference.coarse.sorted_ids()
    coarse_index = {region_id: k for k, region_id in enumerate(coarse_ids)}
    groups = np.array(
        [coarse_index[cross_reference.mapping[region_id]] for region_id in fine_ids],
        dtype=np.intp,
    )
    weight_values, data_values, absent = _arrays(data, weights, fine_ids, included)

    totals = np.bincount(groups, weights=weight_values, minlength=len(coarse_ids))
    factors = _factors(weight_values, totals[groups])
    contributing = factors != 0

    sums = np.bincount(
        groups,
        weights=np.where(contributing & ~absent, data_values * factors, 0.0),
        minlength=len(coarse_ids),
    )
    blocked = np.bincount(
        groups,
        weights=(contributing & absent).astype(float),
        minlength=len(coarse_ids),
    )
    members = np.bincount(groups, minlength=len(coarse_ids))

    result = RegionSet(cross_reference.coarse, sentinel=data.sentinel)
    for k, coarse_id in enumerate(coarse_ids):
        if members[k] == 0 or blocked[k] > 0:
            continue
        result.set_value(coarse_id, float(sums[k]))

    if not result.is_complete():
        logger.warning(f"aggregate: {cross_reference.label} result has missing data")
    return result


def aggregate_to_scalar(
    data: RegionSet, weights: RegionSet, *, contiguous_only: bool = False
) -> Any:
    """
    Weighted average of all regions of a scheme as a single number.

    Parameters
    ----------
    data
        Numeric values.
    weights
        Numeric weights in the same scheme as ``data``, complete over the
        regions taking part.
    contiguous_only
        Average over the scheme's contiguous regions only.

    Returns
    -------
    float or sentinel
        The weighted average; 0 if every weight is zero. If a region with a
        non-zero weight is absent in ``data`` the sentinel of ``data`` is
        returned instead.

    Examples
    --------
    >>> data = new_ids("States")
    >>> aggregate_to_scalar(data, weights, contiguous_only=True)
    -9999
    """
    _check_operands("aggregate_to_scalar", data, weights)

    if contiguous_only:
        ids = data.contiguous_ids()
        complete = weights.is_complete_contiguous()
    else:
        ids = data.ids()
        complete = weights.is_complete()
    if not complete:
        msg = f"Weights for scheme '{weights.scheme.name}' cannot have missing data"
        raise IncompleteWeightsError(msg)

    weight_values, data_values, absent = _arrays(data, weights, ids, set(ids))
    factors = _factors(weight_values, np.full_like(weight_values, weight_values.sum()))
    contributing = factors != 0
    if np.any(contributing & absent):
        return data.sentinel
    return float(np.sum(data_values[contributing] * factors[contributing]))


def states_from_climate_divisions(data: RegionSet, weights: RegionSet) -> RegionSet:
    """Climate divisions to all 50 states; Alaska and Hawaii come out absent."""
    return aggregate(data, weights, CLIMATE_DIVISIONS_TO_STATES)


def states_conus_from_climate_divisions(
    data: RegionSet, weights: RegionSet
) -> RegionSet:
    """Climate divisions to the 48 contiguous states."""
    return aggregate(data, weights, CLIMATE_DIVISIONS_TO_STATES_CONUS)


def forecast_divisions_from_climate_divisions(
    data: RegionSet, weights: RegionSet
) -> RegionSet:
    """Climate divisions to forecast divisions."""
    return aggregate(data, weights, CLIMATE_DIVISIONS_TO_FORECAST_DIVISIONS)


def census_divisions_from_states(data: RegionSet, weights: RegionSet) -> RegionSet:
    """
    States to census divisions.

    With complete weights all 50 states take part. Otherwise the weights must
    cover the contiguous states, and Alaska or Hawaii without a weight are
    left out of Pacific.
    """
    if isinstance(weights, RegionSet) and weights.is_complete():
        return aggregate(data, weights, STATES_TO_CENSUS_DIVISIONS)
    return aggregate(data, weights, STATES_TO_CENSUS_DIVISIONS, contiguous_only=True)


def census_divisions_from_states_conus(
    data: RegionSet, weights: RegionSet
) -> RegionSet:
    """Contiguous states to census divisions."""
    return aggregate(data, weights, STATES_CONUS_TO_CENSUS_DIVISIONS)


def conus_from_states(data: RegionSet, weights: RegionSet) -> Any:
    """Weighted average over the contiguous states as a single number."""
    return aggregate_to_scalar(data, weights, contiguous_only=True)
