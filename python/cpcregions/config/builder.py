"""Build and register schemes and cross-references from configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..catalog.registry import SchemeRegistry, scheme_registry
from ..catalog.stations import read_reference_file
from ..exceptions import (
    ConfigError,
    InvalidRegionIDError,
    RegionsError,
    SchemeMismatchError,
    SchemeNotFoundError,
)
from ..scheme import CrossReference, Scheme
from .base import CrossReferenceSpec, RegionsConfig, SchemeSpec
from .loader import load_config_layers

logger = logging.getLogger(__name__)

__all__ = [
    "build_cross_reference",
    "build_scheme",
    "load_regions_config",
    "register_from_config",
]


def build_scheme(spec: SchemeSpec) -> Scheme:
    """
    Build a scheme from its definition.

    Raises
    ------
    ReferenceFileError
        If a reference file is missing or malformed.
    ConfigError
        If the IDs are inconsistent (duplicates, unknown contiguous IDs).
    """
    if spec.reference_file is not None:
        pairs: list[tuple[Any, str]] = read_reference_file(Path(spec.reference_file))
    else:
        names = spec.names if spec.names is not None else [str(i) for i in spec.ids]
        pairs = list(zip(spec.ids, names))

    try:
        return Scheme.from_pairs(spec.name, pairs, contiguous_ids=spec.contiguous_ids)
    except (RegionsError, ValueError) as err:
        msg = f"Invalid scheme '{spec.name}': {err}"
        raise ConfigError(msg) from err


def build_cross_reference(
    spec: CrossReferenceSpec, registry: SchemeRegistry
) -> CrossReference:
    """
    Build a cross-reference between two registered schemes.

    Raises
    ------
    ConfigError
        If a scheme is unknown or the mapping does not cover the fine scheme.
    """
    try:
        return CrossReference(
            registry.get(spec.fine), registry.get(spec.coarse), spec.mapping
        )
    except (SchemeNotFoundError, InvalidRegionIDError, SchemeMismatchError) as err:
        msg = f"Invalid cross-reference {spec.fine} -> {spec.coarse}: {err}"
        raise ConfigError(msg) from err


def register_from_config(
    config: RegionsConfig | dict[str, Any],
    registry: SchemeRegistry | None = None,
) -> RegionsConfig:
    """
    Register every scheme and cross-reference a configuration defines.

    Schemes are registered before cross-references, so a cross-reference can
    use schemes defined in the same configuration as well as built-in ones.

    Parameters
    ----------
    config
        Parsed configuration, or a raw dict from :func:`load_config`
    registry
        Registry to populate (defaults to the global registry)

    Returns
    -------
    RegionsConfig
        The parsed configuration.

    Raises
    ------
    ConfigError
        If an entry is invalid or clashes with a registered one.
    """
    if isinstance(config, dict):
        config = RegionsConfig.from_dict(config)
    if registry is None:
        registry = scheme_registry

    for spec in config.schemes.values():
        scheme = build_scheme(spec)
        try:
            registry.register(scheme)
        except ValueError as err:
            raise ConfigError(str(err)) from err

    for xref_spec in config.cross_references:
        cross_reference = build_cross_reference(xref_spec, registry)
        try:
            registry.register_cross_reference(cross_reference)
        except ValueError as err:
            raise ConfigError(str(err)) from err

    logger.debug(
        f"Registered {len(config.schemes)} scheme(s) and "
        f"{len(config.cross_references)} cross-reference(s) from configuration"
    )
    return config


def load_regions_config(
    *paths: str | Path, registry: SchemeRegistry | None = None
) -> RegionsConfig:
    """
    Load layered configuration files and register their contents.

    Examples
    --------
    >>> config = load_regions_config("regions.toml")
    >>> basins = new_ids("Basins", sentinel=config.default_sentinel)
    """
    return register_from_config(load_config_layers(*paths), registry=registry)
