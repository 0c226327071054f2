"""
Configuration layer for user-defined region schemes.

TOML files declare extra schemes (inline or from ``ID|Name`` reference files)
and the cross-references between them, which are then registered so they can
be used by name like the built-in schemes.

Example:
    >>> from cpcregions.config import load_regions_config
    >>> config = load_regions_config("regions.toml")
    >>> from cpcregions.catalog import new_ids
    >>> basins = new_ids("Basins", sentinel=config.default_sentinel)
"""

from __future__ import annotations

from ..exceptions import ConfigError, IncompatibleSchemaError, ValidationError
from .base import CrossReferenceSpec, RegionsConfig, SchemeSpec
from .builder import (
    build_cross_reference,
    build_scheme,
    load_regions_config,
    register_from_config,
)
from .loader import load_config, load_config_layers, merge_layers
from .validation import SCHEMA_VERSION, check_schema, find_unknown_keys

__all__ = [
    "SCHEMA_VERSION",
    "ConfigError",
    "CrossReferenceSpec",
    "IncompatibleSchemaError",
    "RegionsConfig",
    "SchemeSpec",
    "ValidationError",
    "build_cross_reference",
    "build_scheme",
    "check_schema",
    "find_unknown_keys",
    "load_config",
    "load_config_layers",
    "load_regions_config",
    "merge_layers",
    "register_from_config",
]
