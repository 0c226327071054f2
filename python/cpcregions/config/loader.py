"""
Reading region configuration files.

This module provides:
- load_config: Load a single TOML configuration file
- merge_layers: Combine two configurations, scheme by scheme
- load_config_layers: Merge multiple config files in order

Relative ``reference_file`` paths in a file's ``[schemes]`` table are
anchored to the directory of that file as it is loaded, so layered files
can each point at their own reference lists.
"""

from __future__ import annotations

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any

from ..exceptions import ConfigError, ValidationError
from .validation import SCHEMA_VERSION, check_schema, find_unknown_keys

logger = logging.getLogger(__name__)

__all__ = [
    "KNOWN_TOP_LEVEL_KEYS",
    "load_config",
    "load_config_layers",
    "merge_layers",
]

KNOWN_TOP_LEVEL_KEYS = {"schema", "schemes", "cross_references", "defaults"}

# Keys that fix which regions a scheme has; a later layer may not change them.
_REGION_KEYS = ("ids", "reference_file")


def _anchor_reference_files(config: dict[str, Any], base_dir: Path) -> None:
    schemes = config.get("schemes", {})
    if not isinstance(schemes, dict):
        return
    for entry in schemes.values():
        if not isinstance(entry, dict) or "reference_file" not in entry:
            continue
        reference = Path(entry["reference_file"])
        if not reference.is_absolute():
            entry["reference_file"] = str(base_dir / reference)


def _table(config: dict[str, Any], key: str, kind: type, source: str) -> Any:
    value = config.get(key, kind())
    if not isinstance(value, kind):
        shape = "a table" if kind is dict else "an array of tables"
        msg = f"{source}: '{key}' must be {shape}"
        raise ValidationError(msg)
    return value


def _merge_scheme(
    name: str, base: dict[str, Any], override: dict[str, Any], source: str
) -> dict[str, Any]:
    for key in _REGION_KEYS:
        if key in override and base.get(key) != override[key]:
            msg = (
                f"{source} redefines the regions of scheme '{name}' "
                f"('{key}' differs from an earlier layer)"
            )
            raise ConfigError(msg)
    merged = dict(base)
    merged.update(copy.deepcopy(override))
    return merged


def merge_layers(
    base: dict[str, Any], override: dict[str, Any], source: str = "configuration"
) -> dict[str, Any]:
    """
    Merge a configuration layer over an earlier one.

    A later layer can add schemes and cross-references, relabel the regions
    of an earlier scheme (``names``), change its ``contiguous_ids``, and
    override ``[defaults]``. It cannot change which regions an earlier scheme
    has, or give an earlier cross-reference a different mapping.

    Parameters
    ----------
    base
        Configuration built from the earlier layers.
    override
        Raw configuration of the later layer.
    source
        Name of the later layer, for error messages.

    Returns
    -------
    dict[str, Any]
        Merged configuration. Neither input is modified.

    Raises
    ------
    ConfigError
        If the later layer redefines a scheme's regions or a cross-reference.
    ValidationError
        If a table has the wrong shape.
    IncompatibleSchemaError
        If the later layer declares a schema this package cannot read.

    Examples
    --------
    >>> base = {"schemes": {"Basins": {"ids": ["A", "B"]}}}
    >>> override = {"schemes": {"Basins": {"names": ["Alpha", "Bravo"]}}}
    >>> merge_layers(base, override)["schemes"]["Basins"]
    {'ids': ['A', 'B'], 'names': ['Alpha', 'Bravo']}
    """
    check_schema(override.get("schema"), source)
    result = copy.deepcopy(base)
    result["schema"] = SCHEMA_VERSION

    schemes = _table(result, "schemes", dict, "merged configuration")
    for name, entry in _table(override, "schemes", dict, source).items():
        if not isinstance(entry, dict):
            msg = f"{source}: scheme '{name}' must be a table"
            raise ValidationError(msg)
        if name in schemes:
            schemes[name] = _merge_scheme(name, schemes[name], entry, source)
        else:
            schemes[name] = copy.deepcopy(entry)
    if schemes:
        result["schemes"] = schemes

    cross_references = _table(result, "cross_references", list, "merged configuration")
    known = {(xref.get("fine"), xref.get("coarse")): xref for xref in cross_references}
    for entry in _table(override, "cross_references", list, source):
        if not isinstance(entry, dict):
            msg = f"{source}: each cross-reference must be a table"
            raise ValidationError(msg)
        pair = (entry.get("fine"), entry.get("coarse"))
        if pair not in known:
            known[pair] = copy.deepcopy(entry)
            cross_references.append(known[pair])
        elif known[pair].get("mapping") != entry.get("mapping"):
            msg = (
                f"{source} redefines cross-reference {pair[0]} -> {pair[1]} "
                "with a different mapping"
            )
            raise ConfigError(msg)
        else:
            logger.debug(f"{source}: cross-reference {pair[0]} -> {pair[1]} repeated")
    if cross_references:
        result["cross_references"] = cross_references

    defaults = _table(override, "defaults", dict, source)
    if defaults:
        result["defaults"] = {
            **_table(result, "defaults", dict, "merged configuration"),
            **defaults,
        }
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a single TOML configuration file.

    Parameters
    ----------
    path
        Path to TOML configuration file.

    Returns
    -------
    dict[str, Any]
        Raw configuration dictionary.

    Raises
    ------
    ConfigError
        If the file cannot be read or is not valid TOML.

    Examples
    --------
    >>> config = load_config("regions.toml")
    >>> sorted(config["schemes"])
    ['Basins', 'Cities']
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except OSError as err:
        msg = f"Could not read configuration file {path}: {err}"
        raise ConfigError(msg) from err
    except tomllib.TOMLDecodeError as err:
        msg = f"Invalid TOML in {path}: {err}"
        raise ConfigError(msg) from err

    unknown = find_unknown_keys(config, KNOWN_TOP_LEVEL_KEYS)
    if unknown:
        logger.warning(
            f"Unknown configuration keys in {path}: {', '.join(unknown)}. "
            "These will be ignored."
        )

    _anchor_reference_files(config, path.parent)
    return config


def load_config_layers(*paths: str | Path) -> dict[str, Any]:
    """
    Load and merge multiple TOML configuration files, in order.

    Each file is merged over the ones before it with :func:`merge_layers`.

    Examples
    --------
    >>> config = load_config_layers("site.toml", "local.toml")
    """
    result: dict[str, Any] = {}
    for path in paths:
        result = merge_layers(result, load_config(path), source=str(path))
    return result
