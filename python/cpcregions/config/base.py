"""
Configuration dataclasses for user-defined region schemes.

This module defines:
- SchemeSpec: One scheme, given inline or by a reference file
- CrossReferenceSpec: A fine -> coarse containment mapping
- RegionsConfig: A whole configuration file
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import ValidationError
from .validation import SCHEMA_VERSION, check_schema, find_unknown_keys

__all__ = [
    "CrossReferenceSpec",
    "RegionsConfig",
    "SchemeSpec",
]

@dataclass
class SchemeSpec:
    """
    Scheme definition.

    Exactly one of ``ids`` or ``reference_file`` must be given.

    Parameters
    ----------
    name
        Scheme name, the key under ``[schemes]``
    ids
        Region IDs in catalogue order
    names
        Display names parallel to ``ids`` (defaults to the IDs as text)
    reference_file
        Path of an ``ID|Name`` reference list
    contiguous_ids
        Optional contiguous subset of the IDs

    Raises
    ------
    ValidationError
        If the definition is ambiguous or inconsistent
    """

    name: str
    ids: list[Any] | None = None
    names: list[str] | None = None
    reference_file: str | None = None
    contiguous_ids: list[Any] | None = None

    def __post_init__(self) -> None:
        """Validate that the scheme is defined exactly once."""
        if (self.ids is None) == (self.reference_file is None):
            msg = (
                f"Scheme '{self.name}' must define exactly one of 'ids' or "
                "'reference_file'"
            )
            raise ValidationError(msg)
        if self.ids is not None and not self.ids:
            msg = f"Scheme '{self.name}' has no region IDs"
            raise ValidationError(msg)
        if self.names is not None:
            if self.ids is None:
                msg = f"Scheme '{self.name}' gives 'names' without 'ids'"
                raise ValidationError(msg)
            if len(self.names) != len(self.ids):
                msg = (
                    f"Scheme '{self.name}' has {len(self.ids)} ids but "
                    f"{len(self.names)} names"
                )
                raise ValidationError(msg)

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> SchemeSpec:
        """Build from the TOML table ``[schemes.<name>]``."""
        if not isinstance(data, dict):
            msg = f"Scheme '{name}' must be a table, got {type(data).__name__}"
            raise ValidationError(msg)
        known = {"ids", "names", "reference_file", "contiguous_ids"}
        unknown = find_unknown_keys(data, known)
        if unknown:
            msg = f"Unknown keys for scheme '{name}': {', '.join(unknown)}"
            raise ValidationError(msg)
        return cls(name=name, **data)


@dataclass
class CrossReferenceSpec:
    """
    Cross-reference definition.

    Parameters
    ----------
    fine
        Name of the contained scheme
    coarse
        Name of the containing scheme
    mapping
        Fine ID to coarse ID
    """

    fine: str
    coarse: str
    mapping: dict[Any, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CrossReferenceSpec:
        """Build from one ``[[cross_references]]`` entry."""
        missing = [key for key in ("fine", "coarse", "mapping") if key not in data]
        if missing:
            msg = f"Cross-reference entry is missing keys: {', '.join(missing)}"
            raise ValidationError(msg)
        if not isinstance(data["mapping"], dict):
            msg = (
                f"Cross-reference {data['fine']} -> {data['coarse']}: 'mapping' "
                "must be a table"
            )
            raise ValidationError(msg)
        return cls(
            fine=str(data["fine"]),
            coarse=str(data["coarse"]),
            mapping=dict(data["mapping"]),
        )


@dataclass
class RegionsConfig:
    """
    Parsed region configuration.

    Parameters
    ----------
    config_schema
        Configuration schema number
    schemes
        Scheme definitions by name
    cross_references
        Cross-reference definitions
    default_sentinel
        Missing-data sentinel from ``[defaults]``, if any
    """

    config_schema: int = SCHEMA_VERSION
    schemes: dict[str, SchemeSpec] = field(default_factory=dict)
    cross_references: list[CrossReferenceSpec] = field(default_factory=list)
    default_sentinel: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegionsConfig:
        """
        Build from a raw configuration dictionary.

        Raises
        ------
        IncompatibleSchemaError
            If the ``schema`` number is not one this package reads.
        ValidationError
            If a table has the wrong shape.
        """
        config_schema = check_schema(data.get("schema"))

        schemes_table = data.get("schemes", {})
        if not isinstance(schemes_table, dict):
            msg = "'schemes' must be a table of scheme definitions"
            raise ValidationError(msg)
        xref_entries = data.get("cross_references", [])
        if not isinstance(xref_entries, list):
            msg = "'cross_references' must be an array of tables"
            raise ValidationError(msg)
        defaults = data.get("defaults", {})
        if not isinstance(defaults, dict):
            msg = "'defaults' must be a table"
            raise ValidationError(msg)

        return cls(
            config_schema=config_schema,
            schemes={
                name: SchemeSpec.from_dict(name, entry)
                for name, entry in schemes_table.items()
            },
            cross_references=[
                CrossReferenceSpec.from_dict(entry) for entry in xref_entries
            ],
            default_sentinel=defaults.get("sentinel"),
        )
