"""
Custom exceptions for cpcregions.

This module defines the exception hierarchy for the regions data model:
- RegionsError: Base exception for all cpcregions errors
- InvalidRegionIDError: Read or write against an ID outside a scheme
- DuplicateIDError: Reference list contains the same ID twice
- SchemeMismatchError: Operands built on incompatible schemes
- NonNumericOperandError: Arithmetic or aggregation on non-numeric data
- IncompleteWeightsError: Aggregation with absent weighting factors
- UnsupportedOperatorError: Non-arithmetic operator applied to a RegionSet
- MissingArgumentError: Required argument absent
- SchemeNotFoundError: Scheme or cross-reference not in the registry
- ReferenceFileError: Malformed station reference list
- ConfigError / ValidationError / IncompatibleSchemaError: configuration layer
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigError",
    "DuplicateIDError",
    "IncompatibleSchemaError",
    "IncompleteWeightsError",
    "InvalidRegionIDError",
    "MissingArgumentError",
    "NonNumericOperandError",
    "ReferenceFileError",
    "RegionsError",
    "SchemeMismatchError",
    "SchemeNotFoundError",
    "UnsupportedOperatorError",
    "ValidationError",
]


class RegionsError(Exception):
    """Base exception for all cpcregions errors."""

    pass


class InvalidRegionIDError(RegionsError, LookupError):
    """
    Raised when a region ID is not part of a RegionSet's scheme.

    Parameters
    ----------
    region_id
        The offending region ID.
    scheme_name
        Name of the scheme the ID was looked up in.
    """

    def __init__(self, region_id: Any, scheme_name: str) -> None:
        message = f"{region_id!r} is an invalid regional ID for scheme '{scheme_name}'"
        super().__init__(message)
        self.region_id = region_id
        self.scheme_name = scheme_name


class DuplicateIDError(RegionsError, ValueError):
    """
    Raised when a reference list defines the same region ID more than once.

    Parameters
    ----------
    duplicates
        The IDs that appear more than once.
    source
        Identity of the reference list.
    """

    def __init__(self, duplicates: list[Any], source: str) -> None:
        dup_str = ", ".join(repr(d) for d in duplicates)
        message = f"Duplicate regions found in {source}: {dup_str}"
        super().__init__(message)
        self.duplicates = duplicates
        self.source = source


class SchemeMismatchError(RegionsError, ValueError):
    """Raised when two RegionSets on different schemes are combined."""

    pass


class NonNumericOperandError(RegionsError, TypeError):
    """Raised when arithmetic or aggregation meets non-numeric data."""

    pass


class IncompleteWeightsError(RegionsError):
    """Raised when weighting factors contain absent values."""

    pass


class UnsupportedOperatorError(RegionsError, TypeError):
    """
    Raised when an operator other than ``+ - * /`` is applied to a RegionSet.

    Parameters
    ----------
    operator
        Symbol of the rejected operator.
    """

    def __init__(self, operator: str) -> None:
        message = f"Operator {operator} cannot be performed with a RegionSet object"
        super().__init__(message)
        self.operator = operator


class MissingArgumentError(RegionsError, TypeError):
    """Raised when a required argument is absent."""

    pass


class SchemeNotFoundError(RegionsError, LookupError):
    """
    Raised when a requested scheme or cross-reference is not registered.

    Parameters
    ----------
    name
        The scheme (or ``"fine -> coarse"`` pair) that was not found.
    available
        Names available in the registry.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        if not available:
            message = f"Scheme '{name}' not found. No schemes are registered."
        else:
            available_str = ", ".join(f"'{s}'" for s in sorted(available))
            message = f"Scheme '{name}' not found. Available: {available_str}"
        super().__init__(message)
        self.name = name
        self.available = available


class ReferenceFileError(RegionsError, ValueError):
    """Raised for a reference list that is empty or has malformed lines."""

    pass


class ConfigError(RegionsError):
    """Base exception for all configuration errors."""

    pass


class ValidationError(ConfigError):
    """
    Raised for configuration validation failures.

    This includes type mismatches, missing required fields and references to
    unknown schemes.
    """

    pass


class IncompatibleSchemaError(ConfigError):
    """
    Raised when a configuration file declares a schema this package cannot read.

    Parameters
    ----------
    config_schema
        The ``schema`` number from the configuration file.
    supported_schema
        The schema number this package reads.
    """

    def __init__(self, config_schema: int, supported_schema: int) -> None:
        message = (
            f"Incompatible configuration schema: file declares schema "
            f"{config_schema}, but cpcregions reads schema {supported_schema}."
        )
        super().__init__(message)
        self.config_schema = config_schema
        self.supported_schema = supported_schema
