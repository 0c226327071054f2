"""
Scheme registry for cpcregions.

This module provides a registry of schemes and cross-references, enabling
callers and configuration files to refer to partitions by name.

Example:
    >>> from cpcregions.catalog.registry import scheme_registry
    >>> len(scheme_registry.get("StatesCONUS"))
    48
    >>> scheme_registry.get_cross_reference("States", "CensusDivisions").label
    'States -> CensusDivisions'
"""

from __future__ import annotations

import logging

from ..exceptions import SchemeNotFoundError
from ..scheme import CrossReference, Scheme

logger = logging.getLogger(__name__)

__all__ = [
    "SchemeRegistry",
    "register_cross_reference",
    "register_scheme",
    "scheme_registry",
]


class SchemeRegistry:
    """
    Registry for schemes and the cross-references between them.

    Example:
        >>> registry = SchemeRegistry()
        >>> registry.register(Scheme.from_pairs("Basins", [("A", "Alpha")]))
        >>> registry.list()
        ['Basins']
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._schemes: dict[str, Scheme] = {}
        self._cross_references: dict[tuple[str, str], CrossReference] = {}

    def register(self, scheme: Scheme) -> None:
        """
        Register a scheme under its name.

        Parameters
        ----------
        scheme
            Scheme to register.

        Raises
        ------
        ValueError
            If the name is already registered with a different scheme.
        """
        existing = self._schemes.get(scheme.name)
        if existing is not None and existing != scheme:
            msg = f"Scheme '{scheme.name}' is already registered with different regions"
            raise ValueError(msg)
        self._schemes[scheme.name] = scheme
        logger.debug(f"Registered scheme {scheme.name!r} ({len(scheme)} regions)")

    def get(self, name: str | Scheme) -> Scheme:
        """
        Get a scheme by name.

        A :class:`Scheme` argument is returned unchanged, so functions can
        accept either form.

        Raises
        ------
        SchemeNotFoundError
            If no scheme is registered under ``name``.
        """
        if isinstance(name, Scheme):
            return name
        if name not in self._schemes:
            raise SchemeNotFoundError(name, self.list())
        return self._schemes[name]

    def list(self) -> list[str]:
        """
        List all registered scheme names.

        Returns
        -------
        list[str]
            Sorted list of registered scheme names.
        """
        return sorted(self._schemes.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a scheme is registered."""
        return name in self._schemes

    def register_cross_reference(self, cross_reference: CrossReference) -> None:
        """
        Register a cross-reference, registering its schemes as needed.

        Raises
        ------
        ValueError
            If the scheme pair already has a different cross-reference.
        """
        self.register(cross_reference.fine)
        self.register(cross_reference.coarse)
        key = (cross_reference.fine.name, cross_reference.coarse.name)
        existing = self._cross_references.get(key)
        if existing is not None and existing != cross_reference:
            msg = f"Cross-reference '{cross_reference.label}' is already registered"
            raise ValueError(msg)
        self._cross_references[key] = cross_reference

    def get_cross_reference(
        self, fine: str | Scheme, coarse: str | Scheme
    ) -> CrossReference:
        """
        Get the cross-reference from ``fine`` onto ``coarse``.

        Raises
        ------
        SchemeNotFoundError
            If either scheme or the pair is not registered.
        """
        fine_name = self.get(fine).name
        coarse_name = self.get(coarse).name
        key = (fine_name, coarse_name)
        if key not in self._cross_references:
            raise SchemeNotFoundError(
                f"{fine_name} -> {coarse_name}", self.list_cross_references()
            )
        return self._cross_references[key]

    def list_cross_references(self) -> list[str]:
        """Sorted ``"fine -> coarse"`` labels of the registered cross-references."""
        return sorted(xref.label for xref in self._cross_references.values())


# Module-level singleton instance
scheme_registry = SchemeRegistry()


def register_scheme(scheme: Scheme) -> Scheme:
    """Register a scheme with the global registry and return it."""
    scheme_registry.register(scheme)
    return scheme


def register_cross_reference(
    cross_reference: CrossReference,
) -> CrossReference:
    """Register a cross-reference with the global registry and return it."""
    scheme_registry.register_cross_reference(cross_reference)
    return cross_reference
