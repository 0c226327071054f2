"""
Scheme descriptors for the regions data model.

A :class:`Scheme` is the identity tag binding a RegionSet to a fixed, ordered
set of region IDs (for example "States", or a specific station reference
list). A :class:`CrossReference` maps every region of a fine scheme onto the
region of a coarse scheme that contains it.

Schemes are plain values: adding a new partition means building a new
``Scheme``, not writing a new class.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import numpy as np

from .exceptions import DuplicateIDError, InvalidRegionIDError, SchemeMismatchError
from .numeric import looks_like_number, to_number

__all__ = ["CrossReference", "Scheme"]


@dataclass(frozen=True)
class Scheme:
    """
    A named, immutable set of region IDs with their display names.

    Parameters
    ----------
    name
        Scheme identity. For station schemes this is the reference source.
    ids
        Region IDs in catalogue order.
    names
        Display names, parallel to ``ids``.
    ids_numeric
        Whether IDs sort numerically (otherwise lexically).
    contiguous_ids
        Optional subset of ``ids`` forming the contiguous U.S. portion of the
        scheme. ``None`` means the whole scheme is contiguous.

    Raises
    ------
    DuplicateIDError
        If an ID appears more than once.
    ValueError
        If ``names`` and ``ids`` differ in length.
    InvalidRegionIDError
        If ``contiguous_ids`` contains an ID outside ``ids``.
    """

    name: str
    ids: tuple[Any, ...]
    names: tuple[str, ...]
    ids_numeric: bool
    contiguous_ids: tuple[Any, ...] | None = None
    _lookup: dict[Any, Any] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )
    _ordered: tuple[Any, ...] = field(
        init=False, repr=False, compare=False, hash=False, default=()
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(self.ids))
        object.__setattr__(self, "names", tuple(self.names))

        duplicates = [i for i, count in Counter(self.ids).items() if count > 1]
        if duplicates:
            raise DuplicateIDError(duplicates, self.name)
        if len(self.names) != len(self.ids):
            msg = (
                f"Scheme '{self.name}' has {len(self.ids)} IDs "
                f"but {len(self.names)} names"
            )
            raise ValueError(msg)

        lookup: dict[Any, Any] = {}
        for region_id in self.ids:
            lookup.setdefault(str(region_id), region_id)
            if self.ids_numeric and looks_like_number(region_id):
                lookup.setdefault(to_number(region_id), region_id)
        for region_id in self.ids:
            lookup[region_id] = region_id
        object.__setattr__(self, "_lookup", lookup)

        if self.ids_numeric:
            ordered = sorted(self.ids, key=to_number)
        else:
            ordered = sorted(self.ids, key=str)
        object.__setattr__(self, "_ordered", tuple(ordered))

        if self.contiguous_ids is not None:
            contiguous = tuple(self.contiguous_ids)
            for region_id in contiguous:
                if region_id not in lookup:
                    raise InvalidRegionIDError(region_id, self.name)
            object.__setattr__(self, "contiguous_ids", contiguous)

    @classmethod
    def from_pairs(
        cls,
        name: str,
        pairs: Iterable[tuple[Any, str]],
        contiguous_ids: Iterable[Any] | None = None,
    ) -> Scheme:
        """
        Build a scheme from an ordered sequence of ``(ID, Name)`` pairs.

        ID numeric-ness is inferred: the scheme sorts numerically only if every
        ID looks like a number.
        """
        pairs = list(pairs)
        ids = tuple(region_id for region_id, _ in pairs)
        names = tuple(region_name for _, region_name in pairs)
        ids_numeric = bool(ids) and all(looks_like_number(i) for i in ids)
        return cls(
            name=name,
            ids=ids,
            names=names,
            ids_numeric=ids_numeric,
            contiguous_ids=None if contiguous_ids is None else tuple(contiguous_ids),
        )

    def __len__(self) -> int:
        return len(self.ids)

    def resolve(self, region_id: Any) -> Any:
        """
        Return the canonical form of ``region_id``, or ``None`` if unknown.

        The text form of an ID is accepted (``"101"`` resolves to ``101``), as
        is any numeric spelling of a numeric ID (``"0101"``, ``101.0``).
        Booleans are never region IDs.
        """
        if isinstance(region_id, (bool, np.bool_)):
            return None
        try:
            return self._lookup[region_id]
        except (KeyError, TypeError):
            pass
        text = str(region_id).strip()
        if text in self._lookup:
            return self._lookup[text]
        if self.ids_numeric and looks_like_number(region_id):
            return self._lookup.get(to_number(region_id))
        return None

    def sorted_ids(self) -> list[Any]:
        """IDs sorted numerically ascending, or lexically for non-numeric IDs."""
        return list(self._ordered)

    def sorted_contiguous_ids(self) -> list[Any]:
        """Sorted IDs restricted to the contiguous subset."""
        if self.contiguous_ids is None:
            return self.sorted_ids()
        contiguous = set(self.contiguous_ids)
        return [i for i in self._ordered if i in contiguous]

    def name_of(self, region_id: Any) -> str:
        """
        Display name of a region.

        Raises
        ------
        InvalidRegionIDError
            If the ID is not part of the scheme.
        """
        canonical = self.resolve(region_id)
        if canonical is None:
            raise InvalidRegionIDError(region_id, self.name)
        return self.names[self.ids.index(canonical)]


@dataclass(frozen=True)
class CrossReference:
    """
    Containment mapping from a fine scheme onto a coarse scheme.

    Parameters
    ----------
    fine
        Scheme of the contained regions (e.g. climate divisions).
    coarse
        Scheme of the containing regions (e.g. states).
    mapping
        Fine ID to coarse ID. Every fine region must be mapped.

    Raises
    ------
    InvalidRegionIDError
        If the mapping names an ID outside either scheme.
    SchemeMismatchError
        If some fine regions are not mapped.
    """

    fine: Scheme
    coarse: Scheme
    mapping: Mapping[Any, Any] = field(hash=False)
    _members: Mapping[Any, tuple[Any, ...]] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        resolved: dict[Any, Any] = {}
        for fine_id, coarse_id in self.mapping.items():
            canonical_fine = self.fine.resolve(fine_id)
            if canonical_fine is None:
                raise InvalidRegionIDError(fine_id, self.fine.name)
            canonical_coarse = self.coarse.resolve(coarse_id)
            if canonical_coarse is None:
                raise InvalidRegionIDError(coarse_id, self.coarse.name)
            resolved[canonical_fine] = canonical_coarse

        unmapped = [i for i in self.fine.ids if i not in resolved]
        if unmapped:
            msg = (
                f"Cross-reference {self.fine.name} -> {self.coarse.name} does not "
                f"map {len(unmapped)} region(s): {unmapped[:5]!r}"
            )
            raise SchemeMismatchError(msg)

        members: dict[Any, list[Any]] = {i: [] for i in self.coarse.ids}
        for fine_id in self.fine.sorted_ids():
            members[resolved[fine_id]].append(fine_id)

        object.__setattr__(self, "mapping", MappingProxyType(resolved))
        object.__setattr__(
            self,
            "_members",
            MappingProxyType({k: tuple(v) for k, v in members.items()}),
        )

    @property
    def label(self) -> str:
        """Registry key of the form ``"fine -> coarse"``."""
        return f"{self.fine.name} -> {self.coarse.name}"

    def container_of(self, fine_id: Any) -> Any:
        """Coarse ID containing ``fine_id``."""
        canonical = self.fine.resolve(fine_id)
        if canonical is None:
            raise InvalidRegionIDError(fine_id, self.fine.name)
        return self.mapping[canonical]

    def members(self, coarse_id: Any) -> tuple[Any, ...]:
        """Fine IDs contained in ``coarse_id``, in sorted order."""
        canonical = self.coarse.resolve(coarse_id)
        if canonical is None:
            raise InvalidRegionIDError(coarse_id, self.coarse.name)
        return self._members[canonical]
