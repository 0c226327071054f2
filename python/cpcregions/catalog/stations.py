"""
User-defined station schemes.

Station-like schemes are defined by a reference list of ``ID|Name`` lines, one
region per line. The identity of such a scheme is the identity of its
reference source (normally the file path), so two station RegionSets can be
combined only if they were built from the same reference.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..exceptions import ReferenceFileError
from ..regionset import RegionSet
from ..scheme import Scheme

logger = logging.getLogger(__name__)

__all__ = [
    "new_station_names",
    "new_stations",
    "new_stations_from_file",
    "parse_reference_lines",
    "read_reference_file",
    "station_scheme",
]


def parse_reference_lines(lines: Iterable[str], source: str) -> list[tuple[str, str]]:
    """
    Parse ``ID|Name`` reference lines.

    Parameters
    ----------
    lines
        Lines of the reference list. Line endings are stripped. Blank lines
        are skipped (and logged at debug level) but still count toward the
        line numbers in error messages.
    source
        Identity of the list, used in error messages.

    Returns
    -------
    list[tuple[str, str]]
        ``(ID, Name)`` pairs in file order.

    Raises
    ------
    ReferenceFileError
        If a line does not contain exactly one ``|`` or the list is empty.

    Examples
    --------
    >>> parse_reference_lines(["72201|MIAMI", "72202|KEY WEST"], "ref.txt")
    [('72201', 'MIAMI'), ('72202', 'KEY WEST')]
    """
    pairs = []
    blank = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            blank.append(line_number)
            continue
        if line.count("|") != 1:
            msg = f"{source}:{line_number}: {line!r} is an invalid regional reference"
            raise ReferenceFileError(msg)
        region_id, name = line.split("|")
        pairs.append((region_id, name))

    if blank:
        logger.debug(f"{source}: skipped blank lines {blank}")
    if not pairs:
        msg = f"{source} does not contain any regional references"
        raise ReferenceFileError(msg)
    return pairs


def read_reference_file(path: str | Path) -> list[tuple[str, str]]:
    """
    Read a reference file of ``ID|Name`` lines, skipping blank lines.

    Raises
    ------
    ReferenceFileError
        If the file is missing, empty or malformed.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as err:
        msg = f"Could not open reference file {path}: {err}"
        raise ReferenceFileError(msg) from err
    return parse_reference_lines(text.splitlines(), str(path))


def station_scheme(pairs: Iterable[tuple[Any, str]], source: str) -> Scheme:
    """
    Build a station scheme from ``(ID, Name)`` pairs.

    Parameters
    ----------
    pairs
        Ordered reference pairs.
    source
        Identity of the reference list; becomes the scheme name.

    Raises
    ------
    DuplicateIDError
        If an ID appears more than once.
    """
    scheme = Scheme.from_pairs(source, pairs)
    logger.debug(f"Built station scheme from {source} with {len(scheme)} regions")
    return scheme


def new_stations(pairs: Iterable[tuple[Any, str]], source: str) -> RegionSet:
    """RegionSet over a station scheme with every value absent."""
    return RegionSet(station_scheme(pairs, source))


def new_station_names(pairs: Iterable[tuple[Any, str]], source: str) -> RegionSet:
    """RegionSet over a station scheme with each value set to the region name."""
    scheme = station_scheme(pairs, source)
    return RegionSet(scheme, dict(zip(scheme.ids, scheme.names)))


def new_stations_from_file(path: str | Path, *, names: bool = False) -> RegionSet:
    """
    RegionSet over the station scheme defined by a reference file.

    Parameters
    ----------
    path
        Reference file of ``ID|Name`` lines. Its path is the scheme identity.
    names
        Fill values with region names instead of leaving them absent.
    """
    pairs = read_reference_file(path)
    if names:
        return new_station_names(pairs, str(path))
    return new_stations(pairs, str(path))
