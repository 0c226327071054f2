"""
Unit tests for cpcregions.catalog package.

Tests the built-in schemes, catalogue constructors, cross-references and
station reference lists.
"""

from __future__ import annotations

import logging

import pytest

from cpcregions.catalog import (
    get_cross_reference,
    new_ids,
    new_names,
    new_station_names,
    new_stations,
    new_stations_from_file,
    new_with_container_ids,
    parse_reference_lines,
    read_reference_file,
    scheme_registry,
)
from cpcregions.catalog.schemes import STATES_SCHEME
from cpcregions.exceptions import (
    DuplicateIDError,
    ReferenceFileError,
    SchemeMismatchError,
    SchemeNotFoundError,
)


class TestBuiltinSchemes:
    """Tests for the built-in partition schemes."""

    @pytest.mark.parametrize(
        ("name", "size"),
        [
            ("CensusDivisions", 9),
            ("ClimateDivisions", 344),
            ("ForecastDivisions", 102),
            ("States", 50),
            ("StatesCONUS", 48),
        ],
    )
    def test_scheme_sizes(self, name, size):
        """Each built-in scheme has its fixed number of regions."""
        regions = new_ids(name)
        assert len(regions) == size
        assert not any(regions.is_not_missing(i) for i in regions.ids())

    def test_new_ids_accepts_scheme_and_sentinel(self):
        """new_ids takes a Scheme object and an optional sentinel."""
        regions = new_ids(STATES_SCHEME, sentinel=-9999)
        assert regions.scheme is STATES_SCHEME
        assert regions.get_value("MD") == -9999

    def test_unknown_scheme_raises(self):
        """Unknown scheme names raise SchemeNotFoundError listing the choices."""
        with pytest.raises(SchemeNotFoundError, match="Scheme 'Counties' not found"):
            new_ids("Counties")

    def test_climate_division_ids(self):
        """Climate division IDs are state code * 100 + division number."""
        regions = new_ids("ClimateDivisions")
        ids = regions.ids()
        assert ids[0] == 101
        assert ids[-1] == 4810
        assert regions.exists("101")
        assert not regions.exists(2504)

    def test_state_ids_sort_lexically(self):
        """State abbreviations sort alphabetically."""
        ids = new_ids("States").ids()
        assert ids[:3] == ["AK", "AL", "AR"]
        assert ids == sorted(ids)

    def test_contiguous_states(self):
        """Alaska and Hawaii are outside the contiguous subset."""
        contiguous = new_ids("States").contiguous_ids()
        assert len(contiguous) == 48
        assert "AK" not in contiguous
        assert "HI" not in contiguous
        assert new_ids("StatesCONUS").contiguous_ids() == new_ids("StatesCONUS").ids()


class TestNewNames:
    """Tests for new_names."""

    @pytest.mark.parametrize(
        "name",
        ["CensusDivisions", "ClimateDivisions", "ForecastDivisions", "States"],
    )
    def test_names_round_trip(self, name):
        """new_names holds exactly the catalogued name of every region."""
        names = new_names(name)
        scheme = names.scheme
        assert names.is_complete()
        for region_id in names.ids():
            assert names.get_value(region_id) == scheme.name_of(region_id)

    def test_sample_names(self):
        """Names are stored as catalogued."""
        assert new_names("States").get_value("MD") == "Maryland"
        assert new_names("CensusDivisions").get_value(9) == "PACIFIC"
        assert new_names("ClimateDivisions").get_value(4807) == (
            "CHEYENNE & NIOBRARA DRAINAGE"
        )


class TestContainerIDs:
    """Tests for new_with_container_ids and cross-references."""

    def test_climate_divisions_to_states(self):
        """Climate divisions map to their state."""
        states = new_with_container_ids("ClimateDivisions", "States")
        assert states.get_value(101) == "AL"
        assert states.get_value(1801) == "MD"
        assert states.get_value(4810) == "WY"
        assert states.is_complete()

    def test_alaska_and_hawaii_have_no_divisions(self):
        """No climate division lies in Alaska or Hawaii."""
        xref = get_cross_reference("ClimateDivisions", "States")
        assert xref.members("AK") == ()
        assert xref.members("HI") == ()
        assert len(xref.members("MD")) == 8

    def test_climate_divisions_to_forecast_divisions(self):
        """Climate divisions map to forecast divisions."""
        forecast = new_with_container_ids("ClimateDivisions", "ForecastDivisions")
        assert forecast.get_value(101) == 50
        assert forecast.get_value(1801) == 7

    @pytest.mark.parametrize(
        ("state", "division"),
        [("VT", 1), ("UT", 8), ("MD", 5), ("TX", 7), ("AK", 9), ("HI", 9)],
    )
    def test_states_to_census_divisions(self, state, division):
        """States map to census divisions."""
        divisions = new_with_container_ids("States", "CensusDivisions")
        assert divisions.get_value(state) == division

    def test_states_conus_to_census_divisions(self):
        """The contiguous states map to census divisions too."""
        divisions = new_with_container_ids("StatesCONUS", "CensusDivisions")
        assert divisions.is_complete()
        assert len(divisions) == 48

    def test_every_census_division_has_states(self):
        """Each census division contains at least one state."""
        xref = get_cross_reference("States", "CensusDivisions")
        assert all(xref.members(division) for division in range(1, 10))
        assert sum(len(xref.members(d)) for d in range(1, 10)) == 50

    def test_unsupported_pair_raises(self):
        """Pairs without a cross-reference raise SchemeNotFoundError."""
        with pytest.raises(SchemeNotFoundError, match="States -> ClimateDivisions"):
            new_with_container_ids("States", "ClimateDivisions")

    def test_registry_lists_builtins(self):
        """Built-in schemes and cross-references are registered on import."""
        assert {"CensusDivisions", "States", "StatesCONUS"} <= set(
            scheme_registry.list()
        )
        assert "States -> CensusDivisions" in scheme_registry.list_cross_references()


class TestStations:
    """Tests for station schemes."""

    PAIRS = [("72201", "MIAMI"), ("72202", "KEY WEST"), ("9001", "HONOLULU")]

    def test_new_stations(self):
        """new_stations builds an empty set over the reference list."""
        stations = new_stations(self.PAIRS, "stations.txt")
        assert len(stations) == 3
        assert stations.ids() == ["9001", "72201", "72202"]
        assert stations.scheme.name == "stations.txt"
        assert stations.exists(72201)

    def test_new_station_names(self):
        """new_station_names fills values with station names."""
        stations = new_station_names(self.PAIRS, "stations.txt")
        assert stations.get_value("72202") == "KEY WEST"
        assert stations.is_complete()

    def test_duplicate_station_raises(self):
        """A repeated station ID raises DuplicateIDError."""
        with pytest.raises(DuplicateIDError, match="'72201'"):
            new_stations([*self.PAIRS, ("72201", "AGAIN")], "stations.txt")

    def test_same_source_is_compatible(self):
        """Sets built from the same reference combine."""
        first = new_stations(self.PAIRS, "stations.txt")
        second = new_stations(self.PAIRS, "stations.txt")
        first.initialize(1)
        second.initialize(2)
        assert (first + second).get_value("9001") == 3

    def test_different_sources_are_incompatible(self):
        """Sets built from different references do not combine."""
        first = new_stations(self.PAIRS, "a.txt")
        second = new_stations(self.PAIRS, "b.txt")
        with pytest.raises(SchemeMismatchError):
            first + second


class TestReferenceFiles:
    """Tests for parsing ID|Name reference lists."""

    def test_parse_lines(self):
        """Lines are split on the pipe, line endings dropped, blanks skipped."""
        pairs = parse_reference_lines(["1|ONE\r\n", "\n", "2|TWO\n"], "mem")
        assert pairs == [("1", "ONE"), ("2", "TWO")]

    def test_blank_lines_are_logged_and_counted(self, caplog):
        """Skipped blank lines are reported and keep their place in line numbers."""
        with caplog.at_level(logging.DEBUG, logger="cpcregions.catalog.stations"):
            parse_reference_lines(["1|ONE", "", "2|TWO", "   "], "mem")
        assert "mem: skipped blank lines [2, 4]" in caplog.text

        with pytest.raises(ReferenceFileError, match="mem:3: "):
            parse_reference_lines(["1|ONE", "", "2 TWO"], "mem")

    @pytest.mark.parametrize("line", ["1 ONE", "1|ONE|EXTRA"])
    def test_malformed_line_raises(self, line):
        """Each line needs exactly one pipe."""
        with pytest.raises(ReferenceFileError, match="mem:2: .* invalid regional"):
            parse_reference_lines(["0|ZERO", line], "mem")

    def test_empty_list_raises(self):
        """A reference list must define at least one region."""
        with pytest.raises(ReferenceFileError, match="does not contain any"):
            parse_reference_lines(["", "  "], "mem")

    def test_read_reference_file(self, tmp_path):
        """read_reference_file parses a file on disk."""
        reference = tmp_path / "stations.txt"
        reference.write_text("72201|MIAMI\n72202|KEY WEST\n\n")
        assert read_reference_file(reference) == [
            ("72201", "MIAMI"),
            ("72202", "KEY WEST"),
        ]

    def test_missing_file_raises(self, tmp_path):
        """An unreadable file raises ReferenceFileError."""
        with pytest.raises(ReferenceFileError, match="Could not open reference file"):
            read_reference_file(tmp_path / "missing.txt")

    def test_new_stations_from_file(self, tmp_path):
        """The file path is the identity of the scheme."""
        reference = tmp_path / "stations.txt"
        reference.write_text("72201|MIAMI\n72202|KEY WEST\n")
        stations = new_stations_from_file(reference, names=True)
        assert stations.scheme.name == str(reference)
        assert stations.get_value(72201) == "MIAMI"
        assert new_stations_from_file(reference).scheme == stations.scheme
