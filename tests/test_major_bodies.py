# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for major-body catalog parsing."""
from pathlib import Path

import pytest

from horizons_ephemeris.domain.major_bodies import MajorBody, parse_major_bodies
from horizons_ephemeris.domain.report_contracts import HorizonsParseError


DATA_DIR = Path(__file__).parent / "data"


def _catalog_lines():
    return (DATA_DIR / "major_bodies.txt").read_text(encoding="utf-8").splitlines()


class TestParseMajorBodies:

    def test_all_rows_parsed(self):
        bodies = list(parse_major_bodies(_catalog_lines()))
        assert [b.id for b in bodies] == [0, 1, 10, 199, 301, 399, -96]

    def test_row_columns(self):
        bodies = {b.id: b for b in parse_major_bodies(_catalog_lines())}
        assert bodies[0] == MajorBody(0, "Solar System Barycenter", "", "SSB")
        assert bodies[1] == MajorBody(1, "Mercury Barycenter", "", "")
        assert bodies[399].aliases == "Geocenter"
        assert bodies[-96] == MajorBody(-96, "Parker Solar Probe (spacecraft)", "2018-065A", "SPP")

    def test_stops_at_blank_line(self):
        """The match-count footer is not a row."""
        bodies = list(parse_major_bodies(_catalog_lines()))
        assert all("Number of matches" not in b.name for b in bodies)

    def test_no_header_yields_nothing(self):
        assert list(parse_major_bodies(["$$SOE", "$$EOE"])) == []

    def test_header_without_rule(self):
        assert list(parse_major_bodies(["  ID#      Name"])) == []

    def test_table_at_end_of_input(self):
        lines = _catalog_lines()[:8]
        assert [b.id for b in parse_major_bodies(lines)] == [0, 1, 10]

    def test_lazy(self):
        bodies = parse_major_bodies(iter(_catalog_lines()))
        assert next(bodies).id == 0

    def test_bad_id_raises(self):
        lines = _catalog_lines()
        lines[6] = "      abc  Mercury Barycenter"
        with pytest.raises(HorizonsParseError):
            list(parse_major_bodies(lines))

    def test_malformed_rule_raises(self):
        with pytest.raises(HorizonsParseError):
            list(parse_major_bodies(["  ID#  Name", "  =====  ====", "  1  x"]))
