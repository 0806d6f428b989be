# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the saved-report line source."""
import pytest

from horizons_ephemeris.adapters.report_file import read_report_lines
from horizons_ephemeris.domain.vector_parser import VectorRecordParser


class TestReadReportLines:

    def test_strips_line_terminators(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"$$SOE\r\ndate line \r\n$$EOE\n")
        assert list(read_report_lines(str(path))) == ["$$SOE", "date line ", "$$EOE"]

    def test_crlf_report_parses(self, tmp_path):
        """Markers match exactly once the terminators are gone."""
        path = tmp_path / "report.txt"
        lines = [
            "$$SOE",
            "2459580.500000000 = A.D. 2022-Jan-01 00:00:00.0000 TDB ",
            " X = 1.000000000000000E+00 Y = 2.000000000000000E+00 Z = 3.000000000000000E+00",
            " VX= 4.000000000000000E+00 VY= 5.000000000000000E+00 VZ= 6.000000000000000E+00",
            " LT= 0.000000000000000E+00 RG= 0.000000000000000E+00 RR= 0.000000000000000E+00",
            "$$EOE",
        ]
        path.write_bytes("\r\n".join(lines).encode("utf-8") + b"\r\n")
        records = list(VectorRecordParser(read_report_lines(str(path))))
        assert len(records) == 1
        assert records[0].velocity == (4.0, 5.0, 6.0)

    def test_is_lazy(self, tmp_path):
        path = tmp_path / "report.txt"
        path.write_text("a\nb\nc\n", encoding="utf-8")
        lines = read_report_lines(str(path))
        assert next(lines) == "a"
        lines.close()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(read_report_lines(str(tmp_path / "missing.txt")))
