# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for CSV and JSON record exporters."""
import csv
import io
import json
import logging

from horizons_ephemeris.adapters.csv_exporter import CsvRecordExporter, write_records_csv
from horizons_ephemeris.adapters.json_exporter import (
    JsonRecordExporter,
    records_to_json,
)
from horizons_ephemeris.domain.ephemeris_records import (
    ELEMENT_COLUMNS,
    OrbitalElementRecord,
    VectorRecord,
)
from horizons_ephemeris.ports.export import RecordExporter


VECTORS = [
    VectorRecord((1.870010427985840E+02, 2.0, 3.0), (-3.362664133558439E-01, 5.0, 6.0)),
    VectorRecord((7.0, 8.0, 9.0), (10.0, 11.0, 12.0)),
]
ELEMENTS = [OrbitalElementRecord(1.711794334680415E-02, 1.0, 2.0, 3.0, 4.0, 1.495485150384278E+08)]


class TestCsvRecordExporter:

    def test_implements_port(self):
        assert isinstance(CsvRecordExporter(), RecordExporter)

    def test_vector_csv(self, tmp_path):
        path = str(tmp_path / "vectors.csv")
        count = CsvRecordExporter().export(VECTORS, path)
        assert count == 2

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["x", "y", "z", "vx", "vy", "vz"]
        assert len(rows) == 3
        assert float(rows[1][0]) == 1.870010427985840E+02
        assert float(rows[1][3]) == -3.362664133558439E-01

    def test_element_csv(self, tmp_path):
        path = str(tmp_path / "elements.csv")
        CsvRecordExporter().export(ELEMENTS, path)
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0]) == list(ELEMENT_COLUMNS)
        assert float(rows[0]["semi_major_axis"]) == 1.495485150384278E+08

    def test_empty_export_writes_header_and_warns(self, tmp_path, caplog):
        path = str(tmp_path / "empty.csv")
        with caplog.at_level(logging.WARNING, logger="horizons_ephemeris.adapters.csv_exporter"):
            count = CsvRecordExporter().export([], path, columns=ELEMENT_COLUMNS)
        assert count == 0
        with open(path, encoding='utf-8') as f:
            assert f.read().strip() == ",".join(ELEMENT_COLUMNS)
        assert any("No records" in r.message for r in caplog.records)

    def test_write_to_stream(self):
        buf = io.StringIO()
        assert write_records_csv(VECTORS[1:], buf) == 1
        assert buf.getvalue().splitlines()[1] == "7.0,8.0,9.0,10.0,11.0,12.0"


class TestJsonRecordExporter:

    def test_implements_port(self):
        assert isinstance(JsonRecordExporter(), RecordExporter)

    def test_vector_json(self, tmp_path):
        path = str(tmp_path / "vectors.json")
        assert JsonRecordExporter().export(VECTORS, path) == 2
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        assert data[1] == {"position": [7.0, 8.0, 9.0], "velocity": [10.0, 11.0, 12.0]}
        assert data[0]["position"][0] == 1.870010427985840E+02

    def test_element_json(self):
        data = records_to_json(ELEMENTS)
        assert data[0]["eccentricity"] == 1.711794334680415E-02
        assert set(data[0]) == set(ELEMENT_COLUMNS)

    def test_empty(self, tmp_path):
        path = str(tmp_path / "empty.json")
        assert JsonRecordExporter().export([], path) == 0
        with open(path, encoding='utf-8') as f:
            assert json.load(f) == []
