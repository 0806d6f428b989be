# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for Horizons transport, saved reports and record export.

External dependencies (urllib, json, csv, file I/O) are confined to this layer.
"""
from horizons_ephemeris.adapters.horizons import HorizonsAdapter
from horizons_ephemeris.adapters.report_file import read_report_lines
from horizons_ephemeris.adapters.csv_exporter import CsvRecordExporter, write_records_csv
from horizons_ephemeris.adapters.json_exporter import JsonRecordExporter, write_records_json

__all__ = [
    "HorizonsAdapter",
    "read_report_lines",
    "CsvRecordExporter",
    "write_records_csv",
    "JsonRecordExporter",
    "write_records_json",
]
