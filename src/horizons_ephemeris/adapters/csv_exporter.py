# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV record exporter.

Writes vector or orbital-element records as one CSV row per record.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from typing import Sequence, TextIO

from horizons_ephemeris.ports.export import RecordExporter
from horizons_ephemeris.domain.ephemeris_records import (
    ELEMENT_COLUMNS,
    VECTOR_COLUMNS,
    OrbitalElementRecord,
    VectorRecord,
    record_row,
)

logger = logging.getLogger(__name__)


def _columns_for(records: Sequence) -> tuple[str, ...]:
    if records and isinstance(records[0], OrbitalElementRecord):
        return ELEMENT_COLUMNS
    return VECTOR_COLUMNS


def write_records_csv(
    records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
    stream: TextIO,
    columns: tuple[str, ...] | None = None,
) -> int:
    """Write records as CSV to an open text stream; returns the row count."""
    columns = columns or _columns_for(records)
    writer = csv.writer(stream)
    writer.writerow(columns)
    for record in records:
        row = record_row(record)
        writer.writerow([repr(row[name]) for name in columns])
    return len(records)


class CsvRecordExporter(RecordExporter):
    """Exports records to CSV with full float64 precision."""

    def export(
        self,
        records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
        path: str,
        columns: tuple[str, ...] | None = None,
    ) -> int:
        if not records:
            logger.warning("No records to export, writing header only to %s", path)
        with open(path, 'w', newline='', encoding='utf-8') as f:
            return write_records_csv(records, f, columns)
