# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON record exporter.

Writes records as a JSON array of objects keyed by field name.
"""
import json
from dataclasses import asdict
from typing import Any, Sequence, TextIO

from horizons_ephemeris.ports.export import RecordExporter
from horizons_ephemeris.domain.ephemeris_records import (
    OrbitalElementRecord,
    VectorRecord,
)


def records_to_json(
    records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
) -> list[dict[str, Any]]:
    """Convert records to JSON-ready dicts (positions become lists)."""
    out = []
    for record in records:
        data = asdict(record)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        out.append(data)
    return out


def write_records_json(
    records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
    stream: TextIO,
) -> int:
    json.dump(records_to_json(records), stream, indent=2)
    stream.write("\n")
    return len(records)


class JsonRecordExporter(RecordExporter):
    """Exports records to a JSON file."""

    def export(
        self,
        records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
        path: str,
    ) -> int:
        with open(path, 'w', encoding='utf-8') as f:
            return write_records_json(records, f)
