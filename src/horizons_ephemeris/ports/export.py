# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for ephemeris record export.
"""
from typing import Protocol, Sequence, runtime_checkable

from horizons_ephemeris.domain.ephemeris_records import (
    OrbitalElementRecord,
    VectorRecord,
)


@runtime_checkable
class RecordExporter(Protocol):
    """Port for exporting parsed records to a file."""

    def export(
        self,
        records: Sequence[VectorRecord] | Sequence[OrbitalElementRecord],
        path: str,
    ) -> int:
        """
        Write records to a file.

        All records must be of one type; the columns follow that type.

        Returns:
            Number of records exported.
        """
        ...
