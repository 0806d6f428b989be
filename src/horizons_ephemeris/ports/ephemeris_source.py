# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for ephemeris report sources.

Adapters handle the actual HTTP/API calls and return parsed records.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from horizons_ephemeris.domain.ephemeris_records import (
    OrbitalElementRecord,
    VectorRecord,
)
from horizons_ephemeris.domain.major_bodies import MajorBody


@runtime_checkable
class EphemerisSource(Protocol):
    """Port for fetching ephemeris data for a body over a time range."""

    def fetch_vectors(
        self,
        body_id: str | int,
        start: datetime | str,
        stop: datetime | str,
        step: str = ...,
        center: str = ...,
    ) -> list[VectorRecord]:
        """Fetch position/velocity records."""
        ...

    def fetch_elements(
        self,
        body_id: str | int,
        start: datetime | str,
        stop: datetime | str,
        step: str = ...,
        center: str = ...,
    ) -> list[OrbitalElementRecord]:
        """Fetch osculating orbital element records."""
        ...

    def fetch_major_bodies(self) -> list[MajorBody]:
        """Fetch the catalog of queryable major bodies."""
        ...
