# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Record types emitted by the Horizons report parsers.

Units follow the Horizons defaults for OUT_UNITS='KM-S':
positions and distances in km, velocities in km/s, angles in degrees.
"""
from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class VectorRecord:
    """Position (km) and velocity (km/s) of a body at one epoch."""
    position: tuple[float, float, float]
    velocity: tuple[float, float, float]

    @property
    def distance_km(self) -> float:
        return float(np.linalg.norm(self.position))

    @property
    def speed_km_s(self) -> float:
        return float(np.linalg.norm(self.velocity))

    def as_array(self) -> np.ndarray:
        """State vector as a (6,) float64 array: x, y, z, vx, vy, vz."""
        return np.array(self.position + self.velocity, dtype=np.float64)


@dataclass(frozen=True)
class OrbitalElementRecord:
    """Classical osculating elements of a body at one epoch."""
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_perifocus: float
    mean_anomaly: float
    semi_major_axis: float


ELEMENT_COLUMNS = (
    "eccentricity",
    "inclination",
    "longitude_of_ascending_node",
    "argument_of_perifocus",
    "mean_anomaly",
    "semi_major_axis",
)

VECTOR_COLUMNS = ("x", "y", "z", "vx", "vy", "vz")


def vectors_to_array(records: Iterable[VectorRecord]) -> np.ndarray:
    """Stack vector records into an (N, 6) array; (0, 6) when empty."""
    rows = [r.position + r.velocity for r in records]
    if not rows:
        return np.empty((0, 6), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def elements_to_array(records: Iterable[OrbitalElementRecord]) -> np.ndarray:
    """Stack element records into an (N, 6) array in ELEMENT_COLUMNS order."""
    rows = [tuple(getattr(r, name) for name in ELEMENT_COLUMNS) for r in records]
    if not rows:
        return np.empty((0, 6), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def record_row(record: VectorRecord | OrbitalElementRecord) -> dict[str, float]:
    """Flatten a record into a column-name → value mapping."""
    if isinstance(record, VectorRecord):
        return dict(zip(VECTOR_COLUMNS, record.position + record.velocity))
    return {name: getattr(record, name) for name in ELEMENT_COLUMNS}
