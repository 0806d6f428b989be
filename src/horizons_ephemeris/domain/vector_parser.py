# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
State-vector record parser (EPHEM_TYPE=VECTORS, VEC_TABLE=3).

Each block is one date line plus three field lines:

    2459580.500000000 = A.D. 2022-Jan-01 00:00:00.0000 TDB
     X = 1.870010427985840E+02 Y = 2.484687803242536E+03 Z =-5.861602653492581E+03
     VX=-3.362664133558439E-01 VY= 1.344100266143978E-02 VZ=-5.030275220358716E-03
     LT= 2.125033058797660E-02 RG= 6.370682555316624E+03 RR=-1.226014236209006E-02

The LT/RG/RR line is consumed without inspection.
"""
from dataclasses import dataclass
from typing import Optional

from horizons_ephemeris.domain.ephemeris_records import VectorRecord
from horizons_ephemeris.domain.fixed_field import read_float
from horizons_ephemeris.domain.report_section import (
    AwaitingRecordOrEnd,
    RecordSectionParser,
)


@dataclass(frozen=True)
class AwaitingPosition:
    pass


@dataclass(frozen=True)
class HavePosition:
    position: tuple[float, float, float]


@dataclass(frozen=True)
class Complete:
    position: tuple[float, float, float]
    velocity: tuple[float, float, float]


def _read_triplet(line: str, tags: tuple[str, str, str]) -> tuple[float, float, float]:
    a, rest = read_float(line, tags[0])
    b, rest = read_float(rest, tags[1])
    c, _ = read_float(rest, tags[2])
    return (a, b, c)


class VectorRecordParser(RecordSectionParser[VectorRecord]):
    """
    Lazily parse VectorRecords from the lines of a Horizons vector report.

    Example:
        for record in VectorRecordParser(text.splitlines()):
            print(record.position, record.velocity)

    Raises (while iterating):
        FieldTagMismatch: A position/velocity line has unexpected tags.
        NumericFormatError: A position/velocity value is not a number.
        TruncatedReportError: Only with strict=True, see RecordSectionParser.
    """

    record_name = "vector"

    def _block_start_state(self):
        return AwaitingPosition()

    def _accumulate(self, state, line: str) -> Optional[VectorRecord]:
        if isinstance(state, AwaitingPosition):
            self.state = HavePosition(
                position=_read_triplet(line, (" X =", " Y =", " Z =")),
            )
            return None

        if isinstance(state, HavePosition):
            self.state = Complete(
                position=state.position,
                velocity=_read_triplet(line, (" VX=", " VY=", " VZ=")),
            )
            return None

        if isinstance(state, Complete):
            self.state = AwaitingRecordOrEnd()
            return VectorRecord(position=state.position, velocity=state.velocity)

        raise AssertionError(f"Unhandled vector parser state: {state!r}")
