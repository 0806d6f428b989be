# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Osculating orbital-element record parser (EPHEM_TYPE=ELEMENTS).

Each block is one date line plus four field lines of three fields each:

    2459580.500000000 = A.D. 2022-Jan-01 00:00:00.0000 TDB
     EC= 1.711794334680415E-02 QR= 1.469885288002562E+08 IN= 3.134746902320420E-03
     OM= 1.633896137466430E+02 W = 3.006492364709574E+02 Tp=  2459582.529491034150
     N = 1.141062582286081E-05 MA= 1.635515780663357E+02 TA= 1.641086093745476E+02
     A = 1.495485150384278E+08 AD= 1.521085012766995E+08 PR= 3.154951817730800E+07

Kept: EC, IN, OM, W, MA, A.
Tag-checked but not parsed: QR (periapsis distance), Tp (time of
periapsis), N (mean motion), TA (true anomaly), AD (apoapsis distance),
PR (sidereal orbit period).
"""
from dataclasses import dataclass
from typing import Optional

from horizons_ephemeris.domain.ephemeris_records import OrbitalElementRecord
from horizons_ephemeris.domain.fixed_field import read_float, skip_field
from horizons_ephemeris.domain.report_section import (
    AwaitingRecordOrEnd,
    RecordSectionParser,
)


@dataclass(frozen=True)
class AwaitingEccentricityInclination:
    pass


@dataclass(frozen=True)
class HaveEccInc:
    eccentricity: float
    inclination: float


@dataclass(frozen=True)
class HaveNodePerifocus:
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_perifocus: float


@dataclass(frozen=True)
class HaveMeanAnomaly:
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_perifocus: float
    mean_anomaly: float


class OrbitalElementRecordParser(RecordSectionParser[OrbitalElementRecord]):
    """
    Lazily parse OrbitalElementRecords from a Horizons elements report.

    Raises (while iterating):
        FieldTagMismatch: A field line has unexpected tags.
        NumericFormatError: A kept element value is not a number.
        TruncatedReportError: Only with strict=True, see RecordSectionParser.
    """

    record_name = "orbital element"

    def _block_start_state(self):
        return AwaitingEccentricityInclination()

    def _accumulate(self, state, line: str) -> Optional[OrbitalElementRecord]:
        if isinstance(state, AwaitingEccentricityInclination):
            ecc, rest = read_float(line, " EC=")
            rest = skip_field(rest, " QR=")
            inc, _ = read_float(rest, " IN=")
            self.state = HaveEccInc(eccentricity=ecc, inclination=inc)
            return None

        if isinstance(state, HaveEccInc):
            node, rest = read_float(line, " OM=")
            perifocus, rest = read_float(rest, " W =")
            skip_field(rest, " Tp=")
            self.state = HaveNodePerifocus(
                eccentricity=state.eccentricity,
                inclination=state.inclination,
                longitude_of_ascending_node=node,
                argument_of_perifocus=perifocus,
            )
            return None

        if isinstance(state, HaveNodePerifocus):
            rest = skip_field(line, " N =")
            anomaly, rest = read_float(rest, " MA=")
            skip_field(rest, " TA=")
            self.state = HaveMeanAnomaly(
                eccentricity=state.eccentricity,
                inclination=state.inclination,
                longitude_of_ascending_node=state.longitude_of_ascending_node,
                argument_of_perifocus=state.argument_of_perifocus,
                mean_anomaly=anomaly,
            )
            return None

        if isinstance(state, HaveMeanAnomaly):
            semi_major_axis, rest = read_float(line, " A =")
            rest = skip_field(rest, " AD=")
            skip_field(rest, " PR=")
            self.state = AwaitingRecordOrEnd()
            return OrbitalElementRecord(
                eccentricity=state.eccentricity,
                inclination=state.inclination,
                longitude_of_ascending_node=state.longitude_of_ascending_node,
                argument_of_perifocus=state.argument_of_perifocus,
                mean_anomaly=state.mean_anomaly,
                semi_major_axis=semi_major_axis,
            )

        raise AssertionError(f"Unhandled orbital element parser state: {state!r}")
