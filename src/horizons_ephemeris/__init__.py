# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Horizons Ephemeris

Extract state vectors and osculating orbital elements from JPL Horizons
plain-text ephemeris reports. The record parsers are lazy iterators over
any sequence of report lines; the Horizons adapter fetches reports over
HTTP, and the exporters write parsed records to CSV or JSON.
"""

from horizons_ephemeris.domain.report_contracts import (
    HorizonsParseError,
    FieldTagMismatch,
    NumericFormatError,
    TruncatedReportError,
)
from horizons_ephemeris.domain.fixed_field import (
    FIELD_WIDTH,
    read_field,
    parse_float,
)
from horizons_ephemeris.domain.ephemeris_records import (
    VectorRecord,
    OrbitalElementRecord,
    vectors_to_array,
    elements_to_array,
)
from horizons_ephemeris.domain.report_section import (
    START_OF_DATA,
    END_OF_DATA,
)
from horizons_ephemeris.domain.vector_parser import VectorRecordParser
from horizons_ephemeris.domain.orbital_elements_parser import OrbitalElementRecordParser
from horizons_ephemeris.domain.major_bodies import (
    MajorBody,
    parse_major_bodies,
)

__version__ = "0.3.0"

__all__ = [
    "HorizonsParseError",
    "FieldTagMismatch",
    "NumericFormatError",
    "TruncatedReportError",
    "FIELD_WIDTH",
    "read_field",
    "parse_float",
    "VectorRecord",
    "OrbitalElementRecord",
    "vectors_to_array",
    "elements_to_array",
    "START_OF_DATA",
    "END_OF_DATA",
    "VectorRecordParser",
    "OrbitalElementRecordParser",
    "MajorBody",
    "parse_major_bodies",
]
