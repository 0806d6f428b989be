# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fixed-column field reader for Horizons text reports.

Data lines carry one or more fields laid out as ``<tag><value>``, where
the tag is a literal such as ``" X ="`` or ``" EC="`` and the value is a
right-aligned number padded to ``FIELD_WIDTH`` characters:

     X = 1.870010427985840E+02 Y = 2.484687803242536E+03 Z =-5.861602653492581E+03

Pure functions only; no state, no I/O.
"""
import re

from horizons_ephemeris.domain.report_contracts import (
    FieldTagMismatch,
    NumericFormatError,
)


FIELD_WIDTH = 22

# Decimal or scientific notation. Rejects nan/inf/underscores that float() accepts.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_NUMBER_CHARS = frozenset("0123456789.+-eE")


def read_field(line: str, expected_tag: str, width: int = FIELD_WIDTH) -> tuple[str, str]:
    """
    Consume one tagged fixed-width field from the start of a line.

    Args:
        line: Remaining text of a report line.
        expected_tag: Literal tag the line must start with.
        width: Nominal width of the value following the tag.

    Returns:
        (field, remainder): the untrimmed value slice and the rest of
        the line after it.

    Raises:
        FieldTagMismatch: If the line does not start with expected_tag.
    """
    if not line.startswith(expected_tag):
        raise FieldTagMismatch(expected_tag, line)

    rest = line[len(expected_tag):]
    end = min(width, len(rest))

    # A value shifted right by extra padding spills over the nominal
    # width; keep the spilled digits with this field.
    if 0 < end < len(rest) and not rest[end - 1].isspace():
        while end < len(rest) and rest[end] in _NUMBER_CHARS:
            end += 1

    return rest[:end], rest[end:]


def parse_float(field: str, tag: str | None = None) -> float:
    """Parse a trimmed field as a float64, raising NumericFormatError otherwise."""
    text = field.strip()
    if not _NUMBER.fullmatch(text):
        raise NumericFormatError(field, tag)
    return float(text)


def read_float(line: str, expected_tag: str, width: int = FIELD_WIDTH) -> tuple[float, str]:
    """read_field followed by parse_float on the value."""
    field, rest = read_field(line, expected_tag, width)
    return parse_float(field, expected_tag), rest


def skip_field(line: str, expected_tag: str, width: int = FIELD_WIDTH) -> str:
    """Check the tag, drop the value unparsed, return the remainder."""
    _, rest = read_field(line, expected_tag, width)
    return rest
