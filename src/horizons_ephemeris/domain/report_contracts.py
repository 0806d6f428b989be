# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error contracts for Horizons text report parsing.

The report is machine-generated with a rigid layout, so every error here
is fatal to the parse in progress. Nothing is resynchronized or skipped.
"""


class HorizonsParseError(ValueError):
    """Base class for all report parsing failures."""


class FieldTagMismatch(HorizonsParseError):
    """A line did not start with the field tag the parser expected."""

    def __init__(self, expected_tag: str, line: str):
        self.expected_tag = expected_tag
        self.line = line
        super().__init__(
            f"Expected field tag {expected_tag!r} at start of {line!r}"
        )


class NumericFormatError(HorizonsParseError):
    """A field value is not a decimal or scientific-notation number."""

    def __init__(self, text: str, tag: str | None = None):
        self.text = text
        self.tag = tag
        where = f" for field {tag!r}" if tag else ""
        super().__init__(f"Invalid numeric value{where}: {text!r}")


class TruncatedReportError(HorizonsParseError):
    """Input ended inside the data section, before the end-of-data marker."""
