# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Major-body catalog parsing (Horizons COMMAND='MB').

The catalog is a fixed-column table whose column extents are given by
the dashed rule under the header:

      ID#      Name                               Designation  IAU/aliases/other
      -------  ---------------------------------- -----------  -------------------
            0  Solar System Barycenter                         SSB
           10  Sun                                             Sol
          399  Earth                                           Geocenter

The table ends at the first blank line after the rule.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from horizons_ephemeris.domain.report_contracts import HorizonsParseError


_log = logging.getLogger(__name__)

_RULE = re.compile(r"-+")


@dataclass(frozen=True)
class MajorBody:
    """One row of the major-body catalog."""
    id: int
    name: str
    designation: str
    aliases: str


def _column_starts(rule_line: str) -> list[int]:
    starts = [m.start() for m in _RULE.finditer(rule_line)]
    if len(starts) < 2:
        raise HorizonsParseError(f"Malformed catalog column rule: {rule_line!r}")
    # First column is right-aligned and may start left of its dashes.
    starts[0] = 0
    return starts


def _slice_columns(line: str, starts: list[int]) -> list[str]:
    bounds = starts[1:] + [len(line)]
    return [line[s:e].strip() for s, e in zip(starts, bounds)]


def _parse_row(line: str, starts: list[int]) -> MajorBody:
    cells = _slice_columns(line, starts)
    cells += [""] * (4 - len(cells))
    body_id, name, designation, aliases = cells[:4]
    try:
        parsed_id = int(body_id)
    except ValueError:
        raise HorizonsParseError(f"Invalid body ID {body_id!r} in {line!r}") from None
    return MajorBody(id=parsed_id, name=name, designation=designation, aliases=aliases)


def parse_major_bodies(lines: Iterable[str]) -> Iterator[MajorBody]:
    """
    Lazily parse MajorBody rows from the lines of a catalog listing.

    Text before the ``ID#`` header is ignored. Input without a header
    yields nothing.

    Raises (while iterating):
        HorizonsParseError: If the rule line or a body ID is malformed.
    """
    it = iter(lines)

    for line in it:
        if line.strip().startswith("ID#"):
            break
    else:
        _log.debug("No major-body catalog header found")
        return

    rule = next(it, None)
    if rule is None:
        return
    starts = _column_starts(rule)

    count = 0
    for line in it:
        if not line.strip():
            break
        yield _parse_row(line, starts)
        count += 1

    _log.debug("Parsed %d major bodies", count)
