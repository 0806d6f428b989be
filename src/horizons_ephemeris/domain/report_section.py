# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Data-section framing shared by the Horizons record parsers.

A Horizons text report wraps its data between two sentinel lines:

    $$SOE
    <date line>
    <record lines>
    <date line>
    <record lines>
    $$EOE

Everything before ``$$SOE`` is header text and is ignored. Inside the
section, each record block starts with a date/label line that is
discarded, followed by a fixed number of field lines whose layout is
defined by the concrete parser.

The parser is an iterator driven by an explicit state value: each pull
on the underlying line sequence performs exactly one state transition,
and a record is returned only on the last line of its block.
"""
import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from horizons_ephemeris.domain.report_contracts import (
    HorizonsParseError,
    TruncatedReportError,
)


_log = logging.getLogger(__name__)

START_OF_DATA = "$$SOE"
END_OF_DATA = "$$EOE"

R = TypeVar("R")


@dataclass(frozen=True)
class AwaitingStart:
    """Header text; waiting for the start-of-data marker."""


@dataclass(frozen=True)
class AwaitingRecordOrEnd:
    """Between blocks; the next line is a date line or the end marker."""


@dataclass(frozen=True)
class Finished:
    """Terminal. No further lines are pulled."""


class RecordSectionParser(Generic[R]):
    """
    Base iterator for record-per-block parsers.

    Subclasses provide the first accumulation state of a block and the
    transitions out of every accumulation state.

    Args:
        lines: Report lines without line terminators. Consumed lazily.
        strict: Raise TruncatedReportError if the input ends after the
            start marker without reaching the end marker. When False,
            the sequence just ends and a warning is logged.
    """

    record_name = "record"

    def __init__(self, lines: Iterable[str], strict: bool = False):
        self._lines: Iterator[str] = iter(lines)
        self._strict = strict
        self.state = AwaitingStart()

    def __iter__(self):
        return self

    def __next__(self) -> R:
        while not isinstance(self.state, Finished):
            line = next(self._lines, None)
            if line is None:
                self._end_of_input()
                break

            try:
                record = self._step(line)
            except HorizonsParseError:
                self.state = Finished()
                raise

            if record is not None:
                return record

        raise StopIteration

    @property
    def finished(self) -> bool:
        return isinstance(self.state, Finished)

    def _step(self, line: str) -> Optional[R]:
        state = self.state

        if isinstance(state, AwaitingStart):
            if line == START_OF_DATA:
                _log.debug("Start of %s data section", self.record_name)
                self.state = AwaitingRecordOrEnd()
            return None

        if isinstance(state, AwaitingRecordOrEnd):
            if line == END_OF_DATA:
                _log.debug("End of %s data section", self.record_name)
                self.state = Finished()
            else:
                # Date/label line; content not used.
                self.state = self._block_start_state()
            return None

        return self._accumulate(state, line)

    def _end_of_input(self) -> None:
        state = self.state
        self.state = Finished()

        if isinstance(state, AwaitingStart):
            return

        partial = not isinstance(state, AwaitingRecordOrEnd)
        message = (
            f"Report ended before {END_OF_DATA}"
            + (f" inside a {self.record_name} block" if partial else "")
        )
        if self._strict:
            raise TruncatedReportError(message)
        _log.warning("%s; %s sequence truncated", message, self.record_name)

    def _block_start_state(self):
        raise NotImplementedError

    def _accumulate(self, state, line: str) -> Optional[R]:
        raise NotImplementedError
