# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Saved-report adapter: reads a Horizons text report from disk lazily.
"""
from typing import Iterator


def read_report_lines(path: str) -> Iterator[str]:
    """
    Yield the lines of a report file without line terminators.

    The file stays open only while the generator is being consumed.

    Raises:
        FileNotFoundError: If path does not exist (on first iteration).
    """
    with open(path, encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")
