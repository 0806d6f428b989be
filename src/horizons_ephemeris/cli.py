# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for Horizons ephemeris extraction.

Usage:
    # State vectors of Earth's Moon, geocentric, one per day (CSV to stdout)
    horizons-ephemeris vectors --body 301 --start 2022-01-01 --stop 2022-01-05

    # Orbital elements of Earth around the Sun, written to JSON
    horizons-ephemeris elements --body 399 --center 500@10 \\
        --start 2022-01-01 --stop 2022-12-31 --step "30 d" -o earth.json --format json

    # Parse a report saved earlier instead of querying the API
    horizons-ephemeris vectors --input moon_vectors.txt -o moon.csv

    # List queryable major bodies
    horizons-ephemeris bodies
"""
import argparse
import logging
import sys

import numpy as np

from horizons_ephemeris.adapters import (
    CsvRecordExporter,
    HorizonsAdapter,
    JsonRecordExporter,
    read_report_lines,
    write_records_csv,
    write_records_json,
)
from horizons_ephemeris.adapters.horizons import DEFAULT_CENTER, DEFAULT_STEP
from horizons_ephemeris.domain.ephemeris_records import (
    ELEMENT_COLUMNS,
    VECTOR_COLUMNS,
    vectors_to_array,
)
from horizons_ephemeris.domain.major_bodies import MajorBody, parse_major_bodies
from horizons_ephemeris.domain.orbital_elements_parser import OrbitalElementRecordParser
from horizons_ephemeris.domain.vector_parser import VectorRecordParser


_PARSERS = {
    "vectors": VectorRecordParser,
    "elements": OrbitalElementRecordParser,
}

_COLUMNS = {
    "vectors": VECTOR_COLUMNS,
    "elements": ELEMENT_COLUMNS,
}


def run_records(
    kind: str,
    input_path: str | None = None,
    body: str | None = None,
    start: str | None = None,
    stop: str | None = None,
    step: str = DEFAULT_STEP,
    center: str = DEFAULT_CENTER,
    strict: bool = False,
    source: HorizonsAdapter | None = None,
) -> list:
    """
    Parse records of one kind from a saved report or from the Horizons API.

    Args:
        kind: "vectors" or "elements".
        input_path: Saved report to parse. Takes precedence over body.
        body, start, stop, step, center: Horizons query when no input_path.
        strict: Fail on reports that end without the end-of-data marker.
        source: Adapter to query (default: a new HorizonsAdapter).

    Returns:
        List of VectorRecord or OrbitalElementRecord.
    """
    if input_path:
        return list(_PARSERS[kind](read_report_lines(input_path), strict=strict))

    if not (body and start and stop):
        raise ValueError("Specify --input, or all of --body, --start and --stop")

    source = source or HorizonsAdapter(strict=strict)
    if kind == "vectors":
        return source.fetch_vectors(body, start, stop, step=step, center=center)
    return source.fetch_elements(body, start, stop, step=step, center=center)


def run_bodies(
    input_path: str | None = None,
    source: HorizonsAdapter | None = None,
) -> list[MajorBody]:
    """Major-body catalog from a saved listing or from the Horizons API."""
    if input_path:
        return list(parse_major_bodies(read_report_lines(input_path)))
    source = source or HorizonsAdapter()
    return source.fetch_major_bodies()


def format_body(body: MajorBody) -> str:
    return f"{body.id:>9}  {body.name:<34} {body.designation:<11}  {body.aliases}".rstrip()


def _summary(kind: str, records: list) -> str:
    label = "vector" if kind == "vectors" else "orbital element"
    text = f"Parsed {len(records)} {label} records"
    if kind == "vectors" and records:
        states = vectors_to_array(records)
        distances = np.linalg.norm(states[:, :3], axis=1)
        text += f" (distance {distances.min():.3f} to {distances.max():.3f} km)"
    return text


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--input', '-i', help="Parse a saved Horizons text report")
    query = parser.add_argument_group('Horizons query')
    query.add_argument('--body', help="Target body ID or name (e.g. 399, 301)")
    query.add_argument('--start', help="Start time (e.g. 2022-01-01)")
    query.add_argument('--stop', help="Stop time (e.g. 2022-01-31)")
    query.add_argument(
        '--step', default=DEFAULT_STEP,
        help=f"Step size (default: {DEFAULT_STEP!r})"
    )
    query.add_argument(
        '--center', default=DEFAULT_CENTER,
        help=f"Coordinate center (default: {DEFAULT_CENTER})"
    )
    parser.add_argument(
        '--strict', action='store_true', default=False,
        help="Fail if the report ends without the end-of-data marker"
    )
    parser.add_argument('--output', '-o', help="Output file (default: stdout)")
    parser.add_argument(
        '--format', choices=('csv', 'json'), default='csv',
        help="Output format (default: csv)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='horizons-ephemeris',
        description="Extract state vectors and orbital elements from JPL Horizons reports",
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    _add_query_arguments(sub.add_parser('vectors', help="Position/velocity records"))
    _add_query_arguments(sub.add_parser('elements', help="Osculating orbital elements"))

    bodies = sub.add_parser('bodies', help="List queryable major bodies")
    bodies.add_argument('--input', '-i', help="Parse a saved major-body listing")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        if args.command == 'bodies':
            for body in run_bodies(input_path=args.input):
                print(format_body(body))
            return

        records = run_records(
            args.command,
            input_path=args.input,
            body=args.body,
            start=args.start,
            stop=args.stop,
            step=args.step,
            center=args.center,
            strict=args.strict,
        )

        if args.output:
            if args.format == 'json':
                count = JsonRecordExporter().export(records, args.output)
            else:
                count = CsvRecordExporter().export(
                    records, args.output, columns=_COLUMNS[args.command],
                )
            print(f"{_summary(args.command, records)}, wrote {count} to {args.output}")
        else:
            if args.format == 'json':
                write_records_json(records, sys.stdout)
            else:
                write_records_csv(records, sys.stdout, _COLUMNS[args.command])
            print(_summary(args.command, records), file=sys.stderr)

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, ConnectionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
