# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JPL Horizons adapter: fetches text ephemeris reports and parses them.

External dependencies (urllib) are confined to this layer.

Data source:
    Horizons API — https://ssd.jpl.nasa.gov/api/horizons.api
    Docs: https://ssd-api.jpl.nasa.gov/doc/horizons.html

Requests use format=text so the response body is the plain report the
domain parsers understand. Defaults follow Horizons: geocentric center
(500@399), ecliptic reference plane, km and km/s output units.
"""
import logging
import urllib.error
import urllib.request
from datetime import datetime
from urllib.parse import urlencode

from horizons_ephemeris.ports.ephemeris_source import EphemerisSource
from horizons_ephemeris.domain.ephemeris_records import (
    OrbitalElementRecord,
    VectorRecord,
)
from horizons_ephemeris.domain.major_bodies import MajorBody, parse_major_bodies
from horizons_ephemeris.domain.orbital_elements_parser import OrbitalElementRecordParser
from horizons_ephemeris.domain.vector_parser import VectorRecordParser


_log = logging.getLogger(__name__)

BASE_URL = "https://ssd.jpl.nasa.gov/api/horizons.api"
DEFAULT_CENTER = "500@399"
DEFAULT_STEP = "1 d"
USER_AGENT = "horizons-ephemeris/0.3"


def format_time(value: datetime | str) -> str:
    """Render a datetime as a Horizons time string; strings pass through."""
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value


def _quoted(value: str | int) -> str:
    return f"'{value}'"


class HorizonsAdapter(EphemerisSource):
    """
    Fetches ephemeris reports from the JPL Horizons API.

    Args:
        base_url: Horizons API endpoint.
        timeout: HTTP request timeout in seconds.
        strict: Passed to the record parsers; raise on reports that end
            without the end-of-data marker.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: int = 30, strict: bool = False):
        self._base_url = base_url
        self._timeout = timeout
        self._strict = strict

    def ephemeris_params(
        self,
        body_id: str | int,
        ephem_type: str,
        start: datetime | str,
        stop: datetime | str,
        step: str = DEFAULT_STEP,
        center: str = DEFAULT_CENTER,
    ) -> dict[str, str]:
        """Query parameters for one VECTORS or ELEMENTS report."""
        params = {
            "format": "text",
            "COMMAND": _quoted(body_id),
            "OBJ_DATA": "'NO'",
            "MAKE_EPHEM": "'YES'",
            "EPHEM_TYPE": _quoted(ephem_type),
            "CENTER": _quoted(center),
            "START_TIME": _quoted(format_time(start)),
            "STOP_TIME": _quoted(format_time(stop)),
            "STEP_SIZE": _quoted(step),
            "OUT_UNITS": "'KM-S'",
            "CSV_FORMAT": "'NO'",
        }
        if ephem_type == "VECTORS":
            params["VEC_TABLE"] = "'3'"
        return params

    def fetch_report_lines(self, params: dict[str, str]) -> list[str]:
        """Fetch one text report and split it into lines."""
        return self._fetch_text(params).splitlines()

    def fetch_vectors(
        self,
        body_id: str | int,
        start: datetime | str,
        stop: datetime | str,
        step: str = DEFAULT_STEP,
        center: str = DEFAULT_CENTER,
    ) -> list[VectorRecord]:
        params = self.ephemeris_params(body_id, "VECTORS", start, stop, step, center)
        lines = self.fetch_report_lines(params)
        return list(VectorRecordParser(lines, strict=self._strict))

    def fetch_elements(
        self,
        body_id: str | int,
        start: datetime | str,
        stop: datetime | str,
        step: str = DEFAULT_STEP,
        center: str = DEFAULT_CENTER,
    ) -> list[OrbitalElementRecord]:
        params = self.ephemeris_params(body_id, "ELEMENTS", start, stop, step, center)
        lines = self.fetch_report_lines(params)
        return list(OrbitalElementRecordParser(lines, strict=self._strict))

    def fetch_major_bodies(self) -> list[MajorBody]:
        lines = self.fetch_report_lines({"format": "text", "COMMAND": "'MB'"})
        return list(parse_major_bodies(lines))

    def _fetch_text(self, params: dict[str, str]) -> str:
        """GET the Horizons API and return the decoded body."""
        url = f"{self._base_url}?{urlencode(params)}"
        _log.debug("Requesting %s", url)
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                return response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise ConnectionError(f"Horizons API error {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise ConnectionError(f"Horizons connection failed: {e.reason}") from e
