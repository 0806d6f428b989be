# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for ephemeris sources and record export.

Adapters implement these to talk to Horizons or to write files.
"""
from horizons_ephemeris.ports.ephemeris_source import EphemerisSource
from horizons_ephemeris.ports.export import RecordExporter

__all__ = ["EphemerisSource", "RecordExporter"]
