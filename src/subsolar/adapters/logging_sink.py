# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Diagnostic sink backed by the standard logging module.

Keeps logging out of the domain layer: the ephemeris hands its intermediate
values to this adapter, which formats one record per evaluation.
"""
import logging

from subsolar.domain.solar import SolarDiagnostics
from subsolar.ports import DiagnosticSink

logger = logging.getLogger(__name__)


class LoggingDiagnosticSink(DiagnosticSink):
    """Logs sidereal time, RA/Dec and the resulting sub-solar point."""

    def __init__(self, log: logging.Logger | None = None, level: int = logging.INFO):
        self._log = log or logger
        self._level = level

    def record(self, diagnostics: SolarDiagnostics) -> None:
        self._log.log(
            self._level,
            "Sidereal time is %.6f h, Sun RA/Dec is %.6f h/%.6f deg, "
            "sub-solar lat/lon is %.6f/%.6f",
            diagnostics.sidereal_time_h,
            diagnostics.right_ascension_h,
            diagnostics.declination_deg,
            diagnostics.sub_solar.lat_deg,
            diagnostics.sub_solar.lon_deg,
        )
