# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the collaborators of the sub-solar core.

The domain calls these through plain callables and an optional sink;
adapters and tests supply the implementations.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from subsolar.domain.geo import GeoPoint
from subsolar.domain.solar import SolarDiagnostics


@runtime_checkable
class JulianDayConverter(Protocol):
    """Port for converting a UTC instant to a Julian Day Number."""

    def __call__(self, epoch: datetime) -> float:
        ...


@runtime_checkable
class DistanceCalculator(Protocol):
    """Port for spherical great-circle distance in km."""

    def __call__(self, a: GeoPoint, b: GeoPoint) -> float:
        ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Port receiving the intermediate values of each ephemeris evaluation.

    Side effect only; must not raise into the caller.
    """

    def record(self, diagnostics: SolarDiagnostics) -> None:
        ...
