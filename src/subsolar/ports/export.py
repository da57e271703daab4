# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for twilight overlay export.

Adapters implement this to write a twilight grid (and optionally the
terminator line) in a map format.
"""
from typing import Protocol, Sequence, runtime_checkable

from subsolar.domain.darkness import ShadingConfig, TwilightGrid
from subsolar.domain.geo import GeoPoint


@runtime_checkable
class TwilightExporter(Protocol):
    """Port for exporting a twilight grid to file."""

    def export(
        self,
        grid: TwilightGrid,
        path: str,
        terminator: Sequence[GeoPoint] | None = None,
        shading: ShadingConfig | None = None,
    ) -> int:
        """
        Export the cells of a twilight grid to a file.

        Args:
            grid: Sampled twilight bands for a region.
            path: Output file path.
            terminator: Optional day/night line to include.
            shading: Opacity per band; defaults to ShadingConfig().

        Returns:
            Number of grid cells exported.
        """
        ...
