# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for diagnostics and overlay export.

External dependencies (logging, json, file I/O) are confined to this layer.
"""
from subsolar.adapters.logging_sink import LoggingDiagnosticSink
from subsolar.adapters.geojson_exporter import GeoJsonTwilightExporter

__all__ = [
    "LoggingDiagnosticSink",
    "GeoJsonTwilightExporter",
]
