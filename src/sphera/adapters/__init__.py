# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for position export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from sphera.adapters.csv_exporter import CsvPositionExporter
from sphera.adapters.json_exporter import JsonPositionExporter

__all__ = ["CsvPositionExporter", "JsonPositionExporter"]
