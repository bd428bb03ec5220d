# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for ephemeris output.

Adapters implement these to write positions in different file formats.
"""
from sphera.ports.export import PositionExporter

__all__ = ["PositionExporter"]
