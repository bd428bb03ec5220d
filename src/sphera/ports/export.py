# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for position export.

Adapters implement this to export body positions in various formats
(CSV, JSON).
"""
from typing import Protocol, runtime_checkable

from sphera.domain.positions import BodyPosition


@runtime_checkable
class PositionExporter(Protocol):
    """Port for exporting body positions to file."""

    def export(
        self,
        positions: list[BodyPosition],
        path: str,
        djd: float,
    ) -> int:
        """
        Export geocentric body positions to a file.

        Args:
            positions: BodyPosition records, all for the same moment.
            path: Output file path.
            djd: Epoch of the positions, days since 1900 January 0.5.

        Returns:
            Number of positions exported.
        """
        ...
