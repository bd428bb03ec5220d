# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV position exporter.

Exports geocentric ecliptic positions as CSV, one row per body.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from sphera.ports.export import PositionExporter
from sphera.domain.positions import BodyPosition
from sphera.domain.time_systems import djd_to_datetime

logger = logging.getLogger(__name__)

_HEADER = ['body', 'longitude_deg', 'latitude_deg', 'distance_au', 'djd', 'epoch']


class CsvPositionExporter(PositionExporter):
    """Exports body positions to CSV."""

    def export(
        self,
        positions: list[BodyPosition],
        path: str,
        djd: float,
    ) -> int:
        epoch_str = djd_to_datetime(djd).isoformat()
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for pos in positions:
                writer.writerow([
                    pos.body,
                    f'{pos.longitude:.6f}',
                    f'{pos.latitude:.6f}',
                    f'{pos.distance:.8f}',
                    f'{djd:.6f}',
                    epoch_str,
                ])

        logger.info("Wrote %d positions to %s", len(positions), path)
        return len(positions)
