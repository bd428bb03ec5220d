# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON position exporter.

Writes one document holding the epoch and a list of positions.
"""
import json
import logging

from sphera.ports.export import PositionExporter
from sphera.domain.constants import EphemerisConstants
from sphera.domain.positions import BodyPosition

logger = logging.getLogger(__name__)


class JsonPositionExporter(PositionExporter):
    """Exports body positions to a JSON document."""

    def export(
        self,
        positions: list[BodyPosition],
        path: str,
        djd: float,
    ) -> int:
        doc = {
            'djd': djd,
            'jd': djd + EphemerisConstants.DJD_TO_JD,
            'positions': [
                {
                    'body': pos.body,
                    'longitude_deg': pos.longitude,
                    'latitude_deg': pos.latitude,
                    'distance_au': pos.distance,
                }
                for pos in positions
            ],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(doc, f, indent=2, ensure_ascii=False)

        logger.info("Wrote %d positions to %s", len(positions), path)
        return len(positions)
