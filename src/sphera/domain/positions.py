# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Positions of the Sun, the Moon and the planets for one epoch.

The planets share one CelestialSphera context, so Delta-T, nutation and
the Sun's position are computed once per call.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sphera.domain import moon, sun
from sphera.domain.celestial_sphere import CelestialSphera
from sphera.domain.constants import EphemerisConstants
from sphera.domain.errors import UnknownPlanetError
from sphera.domain.planets import ALL_PLANETS, geocentric_position, planet_for_id, planet_for_name

logger = logging.getLogger(__name__)

SUN = "Sun"
MOON = "Moon"

ALL_BODIES: tuple[str, ...] = (SUN, MOON) + tuple(planet_for_id(p).name for p in ALL_PLANETS)


@dataclass(frozen=True)
class BodyPosition:
    """Geocentric ecliptic position of one body."""
    body: str
    longitude: float  # degrees
    latitude: float   # degrees
    distance: float   # AU


def _canonical(name: str) -> str:
    key = name.strip().lower()
    if key == SUN.lower():
        return SUN
    if key == MOON.lower():
        return MOON
    try:
        return planet_for_name(key).name
    except UnknownPlanetError:
        raise UnknownPlanetError(
            f"Unknown body: {name!r} (expected one of {', '.join(ALL_BODIES)})"
        ) from None


def compute_positions(
    djd: float,
    bodies: Optional[Iterable[str]] = None,
    apparent: bool = True,
) -> list[BodyPosition]:
    """
    Geocentric positions of several bodies at one moment.

    Args:
        djd: Days since 1900 January 0.5, UT.
        bodies: Body names, case-insensitive; all bodies when omitted.
        apparent: Apparent positions (nutation, aberration) if True,
            true geometric positions otherwise.

    Returns:
        One BodyPosition per requested body, in request order.

    Raises:
        UnknownPlanetError: a name is neither Sun, Moon nor a planet.
    """
    names = ALL_BODIES if bodies is None else tuple(_canonical(b) for b in bodies)
    ctx: Optional[CelestialSphera] = None
    result: list[BodyPosition] = []

    for name in names:
        if name == SUN:
            if apparent:
                pos = sun.apparent(djd)
            else:
                pos = sun.true_geocentric(djd / EphemerisConstants.DAYS_PER_CENTURY)
            result.append(BodyPosition(SUN, pos.longitude, 0.0, pos.distance))
        elif name == MOON:
            mp = moon.apparent(djd) if apparent else moon.true_position(djd)
            result.append(BodyPosition(MOON, mp.longitude, mp.latitude, mp.distance))
        else:
            if ctx is None:
                ctx = CelestialSphera.for_djd(djd, apparent=apparent)
            coords = geocentric_position(planet_for_name(name), ctx)
            result.append(BodyPosition(name, coords.longitude, coords.latitude, coords.distance))

    logger.debug("Computed %d positions for DJD %.6f", len(result), djd)
    return result
