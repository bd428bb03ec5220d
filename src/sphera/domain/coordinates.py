# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Celestial coordinate conversions.

Pure rotations between the ecliptic, equatorial and horizontal systems.
Arguments and results in arc-degrees.

Reference frames:
    Ecliptic: longitude λ, latitude β; obliquity ε of date
    Equatorial: right ascension α (or hour angle h), declination δ
    Horizontal: azimuth measured westwards from the South, altitude

The horizontal transform is symmetric in its two coordinate pairs, so the
same rotation converts in either direction.
"""
import math
from dataclasses import dataclass

from sphera.domain.angles import PI2, reduce_rad


@dataclass(frozen=True)
class EclipticCoords:
    """Geocentric ecliptic position."""
    longitude: float  # degrees, [0, 360)
    latitude: float   # degrees
    distance: float   # AU


def _equ_ecl(x: float, y: float, e: float, k: int) -> tuple[float, float]:
    """Rotate about the equinox direction. k = +1 equ→ecl, -1 ecl→equ. Radians."""
    sin_e = math.sin(e)
    cos_e = math.cos(e)
    sin_x = math.sin(x)
    a = reduce_rad(math.atan2(sin_x * cos_e + k * (math.tan(y) * sin_e), math.cos(x)))
    b = math.asin(math.sin(y) * cos_e - k * (math.cos(y) * sin_e * sin_x))
    return a, b


def _equ_hor(x: float, y: float, phi: float) -> tuple[float, float]:
    """Hour angle/declination <-> azimuth/altitude. Radians."""
    sx = math.sin(x)
    sy = math.sin(y)
    sphi = math.sin(phi)
    cphi = math.cos(phi)
    sq = sy * sphi + math.cos(y) * cphi * math.cos(x)
    q = math.asin(sq)
    cp = (sy - sphi * sq) / (cphi * math.cos(q))
    # rounding can push |cp| past 1 at the meridian
    p = math.acos(max(-1.0, min(1.0, cp)))
    if sx > 0:
        p = PI2 - p
    return p, q


def equ2ecl(alpha: float, delta: float, eps: float) -> tuple[float, float]:
    """
    Equatorial to ecliptic coordinates.

    Args:
        alpha: Right ascension (degrees).
        delta: Declination (degrees).
        eps: Obliquity of the ecliptic (degrees).

    Returns:
        (longitude, latitude) in degrees.
    """
    a, b = _equ_ecl(math.radians(alpha), math.radians(delta), math.radians(eps), 1)
    return math.degrees(a), math.degrees(b)


def ecl2equ(lam: float, beta: float, eps: float) -> tuple[float, float]:
    """Ecliptic to equatorial coordinates: (right ascension, declination) in degrees."""
    a, b = _equ_ecl(math.radians(lam), math.radians(beta), math.radians(eps), -1)
    return math.degrees(a), math.degrees(b)


def equ2hor(h: float, delta: float, phi: float) -> tuple[float, float]:
    """
    Equatorial to horizontal coordinates.

    Args:
        h: Local hour angle (degrees), h = LST - RA.
        delta: Declination (degrees).
        phi: Observer's latitude (degrees), positive north.

    Returns:
        (azimuth, altitude) in degrees; azimuth measured westwards from the South.
    """
    a, b = _equ_hor(math.radians(h), math.radians(delta), math.radians(phi))
    return math.degrees(a), math.degrees(b)


def hor2equ(az: float, alt: float, phi: float) -> tuple[float, float]:
    """Horizontal to equatorial coordinates: (hour angle, declination) in degrees."""
    a, b = _equ_hor(math.radians(az), math.radians(alt), math.radians(phi))
    return math.degrees(a), math.degrees(b)
