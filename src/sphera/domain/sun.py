# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

Low-precision geocentric Sun after Duffett-Smith: Kepler solution of the
Earth's orbit plus five periodic corrections (Venus, Jupiter, the Moon and
a long-period inequality). Accuracy about 0.01 degree.

Time arguments are Julian centuries since 1900 January 0.5 unless the
parameter is named `djd`.
"""
import math
from dataclasses import dataclass
from typing import Optional

from sphera.domain.angles import PI2, frac360, polynome, reduce_deg
from sphera.domain.constants import EphemerisConstants
from sphera.domain.kepler import eccentric_anomaly, true_anomaly
from sphera.domain.nutation import nutation


@dataclass(frozen=True)
class SunPosition:
    """Geocentric Sun position for the equinox of date."""
    longitude: float  # ecliptic longitude, degrees
    distance: float   # Earth-Sun distance, AU


def mean_longitude(t: float) -> float:
    """Mean longitude of the Sun, degrees."""
    return reduce_deg(2.7969668e2 + 3.025e-4 * t * t + frac360(1.000021359e2 * t))


def mean_anomaly(t: float) -> float:
    """Mean anomaly of the Sun, degrees."""
    return reduce_deg(
        3.5847583e2 - (1.5e-4 + 3.3e-6 * t) * t * t + frac360(9.999736042e1 * t)
    )


def _periodic_argument(a: float, b: float, t: float) -> float:
    return math.radians(a + frac360(b * t))


def true_geocentric(t: float, ms: Optional[float] = None) -> SunPosition:
    """
    True geocentric longitude (mean equinox of date) and distance of the Sun.

    Args:
        t: Julian centuries since 1900 January 0.5.
        ms: Mean anomaly of the Sun in degrees; computed when omitted.

    Returns:
        SunPosition.
    """
    if ms is None:
        ms = mean_anomaly(t)
    ls = mean_longitude(t)
    ma = math.radians(ms)
    s = polynome(t, 1.675104e-2, -4.18e-5, -1.26e-7)
    ea = eccentric_anomaly(s, ma - PI2 * math.floor(ma / PI2))
    nu = true_anomaly(s, ea)
    t2 = t * t

    a = _periodic_argument(153.23, 6.255209472e1, t)             # Venus
    b = _periodic_argument(216.57, 1.251041894e2, t)             # Venus
    c = _periodic_argument(312.69, 9.156766028e1, t)             # Jupiter
    d = _periodic_argument(350.74 - 1.44e-3 * t2, 1.236853095e3, t)  # Moon
    h = _periodic_argument(353.4, 1.831353208e2, t)
    e = math.radians(231.19 + 20.2 * t)                          # long period

    dl = (1.34e-3 * math.cos(a) + 1.54e-3 * math.cos(b) + 2e-3 * math.cos(c)
          + 1.79e-3 * math.sin(d) + 1.78e-3 * math.sin(e))
    dr = (5.43e-6 * math.sin(a) + 1.575e-5 * math.sin(b) + 1.627e-5 * math.sin(c)
          + 3.076e-5 * math.cos(d) + 9.27e-6 * math.sin(h))

    lsn = reduce_deg(math.degrees(nu) + ls - ms + dl)
    rsn = 1.0000002 * (1.0 - s * math.cos(ea)) + dr
    return SunPosition(longitude=lsn, distance=rsn)


def apparent(
    djd: float,
    dpsi: Optional[float] = None,
    ignore_light_travel: bool = True,
) -> SunPosition:
    """
    Apparent geocentric position of the Sun.

    Corrects the true longitude for nutation and annual aberration, and
    optionally for the light travel time (1.365·R seconds of time).

    Args:
        djd: Days since 1900 January 0.5.
        dpsi: Nutation in longitude (degrees); computed when omitted.
        ignore_light_travel: Skip the light-time term.
    """
    t = djd / EphemerisConstants.DAYS_PER_CENTURY
    if dpsi is None:
        dpsi = nutation(t).delta_psi
    geo = true_geocentric(t)

    lam = geo.longitude + dpsi - EphemerisConstants.SUN_ABERRATION_DEG
    if not ignore_light_travel:
        dt = 1.365 * geo.distance
        lam -= dt * 15.0 / 3600.0
    return SunPosition(longitude=reduce_deg(lam), distance=geo.distance)
