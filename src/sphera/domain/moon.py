# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Lunar ephemeris.

Geocentric ecliptic longitude, latitude and horizontal parallax of the
Moon from the classical truncated Brown series (Duffett-Smith, routine
MOON), accurate to a few arcseconds in longitude. Also the Moon's daily
motion, and the mean and true longitude of the ascending node (Meeus,
Astronomical Algorithms, Ch. 47).

Each series term is an amplitude (degrees) times E^k, E being the
eccentricity factor of the Earth's orbit, times sin or cos of an integer
combination of four arguments:

    D   mean elongation of the Moon
    M   mean anomaly of the Sun
    M'  mean anomaly of the Moon
    F   argument of latitude

NumPy vectorized: one table per series, evaluated in a single pass.
"""
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from sphera.domain.angles import frac, polynome, reduce_deg
from sphera.domain.constants import EphemerisConstants
from sphera.domain.nutation import nutation

# Periods (days) of mean longitude, Sun's anomaly, Moon's anomaly,
# elongation, argument of latitude and node
_PERIODS = np.array([
    27.32158213, 365.2596407, 27.55455094, 29.53058868, 27.21222039, 6798.363307,
])

# Fundamental arguments of the node series, Julian centuries since J2000.0
_MOON_ELONGATION = (297.8501921, 445267.1114034, -0.0018819, 1.0 / 545868, -1.0 / 113065000)
_MOON_ANOMALY = (134.9633964, 477198.8675055, 0.0087414, 1.0 / 69699, -1.0 / 14712000)
_MOON_ARG_LATITUDE = (93.272095, 483202.0175233, -0.0036539, -1.0 / 3526000, 1.0 / 863310000)
_SUN_ANOMALY = (357.5291092, 35999.0502909, -0.0001536, 1.0 / 24490000)
_MEAN_NODE = (125.0445479, -1934.1362891, 0.0020754, 1.0 / 467441, 1.0 / 60616000)

# --------------------------------------------------------------------------- #
# Series tables: amplitude, power of E, multipliers of D, M, M', F
# --------------------------------------------------------------------------- #

_LONGITUDE_TERMS = np.array([
    [6.28875, 0, 0, 0, 1, 0],
    [1.274018, 0, 2, 0, -1, 0],      # evection
    [0.658309, 0, 2, 0, 0, 0],       # variation
    [0.213616, 0, 0, 0, 2, 0],
    [-0.185596, 1, 0, 1, 0, 0],      # annual equation
    [-0.114336, 0, 0, 0, 0, 2],
    [0.058793, 0, 2, 0, -2, 0],
    [0.057212, 1, 2, -1, -1, 0],
    [0.05332, 0, 2, 0, 1, 0],
    [0.045874, 1, 2, -1, 0, 0],
    [0.041024, 1, 0, -1, 1, 0],
    [-0.034718, 0, 1, 0, 0, 0],      # parallactic inequality
    [-0.030465, 1, 0, 1, 1, 0],
    [0.015326, 0, 2, 0, 0, -2],
    [-0.012528, 0, 0, 0, 1, 2],
    [-0.01098, 0, 0, 0, -1, 2],
    [0.010674, 0, 4, 0, -1, 0],
    [0.010034, 0, 0, 0, 3, 0],
    [0.008548, 0, 4, 0, -2, 0],
    [-0.00791, 1, 2, 1, -1, 0],
    [-0.006783, 1, 2, 1, 0, 0],
    [0.005162, 0, -1, 0, 1, 0],
    [0.005, 1, 1, 1, 0, 0],
    [0.003862, 0, 4, 0, 0, 0],
    [0.004049, 1, 2, -1, 1, 0],
    [0.003996, 0, 2, 0, 2, 0],
    [0.003665, 0, 2, 0, -3, 0],
    [0.002695, 1, 0, -1, 2, 0],
    [0.002602, 0, -2, 0, 1, -2],
    [0.002396, 1, 2, -1, -2, 0],
    [-0.002349, 0, 1, 0, 1, 0],
    [0.002249, 2, 2, -2, 0, 0],
    [-0.002125, 1, 0, 1, 2, 0],
    [-0.002079, 2, 0, 2, 0, 0],
    [0.002059, 2, 2, -2, -1, 0],
    [-0.001773, 0, 2, 0, 1, -2],
    [-0.001595, 0, 2, 0, 0, 2],
    [0.00122, 1, 4, -1, -1, 0],
    [-0.00111, 0, 0, 0, 2, 2],
    [0.000892, 0, -3, 0, 1, 0],
    [-0.000811, 1, 2, 1, 1, 0],
    [0.000761, 1, 4, -1, -2, 0],
    [0.000704, 2, -2, -2, 1, 0],
    [0.000693, 1, 2, 1, -2, 0],
    [0.000598, 1, 2, -1, 0, -2],
    [0.00055, 0, 4, 0, 1, 0],
    [0.000538, 0, 0, 0, 4, 0],
    [0.000521, 1, 4, -1, 0, 0],
    [0.000486, 0, -1, 0, 2, 0],
    [0.000717, 2, 0, -2, 1, 0],
])

_LATITUDE_TERMS = np.array([
    [5.128189, 0, 0, 0, 0, 1],
    [0.280606, 0, 0, 0, 1, 1],
    [0.277693, 0, 0, 0, 1, -1],
    [0.173238, 0, 2, 0, 0, -1],
    [0.055413, 0, 2, 0, -1, 1],
    [0.046272, 0, 2, 0, -1, -1],
    [0.032573, 0, 2, 0, 0, 1],
    [0.017198, 0, 0, 0, 2, 1],
    [0.009267, 0, 2, 0, 1, -1],
    [0.008823, 0, 0, 0, 2, -1],
    [0.008247, 1, 2, -1, 0, -1],
    [0.004323, 0, 2, 0, -2, -1],
    [0.0042, 0, 2, 0, 1, 1],
    [0.003372, 1, -2, -1, 0, 1],
    [0.002472, 1, 2, -1, -1, 1],
    [0.002222, 1, 2, -1, 0, 1],
    [0.002072, 1, 2, -1, -1, -1],
    [0.001877, 1, 0, -1, 1, 1],
    [0.001828, 0, 4, 0, -1, -1],
    [-0.001803, 1, 0, 1, 0, 1],
    [-0.00175, 0, 0, 0, 0, 3],
    [0.00157, 1, 0, -1, 1, -1],
    [-0.001487, 0, 1, 0, 0, 1],
    [-0.001481, 1, 0, 1, 1, 1],
    [0.001417, 1, 0, -1, -1, 1],
    [0.00135, 1, 0, -1, 0, 1],
    [0.00133, 0, -1, 0, 0, 1],
    [0.001106, 0, 0, 0, 3, 1],
    [0.00102, 0, 4, 0, 0, -1],
    [0.000833, 0, 4, 0, -1, 1],
    [0.000781, 0, 0, 0, 1, -3],
    [0.00067, 0, 4, 0, -2, 1],
    [0.000606, 0, 2, 0, 0, -3],
    [0.000597, 0, 2, 0, 2, -1],
    [0.000492, 1, 2, -1, 1, -1],
    [0.00045, 0, -2, 0, 2, -1],
    [0.000439, 0, 0, 0, 3, -1],
    [0.000423, 0, 2, 0, 2, 1],
    [0.000422, 0, 2, 0, -3, -1],
    [-0.000367, 1, 2, 1, -1, 1],
    [-0.000353, 1, 2, 1, 0, 1],
    [0.000331, 0, 4, 0, 0, 1],
    [0.000317, 1, 2, -1, 1, 1],
    [0.000306, 2, 2, -2, 0, -1],
    [-0.000283, 0, 0, 0, 1, 3],
])

_PARALLAX_TERMS = np.array([
    [0.051818, 0, 0, 0, 1, 0],
    [0.009531, 0, 2, 0, -1, 0],
    [0.007843, 0, 2, 0, 0, 0],
    [0.002824, 0, 0, 0, 2, 0],
    [0.000857, 0, 2, 0, 1, 0],
    [0.000533, 1, 2, -1, 0, 0],
    [0.000401, 1, 2, -1, -1, 0],
    [0.00032, 1, 0, -1, 1, 0],
    [-0.000271, 0, 1, 0, 0, 0],
    [-0.000264, 1, 0, 1, 1, 0],
    [-0.000198, 0, 0, 0, -1, 2],
    [0.000173, 0, 0, 0, 3, 0],
    [0.000167, 0, 4, 0, -1, 0],
    [-0.000111, 1, 0, 1, 0, 0],
    [0.000103, 0, 4, 0, -2, 0],
    [-0.000084, 0, -2, 0, 2, 0],
    [-0.000083, 1, 2, 1, 0, 0],
    [0.000079, 0, 2, 0, 2, 0],
    [0.000072, 0, 4, 0, 0, 0],
    [0.000064, 1, 2, -1, 1, 0],
    [-0.000063, 1, 2, 1, -1, 0],
    [0.000041, 1, 1, 1, 0, 0],
    [0.000035, 1, 0, -1, 2, 0],
    [-0.000033, 0, -2, 0, 3, 0],
    [-0.00003, 0, 1, 0, 1, 0],
    [-0.000029, 0, -2, 0, 0, 2],
    [-0.000029, 1, 0, 1, 2, 0],
    [0.000026, 2, 2, -2, 0, 0],
    [-0.000023, 0, -2, 0, 1, 2],
    [0.000019, 1, 4, -1, -1, 0],
])

_MOTION_TERMS = np.array([
    [1.434006, 0, 0, 0, 1, 0],
    [0.280135, 0, 2, 0, 0, 0],
    [0.251632, 0, 2, 0, -1, 0],
    [0.09742, 0, 0, 0, 2, 0],
    [-0.052799, 0, 0, 0, 0, 2],
    [0.034848, 0, 2, 0, 1, 0],
    [0.018732, 0, 2, -1, 0, 0],
    [0.010316, 0, 2, -1, -1, 0],
    [0.008649, 0, 0, 1, -1, 0],
    [-0.008642, 0, 0, 0, 1, 2],
    [-0.007471, 0, 0, 1, 1, 0],
    [-0.007387, 0, 1, 0, 0, 0],
    [0.006864, 0, 0, 0, 3, 0],
    [0.00665, 0, 4, 0, -1, 0],
    [0.003523, 0, 2, 0, 2, 0],
    [0.003377, 0, 4, 0, -2, 0],
    [0.003287, 0, 4, 0, 0, 0],
    [-0.003193, 0, 0, 1, 0, 0],
    [-0.003003, 0, 2, 1, 0, 0],
    [0.002577, 0, 2, -1, 1, 0],
    [-0.002567, 0, 0, 0, -1, 2],
    [-0.001794, 0, 2, 0, -2, 0],
    [-0.001716, 0, -2, 0, 1, -2],
    [-0.001698, 0, 2, 1, -1, 0],
    [-0.001415, 0, 2, 0, 0, 2],
    [0.001183, 0, 0, -1, 2, 0],
    [0.00115, 0, 1, 1, 0, 0],
    [-0.001035, 0, 1, 0, 1, 0],
    [-0.001019, 0, 0, 0, 2, 2],
    [-0.001006, 0, 0, 1, 2, 0],
])

_PARALLAX_CONSTANT: float = 0.950724
_MOTION_CONSTANT: float = 13.176397
_PARALLAX_TO_AU: float = 8.794  # solar parallax, arcseconds


@dataclass(frozen=True)
class MoonPosition:
    """Geocentric position of the Moon."""
    longitude: float  # degrees
    latitude: float   # degrees
    distance: float   # AU
    parallax: float   # horizontal parallax, degrees
    motion: float     # daily motion, degrees per 24h


def _sum_series(table: np.ndarray, args: np.ndarray, e: float, fn) -> float:
    amplitude = table[:, 0] * np.power(e, table[:, 1])
    return float(np.sum(amplitude * fn(table[:, 2:] @ args)))


def mean_node(t: float) -> float:
    """
    Longitude of the Moon's mean ascending node, degrees.

    Args:
        t: Julian centuries since J2000.0.
    """
    return reduce_deg(polynome(t, *_MEAN_NODE))


def true_position(djd: float) -> MoonPosition:
    """
    Geometric position of the Moon, mean equinox of date.

    Args:
        djd: Days since 1900 January 0.5.

    Returns:
        MoonPosition.
    """
    t = djd / EphemerisConstants.DAYS_PER_CENTURY
    t2 = t * t
    m = [360.0 * frac(djd / p) for p in _PERIODS]

    ld = 270.434164 + m[0] - (1.133e-3 - 1.9e-6 * t) * t2   # mean longitude
    ms = 358.475833 + m[1] - (1.5e-4 + 3.3e-6 * t) * t2     # Sun's mean anomaly
    md = 296.104608 + m[2] + (9.192e-3 + 1.44e-5 * t) * t2  # mean anomaly
    de = 350.737486 + m[3] - (1.436e-3 - 1.9e-6 * t) * t2   # mean elongation
    f = 11.250889 + m[4] - (3.211e-3 + 3e-7 * t) * t2       # argument of latitude
    n = 259.183275 - m[5] + (2.078e-3 + 2.2e-5 * t) * t2    # node

    # long-period terms
    sa = math.sin(math.radians(51.2 + 20.2 * t))
    sn = math.sin(math.radians(n))
    b = 346.56 + (132.87 - 9.1731e-3 * t) * t
    sb = 3.964e-3 * math.sin(math.radians(b))
    c = math.radians(n + 275.05 - 2.3 * t)
    ld += 2.33e-4 * sa + sb + 1.964e-3 * sn
    ms -= 1.778e-3 * sa
    md += 8.17e-4 * sa + sb + 2.541e-3 * sn
    f += sb - 2.4691e-2 * sn - 4.328e-3 * math.sin(c)
    de += 2.011e-3 * sa + sb + 1.964e-3 * sn
    e = 1.0 - (2.495e-3 + 7.52e-6 * t) * t

    args = np.radians(np.array([de, ms, md, f]))

    lam = reduce_deg(ld + _sum_series(_LONGITUDE_TERMS, args, e, np.sin))

    g = _sum_series(_LATITUDE_TERMS, args, e, np.sin)
    w1 = 0.0004664 * math.cos(math.radians(n))
    w2 = 0.0000754 * math.cos(c)
    beta = g * (1.0 - w1 - w2)

    parallax = _PARALLAX_CONSTANT + _sum_series(_PARALLAX_TERMS, args, e, np.cos)
    motion = _MOTION_CONSTANT + _sum_series(_MOTION_TERMS, args, e, np.cos)

    return MoonPosition(
        longitude=lam,
        latitude=beta,
        distance=_PARALLAX_TO_AU / (parallax * 3600.0),
        parallax=parallax,
        motion=motion,
    )


def apparent(djd: float, dpsi: Optional[float] = None) -> MoonPosition:
    """
    Apparent position of the Moon: true position plus nutation in longitude.

    Args:
        djd: Days since 1900 January 0.5.
        dpsi: Nutation in longitude (degrees); computed when omitted.
    """
    pos = true_position(djd)
    if dpsi is None:
        dpsi = nutation(djd / EphemerisConstants.DAYS_PER_CENTURY).delta_psi
    return MoonPosition(
        longitude=reduce_deg(pos.longitude + dpsi),
        latitude=pos.latitude,
        distance=pos.distance,
        parallax=pos.parallax,
        motion=pos.motion,
    )


def lunar_node(djd: float, true_node: bool = True) -> float:
    """
    Longitude of the Moon's ascending node, degrees.

    Args:
        djd: Days since 1900 January 0.5.
        true_node: Add the periodic terms of the true node; otherwise
            return the mean node.
    """
    t = (djd - EphemerisConstants.DAYS_PER_CENTURY) / EphemerisConstants.DAYS_PER_CENTURY
    mn = polynome(t, *_MEAN_NODE)
    if not true_node:
        return reduce_deg(mn)

    d = math.radians(reduce_deg(polynome(t, *_MOON_ELONGATION)))
    m = math.radians(reduce_deg(polynome(t, *_MOON_ANOMALY)))
    f = math.radians(reduce_deg(polynome(t, *_MOON_ARG_LATITUDE)))
    ms = math.radians(reduce_deg(polynome(t, *_SUN_ANOMALY)))
    nd = (mn
          - 1.4979 * math.sin(2 * (d - f))
          - 0.15 * math.sin(ms)
          - 0.1226 * math.sin(2 * d)
          + 0.1176 * math.sin(2 * f)
          - 0.0801 * math.sin(2 * (m - f)))
    return reduce_deg(nd)
