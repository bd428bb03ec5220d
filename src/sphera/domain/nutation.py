# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Nutation in longitude and obliquity, obliquity of the ecliptic.

Low-precision series (about 1 arcsecond) after Duffett-Smith,
"Astronomy with Your Personal Computer". Each series term is an
amplitude, optionally linear in time, multiplying sin/cos of an integer
combination of five fundamental arguments:

    ls  mean longitude of the Sun
    ms  mean anomaly of the Sun
    ld  mean longitude of the Moon
    md  mean anomaly of the Moon
    nm  longitude of the Moon's ascending node

NumPy vectorized: the argument multipliers form an (N, 5) matrix evaluated
against the argument vector in one product.
"""

from dataclasses import dataclass

import numpy as np

from sphera.domain.angles import frac360
from sphera.domain.constants import EphemerisConstants

# --------------------------------------------------------------------------- #
# Series coefficients
# --------------------------------------------------------------------------- #

# Columns: ls, ms, ld, md, nm
_PSI_MULTS = np.array([
    [0, 0, 0, 0, 1],
    [2, 0, 0, 0, 0],
    [0, 0, 0, 0, 2],
    [0, 0, 2, 0, 0],
    [0, 1, 0, 0, 0],
    [0, 0, 0, 1, 0],
    [2, 1, 0, 0, 0],
    [0, 0, 2, 0, -1],
    [0, 0, 2, 1, 0],
    [2, -1, 0, 0, 0],
    [2, 0, -2, 1, 0],
    [2, 0, 0, 0, -1],
    [0, 0, 2, -1, 0],
], dtype=np.float64)

# Amplitude in arcseconds: a + b*t
_PSI_A = np.array([
    -17.2327, -1.2729, 2.088e-1, -2.037e-1, 1.261e-1, 6.75e-2, -4.97e-2,
    -3.42e-2, -2.61e-2, 2.14e-2, -1.49e-2, 1.24e-2, 1.14e-2,
])
_PSI_B = np.array([
    -1.737e-2, -1.3e-4, 0.0, 0.0, -3.1e-4, 0.0, 1.2e-4,
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0,
])

_EPS_MULTS = np.array([
    [0, 0, 0, 0, 1],
    [2, 0, 0, 0, 0],
    [0, 0, 0, 0, 2],
    [0, 0, 2, 0, 0],
    [2, 1, 0, 0, 0],
    [0, 0, 2, 0, -1],
    [0, 0, 2, 1, 0],
    [2, -1, 0, 0, 0],
    [2, 0, 0, 0, -1],
], dtype=np.float64)

_EPS_A = np.array([
    9.21, 5.522e-1, -9.04e-2, 8.84e-2, 2.16e-2, 1.83e-2, 1.13e-2,
    -9.3e-3, -6.6e-3,
])
_EPS_B = np.array([
    9.1e-4, -2.9e-4, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,
])


@dataclass(frozen=True)
class NutationRecord:
    """Nutation components in arc-degrees."""
    delta_psi: float  # in longitude
    delta_eps: float  # in obliquity


def _fundamental_arguments(t: float) -> np.ndarray:
    """[ls, ms, ld, md, nm] in radians for t centuries since 1900 Jan 0.5."""
    t2 = t * t
    return np.radians(np.array([
        2.796967e2 + 3.03e-4 * t2 + frac360(1.000021358e2 * t),
        3.584758e2 - 1.5e-4 * t2 + frac360(9.999736056e1 * t),
        2.704342e2 - 1.133e-3 * t2 + frac360(1.336855231e3 * t),
        2.961046e2 + 9.192e-3 * t2 + frac360(1.325552359e3 * t),
        2.591833e2 + 2.078e-3 * t2 - frac360(5.372616667 * t),
    ]))


def nutation(t: float) -> NutationRecord:
    """Nutation in longitude and obliquity.

    Args:
        t: Julian centuries since 1900 January 0.5.

    Returns:
        NutationRecord in arc-degrees.
    """
    args = _fundamental_arguments(t)

    dpsi = float(np.sum((_PSI_A + _PSI_B * t) * np.sin(_PSI_MULTS @ args)))
    deps = float(np.sum((_EPS_A + _EPS_B * t) * np.cos(_EPS_MULTS @ args)))

    return NutationRecord(delta_psi=dpsi / 3600.0, delta_eps=deps / 3600.0)


def obliquity(djd: float, deps: float = 0.0) -> float:
    """Obliquity of the ecliptic in arc-degrees.

    Mean obliquity unless the nutation in obliquity `deps` (degrees) is given.
    """
    t = djd / EphemerisConstants.DAYS_PER_CENTURY
    c = ((-0.00181 * t + 0.0059) * t + 46.845) * t
    return 23.45229444 - c / 3600.0 + deps


def true_obliquity(djd: float) -> float:
    """Obliquity corrected for nutation at the given DJD."""
    t = djd / EphemerisConstants.DAYS_PER_CENTURY
    return obliquity(djd, nutation(t).delta_eps)

