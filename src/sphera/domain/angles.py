# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle arithmetic.

Range reduction, polynomial evaluation and sexagesimal conversions used
throughout the ephemeris. Pure functions over floats.
"""
import math

PI2: float = 2.0 * math.pi


def radians(x: float) -> float:
    """Arc-degrees to radians."""
    return math.radians(x)


def degrees(x: float) -> float:
    """Radians to arc-degrees."""
    return math.degrees(x)


def modf(x: float) -> tuple[float, float]:
    """Split x into (fraction, integer), both carrying the sign of x.

    modf(-5.5) -> (-0.5, -5.0)
    """
    return math.modf(x)


def polynome(t: float, *terms: float) -> float:
    """Evaluate a1 + a2*t + a3*t² + ... by Horner's scheme.

    Args:
        t: Argument, usually Julian centuries.
        *terms: Coefficients, constant term first.

    Returns:
        Value of the polynomial. polynome(10.0, 1.0, 2.0, 3.0) == 321.0
    """
    result = 0.0
    for a in reversed(terms):
        result = result * t + a
    return result


def to_range(x: float, r: float) -> float:
    """Reduce x to 0 <= x < r."""
    a = math.fmod(x, r)
    return a + r if a < 0 else a


def reduce_deg(x: float) -> float:
    """Reduce x to [0, 360)."""
    return to_range(x, 360.0)


def reduce_rad(x: float) -> float:
    """Reduce x to [0, 2π)."""
    return to_range(x, PI2)


def frac(x: float) -> float:
    """Fractional part of x, keeping the sign: frac(-5.5) == -0.5."""
    return math.fmod(x, 1.0)


def frac360(x: float) -> float:
    """Fractional revolutions of x, in degrees.

    Applied to the linear term of fast-moving mean longitudes before the
    small higher-order terms are added, so whole revolutions do not eat
    the significant digits.
    """
    return frac(x) * 360.0


def ddd(d: float, m: float, s: float = 0.0) -> float:
    """Sexagesimal to decimal degrees (or hours).

    The result is negative if any component is negative, so that
    -0°35' can be written ddd(0, -35).
    """
    sgn = -1.0 if d < 0 or m < 0 or s < 0 else 1.0
    return (abs(d) + (abs(m) + abs(s) / 60.0) / 60.0) * sgn


def dms(x: float) -> tuple[float, float, float]:
    """Decimal degrees (or hours) to (degrees, minutes, seconds).

    The sign is carried by the first non-zero component:
    dms(-0.75) -> (0.0, -45.0, 0.0)
    """
    f, d = math.modf(abs(x))
    f, m = math.modf(f * 60.0)
    s = f * 60.0

    if x < 0:
        if d != 0:
            d = -d
        elif m != 0:
            m = -m
        else:
            s = -s
    return d, m, s


def zdms(x: float) -> tuple[int, float, float, float]:
    """Ecliptic longitude to (zodiac sign index 0..11, degrees, minutes, seconds)."""
    d, m, s = dms(x)
    return int(d / 30.0), math.fmod(d, 30.0), m, s


def shortest_arc(a: float, b: float) -> float:
    """Shortest distance between two directions, degrees."""
    x = abs(a - b)
    return 360.0 - x if x > 180.0 else x


def shortest_arc_rad(a: float, b: float) -> float:
    """Shortest distance between two directions, radians."""
    x = abs(a - b)
    return PI2 - x if x > math.pi else x


def diff_angle(a: float, b: float) -> float:
    """Signed angle b - a in degrees, accounting for the 0/360 crossing.

    Both arguments in [0, 360); the result is in (-180, 180].
    """
    x = b + 360.0 - a if b < a else b - a
    return x - 360.0 if x > 180.0 else x
