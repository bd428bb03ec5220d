# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Principal phases of the Moon.

Time of the New Moon, First Quarter, Full Moon or Last Quarter closest to
a civil date: the mean phase from the lunation number plus one periodic
correction over the Sun's and Moon's mean anomalies and the Moon's
argument of latitude (Meeus, Astronomical Formulae for Calculators,
Ch. 32). Accurate to a few minutes.
"""
import math
from enum import Enum

from sphera.domain.angles import reduce_deg
from sphera.domain.time_systems import CalDate, day_of_year, is_leap_year

_SYNODIC_MONTH: float = 29.53058868
_LUNATIONS_PER_YEAR: float = 12.3685


class Quarter(Enum):
    """Lunar phase; coeff is the fraction of the lunation."""
    NEW_MOON = ("New Moon", 0.0)
    FIRST_QUARTER = ("First Quarter", 0.25)
    FULL_MOON = ("Full Moon", 0.5)
    LAST_QUARTER = ("Last Quarter", 0.75)

    def __init__(self, label: str, coeff: float) -> None:
        self.label = label
        self.coeff = coeff

    def __str__(self) -> str:
        return self.label


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


def _delta(quarter: Quarter, t: float, ms: float, mm: float, f: float) -> float:
    """Periodic correction to the mean phase, days."""
    tms = ms + ms
    tmm = mm + mm
    tf = f + f
    sin = math.sin

    if quarter in (Quarter.NEW_MOON, Quarter.FULL_MOON):
        return ((1.734e-1 - 3.93e-4 * t) * sin(ms)
                + 2.1e-3 * sin(tms)
                - 4.068e-1 * sin(mm)
                + 1.61e-2 * sin(tmm)
                - 4e-4 * sin(mm + tmm)
                + 1.04e-2 * sin(tf)
                - 5.1e-3 * sin(ms + mm)
                - 7.4e-3 * sin(ms - mm)
                + 4e-4 * sin(tf + ms)
                - 4e-4 * sin(tf - ms)
                - 6e-4 * sin(tf + mm)
                + 1e-3 * sin(tf - mm)
                + 5e-4 * sin(ms + tmm))

    delta = ((0.1721 - 0.0004 * t) * sin(ms)
             + 0.0021 * sin(tms)
             - 0.628 * sin(mm)
             + 0.0089 * sin(tmm)
             - 0.0004 * sin(tmm + mm)
             + 0.0079 * sin(tf)
             - 0.0119 * sin(ms + mm)
             - 0.0047 * sin(ms - mm)
             + 0.0003 * sin(tf + ms)
             - 0.0004 * sin(tf - ms)
             - 0.0006 * sin(tf + mm)
             + 0.0021 * sin(tf - mm)
             + 0.0003 * sin(ms + tmm)
             + 0.0004 * sin(ms - tmm)
             - 0.0003 * sin(tms + mm))
    w = 0.0028 - 0.0004 * math.cos(ms) + 0.0003 * math.cos(mm)
    if quarter is Quarter.LAST_QUARTER:
        w = -w
    return delta + w


def find_closest_phase(quarter: Quarter, date: CalDate) -> float:
    """
    DJD of the given lunar phase closest to a civil date.

    Args:
        quarter: Phase to find.
        date: Civil date near the wanted phase.

    Returns:
        Days since 1900 January 0.5.
    """
    n = 366.0 if is_leap_year(date.year) else 365.0
    y = date.year + day_of_year(date) / n
    k = _round_half_up((y - 1900) * _LUNATIONS_PER_YEAR) + quarter.coeff
    t = k / 1236.85
    t2 = t * t
    t3 = t2 * t

    c = math.radians(166.56 + (132.87 - 9.173e-3 * t) * t)
    # mean phase
    j = 0.75933 + _SYNODIC_MONTH * k + 0.0001178 * t2 - 1.55e-7 * t3 + 3.3e-4 * math.sin(c)

    def assemble(a: float, b: float, c2: float, d3: float) -> float:
        return math.radians(reduce_deg(a + b * k + c2 * t2 + d3 * t3))

    ms = assemble(359.2242, 29.10535608, -0.0000333, -0.00000347)
    mm = assemble(306.0253, 385.81691806, 0.0107306, 0.00001236)
    f = assemble(21.2964, 390.67050646, -0.0016528, -0.00000239)

    return j + _delta(quarter, t, ms, mm, f)
