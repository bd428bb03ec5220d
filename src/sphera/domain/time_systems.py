# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Calendar and time-scale conversions on the DJD day count.

DJD counts Julian days from 1900 January 0.5 (JD 2415020.0). Calendar
conversion switches from Julian to Gregorian at 1582 October 15; the ten
days 1582 October 5..14 do not exist. Civil years have no year zero
(1 BC is year -1).

Also provides Delta-T (TT - UT) from a bundled table with polynomial
extrapolation outside it, and sidereal time.
"""

import json
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone, timedelta
from pathlib import Path
from typing import Optional

import numpy as np

from sphera.domain.angles import to_range
from sphera.domain.constants import EphemerisConstants
from sphera.domain.errors import CalendarError

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_SIDEREAL_RATE: float = 0.9972695677
"""Mean solar day / mean sidereal day."""


@dataclass(frozen=True)
class CalDate:
    """Civil calendar date. `day` carries the time of day as a fraction."""
    year: int
    month: int
    day: float


def julian_centuries(djd: float) -> float:
    """Julian centuries elapsed since DJD 0 (1900 January 0.5)."""
    return djd / EphemerisConstants.DAYS_PER_CENTURY


# --------------------------------------------------------------------------- #
# Calendar
# --------------------------------------------------------------------------- #

def _after_gregorian(year: int, month: int, day: float) -> bool:
    if year != 1582:
        return year > 1582
    if month != 10:
        return month > 10
    return day >= 15


def jul_day(date: CalDate) -> float:
    """Civil date to DJD.

    Raises:
        CalendarError: for year 0 or a day inside the 1582 Gregorian gap.
    """
    if date.year == 0:
        raise CalendarError("Zero year not allowed!")
    d = math.trunc(date.day)
    if date.year == 1582 and date.month == 10 and 4 < d < 15:
        raise CalendarError(
            f"Impossible date: {date.year}-{date.month:02d}-{d:02d} "
            "falls in the Gregorian calendar reform gap"
        )

    y = date.year + 1 if date.year < 0 else date.year
    m = date.month
    if m < 3:
        m += 12
        y -= 1

    if _after_gregorian(date.year, date.month, date.day):
        a = math.trunc(y / 100)
        b = 2 - a + math.trunc(a / 4)
    else:
        b = 0

    f = 365.25 * y
    c = math.trunc(f - 0.75 if y < 0 else f) - 694025
    e = math.trunc(30.6001 * (m + 1))
    return b + c + e + date.day - 0.5


def cal_day(djd: float) -> CalDate:
    """DJD to civil date; inverse of jul_day()."""
    f, i = math.modf(djd + 0.5)
    if i > -115860.0:
        a = math.floor(i / 36524.25 + 9.9835726e-1) + 14
        i += 1 + a - math.floor(a / 4.0)

    b = math.floor(i / 365.25 + 8.02601e-1)
    c = i - math.floor(365.25 * b + 7.50001e-1) + 416
    g = math.floor(c / 30.6001)
    day = c - math.floor(30.6001 * g) + f
    month = g - 13 if g > 13.5 else g - 1
    year = b + 1900 if month < 2.5 else b + 1899
    if year < 1:
        year -= 1
    return CalDate(int(year), int(month), day)


def djd_midnight(djd: float) -> float:
    """DJD of the preceding Greenwich midnight."""
    f = math.floor(djd)
    return f + 0.5 if abs(djd - f) >= 0.5 else f - 0.5


def week_day(djd: float) -> int:
    """Day of week, 0 = Sunday."""
    j0 = djd_midnight(djd) + EphemerisConstants.DJD_TO_JD
    return int(math.fmod(j0 + 1.5, 7.0))


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(date: CalDate) -> int:
    """Ordinal day of the year, 1 January = 1."""
    k = 1 if is_leap_year(date.year) else 2
    a = math.floor(275 * date.month / 9.0)
    b = math.floor(k * ((date.month + 9) / 12.0))
    c = math.floor(date.day)
    return int(a - b + c - 30)


def djd_zero(year: int) -> float:
    """DJD of January 0.0 of the given (Gregorian) year."""
    y = year - 1
    a = math.trunc(y / 100)
    return math.trunc(365.25 * y) - a + math.trunc(a / 4) - 693595.5


def datetime_to_djd(dt: datetime) -> float:
    """UTC datetime to DJD. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    seconds = (dt - _UNIX_EPOCH).total_seconds()
    return seconds / EphemerisConstants.SECONDS_PER_DAY + EphemerisConstants.DJD_UNIX_EPOCH


def djd_to_datetime(djd: float) -> datetime:
    """DJD to a timezone-aware UTC datetime."""
    return _UNIX_EPOCH + timedelta(days=djd - EphemerisConstants.DJD_UNIX_EPOCH)


# --------------------------------------------------------------------------- #
# Delta-T table
# --------------------------------------------------------------------------- #

_DELTA_T_TABLE: Optional[dict] = None


def _load_delta_t() -> dict:
    """Load and cache the Delta-T table from bundled JSON."""
    global _DELTA_T_TABLE
    if _DELTA_T_TABLE is not None:
        return _DELTA_T_TABLE

    data_path = Path(__file__).parent.parent / "data" / "delta_t.json"
    with open(data_path) as f:
        data = json.load(f)

    first = float(data["first_year"])
    step = float(data["step_years"])
    values = np.asarray(data["values"], dtype=np.float64)
    years = first + step * np.arange(len(values))

    _DELTA_T_TABLE = {"years": years, "values": values}
    logger.debug(
        "Loaded Delta-T table: %d entries, %.0f-%.0f",
        len(values), years[0], years[-1],
    )
    return _DELTA_T_TABLE


def _delta_t_polynomial(year: int, table_end: float) -> float:
    """Espenak-Meeus style extrapolation outside the tabulated span.

    Between the table end and 2100 the quadratic carries an extra
    0.37·(year - 2100) term.
    """
    u = (year - 2000) / 100.0
    if year < 948:
        return 2177.0 + 497.0 * u + 44.1 * u * u
    dt = 102.0 + 102.0 * u + 25.3 * u * u
    if table_end < year < 2100:
        dt += 0.37 * (year - 2100)
    return dt


def delta_t(djd: float) -> float:
    """TT - UT in seconds at the given DJD.

    Linear interpolation in the table on the fractional year; outside
    the table a quadratic in centuries from 2000 on the civil year.
    """
    table = _load_delta_t()
    years = table["years"]

    date = cal_day(djd)
    n_days = 366.0 if is_leap_year(date.year) else 365.0
    y = date.year + (day_of_year(date) - 1) / n_days

    if years[0] <= y <= years[-1]:
        return float(np.interp(y, years, table["values"]))
    return _delta_t_polynomial(date.year, float(years[-1]))


# --------------------------------------------------------------------------- #
# Sidereal time
# --------------------------------------------------------------------------- #

def _tnaught(djd: float) -> float:
    """Greenwich sidereal time at 0h UT of the date, hours (unreduced)."""
    year = cal_day(djd).year
    dj0 = jul_day(CalDate(year, 1, 0.0))
    t = dj0 / EphemerisConstants.DAYS_PER_CENTURY
    r = 6.6460656 + (5.1262e-2 + t * 2.581e-5) * t
    b = 24.0 - r - 2400.0 * (t - (year - 1900) / 100.0)
    return 6.57098e-2 * (djd - dj0) - b


def djd_to_sidereal(djd: float, lng: float = 0.0) -> float:
    """Local mean sidereal time in hours [0, 24).

    Args:
        djd: Universal time as DJD.
        lng: Geographic longitude in degrees, positive west.
    """
    djm = djd_midnight(djd)
    utc = (djd - djm) * 24.0
    gst = utc / _SIDEREAL_RATE + _tnaught(djm)
    return to_range(gst - lng / 15.0, 24.0)
