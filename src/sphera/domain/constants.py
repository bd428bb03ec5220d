# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ephemeris constants.

Epoch conventions, solver tolerances and classical correction constants
shared by the domain modules. Day counts are DJD: Julian days elapsed
since 1900 January 0.5 (JD 2415020.0).
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class _EphemerisConstants:
    """Time-scale constants and numerical settings."""
    DJD_TO_JD: float = 2415020.0          # JD of 1900 January 0.5
    JD_TO_MJD: float = 2400000.5
    DAYS_PER_CENTURY: float = 36525.0
    SECONDS_PER_DAY: float = 86400.0
    DJD_UNIX_EPOCH: float = 25567.5       # DJD of 1970-01-01T00:00:00Z
    KEPLER_TOLERANCE: float = 1e-7        # |E - e sin E - M| at convergence
    KEPLER_MAX_ITERATIONS: int = 100
    LIGHT_TIME_DAYS_PER_AU: float = 5.775518e-3
    ABERRATION_RAD: float = 9.9387e-5     # annual aberration, planets
    SUN_ABERRATION_DEG: float = 5.69e-3
    SOLSTICE_TOLERANCE_DEG: float = 1e-6
    SOLSTICE_MAX_ITERATIONS: int = 50


EphemerisConstants: _EphemerisConstants = _EphemerisConstants()
