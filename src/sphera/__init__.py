# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sphera

Low-precision ephemeris of the Sun, the Moon and the eight major planets.
Apparent or true geocentric ecliptic positions from osculating orbits with
classical perturbation series, light-time and aberration corrections,
nutation and obliquity, the Moon's series, lunar nodes and phases,
equinoxes and solstices, Delta-T, sidereal time and calendar conversion.
"""

from sphera.domain.constants import EphemerisConstants
from sphera.domain.errors import (
    EphemerisError,
    DomainError,
    NonConvergenceError,
    UnknownPlanetError,
    CalendarError,
)
from sphera.domain.time_systems import (
    CalDate,
    jul_day,
    cal_day,
    datetime_to_djd,
    djd_to_datetime,
    delta_t,
    djd_to_sidereal,
)
from sphera.domain.nutation import (
    NutationRecord,
    nutation,
    obliquity,
)
from sphera.domain.coordinates import (
    EclipticCoords,
    ecl2equ,
    equ2ecl,
    equ2hor,
    hor2equ,
)
from sphera.domain.kepler import (
    eccentric_anomaly,
    true_anomaly,
)
from sphera.domain.orbit import (
    PlanetId,
    OrbitElements,
    OrbitInstance,
)
from sphera.domain.celestial_sphere import CelestialSphera
from sphera.domain.planets import (
    ALL_PLANETS,
    Planet,
    planet_for_id,
    planet_for_name,
    geocentric_position,
)
from sphera.domain.moon import MoonPosition, lunar_node
from sphera.domain.lunar_phases import Quarter, find_closest_phase
from sphera.domain.solstices import SolEquType, SolEquEvent, sol_equ
from sphera.domain.positions import BodyPosition, compute_positions

__version__ = "0.1.0"
