# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-epoch celestial context.

CelestialSphera gathers the time-dependent quantities shared by all
planets for one moment (dynamical time, the Sun's true geocentric
position and mean anomaly, nutation, obliquity, Delta-T) and memoizes
the planets' orbit instances and the auxiliary Sun-angle vector used by
the outer-planet perturbation series.

Caches are write-once per key and guarded by a lock, so one context may
be shared between threads.
"""
import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Optional

from sphera.domain.angles import reduce_rad
from sphera.domain.constants import EphemerisConstants
from sphera.domain.nutation import NutationRecord, nutation, obliquity
from sphera.domain.orbit import ORBITAL_ELEMENTS, OrbitInstance, PlanetId, instantiate
from sphera.domain.sun import SunPosition, mean_anomaly, true_geocentric
from sphera.domain.time_systems import delta_t

logger = logging.getLogger(__name__)


def build_aux_sun(t: float) -> tuple[float, float, float, float, float, float]:
    """
    Auxiliary angles for the Jupiter..Neptune perturbation series.

    x1 is a time factor; x2, x3, x4 are the mean longitudes of Jupiter,
    Saturn and Uranus in radians; x5 and x6 are the great-inequality
    combinations 5·x3 - 2·x2 and 2·x2 - 6·x3 + 3·x4.
    """
    x1 = t / 5.0 + 0.1
    x2 = reduce_rad(4.14473 + 52.9691 * t)
    x3 = reduce_rad(4.641118 + 21.32991 * t)
    x4 = reduce_rad(4.250177 + 7.478172 * t)
    x5 = 5.0 * x3 - 2.0 * x2
    x6 = 2.0 * x2 - 6.0 * x3 + 3.0 * x4
    return x1, x2, x3, x4, x5, x6


@dataclass
class CelestialSphera:
    """Shared state for computing planetary positions at one epoch.

    Build with for_djd(); the public fields are not meant to change after
    construction.
    """
    t: float                    # Julian centuries of dynamical time since 1900 Jan 0.5
    sun_geo: SunPosition        # true geocentric Sun
    manom_sun: float            # mean anomaly of the Sun, radians
    nut: NutationRecord
    apparent: bool
    obliquity: float            # true obliquity, degrees
    delta_t: float              # TT - UT, seconds
    _aux_sun: Optional[tuple[float, ...]] = field(default=None, init=False, repr=False)
    _orbits: dict[PlanetId, OrbitInstance] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False,
    )

    @classmethod
    def for_djd(cls, djd: float, apparent: bool = True) -> "CelestialSphera":
        """
        Build the context for a moment of Universal Time.

        Args:
            djd: Days since 1900 January 0.5, UT.
            apparent: Apply nutation and aberration to planet positions.
        """
        dt = delta_t(djd)
        t = (djd + dt / EphemerisConstants.SECONDS_PER_DAY) / EphemerisConstants.DAYS_PER_CENTURY
        ms = mean_anomaly(t)
        nut = nutation(t)
        ob = obliquity(djd, nut.delta_eps)
        logger.debug(
            "Context for DJD %.6f: delta-T %.2f s, t=%.9f, apparent=%s",
            djd, dt, t, apparent,
        )
        return cls(
            t=t,
            sun_geo=true_geocentric(t, ms),
            manom_sun=math.radians(ms),
            nut=nut,
            apparent=apparent,
            obliquity=ob,
            delta_t=dt,
        )

    @property
    def aux_sun(self) -> tuple[float, ...]:
        """Auxiliary Sun-related angles, computed once."""
        with self._lock:
            if self._aux_sun is None:
                self._aux_sun = build_aux_sun(self.t)
            return self._aux_sun

    def orbit_instance(self, planet_id: PlanetId) -> OrbitInstance:
        """Planet's orbit instantiated at this epoch, cached per planet."""
        with self._lock:
            oi = self._orbits.get(planet_id)
            if oi is None:
                oi = instantiate(self.t, ORBITAL_ELEMENTS[planet_id])
                self._orbits[planet_id] = oi
                logger.debug("Instantiated %s orbit at t=%.9f", planet_id.name, self.t)
            return oi

    def mean_anomaly(self, planet_id: PlanetId, dt: float = 0.0) -> float:
        """
        Planet's mean anomaly in radians.

        Args:
            planet_id: Planet.
            dt: Light-time offset in days; the anomaly is moved back by
                dt times the daily motion.
        """
        oi = self.orbit_instance(planet_id)
        ma = oi.ma
        if dt != 0:
            ma -= math.radians(dt * oi.dm)
        return ma
