# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planet registry and geocentric position engine.

Heliocentric position from the perturbed osculating orbit, corrected for
light time by a second pass, then rotated to geocentric ecliptic
coordinates. Apparent positions add nutation in longitude and annual
aberration.

When we view a planet we see it where it was t = 0.1386·R hours ago, R
being its distance in AU. The first pass neglects light time; the second
repeats the calculation with the planet moved back by that interval
(Duffett-Smith, pp. 137-138).
"""
import logging
import math
from dataclasses import dataclass

from sphera.domain.angles import reduce_rad
from sphera.domain.celestial_sphere import CelestialSphera
from sphera.domain.constants import EphemerisConstants
from sphera.domain.coordinates import EclipticCoords
from sphera.domain.errors import UnknownPlanetError
from sphera.domain.kepler import eccentric_anomaly, true_anomaly
from sphera.domain.orbit import ORBITAL_ELEMENTS, OrbitElements, OrbitInstance, PlanetId
from sphera.domain.perturbations import PerturbationRecord, calculate_perturbations

logger = logging.getLogger(__name__)

ALL_PLANETS: tuple[PlanetId, ...] = tuple(PlanetId)

_INNER_PLANETS = frozenset({PlanetId.MERCURY, PlanetId.VENUS})


@dataclass(frozen=True)
class Planet:
    """A registered planet."""
    id: PlanetId
    name: str
    orbit: OrbitElements
    is_inner: bool

    def __str__(self) -> str:
        return self.name


_REGISTRY: dict[PlanetId, Planet] = {
    pid: Planet(
        id=pid,
        name=pid.name.capitalize(),
        orbit=ORBITAL_ELEMENTS[pid],
        is_inner=pid in _INNER_PLANETS,
    )
    for pid in ALL_PLANETS
}

_BY_NAME: dict[str, Planet] = {p.name.lower(): p for p in _REGISTRY.values()}


def planet_for_id(planet_id: PlanetId) -> Planet:
    """Registered planet for an id.

    Raises:
        UnknownPlanetError: planet_id is not a registered PlanetId.
    """
    try:
        return _REGISTRY[planet_id]
    except (KeyError, TypeError):
        raise UnknownPlanetError(f"Unknown planet id: {planet_id!r}") from None


def planet_for_name(name: str) -> Planet:
    """Registered planet for a name, case-insensitive ("mars", "Mars").

    Raises:
        UnknownPlanetError: no planet of that name.
    """
    planet = _BY_NAME.get(name.strip().lower())
    if planet is None:
        raise UnknownPlanetError(f"Unknown planet: {name!r}")
    return planet


# --------------------------------------------------------------------------- #
# Heliocentric step
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class HeliocentricRecord:
    """Perturbed heliocentric quantities of one pass. Angles in radians."""
    ll: float    # planet's projected longitude minus the Earth's longitude
    rpd: float   # radius vector projected on the ecliptic, AU
    lpd: float   # heliocentric ecliptic longitude
    spsi: float  # sine of heliocentric latitude
    cpsi: float  # cosine of heliocentric latitude
    rho: float   # Earth-planet distance, AU


def calculate_heliocentric(
    oi: OrbitInstance,
    ma: float,
    re: float,
    lg: float,
    pert: PerturbationRecord,
) -> HeliocentricRecord:
    """
    Heliocentric position from an orbit instance and its perturbations.

    Args:
        oi: Orbit instantiated for the epoch.
        ma: Mean anomaly of the planet (radians).
        re: Sun-Earth distance (AU).
        lg: Heliocentric longitude of the Earth (radians).
        pert: Perturbations of the orbit.

    Returns:
        HeliocentricRecord.
    """
    s = oi.s + pert.ds
    ma = reduce_rad(ma + pert.dm)
    ea = eccentric_anomaly(s, ma)
    nu = true_anomaly(s, ea)

    rp = (oi.sa + pert.da) * (1.0 - s * s) / (1.0 + s * math.cos(nu)) + pert.dr
    lp = nu + oi.ph + (pert.dml - pert.dm)
    lo = lp - oi.nd
    sin_lo = math.sin(lo)
    psi = math.asin(sin_lo * math.sin(oi.ic)) + pert.dhl
    lpd = math.atan2(sin_lo * math.cos(oi.ic), math.cos(lo)) + oi.nd + math.radians(pert.dl)
    cpsi = math.cos(psi)
    ll = lpd - lg
    rho = math.sqrt(re * re + rp * rp - 2.0 * re * rp * cpsi * math.cos(ll))

    # spsi of the latitude after the dhl correction
    return HeliocentricRecord(
        ll=ll, rpd=rp * cpsi, lpd=lpd, spsi=math.sin(psi), cpsi=cpsi, rho=rho,
    )


def light_time_corrected(
    planet_id: PlanetId,
    ctx: CelestialSphera,
    lg: float,
    re: float,
) -> HeliocentricRecord:
    """
    Heliocentric record after the light-time pass.

    Exactly two passes: the geometric one, then one with the planet moved
    back by the light time of the first. The distance reported is the one
    of the geometric pass.
    """
    oi = ctx.orbit_instance(planet_id)
    dt = 0.0
    rho0 = 0.0
    for _ in range(2):
        ma = ctx.mean_anomaly(planet_id, dt)
        pert = calculate_perturbations(planet_id, ctx, dt)
        h = calculate_heliocentric(oi, ma, re, lg, pert)
        if dt == 0.0:
            rho0 = h.rho
            dt = h.rho * EphemerisConstants.LIGHT_TIME_DAYS_PER_AU
            logger.debug(
                "%s geometric distance %.6f AU, light time %.6f d",
                planet_id.name, h.rho, dt,
            )
    return HeliocentricRecord(
        ll=h.ll, rpd=h.rpd, lpd=h.lpd, spsi=h.spsi, cpsi=h.cpsi, rho=rho0,
    )


# --------------------------------------------------------------------------- #
# Geocentric position
# --------------------------------------------------------------------------- #

def geocentric_position(planet: Planet | PlanetId, ctx: CelestialSphera) -> EclipticCoords:
    """
    Geocentric ecliptic position of a planet.

    If ctx.apparent, the position is referred to the true equinox of date
    and corrected for aberration; otherwise it is the true geometric
    position for the mean equinox.

    Args:
        planet: Planet or PlanetId.
        ctx: Celestial context for the epoch.

    Returns:
        EclipticCoords (degrees, degrees, AU).
    """
    if not isinstance(planet, Planet):
        planet = planet_for_id(planet)

    # Earth's heliocentric longitude is the Sun's geocentric one plus π
    lg = math.radians(ctx.sun_geo.longitude) + math.pi
    rsn = ctx.sun_geo.distance
    h = light_time_corrected(planet.id, ctx, lg, rsn)

    sll = math.sin(h.ll)
    cll = math.cos(h.ll)
    if planet.is_inner:
        lam = math.atan2(-h.rpd * sll, rsn - h.rpd * cll) + lg + math.pi
    else:
        lam = math.atan2(rsn * sll, h.rpd - rsn * cll) + h.lpd
    lam = reduce_rad(lam)
    bet = math.atan(h.rpd * h.spsi * math.sin(lam - h.lpd) / (h.cpsi * rsn * sll))

    if ctx.apparent:
        lam += math.radians(ctx.nut.delta_psi)
        a = lg - lam
        lam -= EphemerisConstants.ABERRATION_RAD * math.cos(a) / math.cos(bet)
        lam = reduce_rad(lam)
        bet -= EphemerisConstants.ABERRATION_RAD * math.sin(a) * math.sin(bet)

    return EclipticCoords(
        longitude=math.degrees(lam), latitude=math.degrees(bet), distance=h.rho,
    )
