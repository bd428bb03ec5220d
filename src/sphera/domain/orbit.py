# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Osculating orbital elements of the major planets.

Each element is a polynomial in Julian centuries since 1900 January 0.5,
reduced to [0, 360). The mean longitude grows by hundreds of revolutions
per century, so whole revolutions are stripped from its linear term with
frac360 before the small higher-order terms are added.

Element values after Duffett-Smith, "Astronomy with Your Personal
Computer", Table 7.
"""
import math
from dataclasses import dataclass
from enum import Enum

from sphera.domain.angles import frac360, polynome, reduce_deg
from sphera.domain.constants import EphemerisConstants

# Mean daily motion per unit of the mean longitude's linear coefficient
_DAILY_MOTION_FACTOR: float = 9.856263e-3


class PlanetId(Enum):
    """Major planets, ordered by distance from the Sun."""
    MERCURY = 0
    VENUS = 1
    MARS = 2
    JUPITER = 3
    SATURN = 4
    URANUS = 5
    NEPTUNE = 6
    PLUTO = 7


@dataclass(frozen=True)
class Terms:
    """Polynomial a₀ + a₁t + a₂t² + ... in degrees."""
    coefficients: tuple[float, ...]

    def assemble(self, t: float) -> float:
        """Evaluate at t centuries, reduced to [0, 360)."""
        return reduce_deg(polynome(t, *self.coefficients))


def terms(*coefficients: float) -> Terms:
    return Terms(tuple(coefficients))


@dataclass(frozen=True)
class MeanLongitudeTerms:
    """Mean longitude a + b·t + c·t² + d·t³, linear term taken modulo 360."""
    a: float
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def assemble(self, t: float) -> float:
        return reduce_deg(self.a + frac360(self.b * t) + (self.d * t + self.c) * t * t)


@dataclass(frozen=True)
class OrbitElements:
    """Osculating elements of one planet as functions of time."""
    mean_longitude: MeanLongitudeTerms
    perihelion: Terms       # argument of perihelion
    eccentricity: Terms
    inclination: Terms
    node: Terms             # longitude of ascending node
    semi_axis: float        # AU


@dataclass(frozen=True)
class OrbitInstance:
    """Orbit elements evaluated at one epoch. Angles in radians."""
    ph: float  # argument of perihelion
    s: float   # eccentricity
    nd: float  # ascending node
    ic: float  # inclination
    sa: float  # semi-major axis, AU
    ma: float  # mean anomaly
    dm: float  # mean daily motion


def instantiate(t: float, elements: OrbitElements) -> OrbitInstance:
    """
    Evaluate orbit elements at an epoch.

    Args:
        t: Julian centuries since 1900 January 0.5.
        elements: Planet's osculating elements.

    Returns:
        OrbitInstance with angles in radians.
    """
    ml = elements.mean_longitude
    ph = elements.perihelion.assemble(t)
    dm = ml.b * _DAILY_MOTION_FACTOR + (ml.c + ml.d) / EphemerisConstants.DAYS_PER_CENTURY
    return OrbitInstance(
        ph=math.radians(ph),
        s=elements.eccentricity.assemble(t),
        nd=math.radians(elements.node.assemble(t)),
        ic=math.radians(elements.inclination.assemble(t)),
        sa=elements.semi_axis,
        ma=math.radians(reduce_deg(ml.assemble(t) - ph)),
        dm=math.radians(dm),
    )


# --------------------------------------------------------------------------- #
# Element table
# --------------------------------------------------------------------------- #

ORBITAL_ELEMENTS: dict[PlanetId, OrbitElements] = {
    PlanetId.MERCURY: OrbitElements(
        mean_longitude=MeanLongitudeTerms(178.179078, 415.2057519, 3.011e-4),
        perihelion=terms(75.899697, 1.5554889, 2.947e-4),
        eccentricity=terms(2.0561421e-1, 2.046e-5, -3e-8),
        inclination=terms(7.002881, 1.8608e-3, -1.83e-5),
        node=terms(47.145944, 1.1852083, 1.739e-4),
        semi_axis=3.870986e-1,
    ),
    PlanetId.VENUS: OrbitElements(
        mean_longitude=MeanLongitudeTerms(342.767053, 162.5533664, 3.097e-4),
        perihelion=terms(130.163833, 1.4080361, -9.764e-4),
        eccentricity=terms(6.82069e-3, -4.774e-5, 9.1e-8),
        inclination=terms(3.393631, 1.0058e-3, -1e-6),
        node=terms(75.779647, 8.9985e-1, 4.1e-4),
        semi_axis=7.233316e-1,
    ),
    PlanetId.MARS: OrbitElements(
        mean_longitude=MeanLongitudeTerms(293.737334, 53.17137642, 3.107e-4),
        perihelion=terms(3.34218203e2, 1.8407584, 1.299e-4, -1.19e-6),
        eccentricity=terms(9.33129e-2, 9.2064e-5, -7.7e-8),
        inclination=terms(1.850333, -6.75e-4, 1.26e-5),
        node=terms(48.786442, 7.709917e-1, -1.4e-6, -5.33e-6),
        semi_axis=1.5236883,
    ),
    PlanetId.JUPITER: OrbitElements(
        mean_longitude=MeanLongitudeTerms(238.049257, 8.434172183, 3.347e-4, -1.65e-6),
        perihelion=terms(1.2720972e1, 1.6099617, 1.05627e-3, -3.43e-6),
        eccentricity=terms(4.833475e-2, 1.6418e-4, -4.676e-7, -1.7e-9),
        inclination=terms(1.308736, -5.6961e-3, 3.9e-6),
        node=terms(99.443414, 1.01053, 3.5222e-4, -8.51e-6),
        semi_axis=5.202561,
    ),
    PlanetId.SATURN: OrbitElements(
        mean_longitude=MeanLongitudeTerms(266.564377, 3.398638567, 3.245e-4, -5.8e-6),
        perihelion=terms(9.1098214e1, 1.9584158, 8.2636e-4, 4.61e-6),
        eccentricity=terms(5.589232e-2, -3.455e-4, -7.28e-7, 7.4e-10),
        inclination=terms(2.492519, -3.9189e-3, -1.549e-5, 4e-8),
        node=terms(112.790414, 8.731951e-1, -1.5218e-4, -5.31e-6),
        semi_axis=9.554747,
    ),
    PlanetId.URANUS: OrbitElements(
        mean_longitude=MeanLongitudeTerms(244.19747, 1.194065406, 3.16e-4, -6e-7),
        perihelion=terms(1.71548692e2, 1.4844328, 2.372e-4, -6.1e-7),
        eccentricity=terms(4.63444e-2, -2.658e-5, 7.7e-8),
        inclination=terms(7.72464e-1, 6.253e-4, 3.95e-5),
        node=terms(73.477111, 4.986678e-1, 1.3117e-3),
        semi_axis=19.21814,
    ),
    PlanetId.NEPTUNE: OrbitElements(
        mean_longitude=MeanLongitudeTerms(84.457994, 6.107942056e-1, 3.205e-4, -6e-7),
        perihelion=terms(4.6727364e1, 1.4245744, 3.9082e-4, -6.05e-7),
        eccentricity=terms(8.99704e-3, 6.33e-6, -2e-9),
        inclination=terms(1.779242, -9.5436e-3, -9.1e-6),
        node=terms(130.681389, 1.098935, 2.4987e-4, -4.718e-6),
        semi_axis=30.10957,
    ),
    PlanetId.PLUTO: OrbitElements(
        mean_longitude=MeanLongitudeTerms(95.3113544, 3.980332167e-1),
        perihelion=terms(224.017),
        eccentricity=terms(2.5515e-1),
        inclination=terms(17.1329),
        node=terms(110.191),
        semi_axis=39.8151,
    ),
}
