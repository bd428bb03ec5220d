# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Equinoxes and solstices.

The moment the apparent solar longitude reaches k·90° is found by
iterating djd += 58·sin(k·90° - λ) from a mean-year estimate. Accurate to
a few minutes of time.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

from sphera.domain.angles import shortest_arc
from sphera.domain.constants import EphemerisConstants
from sphera.domain.errors import NonConvergenceError
from sphera.domain.sun import apparent

logger = logging.getLogger(__name__)


class SolEquType(Enum):
    """Equinox/solstice kind; value is the quarter index k (λ = k·90°)."""
    MARCH_EQUINOX = 0
    JUNE_SOLSTICE = 1
    SEPTEMBER_EQUINOX = 2
    DECEMBER_SOLSTICE = 3


@dataclass(frozen=True)
class SolEquEvent:
    """Equinox or solstice circumstances."""
    djd: float
    longitude: float  # apparent solar longitude at djd, degrees


def sol_equ(
    year: int,
    kind: SolEquType,
    max_iterations: int = EphemerisConstants.SOLSTICE_MAX_ITERATIONS,
) -> SolEquEvent:
    """
    Find the equinox or solstice of the given year.

    Raises:
        NonConvergenceError: if the search does not settle within max_iterations.
    """
    k = kind.value
    k90 = k * 90.0
    djd = (year + k / 4.0) * 365.2422 - 693878.7

    for _ in range(max_iterations):
        lam = apparent(djd, ignore_light_travel=True).longitude
        djd += 58.0 * math.sin(math.radians(k90 - lam))
        if shortest_arc(k90, lam) < EphemerisConstants.SOLSTICE_TOLERANCE_DEG:
            return SolEquEvent(djd=djd, longitude=lam)

    logger.warning(
        "%s %d search did not converge after %d steps", kind.name, year, max_iterations,
    )
    raise NonConvergenceError(
        f"{kind.name} of {year} not found within {max_iterations} iterations"
    )
