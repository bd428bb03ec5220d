# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Kepler's equation for elliptical orbits.

E - e·sin(E) = M solved by Newton iteration from E₀ = M, and the closed
form for the true anomaly. Only 0 <= e < 1 is accepted.
"""
import logging
import math

from sphera.domain.constants import EphemerisConstants
from sphera.domain.errors import DomainError, NonConvergenceError

logger = logging.getLogger(__name__)


def _check_eccentricity(s: float) -> None:
    if not math.isfinite(s) or s < 0.0 or s >= 1.0:
        raise DomainError(f"Eccentricity must be in [0, 1), got {s}")


def eccentric_anomaly(
    s: float,
    m: float,
    tolerance: float = EphemerisConstants.KEPLER_TOLERANCE,
    max_iterations: int = EphemerisConstants.KEPLER_MAX_ITERATIONS,
) -> float:
    """
    Solve Kepler's equation.

    Args:
        s: Eccentricity, 0 <= s < 1.
        m: Mean anomaly (radians).
        tolerance: Convergence threshold on |E - s·sin(E) - M|.
        max_iterations: Newton step bound.

    Returns:
        Eccentric anomaly (radians), same revolution as m.

    Raises:
        DomainError: s outside [0, 1) or m not finite.
        NonConvergenceError: no convergence within max_iterations.
    """
    _check_eccentricity(s)
    if not math.isfinite(m):
        raise DomainError(f"Mean anomaly must be finite, got {m}")

    # Newton from E = π converges monotonically on [0, 2π) for any s < 1
    base = 2.0 * math.pi * math.floor(m / (2.0 * math.pi))
    m0 = m - base
    ea = math.pi
    for _ in range(max_iterations):
        dla = ea - s * math.sin(ea) - m0
        if abs(dla) < tolerance:
            return base + ea
        ea -= dla / (1.0 - s * math.cos(ea))

    logger.warning(
        "Kepler iteration did not converge: e=%.9f M=%.9f after %d steps",
        s, m, max_iterations,
    )
    raise NonConvergenceError(
        f"Kepler equation did not converge for e={s}, M={m} "
        f"within {max_iterations} iterations"
    )


def true_anomaly(s: float, ea: float) -> float:
    """True anomaly (radians, in (-π, π]) from eccentricity and eccentric anomaly."""
    _check_eccentricity(s)
    return 2.0 * math.atan(math.sqrt((1.0 + s) / (1.0 - s)) * math.tan(ea / 2.0))
