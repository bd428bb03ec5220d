# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the Kepler equation solver."""
import logging
import math

import pytest

from sphera.domain.errors import DomainError, NonConvergenceError
from sphera.domain.kepler import eccentric_anomaly, true_anomaly


_CASES = [
    # mean anomaly, eccentricity, eccentric anomaly, true anomaly
    (3.5208387374141448, 0.016718, 3.5147440476661806, -2.774497552017826),
    (0.763009079752865, 0.965, 1.7176273861066755, 2.9122563898777387),
]


class TestEccentricAnomaly:

    @pytest.mark.parametrize("m,s,ea,_ta", _CASES)
    def test_reference(self, m, s, ea, _ta):
        assert eccentric_anomaly(s, m) == pytest.approx(ea, abs=5e-5)

    @pytest.mark.parametrize("m,s,_ea,_ta", _CASES)
    def test_satisfies_kepler_equation(self, m, s, _ea, _ta):
        e = eccentric_anomaly(s, m)
        assert e - s * math.sin(e) - m == pytest.approx(0.0, abs=1e-7)

    def test_circular_orbit(self):
        assert eccentric_anomaly(0.0, 1.234) == pytest.approx(1.234)

    @pytest.mark.parametrize("s", [1.0, 1.5, -0.1, math.nan, math.inf])
    def test_eccentricity_out_of_domain(self, s):
        with pytest.raises(DomainError):
            eccentric_anomaly(s, 1.0)

    def test_non_finite_mean_anomaly(self):
        with pytest.raises(DomainError):
            eccentric_anomaly(0.1, math.nan)

    def test_iteration_bound(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sphera.domain.kepler"):
            with pytest.raises(NonConvergenceError):
                eccentric_anomaly(0.965, 0.763009079752865, max_iterations=1)
        assert any("did not converge" in r.getMessage() for r in caplog.records)


class TestTrueAnomaly:

    @pytest.mark.parametrize("_m,s,ea,ta", _CASES)
    def test_reference(self, _m, s, ea, ta):
        assert true_anomaly(s, ea) == pytest.approx(ta, abs=5e-5)

    def test_out_of_domain(self):
        with pytest.raises(DomainError):
            true_anomaly(1.0, 0.5)


# ── Sweep over the elliptic domain ──────────────────────────────────

_ECCENTRICITIES = [0.0, 0.016718, 0.2, 0.5, 0.9, 0.965, 0.99]
_MEAN_ANOMALIES = [(i + 0.5) * 2.0 * math.pi / 72 for i in range(72)]


class TestKeplerSweep:
    """Solver and true anomaly over s in [0, 0.99], M in [0, 2π)."""

    @pytest.mark.parametrize("s", _ECCENTRICITIES)
    def test_residual_below_tolerance(self, s):
        for m in [0.0, math.pi, *_MEAN_ANOMALIES]:
            e = eccentric_anomaly(s, m)
            assert abs(e - s * math.sin(e) - m) < 1e-7

    @pytest.mark.parametrize("s", _ECCENTRICITIES)
    def test_same_revolution_as_mean_anomaly(self, s):
        for m in (-4.0, 7.5, 20.0):
            e = eccentric_anomaly(s, m)
            assert math.floor(e / (2.0 * math.pi)) == math.floor(m / (2.0 * math.pi))
            assert abs(e - s * math.sin(e) - m) < 1e-7

    @pytest.mark.parametrize("s", _ECCENTRICITIES)
    def test_true_anomaly_sign_matches_mean_anomaly(self, s):
        for m in _MEAN_ANOMALIES:
            nu = true_anomaly(s, eccentric_anomaly(s, m))
            # (0, π) is the outbound half, (π, 2π) the inbound half
            assert (nu > 0.0) == (math.sin(m) > 0.0)

    @pytest.mark.parametrize("s", _ECCENTRICITIES)
    def test_true_anomaly_increases_with_mean_anomaly(self, s):
        nus = [true_anomaly(s, eccentric_anomaly(s, m)) % (2.0 * math.pi)
               for m in _MEAN_ANOMALIES]
        assert all(a < b for a, b in zip(nus, nus[1:]))

    @pytest.mark.parametrize("m", _MEAN_ANOMALIES[::9])
    def test_circular_orbit_anomalies_coincide(self, m):
        e = eccentric_anomaly(0.0, m)
        assert e == pytest.approx(m, abs=1e-7)
        assert true_anomaly(0.0, e) % (2.0 * math.pi) == pytest.approx(m, abs=1e-7)
