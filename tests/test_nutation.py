# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for nutation in longitude and obliquity, and the obliquity of the ecliptic."""
import pytest

from sphera.domain.nutation import NutationRecord, nutation, obliquity, true_obliquity


class TestNutation:

    @pytest.mark.parametrize("djd,dpsi,deps", [
        (-15804.5, -0.00127601021242336, 0.00256293723137559),   # 1856 Sep 23
        (36524.5, -0.00387728730373955, -0.00159919822661103),   # 2000 Jan 1
        (28805.69, -9.195562346652888e-4, -2.635113483663831e-3),  # 1978 Nov 17
        (23772.5, -0.0042774118548615766, 0.000425),             # 1965 Feb 1
    ])
    def test_reference_values(self, djd, dpsi, deps):
        nut = nutation(djd / 36525)
        assert nut.delta_psi == pytest.approx(dpsi, abs=5e-5)
        assert nut.delta_eps == pytest.approx(deps, abs=5e-5)

    def test_record_type(self):
        assert isinstance(nutation(0.8), NutationRecord)

    def test_bounded(self):
        # principal term amplitudes are about 17.2" and 9.2"
        for t in (-2.0, -0.5, 0.0, 0.65, 1.0, 1.5):
            nut = nutation(t)
            assert abs(nut.delta_psi) < 20.0 / 3600
            assert abs(nut.delta_eps) < 10.0 / 3600


class TestObliquity:
    """Duffett-Smith, p. 54; Meeus, Astronomical Algorithms, p. 148."""

    @pytest.mark.parametrize("djd,eps", [
        (29120.5, 23.441916666666668),  # 1979-09-24.0
        (36524.5, 23.43927777777778),   # 2000-01-01.0
    ])
    def test_mean(self, djd, eps):
        assert obliquity(djd) == pytest.approx(eps, abs=5e-5)

    def test_with_nutation(self):
        # 1987-04-10.0, deps = 9.443"
        assert obliquity(31875.5, 9.443 / 3600) == pytest.approx(23.443569444444446, abs=5e-5)

    def test_true_obliquity_adds_deps(self):
        djd = 31875.5
        deps = nutation(djd / 36525).delta_eps
        assert true_obliquity(djd) == pytest.approx(obliquity(djd) + deps)
