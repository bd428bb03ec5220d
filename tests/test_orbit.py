# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for orbital element polynomials and their instantiation."""
import math

import pytest

from sphera.domain.orbit import (
    ORBITAL_ELEMENTS,
    MeanLongitudeTerms,
    OrbitElements,
    OrbitInstance,
    PlanetId,
    Terms,
    instantiate,
    terms,
)

_T = 0.8405338809034908


class TestTerms:

    def test_standard_terms(self):
        assert terms(75.899697, 1.5554889, 0.0002947).assemble(_T) == pytest.approx(
            77.2073463265456, abs=1e-6)

    def test_factory(self):
        assert terms(1.0, 2.0) == Terms((1.0, 2.0))

    def test_reduced_to_circle(self):
        assert 0.0 <= terms(-10.0, 1.0).assemble(0.5) < 360.0


class TestMeanLongitudeTerms:

    def test_one_term(self):
        assert MeanLongitudeTerms(178.179078).assemble(_T) == pytest.approx(178.179078, abs=1e-6)

    def test_two_terms(self):
        ml = MeanLongitudeTerms(178.179078, 415.2057519)
        assert ml.assemble(_T) == pytest.approx(176.1998044652222, abs=1e-6)

    def test_three_terms(self):
        ml = MeanLongitudeTerms(178.179078, 415.2057519, 0.0003011)
        assert ml.assemble(_T) == pytest.approx(176.2000171915306, abs=1e-6)

    def test_four_terms(self):
        ml = MeanLongitudeTerms(178.179078, 415.2057519, 0.0003011, 1e-6)
        assert ml.assemble(_T) == pytest.approx(176.2000177853655, abs=1e-6)


class TestInstantiate:
    """Mercury's elements at t = 0.8405 centuries."""

    @pytest.fixture
    def oi(self):
        oe = OrbitElements(
            mean_longitude=MeanLongitudeTerms(178.179078, 415.2057519, 3.011e-4),
            perihelion=terms(75.899697, 1.5554889, 2.947e-4),
            eccentricity=terms(2.0561421e-1, 2.046e-5, -3e-8),
            inclination=terms(7.002881, 1.8608e-3, -1.83e-5),
            node=terms(47.145944, 1.1852083, 1.739e-4),
            semi_axis=3.870986e-1,
        )
        return instantiate(_T, oe)

    def test_type(self, oi):
        assert isinstance(oi, OrbitInstance)

    def test_mean_anomaly(self, oi):
        assert oi.ma == pytest.approx(1.7277480419370512, abs=1e-6)

    def test_daily_motion(self, oi):
        assert oi.dm == pytest.approx(0.07142545459475612, abs=1e-6)

    def test_perihelion(self, oi):
        assert oi.ph == pytest.approx(1.34752240012577, abs=1e-6)

    def test_eccentricity(self, oi):
        assert oi.s == pytest.approx(0.20563138612828713, abs=1e-6)

    def test_node(self, oi):
        assert oi.nd == pytest.approx(0.8402412010285969, abs=1e-6)

    def test_inclination(self, oi):
        assert oi.ic == pytest.approx(0.12225040301524157, abs=1e-6)

    def test_semi_axis(self, oi):
        assert oi.sa == pytest.approx(0.3870986)

    def test_registered_mercury_matches(self, oi):
        assert instantiate(_T, ORBITAL_ELEMENTS[PlanetId.MERCURY]) == oi


class TestElementTable:

    def test_all_planets_registered(self):
        assert set(ORBITAL_ELEMENTS) == set(PlanetId)

    @pytest.mark.parametrize("pid", list(PlanetId))
    def test_instances_in_domain(self, pid):
        oi = instantiate(0.85, ORBITAL_ELEMENTS[pid])
        assert 0.0 <= oi.s < 1.0
        assert 0.0 <= oi.ma < 2 * math.pi
        assert oi.sa > 0.0
        assert oi.dm > 0.0

    def test_semi_axes_increase_outwards(self):
        axes = [ORBITAL_ELEMENTS[pid].semi_axis for pid in PlanetId]
        assert axes == sorted(axes)
