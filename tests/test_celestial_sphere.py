# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the per-epoch celestial context and its caches."""
import logging
import threading

import pytest

from sphera.domain.celestial_sphere import CelestialSphera, build_aux_sun
from sphera.domain.orbit import OrbitInstance, PlanetId
from sphera.domain.time_systems import delta_t

_DJD = 23772.990277


class TestFactory:

    def test_instance(self):
        assert isinstance(CelestialSphera.for_djd(_DJD), CelestialSphera)

    def test_dynamical_time(self):
        ctx = CelestialSphera.for_djd(_DJD)
        assert ctx.delta_t == pytest.approx(delta_t(_DJD))
        assert ctx.t == pytest.approx((_DJD + ctx.delta_t / 86400) / 36525, abs=1e-15)

    def test_apparent_flag(self):
        assert CelestialSphera.for_djd(_DJD).apparent is True
        assert CelestialSphera.for_djd(_DJD, apparent=False).apparent is False

    def test_obliquity_plausible(self):
        assert 23.4 < CelestialSphera.for_djd(_DJD).obliquity < 23.5

    def test_creation_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sphera.domain.celestial_sphere"):
            CelestialSphera.for_djd(_DJD)
        assert any("Context for DJD" in r.getMessage() for r in caplog.records)


class TestAuxSun:

    def test_defined(self):
        aux = CelestialSphera.for_djd(_DJD).aux_sun
        assert len(aux) == 6

    def test_cached(self):
        ctx = CelestialSphera.for_djd(_DJD)
        assert ctx.aux_sun is ctx.aux_sun

    def test_combinations(self):
        x1, x2, x3, x4, x5, x6 = build_aux_sun(0.65)
        assert x1 == pytest.approx(0.65 / 5 + 0.1)
        assert x5 == pytest.approx(5 * x3 - 2 * x2)
        assert x6 == pytest.approx(2 * x2 - 6 * x3 + 3 * x4)


class TestOrbitInstances:

    def test_jupiter(self):
        oi = CelestialSphera.for_djd(_DJD).orbit_instance(PlanetId.JUPITER)
        assert isinstance(oi, OrbitInstance)
        assert oi.ph == pytest.approx(0.24031949336774427, abs=1e-6)
        assert oi.s == pytest.approx(0.048441411116171056, abs=1e-6)
        assert oi.nd == pytest.approx(1.7470969830387244, abs=1e-6)
        assert oi.ic == pytest.approx(0.022777074476789394, abs=1e-6)
        assert oi.sa == pytest.approx(5.202561)
        assert oi.ma == pytest.approx(0.707119826383305, abs=1e-6)
        assert oi.dm == pytest.approx(0.0014508822298571445, abs=1e-9)

    def test_cached_per_planet(self):
        ctx = CelestialSphera.for_djd(_DJD)
        assert ctx.orbit_instance(PlanetId.MARS) is ctx.orbit_instance(PlanetId.MARS)

    def test_concurrent_access_yields_one_instance(self):
        ctx = CelestialSphera.for_djd(_DJD)
        results = []

        def worker():
            results.append(ctx.orbit_instance(PlanetId.SATURN))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        assert all(r is results[0] for r in results)


class TestMeanAnomaly:

    def test_light_time_changes_anomaly(self):
        ctx = CelestialSphera.for_djd(_DJD)
        dt = delta_t(_DJD)
        assert abs(ctx.mean_anomaly(PlanetId.VENUS) - ctx.mean_anomaly(PlanetId.VENUS, dt)) > 0

    def test_zero_offset_is_instance_anomaly(self):
        ctx = CelestialSphera.for_djd(_DJD)
        assert ctx.mean_anomaly(PlanetId.MARS) == ctx.orbit_instance(PlanetId.MARS).ma
