# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the planetary perturbation series.

Reference records at DJD 23772.990277 (1965-02-01 11:46 UT).
"""
import pytest

from sphera.domain.celestial_sphere import CelestialSphera
from sphera.domain.errors import UnknownPlanetError
from sphera.domain.orbit import PlanetId
from sphera.domain.perturbations import (
    PERTURBATION_CALCULATORS,
    ZERO_PERTURBATIONS,
    PerturbationRecord,
    calculate_perturbations,
    jupiter_perturbations,
    mars_perturbations,
    mercury_perturbations,
    neptune_perturbations,
    pluto_perturbations,
    saturn_perturbations,
    uranus_perturbations,
    venus_perturbations,
)

_DJD = 23772.990277

_EXPECTED = {
    PlanetId.MERCURY: PerturbationRecord(
        dl=0.0008172644590941437, dr=-0.000004203179216262242,
    ),
    PlanetId.VENUS: PerturbationRecord(
        dl=0.005243803988052716, dr=-0.000016139294298865303,
        dml=-0.000005670065459895276, dm=-0.000005670065459895276,
    ),
    PlanetId.MARS: PerturbationRecord(
        dl=-0.00280602093366712, dr=-0.000007532639681080412,
        dml=0.00021929405846312294, dm=0.00021929405846312294,
    ),
    PlanetId.JUPITER: PerturbationRecord(
        dml=0.0025107670114457143, ds=-0.00021983995477328224,
        dm=0.009246807150538687, da=-0.00039433305976555575,
    ),
    PlanetId.SATURN: PerturbationRecord(
        dml=-0.0036485353349126858, ds=-0.0009366634839158407,
        dm=0.051169023060177676, da=0.006359386692275477,
        dhl=0.00004100755335842852,
    ),
    PlanetId.URANUS: PerturbationRecord(
        dl=-0.06841758311407377, dr=-0.028621319896722272,
        dml=-0.014130475503079687, ds=0.0009128215974594608,
        dm=0.027620929578174934, da=-0.001280698885069828,
        dhl=-0.0000025570207258577733,
    ),
    PlanetId.NEPTUNE: PerturbationRecord(
        dl=0.005870238119480507, dr=-0.04645417157280168,
        dml=0.009642140652184515, ds=-0.00042658797898279514,
        dm=0.06857037443749586, da=0.0029058215463567206,
        dhl=-9.7047829324761e-7,
    ),
}

_FIELDS = ("dl", "dr", "dml", "ds", "dm", "da", "dhl")


@pytest.fixture(scope="module")
def ctx():
    return CelestialSphera.for_djd(_DJD)


def _assert_record(got: PerturbationRecord, exp: PerturbationRecord) -> None:
    for name in _FIELDS:
        assert getattr(got, name) == pytest.approx(getattr(exp, name), rel=1e-4, abs=1e-10), name


class TestPerturbationRecords:

    @pytest.mark.parametrize("pid", list(_EXPECTED))
    def test_reference_records(self, ctx, pid):
        _assert_record(calculate_perturbations(pid, ctx), _EXPECTED[pid])

    def test_pluto_has_none(self, ctx):
        assert calculate_perturbations(PlanetId.PLUTO, ctx) == ZERO_PERTURBATIONS
        assert pluto_perturbations(ctx) == PerturbationRecord()

    def test_defaults_are_zero(self):
        rec = PerturbationRecord(dl=1.0)
        assert (rec.dr, rec.dml, rec.ds, rec.dm, rec.da, rec.dhl) == (0.0,) * 6


class TestDispatch:

    def test_every_planet_has_calculator(self):
        assert set(PERTURBATION_CALCULATORS) == set(PlanetId)

    @pytest.mark.parametrize("pid,fn", [
        (PlanetId.MERCURY, mercury_perturbations),
        (PlanetId.VENUS, venus_perturbations),
        (PlanetId.MARS, mars_perturbations),
        (PlanetId.JUPITER, jupiter_perturbations),
        (PlanetId.SATURN, saturn_perturbations),
        (PlanetId.URANUS, uranus_perturbations),
        (PlanetId.NEPTUNE, neptune_perturbations),
    ])
    def test_dispatch_matches_direct_call(self, ctx, pid, fn):
        assert calculate_perturbations(pid, ctx) == fn(ctx)

    def test_unknown_planet(self, ctx):
        with pytest.raises(UnknownPlanetError):
            calculate_perturbations("Vulcan", ctx)


class TestLightTimeOffset:
    """dt moves the inner planets back; the outer series ignore it."""

    @pytest.mark.parametrize("pid", [PlanetId.MERCURY, PlanetId.VENUS, PlanetId.MARS])
    def test_inner_planets_depend_on_dt(self, ctx, pid):
        assert calculate_perturbations(pid, ctx, 0.01) != calculate_perturbations(pid, ctx)

    @pytest.mark.parametrize("pid", [
        PlanetId.JUPITER, PlanetId.SATURN, PlanetId.URANUS, PlanetId.NEPTUNE,
    ])
    def test_outer_planets_ignore_dt(self, ctx, pid):
        assert calculate_perturbations(pid, ctx, 0.01) == calculate_perturbations(pid, ctx)
