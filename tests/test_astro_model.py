"""Tests for the AstroModel collaborator."""

import logging
import math

import pytest

from celestjax.astro_model import LOCAL_HORIZON, AstroModel, mean_obliquity
from celestjax.constants import (
    AS2RAD,
    GALACTIC_CENTRE_DEC,
    GALACTIC_CENTRE_RA,
    GALACTIC_POLE_DEC,
    GALACTIC_POLE_RA,
    OBLIQUITY_J2000,
)
from celestjax.coordinate_systems import CoordinateSystem
from celestjax.frames import ecliptic_to_equator
from celestjax.geometry import GreatCircle, LatLong

EQU = CoordinateSystem.EQUATOR_OF_DATE
ECL = CoordinateSystem.ECLIPTIC_OF_DATE


class TestObliquity:
    def test_j2000(self):
        assert float(mean_obliquity(2000.0)) == pytest.approx(OBLIQUITY_J2000 * AS2RAD, abs=1e-15)
        assert float(mean_obliquity(2000.0)) == pytest.approx(0.40909260, abs=1e-8)

    def test_one_century(self):
        expected = (84381.406 - 46.836769 - 0.0001831 + 0.00200340 - 0.000000576 - 0.0000000434) * AS2RAD
        assert float(mean_obliquity(2100.0)) == pytest.approx(expected, abs=1e-14)

    def test_decreasing(self):
        assert float(mean_obliquity(2100.0)) < float(mean_obliquity(2000.0)) < float(mean_obliquity(1900.0))

    def test_model_default(self):
        model = AstroModel(year=2050.0)
        assert model.year() == 2050.0
        assert float(model.obliquity()) == pytest.approx(float(mean_obliquity(2050.0)), abs=1e-15)

    def test_model_explicit(self):
        model = AstroModel(obliquity=0.409092802)
        assert float(model.obliquity()) == pytest.approx(0.409092802, abs=1e-15)


class TestGalactic:
    def test_pole_equatorial(self):
        pole = AstroModel().galactic_north_pole(2000.0, False)
        assert pole.tag == EQU
        assert math.degrees(float(pole.lat)) == pytest.approx(GALACTIC_POLE_DEC, abs=1e-10)
        assert math.degrees(float(pole.lon)) % 360.0 == pytest.approx(GALACTIC_POLE_RA, abs=1e-10)

    def test_centre_equatorial(self):
        centre = AstroModel().galactic_centre(2000.0, False)
        assert centre.tag == EQU
        assert math.degrees(float(centre.lat)) == pytest.approx(GALACTIC_CENTRE_DEC, abs=1e-10)
        assert math.degrees(float(centre.lon)) % 360.0 == pytest.approx(GALACTIC_CENTRE_RA, abs=1e-10)

    def test_ecliptic_basis(self):
        model = AstroModel()
        for getter in (model.galactic_north_pole, model.galactic_centre):
            ecl = getter(2000.0, True)
            equ = getter(2000.0, False)
            assert ecl.tag == ECL
            back = ecliptic_to_equator(ecl, model.obliquity())
            assert float(back.angular_distance(equ)) < 1e-12

    def test_pole_and_centre_orthogonal(self):
        model = AstroModel()
        pole = model.galactic_north_pole(2000.0, True)
        centre = model.galactic_centre(2000.0, True)
        assert float(pole.angular_distance(centre)) == pytest.approx(math.pi / 2, abs=1e-3)


class TestLocalHorizon:
    # A zenith or north point at a celestial pole goes through arcsin near
    # +-1, which leaves about 1.5e-8 rad of rounding in float64
    @pytest.mark.parametrize(
        "latitude, lst, tol",
        [(0.0, 0.0, 1e-10), (0.8, 1.3, 1e-10), (-0.6, -2.0, 1e-10), (math.pi / 2, 0.5, 1e-7)],
    )
    def test_pole_is_zenith(self, latitude, lst, tol):
        model = AstroModel(latitude=latitude, local_sidereal_time=lst)
        horizon = model.great_circle(LOCAL_HORIZON)
        assert horizon.tag == ECL
        zenith = ecliptic_to_equator(horizon.np, model.obliquity())
        assert float(zenith.angular_distance(LatLong(EQU, latitude, lst))) < tol

    @pytest.mark.parametrize(
        "latitude, lst, tol",
        [(0.0, 0.0, 1e-7), (0.8, 1.3, 1e-10), (-0.6, -2.0, 1e-10)],
    )
    def test_p0_is_north_point(self, latitude, lst, tol):
        model = AstroModel(latitude=latitude, local_sidereal_time=lst)
        horizon = model.great_circle(LOCAL_HORIZON)
        north = ecliptic_to_equator(horizon.p0, model.obliquity())
        ncp = LatLong(EQU, math.pi / 2, 0.0)
        # On the horizon, and as close to the celestial pole as the horizon gets
        assert abs(float(horizon.np.dot(horizon.p0))) < 1e-10
        assert float(north.angular_distance(ncp)) == pytest.approx(abs(latitude), abs=tol)

    def test_unknown_circle(self):
        with pytest.raises(KeyError, match="Nowhere"):
            AstroModel().great_circle("Nowhere")

    def test_add_great_circle(self):
        model = AstroModel()
        circle = GreatCircle.from_pole(LatLong(ECL, 0.5, 0.5))
        model.add_great_circle("Custom", circle)
        assert model.great_circle("Custom") is circle

    def test_replace_is_logged(self, caplog):
        model = AstroModel()
        circle = GreatCircle.from_pole(LatLong(ECL, 0.5, 0.5))
        with caplog.at_level(logging.INFO, logger="celestjax.astro_model"):
            model.add_great_circle(LOCAL_HORIZON, circle)
        assert "Replacing great circle" in caplog.text
        assert model.great_circle(LOCAL_HORIZON) is circle

    def test_repr(self):
        assert repr(AstroModel(year=2024.0)).startswith("AstroModel(year=2024.0")
