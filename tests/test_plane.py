"""Tests for the Plane class."""

import math

import jax.numpy as jnp
import pytest

from celestjax.coordinate_systems import CoordinateSystem
from celestjax.exceptions import CoordinateSystemMismatchError, DegenerateGreatCircleError
from celestjax.geometry import LatLong, Plane

EQU = CoordinateSystem.EQUATOR_OF_DATE
ECL = CoordinateSystem.ECLIPTIC_OF_DATE


class TestConstruction:
    def test_normal_is_normalised(self):
        p = Plane(EQU, jnp.array([0.0, 0.0, 5.0]), 2.0)
        assert jnp.allclose(p.normal, jnp.array([0.0, 0.0, 1.0]))
        assert float(p.distance) == 2.0

    def test_zero_normal_raises(self):
        with pytest.raises(ValueError, match="non-zero"):
            Plane(EQU, jnp.zeros(3))

    def test_from_point_normal(self):
        p = Plane.from_point_normal(EQU, jnp.array([0.0, 0.0, 3.0]), jnp.array([0.0, 0.0, 2.0]))
        assert float(p.distance) == pytest.approx(3.0)
        assert float(p.signed_distance(jnp.array([1.0, 1.0, 3.0]))) == pytest.approx(0.0)

    def test_through_directions_orientation(self):
        a = LatLong(EQU, 0.0, 0.0)
        b = LatLong(EQU, 0.0, math.pi / 2)
        p = Plane.through_directions(a, b)
        # b x a = y x x = -z
        assert jnp.allclose(p.normal, jnp.array([0.0, 0.0, -1.0]), atol=1e-15)
        assert p.tag == EQU

    def test_through_directions_contains_both(self):
        a = LatLong(EQU, 0.3, 0.1)
        b = LatLong(EQU, -0.6, 2.2)
        p = Plane.through_directions(a, b)
        assert float(p.distance_to(a.cartesian())) < 1e-14
        assert float(p.distance_to(b.cartesian())) < 1e-14

    def test_through_directions_tag_mismatch(self):
        with pytest.raises(CoordinateSystemMismatchError):
            Plane.through_directions(LatLong(EQU, 0.0, 0.0), LatLong(ECL, 0.0, 1.0))

    def test_through_parallel_directions(self):
        a = LatLong(EQU, 0.3, 0.1)
        with pytest.raises(DegenerateGreatCircleError):
            Plane.through_directions(a, a.antipode())


class TestDistances:
    def test_to_origin(self):
        p = Plane(EQU, jnp.array([1.0, 0.0, 0.0]), 4.0).to_origin()
        assert float(p.distance) == 0.0
        assert jnp.allclose(p.normal, jnp.array([1.0, 0.0, 0.0]))

    def test_signed_distance_sign(self):
        p = Plane(EQU, jnp.array([0.0, 0.0, 1.0]))
        assert float(p.signed_distance(jnp.array([0.0, 0.0, 2.0]))) == pytest.approx(2.0)
        assert float(p.signed_distance(jnp.array([0.0, 0.0, -2.0]))) == pytest.approx(-2.0)
        assert float(p.distance_to(jnp.array([0.0, 0.0, -2.0]))) == pytest.approx(2.0)

    def test_pole(self):
        pole = Plane(ECL, jnp.array([0.0, 0.0, 1.0])).pole()
        assert pole.tag == ECL
        assert float(pole.lat) == pytest.approx(math.pi / 2)


class TestIntersection:
    def test_intersection_direction(self):
        equator = Plane(EQU, jnp.array([0.0, 0.0, 1.0]))
        meridian = Plane(EQU, jnp.array([0.0, 1.0, 0.0]))
        d = equator.intersection_direction(meridian)
        # z x y = -x
        assert jnp.allclose(d.cartesian(), jnp.array([-1.0, 0.0, 0.0]), atol=1e-15)
        assert d.tag == EQU

    def test_intersection_lies_on_both(self):
        p1 = Plane(EQU, jnp.array([0.2, -0.5, 0.9]))
        p2 = Plane(EQU, jnp.array([-0.7, 0.1, 0.3]))
        d = p1.intersection_direction(p2).cartesian()
        assert float(p1.distance_to(d)) < 1e-14
        assert float(p2.distance_to(d)) < 1e-14

    def test_parallel_planes_raise(self):
        p1 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]))
        p2 = Plane(EQU, jnp.array([0.0, 0.0, -1.0]))
        with pytest.raises(ValueError, match="Parallel"):
            p1.intersection_direction(p2)

    def test_tag_mismatch(self):
        p1 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]))
        p2 = Plane(ECL, jnp.array([0.0, 1.0, 0.0]))
        with pytest.raises(CoordinateSystemMismatchError):
            p1.intersection_direction(p2)


class TestSamePlane:
    def test_identical(self):
        p = Plane(EQU, jnp.array([0.1, 0.2, 0.3]), 0.5)
        assert p.same_plane(p.copy())

    def test_flipped_normal(self):
        p1 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]), 0.5)
        p2 = Plane(EQU, jnp.array([0.0, 0.0, -1.0]), -0.5)
        assert p1.same_plane(p2)

    def test_parallel_offset(self):
        p1 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]), 0.5)
        p2 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]), 0.0)
        assert not p1.same_plane(p2)

    def test_different_orientation(self):
        p1 = Plane(EQU, jnp.array([0.0, 0.0, 1.0]))
        p2 = Plane(EQU, jnp.array([0.0, 1.0, 0.0]))
        assert not p1.same_plane(p2)

    def test_tag_mismatch(self):
        with pytest.raises(CoordinateSystemMismatchError):
            Plane(EQU, jnp.array([0.0, 0.0, 1.0])).same_plane(Plane(ECL, jnp.array([0.0, 0.0, 1.0])))
