"""Tests for the LatLong tagged direction."""

import math

import jax
import jax.numpy as jnp
import pytest

from celestjax.coordinate_systems import CoordinateSystem
from celestjax.geometry import LatLong

EQU = CoordinateSystem.EQUATOR_OF_DATE
ECL = CoordinateSystem.ECLIPTIC_OF_DATE


class TestConstruction:
    def test_fields(self):
        n = LatLong(EQU, 0.3, 1.2, 2.0)
        assert n.tag == EQU
        assert float(n.lat) == pytest.approx(0.3)
        assert float(n.lon) == pytest.approx(1.2)
        assert float(n.radius) == pytest.approx(2.0)

    def test_default_radius(self):
        assert float(LatLong(EQU, 0.0, 0.0).radius) == 1.0

    @pytest.mark.parametrize(
        "lon, expected",
        [
            (2 * math.pi, 0.0),
            (3 * math.pi / 2, -math.pi / 2),
            (-3 * math.pi / 2, math.pi / 2),
            (math.pi, math.pi),
            (-math.pi, math.pi),
        ],
    )
    def test_longitude_wrapped(self, lon, expected):
        n = LatLong(EQU, 0.0, lon)
        assert float(n.lon) == pytest.approx(expected, abs=1e-12)

    def test_from_degrees(self):
        n = LatLong.from_degrees(ECL, 45.0, -90.0)
        assert float(n.lat) == pytest.approx(math.pi / 4)
        assert float(n.lon) == pytest.approx(-math.pi / 2)
        assert jnp.allclose(n.to_degrees(), jnp.array([45.0, -90.0]))

    def test_from_cartesian(self):
        n = LatLong.from_cartesian(EQU, jnp.array([0.0, 2.0, 0.0]))
        assert float(n.lat) == pytest.approx(0.0, abs=1e-15)
        assert float(n.lon) == pytest.approx(math.pi / 2)
        assert float(n.radius) == 1.0

    def test_from_cartesian_zero_raises(self):
        with pytest.raises(ValueError, match="zero-length"):
            LatLong.from_cartesian(EQU, jnp.zeros(3))


class TestCartesian:
    def test_unit_length(self):
        n = LatLong(EQU, -0.7, 2.9, 5.0)
        assert float(jnp.linalg.norm(n.cartesian())) == pytest.approx(1.0, abs=1e-15)

    def test_position_scaled(self):
        n = LatLong(EQU, 0.0, 0.0, 3.0)
        assert jnp.allclose(n.position(), jnp.array([3.0, 0.0, 0.0]), atol=1e-15)

    def test_cartesian_round_trip(self):
        n = LatLong(ECL, 0.25, -1.5)
        m = LatLong.from_cartesian(ECL, n.cartesian())
        assert float(m.lat) == pytest.approx(0.25, abs=1e-14)
        assert float(m.lon) == pytest.approx(-1.5, abs=1e-14)


class TestRelations:
    def test_angular_distance(self):
        a = LatLong(EQU, 0.0, 0.0)
        b = LatLong(EQU, 0.0, 1.0)
        assert float(a.angular_distance(b)) == pytest.approx(1.0, abs=1e-14)

    def test_angular_distance_to_pole(self):
        a = LatLong(EQU, 0.2, 0.5)
        pole = LatLong(EQU, math.pi / 2, 0.0)
        assert float(a.angular_distance(pole)) == pytest.approx(math.pi / 2 - 0.2, abs=1e-14)

    def test_antipode(self):
        a = LatLong(EQU, 0.4, -2.0, 7.0)
        b = a.antipode()
        assert b.tag == EQU
        assert float(b.lat) == pytest.approx(-0.4)
        assert float(b.radius) == pytest.approx(7.0)
        assert float(a.dot(b)) == pytest.approx(-1.0, abs=1e-15)
        assert a.is_antipodal(b)
        assert not a.is_equal(b)

    def test_is_equal_ignores_radius(self):
        a = LatLong(EQU, 0.4, -2.0, 7.0)
        assert a.is_equal(a.with_radius(1.0))

    def test_equality_requires_tag(self):
        a = LatLong(EQU, 0.1, 0.2)
        assert a == LatLong(EQU, 0.1, 0.2)
        assert a != a.with_tag(ECL)

    def test_equality_other_type(self):
        assert LatLong(EQU, 0.0, 0.0) != (0.0, 0.0)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(LatLong(EQU, 0.0, 0.0))


class TestCopies:
    def test_copy_independent_values(self):
        a = LatLong(EQU, 0.1, 0.2, 3.0)
        b = a.copy()
        assert b == a
        assert b is not a
        assert float(b.radius) == 3.0

    def test_with_radius(self):
        a = LatLong(EQU, 0.1, 0.2, 3.0)
        b = a.with_radius(1.0)
        assert float(b.radius) == 1.0
        assert float(b.lat) == pytest.approx(0.1)

    def test_with_tag(self):
        a = LatLong(CoordinateSystem.TOPO_ECLIPTIC_OFDATE, 0.1, 0.2)
        b = a.with_tag(ECL)
        assert b.tag == ECL
        assert float(b.lon) == pytest.approx(0.2)

    def test_repr(self):
        r = repr(LatLong(EQU, 0.0, 0.0))
        assert r.startswith("LatLong(tag=1, lat=0.0, lon=0.0")


class TestPytree:
    def test_flatten_unflatten(self):
        a = LatLong(ECL, 0.3, -0.4)
        leaves, treedef = jax.tree_util.tree_flatten(a)
        assert len(leaves) == 1
        b = jax.tree_util.tree_unflatten(treedef, leaves)
        assert b == a

    def test_jit_passthrough(self):
        @jax.jit
        def latitude(n):
            return n.lat

        assert float(latitude(LatLong(ECL, 0.3, -0.4))) == pytest.approx(0.3)
