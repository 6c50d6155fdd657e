"""Great circles on the unit sphere.

Provides the ``GreatCircle`` class: the intersection of the unit sphere
with a plane through its centre, parameterised by a pole ``NP`` (the
plane's unit normal) and a reference direction ``P0`` on the circle from
which angles along the circle are measured.

The plane, the pole and the coordinate-system tag are fixed at
construction.  ``P0`` can be moved along the circle with ``adjust_p0`` or
snapped to a node shared with another circle with ``adjust_p0_to_node``;
this makes it possible to build a frame from its pole first and fix its
zero of longitude afterwards.

``P0`` mutation is not thread-safe.  Share a circle across threads only
after its last adjustment.

References:
    1. E. Williams, *Aviation Formulary V1.47*, "Crossing parallels".
"""

from __future__ import annotations

import logging

import jax.numpy as jnp

from celestjax.config import get_dtype, get_geometry_epsilon
from celestjax.constants import NODE_PROBE_ANGLE, TWO_PI
from celestjax.exceptions import CoordinateSystemMismatchError, DegenerateGreatCircleError
from celestjax.geometry.latlong import LatLong
from celestjax.geometry.plane import Plane
from celestjax.geometry.vectors import cross, norm
from celestjax.utils import wrap_longitude

logger = logging.getLogger(__name__)

_Y_AXIS = (0.0, 1.0, 0.0)
_X_AXIS = (1.0, 0.0, 0.0)


class GreatCircle:
    """Great circle through two directions.

    ``a`` becomes the reference direction ``P0``.  The pole is the unit
    normal ``b x a`` of the plane through both directions, so that
    ``point_at_angle`` walks from ``a`` towards ``b``.

    Args:
        a (LatLong): First direction; becomes ``P0`` (re-scaled to unit radius).
        b (LatLong): Second direction on the circle.

    Raises:
        DegenerateGreatCircleError: If either direction is ``None`` or the
            directions are equal or antipodal.
        CoordinateSystemMismatchError: If the directions carry different tags.
    """

    __slots__ = ('_tag', '_plane', '_np', '_p0')

    def __init__(self, a: LatLong, b: LatLong) -> None:
        if a is None or b is None:
            raise DegenerateGreatCircleError("A great circle needs two non-null directions")
        if a.tag != b.tag:
            raise CoordinateSystemMismatchError(
                f"Directions are in different coordinate systems: {a.tag} and {b.tag}"
            )
        if a.is_equal(b):
            raise DegenerateGreatCircleError("Equal directions define infinitely many great circles")
        if a.is_antipodal(b):
            raise DegenerateGreatCircleError("Antipodal directions define infinitely many great circles")

        self._tag = a.tag
        self._p0 = a.with_radius(1.0)
        self._plane = Plane.through_directions(self._p0, b.with_radius(1.0)).to_origin()
        self._np = self._plane.pole()

    @classmethod
    def _from_parts(cls, tag: int, plane: Plane, np: LatLong, p0: LatLong) -> GreatCircle:
        obj = object.__new__(cls)
        obj._tag = tag
        obj._plane = plane
        obj._np = np
        obj._p0 = p0
        return obj

    @classmethod
    def from_pole(cls, np: LatLong) -> GreatCircle:
        """Create the great circle whose pole is ``np``.

        ``P0`` is set to ``normalise(NP x y-axis)``, or ``normalise(NP x x-axis)``
        when the pole lies along the y-axis.  Callers normally move ``P0``
        afterwards with one of the ``adjust_p0`` methods.

        Args:
            np (LatLong): Pole direction.

        Returns:
            GreatCircle: Circle with the given pole.
        """
        pole = np.with_radius(1.0)
        normal = pole.cartesian()
        plane = Plane.from_point_normal(pole.tag, jnp.zeros(3, dtype=get_dtype()), normal)

        seed = cross(normal, jnp.asarray(_Y_AXIS, dtype=get_dtype()))
        if float(norm(seed)) <= get_geometry_epsilon():
            seed = cross(normal, jnp.asarray(_X_AXIS, dtype=get_dtype()))

        return cls._from_parts(pole.tag, plane, pole, LatLong.from_cartesian(pole.tag, seed))

    # Properties

    @property
    def tag(self) -> int:
        """Coordinate-system tag."""
        return self._tag

    @property
    def plane(self) -> Plane:
        """Copy of the origin plane that cuts the sphere in this circle."""
        return self._plane.copy()

    @property
    def np(self) -> LatLong:
        """Copy of the pole direction."""
        return self._np.copy()

    @property
    def p0(self) -> LatLong:
        """Copy of the reference direction from which angles are measured."""
        return self._p0.copy()

    # Methods

    def copy(self) -> GreatCircle:
        """Return an independent copy; later ``P0`` adjustments do not propagate."""
        return GreatCircle._from_parts(self._tag, self._plane.copy(), self._np.copy(), self._p0.copy())

    __copy__ = copy

    def _p1(self) -> LatLong:
        """Direction on the circle a quarter turn from ``P0``: ``NP x P0``."""
        return LatLong.from_cartesian(self._tag, cross(self._np.cartesian(), self._p0.cartesian()))

    def point_at_angle(self, psi: float) -> LatLong:
        """Direction on the circle ``psi`` radians from ``P0``.

        Args:
            psi (float): Angle along the circle in *rad*; any real value.

        Returns:
            LatLong: Unit direction on the circle, tagged with the circle's tag.
        """
        p1 = self._p1()
        a1 = self._p0.cartesian()
        b1 = p1.cartesian()

        # Negative so that increasing psi tracks in the right direction
        delta = -self._p0.angular_distance(p1)
        c = (b1 - a1 * jnp.cos(delta)) / jnp.sin(delta)

        psi = jnp.asarray(psi, dtype=get_dtype())
        return LatLong.from_cartesian(self._tag, a1 * jnp.cos(psi) + c * jnp.sin(psi))

    def adjust_p0(self, psi: float) -> None:
        """Move ``P0`` by ``psi`` radians along the circle.

        Afterwards ``point_at_angle(0)`` returns the direction that
        ``point_at_angle(psi)`` returned before the call.
        """
        self._p0 = self.point_at_angle(psi)

    def adjust_p0_to_node(self, other: GreatCircle, swap_nodes: bool = False) -> None:
        """Move ``P0`` to a node where this circle crosses ``other``.

        Of the two antipodal intersections, the ascending node (where
        travel along this circle passes from the southern to the northern
        hemisphere of ``other``) is chosen, or the descending node when
        ``swap_nodes`` is ``True``.

        If the intersection cannot be computed (coincident planes or
        mismatched frames) the failure is logged and ``P0`` is left as it was.
        No tentative node is assigned before the intersection succeeds, so
        ``P0`` is never left unset.

        Args:
            other (GreatCircle): Circle to intersect with.
            swap_nodes (bool): Select the descending node instead of the
                ascending one. Default: ``False``
        """
        node = self.intersection_direction(other)
        if node is None:
            logger.warning(
                "Could not intersect great circle with pole %r with circle with pole %r; "
                "P0 left unchanged",
                self._np,
                other._np,
            )
            return

        self._p0 = node

        # Step a little way along the circle from the node and see which
        # hemisphere of the other circle we end up in
        check = self.point_at_angle(NODE_PROBE_ANGLE)
        distance = float(other._np.angular_distance(check))
        if distance > jnp.pi / 2 and not swap_nodes:
            self._p0 = node.antipode()
        elif distance < jnp.pi / 2 and swap_nodes:
            self._p0 = node.antipode()

    def intersection_direction(self, other: GreatCircle) -> LatLong | None:
        """One of the two antipodal directions common to both circles.

        Returns:
            LatLong | None: Unit direction on both circles, or ``None`` if the
                circles coincide or are in different frames.
        """
        try:
            return self._plane.intersection_direction(other._plane)
        except ValueError as e:
            logger.debug("Great circle intersection failed: %s", e)
            return None

    def same_plane(self, other: GreatCircle) -> bool:
        """``True`` when both circles lie in the same plane.

        Raises:
            CoordinateSystemMismatchError: If the circles carry different tags.
        """
        return self._plane.same_plane(other._plane)

    def contains(self, direction: LatLong, atol: float | None = None) -> bool:
        """``True`` when ``direction`` lies on this circle.

        Args:
            direction (LatLong): Direction to test.
            atol (float | None): Maximum distance from the circle's plane.
                Defaults to 1000 times the geometry epsilon.
        """
        if atol is None:
            atol = 1e3 * get_geometry_epsilon()
        return bool(self._plane.distance_to(direction.cartesian()) <= atol)

    def points(self, n: int) -> list[LatLong]:
        """``n`` evenly spaced directions around the circle, starting at ``P0``."""
        return [self.point_at_angle(TWO_PI * i / n) for i in range(n)]

    def parallel_cross(self, lat: float) -> list[float]:
        """Longitudes at which the circle crosses the parallel of latitude ``lat``.

        Latitude and longitudes are in this circle's coordinate system.

        Args:
            lat (float): Latitude of the parallel in *rad*.

        Returns:
            list[float]: Either an empty list, when the circle does not reach
                the parallel, or the two crossing longitudes in *rad*.  A
                circle lying in the parallel itself (the equator at
                ``lat = 0``) yields ``P0``'s longitude and the one opposite.
        """
        p0 = self._p0
        p1 = self._p1()
        lat = jnp.asarray(lat, dtype=get_dtype())

        l12 = p0.lon - p1.lon
        a = jnp.sin(p0.lat) * jnp.cos(p1.lat) * jnp.cos(lat) * jnp.sin(l12)
        b = (
            jnp.sin(p0.lat) * jnp.cos(p1.lat) * jnp.cos(lat) * jnp.cos(l12)
            - jnp.cos(p0.lat) * jnp.sin(p1.lat) * jnp.cos(lat)
        )
        c = jnp.cos(p0.lat) * jnp.cos(p1.lat) * jnp.sin(lat) * jnp.sin(l12)
        r = jnp.sqrt(a * a + b * b)

        eps = get_geometry_epsilon()
        if float(r) <= eps:
            if float(jnp.abs(c)) > eps:
                return []
            return [float(p0.lon), float(wrap_longitude(p0.lon + jnp.pi))]

        if float(jnp.abs(c)) > float(r):
            return []

        lon = jnp.arctan2(b, a)
        dlon = jnp.arccos(c / r)

        lon3_1 = wrap_longitude(p0.lon + dlon + lon)
        lon3_2 = wrap_longitude(p0.lon - dlon + lon)
        return [float(lon3_1), float(lon3_2)]

    def __repr__(self) -> str:
        return f"GreatCircle(tag={int(self._tag)}, np={self._np!r}, p0={self._p0!r})"

