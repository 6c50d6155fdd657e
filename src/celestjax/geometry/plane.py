"""Planes in the Cartesian space of a coordinate system.

Provides the ``Plane`` class, stored in Hessian normal form: a unit normal
``n`` and a signed distance ``d`` such that points ``x`` on the plane
satisfy ``n . x = d``.  Planes through the origin cut the unit sphere in a
great circle, which is how ``GreatCircle`` uses them.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from celestjax.config import get_dtype, get_geometry_epsilon
from celestjax.exceptions import CoordinateSystemMismatchError, DegenerateGreatCircleError
from celestjax.geometry.latlong import LatLong
from celestjax.geometry.vectors import cross, norm, normalize


class Plane:
    """Plane with unit normal and signed distance from the origin.

    Args:
        tag (int): Coordinate-system tag of the Cartesian space.
        normal (ArrayLike): Normal vector ``[x, y, z]``; normalised on
            construction.
        distance (float): Signed distance of the plane from the origin
            along ``normal``. Default: ``0.0``

    Raises:
        ValueError: If ``normal`` has zero length.
    """

    __slots__ = ('_tag', '_normal', '_distance')

    def __init__(self, tag: int, normal: ArrayLike, distance: float = 0.0) -> None:
        normal = jnp.asarray(normal, dtype=get_dtype())
        if float(norm(normal)) == 0.0:
            raise ValueError("Plane normal must have non-zero length")
        self._tag = tag
        self._normal = normalize(normal)
        self._distance = jnp.asarray(distance, dtype=get_dtype())

    # Factory methods

    @classmethod
    def from_point_normal(cls, tag: int, point: ArrayLike, normal: ArrayLike) -> Plane:
        """Create the plane through ``point`` perpendicular to ``normal``."""
        unit = normalize(normal)
        return cls(tag, unit, jnp.dot(unit, jnp.asarray(point, dtype=get_dtype())))

    @classmethod
    def through_directions(cls, a: LatLong, b: LatLong) -> Plane:
        """Create the origin plane containing two directions.

        The normal is oriented along ``b x a``.

        Args:
            a (LatLong): First direction.
            b (LatLong): Second direction.

        Returns:
            Plane: Plane through the origin, ``a`` and ``b``.

        Raises:
            CoordinateSystemMismatchError: If ``a`` and ``b`` carry different tags.
            DegenerateGreatCircleError: If ``a`` and ``b`` are parallel or
                anti-parallel.
        """
        if a.tag != b.tag:
            raise CoordinateSystemMismatchError(
                f"Directions are in different coordinate systems: {a.tag} and {b.tag}"
            )
        n = cross(b.cartesian(), a.cartesian())
        if float(norm(n)) <= get_geometry_epsilon():
            raise DegenerateGreatCircleError(
                "Parallel directions do not span a unique plane"
            )
        return cls(a.tag, n)

    # Properties

    @property
    def tag(self) -> int:
        """Coordinate-system tag."""
        return self._tag

    @property
    def normal(self) -> jax.Array:
        """Unit normal vector ``[x, y, z]``."""
        return self._normal

    @property
    def distance(self) -> jax.Array:
        """Signed distance from the origin along the normal."""
        return self._distance

    # Methods

    def pole(self) -> LatLong:
        """Return the normal as a direction tagged with this plane's frame."""
        return LatLong.from_cartesian(self._tag, self._normal)

    def to_origin(self) -> Plane:
        """Return the parallel plane through the origin."""
        return Plane(self._tag, self._normal, 0.0)

    def signed_distance(self, point: ArrayLike) -> jax.Array:
        """Signed distance of ``point`` from the plane, positive on the normal side."""
        return jnp.dot(self._normal, jnp.asarray(point, dtype=get_dtype())) - self._distance

    def distance_to(self, point: ArrayLike) -> jax.Array:
        """Absolute distance of ``point`` from the plane."""
        return jnp.abs(self.signed_distance(point))

    def intersection_direction(self, other: Plane) -> LatLong:
        """Direction of the line in which two planes meet.

        The direction is ``n1 x n2`` normalised; the opposite direction is
        equally valid and is left to the caller to choose.

        Args:
            other (Plane): Second plane.

        Returns:
            LatLong: Unit direction of the intersection line.

        Raises:
            CoordinateSystemMismatchError: If the planes carry different tags.
            ValueError: If the planes are parallel.
        """
        self._check_tag(other)
        d = cross(self._normal, other._normal)
        if float(norm(d)) <= get_geometry_epsilon():
            raise ValueError("Parallel planes have no intersection direction")
        return LatLong.from_cartesian(self._tag, d)

    def same_plane(self, other: Plane) -> bool:
        """``True`` when both planes describe the same set of points.

        Normals may point in opposite directions, in which case the signed
        distances must be opposite too.

        Raises:
            CoordinateSystemMismatchError: If the planes carry different tags.
        """
        self._check_tag(other)
        eps = get_geometry_epsilon()
        c = jnp.dot(self._normal, other._normal)
        if float(jnp.abs(c - 1.0)) <= eps:
            return bool(jnp.abs(self._distance - other._distance) <= eps)
        if float(jnp.abs(c + 1.0)) <= eps:
            return bool(jnp.abs(self._distance + other._distance) <= eps)
        return False

    def copy(self) -> Plane:
        """Return an independent copy."""
        return Plane(self._tag, self._normal, self._distance)

    def _check_tag(self, other: Plane) -> None:
        if self._tag != other._tag:
            raise CoordinateSystemMismatchError(
                f"Planes are in different coordinate systems: {self._tag} and {other._tag}"
            )

    def __repr__(self) -> str:
        return (
            f"Plane(tag={int(self._tag)}, "
            f"normal=[{float(self._normal[0])}, {float(self._normal[1])}, {float(self._normal[2])}], "
            f"distance={float(self._distance)})"
        )
