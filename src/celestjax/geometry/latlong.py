"""Tagged directions on the celestial sphere.

Provides the ``LatLong`` class: a latitude/longitude pair that carries the
integer tag of the coordinate system it is expressed in.  A single class
serves every frame so that generic rotations can operate on any pair of
tags at runtime.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from celestjax.config import get_dtype, get_geometry_epsilon
from celestjax.geometry.vectors import (
    angle_between,
    cartesian_to_spherical,
    norm,
    spherical_to_cartesian,
)
from celestjax.utils import to_radians, wrap_longitude


class LatLong:
    """Direction from the origin, tagged with a coordinate system.

    Internal storage is a shape ``(3,)`` array ``[lat, lon, radius]``.
    Longitude is wrapped into ``(-pi, pi]`` on construction.  The radius
    does not take part in any angular operation; it is kept so that a
    direction can be re-scaled and copied without losing it.

    This class is registered as a JAX pytree with the data array as the
    sole leaf and the tag as auxiliary data.

    Args:
        tag (int): Coordinate-system tag, usually a ``CoordinateSystem``.
        lat (float): Latitude in *rad*.
        lon (float): Longitude in *rad*.
        radius (float): Distance from the origin. Default: ``1.0``
    """

    __slots__ = ('_tag', '_data')

    def __init__(self, tag: int, lat: float, lon: float, radius: float = 1.0) -> None:
        _float = get_dtype()
        self._tag = tag
        self._data = jnp.array([_float(lat), wrap_longitude(_float(lon)), _float(radius)])

    @classmethod
    def _from_internal(cls, tag: int, data: jax.Array) -> LatLong:
        """Create from a raw JAX array without wrapping the longitude.

        Used by pytree unflatten.

        Args:
            tag (int): Coordinate-system tag.
            data (jax.Array): Array of shape ``(3,)`` ``[lat, lon, radius]``.

        Returns:
            LatLong: New instance.
        """
        obj = object.__new__(cls)
        obj._tag = tag
        obj._data = data
        return obj

    # Factory methods

    @classmethod
    def from_cartesian(cls, tag: int, v: ArrayLike) -> LatLong:
        """Create a unit direction from a Cartesian vector.

        Args:
            tag (int): Coordinate-system tag.
            v (ArrayLike): Vector ``[x, y, z]``, any non-zero length.

        Returns:
            LatLong: Unit direction along ``v``.

        Raises:
            ValueError: If ``v`` has zero length.
        """
        v = jnp.asarray(v, dtype=get_dtype())
        if float(norm(v)) == 0.0:
            raise ValueError("Cannot build a direction from a zero-length vector")
        lat, lon = cartesian_to_spherical(v)
        return cls(tag, lat, lon)

    @classmethod
    def from_degrees(cls, tag: int, lat: float, lon: float, radius: float = 1.0) -> LatLong:
        """Create from latitude and longitude given in degrees."""
        return cls(tag, to_radians(lat, True), to_radians(lon, True), radius)

    # Properties

    @property
    def tag(self) -> int:
        """Coordinate-system tag."""
        return self._tag

    @property
    def lat(self) -> jax.Array:
        """Latitude in *rad*."""
        return self._data[0]

    @property
    def lon(self) -> jax.Array:
        """Longitude in *rad*, in ``(-pi, pi]``."""
        return self._data[1]

    @property
    def radius(self) -> jax.Array:
        """Distance from the origin."""
        return self._data[2]

    # Methods

    def cartesian(self) -> jax.Array:
        """Return the unit vector ``[x, y, z]`` of this direction."""
        return spherical_to_cartesian(self._data[0], self._data[1])

    def position(self) -> jax.Array:
        """Return the Cartesian position, i.e. the unit vector scaled by the radius."""
        return self._data[2] * self.cartesian()

    def dot(self, other: LatLong) -> jax.Array:
        """Dot product of the two unit vectors."""
        return jnp.dot(self.cartesian(), other.cartesian())

    def angular_distance(self, other: LatLong) -> jax.Array:
        """Great-circle separation from ``other`` in ``[0, pi]`` *rad*.

        Tags are not compared; callers are expected to pass directions
        expressed in the same frame.
        """
        return angle_between(self.cartesian(), other.cartesian())

    def antipode(self) -> LatLong:
        """Return the diametrically opposite direction, with the same tag and radius."""
        return LatLong(self._tag, -self._data[0], self._data[1] + jnp.pi, self._data[2])

    def copy(self) -> LatLong:
        """Return an independent copy."""
        return LatLong._from_internal(self._tag, self._data)

    def with_radius(self, radius: float) -> LatLong:
        """Return the same direction at a new radius."""
        return LatLong(self._tag, self._data[0], self._data[1], radius)

    def with_tag(self, tag: int) -> LatLong:
        """Return the same numbers relabelled with another coordinate-system tag."""
        return LatLong._from_internal(tag, self._data)

    def is_equal(self, other: LatLong) -> bool:
        """``True`` when the unit vectors coincide (dot product +1) within tolerance."""
        return bool(jnp.abs(self.dot(other) - 1.0) <= get_geometry_epsilon())

    def is_antipodal(self, other: LatLong) -> bool:
        """``True`` when the unit vectors are opposite (dot product -1) within tolerance."""
        return bool(jnp.abs(self.dot(other) + 1.0) <= get_geometry_epsilon())

    def to_degrees(self) -> jax.Array:
        """Return ``[lat, lon]`` in degrees."""
        return jnp.rad2deg(self._data[:2])

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatLong):
            return NotImplemented
        return self._tag == other._tag and self.is_equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"LatLong(tag={int(self._tag)}, "
            f"lat={float(self._data[0])}, "
            f"lon={float(self._data[1])}, "
            f"radius={float(self._data[2])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    LatLong,
    lambda ll: ((ll._data,), ll._tag),
    lambda tag, children: LatLong._from_internal(tag, children[0]),
)
