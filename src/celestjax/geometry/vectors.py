"""Unit-vector algebra on the celestial sphere.

Converts between spherical ``(lat, lon)`` and Cartesian ``[x, y, z]``
coordinates, and provides the cross product, normalisation, angular
separation and the elementary rotation matrices used by the geometry and
frame modules.

All angles are in radians unless ``use_degrees=True`` is specified.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.utils import from_radians, to_radians


def spherical_to_cartesian(
    lat: ArrayLike,
    lon: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert latitude and longitude to a unit Cartesian vector.

    Args:
        lat: Latitude in *rad* (or *deg* if ``use_degrees=True``).
        lon: Longitude in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret the angles as degrees.

    Returns:
        jax.Array: Unit vector ``[x, y, z]``.

    Example:
        >>> from celestjax.geometry import spherical_to_cartesian
        >>> v = spherical_to_cartesian(0.0, 0.0)
        >>> float(v[0])
        1.0
    """
    lat = to_radians(jnp.asarray(lat, dtype=get_dtype()), use_degrees)
    lon = to_radians(jnp.asarray(lon, dtype=get_dtype()), use_degrees)

    return jnp.array([
        jnp.cos(lat) * jnp.cos(lon),
        jnp.cos(lat) * jnp.sin(lon),
        jnp.sin(lat),
    ])


def cartesian_to_spherical(v: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert a Cartesian vector to latitude and longitude.

    The vector need not be normalised.  Longitude is returned in
    ``(-pi, pi]`` as produced by ``arctan2``.

    Args:
        v: Vector ``[x, y, z]``.
        use_degrees: If ``True``, return the angles in degrees.

    Returns:
        jax.Array: ``[lat, lon]``.
    """
    v = jnp.asarray(v, dtype=get_dtype())

    x = v[0]
    y = v[1]
    z = v[2]

    lat = jnp.arctan2(z, jnp.sqrt(x * x + y * y))
    lon = jnp.arctan2(y, x)

    return jnp.array([from_radians(lat, use_degrees), from_radians(lon, use_degrees)])


def cross(a: ArrayLike, b: ArrayLike) -> Array:
    """Cross product ``a x b`` of two 3-vectors."""
    return jnp.cross(jnp.asarray(a, dtype=get_dtype()), jnp.asarray(b, dtype=get_dtype()))


def norm(v: ArrayLike) -> Array:
    """Euclidean norm of a 3-vector."""
    return jnp.linalg.norm(jnp.asarray(v, dtype=get_dtype()))


def normalize(v: ArrayLike) -> Array:
    """Scale a vector to unit length.

    A zero vector is returned unchanged (as NaN-free zeros) so callers can
    test the norm of the input themselves before trusting the direction.

    Args:
        v: Vector ``[x, y, z]``.

    Returns:
        jax.Array: Unit vector, or zeros for a zero input.
    """
    v = jnp.asarray(v, dtype=get_dtype())
    n = jnp.linalg.norm(v)
    return jnp.where(n > 0.0, v / jnp.where(n > 0.0, n, 1.0), v)


def angle_between(a: ArrayLike, b: ArrayLike) -> Array:
    """Angular separation between two vectors.

    Uses ``atan2(|a x b|, a . b)`` which stays accurate for separations
    near 0 and pi, where ``acos`` of the dot product loses precision.

    Args:
        a: First vector ``[x, y, z]``.
        b: Second vector ``[x, y, z]``.

    Returns:
        jax.Array: Separation in ``[0, pi]`` *rad*.
    """
    a = jnp.asarray(a, dtype=get_dtype())
    b = jnp.asarray(b, dtype=get_dtype())
    return jnp.arctan2(jnp.linalg.norm(jnp.cross(a, b)), jnp.dot(a, b))


def Rx(angle: float, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())



def Ry(angle: float, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,  0.0,   -s],
                      [0.0,  1.0,  0.0],
                      [ +s,  0.0,   +c]], dtype=get_dtype())


def Rz(angle: float, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]], dtype=get_dtype())
