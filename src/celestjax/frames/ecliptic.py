"""Ecliptic-equator frame transformations.

Provides closed-form conversions of directions between the ecliptic of
date and the equator of date, and the equivalent Cartesian rotation
matrices.  The two frames share the x-axis (the equinox direction), so
the transformation is a rotation about x by the obliquity of the
ecliptic ε.

All angles are in radians.

References:
    1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, Ch. 13.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from celestjax.config import get_dtype
from celestjax.coordinate_systems import CoordinateSystem
from celestjax.geometry import LatLong, Rx


def _clip_unit(x: Array) -> Array:
    # Rounding can push sin/cos sums just past +-1 at the poles
    return jnp.clip(x, -1.0, 1.0)


def _ecliptic_to_equator_angles(lat: Array, lon: Array, eps: Array) -> tuple[Array, Array]:
    d = jnp.arcsin(_clip_unit(jnp.sin(lat) * jnp.cos(eps) + jnp.cos(lat) * jnp.sin(eps) * jnp.sin(lon)))
    a = jnp.arctan2(
        jnp.cos(lat) * jnp.cos(eps) * jnp.sin(lon) - jnp.sin(lat) * jnp.sin(eps),
        jnp.cos(lat) * jnp.cos(lon),
    )
    return d, a


def ecliptic_to_equator(n: LatLong, obliquity: ArrayLike) -> LatLong:
    """Convert an ecliptic direction ``(λ, β)`` to equatorial ``(α, δ)``.

    .. math::

        \\delta = \\arcsin(\\sin\\beta\\cos\\varepsilon + \\cos\\beta\\sin\\varepsilon\\sin\\lambda)

        \\alpha = \\operatorname{atan2}(\\cos\\beta\\cos\\varepsilon\\sin\\lambda
                  - \\sin\\beta\\sin\\varepsilon, \\cos\\beta\\cos\\lambda)

    Args:
        n (LatLong): Direction in the ecliptic of date.  The tag is not checked.
        obliquity (ArrayLike): Obliquity of the ecliptic ε in *rad*.

    Returns:
        LatLong: Direction tagged ``EQUATOR_OF_DATE``.

    Examples:
        ```python
        from celestjax.coordinate_systems import CoordinateSystem
        from celestjax.frames import ecliptic_to_equator
        from celestjax.geometry import LatLong
        n = LatLong(CoordinateSystem.ECLIPTIC_OF_DATE, 0.0, 1.5707963267948966)
        equ = ecliptic_to_equator(n, 0.409092802)   # α = π/2, δ = ε
        ```
    """
    eps = jnp.asarray(obliquity, dtype=get_dtype())
    d, a = _ecliptic_to_equator_angles(n.lat, n.lon, eps)
    return LatLong(CoordinateSystem.EQUATOR_OF_DATE, d, a)


def equator_to_ecliptic(n: LatLong, obliquity: ArrayLike) -> LatLong:
    """Convert an equatorial direction ``(α, δ)`` to ecliptic ``(λ, β)``.

    .. math::

        \\beta = \\arcsin(\\sin\\delta\\cos\\varepsilon - \\cos\\delta\\sin\\varepsilon\\sin\\alpha)

        \\lambda = \\operatorname{atan2}(\\cos\\delta\\cos\\varepsilon\\sin\\alpha
                   + \\sin\\delta\\sin\\varepsilon, \\cos\\delta\\cos\\alpha)

    Args:
        n (LatLong): Direction in the equator of date.  The tag is not checked.
        obliquity (ArrayLike): Obliquity of the ecliptic ε in *rad*.

    Returns:
        LatLong: Direction tagged ``ECLIPTIC_OF_DATE``.
    """
    eps = jnp.asarray(obliquity, dtype=get_dtype())
    a = n.lon
    d = n.lat
    b = jnp.arcsin(_clip_unit(jnp.sin(d) * jnp.cos(eps) - jnp.cos(d) * jnp.sin(eps) * jnp.sin(a)))
    l = jnp.arctan2(
        jnp.cos(d) * jnp.cos(eps) * jnp.sin(a) + jnp.sin(d) * jnp.sin(eps),
        jnp.cos(d) * jnp.cos(a),
    )
    return LatLong(CoordinateSystem.ECLIPTIC_OF_DATE, b, l)


def lat_rot(n: LatLong, obliquity: ArrayLike) -> LatLong:
    """Rotate a direction about the x-axis as the ecliptic-to-equator step does.

    Same formula as :func:`ecliptic_to_equator` for an arbitrary tilt, with
    the result left untyped.

    Args:
        n (LatLong): Direction to rotate.
        obliquity (ArrayLike): Tilt of the target equator in *rad*.

    Returns:
        LatLong: Direction tagged ``UNTYPED``.
    """
    eps = jnp.asarray(obliquity, dtype=get_dtype())
    d, a = _ecliptic_to_equator_angles(n.lat, n.lon, eps)
    return LatLong(CoordinateSystem.UNTYPED, d, a)


def rotation_ecliptic_to_equator(obliquity: ArrayLike) -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to equator of date.

    Returns the matrix ``Rx(-ε)``.

    Args:
        obliquity (ArrayLike): Obliquity of the ecliptic ε in *rad*.

    Returns:
        3x3 rotation matrix (ecliptic -> equator).
    """
    return Rx(-jnp.asarray(obliquity, dtype=get_dtype()))


def rotation_equator_to_ecliptic(obliquity: ArrayLike) -> Array:
    """Compute the 3x3 rotation matrix from equator to ecliptic of date.

    Returns the matrix ``Rx(ε)``, the transpose of
    :func:`rotation_ecliptic_to_equator`.

    Args:
        obliquity (ArrayLike): Obliquity of the ecliptic ε in *rad*.

    Returns:
        3x3 rotation matrix (equator -> ecliptic).
    """
    return Rx(jnp.asarray(obliquity, dtype=get_dtype()))
