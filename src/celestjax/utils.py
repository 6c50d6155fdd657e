"""Shared utility functions for angle conversions and wrapping.

These helpers wrap the ``use_degrees`` convention used throughout
celestjax, providing JAX-traceable degree/radian conversion via
``jnp.where``, plus the floored modulo used to normalise longitudes.
"""

from jax import Array
import jax.numpy as jnp
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def floored_mod(y: ArrayLike, x: ArrayLike) -> Array:
    """Mathematical modulo ``y - x*floor(y/x)``.

    The result has the sign of ``x``, so for positive ``x`` it lies in
    ``[0, x)`` even when ``y`` is negative.

    Args:
        y (ArrayLike): Dividend.
        x (ArrayLike): Divisor.

    Returns:
        Remainder of the floored division.
    """
    return y - x * jnp.floor(y / x)


def wrap_longitude(lon: ArrayLike) -> Array:
    """Wrap a longitude into the half-open interval ``(-pi, pi]``.

    Args:
        lon (ArrayLike): Longitude in radians.

    Returns:
        Equivalent longitude in ``(-pi, pi]``.
    """
    return jnp.pi - floored_mod(jnp.pi - lon, 2.0 * jnp.pi)
