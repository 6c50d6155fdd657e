"""Rotation into a frame given by its pole and zero-longitude point.

Any spherical frame is fixed by two directions: its north pole ``NP`` and
the point ``EP`` that it places at longitude zero.  Given both expressed
in the source frame, :func:`spherical_convert` rotates a direction from
the source frame into the target frame.  The galactic frame (pole and
galactic centre) and the horizontal frame (zenith and north point) are
both reached this way.
"""

from __future__ import annotations

import jax.numpy as jnp

from celestjax.constants import TWO_PI
from celestjax.exceptions import CoordinateSystemMismatchError
from celestjax.geometry import LatLong


def spherical_convert(n: LatLong, np: LatLong, ep: LatLong, target: int) -> LatLong:
    """Express ``n`` in the frame with pole ``np`` and zero-longitude point ``ep``.

    With ``(αp, δp) = np``, ``(αe, δe) = ep`` and ``(a, d) = n``::

        BK    = acos(sin δe cos δp - cos δe sin δp sin(αp - αe))
        long0 = atan2(cos δe sin(αe - αp), cos δp sin δe - sin δp cos δe cos(αe - αp))
        b     = asin(sin δp sin d + cos δp cos d cos(a - αp))
        l     = atan2(cos d sin(a - αp), cos δp sin d - sin δp cos d cos(a - αp))

    and the result is ``(b, BK - l + adj)`` where ``adj`` moves ``ep`` to
    longitude zero::

        adj = 2π - (BK - long0)   if BK - long0 > 0
        adj = -(BK - long0)       otherwise

    The two branches of ``adj`` are not interchangeable: ``ep`` may fall
    on either side of the pole-centred frame's meridian.

    Args:
        n (LatLong): Direction to convert.
        np (LatLong): Pole of the target frame, in the source frame.
        ep (LatLong): Zero-longitude point of the target frame, in the source frame.
        target (int): Tag of the target frame.

    Returns:
        LatLong: ``n`` expressed in the target frame, tagged ``target``.

    Raises:
        CoordinateSystemMismatchError: If ``n``, ``np`` and ``ep`` do not
            share one coordinate-system tag.
    """
    if not n.tag == np.tag == ep.tag:
        raise CoordinateSystemMismatchError(
            f"Direction, pole and zero point must share a coordinate system, "
            f"got {n.tag}, {np.tag} and {ep.tag}"
        )

    ap = np.lon
    dp = np.lat
    ae = ep.lon
    de = ep.lat
    d = n.lat
    a = n.lon

    bk = jnp.arccos(jnp.clip(
        jnp.sin(de) * jnp.cos(dp) - jnp.cos(de) * jnp.sin(dp) * jnp.sin(ap - ae),
        -1.0,
        1.0,
    ))
    long0 = jnp.arctan2(
        jnp.cos(de) * jnp.sin(ae - ap),
        jnp.cos(dp) * jnp.sin(de) - jnp.sin(dp) * jnp.cos(de) * jnp.cos(ae - ap),
    )
    b = jnp.arcsin(jnp.clip(
        jnp.sin(dp) * jnp.sin(d) + jnp.cos(dp) * jnp.cos(d) * jnp.cos(a - ap),
        -1.0,
        1.0,
    ))
    l = jnp.arctan2(
        jnp.cos(d) * jnp.sin(a - ap),
        jnp.cos(dp) * jnp.sin(d) - jnp.sin(dp) * jnp.cos(d) * jnp.cos(a - ap),
    )

    offset = bk - long0
    adj = jnp.where(offset > 0, TWO_PI - offset, -offset)

    return LatLong(target, b, bk - l + adj)
