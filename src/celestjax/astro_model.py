"""Astronomical model backing the coordinate converter.

Provides ``AstroModel``, which supplies the epoch-dependent quantities the
converter needs: the obliquity of the ecliptic, the galactic north pole
and galactic centre in either the equatorial or ecliptic basis, and a
registry of named great circles including the observer's local horizon.

Precession and nutation are not modelled: the galactic reference
directions are the IAU J2000 values whatever the year, and the local
sidereal time is an input rather than derived from a time scale.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

from celestjax.config import get_dtype
from celestjax.constants import (
    AS2RAD,
    GALACTIC_CENTRE_DEC,
    GALACTIC_CENTRE_RA,
    GALACTIC_POLE_DEC,
    GALACTIC_POLE_RA,
    J2000_YEAR,
    OBLIQUITY_COEFFICIENTS,
)
from celestjax.coordinate_systems import CoordinateSystem
from celestjax.frames import equator_to_ecliptic
from celestjax.geometry import GreatCircle, LatLong

logger = logging.getLogger(__name__)

LOCAL_HORIZON = "LocalHor"
"""Name under which the observer's horizon circle is registered."""


def mean_obliquity(year: float) -> jax.Array:
    """IAU 2006 mean obliquity of the ecliptic for a (fractional) Julian year.

    .. math::

        \\varepsilon = \\sum_{k=0}^{5} c_k T^k, \\quad T = (\\text{year} - 2000) / 100

    Args:
        year (float): Julian year, e.g. ``2024.5``.

    Returns:
        jax.Array: Mean obliquity in *rad*.

    References:
        1. N. Capitaine, P. Wallace, and J. Chapront, *Expressions for IAU 2000
           precession quantities*, Astronomy & Astrophysics 412, 2003.
    """
    t = jnp.asarray((year - J2000_YEAR) / 100.0, dtype=get_dtype())
    eps_as = jnp.polyval(jnp.asarray(OBLIQUITY_COEFFICIENTS[::-1], dtype=get_dtype()), t)
    return eps_as * AS2RAD


class AstroModel:
    """Epoch and observer state for coordinate conversion.

    Args:
        year (float): Julian year of the epoch. Default: ``2000.0``
        obliquity (float | None): Obliquity of the ecliptic in *rad*.  When
            ``None`` it is computed from ``year`` with :func:`mean_obliquity`.
        latitude (float): Observer's geographic latitude in *rad*. Default: ``0.0``
        local_sidereal_time (float): Observer's local sidereal time as an
            angle in *rad*. Default: ``0.0``
    """

    def __init__(
        self,
        year: float = J2000_YEAR,
        obliquity: float | None = None,
        latitude: float = 0.0,
        local_sidereal_time: float = 0.0,
    ) -> None:
        self._year = year
        if obliquity is None:
            self._obliquity = mean_obliquity(year)
        else:
            self._obliquity = jnp.asarray(obliquity, dtype=get_dtype())
        self._latitude = latitude
        self._local_sidereal_time = local_sidereal_time
        self._great_circles: dict[str, GreatCircle] = {}
        self.add_great_circle(LOCAL_HORIZON, self._local_horizon())

    def year(self) -> float:
        """Julian year of the epoch."""
        return self._year

    def obliquity(self) -> jax.Array:
        """Obliquity of the ecliptic in *rad*."""
        return self._obliquity

    def _to_basis(self, n: LatLong, ecliptic_basis: bool) -> LatLong:
        if ecliptic_basis:
            return equator_to_ecliptic(n, self._obliquity)
        return n

    def galactic_north_pole(self, year: float, ecliptic_basis: bool) -> LatLong:
        """North galactic pole.

        Args:
            year (float): Julian year.  Accepted for interface symmetry; the
                J2000 pole is returned for every year.
            ecliptic_basis (bool): Express the pole in the ecliptic of date
                rather than the equator of date.

        Returns:
            LatLong: Pole tagged ``ECLIPTIC_OF_DATE`` or ``EQUATOR_OF_DATE``.
        """
        pole = LatLong.from_degrees(CoordinateSystem.EQUATOR_OF_DATE, GALACTIC_POLE_DEC, GALACTIC_POLE_RA)
        return self._to_basis(pole, ecliptic_basis)

    def galactic_centre(self, year: float, ecliptic_basis: bool) -> LatLong:
        """Galactic centre, the zero of galactic longitude.

        Args:
            year (float): Julian year.  Accepted for interface symmetry; the
                J2000 direction is returned for every year.
            ecliptic_basis (bool): Express the direction in the ecliptic of
                date rather than the equator of date.

        Returns:
            LatLong: Direction tagged ``ECLIPTIC_OF_DATE`` or ``EQUATOR_OF_DATE``.
        """
        centre = LatLong.from_degrees(CoordinateSystem.EQUATOR_OF_DATE, GALACTIC_CENTRE_DEC, GALACTIC_CENTRE_RA)
        return self._to_basis(centre, ecliptic_basis)

    def _local_horizon(self) -> GreatCircle:
        # The north point sits on the meridian at declination 90° - latitude,
        # the east point on the equator six hours of RA past the meridian.
        lst = self._local_sidereal_time
        north = LatLong(CoordinateSystem.EQUATOR_OF_DATE, jnp.pi / 2 - self._latitude, lst + jnp.pi)
        east = LatLong(CoordinateSystem.EQUATOR_OF_DATE, 0.0, lst + jnp.pi / 2)

        # Pole is east x north, i.e. the zenith; P0 is the north point
        return GreatCircle(
            equator_to_ecliptic(north, self._obliquity),
            equator_to_ecliptic(east, self._obliquity),
        )

    def great_circle(self, name: str) -> GreatCircle:
        """Look up a named great circle.

        ``"LocalHor"`` always resolves to the observer's horizon, expressed
        in the ecliptic of date, with the zenith as pole and the north
        point as ``P0``.

        Args:
            name (str): Registered circle name.

        Returns:
            GreatCircle: The registered circle (not a copy).

        Raises:
            KeyError: If no circle is registered under ``name``.
        """
        try:
            return self._great_circles[name]
        except KeyError:
            raise KeyError(f"No great circle named {name!r}") from None

    def add_great_circle(self, name: str, circle: GreatCircle) -> None:
        """Register ``circle`` under ``name``, replacing any previous entry."""
        if name in self._great_circles:
            logger.info("Replacing great circle %r", name)
        self._great_circles[name] = circle

    def __repr__(self) -> str:
        return (
            f"AstroModel(year={self._year}, "
            f"obliquity={float(self._obliquity)}, "
            f"latitude={self._latitude}, "
            f"local_sidereal_time={self._local_sidereal_time})"
        )
