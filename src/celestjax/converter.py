"""Coordinate conversion between astronomical reference frames.

Provides ``CoordConverter``, which re-expresses a tagged direction in
another reference frame.  Adjacent frames have direct rotations:

- equator of date -> ecliptic of date, galactic
- ecliptic of date -> equator of date, galactic, horizontal

Any other pair is routed through the ecliptic of date.  A pair with no
route yields the error direction, tagged ``ERROR_TAG`` (-1); callers must
check the tag before using the result.
"""

from __future__ import annotations

import logging

from jax.typing import ArrayLike

from celestjax.astro_model import LOCAL_HORIZON, AstroModel
from celestjax.coordinate_systems import ERROR_TAG, CoordinateSystem, normalize_ecliptic
from celestjax.frames import (
    ecliptic_to_equator,
    equator_to_ecliptic,
    lat_rot,
    spherical_convert,
)
from celestjax.geometry import LatLong

logger = logging.getLogger(__name__)

_EQU = CoordinateSystem.EQUATOR_OF_DATE
_ECL = CoordinateSystem.ECLIPTIC_OF_DATE
_GAL = CoordinateSystem.GALACTIC
_HOR = CoordinateSystem.HORIZONTAL


def error_direction() -> LatLong:
    """The direction returned when no conversion path exists."""
    return LatLong(ERROR_TAG, 0.0, 0.0)


class CoordConverter:
    """Converts directions between coordinate systems.

    The converter only reads from the model; one model may back any
    number of converters.

    Args:
        model (AstroModel): Source of the obliquity, galactic reference
            directions and local horizon.
    """

    def __init__(self, model: AstroModel) -> None:
        self._model = model

    @property
    def model(self) -> AstroModel:
        """The astronomical model backing this converter."""
        return self._model

    def convert_to(self, n: LatLong, target: int) -> LatLong:
        """Express ``n`` in the coordinate system ``target``.

        The geocentric, heliocentric and topocentric ecliptic-of-date tags
        are treated as ``ECLIPTIC_OF_DATE``.

        Args:
            n (LatLong): Direction to convert.
            target (int): Tag of the destination frame.

        Returns:
            LatLong: ``n`` in the destination frame, a copy of ``n`` if it is
                already there, or the error direction (tag -1) if there is
                no conversion path.
        """
        if n.tag == target:
            return n.copy()

        source = normalize_ecliptic(n.tag)
        if source == target:
            return n.copy()

        if source == _EQU:
            if target == _ECL:
                return self.equ_to_ecl(n)
            if target == _GAL:
                return self.equ_to_gal(n)

        if source == _ECL:
            if target == _EQU:
                return self.ecl_to_equ(n)
            if target == _GAL:
                return self.ecl_to_gal(n)
            if target == _HOR:
                return self.ecl_to_hor(n)

        # Route through the ecliptic of date; a source with no path into the
        # ecliptic has no path anywhere
        if source != _ECL and target != _ECL:
            pivot = self.convert_to(n, _ECL)
            if pivot.tag != ERROR_TAG:
                return self.convert_to(pivot, target)

        logger.warning("No conversion path from coordinate system %s to %s", int(n.tag), int(target))
        return error_direction()

    def ecl_to_equ(self, n: LatLong) -> LatLong:
        """Convert an ecliptic-of-date direction to the equator of date."""
        return ecliptic_to_equator(n, self._model.obliquity())

    def equ_to_ecl(self, n: LatLong) -> LatLong:
        """Convert an equator-of-date direction to the ecliptic of date."""
        return equator_to_ecliptic(n, self._model.obliquity())

    def equ_to_gal(self, n: LatLong) -> LatLong:
        """Convert an equator-of-date direction to galactic coordinates."""
        year = self._model.year()
        return spherical_convert(
            n,
            self._model.galactic_north_pole(year, False),
            self._model.galactic_centre(year, False),
            _GAL,
        )

    def ecl_to_gal(self, n: LatLong) -> LatLong:
        """Convert an ecliptic-of-date direction to galactic coordinates."""
        year = self._model.year()
        return spherical_convert(
            n.with_tag(_ECL),
            self._model.galactic_north_pole(year, True),
            self._model.galactic_centre(year, True),
            _GAL,
        )

    def ecl_to_hor(self, n: LatLong) -> LatLong:
        """Convert an ecliptic-of-date direction to horizontal coordinates.

        Latitude is altitude.  Longitude is azimuth measured from the north
        point, increasing towards the west (right-handed about the zenith).
        """
        horizon = self._model.great_circle(LOCAL_HORIZON)
        return spherical_convert(n.with_tag(_ECL), horizon.np, horizon.p0, _HOR)

    def spherical_convert(self, n: LatLong, np: LatLong, ep: LatLong, target: int) -> LatLong:
        """Rotate ``n`` into the frame with pole ``np`` and zero point ``ep``.

        See :func:`celestjax.frames.spherical_convert`.
        """
        return spherical_convert(n, np, ep, target)

    def lat_rot(self, n: LatLong, obliquity: ArrayLike) -> LatLong:
        """Tilt ``n`` about the x-axis by ``obliquity``; the result is untyped.

        See :func:`celestjax.frames.lat_rot`.
        """
        return lat_rot(n, obliquity)
