"""Coordinate-system tags.

Provides the ``CoordinateSystem`` enum naming the astronomical reference
frames a direction can be expressed in.  Tags are plain integers so a
``LatLong`` can carry any of them (including the ``ERROR_TAG`` sentinel
returned by a failed conversion) without per-frame subclasses.
"""

from __future__ import annotations

import enum


class CoordinateSystem(enum.IntEnum):
    """Reference frames known to the coordinate converter.

    The three ``*_ECLIPTIC_OFDATE`` variants differ from
    ``ECLIPTIC_OF_DATE`` by origin only, so they share its orientation and
    are treated as the same frame when rotating.

    Attributes:
        UNTYPED: Direction with no frame attached (index 0).
        EQUATOR_OF_DATE: Earth's equator and equinox of date (index 1).
        ECLIPTIC_OF_DATE: Ecliptic and equinox of date (index 2).
        GEO_ECLIPTIC_OFDATE: Geocentric ecliptic of date (index 3).
        HELIO_ECLIPTIC_OFDATE: Heliocentric ecliptic of date (index 4).
        TOPO_ECLIPTIC_OFDATE: Topocentric ecliptic of date (index 5).
        GALACTIC: Galactic pole and centre (index 6).
        HORIZONTAL: Observer's zenith and north point (index 7).
    """

    UNTYPED = 0
    EQUATOR_OF_DATE = 1
    ECLIPTIC_OF_DATE = 2
    GEO_ECLIPTIC_OFDATE = 3
    HELIO_ECLIPTIC_OFDATE = 4
    TOPO_ECLIPTIC_OFDATE = 5
    GALACTIC = 6
    HORIZONTAL = 7


ERROR_TAG = -1
"""Tag carried by the error direction returned when no conversion path exists."""

_ECLIPTIC_VARIANTS = (
    CoordinateSystem.GEO_ECLIPTIC_OFDATE,
    CoordinateSystem.HELIO_ECLIPTIC_OFDATE,
    CoordinateSystem.TOPO_ECLIPTIC_OFDATE,
)


def normalize_ecliptic(tag: int) -> int:
    """Collapse the geocentric/heliocentric/topocentric ecliptic tags.

    Args:
        tag (int): Coordinate-system tag.

    Returns:
        int: ``ECLIPTIC_OF_DATE`` for any ecliptic-of-date variant,
            otherwise ``tag`` unchanged.
    """
    if tag in _ECLIPTIC_VARIANTS:
        return CoordinateSystem.ECLIPTIC_OF_DATE
    return tag
