"""Frame transformations.

This sub-module provides functions for rotating directions between
astronomical reference frames:

- **Ecliptic-equator transformations**: closed-form conversion between the
  ecliptic of date and the equator of date, the generic x-axis tilt
  ``lat_rot``, and the matching Cartesian rotation matrices.
- **Pole/zero-point rotation**: ``spherical_convert`` rotates into any
  frame given its pole and its zero-longitude point.
"""

from .ecliptic import (
    ecliptic_to_equator,
    equator_to_ecliptic,
    lat_rot,
    rotation_ecliptic_to_equator,
    rotation_equator_to_ecliptic,
)
from .spherical import spherical_convert

__all__ = [
    # Ecliptic/equator
    "ecliptic_to_equator",
    "equator_to_ecliptic",
    "lat_rot",
    "rotation_ecliptic_to_equator",
    "rotation_equator_to_ecliptic",
    # Pole/zero-point rotation
    "spherical_convert",
]
