"""Spherical geometry.

This sub-module provides the building blocks for working with directions
on the unit sphere:

- **Vector algebra**: spherical/Cartesian conversion, cross product,
  normalisation, angular separation and the x-axis rotation matrix.
- **LatLong**: a latitude/longitude direction tagged with its coordinate system.
- **Plane**: a plane in Hessian normal form with intersection and
  coincidence tests.
- **GreatCircle**: a great circle with a movable zero of angle, point
  generation, node selection and parallel crossings.
"""

from .vectors import (
    Rx,
    Ry,
    Rz,
    angle_between,
    cartesian_to_spherical,
    cross,
    norm,
    normalize,
    spherical_to_cartesian,
)
from .latlong import LatLong
from .plane import Plane
from .great_circle import GreatCircle

__all__ = [
    # Vector algebra
    "Rx",
    "Ry",
    "Rz",
    "angle_between",
    "cartesian_to_spherical",
    "cross",
    "norm",
    "normalize",
    "spherical_to_cartesian",
    # Types
    "LatLong",
    "Plane",
    "GreatCircle",
]
