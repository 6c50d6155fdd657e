"""
celestjax is a small celestial-coordinate mathematics library implemented in JAX:
great circles on the unit sphere and rotations between astronomical reference frames.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    TWO_PI,
    OBLIQUITY_J2000,
)

from .config import set_dtype, get_dtype, get_geometry_epsilon

from .coordinate_systems import (
    CoordinateSystem,
    ERROR_TAG,
    normalize_ecliptic,
)

from .exceptions import (
    CoordinateSystemMismatchError,
    DegenerateGreatCircleError,
)

from .geometry import (
    LatLong,
    Plane,
    GreatCircle,
)

from .frames import (
    ecliptic_to_equator,
    equator_to_ecliptic,
    lat_rot,
    spherical_convert,
)

from .astro_model import AstroModel, mean_obliquity
from .converter import CoordConverter

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "TWO_PI",
    "OBLIQUITY_J2000",
    # Config
    "set_dtype",
    "get_dtype",
    "get_geometry_epsilon",
    # Coordinate systems
    "CoordinateSystem",
    "ERROR_TAG",
    "normalize_ecliptic",
    # Exceptions
    "CoordinateSystemMismatchError",
    "DegenerateGreatCircleError",
    # Geometry
    "LatLong",
    "Plane",
    "GreatCircle",
    # Frames
    "ecliptic_to_equator",
    "equator_to_ecliptic",
    "lat_rot",
    "spherical_convert",
    # Model and conversion
    "AstroModel",
    "mean_obliquity",
    "CoordConverter",
]
