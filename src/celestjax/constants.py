"""
The `constants` module defines the mathematical and astronomical constants used by celestjax.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
One full turn. Units: *rad*
"""
TWO_PI = 2.0 * PI

# Time Constants

"""
Julian year of the J2000.0 epoch. Units: *years*
"""
J2000_YEAR = 2000.0

# Ecliptic Constants

"""
Mean obliquity of the ecliptic at J2000.0. Units: *arcseconds*

References:

1. N. Capitaine, P. Wallace, and J. Chapront, *Expressions for IAU 2000 precession
   quantities*, Astronomy & Astrophysics 412, 2003.
"""
OBLIQUITY_J2000 = 84381.406

"""
Polynomial coefficients of the IAU 2006 mean obliquity of the ecliptic, in powers
of Julian centuries from J2000.0, constant term first. Units: *arcseconds*
"""
OBLIQUITY_COEFFICIENTS = (
    OBLIQUITY_J2000,
    -46.836769,
    -0.0001831,
    0.00200340,
    -0.000000576,
    -0.0000000434,
)

# Galactic Constants

"""
Right ascension of the north galactic pole, J2000.0 equator. Units: *deg*

References:

1. J. Reid and A. Brunthaler, *The Proper Motion of Sagittarius A\\**, ApJ 616, 2004.
"""
GALACTIC_POLE_RA = 192.85948

"""
Declination of the north galactic pole, J2000.0 equator. Units: *deg*
"""
GALACTIC_POLE_DEC = 27.12825

"""
Right ascension of the galactic centre (zero galactic longitude), J2000.0 equator. Units: *deg*
"""
GALACTIC_CENTRE_RA = 266.40510

"""
Declination of the galactic centre (zero galactic longitude), J2000.0 equator. Units: *deg*
"""
GALACTIC_CENTRE_DEC = -28.936175

# Great Circle Constants

"""
Probe angle stepped along a great circle from a candidate node to decide whether
the node is ascending or descending relative to another circle. Units: *rad*
"""
NODE_PROBE_ANGLE = PI / 50.0
