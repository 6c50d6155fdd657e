"""Exceptions raised while building spherical geometry."""


class CoordinateSystemMismatchError(ValueError):
    """Operands of a geometric operation carry different coordinate-system tags."""


class DegenerateGreatCircleError(ValueError):
    """Two directions do not define a unique great circle.

    Raised for equal, antipodal or zero-length directions.
    """
