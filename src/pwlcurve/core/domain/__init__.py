"""
Domain models and value objects.

Contains the point accessors, the default point model and the monotone brand.
"""

from pwlcurve.core.domain.coordinates import (
    DEFAULT_X_FIELD,
    DEFAULT_Y_FIELD,
    XY,
    Coordinates,
    coordinates,
)
from pwlcurve.core.domain.monotone import (
    Monotone,
    MonotonicityViolation,
    assume_monotone,
)
from pwlcurve.core.domain.point import POINT_COORDINATES, CurvePoint

__all__ = [
    # Coordinates
    "DEFAULT_X_FIELD",
    "DEFAULT_Y_FIELD",
    "XY",
    "Coordinates",
    "coordinates",
    # Monotone brand
    "Monotone",
    "MonotonicityViolation",
    "assume_monotone",
    # Point model
    "CurvePoint",
    "POINT_COORDINATES",
]
