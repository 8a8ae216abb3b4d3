"""
Input validation for the estimation engine boundary.

Every public operation validates its numeric inputs here before doing any
work. Invalid values raise ValidationError; nothing is silently clamped.
"""

import math
import numbers
from collections.abc import Mapping

from auroracast.formulas.spatial import LATITUDE_RANGE, LONGITUDE_RANGE


class ValidationError(ValueError):
    """Input outside the representable range, or not a number at all."""


def validate_number(value, field):
    """Return value as a float if it is a finite real number.

    Booleans, strings, None, NaN and infinities are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{field} must be a number, got {type(value).__name__}: {value!r}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be finite, got {value!r}")
    return value


def validate_in_range(value, field, bounds):
    """Validate a finite number and check it lies within inclusive bounds."""
    value = validate_number(value, field)
    lo, hi = bounds
    if not lo <= value <= hi:
        raise ValidationError(f"{field} must be in [{lo:g}, {hi:g}], got {value!r}")
    return value


def validate_latitude(value, field="latitude"):
    return validate_in_range(value, field, LATITUDE_RANGE)


def validate_longitude(value, field="longitude"):
    return validate_in_range(value, field, LONGITUDE_RANGE)


def validate_activity_index(value, field="activity_index"):
    """Validate a Kp-like index. Accepted unclamped; must only be finite."""
    return validate_number(value, field)


def validate_positive_int(value, field):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{field} must be an integer, got {type(value).__name__}: {value!r}"
        )
    if value <= 0:
        raise ValidationError(f"{field} must be positive, got {value!r}")
    return int(value)


def validate_non_negative(value, field):
    value = validate_number(value, field)
    if value < 0:
        raise ValidationError(f"{field} must be non-negative, got {value!r}")
    return value


def as_coordinate(value):
    """Coerce a Coordinate, (lat, lon) pair, or lat/lon mapping to a Coordinate.

    Raises
    ------
    ValidationError
        If the value has the wrong shape or either component is invalid.
    """
    from auroracast.models import Coordinate

    if isinstance(value, Coordinate):
        return value
    if isinstance(value, Mapping):
        lat = value.get("latitude", value.get("lat"))
        lon = value.get("longitude", value.get("lon"))
        return Coordinate(lat, lon)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Coordinate(value[0], value[1])
    raise ValidationError(
        f"coordinate must be a Coordinate, (lat, lon) pair or lat/lon mapping, "
        f"got {type(value).__name__}: {value!r}"
    )
