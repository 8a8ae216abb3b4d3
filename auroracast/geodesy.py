"""
Great-circle distance, bearing, and destination-point math on a spherical Earth.

The raw helpers take plain floats in decimal degrees; distance_km() and
destination_point() take validated Coordinates.
"""

import math

from auroracast.formulas.spatial import COMPASS_POINTS, EARTH_RADIUS_KM
from auroracast.models import Coordinate
from auroracast.validation import (
    as_coordinate,
    validate_non_negative,
    validate_number,
)


def haversine_km(lat1, lon1, lat2, lon2):
    """Compute great-circle distance between two points (spherical, in km)."""
    R = EARTH_RADIUS_KM
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (math.sin(dlat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(dlon / 2) ** 2)
    # Rounding can push a just past 1 for near-antipodal points
    a = min(1.0, a)
    return R * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bearing_deg(lat1, lon1, lat2, lon2):
    """Compute initial bearing from point 1 to point 2 (degrees, 0=N)."""
    dlon = math.radians(lon2 - lon1)
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    x = math.sin(dlon) * math.cos(lat2_r)
    y = (math.cos(lat1_r) * math.sin(lat2_r) -
         math.sin(lat1_r) * math.cos(lat2_r) * math.cos(dlon))
    return (math.degrees(math.atan2(x, y)) + 360) % 360


def bearing_to_compass(bearing):
    """Convert bearing (degrees) to an 8-point direction word ("North", ...)."""
    idx = round(bearing / 45) % 8
    return COMPASS_POINTS[idx]


def wrap_longitude(lon):
    """Wrap a longitude into [-180, 180)."""
    return (lon + 180.0) % 360.0 - 180.0


def distance_km(a, b):
    """Great-circle distance in km between two coordinates.

    Symmetric in its arguments and zero for identical points.

    Raises
    ------
    ValidationError
        If either coordinate is invalid.
    """
    a = as_coordinate(a)
    b = as_coordinate(b)
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def destination_point(origin, bearing, distance):
    """Solve the spherical direct problem.

    Parameters
    ----------
    origin : Coordinate
        Start point.
    bearing : float
        Initial bearing in degrees (0 = North, clockwise).
    distance : float
        Distance to travel along the great circle, in km.

    Returns
    -------
    Coordinate
        The point reached. Longitude is wrapped into [-180, 180).
    """
    origin = as_coordinate(origin)
    bearing = validate_number(bearing, "bearing")
    distance = validate_non_negative(distance, "distance_km")

    delta = distance / EARTH_RADIUS_KM
    theta = math.radians(bearing)
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta) +
        math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    # asin can land a hair outside [-90, 90] through rounding near the poles
    lat_deg = max(-90.0, min(90.0, math.degrees(lat2)))
    return Coordinate(lat_deg, wrap_longitude(math.degrees(lon2)))
