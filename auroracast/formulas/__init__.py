"""
Centralized formulas, constants, and classification functions.

This subpackage holds the domain constants and pure classifiers used
across the estimation engine. config.py retains the tunable model
parameters and the light-source table; this package holds the lookups.
"""

from auroracast.formulas.classification import (
    classify_pollution,
    classify_activity,
    classify_visibility,
    VISIBILITY_MESSAGES,
    ACTIVITY_COLORS,
    VISIBILITY_COLORS,
    POLLUTION_COLORS,
)
from auroracast.formulas.spatial import (
    EARTH_RADIUS_KM,
    COMPASS_POINTS,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
)

__all__ = [
    # classification
    "classify_pollution",
    "classify_activity",
    "classify_visibility",
    "VISIBILITY_MESSAGES",
    "ACTIVITY_COLORS",
    "VISIBILITY_COLORS",
    "POLLUTION_COLORS",
    # spatial
    "EARTH_RADIUS_KM",
    "COMPASS_POINTS",
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
]
