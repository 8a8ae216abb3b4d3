"""
auroracast: aurora visibility and sky-darkness estimation engine.

Pure numerical functions that turn a Kp-like geomagnetic activity index and
an observer's coordinate into an aurora visibility chance, a light pollution
estimate, and aurora oval geometry for rendering. Fetching the index,
locating the user, and drawing maps and charts are left to callers.
"""

from auroracast.advisory import assess_location
from auroracast.aurora import oval_base_latitude, visibility_band, visibility_chance
from auroracast.catalog import LightSourceCatalog, default_catalog
from auroracast.forecast import forecast_to_frame, simulate_forecast
from auroracast.geodesy import destination_point, distance_km
from auroracast.light_pollution import PollutionEstimator, estimate_light_pollution
from auroracast.models import (
    AuroraAdvisory,
    Coordinate,
    ForecastSample,
    LightSource,
    NearestSource,
    OvalGeometry,
    OvalPair,
    PollutionEstimate,
)
from auroracast.oval_geometry import generate_oval_geometry, oval_to_geojson
from auroracast.validation import ValidationError

__version__ = "0.1.0"

__all__ = [
    # operations
    "estimate_light_pollution",
    "oval_base_latitude",
    "visibility_chance",
    "visibility_band",
    "generate_oval_geometry",
    "oval_to_geojson",
    "simulate_forecast",
    "forecast_to_frame",
    "distance_km",
    "destination_point",
    "assess_location",
    # catalog
    "LightSourceCatalog",
    "default_catalog",
    "PollutionEstimator",
    # models
    "AuroraAdvisory",
    "Coordinate",
    "ForecastSample",
    "LightSource",
    "NearestSource",
    "OvalGeometry",
    "OvalPair",
    "PollutionEstimate",
    # errors
    "ValidationError",
]
