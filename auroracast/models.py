"""
Typed value objects passed between the engine and its collaborators.

All of these are immutable and computed per call; none are persisted.
"""

from dataclasses import dataclass
from typing import Optional

from auroracast.validation import (
    ValidationError,
    validate_latitude,
    validate_longitude,
    validate_number,
)


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees. Validated on construction."""

    latitude: float
    longitude: float

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the normalized floats
        object.__setattr__(self, "latitude", validate_latitude(self.latitude))
        object.__setattr__(self, "longitude", validate_longitude(self.longitude))

    def to_dict(self):
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class LightSource:
    """A weighted population center in the light-source catalog."""

    name: str
    coordinate: Coordinate
    weight: float

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError(f"light source name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.coordinate, Coordinate):
            raise ValidationError(f"{self.name}: coordinate must be a Coordinate")
        weight = validate_number(self.weight, f"{self.name} weight")
        if weight <= 0:
            raise ValidationError(f"{self.name} weight must be positive, got {weight!r}")
        object.__setattr__(self, "weight", weight)


@dataclass(frozen=True)
class NearestSource:
    name: str
    distance_km: float
    direction: str = ""  # Compass word from the observer towards the source


@dataclass(frozen=True)
class PollutionEstimate:
    """Sky-darkness estimate for one coordinate."""

    value: int  # 0-100, raw_value rounded half-up
    level: str  # Excellent, Good, Moderate, High, Severe
    description: str
    nearest_source: Optional[NearestSource] = None
    travel_hint: str = ""  # Empty unless the sky is too bright
    raw_value: float = 0.0  # Clamped, unrounded aggregate

    def to_dict(self):
        nearest = None
        if self.nearest_source is not None:
            nearest = {
                "name": self.nearest_source.name,
                "distance_km": self.nearest_source.distance_km,
                "direction": self.nearest_source.direction,
            }
        return {
            "value": self.value,
            "level": self.level,
            "description": self.description,
            "nearest_source": nearest,
            "travel_hint": self.travel_hint,
        }


@dataclass(frozen=True)
class OvalGeometry:
    """Aurora oval rings for one hemisphere, as (longitude, latitude) pairs."""

    boundary: tuple  # Closed ring: first point == last point
    fill: tuple  # Closed ring enclosing the annulus around the boundary


@dataclass(frozen=True)
class OvalPair:
    north: OvalGeometry
    south: OvalGeometry


@dataclass(frozen=True)
class ForecastSample:
    hour_offset: int
    predicted_index: float  # Clamped to the Kp range [0, 9]


@dataclass(frozen=True)
class AuroraAdvisory:
    """Everything a UI needs to tell a user whether to go outside."""

    coordinate: Coordinate
    activity_index: float
    activity_level: str
    oval_base_latitude: float
    visibility_chance: float
    visibility_outlook: str
    visibility_message: str
    light_pollution: PollutionEstimate

    def to_dict(self):
        return {
            "coordinate": self.coordinate.to_dict(),
            "activity_index": self.activity_index,
            "activity_level": self.activity_level,
            "oval_base_latitude": self.oval_base_latitude,
            "visibility_chance": self.visibility_chance,
            "visibility_outlook": self.visibility_outlook,
            "visibility_message": self.visibility_message,
            "light_pollution": self.light_pollution.to_dict(),
        }
