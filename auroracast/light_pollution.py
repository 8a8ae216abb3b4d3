"""
Light pollution estimate from proximity to weighted population centers.

Each catalog source within the cutoff contributes weight * 100 / (d² + 1)
where d is the great-circle distance in km. Contributions are summed and
clamped to 0-100. Bright locations also get a directional search for
darker sky 50 km out along the eight compass bearings.
"""

import math

from auroracast import config
from auroracast.catalog import default_catalog
from auroracast.formulas.classification import classify_pollution
from auroracast.geodesy import (
    bearing_deg,
    bearing_to_compass,
    destination_point,
    haversine_km,
)
from auroracast.logging_config import get_engine_logger
from auroracast.models import NearestSource, PollutionEstimate
from auroracast.validation import as_coordinate

log = get_engine_logger(__name__)


def _round_half_up(value):
    return int(math.floor(value + 0.5))


class PollutionEstimator:
    """Sky-darkness estimator over an injected light-source catalog."""

    def __init__(self, catalog=None, cutoff_km=None):
        if catalog is None:
            catalog = default_catalog()
        if cutoff_km is None:
            cutoff_km = config.POLLUTION_CUTOFF_KM
        self.catalog = catalog
        self.cutoff_km = cutoff_km

    def _aggregate(self, coordinate):
        """Sum source contributions at a coordinate.

        Returns
        -------
        tuple[float, NearestSource | None]
            Clamped pollution value and the closest source inside the
            cutoff (first in catalog order on ties).
        """
        lat, lon = coordinate.latitude, coordinate.longitude
        total = 0.0
        closest, closest_dist = None, None
        for source in self.catalog:
            dist = haversine_km(lat, lon, source.coordinate.latitude,
                                source.coordinate.longitude)
            if dist >= self.cutoff_km:
                continue
            total += (source.weight * config.POLLUTION_CONTRIBUTION_SCALE /
                      (dist * dist + 1))
            if closest is None or dist < closest_dist:
                closest, closest_dist = source, dist

        nearest = None
        if closest is not None:
            bearing = bearing_deg(lat, lon, closest.coordinate.latitude,
                                  closest.coordinate.longitude)
            nearest = NearestSource(closest.name, closest_dist,
                                    bearing_to_compass(bearing))

        lo, hi = config.POLLUTION_VALUE_RANGE
        return max(lo, min(hi, total)), nearest

    def pollution_value(self, coordinate):
        """Clamped pollution value (0-100) at a coordinate, without rounding."""
        value, _ = self._aggregate(as_coordinate(coordinate))
        return value

    def darker_directions(self, coordinate, origin_value=None):
        """Compass directions where the sky is meaningfully darker nearby.

        Probes config.DARKNESS_SEARCH_DISTANCE_KM out along each bearing in
        config.DARKNESS_SEARCH_BEARINGS and keeps those whose value is at
        least config.DARKNESS_MIN_IMPROVEMENT below the origin's.

        Returns
        -------
        list[str]
            Direction words in bearing order, e.g. ["North", "Southwest"].
        """
        coordinate = as_coordinate(coordinate)
        if origin_value is None:
            origin_value, _ = self._aggregate(coordinate)

        directions = []
        for bearing in config.DARKNESS_SEARCH_BEARINGS:
            probe = destination_point(coordinate, bearing,
                                      config.DARKNESS_SEARCH_DISTANCE_KM)
            probe_value, _ = self._aggregate(probe)
            if origin_value - probe_value >= config.DARKNESS_MIN_IMPROVEMENT:
                directions.append(bearing_to_compass(bearing))
        return directions

    def estimate(self, coordinate):
        """Full light pollution estimate for a coordinate.

        Raises
        ------
        ValidationError
            If the coordinate is invalid.
        """
        coordinate = as_coordinate(coordinate)
        raw_value, nearest = self._aggregate(coordinate)
        level, description = classify_pollution(raw_value)

        travel_hint = ""
        if raw_value >= config.TRAVEL_HINT_THRESHOLD:
            directions = self.darker_directions(coordinate, origin_value=raw_value)
            if directions:
                travel_hint = config.TRAVEL_HINT_DIRECTIONS.format(
                    directions=" or ".join(directions)
                )
            else:
                travel_hint = config.TRAVEL_HINT_GENERIC

        log.debug(
            "Light pollution at (%.4f, %.4f): %.2f (%s), nearest=%s",
            coordinate.latitude, coordinate.longitude, raw_value, level,
            nearest.name if nearest else None,
        )
        return PollutionEstimate(
            value=_round_half_up(raw_value),
            level=level,
            description=description,
            nearest_source=nearest,
            travel_hint=travel_hint,
            raw_value=raw_value,
        )


def estimate_light_pollution(coordinate, catalog=None):
    """Estimate light pollution at a coordinate using the given (or default) catalog."""
    return PollutionEstimator(catalog).estimate(coordinate)
