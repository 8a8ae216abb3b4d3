"""
Per-location aurora advisory: activity, visibility and sky darkness in one report.
"""

from auroracast.aurora import oval_base_latitude, visibility_chance
from auroracast.formulas.classification import classify_activity, classify_visibility
from auroracast.light_pollution import PollutionEstimator
from auroracast.logging_config import get_engine_logger
from auroracast.models import AuroraAdvisory
from auroracast.validation import as_coordinate, validate_activity_index

log = get_engine_logger(__name__)


def assess_location(coordinate, activity_index, catalog=None):
    """Combine the current activity index with an observer's coordinate.

    Raises
    ------
    ValidationError
        If the coordinate or the activity index is invalid.
    """
    coordinate = as_coordinate(coordinate)
    kp = validate_activity_index(activity_index)

    chance = visibility_chance(kp, coordinate.latitude)
    outlook, message = classify_visibility(chance)
    pollution = PollutionEstimator(catalog).estimate(coordinate)

    advisory = AuroraAdvisory(
        coordinate=coordinate,
        activity_index=kp,
        activity_level=classify_activity(kp),
        oval_base_latitude=oval_base_latitude(kp),
        visibility_chance=chance,
        visibility_outlook=outlook,
        visibility_message=message,
        light_pollution=pollution,
    )
    log.info(
        "Advisory for (%.4f, %.4f) at Kp %.1f: %.0f%% visibility (%s), "
        "light pollution %d (%s)",
        coordinate.latitude, coordinate.longitude, kp, chance, outlook,
        pollution.value, pollution.level,
    )
    return advisory
