"""
Aurora oval position and visibility chance from a Kp-like activity index.

Simplified heuristic: the poleward edge of the oval sits at 67° at Kp 0
and moves 3° equatorward per Kp step. Visibility is scored in four
latitude bands relative to that edge. The band formulas are not
continuous across band boundaries.
"""

from auroracast import config
from auroracast.validation import validate_activity_index, validate_latitude


def oval_base_latitude(activity_index):
    """Characteristic (poleward) latitude of the aurora oval, in degrees.

    Not clamped: extreme indices give values below 0 or above 90.
    """
    kp = validate_activity_index(activity_index)
    return config.OVAL_BASE_LATITUDE_DEG - config.OVAL_EXPANSION_PER_KP * kp


def visibility_band(activity_index, latitude):
    """Name the latitude band an observer falls in relative to the oval.

    Returns one of "inside_oval", "oval_edge", "near_oval", "far_from_oval".
    """
    base = oval_base_latitude(activity_index)
    abs_lat = abs(validate_latitude(latitude))
    width = config.VISIBILITY_BAND_WIDTH_DEG

    if abs_lat >= base + width:
        return "inside_oval"
    if abs_lat >= base:
        return "oval_edge"
    if abs_lat >= base - width:
        return "near_oval"
    return "far_from_oval"


def visibility_chance(activity_index, latitude):
    """Percentage chance (0-100) that aurora is visible from a latitude.

    Parameters
    ----------
    activity_index : float
        Current Kp-like index, conventionally 0-9.
    latitude : float
        Observer latitude in degrees; only its magnitude matters.

    Returns
    -------
    float
        inside_oval:   min(95, 60 + 5·kp)
        oval_edge:     min(90, 20 + 8·kp + 30·(|lat| - base) / 5)
        near_oval:     max(5, 15·(kp - 3))
        far_from_oval: max(0, 10·(kp - 6))
        clamped to [0, 100].
    """
    kp = validate_activity_index(activity_index)
    latitude = validate_latitude(latitude)
    band = visibility_band(kp, latitude)

    if band == "inside_oval":
        chance = min(95.0, 60.0 + kp * 5)
    elif band == "oval_edge":
        factor = (abs(latitude) - oval_base_latitude(kp)) / config.VISIBILITY_BAND_WIDTH_DEG
        chance = min(90.0, 20.0 + kp * 8 + factor * 30)
    elif band == "near_oval":
        chance = max(5.0, (kp - 3) * 15)
    else:
        chance = max(0.0, (kp - 6) * 10)

    lo, hi = config.VISIBILITY_CHANCE_RANGE
    return max(lo, min(hi, chance))
