"""
Light pollution, geomagnetic activity, and visibility outlook classification.

All functions are pure (no I/O, no side effects).
"""

from auroracast import config


def classify_pollution(value, levels=None, severe_level=None):
    """Classify a light pollution value into a named level.

    Uses left-inclusive intervals:
        value < 10 → "Excellent"
        10 <= value < 30 → "Good"
        30 <= value < 60 → "Moderate"
        60 <= value < 80 → "High"
        value >= 80 → "Severe"

    Parameters
    ----------
    value : float
        Pollution value on the 0-100 scale.
    levels : list of (upper_bound, name, description), optional
        Defaults to config.POLLUTION_LEVELS.
    severe_level : (name, description), optional
        Level used at or above the last bound. Defaults to
        config.POLLUTION_SEVERE_LEVEL.

    Returns
    -------
    tuple[str, str]
        (level name, description sentence).
    """
    if levels is None:
        levels = config.POLLUTION_LEVELS
    if severe_level is None:
        severe_level = config.POLLUTION_SEVERE_LEVEL

    for upper, name, description in levels:
        if value < upper:
            return name, description
    return severe_level


def classify_activity(kp_index):
    """Classify a Kp-like index into an activity level.

    Returns one of "low", "moderate", "strong storm", "severe storm".
    """
    if kp_index >= 7:
        return "severe storm"
    if kp_index >= 5:
        return "strong storm"
    if kp_index >= 3:
        return "moderate"
    return "low"


def classify_visibility(chance):
    """Classify a visibility chance (percent) into an outlook.

    Returns
    -------
    tuple[str, str]
        (outlook, user-facing message). Outlook is "high", "moderate" or "low".
    """
    if chance >= 70:
        return "high", VISIBILITY_MESSAGES["high"]
    if chance >= 30:
        return "moderate", VISIBILITY_MESSAGES["moderate"]
    return "low", VISIBILITY_MESSAGES["low"]


VISIBILITY_MESSAGES = {
    "high": "High chance of seeing aurora! Get to a dark location away from city lights.",
    "moderate": (
        "Moderate chance of aurora. Worth looking if skies are clear and "
        "you're away from light pollution."
    ),
    "low": (
        "Low chance of seeing aurora at your location. Consider traveling to "
        "higher latitudes for better visibility."
    ),
}

# Display colors shared with rendering collaborators.
ACTIVITY_COLORS = {
    "low": "#4fc3f7",
    "moderate": "#4caf50",
    "strong storm": "#ff9800",
    "severe storm": "#f44336",
}

VISIBILITY_COLORS = {
    "high": "#4caf50",
    "moderate": "#ff9800",
    "low": "#f44336",
}

POLLUTION_COLORS = {
    "Excellent": "#4caf50",
    "Good": "#8bc34a",
    "Moderate": "#ffc107",
    "High": "#ff9800",
    "Severe": "#f44336",
}
