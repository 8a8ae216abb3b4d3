"""
Synthetic Kp time series around a current value.

This is NOT a forecast. It fills an hourly chart with plausible-looking
variation around the present index until a real forecast feed is wired
in, and must never be presented as a prediction.
"""

import numpy as np
import pandas as pd

from auroracast import config
from auroracast.formulas.classification import ACTIVITY_COLORS, classify_activity
from auroracast.logging_config import get_engine_logger
from auroracast.models import ForecastSample
from auroracast.schemas import ForecastSchema, validate_schema
from auroracast.validation import (
    ValidationError,
    validate_activity_index,
    validate_non_negative,
    validate_positive_int,
)

log = get_engine_logger(__name__)


def simulate_forecast(current_index, hours=None, variation=None, random_source=None):
    """Hourly samples of current_index plus uniform noise, clamped to [0, 9].

    Parameters
    ----------
    current_index : float
        Latest Kp-like index from the feed.
    hours : int, optional
        Number of samples. Defaults to config.FORECAST_HOURS (24).
    variation : float, optional
        Maximum absolute perturbation. Defaults to config.FORECAST_VARIATION.
    random_source : object with a ``random()`` method, optional
        Source of uniform values in [0, 1), e.g. ``np.random.default_rng(42)``
        or ``random.Random(42)``. Defaults to an unseeded numpy Generator.

    Returns
    -------
    tuple[ForecastSample, ...]
    """
    current = validate_activity_index(current_index, "current_index")
    hours = validate_positive_int(
        config.FORECAST_HOURS if hours is None else hours, "hours"
    )
    variation = validate_non_negative(
        config.FORECAST_VARIATION if variation is None else variation, "variation"
    )
    if random_source is None:
        random_source = np.random.default_rng()
    elif not callable(getattr(random_source, "random", None)):
        raise ValidationError("random_source must provide a random() method")

    lo, hi = config.KP_INDEX_RANGE
    samples = []
    for hour in range(hours):
        perturbation = (float(random_source.random()) * 2 - 1) * variation
        samples.append(ForecastSample(
            hour_offset=hour,
            predicted_index=max(lo, min(hi, current + perturbation)),
        ))

    log.debug("Simulated %d forecast samples around Kp %.1f", hours, current)
    return tuple(samples)


def forecast_to_frame(samples):
    """Tabulate forecast samples for a charting collaborator.

    Returns
    -------
    pd.DataFrame
        Columns: [hour_offset, label, predicted_index, activity_level, color],
        validated against ForecastSchema.
    """
    levels = [classify_activity(s.predicted_index) for s in samples]
    df = pd.DataFrame({
        "hour_offset": pd.Series([s.hour_offset for s in samples], dtype="int64"),
        "label": pd.Series([f"{s.hour_offset}h" for s in samples], dtype=object),
        "predicted_index": pd.Series([s.predicted_index for s in samples], dtype=float),
        "activity_level": pd.Series(levels, dtype=object),
        "color": pd.Series([ACTIVITY_COLORS[lvl] for lvl in levels], dtype=object),
    })
    validate_schema(df, ForecastSchema, "forecast", strict=True)
    return df
