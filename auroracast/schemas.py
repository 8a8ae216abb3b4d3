"""
Pandera DataFrame schemas for the engine's tabular exports.

The catalog table and the simulated forecast table are handed to
charting/reporting collaborators as DataFrames; these schemas check both
structure and value ranges before they leave the engine.

Usage:
    from auroracast.schemas import ForecastSchema
    ForecastSchema.validate(df)  # raises pa.errors.SchemaError on failure
"""

import pandera as pa
from pandera import Column, Check, DataFrameSchema

from auroracast import config
from auroracast.formulas.classification import ACTIVITY_COLORS


# ── Light-source catalog ────────────────────────────────────────────────

LightSourceSchema = DataFrameSchema(
    columns={
        "name": Column(str, nullable=False, unique=True),
        "lat": Column(float, Check.in_range(-90.0, 90.0), nullable=False),
        "lon": Column(float, Check.in_range(-180.0, 180.0), nullable=False),
        "weight": Column(float, Check.greater_than(0.0), nullable=False),
    },
    strict=True,
    coerce=False,
    name="LightSourceSchema",
)


# ── Simulated forecast ──────────────────────────────────────────────────

ForecastSchema = DataFrameSchema(
    columns={
        "hour_offset": Column(int, Check.greater_than_or_equal_to(0), nullable=False),
        "label": Column(str, Check.str_matches(r"^\d+h$"), nullable=False),
        "predicted_index": Column(
            float, Check.in_range(*config.KP_INDEX_RANGE), nullable=False
        ),
        "activity_level": Column(str, Check.isin(list(ACTIVITY_COLORS)), nullable=False),
        "color": Column(str, Check.isin(list(ACTIVITY_COLORS.values())), nullable=False),
    },
    strict=False,
    coerce=False,
    name="ForecastSchema",
)


# ── Convenience validation function ─────────────────────────────────────

def validate_schema(df, schema, step_name, strict=False, allow_empty=False):
    """Validate a DataFrame against a Pandera schema.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to validate.
    schema : pa.DataFrameSchema
        Schema to validate against.
    step_name : str
        Step name for error messages.
    strict : bool
        If True, raise on failure. If False, return warnings list.
    allow_empty : bool
        If True, a zero-row DataFrame is checked for structure only
        (an empty light-source catalog is a legal configuration).

    Returns
    -------
    list[str]
        Validation warning messages (empty if all pass).

    Raises
    ------
    ValueError
        Only if strict=True and validation fails.
    """
    warnings_list = []

    if df is None:
        msg = f"[{step_name}] DataFrame is None"
        if strict:
            raise ValueError(msg)
        return [msg]

    if len(df) == 0 and not allow_empty:
        msg = f"[{step_name}] DataFrame is empty (0 rows)"
        if strict:
            raise ValueError(msg)
        return [msg]

    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as exc:
        for failure in exc.failure_cases.itertuples():
            msg = (
                f"[{step_name}] Schema violation: "
                f"column='{failure.column}' check='{failure.check}' "
                f"failure_case={failure.failure_case}"
            )
            warnings_list.append(msg)

        if strict:
            raise ValueError(
                f"[{step_name}] Schema validation failed with "
                f"{len(warnings_list)} errors"
            ) from exc

    return warnings_list
