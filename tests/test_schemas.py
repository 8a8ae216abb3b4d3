"""
Tests for auroracast/schemas.py.
"""

import pandas as pd
import pytest

from auroracast.schemas import ForecastSchema, LightSourceSchema, validate_schema


def _forecast_frame(predicted=(3.0, 7.5), levels=("moderate", "severe storm")):
    return pd.DataFrame(
        {
            "hour_offset": pd.Series([0, 1], dtype="int64"),
            "label": pd.Series(["0h", "1h"], dtype=object),
            "predicted_index": pd.Series(list(predicted), dtype=float),
            "activity_level": pd.Series(list(levels), dtype=object),
            "color": pd.Series(["#4caf50", "#f44336"], dtype=object),
        }
    )


class TestValidateSchema:

    def test_none_returns_warning(self):
        warnings = validate_schema(None, ForecastSchema, "forecast")
        assert warnings == ["[forecast] DataFrame is None"]

    def test_none_strict_raises(self):
        with pytest.raises(ValueError, match="None"):
            validate_schema(None, ForecastSchema, "forecast", strict=True)

    def test_empty_returns_warning(self):
        warnings = validate_schema(pd.DataFrame(), ForecastSchema, "forecast")
        assert "empty" in warnings[0]

    def test_valid_frame_passes(self):
        assert validate_schema(_forecast_frame(), ForecastSchema, "forecast") == []

    def test_out_of_range_index_reported(self):
        df = _forecast_frame(predicted=(3.0, 12.0))
        warnings = validate_schema(df, ForecastSchema, "forecast")
        assert any("predicted_index" in w for w in warnings)

    def test_unknown_activity_level_strict_raises(self):
        df = _forecast_frame(levels=("moderate", "apocalyptic"))
        with pytest.raises(ValueError, match="Schema validation failed"):
            validate_schema(df, ForecastSchema, "forecast", strict=True)


class TestLightSourceSchema:

    def test_duplicate_names_reported(self):
        df = pd.DataFrame(
            {
                "name": pd.Series(["A", "A"], dtype=object),
                "lat": [1.0, 2.0],
                "lon": [1.0, 2.0],
                "weight": [6.0, 7.0],
            }
        )
        warnings = validate_schema(df, LightSourceSchema, "catalog")
        assert any("name" in w for w in warnings)

    def test_extra_column_rejected(self):
        df = pd.DataFrame(
            {
                "name": pd.Series(["A"], dtype=object),
                "lat": [1.0],
                "lon": [1.0],
                "weight": [6.0],
                "population": [1000],
            }
        )
        with pytest.raises(ValueError):
            validate_schema(df, LightSourceSchema, "catalog", strict=True)
