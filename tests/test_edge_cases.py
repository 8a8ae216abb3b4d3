"""
Edge-case tests for input validation at the engine boundary.

Every public operation must reject non-numbers, NaN and out-of-range
coordinates with ValidationError rather than computing garbage.
"""

import numpy as np
import pytest

from auroracast.models import Coordinate
from auroracast.validation import (
    ValidationError,
    as_coordinate,
    validate_activity_index,
    validate_non_negative,
    validate_number,
    validate_positive_int,
)


class TestCoordinate:

    @pytest.mark.parametrize(
        "lat, lon",
        [(91, 0), (-90.0001, 0), (0, 180.5), (0, -181), (float("nan"), 0),
         (0, float("inf")), ("45", 0), (None, 0), (True, 0)],
    )
    def test_invalid_rejected(self, lat, lon):
        with pytest.raises(ValidationError):
            Coordinate(lat, lon)

    @pytest.mark.parametrize("lat, lon", [(90, 180), (-90, -180), (0, 0)])
    def test_extremes_accepted(self, lat, lon):
        c = Coordinate(lat, lon)
        assert (c.latitude, c.longitude) == (float(lat), float(lon))

    def test_numpy_scalars_accepted(self):
        c = Coordinate(np.float64(64.1), np.int64(-21))
        assert type(c.latitude) is float
        assert c.longitude == -21.0

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Coordinate(100, 0)


class TestAsCoordinate:

    def test_passthrough(self):
        c = Coordinate(1, 2)
        assert as_coordinate(c) is c

    @pytest.mark.parametrize(
        "value",
        [(1, 2), [1, 2], {"lat": 1, "lon": 2}, {"latitude": 1, "longitude": 2}],
    )
    def test_accepted_shapes(self, value):
        assert as_coordinate(value) == Coordinate(1, 2)

    @pytest.mark.parametrize(
        "value", [None, "1,2", (1, 2, 3), (1,), {"lat": 1}, 42]
    )
    def test_rejected_shapes(self, value):
        with pytest.raises(ValidationError):
            as_coordinate(value)


class TestNumberValidators:

    def test_validate_number_message_names_field(self):
        with pytest.raises(ValidationError, match="speed"):
            validate_number("fast", "speed")

    def test_activity_index_is_not_range_checked(self):
        assert validate_activity_index(-3) == -3.0
        assert validate_activity_index(12.5) == 12.5

    @pytest.mark.parametrize("value", [float("nan"), float("-inf"), "5", None])
    def test_activity_index_rejects_non_finite(self, value):
        with pytest.raises(ValidationError):
            validate_activity_index(value)

    def test_positive_int(self):
        assert validate_positive_int(np.int64(3), "hours") == 3
        for bad in (0, -1, 1.0, True):
            with pytest.raises(ValidationError):
                validate_positive_int(bad, "hours")

    def test_non_negative(self):
        assert validate_non_negative(0, "variation") == 0.0
        with pytest.raises(ValidationError):
            validate_non_negative(-1e-9, "variation")
