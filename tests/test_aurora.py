"""
Tests for auroracast/aurora.py.

Checks the oval base latitude, each visibility band formula, the exact
band boundaries (>=, not >), and the known discontinuities between bands.
"""

import pytest

from auroracast.aurora import oval_base_latitude, visibility_band, visibility_chance
from auroracast.validation import ValidationError


class TestOvalBaseLatitude:

    @pytest.mark.parametrize(
        "kp, expected",
        [(0, 67.0), (1, 64.0), (5, 52.0), (9, 40.0)],
    )
    def test_linear_in_kp(self, kp, expected):
        assert oval_base_latitude(kp) == pytest.approx(expected)

    def test_not_clamped(self):
        """Extreme indices push the oval past the equator or the pole."""
        assert oval_base_latitude(30) == pytest.approx(-23.0)
        assert oval_base_latitude(-10) == pytest.approx(97.0)

    @pytest.mark.parametrize("kp", [float("nan"), float("inf"), "5", None, True])
    def test_invalid_index_rejected(self, kp):
        with pytest.raises(ValidationError):
            oval_base_latitude(kp)


class TestScenarios:
    """Worked examples."""

    def test_inside_oval(self):
        """Kp 5 at 67°: base 52, 67 >= 57 → min(95, 60 + 25) = 85."""
        assert visibility_chance(5, 67) == pytest.approx(85.0)

    def test_far_from_oval(self):
        """Kp 2 at 45°: base 61, 45 < 56 → max(0, 10 * (2 - 6)) = 0."""
        assert visibility_chance(2, 45) == pytest.approx(0.0)

    def test_oval_edge(self):
        """Kp 4 at 58°: base 55, factor 0.6 → min(90, 20 + 32 + 18) = 70."""
        assert visibility_chance(4, 58) == pytest.approx(70.0)

    def test_southern_hemisphere_mirrors_northern(self):
        assert visibility_chance(5, -67) == pytest.approx(visibility_chance(5, 67))
        assert visibility_chance(4, -58) == pytest.approx(70.0)


class TestBandBoundaries:
    """Kp 4 → base 55: bands start at 60, 55 and 50."""

    @pytest.mark.parametrize(
        "latitude, band, expected",
        [
            (60.0, "inside_oval", 80.0),     # min(95, 60 + 20)
            (55.0, "oval_edge", 52.0),       # 20 + 32 + 0
            (50.0, "near_oval", 15.0),       # max(5, 15 * 1)
            (49.999, "far_from_oval", 0.0),  # max(0, 10 * -2)
        ],
    )
    def test_lower_bound_is_inclusive(self, latitude, band, expected):
        assert visibility_band(4, latitude) == band
        assert visibility_chance(4, latitude) == pytest.approx(expected)

    def test_known_discontinuity_at_inner_edge(self):
        """Just below base+5 scores ~82, at base+5 drops to 80: kept as-is."""
        below = visibility_chance(4, 59.999)
        at = visibility_chance(4, 60.0)
        assert below == pytest.approx(20 + 32 + 30 * 4.999 / 5)
        assert below > at

    def test_known_discontinuity_at_outer_edge(self):
        """Kp 2 → base 61: 56 scores 5 (near_oval floor), 55.99 scores 0."""
        assert visibility_chance(2, 56.0) == pytest.approx(5.0)
        assert visibility_chance(2, 55.99) == pytest.approx(0.0)


class TestBandFormulas:

    def test_inside_oval_caps_at_95(self):
        assert visibility_chance(9, 90) == pytest.approx(95.0)

    def test_oval_edge_caps_at_90(self):
        """Kp 9 → base 40; 44° is edge: 20 + 72 + 24 = 116 → 90."""
        assert visibility_chance(9, 44) == pytest.approx(90.0)

    def test_near_oval_floor_is_5(self):
        """Kp 1 → base 64; 60° is near_oval: 15 * -2 → 5."""
        assert visibility_chance(1, 60) == pytest.approx(5.0)

    def test_near_oval_rises_with_storms(self):
        """Kp 6 → base 49; 45° is near_oval: 15 * 3 = 45."""
        assert visibility_chance(6, 45) == pytest.approx(45.0)

    def test_far_from_oval_extreme_storm(self):
        """Kp 9 → base 40; equator: 10 * 3 = 30."""
        assert visibility_chance(9, 0) == pytest.approx(30.0)

    def test_equator_quiet_is_zero(self):
        assert visibility_chance(0, 0) == pytest.approx(0.0)


class TestOutOfConventionIndex:
    """Indices outside 0-9 are accepted; only the percentage is clamped."""

    def test_negative_index_clamped_to_zero(self):
        """Kp -5 → base 82; 85° is edge: 20 - 40 + 18 = -2 → 0."""
        assert visibility_chance(-5, 85) == pytest.approx(0.0)

    def test_huge_index_capped(self):
        assert visibility_chance(30, 0) == pytest.approx(95.0)

    @pytest.mark.parametrize("latitude", [90.5, -91, float("nan"), "45"])
    def test_invalid_latitude_rejected(self, latitude):
        with pytest.raises(ValidationError):
            visibility_chance(5, latitude)
