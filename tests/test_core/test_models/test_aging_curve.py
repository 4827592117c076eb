"""Tests for AgingCurve."""

import dataclasses

import pytest

from tipoff.core.models.aging_curve import AgingCurve


class TestAgeModifier:
    """Development multiplier by age."""

    def test_young_players_develop_faster(self):
        curve = AgingCurve.standard()
        assert curve.age_modifier(20) == pytest.approx(1.35)
        assert curve.age_modifier(26) == pytest.approx(1.05)

    def test_young_modifier_capped_at_two(self):
        curve = AgingCurve(peak_age=60)
        assert curve.age_modifier(18) == 2.0

    def test_peak_holds_until_decline(self):
        curve = AgingCurve.standard()
        assert curve.age_modifier(27) == 1.2
        assert curve.age_modifier(29) == 1.2

    def test_linear_decline(self):
        curve = AgingCurve.standard()
        assert curve.age_modifier(32) == pytest.approx(1.16)

    def test_floor_at_retirement_age(self):
        curve = AgingCurve.standard()
        assert curve.age_modifier(38) == 0.1
        assert curve.age_modifier(45) == 0.1

    def test_non_increasing_after_decline_start(self):
        curve = AgingCurve.standard()
        values = [curve.age_modifier(age) for age in range(30, 46)]
        assert all(a >= b for a, b in zip(values, values[1:]))


class TestDegradationRate:
    """Fraction of skill lost per season."""

    def test_no_loss_before_decline(self):
        assert AgingCurve.standard().degradation_rate(29) == 0.0

    def test_gradual_loss(self):
        assert AgingCurve.standard().degradation_rate(34) == pytest.approx(0.04)

    def test_capped_before_retirement(self):
        curve = AgingCurve(decline_rate=0.5)
        assert curve.degradation_rate(37) == 0.1

    def test_heavy_loss_past_retirement(self):
        assert AgingCurve.standard().degradation_rate(38) == 0.15


class TestForAge:
    """Generic curves chosen from age."""

    def test_young(self):
        curve = AgingCurve.for_age(20)
        assert (curve.peak_age, curve.decline_start_age, curve.retirement_age) == (28, 32, 40)

    def test_prime(self):
        assert AgingCurve.for_age(26) == AgingCurve.standard()

    def test_veteran(self):
        curve = AgingCurve.for_age(32)
        assert (curve.peak_age, curve.decline_start_age, curve.retirement_age) == (25, 28, 35)
        assert curve.decline_rate == 0.03


class TestAgingCurveModel:
    """Immutability and serialization."""

    def test_frozen(self):
        curve = AgingCurve.standard()
        with pytest.raises(dataclasses.FrozenInstanceError):
            curve.peak_age = 30

    def test_dict_round_trip(self):
        curve = AgingCurve(peak_age=26, decline_start_age=29, retirement_age=36,
                           peak_multiplier=1.1, decline_rate=0.025)
        assert AgingCurve.from_dict(curve.to_dict()) == curve

    def test_from_empty_dict_is_standard(self):
        assert AgingCurve.from_dict({}) == AgingCurve.standard()
