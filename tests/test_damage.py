import math

import pytest

from taskbalance.damage import boss_damage, raw_boss_damage, tavern_damage


class TestTavernDamage:
    def test_minimum_for_neutral_or_positive_values(self):
        assert tavern_damage(0) == 0.1
        assert tavern_damage(5) == 0.1
        assert tavern_damage(math.nan) == 0.1

    def test_scales_with_negative_value(self):
        assert tavern_damage(-4) == 1.0
        # -100 clamps to the floor: 47.27 * 0.25 = 11.8175
        assert tavern_damage(-100) == pytest.approx(11.82, abs=1e-2)

    def test_small_negative_values_keep_the_floor(self):
        assert tavern_damage(-0.2) == 0.1


class TestBossDamage:
    def test_never_negative(self):
        assert boss_damage(-5, 10) == 0
        assert boss_damage(5, 10, 5000) == 0

    def test_strength_and_defense(self):
        assert boss_damage(10, 50) == pytest.approx(12.5, abs=1e-2)
        assert boss_damage(10, 50, 100) == pytest.approx(11.5, abs=1e-2)

    def test_negative_defense_is_ignored(self):
        assert boss_damage(10, 0, -500) == 10.0

    def test_zero_value_deals_nothing(self):
        assert boss_damage(0, 1000) == 0

    @pytest.mark.parametrize("value", [-50, -1, 0, 0.5, 10, 50])
    @pytest.mark.parametrize("strength", [-10, 0, 50, math.nan])
    @pytest.mark.parametrize("defense", [-100, 0, 100, 10_000])
    def test_non_negative_everywhere(self, value, strength, defense):
        assert boss_damage(value, strength, defense) >= 0

    def test_scale_applies_before_mitigation(self):
        assert raw_boss_damage(10, 0, 100, scale=2.0) == pytest.approx(19.0)
