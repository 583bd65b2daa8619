import math

import pytest

from taskbalance.critical import critical_chance, critical_multiplier


def test_base_chance_for_non_positive_strength():
    assert critical_chance(-50) == 0.05
    assert critical_chance(0) == 0.05
    assert critical_chance(math.nan) == 0.05

def test_chance_scales_until_cap():
    assert critical_chance(100) == pytest.approx(0.3, abs=1e-3)
    assert critical_chance(280) == 0.75
    assert critical_chance(500) == 0.75
    assert critical_chance(2800) == 0.75

def test_chance_is_monotonic():
    chances = [critical_chance(a) for a in range(0, 400, 7)]
    assert chances == sorted(chances)

def test_multiplier_is_linear():
    assert critical_multiplier(0) == 1.5
    assert critical_multiplier(80) == 1.9
    assert critical_multiplier(-10) == 1.5

def test_multiplier_is_uncapped():
    assert critical_multiplier(1000) == 6.5
