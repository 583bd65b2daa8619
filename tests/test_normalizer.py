import math

import pytest

from taskbalance.constants import TASK_VALUE_CEILING, TASK_VALUE_FLOOR
from taskbalance.normalizer import (
    clamp_task_value,
    positive_task_value,
    sanitize_attribute,
    sanitize_level,
)


def test_clamp_below_floor():
    assert clamp_task_value(TASK_VALUE_FLOOR - 100) == TASK_VALUE_FLOOR

def test_clamp_above_ceiling():
    assert clamp_task_value(TASK_VALUE_CEILING + 100) == TASK_VALUE_CEILING

def test_clamp_passes_in_range_values_through():
    assert clamp_task_value(5.5) == 5.5
    assert clamp_task_value(-12.0) == -12.0

def test_clamp_non_finite_is_zero():
    # Non-finite input becomes 0 before clamping, so +inf does not hit the ceiling
    assert clamp_task_value(math.nan) == 0
    assert clamp_task_value(math.inf) == 0
    assert clamp_task_value(-math.inf) == 0

def test_clamp_garbage_is_zero():
    assert clamp_task_value(None) == 0
    assert clamp_task_value("not a number") == 0

@pytest.mark.parametrize("value", [-1e9, -47.27, -3.3, 0, 0.01, 21.27, 99, math.nan, math.inf])
def test_clamp_is_idempotent(value):
    once = clamp_task_value(value)
    assert clamp_task_value(once) == once
    assert TASK_VALUE_FLOOR <= once <= TASK_VALUE_CEILING

def test_positive_task_value_floors_at_zero():
    assert positive_task_value(-5) == 0
    assert positive_task_value(500) == TASK_VALUE_CEILING

def test_sanitize_attribute():
    assert sanitize_attribute(-5) == 0
    assert sanitize_attribute(math.nan) == 0
    assert sanitize_attribute(math.inf) == 0
    assert sanitize_attribute(12.5) == 12.5

def test_sanitize_level():
    assert sanitize_level(0) == 1
    assert sanitize_level(-3) == 1
    assert sanitize_level(3.7) == 3
    assert sanitize_level(math.nan) == 1
    assert sanitize_level(1e12) == 10**12

def test_integer_levels_stay_exact_without_a_cap():
    assert sanitize_level(10**20 + 1) == 10**20 + 1
    assert sanitize_level(True) == 1
