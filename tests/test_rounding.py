import math

from taskbalance.rounding import round_int, round_to


def test_round_half_up_on_decimal_repr():
    # Binary expansion of 2.675 is slightly below, builtin round() gives 2.67
    assert round_to(2.675, 2) == 2.68
    assert round_to(11.8175, 2) == 11.82

def test_round_to_three_places():
    assert round_to(0.3 + 5 / 60 + 10 / 200, 3) == 0.433

def test_round_int_is_not_bankers():
    assert round_int(2.5) == 3
    assert round_int(132.5) == 133
    assert round_int(132.25) == 132

def test_non_finite_rounds_to_zero():
    assert round_to(math.nan, 2) == 0.0
    assert round_to(math.inf, 2) == 0.0
    assert round_int(-math.inf) == 0

def test_large_magnitudes_pass_through():
    assert round_to(1e20, 2) == 1e20
    assert round_to(123456789.125, 2) == 123456789.13
