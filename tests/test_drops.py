import pytest

from taskbalance.drops import drop_rate


def test_base_chance():
    assert drop_rate(0, 0) == 0.3

def test_negative_value_keeps_base_chance():
    assert drop_rate(-20, 0) == 0.3

def test_value_and_perception_raise_chance():
    assert drop_rate(5, 10) == pytest.approx(0.433, abs=1e-3)

def test_capped():
    assert drop_rate(100, 500) == 0.9

def test_monotonic_and_bounded():
    for perception in (0, 10, 60, 200):
        rates = [drop_rate(v, perception) for v in range(-10, 30)]
        assert rates == sorted(rates)
        assert all(0 <= r <= 0.9 for r in rates)
    by_perception = [drop_rate(5, p) for p in range(0, 300, 5)]
    assert by_perception == sorted(by_perception)
