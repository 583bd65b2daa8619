"""
TaskBalance — taskbalance/rounding.py
Shared precision contract for every formula boundary.
=====================================================
Version:     0.1
Stack:       Python 3.12 | stdlib decimal
Status:      Canonical.

Rounding policy
---------------
  - Half-up on the shortest decimal repr of the float (11.8175 -> 11.82),
    never banker's rounding and never the binary expansion.
  - Non-finite input rounds to 0.0, matching the normalizer.
  - Magnitudes past FLOAT_EXACT_DIGITS carry no fractional digits in a
    float, so they are returned unchanged.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

FLOAT_EXACT_DIGITS: int = 15

Number = Union[int, float, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)


def round_to(value: Number, places: int) -> float:
    """Round half-up to `places` decimals and return a float."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0.0
    d = _to_decimal(value)
    if not d.is_finite():
        return 0.0
    if d.adjusted() >= FLOAT_EXACT_DIGITS:
        return float(d)
    quantum = Decimal(1).scaleb(-places)
    return float(d.quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: Number) -> int:
    """Round half-up to the nearest integer. Non-finite input gives 0."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    d = _to_decimal(value)
    if not d.is_finite():
        return 0
    return int(d.to_integral_value(rounding=ROUND_HALF_UP))
