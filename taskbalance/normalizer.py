"""
TaskBalance — taskbalance/normalizer.py
Value Normalizer: the single gate for task values, attributes and levels.
=========================================================================
Version:     0.1
Stack:       Python 3.12
Status:      Canonical. Total: never raises.

  clamp_task_value     non-finite -> 0, then clamp to [FLOOR, CEILING]
  positive_task_value  clamp, then floor at 0 (reward / boss / drop input)
  sanitize_attribute   non-finite or negative -> 0
  sanitize_level       non-finite -> 1, fractional floored, at least 1.
                       Integer levels are kept exact, with no upper bound.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from taskbalance.config import BalanceConfig, resolve_config


def to_finite(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def clamp_task_value(value: Any, config: Optional[BalanceConfig] = None) -> float:
    cfg = resolve_config(config)
    finite = to_finite(value)
    if finite < cfg.task_value_floor:
        return cfg.task_value_floor
    if finite > cfg.task_value_ceiling:
        return cfg.task_value_ceiling
    return finite


def positive_task_value(value: Any, config: Optional[BalanceConfig] = None) -> float:
    return max(0.0, clamp_task_value(value, config))


def sanitize_attribute(value: Any) -> float:
    return max(0.0, to_finite(value))


def sanitize_level(level: Any) -> int:
    if isinstance(level, int) and not isinstance(level, bool):
        return max(1, level)
    finite = to_finite(level)
    if finite < 1:
        return 1
    return int(math.floor(finite))
