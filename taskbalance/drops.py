"""
TaskBalance — taskbalance/drops.py
Drop Rate Model: item drop probability from task value and perception.
"""

from __future__ import annotations

from typing import Any, Optional

from taskbalance.config import BalanceConfig, resolve_config
from taskbalance.normalizer import positive_task_value, sanitize_attribute
from taskbalance.rounding import round_to


def drop_rate(task_value: Any, perception: Any,
              config: Optional[BalanceConfig] = None) -> float:
    """
    base + v/60 + per/200, capped at 0.9 and rounded to 3 places.
    Negative task values contribute nothing, so the floor is the base chance.
    """
    cfg = resolve_config(config)
    clamped = positive_task_value(task_value, cfg)
    score = sanitize_attribute(perception)

    chance = (
        cfg.drop_base_chance
        + clamped / cfg.drop_value_divisor
        + score / cfg.drop_perception_divisor
    )
    return round_to(min(cfg.drop_max_chance, chance), cfg.chance_precision)
