"""
TaskBalance — taskbalance/damage.py
Damage Model: tavern (idle decay) damage and boss damage with mitigation.
=========================================================================
Version:     0.1
Stack:       Python 3.12
Status:      Canonical.

  tavern_damage  received by the character when a task is missed.
                 Never below MIN_TAVERN_DAMAGE.
  boss_damage    dealt to a quest monster on task completion.
                 Never negative; non-positive task values deal nothing.
"""

from __future__ import annotations

from typing import Any, Optional

from taskbalance.config import BalanceConfig, resolve_config
from taskbalance.normalizer import clamp_task_value, positive_task_value, sanitize_attribute
from taskbalance.rounding import round_to


def tavern_damage(task_value: Any, config: Optional[BalanceConfig] = None) -> float:
    cfg = resolve_config(config)
    clamped = clamp_task_value(task_value, cfg)
    if clamped >= 0:
        return cfg.min_tavern_damage

    damage = max(cfg.min_tavern_damage, -clamped * cfg.tavern_damage_rate)
    return round_to(damage, cfg.damage_precision)


def raw_boss_damage(task_value: Any, strength: Any, boss_defense: Any = 0,
                    scale: float = 1.0,
                    config: Optional[BalanceConfig] = None) -> float:
    """
    Unrounded boss damage. `scale` multiplies the pre-mitigation damage
    (priority weighting); defense is subtracted after scaling.
    """
    cfg = resolve_config(config)
    clamped = positive_task_value(task_value, cfg)
    if clamped == 0:
        return 0.0

    attack_multiplier = 1 + sanitize_attribute(strength) / cfg.stat_critical_divisor
    base_damage = clamped * attack_multiplier * scale
    mitigated = base_damage - sanitize_attribute(boss_defense) / cfg.boss_defense_divisor
    return max(0.0, mitigated)


def boss_damage(task_value: Any, strength: Any, boss_defense: Any = 0,
                config: Optional[BalanceConfig] = None) -> float:
    cfg = resolve_config(config)
    damage = raw_boss_damage(task_value, strength, boss_defense, config=cfg)
    return round_to(damage, cfg.damage_precision)
