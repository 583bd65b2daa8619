"""
TaskBalance — taskbalance/critical.py
Critical Hit Model: chance and multiplier from a strength-like score.
====================================================================
Version:     0.1
Stack:       Python 3.12
Status:      Canonical.

The engine never rolls dice. Callers roll against critical_chance() and
pass the result back in as is_critical.
"""

from __future__ import annotations

from typing import Any, Optional

from taskbalance.config import BalanceConfig, resolve_config
from taskbalance.normalizer import sanitize_attribute
from taskbalance.rounding import round_to


def critical_chance(attribute: Any, config: Optional[BalanceConfig] = None) -> float:
    """
    base + a / (2 * divisor), rounded to 3 places, then capped.
    0.05 at a=0, 0.30 at a=100, 0.75 from a=280 upward.
    """
    cfg = resolve_config(config)
    score = sanitize_attribute(attribute)
    chance = cfg.base_critical_chance + score / (cfg.stat_critical_divisor * 2)
    return min(cfg.max_critical_chance, round_to(chance, cfg.chance_precision))


def critical_multiplier(attribute: Any, config: Optional[BalanceConfig] = None) -> float:
    """base + a / divisor, rounded to 2 places. Uncapped."""
    cfg = resolve_config(config)
    score = sanitize_attribute(attribute)
    multiplier = cfg.base_critical_multiplier + score / cfg.stat_critical_divisor
    return round_to(multiplier, cfg.multiplier_precision)
