"""
TaskBalance — taskbalance/config.py
Balance configuration: typed design variables loaded JIT from TOML.
===================================================================
Version:     0.1
Stack:       Python 3.12 | Pydantic v2 | tomllib
Status:      Canonical loader. Formula modules accept a BalanceConfig and
             fall back to DEFAULT_CONFIG when none is passed.

Loading rules
-------------
  - load_balance_config() with no path reads data/balance.toml. A missing
    default file is not an error: defaults from constants.py apply.
  - An explicit path that does not exist raises FileNotFoundError.
  - Unknown keys are rejected; bad values raise pydantic.ValidationError.
  - Parsed configs are cached per resolved path. clear_config_cache()
    resets the cache (tests, hot reload).
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taskbalance import constants as c

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "balance.toml"


class BalanceConfig(BaseModel):
    """Every tunable number the formulas read. Field names mirror constants.py."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    task_value_floor: float = c.TASK_VALUE_FLOOR
    task_value_ceiling: float = c.TASK_VALUE_CEILING

    base_critical_chance: float = Field(default=c.BASE_CRITICAL_CHANCE, ge=0.0, le=1.0)
    max_critical_chance: float = Field(default=c.MAX_CRITICAL_CHANCE, ge=0.0, le=1.0)
    base_critical_multiplier: float = Field(default=c.BASE_CRITICAL_MULTIPLIER, ge=1.0)
    stat_critical_divisor: float = Field(default=c.STAT_CRITICAL_DIVISOR, gt=0.0)

    min_tavern_damage: float = Field(default=c.MIN_TAVERN_DAMAGE, ge=0.0)
    tavern_damage_rate: float = Field(default=c.TAVERN_DAMAGE_RATE, ge=0.0)
    boss_defense_divisor: float = Field(default=c.BOSS_DEFENSE_DIVISOR, gt=0.0)

    experience_base_multiplier: float = Field(default=c.EXPERIENCE_BASE_MULTIPLIER, ge=0.0)
    gold_base_multiplier: float = Field(default=c.GOLD_BASE_MULTIPLIER, ge=0.0)
    reward_attribute_divisor: float = Field(default=c.REWARD_ATTRIBUTE_DIVISOR, gt=0.0)

    priority_weights: Tuple[float, ...] = c.PRIORITY_WEIGHTS
    default_priority: float = c.DEFAULT_PRIORITY
    streak_bonus_cap: int = Field(default=c.STREAK_BONUS_CAP, ge=0)
    streak_bonus_divisor: float = Field(default=c.STREAK_BONUS_DIVISOR, gt=0.0)

    drop_base_chance: float = Field(default=c.DROP_BASE_CHANCE, ge=0.0, le=1.0)
    drop_max_chance: float = Field(default=c.DROP_MAX_CHANCE, ge=0.0, le=1.0)
    drop_value_divisor: float = Field(default=c.DROP_VALUE_DIVISOR, gt=0.0)
    drop_perception_divisor: float = Field(default=c.DROP_PERCEPTION_DIVISOR, gt=0.0)

    quadratic_xp_a: float = Field(default=c.QUADRATIC_XP_A, ge=0.0)
    quadratic_xp_b: float = Field(default=c.QUADRATIC_XP_B, ge=0.0)
    quadratic_xp_c: float = Field(default=c.QUADRATIC_XP_C, gt=0.0)
    exponential_xp_base: float = Field(default=c.EXPONENTIAL_XP_BASE, gt=0.0)
    exponential_xp_growth: float = Field(default=c.EXPONENTIAL_XP_GROWTH, gt=1.0)

    reward_precision: int = Field(default=c.REWARD_PRECISION, ge=0)
    damage_precision: int = Field(default=c.DAMAGE_PRECISION, ge=0)
    chance_precision: int = Field(default=c.CHANCE_PRECISION, ge=0)
    multiplier_precision: int = Field(default=c.MULTIPLIER_PRECISION, ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "BalanceConfig":
        if self.task_value_floor > self.task_value_ceiling:
            raise ValueError("task_value_floor must not exceed task_value_ceiling")
        if self.base_critical_chance > self.max_critical_chance:
            raise ValueError("base_critical_chance must not exceed max_critical_chance")
        if self.default_priority not in self.priority_weights:
            raise ValueError("default_priority must be one of priority_weights")
        return self


DEFAULT_CONFIG = BalanceConfig()

_CONFIG_CACHE: Dict[str, BalanceConfig] = {}


def _flatten(data: Dict[str, Any]) -> Dict[str, Any]:
    """TOML tables are presentation only; merge them into one flat mapping."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            flat.update(value)
        else:
            flat[key] = value
    return flat


def load_balance_config(path: Optional[Path] = None) -> BalanceConfig:
    """JIT loads a BalanceConfig from TOML. Cached per path."""
    explicit = path is not None
    path = Path(path) if explicit else DEFAULT_CONFIG_PATH
    key = str(path.resolve())

    if key in _CONFIG_CACHE:
        return _CONFIG_CACHE[key]

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Balance config not found: {path}")
        logger.info("No balance config at %s; using built-in defaults", path)
        _CONFIG_CACHE[key] = DEFAULT_CONFIG
        return DEFAULT_CONFIG

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = BalanceConfig(**_flatten(data))
    logger.debug("Loaded balance config from %s", path)
    _CONFIG_CACHE[key] = config
    return config


def clear_config_cache() -> None:
    _CONFIG_CACHE.clear()


def resolve_config(config: Optional[BalanceConfig]) -> BalanceConfig:
    return config if config is not None else DEFAULT_CONFIG
