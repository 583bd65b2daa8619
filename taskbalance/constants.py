"""
TaskBalance — taskbalance/constants.py
Design variable defaults for every balance formula.
===================================================
Version:     0.1
Stack:       Python 3.12
Status:      Canonical. BalanceConfig mirrors these names field-for-field.

Change here or override at runtime via data/balance.toml.
Never hardcode a balance number in a formula module.
"""

from __future__ import annotations

# ============================================================
# TASK VALUE DOMAIN
# ============================================================

TASK_VALUE_FLOOR: float = -47.27
TASK_VALUE_CEILING: float = 21.27

# ============================================================
# CRITICAL HITS
# ============================================================

BASE_CRITICAL_CHANCE: float = 0.05
MAX_CRITICAL_CHANCE: float = 0.75
BASE_CRITICAL_MULTIPLIER: float = 1.5
STAT_CRITICAL_DIVISOR: float = 200.0   # chance grows at 1/(2*divisor), multiplier at 1/divisor

# ============================================================
# DAMAGE
# ============================================================

MIN_TAVERN_DAMAGE: float = 0.1
TAVERN_DAMAGE_RATE: float = 0.25
BOSS_DEFENSE_DIVISOR: float = 100.0

# ============================================================
# REWARDS
# ============================================================

EXPERIENCE_BASE_MULTIPLIER: float = 0.6
GOLD_BASE_MULTIPLIER: float = 0.4
REWARD_ATTRIBUTE_DIVISOR: float = 100.0

# Priority-weighted strategy
PRIORITY_WEIGHTS: tuple[float, ...] = (0.1, 1.0, 1.5, 2.0)
DEFAULT_PRIORITY: float = 1.0
STREAK_BONUS_CAP: int = 50             # streak days counted toward the bonus
STREAK_BONUS_DIVISOR: float = 100.0    # 1 + streak/divisor

# ============================================================
# DROPS
# ============================================================

DROP_BASE_CHANCE: float = 0.3
DROP_MAX_CHANCE: float = 0.9
DROP_VALUE_DIVISOR: float = 60.0
DROP_PERCEPTION_DIVISOR: float = 200.0

# ============================================================
# LEVEL CURVES
# ============================================================

# Quadratic: a*(L-1)^2 + b*(L-1) + c
QUADRATIC_XP_A: float = 0.25
QUADRATIC_XP_B: float = 10.0
QUADRATIC_XP_C: float = 139.75

# Exponential: base * growth^(L-1)
EXPONENTIAL_XP_BASE: float = 100.0
EXPONENTIAL_XP_GROWTH: float = 1.15

# ============================================================
# PRECISION
# ============================================================

REWARD_PRECISION: int = 2
DAMAGE_PRECISION: int = 2
CHANCE_PRECISION: int = 3
MULTIPLIER_PRECISION: int = 2

# ============================================================
# CHARACTER DEFAULTS
# ============================================================

STARTING_LEVEL: int = 1
STARTING_HP: int = 50

# Highest level reachable by gaining XP; the exponential curve saturates here.
MAX_LEVEL: int = 1_000_000
