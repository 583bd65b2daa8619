"""
TaskBalance — taskbalance/progression.py
Level Progression Model: XP required to advance from a level.
=============================================================
Version:     0.2
Stack:       Python 3.12 | stdlib decimal
Status:      Canonical.

Curves (selectable; neither is implied)
---------------------------------------
  quadratic     round(0.25*(L-1)^2 + 10*(L-1) + 139.75)      140, 150, 160, ...
  exponential   round(100 * 1.15^(L-1))                      100, 115, 132, ...

Both return positive integers. Levels are sanitized first (non-finite -> 1,
fractions floored). Both curves are evaluated in Decimal:
  - quadratic is exact at any integer level, so it is strictly increasing
    without bound.
  - exponential is strictly increasing up to MAX_LEVEL and saturates there.
    Its context runs at MAX_EMAX so no configured growth overflows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import MAX_EMAX, Decimal, localcontext
from typing import Any, Dict, Optional, Type

from taskbalance.config import BalanceConfig, resolve_config
from taskbalance.constants import MAX_LEVEL
from taskbalance.normalizer import sanitize_level, to_finite
from taskbalance.rounding import round_int, round_to

# Working digits beyond the squared level's digit count, for exact quadratic terms
QUADRATIC_GUARD_DIGITS: int = 40


class LevelCurve(ABC):
    name: str = "abstract"

    def __init__(self, config: Optional[BalanceConfig] = None) -> None:
        self.config = resolve_config(config)

    def xp_to_next(self, level: Any) -> int:
        return self._requirement(sanitize_level(level))

    @abstractmethod
    def _requirement(self, level: int) -> int:
        ...


class QuadraticCurve(LevelCurve):
    name = "quadratic"

    def _requirement(self, level: int) -> int:
        cfg = self.config
        n = Decimal(level - 1)
        a, b, c = (Decimal(repr(x)) for x in (cfg.quadratic_xp_a, cfg.quadratic_xp_b, cfg.quadratic_xp_c))
        with localcontext() as ctx:
            # bit_length // 3 + 1 bounds the decimal digit count of level
            ctx.prec = 2 * (level.bit_length() // 3 + 1) + QUADRATIC_GUARD_DIGITS
            ctx.Emax = MAX_EMAX
            return round_int(a * n * n + b * n + c)


class ExponentialCurve(LevelCurve):
    name = "exponential"

    def _requirement(self, level: int) -> int:
        base = Decimal(repr(self.config.exponential_xp_base))
        growth = Decimal(repr(self.config.exponential_xp_growth))
        with localcontext() as ctx:
            ctx.Emax = MAX_EMAX
            return round_int(base * growth ** (min(level, MAX_LEVEL) - 1))


LEVEL_CURVES: Dict[str, Type[LevelCurve]] = {
    QuadraticCurve.name: QuadraticCurve,
    ExponentialCurve.name: ExponentialCurve,
}

DEFAULT_CURVE = ExponentialCurve()


def get_level_curve(name: str, config: Optional[BalanceConfig] = None) -> LevelCurve:
    """Build a curve by registry name. Unknown names raise KeyError."""
    if name not in LEVEL_CURVES:
        raise KeyError(f"Unknown level curve: {name!r} (known: {sorted(LEVEL_CURVES)})")
    return LEVEL_CURVES[name](config=config)


def xp_to_next(level: Any, curve: Optional[LevelCurve] = None) -> int:
    return (curve or DEFAULT_CURVE).xp_to_next(level)


# ============================================================
# LEVEL-UP
# ============================================================

@dataclass(frozen=True)
class LevelProgress:
    level: int
    xp: float
    xp_to_next: int


def apply_experience(level: Any, xp: Any, gained: Any,
                     curve: Optional[LevelCurve] = None,
                     requirement: Optional[int] = None) -> LevelProgress:
    """
    Add `gained` XP at `level`, carrying overflow through as many level-ups
    as it covers. Non-positive gains leave level and xp unchanged.

    `requirement` is the threshold already recorded for the current level
    (a stored xp_to_next); later levels always come from `curve`.
    XP at MAX_LEVEL accumulates without further level-ups.
    """
    curve = curve or DEFAULT_CURVE
    level = sanitize_level(level)
    current = max(0.0, to_finite(xp))
    gained = to_finite(gained)
    if requirement is None or requirement < 1:
        requirement = curve.xp_to_next(level)

    if gained <= 0:
        return LevelProgress(level=level, xp=current, xp_to_next=requirement)

    remaining = round_to(current + gained, curve.config.reward_precision)
    while remaining >= requirement and level < MAX_LEVEL:
        remaining = round_to(remaining - requirement, curve.config.reward_precision)
        level += 1
        requirement = curve.xp_to_next(level)

    return LevelProgress(level=level, xp=remaining, xp_to_next=requirement)
