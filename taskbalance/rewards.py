"""
TaskBalance — taskbalance/rewards.py
Reward Model: experience and gold from task value, attributes and criticals.
============================================================================
Version:     0.2  (strategy interface)
Stack:       Python 3.12 | Pydantic v2
Status:      Canonical.

Two call shapes
---------------
  Module functions   experience() / gold() take scalars. They are the
                     single-attribute formulas every strategy builds on.
  RewardStrategy     takes TaskInput + AttributeSnapshot records. Callers
                     pick a variant explicitly:
                       "simple"    SimpleAttributeRewards
                       "weighted"  TaskPriorityWeightedRewards

Critical attribute
------------------
  The critical multiplier is computed from `critical_attribute` when given,
  otherwise from the same score that drives the reward. Strategies expose
  the choice as a constructor argument (None = same attribute).

Open Questions
--------------
  [ ] Which attribute should drive the critical multiplier: the reward
      attribute or strength. Both are supported; default is the reward
      attribute.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from taskbalance.config import BalanceConfig, resolve_config
from taskbalance.critical import critical_multiplier
from taskbalance.damage import raw_boss_damage
from taskbalance.models import AttributeKey, AttributeSnapshot, MonsterStats, RewardResult, TaskInput
from taskbalance.normalizer import positive_task_value, sanitize_attribute, to_finite
from taskbalance.rounding import round_to


# ============================================================
# SINGLE-ATTRIBUTE FORMULAS
# ============================================================

def raw_reward(task_value: Any, attribute: Any, base_multiplier: float,
               is_critical: bool = False, critical_attribute: Any = None,
               config: Optional[BalanceConfig] = None) -> float:
    """Unrounded reward. Zero for any task value that clamps to <= 0."""
    cfg = resolve_config(config)
    clamped = positive_task_value(task_value, cfg)
    if clamped == 0:
        return 0.0

    score = sanitize_attribute(attribute)
    attribute_multiplier = 1 + score / cfg.reward_attribute_divisor
    reward = clamped * base_multiplier * attribute_multiplier

    if is_critical:
        crit_score = score if critical_attribute is None else critical_attribute
        reward *= critical_multiplier(crit_score, cfg)

    return reward


def experience(task_value: Any, intelligence: Any, is_critical: bool = False,
               critical_attribute: Any = None,
               config: Optional[BalanceConfig] = None) -> float:
    cfg = resolve_config(config)
    reward = raw_reward(task_value, intelligence, cfg.experience_base_multiplier,
                        is_critical, critical_attribute, cfg)
    return round_to(reward, cfg.reward_precision)


def gold(task_value: Any, perception: Any, is_critical: bool = False,
         critical_attribute: Any = None,
         config: Optional[BalanceConfig] = None) -> float:
    cfg = resolve_config(config)
    reward = raw_reward(task_value, perception, cfg.gold_base_multiplier,
                        is_critical, critical_attribute, cfg)
    return round_to(reward, cfg.reward_precision)


# ============================================================
# STRATEGIES
# ============================================================

class RewardStrategy(ABC):
    """
    Reward capability over task and attribute records.

    experience_attribute / gold_attribute pick which score drives each
    reward. critical_attribute (None = same as the reward attribute) picks
    the score behind the critical multiplier.
    """

    name: str = "abstract"

    def __init__(self, config: Optional[BalanceConfig] = None,
                 experience_attribute: AttributeKey = "int",
                 gold_attribute: AttributeKey = "per",
                 critical_attribute: Optional[AttributeKey] = None,
                 attack_attribute: AttributeKey = "str") -> None:
        self.config = resolve_config(config)
        self.experience_attribute = experience_attribute
        self.gold_attribute = gold_attribute
        self.critical_attribute = critical_attribute
        self.attack_attribute = attack_attribute

    def _critical_score(self, attributes: AttributeSnapshot) -> Optional[float]:
        if self.critical_attribute is None:
            return None
        return attributes.score(self.critical_attribute)

    def _scaled_reward(self, task: TaskInput, attributes: AttributeSnapshot,
                       attribute: AttributeKey, base_multiplier: float,
                       is_critical: bool) -> float:
        reward = raw_reward(task.value, attributes.score(attribute), base_multiplier,
                            is_critical, self._critical_score(attributes), self.config)
        return round_to(reward * self.reward_scale(task), self.config.reward_precision)

    @abstractmethod
    def reward_scale(self, task: TaskInput) -> float:
        """Multiplier applied to both rewards before the final rounding."""

    @abstractmethod
    def damage_scale(self, task: TaskInput) -> float:
        """Multiplier applied to boss damage before defense mitigation."""

    def experience(self, task: TaskInput, attributes: AttributeSnapshot,
                   is_critical: bool = False) -> float:
        return self._scaled_reward(task, attributes, self.experience_attribute,
                                   self.config.experience_base_multiplier, is_critical)

    def gold(self, task: TaskInput, attributes: AttributeSnapshot,
             is_critical: bool = False) -> float:
        return self._scaled_reward(task, attributes, self.gold_attribute,
                                   self.config.gold_base_multiplier, is_critical)

    def reward(self, task: TaskInput, attributes: AttributeSnapshot,
               is_critical: bool = False) -> RewardResult:
        return RewardResult(
            gold=self.gold(task, attributes, is_critical),
            experience=self.experience(task, attributes, is_critical),
        )

    def boss_damage(self, task: TaskInput, attributes: AttributeSnapshot,
                    monster: MonsterStats) -> float:
        damage = raw_boss_damage(task.value, attributes.score(self.attack_attribute),
                                 monster.defense, self.damage_scale(task), self.config)
        return round_to(damage, self.config.damage_precision)


class SimpleAttributeRewards(RewardStrategy):
    """One attribute per reward. Priority and streak are ignored."""

    name = "simple"

    def reward_scale(self, task: TaskInput) -> float:
        return 1.0

    def damage_scale(self, task: TaskInput) -> float:
        return 1.0


class TaskPriorityWeightedRewards(RewardStrategy):
    """
    Rewards weighted by task priority and, for habits and dailies, by streak.

    priority weight  task.priority if it is a configured weight, else default
    streak bonus     1 + min(streak, cap) / divisor   (habit, daily only)
    boss damage      scaled by priority weight only
    """

    name = "weighted"

    STREAK_TYPES = ("habit", "daily")

    def priority_weight(self, task: TaskInput) -> float:
        priority = to_finite(task.priority)
        if priority in self.config.priority_weights:
            return priority
        return self.config.default_priority

    def streak_bonus(self, task: TaskInput) -> float:
        if task.type not in self.STREAK_TYPES:
            return 1.0
        streak = min(task.streak, self.config.streak_bonus_cap)
        return 1 + streak / self.config.streak_bonus_divisor

    def reward_scale(self, task: TaskInput) -> float:
        return self.priority_weight(task) * self.streak_bonus(task)

    def damage_scale(self, task: TaskInput) -> float:
        return self.priority_weight(task)


REWARD_STRATEGIES: Dict[str, Type[RewardStrategy]] = {
    SimpleAttributeRewards.name: SimpleAttributeRewards,
    TaskPriorityWeightedRewards.name: TaskPriorityWeightedRewards,
}


def get_reward_strategy(name: str, config: Optional[BalanceConfig] = None,
                        **options: Any) -> RewardStrategy:
    """Build a strategy by registry name. Unknown names raise KeyError."""
    if name not in REWARD_STRATEGIES:
        raise KeyError(f"Unknown reward strategy: {name!r} (known: {sorted(REWARD_STRATEGIES)})")
    return REWARD_STRATEGIES[name](config=config, **options)
