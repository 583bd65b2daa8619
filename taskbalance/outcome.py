"""
TaskBalance — taskbalance/outcome.py
Task outcome resolver: one call from a scored task to the deltas it earns.
==========================================================================
Version:     0.1
Stack:       Python 3.12 | Pydantic v2
Status:      Canonical. Pure: returns a TaskOutcome, applies nothing.

  completed=True    rewards (experience, gold), drop chance and, with a
                    monster, boss damage. Non-positive values earn zero
                    rewards but still report the base drop chance.
  completed=False   tavern damage from the task value. No rewards.
"""

from __future__ import annotations

import logging
from typing import Optional

from taskbalance.damage import tavern_damage
from taskbalance.drops import drop_rate
from taskbalance.models import AttributeSnapshot, MonsterStats, TaskInput, TaskOutcome
from taskbalance.rewards import RewardStrategy, SimpleAttributeRewards

logger = logging.getLogger(__name__)


def resolve_task_outcome(task: TaskInput, attributes: AttributeSnapshot,
                         strategy: Optional[RewardStrategy] = None,
                         completed: bool = True,
                         is_critical: bool = False,
                         monster: Optional[MonsterStats] = None) -> TaskOutcome:
    strategy = strategy or SimpleAttributeRewards()
    cfg = strategy.config

    if not completed:
        outcome = TaskOutcome(damage_taken=tavern_damage(task.value, cfg))
        logger.debug("Missed %s task (value=%s): %s", task.type, task.value, outcome)
        return outcome

    rewards = strategy.reward(task, attributes, is_critical)
    outcome = TaskOutcome(
        experience=rewards.experience,
        gold=rewards.gold,
        boss_damage=strategy.boss_damage(task, attributes, monster) if monster is not None else 0.0,
        drop_chance=drop_rate(task.value, attributes.perception, cfg),
        is_critical=is_critical,
    )
    logger.debug("Completed %s task (value=%s, strategy=%s): %s",
                 task.type, task.value, strategy.name, outcome)
    return outcome
