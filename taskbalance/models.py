"""
TaskBalance — taskbalance/models.py
Value records crossing the engine boundary.
===========================================
Version:     0.1
Stack:       Python 3.12 | Pydantic v2
Status:      Canonical. All models are frozen; the engine never mutates input.

Sanitizing validators run in "before" mode so that a snapshot built from
raw persisted data (NaN, negative scores, strings) is already clean when a
formula reads it.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from taskbalance.normalizer import sanitize_attribute, to_finite

TaskType = Literal["habit", "daily", "todo", "reward"]
AttributeKey = Literal["str", "int", "con", "per"]

ATTRIBUTE_FIELDS: Dict[str, str] = {
    "str": "strength",
    "int": "intelligence",
    "con": "constitution",
    "per": "perception",
}


class TaskInput(BaseModel):
    """A completed or failed task as supplied by the task source."""
    model_config = ConfigDict(frozen=True)

    value: float = 0.0
    type: TaskType = "habit"
    priority: float = 1.0               # 0.1 | 1 | 1.5 | 2; others weigh as default
    attribute: AttributeKey = "str"
    streak: int = 0

    @field_validator("priority", mode="before")
    @classmethod
    def _finite_priority(cls, v: Any) -> float:
        return to_finite(v)

    @field_validator("streak", mode="before")
    @classmethod
    def _non_negative_streak(cls, v: Any) -> int:
        return max(0, int(to_finite(v)))


class AttributeSnapshot(BaseModel):
    """Resolved character attribute scores. Read-only to the engine."""
    model_config = ConfigDict(frozen=True)

    strength: float = 0.0
    intelligence: float = 0.0
    constitution: float = 0.0
    perception: float = 0.0

    @field_validator("strength", "intelligence", "constitution", "perception", mode="before")
    @classmethod
    def _sanitize(cls, v: Any) -> float:
        return sanitize_attribute(v)

    def score(self, key: AttributeKey) -> float:
        """Look up a score by its short key ("str", "int", "con", "per")."""
        return getattr(self, ATTRIBUTE_FIELDS[key])


class MonsterStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    defense: float = 0.0
    strength: float = 0.0

    @field_validator("defense", "strength", mode="before")
    @classmethod
    def _sanitize(cls, v: Any) -> float:
        return sanitize_attribute(v)


class RewardResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    gold: float = 0.0
    experience: float = 0.0


class TaskOutcome(BaseModel):
    """Deltas for the state owner to apply. Nothing here is applied yet."""
    model_config = ConfigDict(frozen=True)

    experience: float = 0.0
    gold: float = 0.0
    damage_taken: float = 0.0
    boss_damage: float = 0.0
    drop_chance: float = 0.0
    is_critical: bool = False
