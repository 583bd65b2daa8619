"""
TaskBalance — taskbalance/character.py
Character snapshot: an owned, versioned value that applies TaskOutcome deltas.
==============================================================================
Version:     0.1
Stack:       Python 3.12 | Pydantic v2
Status:      Canonical.

Architecture notes
------------------
- CharacterState is frozen. Every mutator returns a NEW instance with
  version + 1; no-op calls return the same instance unchanged.
- The formula engine never sees this object. Callers resolve a
  TaskOutcome from an attribute snapshot, then apply it here.
- Serializes with model_dump_json() / model_validate_json() so an outer
  key-value store can persist it as an opaque document. A missing
  xp_to_next is recomputed from level and the stored curve on load.
- `curve` names the level curve the snapshot was created with. Level-ups
  always use it, starting from the stored xp_to_next.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taskbalance.constants import STARTING_HP, STARTING_LEVEL
from taskbalance.models import TaskOutcome
from taskbalance.normalizer import to_finite
from taskbalance.progression import DEFAULT_CURVE, LEVEL_CURVES, LevelCurve, apply_experience, get_level_curve
from taskbalance.rounding import round_to

logger = logging.getLogger(__name__)

EquipmentSlot = Literal["head", "body", "weapon", "offhand", "accessory"]
CurveName = Literal["quadratic", "exponential"]

STATE_PRECISION: int = 2


class CharacterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(default=STARTING_LEVEL, ge=1)
    xp: float = Field(default=0.0, ge=0.0)
    xp_to_next: int = Field(default=0, ge=1)
    hp: float = Field(default=STARTING_HP, ge=0.0)
    max_hp: float = Field(default=STARTING_HP, gt=0.0)
    coins: float = Field(default=0.0, ge=0.0)
    equipment: Dict[EquipmentSlot, str] = Field(default_factory=dict)
    version: int = Field(default=0, ge=0)
    curve: CurveName = DEFAULT_CURVE.name

    @model_validator(mode="before")
    @classmethod
    def _fill_xp_to_next(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("xp_to_next") is None:
            curve_name = data.get("curve", DEFAULT_CURVE.name)
            if curve_name in LEVEL_CURVES:
                data = dict(data)
                data["xp_to_next"] = get_level_curve(curve_name).xp_to_next(data.get("level", STARTING_LEVEL))
        return data

    @model_validator(mode="after")
    def _check_hp(self) -> "CharacterState":
        if self.hp > self.max_hp:
            raise ValueError("hp must not exceed max_hp")
        return self

    @classmethod
    def initial(cls, curve: Optional[LevelCurve] = None) -> "CharacterState":
        curve = curve or DEFAULT_CURVE
        return cls(level=STARTING_LEVEL, xp_to_next=curve.xp_to_next(STARTING_LEVEL), curve=curve.name)

    @property
    def level_curve(self) -> LevelCurve:
        return get_level_curve(self.curve)

    def _next(self, **update: Any) -> "CharacterState":
        return self.model_copy(update={**update, "version": self.version + 1})

    # --------------------------------------------------------
    # Progression & currency
    # --------------------------------------------------------

    def add_xp(self, amount: Any) -> "CharacterState":
        """Levels up against the stored xp_to_next, then this snapshot's curve."""
        amount = to_finite(amount)
        if amount <= 0:
            return self
        progress = apply_experience(self.level, self.xp, amount, self.level_curve,
                                    requirement=self.xp_to_next)
        if progress.level > self.level:
            logger.info("Level up: %d -> %d", self.level, progress.level)
        return self._next(level=progress.level, xp=progress.xp, xp_to_next=progress.xp_to_next)

    def add_coins(self, amount: Any) -> "CharacterState":
        """Signed. Negative amounts drain coins down to zero, never below."""
        coins = max(0.0, round_to(self.coins + to_finite(amount), STATE_PRECISION))
        if coins == self.coins:
            return self
        return self._next(coins=coins)

    def spend_coins(self, amount: Any) -> Tuple["CharacterState", bool]:
        """Returns (state, ok). Insufficient funds leave the state untouched."""
        amount = to_finite(amount)
        if amount <= 0:
            return self, True
        if self.coins < amount:
            return self, False
        return self._next(coins=round_to(self.coins - amount, STATE_PRECISION)), True

    # --------------------------------------------------------
    # Health
    # --------------------------------------------------------

    def take_damage(self, amount: Any) -> "CharacterState":
        amount = to_finite(amount)
        if amount <= 0:
            return self
        hp = max(0.0, round_to(self.hp - amount, STATE_PRECISION))
        if hp == self.hp:
            return self
        return self._next(hp=hp)

    def heal(self, amount: Any) -> "CharacterState":
        amount = to_finite(amount)
        if amount <= 0:
            return self
        hp = min(self.max_hp, round_to(self.hp + amount, STATE_PRECISION))
        if hp == self.hp:
            return self
        return self._next(hp=hp)

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    # --------------------------------------------------------
    # Equipment
    # --------------------------------------------------------

    def equip(self, slot: EquipmentSlot, item_id: str) -> "CharacterState":
        if self.equipment.get(slot) == item_id:
            return self
        return self._next(equipment={**self.equipment, slot: item_id})

    def unequip(self, slot: EquipmentSlot) -> "CharacterState":
        if slot not in self.equipment:
            return self
        updated = {k: v for k, v in self.equipment.items() if k != slot}
        return self._next(equipment=updated)

    # --------------------------------------------------------
    # Outcomes
    # --------------------------------------------------------

    def apply_outcome(self, outcome: TaskOutcome) -> "CharacterState":
        """Apply every delta in one step: a single version bump per outcome."""
        state = self.add_xp(outcome.experience).add_coins(outcome.gold).take_damage(outcome.damage_taken)
        if state is self:
            return self
        return state.model_copy(update={"version": self.version + 1})
