import math

import pytest
from pydantic import ValidationError

from taskbalance.models import AttributeSnapshot, MonsterStats, TaskInput


def test_attribute_snapshot_sanitizes_scores():
    attrs = AttributeSnapshot(strength=-5, intelligence=math.nan, constitution=math.inf, perception=12)
    assert attrs.strength == 0
    assert attrs.intelligence == 0
    assert attrs.constitution == 0
    assert attrs.perception == 12

def test_attribute_lookup_by_short_key():
    attrs = AttributeSnapshot(strength=1, intelligence=2, constitution=3, perception=4)
    assert [attrs.score(k) for k in ("str", "int", "con", "per")] == [1, 2, 3, 4]

def test_monster_defense_sanitized():
    assert MonsterStats(defense=-30).defense == 0

def test_task_streak_and_priority_sanitized():
    task = TaskInput(value=3, streak=-4, priority=math.nan)
    assert task.streak == 0
    assert task.priority == 0

def test_task_type_is_checked():
    with pytest.raises(ValidationError):
        TaskInput(value=1, type="chore")

def test_records_are_frozen():
    task = TaskInput(value=1)
    with pytest.raises(ValidationError):
        task.value = 2
