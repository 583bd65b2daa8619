import pytest
from pydantic import ValidationError

from taskbalance import config as config_module
from taskbalance.config import (
    DEFAULT_CONFIG,
    BalanceConfig,
    clear_config_cache,
    load_balance_config,
)
from taskbalance.critical import critical_chance
from taskbalance.normalizer import clamp_task_value


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_config_cache()
    yield
    clear_config_cache()


def test_shipped_config_matches_defaults():
    assert load_balance_config() == DEFAULT_CONFIG

def test_missing_default_file_falls_back(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")
    assert load_balance_config() is DEFAULT_CONFIG

def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_balance_config(tmp_path / "absent.toml")

def test_override_from_toml(tmp_path):
    path = tmp_path / "balance.toml"
    path.write_text("[critical]\nmax_critical_chance = 0.5\n\n[task_value]\ntask_value_ceiling = 10.0\n")
    cfg = load_balance_config(path)
    assert cfg.max_critical_chance == 0.5
    assert critical_chance(1000, cfg) == 0.5
    assert clamp_task_value(15, cfg) == 10.0
    # untouched fields keep their defaults
    assert cfg.task_value_floor == DEFAULT_CONFIG.task_value_floor

def test_loaded_configs_are_cached(tmp_path):
    path = tmp_path / "balance.toml"
    path.write_text("drop_max_chance = 0.8\n")
    assert load_balance_config(path) is load_balance_config(path)

def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "balance.toml"
    path.write_text("crit_chanse = 0.5\n")
    with pytest.raises(ValidationError):
        load_balance_config(path)

def test_inverted_task_value_range_is_rejected():
    with pytest.raises(ValidationError):
        BalanceConfig(task_value_floor=10, task_value_ceiling=-10)

def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.max_critical_chance = 1.0
