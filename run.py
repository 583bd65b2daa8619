"""
TaskBalance — run.py
Balance preview: prints what a range of task values pay out and cost.

Usage: python run.py [path/to/balance.toml] [attribute score]
"""

import logging
import sys
from pathlib import Path

# Ensure we can import taskbalance when run from a checkout
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from taskbalance.config import load_balance_config
from taskbalance.critical import critical_chance, critical_multiplier
from taskbalance.damage import boss_damage, tavern_damage
from taskbalance.drops import drop_rate
from taskbalance.progression import get_level_curve
from taskbalance.rewards import experience, gold

TASK_VALUES = (-47.27, -20.0, -5.0, 0.0, 1.0, 5.0, 10.0, 21.27)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = load_balance_config(Path(sys.argv[1])) if len(sys.argv) > 1 else load_balance_config()
    score = float(sys.argv[2]) if len(sys.argv) > 2 else 10.0

    print(f"Attribute score {score}: crit chance {critical_chance(score, config):.3f}, "
          f"crit multiplier {critical_multiplier(score, config):.2f}")
    print(f"{'value':>8} {'xp':>8} {'gold':>8} {'tavern':>8} {'boss':>8} {'drop':>6}")
    for value in TASK_VALUES:
        print(f"{value:>8.2f} "
              f"{experience(value, score, config=config):>8.2f} "
              f"{gold(value, score, config=config):>8.2f} "
              f"{tavern_damage(value, config):>8.2f} "
              f"{boss_damage(value, score, config=config):>8.2f} "
              f"{drop_rate(value, score, config):>6.3f}")

    print()
    curves = [get_level_curve(name, config) for name in ("quadratic", "exponential")]
    print(f"{'level':>6} " + " ".join(f"{curve.name:>12}" for curve in curves))
    for level in (1, 2, 5, 10, 25, 50):
        print(f"{level:>6} " + " ".join(f"{curve.xp_to_next(level):>12}" for curve in curves))


if __name__ == "__main__":
    main()
