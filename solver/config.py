"""Engine settings: difficulty clue table, attempt budgets and YAML overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

# ==== Difficulty ===========================================================

# Inclusive clue-count range per difficulty. Easy keeps the most givens.
CLUE_RANGES: Dict[str, Dict[str, int]] = {
    "easy": {"min": 45, "max": 50},
    "medium": {"min": 28, "max": 32},
    "hard": {"min": 22, "max": 26},
    "superhard": {"min": 17, "max": 20},
}

DEFAULT_DIFFICULTY: str = "easy"

# Difficulties whose clue removal is gated on a unique solution.
UNIQUE_DIFFICULTIES: tuple = ("hard", "superhard")

# ==== Search ===============================================================

# Regeneration budget for generate_solution / generate_puzzle.
DEFAULT_MAX_ATTEMPTS: int = 10

# count_solutions stops once it has seen this many completions.
SOLUTION_COUNT_CAP: int = 2

# ==== Logging ==============================================================

LOG_LEVEL: str = "INFO"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "engine.yaml"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def defaults() -> DotDict:
    return DotDict(
        clue_ranges={k: dict(v) for k, v in CLUE_RANGES.items()},
        max_attempts=DEFAULT_MAX_ATTEMPTS,
        solution_count_cap=SOLUTION_COUNT_CAP,
        log_level=LOG_LEVEL,
        seed=None,
    )


def load_engine_config(path: str | Path | None = None) -> DotDict:
    """Defaults, then the YAML file (if it exists), merged key by key.

    `clue_ranges` is merged per difficulty so a file may override only one level.
    """
    cfg = defaults()
    p = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not p.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {p}")
        return cfg
    data = load_yaml(p)
    ranges = data.pop("clue_ranges", None) or {}
    for name, rng in ranges.items():
        lo, hi = int(rng["min"]), int(rng["max"])
        if not 0 <= lo <= hi <= 81:
            raise ValueError(f"clue range for {name!r} must satisfy 0 <= min <= max <= 81")
        cfg.clue_ranges[name] = {"min": lo, "max": hi}
    cfg = DotDict(merge_overrides(cfg, **data))
    # Uniqueness needs to tell one completion from two.
    if int(cfg.solution_count_cap) < 2:
        raise ValueError("solution_count_cap must be at least 2")
    return cfg
