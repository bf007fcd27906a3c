"""Command-line front end for the puzzle engine: generate, solve, validate, hint and check, each printing a JSON payload."""

# demo_cli.py
# Usage:
#   python -m apps.cli.demo_cli generate --difficulty hard --seed 123
#   python -m apps.cli.demo_cli solve --grid puzzle.txt
#   python -m apps.cli.demo_cli validate --grid board.json --partial
#   python -m apps.cli.demo_cli hint --state game.json
#   python -m apps.cli.demo_cli check --state game.json
#
# Grid files hold either a JSON 9x9 array or an 81-character string ('0' or '.' = blank).
# State files are JSON: {"puzzle", "solution", "userEntries"?, "official"?}.
# Exit codes: 0 ok, 1 negative result (unsolvable / invalid), 2 bad input.

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from solver.backtracking import has_unique_solution, solve
from solver.config import load_engine_config, merge_overrides
from solver.generator import GenerationExhausted, generate_puzzle
from solver.logging_utils import get_logger
from solver.solver_core import SIZE
from solver.sudoku_tools import check_entries, find_hint, is_complete
from solver.validator import is_valid_grid
from types_sudoku import GameState, Grid


def parse_grid_text(text: str) -> Grid:
    """Parse a JSON 9x9 array or an 81-character digit string."""
    text = text.strip()
    if text.startswith("["):
        grid = json.loads(text)
        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            raise ValueError("JSON grid must be a list of rows")
        return grid
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} cells, found {len(chars)}")
    grid = [[0] * SIZE for _ in range(SIZE)]
    for i, ch in enumerate(chars):
        if ch == ".":
            continue
        if not ch.isdigit():
            raise ValueError(f"unexpected character {ch!r} at cell {i + 1}")
        grid[i // SIZE][i % SIZE] = int(ch)
    return grid


def load_grid(path: str) -> Grid:
    return parse_grid_text(Path(path).read_text(encoding="utf-8"))


def load_state(path: str) -> GameState:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    for key in ("puzzle", "solution"):
        if key not in data:
            raise ValueError(f"state file is missing {key!r}")
        if not is_valid_grid(data[key], require_complete=(key == "solution")):
            raise ValueError(f"state {key!r} is not a valid grid")
    if "official" not in data:
        data["official"] = [[v != 0 for v in row] for row in data["puzzle"]]
    if "userEntries" not in data:
        data["userEntries"] = data.pop("user_entries", None) or [[0] * SIZE for _ in range(SIZE)]
    for key in ("official", "userEntries"):
        rows = data[key]
        if not isinstance(rows, list) or len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"state {key!r} must be 9x9")
    return data


def emit(payload) -> None:
    print(json.dumps(payload, indent=2))


def cmd_generate(args, cfg) -> int:
    rng = random.Random(cfg.seed)
    result = generate_puzzle(args.difficulty, cfg.max_attempts, rng, cfg.clue_ranges, cfg.solution_count_cap)
    clues = sum(1 for row in result["puzzle"] for v in row if v != 0)
    emit({**result, "difficulty": args.difficulty, "clues": clues})
    return 0


def cmd_solve(args, cfg) -> int:
    grid = load_grid(args.grid)
    solution = solve(grid)
    payload = {"solution": solution}
    if args.unique and solution is not None:
        payload["unique"] = has_unique_solution(grid, cfg.solution_count_cap)
    emit(payload)
    return 0 if solution is not None else 1


def cmd_validate(args, cfg) -> int:
    valid = is_valid_grid(load_grid(args.grid), require_complete=not args.partial)
    emit({"valid": valid})
    return 0 if valid else 1


def cmd_hint(args, cfg) -> int:
    emit({"hint": find_hint(load_state(args.state))})
    return 0


def cmd_check(args, cfg) -> int:
    state = load_state(args.state)
    report = check_entries(state)
    emit({**report, "complete": is_complete(state)})
    return 0 if report["all_correct"] else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Sudoku puzzle engine")
    ap.add_argument("--config", type=str, default=None, help="YAML engine config (defaults to configs/engine.yaml)")
    ap.add_argument("--log_level", type=str, default=None)
    sub = ap.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a puzzle/solution pair")
    g.add_argument("--difficulty", type=str, default="easy", choices=["easy", "medium", "hard", "superhard"])
    g.add_argument("--seed", type=int, default=None)
    g.add_argument("--max_attempts", type=int, default=None)
    g.set_defaults(func=cmd_generate)

    s = sub.add_parser("solve", help="Solve a puzzle")
    s.add_argument("--grid", required=True)
    s.add_argument("--unique", action="store_true", help="Also report whether the solution is unique")
    s.set_defaults(func=cmd_solve)

    v = sub.add_parser("validate", help="Validate a grid")
    v.add_argument("--grid", required=True)
    v.add_argument("--partial", action="store_true", help="Allow blank cells")
    v.set_defaults(func=cmd_validate)

    h = sub.add_parser("hint", help="Suggest the next move for a game state")
    h.add_argument("--state", required=True)
    h.set_defaults(func=cmd_hint)

    c = sub.add_parser("check", help="Check player entries against the solution")
    c.add_argument("--state", required=True)
    c.set_defaults(func=cmd_check)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_engine_config(args.config)
    except (OSError, ValueError) as e:
        print(f"[error] config: {e}", file=sys.stderr)
        return 2
    cfg = merge_overrides(
        cfg,
        log_level=args.log_level,
        seed=getattr(args, "seed", None),
        max_attempts=getattr(args, "max_attempts", None),
    )
    get_logger(cfg.log_level)

    try:
        return args.func(args, cfg)
    except (OSError, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    except GenerationExhausted as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
