"""Puzzle generation: a random complete solution, then box-balanced clue removal sized by difficulty."""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from types_sudoku import Grid, PuzzleResult

from .backtracking import fill_grid, has_unique_solution, shuffle_array
from .config import CLUE_RANGES, DEFAULT_DIFFICULTY, DEFAULT_MAX_ATTEMPTS, SOLUTION_COUNT_CAP, UNIQUE_DIFFICULTIES
from .logging_utils import get_logger
from .solver_core import SIZE, box_index, clone_grid, empty_grid
from .validator import is_valid_grid

logger = get_logger()


class GenerationExhausted(RuntimeError):
    """Raised when no valid grid was produced within the attempt budget."""

    def __init__(self, what: str, attempts: int) -> None:
        super().__init__(f"could not generate a valid {what} in {attempts} attempt(s)")
        self.what = what
        self.attempts = attempts


def clue_range(difficulty: str, clue_ranges: Optional[Dict[str, Dict[str, int]]] = None) -> Dict[str, int]:
    """Inclusive {min, max} clue count for `difficulty`; unknown names fall back to easy."""
    table = clue_ranges or CLUE_RANGES
    return table.get(difficulty) or table.get(DEFAULT_DIFFICULTY) or CLUE_RANGES[DEFAULT_DIFFICULTY]


def removal_order(rng: random.Random) -> List[tuple]:
    """All 81 positions, interleaved one per box per round so blanks spread evenly.

    Cells are shuffled within each box, and the box visiting order is shuffled
    once and kept for the whole pass.
    """
    boxes: List[List[tuple]] = [[] for _ in range(SIZE)]
    for r in range(SIZE):
        for c in range(SIZE):
            boxes[box_index(r, c)].append((r, c))
    boxes = [shuffle_array(box, rng) for box in boxes]

    box_order = shuffle_array(range(SIZE), rng)
    positions = []
    for i in range(SIZE):
        for b in box_order:
            if i < len(boxes[b]):
                positions.append(boxes[b][i])
    return positions


def generate_solution(max_attempts: int = DEFAULT_MAX_ATTEMPTS, rng: Optional[random.Random] = None) -> Grid:
    """A random, fully populated, valid grid."""
    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        grid = empty_grid()
        if fill_grid(grid, rng) and is_valid_grid(grid, require_complete=True):
            return grid
        logger.warning("generate_solution: attempt %d/%d produced an invalid grid", attempt, max_attempts)
    raise GenerationExhausted("solution", max_attempts)


def _carve(solution: Grid, difficulty: str, rng: random.Random, clue_ranges, cap: int) -> Grid:
    puzzle = clone_grid(solution)
    bounds = clue_range(difficulty, clue_ranges)
    target_clues = rng.randint(bounds["min"], bounds["max"])
    cells_to_remove = SIZE * SIZE - target_clues
    check_unique = difficulty in UNIQUE_DIFFICULTIES

    removed = 0
    rejected = 0
    for r, c in removal_order(rng):
        if removed >= cells_to_remove:
            break
        backup = puzzle[r][c]
        puzzle[r][c] = 0
        if check_unique and not has_unique_solution(puzzle, cap):
            puzzle[r][c] = backup
            rejected += 1
            continue
        removed += 1

    logger.debug(
        "carve: difficulty=%s target_clues=%d removed=%d rejected=%d",
        difficulty, target_clues, removed, rejected,
    )
    return puzzle


def generate_puzzle(
    difficulty: str = DEFAULT_DIFFICULTY,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
    clue_ranges: Optional[Dict[str, Dict[str, int]]] = None,
    solution_count_cap: int = SOLUTION_COUNT_CAP,
) -> PuzzleResult:
    """
    Build a {puzzle, solution} pair.

    Hard and superhard only accept a removal while the puzzle keeps a single
    solution, so they may end up with more clues than the nominal range when
    many removals are rejected. Easy and medium remove unconditionally.
    """
    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        solution = generate_solution(max_attempts, rng)
        puzzle = _carve(solution, difficulty, rng, clue_ranges, solution_count_cap)
        if is_valid_grid(puzzle, require_complete=False):
            clues = sum(1 for row in puzzle for v in row if v != 0)
            logger.info("generate_puzzle: difficulty=%s clues=%d attempt=%d", difficulty, clues, attempt)
            return {"puzzle": puzzle, "solution": solution}
        logger.warning("generate_puzzle: attempt %d/%d produced an invalid puzzle", attempt, max_attempts)
    raise GenerationExhausted("puzzle", max_attempts)
