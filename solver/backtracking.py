"""Backtracking kernels: randomized fill for generation, ascending solve, and a capped solution counter.

`fill_grid`, `solve_grid` and `count_solutions` work on their grid argument in
place. `solve` and `has_unique_solution` clone first and leave the caller's
grid alone.
"""

from __future__ import annotations

import random
from typing import Optional

from types_sudoku import Grid

from .config import SOLUTION_COUNT_CAP
from .solver_core import DIGITS, clone_grid, find_empty_cell, is_valid_placement
from .validator import is_valid_grid


def shuffle_array(items, rng: Optional[random.Random] = None) -> list:
    """Fisher-Yates shuffle into a new list; the input is left untouched."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def fill_grid(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """Complete `grid` in place, trying digits in a fresh random order at every cell."""
    rng = rng or random.Random()
    cell = find_empty_cell(grid)
    if cell is None:
        return True

    row, col = cell
    for num in shuffle_array(DIGITS, rng):
        if is_valid_placement(grid, row, col, num):
            grid[row][col] = num
            if fill_grid(grid, rng):
                return True
            grid[row][col] = 0
    return False


def solve_grid(grid: Grid) -> bool:
    """Complete `grid` in place trying 1..9 in ascending order. Deterministic."""
    cell = find_empty_cell(grid)
    if cell is None:
        return True

    row, col = cell
    for num in DIGITS:
        if is_valid_placement(grid, row, col, num):
            grid[row][col] = num
            if solve_grid(grid):
                return True
            grid[row][col] = 0
    return False


def count_solutions(grid: Grid, cap: int = SOLUTION_COUNT_CAP) -> int:
    """Number of completions of `grid`, saturating at `cap`.

    Every speculative placement is undone, so `grid` is unchanged on return.
    """
    count = [0]

    def explore() -> None:
        cell = find_empty_cell(grid)
        if cell is None:
            count[0] += 1
            return
        row, col = cell
        for num in DIGITS:
            if is_valid_placement(grid, row, col, num):
                grid[row][col] = num
                explore()
                grid[row][col] = 0
                if count[0] >= cap:
                    return

    explore()
    return min(count[0], cap)


def has_unique_solution(puzzle: Grid, cap: int = SOLUTION_COUNT_CAP) -> bool:
    # Conflicting givens would let the counter "complete" an illegal grid.
    if not is_valid_grid(puzzle, require_complete=False):
        return False
    return count_solutions(clone_grid(puzzle), cap) == 1


def solve(puzzle: Grid) -> Grid | None:
    """Solved copy of `puzzle`, or None if it is malformed or has no solution."""
    if not is_valid_grid(puzzle, require_complete=False):
        return None
    grid = clone_grid(puzzle)
    if solve_grid(grid):
        return grid
    return None
