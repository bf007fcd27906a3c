"""Grid legality checks: per-house validation, whole-grid validation, and conflict reports for a board in progress."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List

from types_sudoku import Grid

from .solver_core import BOX, SIZE, box_index, rc_to_key, unit_cells_box, unit_cells_col, unit_cells_row


def _valid_values(vals) -> bool:
    seen = set()
    for v in vals:
        if v == 0:
            continue
        if not isinstance(v, int) or isinstance(v, bool) or not 1 <= v <= SIZE:
            return False
        if v in seen:
            return False
        seen.add(v)
    return True


def validate_row(grid: Grid, row: int) -> bool:
    return _valid_values(grid[row])


def validate_column(grid: Grid, col: int) -> bool:
    return _valid_values([grid[r][col] for r in range(SIZE)])


def validate_subgrid(grid: Grid, start_row: int, start_col: int) -> bool:
    """Check the 3x3 box whose top-left cell is (start_row, start_col)."""
    return _valid_values(
        [grid[r][c] for r in range(start_row, start_row + BOX) for c in range(start_col, start_col + BOX)]
    )


def _has_shape(grid) -> bool:
    if not isinstance(grid, list) or len(grid) != SIZE:
        return False
    for row in grid:
        if not isinstance(row, list) or len(row) != SIZE:
            return False
        for v in row:
            if not isinstance(v, int) or isinstance(v, bool):
                return False
    return True


def is_valid_grid(grid, require_complete: bool = True) -> bool:
    """Single authority for "is this a legal Sudoku state".

    Checks the 9x9 shape, optionally that no cell is blank, and that every
    row, column and box holds distinct values in 1..9 (blanks skipped).
    Never raises; malformed input is simply not valid.
    """
    if not _has_shape(grid):
        return False
    if require_complete and any(0 in row for row in grid):
        return False
    for i in range(SIZE):
        if not validate_row(grid, i) or not validate_column(grid, i):
            return False
    for r0 in range(0, SIZE, BOX):
        for c0 in range(0, SIZE, BOX):
            if not validate_subgrid(grid, r0, c0):
                return False
    return True


def find_conflicts(grid: Grid) -> List[List[bool]]:
    """Flag every filled cell whose value repeats in its row, column or box."""
    conflicts = [[False] * SIZE for _ in range(SIZE)]
    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            if v == 0:
                continue
            for rr in range(SIZE):
                for cc in range(SIZE):
                    if (rr, cc) == (r, c) or grid[rr][cc] != v:
                        continue
                    if rr == r or cc == c or box_index(rr, cc) == box_index(r, c):
                        conflicts[r][c] = True
                        conflicts[rr][cc] = True
    return conflicts


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens that were overwritten and digits duplicated within a house."""
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})

    houses = (
        [(f"r{i + 1}", unit_cells_row(i)) for i in range(SIZE)]
        + [(f"c{i + 1}", unit_cells_col(i)) for i in range(SIZE)]
        + [(f"b{i + 1}", unit_cells_box(i)) for i in range(SIZE)]
    )
    for unit, cells in houses:
        counts = Counter(current[r][c] for r, c in cells if current[r][c] != 0)
        dups = sorted(v for v, n in counts.items() if n > 1)
        if dups:
            issues.append({"type": "duplicate", "unit": unit, "digits": dups,
                           "cells": [rc_to_key(r, c) for r, c in cells if current[r][c] in dups]})
    return {"ok": not issues, "issues": issues}
