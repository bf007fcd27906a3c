"""Core Sudoku utilities used by the solver, generator and hint engine: index math, house values, placement checks and candidate computation."""

# solver_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Rows and columns are 0-based here; human-facing keys ('r1c1') are 1-based.

from __future__ import annotations

from types_sudoku import CandidateGrid, Candidates, Grid

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))

Cell = tuple[int, int]  # (row, col) 0-based


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def box_index(r: int, c: int) -> int:
    return (r // BOX) * BOX + c // BOX


def box_origin(b: int) -> Cell:
    return (BOX * (b // BOX), BOX * (b % BOX))


def row_values(grid: Grid, r: int) -> set:
    return set(grid[r]) - {0}


def col_values(grid: Grid, c: int) -> set:
    return {grid[i][c] for i in range(SIZE)} - {0}


def box_values(grid: Grid, r: int, c: int) -> set:
    r0 = BOX * (r // BOX)
    c0 = BOX * (c // BOX)
    vals = {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} - {0}
    return vals


def unit_cells_row(r: int) -> list[Cell]:
    return [(r, c) for c in range(SIZE)]


def unit_cells_col(c: int) -> list[Cell]:
    return [(r, c) for r in range(SIZE)]


def unit_cells_box(b: int) -> list[Cell]:
    r0, c0 = box_origin(b)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """True when `num` is not already used in the row, column or box of (row, col)."""
    if num in grid[row]:
        return False
    for r in range(SIZE):
        if grid[r][col] == num:
            return False
    r0 = BOX * (row // BOX)
    c0 = BOX * (col // BOX)
    for r in range(r0, r0 + BOX):
        for c in range(c0, c0 + BOX):
            if grid[r][c] == num:
                return False
    return True


def find_empty_cell(grid: Grid) -> Cell | None:
    """First blank cell in row-major order, or None when the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return (r, c)
    return None


def cell_candidates(grid: Grid, r: int, c: int) -> set[int]:
    used = row_values(grid, r) | col_values(grid, c) | box_values(grid, r, c)
    return set(DIGITS) - used


def compute_candidate_grid(grid: Grid) -> CandidateGrid:
    """One elimination pass over every blank cell. Filled cells get an empty set."""
    out: CandidateGrid = []
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            row.append(cell_candidates(grid, r, c) if grid[r][c] == 0 else set())
        out.append(row)
    return out


def compute_candidates(grid: Grid) -> Candidates:
    cand = {}
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                cand[rc_to_key(r, c)] = sorted(cell_candidates(grid, r, c))
    return cand
