from __future__ import annotations
from typing import Callable, Dict, List, Optional
from types_sudoku import CandidateGrid, GameState, Grid, Hint
"""Human-style hints over a live game snapshot: candidate calculation, naked and hidden singles with plain-language explanations, a reveal fallback, and entry checking for the controller."""


# sudoku_tools.py
# Techniques are tried in a fixed order and the first match wins:
#   Naked Single -> Hidden Single (Row) -> Hidden Single (Column) -> Hidden Single (Box)
# If none applies anywhere, the first blank cell is revealed ("Process of Elimination").

from .solver_core import (
    SIZE, box_index, box_origin, compute_candidate_grid, compute_candidates,
    unit_cells_box, unit_cells_col, unit_cells_row,
)
from .validator import find_conflicts


def _user_entries(state: GameState) -> Grid:
    entries = state.get("userEntries")
    if entries is None:
        entries = state.get("user_entries")
    if entries is None:
        return [[0] * SIZE for _ in range(SIZE)]
    # null entries in a saved state mean blank
    return [[v or 0 for v in row] for row in entries]


def build_current_grid(state: GameState) -> Grid:
    """Givens from the puzzle, the player's entries elsewhere, 0 for blanks."""
    entries = _user_entries(state)
    grid = []
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            if state["official"][r][c]:
                row.append(state["puzzle"][r][c])
            else:
                row.append(entries[r][c])
        grid.append(row)
    return grid


def calculate_candidates(grid: Grid) -> CandidateGrid:
    return compute_candidate_grid(grid)


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(current)}


def get_elimination_details(grid: Grid, row: int, col: int) -> Dict[str, set]:
    """Digits already present in the row, column and box of (row, col)."""
    r0, c0 = box_origin(box_index(row, col))
    return {
        "row": {v for v in grid[row] if v != 0},
        "col": {grid[r][col] for r in range(SIZE)} - {0},
        "box": {grid[r][c] for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)} - {0},
    }


def _listed(vals) -> str:
    return ", ".join(str(v) for v in sorted(vals))


def _used_lines(row: int, col: int, eliminated: Dict[str, set], verb: str) -> str:
    lines = ""
    if eliminated["row"]:
        lines += f"- Row {row + 1} {verb}: {_listed(eliminated['row'])}\n"
    if eliminated["col"]:
        lines += f"- Column {col + 1} {verb}: {_listed(eliminated['col'])}\n"
    if eliminated["box"]:
        lines += f"- The 3x3 box {verb}: {_listed(eliminated['box'])}\n"
    return lines


def build_naked_single_explanation(row: int, col: int, number: int, eliminated: Dict[str, set]) -> str:
    text = f"This cell at Row {row + 1}, Column {col + 1} can only be {number}.\n\n"
    text += "Why? Looking at this cell:\n"
    text += _used_lines(row, col, eliminated, "already has")
    text += f"\nAfter eliminating all these numbers, only {number} remains as a possibility."
    return text


def build_fallback_explanation(row: int, col: int, number: int, eliminated: Dict[str, set]) -> str:
    text = f"The answer for Row {row + 1}, Column {col + 1} is {number}.\n\n"
    text += "Hint: This requires more advanced techniques, but here's what we know:\n\n"
    text += _used_lines(row, col, eliminated, "has")
    text += "\nThe remaining numbers must be determined through chain logic or other advanced techniques."
    return text


def find_naked_single(grid: Grid, candidates: CandidateGrid, state: GameState) -> Optional[Hint]:
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] != 0 or len(candidates[r][c]) != 1:
                continue
            number = next(iter(candidates[r][c]))
            # Stale or corrupt snapshot; leave this cell to a later technique.
            if state["solution"][r][c] != number:
                continue
            return {
                "row": r,
                "col": c,
                "number": number,
                "technique": "Naked Single",
                "explanation": build_naked_single_explanation(r, c, number, get_elimination_details(grid, r, c)),
            }
    return None


def _hidden_single(
    grid: Grid,
    candidates: CandidateGrid,
    state: GameState,
    units: List[List[tuple]],
    technique: str,
    explain: Callable[[int, List[tuple], int, int, int, CandidateGrid], str],
) -> Optional[Hint]:
    for index, cells in enumerate(units):
        present = {grid[r][c] for r, c in cells}
        for num in range(1, SIZE + 1):
            if num in present:
                continue
            spots = [(r, c) for r, c in cells if num in candidates[r][c]]
            if len(spots) != 1:
                continue
            r, c = spots[0]
            if len(candidates[r][c]) == 1:
                continue
            if state["solution"][r][c] != num:
                continue
            return {
                "row": r,
                "col": c,
                "number": num,
                "technique": technique,
                "explanation": explain(index, cells, r, c, num, candidates),
            }
    return None


def _hidden_single_text(house: str, label: Callable[[int, int], str]):
    def explain(index, cells, row, col, number, candidates):
        name = house.format(n=index + 1)
        text = f"The number {number} must go in Row {row + 1}, Column {col + 1}.\n\n"
        text += f"Why? In {name}, the number {number} must appear somewhere.\n\n"
        text += f"Looking at each empty cell in {name}:\n"
        for r, c in cells:
            if not candidates[r][c]:
                continue
            if (r, c) == (row, col):
                text += f"- {label(r, c)}: {number} is possible\n"
            elif number not in candidates[r][c]:
                text += f"- {label(r, c)}: {number} is blocked\n"
        text += f"\nThis is the only cell in {name} where {number} can go."
        return text
    return explain


def find_hidden_single_in_row(grid: Grid, candidates: CandidateGrid, state: GameState) -> Optional[Hint]:
    return _hidden_single(
        grid, candidates, state, [unit_cells_row(r) for r in range(SIZE)], "Hidden Single (Row)",
        _hidden_single_text("Row {n}", lambda r, c: f"Column {c + 1}"),
    )


def find_hidden_single_in_column(grid: Grid, candidates: CandidateGrid, state: GameState) -> Optional[Hint]:
    return _hidden_single(
        grid, candidates, state, [unit_cells_col(c) for c in range(SIZE)], "Hidden Single (Column)",
        _hidden_single_text("Column {n}", lambda r, c: f"Row {r + 1}"),
    )


def find_hidden_single_in_box(grid: Grid, candidates: CandidateGrid, state: GameState) -> Optional[Hint]:
    return _hidden_single(
        grid, candidates, state, [unit_cells_box(b) for b in range(SIZE)], "Hidden Single (Box)",
        _hidden_single_text("box {n}", lambda r, c: f"Row {r + 1}, Col {c + 1}"),
    )


def find_fallback_hint(state: GameState) -> Optional[Hint]:
    """Reveal the first blank cell's answer when no supported technique applies."""
    entries = _user_entries(state)
    grid = build_current_grid(state)
    for r in range(SIZE):
        for c in range(SIZE):
            if state["official"][r][c] or entries[r][c] != 0:
                continue
            number = state["solution"][r][c]
            return {
                "row": r,
                "col": c,
                "number": number,
                "technique": "Process of Elimination",
                "explanation": build_fallback_explanation(r, c, number, get_elimination_details(grid, r, c)),
            }
    return None


TECHNIQUES = (
    find_naked_single,
    find_hidden_single_in_row,
    find_hidden_single_in_column,
    find_hidden_single_in_box,
)


def find_hint(state: GameState) -> Optional[Hint]:
    """Next logically justified placement, or None when nothing is left to fill."""
    grid = build_current_grid(state)
    candidates = calculate_candidates(grid)
    for technique in TECHNIQUES:
        hint = technique(grid, candidates, state)
        if hint:
            return hint
    return find_fallback_hint(state)


def check_entries(state: GameState) -> Dict:
    """Compare the player's entries with the solution.

    `results[r][c]` is None for givens and blanks, True/False for entries.
    """
    entries = _user_entries(state)
    results: List[List[Optional[bool]]] = []
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            if state["official"][r][c] or entries[r][c] == 0:
                row.append(None)
            else:
                row.append(entries[r][c] == state["solution"][r][c])
        results.append(row)
    all_correct = all(v is not False for row in results for v in row)
    return {"results": results, "all_correct": all_correct}


def is_complete(state: GameState) -> bool:
    """Every cell filled and no value repeated in any house."""
    grid = build_current_grid(state)
    if any(0 in row for row in grid):
        return False
    return not any(any(row) for row in find_conflicts(grid))
