# tests/test_validator.py
from conftest import CLASSIC, SOLVED
from solver.validator import (
    find_conflicts, is_valid_grid, sanity_check, validate_column, validate_row, validate_subgrid,
)


def test_validate_row_duplicate(solved):
    assert validate_row(solved, 0)
    solved[0][8] = 5
    assert not validate_row(solved, 0)
    assert validate_row(solved, 1)


def test_validate_row_allows_blanks_and_rejects_out_of_range(solved):
    solved[0][1] = 0
    solved[0][3] = 0
    assert validate_row(solved, 0)
    solved[0][3] = 10
    assert not validate_row(solved, 0)


def test_validate_column_and_subgrid(solved):
    for i in range(9):
        assert validate_column(solved, i)
    for r0 in (0, 3, 6):
        for c0 in (0, 3, 6):
            assert validate_subgrid(solved, r0, c0)

    solved[1][0] = 5  # duplicates the 5 at (0, 0) in column 0 and box 0
    assert not validate_column(solved, 0)
    assert not validate_subgrid(solved, 0, 0)
    assert validate_subgrid(solved, 0, 3)


def test_is_valid_grid_complete_and_partial(solved):
    assert is_valid_grid(solved)
    assert is_valid_grid(solved, require_complete=True)
    assert not is_valid_grid(CLASSIC, require_complete=True)
    assert is_valid_grid(CLASSIC, require_complete=False)


def test_is_valid_grid_rejects_malformed_input():
    assert not is_valid_grid(None)
    assert not is_valid_grid([])
    assert not is_valid_grid([[1, 2, 3]])
    assert not is_valid_grid([row[:8] for row in SOLVED])
    assert not is_valid_grid("5" * 81)

    bad = [row[:] for row in SOLVED]
    bad[4][4] = "5"
    assert not is_valid_grid(bad)
    bad[4][4] = True
    assert not is_valid_grid(bad)
    bad[4][4] = -1
    assert not is_valid_grid(bad, require_complete=False)


def test_find_conflicts_flags_both_cells(classic):
    assert not any(any(row) for row in find_conflicts(classic))
    classic[0][2] = 5  # same row and box as the 5 at (0, 0)
    conflicts = find_conflicts(classic)
    assert conflicts[0][0] and conflicts[0][2]
    flagged = sum(v for row in conflicts for v in row)
    assert flagged == 2


def test_find_conflicts_column_and_box(classic):
    classic[8][0] = 8  # column 0 already has 8 at (3, 0)
    conflicts = find_conflicts(classic)
    assert conflicts[8][0] and conflicts[3][0]
    classic[8][0] = 0
    classic[2][0] = 3  # box 0 already has 3 at (0, 1)
    conflicts = find_conflicts(classic)
    assert conflicts[2][0] and conflicts[0][1]


def test_sanity_check_reports_overwrites_and_duplicates(classic):
    assert sanity_check(CLASSIC, classic) == {"ok": True, "issues": []}

    classic[0][0] = 1  # overwrite a given; 1 is not elsewhere in row 0 / col 0
    classic[0][2] = 3  # duplicates the 3 at r1c2 in row 1 and box 1
    report = sanity_check(CLASSIC, classic)
    assert not report["ok"]
    kinds = {(i["type"], i.get("unit")) for i in report["issues"]}
    assert ("given_overwritten", None) in kinds
    assert ("duplicate", "r1") in kinds
    assert ("duplicate", "b1") in kinds
    overwritten = next(i for i in report["issues"] if i["type"] == "given_overwritten")
    assert overwritten == {"type": "given_overwritten", "cell": "r1c1", "given": 5, "found": 1}
    row_dup = next(i for i in report["issues"] if i.get("unit") == "r1")
    assert row_dup["digits"] == [3]
    assert row_dup["cells"] == ["r1c2", "r1c3"]


def test_sanity_check_column_and_box_duplicates(classic):
    classic[2][0] = 5  # r3c1 is blank in the puzzle; 5 is already at r1c1
    report = sanity_check(CLASSIC, classic)
    assert [i["unit"] for i in report["issues"]] == ["c1", "b1"]
    for issue in report["issues"]:
        assert issue["digits"] == [5]
        assert issue["cells"] == ["r1c1", "r3c1"]
