# tests/test_solver_basics.py
import pytest

from sudoku_trainer.errors import GivenCellImmutableError
from sudoku_trainer.sudoku_tools import (
    apply_action,
    apply_move,
    compute_candidates_tool,
    key_to_rc,
    next_moves,
    sanity_check,
    solve_tool,
)

from conftest import EASY, EASY_SOLUTION, HARD


def rows(text):
    return [[int(ch) for ch in text[i:i + 9]] for i in range(0, 81, 9)]


# Simple grid with one obvious single at r1c1 = 5
GRID = [
    [0, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def test_naked_hidden_singles_basic():
    cand = compute_candidates_tool(GRID)["candidates"]
    assert cand["r1c1"] == [1, 2, 5]
    result = next_moves(GRID, cand, max_moves=3, techniques=["naked_single", "hidden_single"], chain=True)
    seq = result["moves"]
    assert len(seq) == 3
    assert [m["index"] for m in seq] == [1, 2, 3]
    for m in seq:
        assert m["type"] == "placement"
        assert "cell" in m and "digit" in m
        assert m["technique"] in ("naked_single", "hidden_single")
    # chained: every move is already applied to the snapshot
    snapshot = result["snapshot"]["current"]
    for m in seq:
        r, c = key_to_rc(m["cell"])
        assert snapshot[r - 1][c - 1] == m["digit"]
    assert GRID[0][0] == 0


def test_unchained_moves_leave_grid_alone():
    result = next_moves(GRID, max_moves=5, chain=False)
    assert len(result["moves"]) == 5
    assert result["snapshot"]["current"] == GRID


def test_next_moves_respects_candidate_restrictions():
    # pretend the player already reduced r1c1 to {5}
    result = next_moves(GRID, {"r1c1": [5]}, max_moves=1, techniques=["naked_single"])
    assert result["moves"][0]["cell"] == "r1c1"
    assert result["moves"][0]["digit"] == 5


def test_next_moves_stops_when_solved():
    almost = rows(EASY_SOLUTION[:-1] + "0")
    result = next_moves(almost, max_moves=5)
    assert len(result["moves"]) == 1
    assert result["moves"][0]["technique"] == "full_house"
    assert result["snapshot"]["candidates"] == {}


def test_sanity_check_reports_overwrites_and_duplicates():
    original = rows(EASY)
    current = rows(EASY)
    current[0][0] = 4   # given 5 overwritten
    current[0][2] = 3   # second 3 in r1 and b1
    report = sanity_check(original, current)
    assert not report["ok"]
    kinds = [issue["type"] for issue in report["issues"]]
    assert kinds.count("given_overwritten") == 1
    units = {issue["unit"] for issue in report["issues"] if issue["type"] == "duplicate"}
    assert {"r1", "b1"} <= units
    assert "r1c2 = r1c3 = 3" in report["conflicts"]
    assert sanity_check(original, rows(EASY)) == {"ok": True, "issues": [], "conflicts": []}


def test_apply_placement_and_elimination():
    placed = apply_action(GRID, None, {"type": "placement", "cell": "r1c1", "digit": 5})
    assert placed["current"][0][0] == 5
    assert "r1c1" not in placed["candidates"]

    move = {"type": "elimination", "eliminations": {"r1c3": [1, 2]}}
    reduced = apply_action(GRID, None, move)
    assert 1 not in reduced["candidates"]["r1c3"] and 2 not in reduced["candidates"]["r1c3"]

    by_digit = apply_move(GRID, {"type": "elimination", "digit": 4, "eliminate": ["r1c3"]})
    assert 4 not in by_digit["candidates"]["r1c3"]


def test_apply_move_on_a_given_cell():
    with pytest.raises(GivenCellImmutableError):
        apply_move(GRID, {"type": "placement", "cell": "r1c2", "digit": 1})
    with pytest.raises(ValueError):
        key_to_rc("row1col2")


def test_solve_tool_both_methods():
    hints = solve_tool(rows(EASY))
    assert hints["solved"] and hints["valid"]
    assert hints["state"] == "solved"
    assert hints["current"] == rows(EASY_SOLUTION)

    bf = solve_tool(rows(HARD), method="brute_force", forward=False)
    assert bf["solved"] and bf["stats"]["solved"]

    with pytest.raises(ValueError):
        solve_tool(rows(EASY), method="magic")
