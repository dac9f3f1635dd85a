# tests/test_io.py
import io

import numpy as np
import pytest

from sudoku_trainer.predefined import PredefinedType
from sudoku_trainer.sudoku_io import (
    apply_deleted_candidates,
    candidates_dict,
    format_grid,
    grid_from_array,
    grid_from_rows,
    grid_to_array,
    grid_to_rows,
    grid_to_string,
    load_grid,
    print_grid,
)

from conftest import EASY


def test_load_skips_separators_and_accepts_blanks():
    text = "\n".join(EASY[i:i + 9] for i in range(0, 81, 9)).replace("0", ".")
    grid = load_grid("puzzle:\n" + text)
    assert grid_to_string(grid) == EASY


def test_plus_marks_placed_values():
    grid = load_grid("+5" + "3" + "0" * 79)
    assert grid.cell_at(1, 1).value == 5
    assert not grid.cell_at(1, 1).is_given
    assert grid.cell_at(1, 2).is_given
    grid.cell_at(1, 1).set_value(0)
    assert grid.cell_at(1, 1).value == 0


def test_short_input_raises():
    with pytest.raises(ValueError, match="exhausted"):
        load_grid("123")


def test_small_grid_type():
    grid = load_grid("1-2-" "----" "----" "---4", predefined=PredefinedType.CLASSIC_4X4)
    assert grid.grid_size == 4
    assert grid_to_rows(grid) == [[1, 0, 2, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]]
    assert grid.cell_at(1, 2).possible_values.to_list() == [3, 4]


def test_deleted_candidates(empty_grid):
    apply_deleted_candidates(empty_grid, "512 513\n912")
    assert empty_grid.cell_at(1, 2).possible_values.to_list() == [1, 2, 3, 4, 6, 7, 8]
    assert 5 not in empty_grid.cell_at(1, 3).possible_values
    assert empty_grid.state_valid
    with pytest.raises(ValueError):
        apply_deleted_candidates(empty_grid, ["5x2"])


def test_rows_and_candidates(easy_grid):
    rows = grid_to_rows(easy_grid)
    assert rows[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    candidates = candidates_dict(easy_grid)
    assert len(candidates) == 51
    assert candidates["r5c5"] == [5]
    assert "r1c1" not in candidates

    again = grid_from_rows(rows)
    assert grid_to_string(again) == EASY
    assert again.cell_at(1, 1).is_given
    assert not grid_from_rows(rows, givens=False).cell_at(1, 1).is_given


def test_rows_must_be_square():
    with pytest.raises(ValueError):
        grid_from_rows([[1, 2, 3], [0, 0, 0]])


def test_numpy_round_trip(easy_grid):
    array = grid_to_array(easy_grid)
    assert array.dtype == np.int8
    assert array.shape == (9, 9)
    assert array[4, 0] == 4
    assert grid_to_string(grid_from_array(array)) == EASY
    with pytest.raises(ValueError):
        grid_from_array(np.zeros((3, 4)))


def test_formats(easy_grid):
    assert format_grid(easy_grid, "line") == EASY
    assert format_grid(easy_grid, "rows").splitlines()[1] == "600195000"
    pretty = format_grid(easy_grid, "pretty").splitlines()
    assert len(pretty) == 11
    assert pretty[0] == "5 3 . | . 7 . | . . ."
    assert pretty[3] == "------+-------+------"
    with pytest.raises(ValueError):
        format_grid(easy_grid, "fancy")


def test_print_grid(easy_grid):
    out = io.StringIO()
    print_grid(easy_grid, "line", out)
    assert out.getvalue() == EASY + "\n"
