# tests/test_bitsets.py
import pytest

from sudoku_trainer.bitsets import CellSet, HouseSet, ValueSet
from sudoku_trainer.errors import OutOfRangeError


def test_value_set_is_one_based(empty_grid):
    values = ValueSet.of(empty_grid, 1, 9)
    assert values.to_list() == [1, 9]
    assert values.cardinality() == 2
    assert values.first_set_bit() == 1
    assert values.last_set_bit() == 9
    with pytest.raises(OutOfRangeError):
        values.set(0)
    with pytest.raises(OutOfRangeError):
        values.set(10)
    # membership test never raises
    assert 0 not in values
    assert 42 not in values


def test_fully_set_and_unset_iteration(empty_grid):
    values = ValueSet.fully_set(empty_grid)
    assert values.to_list() == list(range(1, 10))
    assert list(values.all_unset_bits()) == []
    values.clear(4)
    values.clear(7)
    assert list(values.all_unset_bits()) == [4, 7]
    assert values.first_unset_bit() == 4
    assert values.next_unset_bit(5) == 7
    assert values.next_set_bit(7) == 8
    assert values.previous_set_bit(7) == 6
    assert list(values.all_set_bits(6)) == [6, 8, 9]


def test_empty_set_queries_return_minus_one(empty_grid):
    cells = CellSet.empty(empty_grid)
    assert not cells
    assert cells.first_set_bit() == -1
    assert cells.last_set_bit() == -1
    assert cells.previous_set_bit(40) == -1
    full = ValueSet.fully_set(empty_grid)
    assert full.first_unset_bit() == -1


def test_boolean_algebra_returns_new_sets(empty_grid):
    a = CellSet.of(empty_grid, 0, 1, 2)
    b = CellSet.of(empty_grid, 2, 3)
    assert (a & b).to_list() == [2]
    assert (a | b).to_list() == [0, 1, 2, 3]
    assert (a - b).to_list() == [0, 1]
    assert a.to_list() == [0, 1, 2]

    c = a.copy()
    c.and_not(b)
    assert c.to_list() == [0, 1]
    assert a.to_list() == [0, 1, 2]


def test_equality_and_hash_depend_on_type_and_bits(empty_grid):
    a = CellSet.of(empty_grid, 5, 80)
    b = CellSet.of(empty_grid, 80, 5)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert HouseSet(9, 0b11) != CellSet(9, 0b11)


def test_mixing_sizes_is_rejected(empty_grid):
    with pytest.raises(OutOfRangeError):
        CellSet.empty(empty_grid).or_(HouseSet.empty(empty_grid))


def test_cell_set_projections(empty_grid):
    # r1c1, r1c2, r2c3 -> one block, two rows, three columns
    cells = CellSet.of(empty_grid, 0, 1, 11)
    assert cells.to_row_set(empty_grid).to_list() == [0, 1]
    assert cells.to_column_set(empty_grid).to_list() == [0, 1, 2]
    assert cells.single_block(empty_grid) is empty_grid.get_block(0)
    assert cells.single_row(empty_grid) is None
    assert cells.single_column(empty_grid) is None

    line = CellSet.of(empty_grid, 0, 1)
    assert line.single_row(empty_grid) is empty_grid.get_row(0)
    assert [cell.name for cell in line.all_cells(empty_grid)] == ["r1c1", "r1c2"]


def test_repr_lists_members(empty_grid):
    assert repr(ValueSet.of(empty_grid, 2, 5)) == "{2, 5}"
