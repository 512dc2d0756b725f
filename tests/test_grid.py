import pytest

from falling_blocks.game import LockOutOfBoundsError, OccupancyGrid


def fill_row(grid, y, skip=()):
    grid.lock([(x, y) for x in range(grid.width) if x not in skip])


def test_new_grid_is_empty():
    grid = OccupancyGrid(10, 20)
    assert grid.height == 24
    assert not grid.is_loss()
    assert grid.clear_full_rows() == 0
    assert not any(grid.is_occupied(x, y) for x in range(10) for y in range(20))


def test_clear_single_row_shifts_rows_above():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 5)
    grid.lock([(3, 6), (7, 10), (1, 2)])

    assert grid.clear_full_rows() == 1

    assert grid.is_occupied(1, 2)
    assert grid.is_occupied(3, 5)
    assert grid.is_occupied(7, 9)
    assert not grid.is_occupied(3, 6)
    assert not grid.is_occupied(7, 10)
    assert not grid.grid[grid.height - 1].any()
    assert int(grid.grid.astype(bool).sum()) == 3
    assert grid.clear_full_rows() == 0


def test_clear_two_adjacent_rows():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 3)
    fill_row(grid, 4)
    grid.lock([(2, 5), (8, 7)])

    assert grid.clear_full_rows() == 2

    assert grid.is_occupied(2, 3)
    assert grid.is_occupied(8, 5)
    assert int(grid.grid.astype(bool).sum()) == 2
    assert grid.clear_full_rows() == 0


def test_clear_separated_rows():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 0)
    fill_row(grid, 2)
    grid.lock([(4, 1), (6, 3)])

    assert grid.clear_full_rows() == 2

    assert grid.is_occupied(4, 0)
    assert grid.is_occupied(6, 1)
    assert int(grid.grid.astype(bool).sum()) == 2


def test_almost_full_row_stays():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 0, skip=(9,))
    assert grid.clear_full_rows() == 0
    assert grid.is_occupied(0, 0)


def test_rows_above_visible_field_are_not_cleared():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 21)
    assert grid.clear_full_rows() == 0
    assert grid.is_loss()


def test_lock_keeps_piece_kind():
    grid = OccupancyGrid(10, 20)
    grid.lock([(0, 0), (1, 0)], value=3)
    assert grid.grid[0, 0] == 3
    assert grid.visible_state()[19, 1] == 3


def test_lock_outside_grid_is_fatal_and_writes_nothing():
    grid = OccupancyGrid(10, 20)
    with pytest.raises(LockOutOfBoundsError):
        grid.lock([(0, 0), (10, 0)])
    with pytest.raises(LockOutOfBoundsError):
        grid.lock([(0, 0), (0, 24)])
    with pytest.raises(LockOutOfBoundsError):
        grid.lock([(0, -1)])
    assert not grid.grid.any()


def test_cells_above_visible_field_count_as_free_but_lose():
    grid = OccupancyGrid(10, 20)
    grid.lock([(4, 20)])
    assert not grid.is_occupied(4, 20)
    assert grid.is_loss()


def test_can_fit_bounds():
    grid = OccupancyGrid(10, 20)
    grid.lock([(5, 5)])
    assert grid.can_fit([(0, 0), (9, 19)])
    assert grid.can_fit([(3, 30)])
    assert not grid.can_fit([(-1, 0)])
    assert not grid.can_fit([(10, 0)])
    assert not grid.can_fit([(0, -1)])
    assert not grid.can_fit([(0, 0), (5, 5)])


def test_reset_empties_grid():
    grid = OccupancyGrid(10, 20)
    fill_row(grid, 22)
    grid.reset()
    assert not grid.is_loss()
