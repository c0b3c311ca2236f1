"""Fixed maze layout and its conversion to world space."""

from __future__ import annotations

import numpy as np
import pytest

from maze.maze_core import MAZE_ROWS, MazeGrid, build_obstacles
from utils.constants import CELL_SIZE, OBSTACLE_RADIUS


def test_reference_layout_dimensions(grid: MazeGrid) -> None:
    assert (grid.cols, grid.rows) == (25, 17)
    assert grid.cell_size == CELL_SIZE
    assert grid.world_size == (1000, 680)


def test_every_cell_is_either_obstacle_or_spawn(grid: MazeGrid) -> None:
    walls = sum(row.count(1) for row in MAZE_ROWS)
    floors = sum(row.count(0) for row in MAZE_ROWS)

    assert len(grid.obstacle_positions()) == walls
    assert len(grid.legal_positions()) == floors
    assert walls + floors == 25 * 17


def test_positions_are_cell_centers_in_row_major_order(grid: MazeGrid) -> None:
    obstacles = grid.obstacle_positions()
    # Top row is solid wall.
    assert obstacles[:3] == [(20.0, 20.0), (60.0, 20.0), (100.0, 20.0)]

    legal = grid.legal_positions()
    assert legal[0] == (60.0, 60.0)
    keys = [(y, x) for x, y in legal]
    assert keys == sorted(keys)


def test_cell_center_round_trips_through_cell_at(grid: MazeGrid) -> None:
    for col, row in grid.floor_cells():
        x, y = grid.cell_center(col, row)
        assert x == col * CELL_SIZE + CELL_SIZE / 2
        assert y == row * CELL_SIZE + CELL_SIZE / 2
        assert grid.cell_at(x, y) == (col, row)
        assert not grid.is_wall(col, row)


def test_out_of_bounds_counts_as_wall(grid: MazeGrid) -> None:
    assert grid.is_wall(-1, 0)
    assert grid.is_wall(25, 3)


def test_grid_is_read_only(grid: MazeGrid) -> None:
    with pytest.raises(ValueError):
        grid.cells[1, 1] = 1


def test_from_rows_accepts_strings() -> None:
    grid = MazeGrid.from_rows(["####", "#..#", "####"])
    assert (grid.cols, grid.rows) == (4, 3)
    assert grid.floor_cells() == [(1, 1), (2, 1)]
    assert np.count_nonzero(grid.cells) == 10


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["###", "##"],
        ["#x#"],
        [[0, 2, 1]],
        [[1, -1], [1, 1]],
        [[1, 256], [1, 1]],
    ],
)
def test_malformed_grids_are_rejected(rows) -> None:
    with pytest.raises(ValueError):
        MazeGrid.from_rows(rows)


def test_build_obstacles_matches_wall_cells(grid: MazeGrid) -> None:
    obstacles = build_obstacles(grid)
    assert [(o.x, o.y) for o in obstacles] == grid.obstacle_positions()
    assert all(o.radius == OBSTACLE_RADIUS for o in obstacles)


def test_constructor_rejects_cells_outside_byte_range() -> None:
    with pytest.raises(ValueError):
        MazeGrid([[1, -1], [1, 1]])
