"""
Core maze functions - fixed tile grid, cell/world conversion and obstacle layout
"""

import numpy as np

from entities.obstacle import Obstacle
from utils.constants import CELL_SIZE, WALL, FLOOR


# Reference layout: 25 x 17 cells (1 = wall, 0 = floor)
MAZE_ROWS = [
    [1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1],
    [1,0,0,0,1,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,0,0,0,0,1],
    [1,0,1,0,1,0,1,1,1,0,1,0,1,1,1,0,1,0,1,1,1,1,1,0,1],
    [1,0,1,0,0,0,0,0,1,0,0,0,1,0,0,0,0,0,1,0,0,0,0,0,1],
    [1,0,1,1,1,1,1,0,1,1,1,1,1,0,1,1,1,1,1,0,1,1,1,0,1],
    [1,0,0,0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,1],
    [1,1,1,0,1,1,1,1,1,0,1,0,1,1,1,0,1,0,1,1,1,0,1,1,1],
    [1,0,0,0,1,0,0,0,0,0,1,0,0,0,1,0,1,0,0,0,0,0,1,0,1],
    [1,0,1,1,1,0,1,1,1,1,1,1,1,0,1,0,1,1,1,1,1,0,1,0,1],
    [1,0,0,0,0,0,1,0,0,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,1],
    [1,1,1,1,1,0,1,0,1,1,1,1,1,1,1,1,1,1,1,0,1,1,1,1,1],
    [1,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,1],
    [1,0,1,1,1,1,1,1,1,0,1,1,1,1,1,1,1,0,1,1,1,1,1,0,1],
    [1,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,0,0,0,0,1],
    [1,0,1,0,1,1,1,1,1,1,1,0,1,1,1,0,1,1,1,1,1,1,1,0,1],
    [1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1],
    [1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1],
]

# Characters accepted when building a grid from strings
CHAR_TO_CELL = {
    '#': WALL,
    '1': WALL,
    '.': FLOOR,
    '0': FLOOR,
    ' ': FLOOR,
}


class MazeGrid:
    """
    Fixed tile maze stored as a (rows, cols) numpy array of WALL / FLOOR cells.
    The array is read-only once the grid is built.
    """
    def __init__(self, cells, cell_size=CELL_SIZE):
        raw = np.asarray(cells)
        if raw.ndim != 2 or raw.size == 0:
            raise ValueError(f"Maze grid must be a non-empty 2D matrix, got shape {raw.shape}")
        if not np.isin(raw, (WALL, FLOOR)).all():
            raise ValueError("Maze grid may only contain WALL (1) and FLOOR (0) cells")

        cells = raw.astype(np.uint8)
        cells.setflags(write=False)
        self.cells = cells
        self.cell_size = cell_size
        self.rows, self.cols = cells.shape

    @classmethod
    def from_rows(cls, rows, cell_size=CELL_SIZE):
        """
        Build a grid from a list of rows

        Args:
            rows: Sequence of rows, each either a list of 0/1 ints or a string
                  using '#' for walls and '.' for floor
            cell_size: World units per cell

        Returns:
            MazeGrid
        """
        if not rows:
            raise ValueError("Maze grid needs at least one row")

        parsed = []
        for row in rows:
            if isinstance(row, str):
                try:
                    parsed.append([CHAR_TO_CELL[ch] for ch in row])
                except KeyError as e:
                    raise ValueError(f"Unknown maze character {e.args[0]!r}") from None
            else:
                parsed.append(list(row))

        width = len(parsed[0])
        if any(len(row) != width for row in parsed):
            raise ValueError("Maze rows must all have the same length")

        return cls(parsed, cell_size)

    def in_bounds(self, col, row):
        """Check if cell coordinates are within grid bounds"""
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_wall(self, col, row):
        """Check if a cell is a wall (out of bounds counts as wall)"""
        if not self.in_bounds(col, row):
            return True
        return self.cells[row, col] == WALL

    def cell_center(self, col, row):
        """Convert cell coordinates to the world position of the cell center"""
        half = self.cell_size / 2
        return (col * self.cell_size + half, row * self.cell_size + half)

    def cell_at(self, x, y):
        """Convert a world position to the (col, row) of the containing cell"""
        return (int(x // self.cell_size), int(y // self.cell_size))

    def wall_cells(self):
        """(col, row) of every wall cell, row-major order"""
        return [(int(c), int(r)) for r, c in np.argwhere(self.cells == WALL)]

    def floor_cells(self):
        """(col, row) of every floor cell, row-major order"""
        return [(int(c), int(r)) for r, c in np.argwhere(self.cells == FLOOR)]

    def obstacle_positions(self):
        """World position of every wall cell, row-major order"""
        return [self.cell_center(c, r) for c, r in self.wall_cells()]

    def legal_positions(self):
        """World position of every floor cell (legal spawn points), row-major order"""
        return [self.cell_center(c, r) for c, r in self.floor_cells()]

    @property
    def world_size(self):
        """(width, height) of the grid in world units"""
        return (self.cols * self.cell_size, self.rows * self.cell_size)

    def __repr__(self):
        return f"MazeGrid(size={self.cols}x{self.rows}, cell={self.cell_size})"


def default_grid():
    """The fixed reference layout"""
    return MazeGrid(MAZE_ROWS)


def build_obstacles(grid):
    """Create one Obstacle per wall cell, row-major order"""
    return [Obstacle(x, y) for x, y in grid.obstacle_positions()]
