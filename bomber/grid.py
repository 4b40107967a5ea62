"""
Tile map for the arena
"""
from enum import IntEnum

import numpy as np

from bomber.config import GRID_WIDTH, GRID_HEIGHT, PLAYER_SPAWN


class Tile(IntEnum):
    EMPTY = 0
    INDESTRUCTIBLE = 1
    DESTRUCTIBLE = 2


# Characters understood by Grid.from_rows
LAYOUT_CHARS = {
    '.': Tile.EMPTY,
    '#': Tile.INDESTRUCTIBLE,
    '+': Tile.DESTRUCTIBLE,
}


class Grid:
    """Fixed-size tile map stored as a (height, width) numpy array"""

    def __init__(self, width=GRID_WIDTH, height=GRID_HEIGHT):
        if width < 3 or height < 3:
            raise ValueError(f"grid must be at least 3x3, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), Tile.DESTRUCTIBLE, dtype=np.int8)
        self.reset()

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from strings: '#' solid, '+' breakable, '.' empty"""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls.__new__(cls)
        grid.width = width
        grid.height = height
        grid.cells = np.zeros((height, width), dtype=np.int8)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, char in enumerate(row):
                if char not in LAYOUT_CHARS:
                    raise ValueError(f"unknown layout character {char!r} at ({x}, {y})")
                grid.cells[y, x] = LAYOUT_CHARS[char]
        return grid

    def reset(self):
        """Regenerate the starting pattern in place"""
        self.cells.fill(Tile.DESTRUCTIBLE)

        # Outer perimeter
        self.cells[0, :] = Tile.INDESTRUCTIBLE
        self.cells[-1, :] = Tile.INDESTRUCTIBLE
        self.cells[:, 0] = Tile.INDESTRUCTIBLE
        self.cells[:, -1] = Tile.INDESTRUCTIBLE

        # Pillars on every even/even interior cell
        self.cells[2:-1:2, 2:-1:2] = Tile.INDESTRUCTIBLE

        # Starting pocket: spawn plus the cells right and below it
        spawn_x, spawn_y = PLAYER_SPAWN
        for x, y in [(spawn_x, spawn_y), (spawn_x + 1, spawn_y), (spawn_x, spawn_y + 1)]:
            if self.cell_at(x, y) == Tile.DESTRUCTIBLE:
                self.cells[y, x] = Tile.EMPTY

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x, y):
        """Tile at (x, y), or None when the cell is off the map"""
        if not self.in_bounds(x, y):
            return None
        return Tile(int(self.cells[y, x]))

    def is_empty(self, x, y):
        return self.cell_at(x, y) == Tile.EMPTY

    def set_cell(self, x, y, tile):
        if not self.in_bounds(x, y):
            raise ValueError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        self.cells[y, x] = Tile(tile)

    def clear(self, x, y):
        """Turn a breakable wall into floor; returns True if a wall was removed"""
        if self.cell_at(x, y) != Tile.DESTRUCTIBLE:
            return False
        self.cells[y, x] = Tile.EMPTY
        return True

    def count(self, tile):
        return int(np.count_nonzero(self.cells == tile))

    def __iter__(self):
        """Yield (x, y, tile) for every cell, row by row"""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, Tile(int(self.cells[y, x]))
