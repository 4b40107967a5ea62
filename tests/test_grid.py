"""
Tests for the tile map and its starting pattern
"""
import numpy as np
import pytest

from bomber.grid import Grid, Tile


def test_border_is_indestructible():
    """Every border cell starts as a solid wall"""
    grid = Grid()
    for x in range(grid.width):
        assert grid.cell_at(x, 0) == Tile.INDESTRUCTIBLE
        assert grid.cell_at(x, grid.height - 1) == Tile.INDESTRUCTIBLE
    for y in range(grid.height):
        assert grid.cell_at(0, y) == Tile.INDESTRUCTIBLE
        assert grid.cell_at(grid.width - 1, y) == Tile.INDESTRUCTIBLE


def test_even_even_pillars():
    grid = Grid()
    for x in range(2, grid.width - 1, 2):
        for y in range(2, grid.height - 1, 2):
            assert grid.cell_at(x, y) == Tile.INDESTRUCTIBLE


def test_starting_pocket_is_carved():
    """Spawn cell and its right/bottom neighbours are walkable"""
    grid = Grid()
    assert grid.cell_at(1, 1) == Tile.EMPTY
    assert grid.cell_at(2, 1) == Tile.EMPTY
    assert grid.cell_at(1, 2) == Tile.EMPTY
    assert grid.cell_at(3, 1) == Tile.DESTRUCTIBLE
    assert grid.cell_at(1, 3) == Tile.DESTRUCTIBLE


def test_tile_counts():
    grid = Grid()
    # 52 border cells + 30 pillars on a 15x13 map
    assert grid.count(Tile.INDESTRUCTIBLE) == 82
    assert grid.count(Tile.EMPTY) == 3
    assert grid.count(Tile.DESTRUCTIBLE) == 15 * 13 - 85


def test_out_of_bounds_is_none():
    grid = Grid()
    assert grid.cell_at(-1, 0) is None
    assert grid.cell_at(0, -1) is None
    assert grid.cell_at(grid.width, 0) is None
    assert grid.cell_at(0, grid.height) is None
    assert not grid.is_empty(-1, 1)


def test_clear_only_removes_breakable_walls():
    grid = Grid()
    assert grid.clear(3, 1) is True
    assert grid.cell_at(3, 1) == Tile.EMPTY
    # Already floor
    assert grid.clear(3, 1) is False
    # Solid walls never change
    assert grid.clear(0, 0) is False
    assert grid.clear(2, 2) is False
    assert grid.cell_at(2, 2) == Tile.INDESTRUCTIBLE
    assert grid.clear(-5, 3) is False


def test_reset_restores_pattern():
    grid = Grid()
    fresh = Grid()
    grid.clear(3, 1)
    grid.clear(5, 3)
    grid.reset()
    assert np.array_equal(grid.cells, fresh.cells)


def test_from_rows():
    grid = Grid.from_rows([
        "#####",
        "#.+.#",
        "#####",
    ])
    assert (grid.width, grid.height) == (5, 3)
    assert grid.cell_at(1, 1) == Tile.EMPTY
    assert grid.cell_at(2, 1) == Tile.DESTRUCTIBLE
    assert grid.cell_at(4, 1) == Tile.INDESTRUCTIBLE


def test_from_rows_rejects_bad_layouts():
    with pytest.raises(ValueError):
        Grid.from_rows(["#x#"])
    with pytest.raises(ValueError):
        Grid.from_rows(["###", "##"])


def test_too_small_grid():
    with pytest.raises(ValueError):
        Grid(2, 5)


def test_iteration_covers_every_cell():
    grid = Grid()
    cells = list(grid)
    assert len(cells) == grid.width * grid.height
    assert cells[0] == (0, 0, Tile.INDESTRUCTIBLE)
