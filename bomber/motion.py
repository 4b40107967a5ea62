"""
Grid-constrained continuous movement shared by the player and enemies.

Entities keep fractional grid coordinates. A move is tested against a single
target cell, sampled with a per-kind bias so that the entity looks into the
cell it is entering rather than the one it is leaving.
"""
import math
from collections import namedtuple

# Sampling offsets added to the candidate coordinate on each axis
Bias = namedtuple("Bias", ["positive", "negative", "stationary"])

BIAS = {
    'player': Bias(positive=0.8, negative=0.2, stationary=0.5),
    'enemy': Bias(positive=1.0, negative=0.0, stationary=0.5),
}

Move = namedtuple("Move", ["x", "y", "moved"])


def grid_round(value):
    """Nearest cell index, halves rounded up"""
    return math.floor(value + 0.5)


def sample_offset(direction, bias):
    if direction > 0:
        return bias.positive
    if direction < 0:
        return bias.negative
    return bias.stationary


def target_cell(x, y, dx, dy, bias):
    """Cell a position at (x, y) heading (dx, dy) is checked against"""
    return (math.floor(x + sample_offset(dx, bias)),
            math.floor(y + sample_offset(dy, bias)))


def try_move(grid, x, y, dx, dy, distance, bias):
    """Advance (x, y) by distance along (dx, dy) if the target cell is floor.

    Returns a Move with the committed position; when blocked the original
    position comes back with moved=False. There is no sub-stepping, so a very
    large distance can skip over a wall.
    """
    if (dx == 0 and dy == 0) or distance <= 0:
        return Move(x, y, False)

    new_x = x + dx * distance
    new_y = y + dy * distance
    cell_x, cell_y = target_cell(new_x, new_y, dx, dy, bias)

    if grid.is_empty(cell_x, cell_y):
        return Move(new_x, new_y, True)
    return Move(x, y, False)
