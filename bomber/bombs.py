"""
Bombs, fuses and blast propagation
"""
import logging
import math

from bomber.config import (
    EXPLOSION_RANGE, EXPLOSION_DURATION, BOMB_FUSE_TIME, ENEMY_KILL_SCORE, WALL_DESTROY_SCORE,
)
from bomber.entities import Bomb, Explosion
from bomber.grid import Tile
from bomber.motion import grid_round

logger = logging.getLogger(__name__)

DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


class BombEngine:
    """Live bombs and blast cells for one game.

    The engine shares the grid and the enemy list with its owner; blasts
    mutate both. ``clock`` is a callable returning the simulation time in
    milliseconds and is used to stamp blast cells.
    """

    def __init__(self, grid, enemies, clock, on_score=None):
        self.grid = grid
        self.enemies = enemies
        self.clock = clock
        self.on_score = on_score
        self.bombs = []
        self.explosions = []
        self.score = 0

    def clear(self):
        """Drop every bomb and blast cell; pending fuses go with them"""
        self.bombs.clear()
        self.explosions.clear()
        self.score = 0

    def bomb_at(self, x, y):
        for bomb in self.bombs:
            if bomb.grid_x == x and bomb.grid_y == y:
                return bomb
        return None

    def explosion_at(self, x, y):
        for explosion in self.explosions:
            if explosion.grid_x == x and explosion.grid_y == y:
                return explosion
        return None

    def place_bomb(self, x, y, fuse=BOMB_FUSE_TIME):
        """Drop a bomb on the cell nearest to (x, y); False if one is already there"""
        grid_x = grid_round(x)
        grid_y = grid_round(y)

        if self.bomb_at(grid_x, grid_y) is not None:
            return False

        self.bombs.append(Bomb(grid_x, grid_y, fuse))
        logger.debug("Bomb placed at (%d, %d)", grid_x, grid_y)
        return True

    def tick(self, elapsed_ms):
        """Burn every fuse by elapsed_ms and detonate the ones that run out"""
        detonated = []
        for bomb in self.bombs[:]:  # detonate() removes from the list
            if bomb.burn(elapsed_ms):
                self.detonate(bomb)
                detonated.append(bomb)
        return detonated

    def detonate(self, bomb):
        """Blow up a bomb: origin plus a ray in each direction up to the blast range"""
        if bomb in self.bombs:
            self.bombs.remove(bomb)

        x, y = bomb.cell
        self.apply_explosion(x, y)
        for dx, dy in DIRECTIONS:
            for i in range(1, EXPLOSION_RANGE + 1):
                if not self.apply_explosion(x + dx * i, y + dy * i):
                    break

        logger.debug("Bomb at (%d, %d) exploded", x, y)

    def apply_explosion(self, x, y):
        """Blast one cell. Returns True if the ray may continue past it."""
        tile = self.grid.cell_at(x, y)
        if tile is None or tile == Tile.INDESTRUCTIBLE:
            return False

        self.explosions.append(Explosion(x, y, self.clock(), EXPLOSION_DURATION))

        for enemy in self.enemies[:]:
            if math.floor(enemy.x) == x and math.floor(enemy.y) == y:
                self.enemies.remove(enemy)
                logger.info("Enemy destroyed at (%d, %d)", x, y)
                self._add_score(ENEMY_KILL_SCORE)

        if tile == Tile.DESTRUCTIBLE:
            self.grid.clear(x, y)
            self._add_score(WALL_DESTROY_SCORE)
            return False
        return True

    def expire(self, current_time):
        """Remove blast cells older than their duration"""
        self.explosions[:] = [ex for ex in self.explosions if not ex.is_expired(current_time)]

    def _add_score(self, points):
        self.score += points
        if self.on_score is not None:
            self.on_score(self.score)
