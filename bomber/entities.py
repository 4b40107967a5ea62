"""
Things that live on the grid: the player, enemies, bombs and blast cells
"""
from bomber.config import (
    PLAYER_SPAWN, PLAYER_SPEED, PLAYER_LIVES, ENEMY_SPEED, ENEMY_DIRECTION,
    BOMB_FUSE_TIME, EXPLOSION_DURATION,
)


class Player:
    def __init__(self, x=PLAYER_SPAWN[0], y=PLAYER_SPAWN[1], speed=PLAYER_SPEED, lives=PLAYER_LIVES):
        self.x = float(x)
        self.y = float(y)
        self.speed = speed
        self.lives = lives
        # Requested unit direction for the next frame
        self.dx = 0
        self.dy = 0

    def respawn(self):
        """Move back to the spawn point, keeping lives"""
        self.x, self.y = float(PLAYER_SPAWN[0]), float(PLAYER_SPAWN[1])
        self.dx = self.dy = 0

    def __repr__(self):
        return f"Player(x={self.x:.2f}, y={self.y:.2f}, lives={self.lives})"


class Enemy:
    def __init__(self, x, y, speed=ENEMY_SPEED, direction=ENEMY_DIRECTION):
        dx, dy = direction
        if abs(dx) + abs(dy) != 1 or dx * dy != 0:
            raise ValueError(f"enemy direction must be an axis unit vector, got {direction}")
        self.x = float(x)
        self.y = float(y)
        self.speed = speed
        self.dx = dx
        self.dy = dy

    def __repr__(self):
        return f"Enemy(x={self.x:.2f}, y={self.y:.2f}, dir=({self.dx}, {self.dy}))"


class Bomb:
    def __init__(self, grid_x, grid_y, fuse=BOMB_FUSE_TIME):
        self.grid_x = grid_x
        self.grid_y = grid_y
        self.fuse = fuse  # milliseconds left before detonation

    @property
    def cell(self):
        return (self.grid_x, self.grid_y)

    def burn(self, elapsed_ms):
        """Shorten the fuse; returns True once it has run out"""
        self.fuse -= elapsed_ms
        return self.fuse <= 0

    def __repr__(self):
        return f"Bomb({self.grid_x}, {self.grid_y}, fuse={self.fuse:.0f}ms)"


class Explosion:
    def __init__(self, grid_x, grid_y, created_at, duration=EXPLOSION_DURATION):
        self.grid_x = grid_x
        self.grid_y = grid_y
        self.created_at = created_at  # simulation clock, milliseconds
        self.duration = duration

    @property
    def cell(self):
        return (self.grid_x, self.grid_y)

    def is_expired(self, current_time):
        return current_time - self.created_at > self.duration

    def __repr__(self):
        return f"Explosion({self.grid_x}, {self.grid_y}, t={self.created_at:.0f})"
