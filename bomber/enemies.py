"""
Enemy patrol: walk straight until something is in the way, then turn around
"""
from bomber.config import ENEMY_POSITIONS
from bomber.entities import Enemy
from bomber.grid import Tile
from bomber.motion import BIAS, grid_round, try_move


def spawn_enemies(grid, positions=ENEMY_POSITIONS):
    """Create enemies at their start cells, clearing any breakable wall there"""
    enemies = []
    for x, y in positions:
        if not grid.in_bounds(x, y):
            raise ValueError(f"enemy start ({x}, {y}) is outside the {grid.width}x{grid.height} grid")
        if grid.cell_at(x, y) == Tile.DESTRUCTIBLE:
            grid.set_cell(x, y, Tile.EMPTY)
        enemies.append(Enemy(x, y))
    return enemies


def update_enemy(enemy, grid, dt):
    """Move one enemy for dt seconds; returns False if it bounced instead"""
    move = try_move(grid, enemy.x, enemy.y, enemy.dx, enemy.dy, enemy.speed * dt, BIAS['enemy'])
    if move.moved:
        enemy.x, enemy.y = move.x, move.y
        return True

    # Blocked - reverse and snap to the cell so drift does not build up against the wall
    if enemy.dx != 0:
        enemy.dx = -enemy.dx
        enemy.x = float(grid_round(enemy.x))
    if enemy.dy != 0:
        enemy.dy = -enemy.dy
        enemy.y = float(grid_round(enemy.y))
    return False


def update_enemies(enemies, grid, dt):
    for enemy in enemies:
        update_enemy(enemy, grid, dt)
