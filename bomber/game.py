"""
Simulation state and the per-frame update.

One Simulation is one game: grid, player, enemies, bombs, score, lives and
the win/loss state all live here, and ``update(dt)`` advances everything by
one frame.
"""
import logging
from enum import Enum

from bomber.bombs import BombEngine
from bomber.config import GRID_WIDTH, GRID_HEIGHT, PLAYER_LIVES
from bomber.enemies import spawn_enemies, update_enemies
from bomber.entities import Player
from bomber.grid import Grid, Tile
from bomber.motion import BIAS, grid_round, try_move

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


MESSAGES = {
    GameState.WON: "YOU WIN!",
    GameState.LOST: "GAME OVER",
}


class Simulation:
    def __init__(self, width=GRID_WIDTH, height=GRID_HEIGHT):
        self.grid = Grid(width, height)
        self.player = Player()
        self.enemies = []
        self.bombs = BombEngine(self.grid, self.enemies, lambda: self.clock, on_score=self._on_score)
        self.state = GameState.PLAYING
        self.clock = 0.0  # milliseconds of simulated play
        self._status_listeners = []
        self.restart()

    # --- Status readout ---

    @property
    def score(self):
        return self.bombs.score

    @property
    def lives(self):
        return self.player.lives

    def status(self):
        return self.lives, self.score

    def add_status_listener(self, listener):
        """Call listener(lives, score) whenever either changes"""
        self._status_listeners.append(listener)
        listener(self.lives, self.score)

    def _notify_status(self):
        for listener in self._status_listeners:
            listener(self.lives, self.score)

    def _on_score(self, score):
        self._notify_status()

    def message(self):
        """Headline for the end-of-game overlay, None while playing"""
        return MESSAGES.get(self.state)

    # --- Lifecycle ---

    def restart(self):
        """Put the game back to its opening position"""
        self.state = GameState.PLAYING
        self.clock = 0.0
        self.bombs.clear()
        self.grid.reset()
        self.enemies[:] = spawn_enemies(self.grid)
        self.player.lives = PLAYER_LIVES
        self.player.respawn()
        logger.info("New game: %d enemies", len(self.enemies))
        self._notify_status()

    # --- Player actions ---

    def set_direction(self, dx, dy):
        self.player.dx = dx
        self.player.dy = dy

    def place_bomb(self):
        """Drop a bomb where the player stands (only while playing)"""
        if self.state is not GameState.PLAYING:
            return False
        return self.bombs.place_bomb(self.player.x, self.player.y)

    # --- Frame update ---

    def update(self, dt):
        """Advance the game by dt seconds"""
        if self.state is not GameState.PLAYING:
            return
        if not dt or dt < 0:
            dt = 0.0

        self.clock += dt * 1000

        self.update_player(dt)
        update_enemies(self.enemies, self.grid, dt)
        if self.bombs.tick(dt * 1000):
            logger.debug("%d breakable walls left", self.grid.count(Tile.DESTRUCTIBLE))
        self.check_collisions()

        if self.state is GameState.PLAYING and not self.enemies:
            self.state = GameState.WON
            logger.info("All enemies destroyed - game won with %d points", self.score)

        self.bombs.expire(self.clock)

    def update_player(self, dt):
        player = self.player
        move = try_move(self.grid, player.x, player.y, player.dx, player.dy,
                        player.speed * dt, BIAS['player'])
        if move.moved:
            player.x, player.y = move.x, move.y

    # --- Collisions and outcome ---

    def player_cell(self):
        return grid_round(self.player.x), grid_round(self.player.y)

    def check_collisions(self):
        """Kill the player if a blast or an enemy shares their cell; at most once per frame"""
        cell_x, cell_y = self.player_cell()

        hit = self.bombs.explosion_at(cell_x, cell_y) is not None
        if not hit:
            hit = any(grid_round(en.x) == cell_x and grid_round(en.y) == cell_y for en in self.enemies)

        if hit:
            self.handle_player_death()
        return hit

    def handle_player_death(self):
        if self.state is not GameState.PLAYING:
            return

        self.player.lives -= 1
        logger.info("Player hit - %d lives left", self.player.lives)

        if self.player.lives <= 0:
            self.player.lives = 0
            self.state = GameState.LOST
            logger.info("Game over with %d points", self.score)
        else:
            self.player.respawn()
        self._notify_status()
