"""
Drawing the game with pygame. Reads the simulation, never changes it.
"""
import logging

import pygame

from bomber.config import (
    GRID_WIDTH, GRID_HEIGHT, STATUS_BAR_HEIGHT, BACKGROUND, EMPTY_COLOR, INDESTRUCTIBLE_COLOR,
    DESTRUCTIBLE_COLOR, PLAYER_COLOR, BOMB_COLOR, EXPLOSION_COLOR, ENEMY_COLOR, TEXT_COLOR,
    OVERLAY_COLOR,
)
from bomber.grid import Tile

logger = logging.getLogger(__name__)

TILE_COLORS = {
    Tile.EMPTY: EMPTY_COLOR,
    Tile.INDESTRUCTIBLE: INDESTRUCTIBLE_COLOR,
    Tile.DESTRUCTIBLE: DESTRUCTIBLE_COLOR,
}

PLAYER_DRAW_SCALE = 0.8  # player square is 80% of a tile
BOMB_RADIUS_DIVISOR = 2.5


def status_text(lives, score):
    """Status bar line: one heart per life, then the score"""
    hearts = "♥" * lives if lives > 0 else "NONE"
    return f"LIVES: {hearts}  |  SCORE: {score}"


def compute_tile_size(width, height, status_height=STATUS_BAR_HEIGHT):
    """Largest whole tile size that fits the grid into a window of this size"""
    tile_w = width // GRID_WIDTH
    tile_h = (height - status_height) // GRID_HEIGHT
    return max(1, min(tile_w, tile_h))


class Renderer:
    def __init__(self, surface, tile_size):
        self.surface = surface
        self.tile_size = tile_size
        self.status = ""
        self._fonts = {}

    def resize(self, surface, tile_size):
        self.surface = surface
        self.tile_size = tile_size

    def set_status(self, lives, score):
        self.status = status_text(lives, score)

    def font(self, size):
        """Monospace font of the given pixel size, None if fonts are unavailable"""
        size = max(8, int(size))
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.SysFont("couriernew,courier,monospace", size)
            except pygame.error as e:
                logger.warning("Could not load font: %s", e)
                self._fonts[size] = None
        return self._fonts[size]

    # --- Board ---

    def cell_rect(self, x, y):
        return pygame.Rect(round(x * self.tile_size), round(y * self.tile_size) + STATUS_BAR_HEIGHT,
                           self.tile_size, self.tile_size)

    def draw_grid(self, grid):
        for x, y, tile in grid:
            pygame.draw.rect(self.surface, TILE_COLORS[tile], self.cell_rect(x, y))

    def draw_bombs(self, bombs):
        for bomb in bombs:
            center = self.cell_rect(bomb.grid_x, bomb.grid_y).center
            pygame.draw.circle(self.surface, BOMB_COLOR, center, int(self.tile_size / BOMB_RADIUS_DIVISOR))

    def draw_explosions(self, explosions):
        for explosion in explosions:
            pygame.draw.rect(self.surface, EXPLOSION_COLOR, self.cell_rect(explosion.grid_x, explosion.grid_y))

    def draw_enemies(self, enemies):
        for enemy in enemies:
            pygame.draw.rect(self.surface, ENEMY_COLOR, self.cell_rect(enemy.x, enemy.y))

    def draw_player(self, player):
        size = self.tile_size * PLAYER_DRAW_SCALE
        offset = (self.tile_size - size) / 2
        rect = self.cell_rect(player.x, player.y)
        pygame.draw.rect(self.surface, PLAYER_COLOR, (rect.x + offset, rect.y + offset, size, size))

    # --- Text ---

    def draw_status_bar(self):
        pygame.draw.rect(self.surface, BACKGROUND, (0, 0, self.surface.get_width(), STATUS_BAR_HEIGHT))
        font = self.font(STATUS_BAR_HEIGHT * 0.6)
        if font is None:
            return
        text = font.render(self.status, True, TEXT_COLOR)
        self.surface.blit(text, text.get_rect(center=(self.surface.get_width() // 2, STATUS_BAR_HEIGHT // 2)))

    def draw_overlay(self, message):
        """Darken the board and show the end-of-game message"""
        board_w = GRID_WIDTH * self.tile_size
        board_h = GRID_HEIGHT * self.tile_size
        shade = pygame.Surface((board_w, board_h), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        self.surface.blit(shade, (0, STATUS_BAR_HEIGHT))

        center_x = board_w // 2
        center_y = STATUS_BAR_HEIGHT + board_h // 2

        headline_font = self.font(self.tile_size * 1.5)
        prompt_font = self.font(self.tile_size * 0.5)
        if headline_font is None or prompt_font is None:
            return

        headline = headline_font.render(message, True, TEXT_COLOR)
        self.surface.blit(headline, headline.get_rect(center=(center_x, center_y - self.tile_size)))
        prompt = prompt_font.render("Press Enter to play again", True, TEXT_COLOR)
        self.surface.blit(prompt, prompt.get_rect(center=(center_x, center_y + self.tile_size * 0.5)))

    def draw_pause(self):
        font = self.font(self.tile_size)
        if font is None:
            return
        text = font.render("PAUSED", True, TEXT_COLOR)
        center = (GRID_WIDTH * self.tile_size // 2, STATUS_BAR_HEIGHT + GRID_HEIGHT * self.tile_size // 2)
        self.surface.blit(text, text.get_rect(center=center))

    def draw(self, sim, paused=False):
        """Draw one full frame of the simulation"""
        self.surface.fill(BACKGROUND)
        self.draw_grid(sim.grid)
        self.draw_bombs(sim.bombs.bombs)
        self.draw_explosions(sim.bombs.explosions)
        self.draw_enemies(sim.enemies)
        self.draw_player(sim.player)
        self.draw_status_bar()

        message = sim.message()
        if message is not None:
            self.draw_overlay(message)
        elif paused:
            self.draw_pause()
