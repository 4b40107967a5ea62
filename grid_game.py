import logging
import sys

import pygame

from bomber.config import GRID_WIDTH, GRID_HEIGHT, CELL_SIZE, STATUS_BAR_HEIGHT, FPS, LOG_LEVEL
from bomber.controls import KeyboardControls, BOMB_KEY, RESTART_KEYS, PAUSE_KEY, QUIT_KEY
from bomber.game import Simulation, GameState
from bomber.logger import setup_logging
from bomber.render import Renderer, compute_tile_size, status_text

logger = logging.getLogger("bomber.grid_game")

CAPTION = "Grid Bomber - Arrow Keys: Move | Space: Place Bomb"


def create_window(width, height):
    return pygame.display.set_mode((width, height), pygame.RESIZABLE)


def main():
    setup_logging(LOG_LEVEL)
    pygame.init()

    # Create the window
    window = create_window(GRID_WIDTH * CELL_SIZE, GRID_HEIGHT * CELL_SIZE + STATUS_BAR_HEIGHT)
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    sim = Simulation()
    renderer = Renderer(window, CELL_SIZE)
    controls = KeyboardControls()

    def on_status(lives, score):
        renderer.set_status(lives, score)
        pygame.display.set_caption(f"{CAPTION} | {status_text(lives, score)}")

    sim.add_status_listener(on_status)

    running = True
    paused = False
    clock.tick(FPS)  # first tick only starts the frame timer

    while running:
        dt = clock.tick(FPS) / 1000  # seconds since previous frame

        # Handle events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                # Fit the grid into the new window size
                window = create_window(event.w, event.h)
                renderer.resize(window, compute_tile_size(event.w, event.h))
            elif event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    running = False
                elif sim.state is not GameState.PLAYING:
                    if event.key in RESTART_KEYS:
                        sim.restart()
                        paused = False
                elif event.key == PAUSE_KEY:
                    paused = not paused
                    logger.info("Paused" if paused else "Resumed")
                elif event.key == BOMB_KEY and not paused:
                    sim.place_bomb()

        # Skip game logic updates when paused (but keep rendering)
        if not paused:
            sim.set_direction(*controls.read(pygame.key.get_pressed()))
            sim.update(dt)

        renderer.draw(sim, paused)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
