"""
Keyboard input: turn the held keys into one movement direction
"""
import pygame

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)

BOMB_KEY = pygame.K_SPACE
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
PAUSE_KEY = pygame.K_p
QUIT_KEY = pygame.K_ESCAPE


def direction_from_keys(up, down, left, right):
    """Unit (dx, dy) for the held direction keys.

    Opposite keys cancel each other. Movement is resolved on one axis at a
    time, so when a vertical and a horizontal key are both held the vertical
    one wins.
    """
    dy = int(down) - int(up)
    dx = int(right) - int(left)
    if dy != 0:
        return 0, dy
    return dx, 0


class KeyboardControls:
    """Reads a pygame.key.get_pressed() snapshot each frame"""

    def __init__(self, up=UP_KEYS, down=DOWN_KEYS, left=LEFT_KEYS, right=RIGHT_KEYS):
        self.up = up
        self.down = down
        self.left = left
        self.right = right

    def read(self, pressed):
        def held(keys):
            return any(pressed[key] for key in keys)

        return direction_from_keys(held(self.up), held(self.down), held(self.left), held(self.right))
