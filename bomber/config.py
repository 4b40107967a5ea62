"""
Game settings for grid bomber
"""
import os

# Grid
GRID_WIDTH = 15
GRID_HEIGHT = 13

# Display (can be overridden from the environment)
CELL_SIZE = int(os.getenv("BOMBER_CELL_SIZE", "40"))  # starting tile size in pixels
STATUS_BAR_HEIGHT = 36
FPS = int(os.getenv("BOMBER_FPS", "60"))
LOG_LEVEL = os.getenv("BOMBER_LOG_LEVEL", "INFO")

# Player
PLAYER_SPAWN = (1, 1)
PLAYER_SPEED = 4.0  # tiles per second
PLAYER_LIVES = 3

# Enemies
ENEMY_SPEED = 2.0  # tiles per second
ENEMY_POSITIONS = [(13, 1), (1, 11), (13, 11), (7, 5)]
ENEMY_DIRECTION = (1, 0)

# Bomb settings
BOMB_FUSE_TIME = 3000  # milliseconds (3 seconds)
EXPLOSION_DURATION = 500  # milliseconds (0.5 seconds) - how long a blast cell stays deadly
EXPLOSION_RANGE = 2  # cells in each direction

# Scoring
ENEMY_KILL_SCORE = 100
WALL_DESTROY_SCORE = 10

# Colors
BACKGROUND = (26, 26, 26)
EMPTY_COLOR = (58, 58, 58)
INDESTRUCTIBLE_COLOR = (128, 128, 128)
DESTRUCTIBLE_COLOR = (192, 192, 192)
PLAYER_COLOR = (255, 65, 54)
BOMB_COLOR = (0, 31, 63)
EXPLOSION_COLOR = (255, 220, 0)
ENEMY_COLOR = (142, 68, 173)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 178)  # 70% black
