"""
Global constants for Treasure Maze
"""

# Screen settings
SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 700
FPS = 60

# Maze grid
CELL_SIZE = 40
WALL = 1
FLOOR = 0

# Entity radii (world units)
PLAYER_RADIUS = 16
ENEMY_RADIUS = 12
TREASURE_RADIUS = 12
OBSTACLE_RADIUS = 20

# Player settings
PLAYER_SPEED = 180  # units per second
PLAYER_MAX_HEALTH = 100
DIAGONAL_FACTOR = 0.70710678  # 1 / sqrt(2)

# Enemy settings
ENEMY_SPEED = 60  # units per second
ENEMY_DAMAGE_PER_SEC = 50
ENEMY_REDIRECT_INTERVAL = 3.0  # seconds
ENEMY_PURSUIT_CHANCE = 0.7

# Animation
ANIMATION_SPEED = 15  # update ticks per frame toggle

# Score
TREASURE_SCORE = 100

# Spawn planning
MAX_TREASURES = 8
TREASURE_CELL_RATIO = 4  # one treasure per N free cells
MAX_ENEMIES = 6
ENEMY_CELL_RATIO = 5  # one enemy per N free cells (after treasures)

# Preferred player start positions, tried in order
PLAYER_START_CANDIDATES = [(60, 60), (60, 100), (100, 60), (140, 60)]

# HUD
HEALTH_BAR_X = 20
HEALTH_BAR_Y = 20
HEALTH_BAR_W = 200
HEALTH_BAR_H = 20
