"""
Game configuration - title, version and run settings
Run settings can be overridden from the environment
"""

import os

from utils.constants import FPS

GAME_TITLE = "Treasure Maze"
GAME_VERSION = "1.0.0"


def _env_int(name, default=None):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_float(name, default=None):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


# Random seed (None = different maze population every run)
SEED = _env_int("TREASURE_MAZE_SEED")

# Longest single frame step in seconds (None = no cap)
MAX_FRAME_DT = _env_float("TREASURE_MAZE_MAX_DT")

# Frame rate cap for the window loop
TARGET_FPS = _env_int("TREASURE_MAZE_FPS", FPS)
