"""Shared fixtures: headless pygame, small grids and scripted randomness."""

from __future__ import annotations

import os
import random
from typing import Iterator

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from maze.maze_core import MazeGrid, default_grid


class ScriptedRandom:
    """Random source that replays fixed values, then repeats the last one."""

    def __init__(self, randoms=(0.5,), indices=(0,)):
        self.randoms = list(randoms)
        self.indices = list(indices)
        self._r = 0
        self._i = 0

    def random(self) -> float:
        value = self.randoms[min(self._r, len(self.randoms) - 1)]
        self._r += 1
        return value

    def randrange(self, n: int) -> int:
        value = self.indices[min(self._i, len(self.indices) - 1)]
        self._i += 1
        return value % n


# A single floor cell boxed in by walls; its center is (60, 60).
CELL_ROOM = (
    "###",
    "#.#",
    "###",
)

# 13 x 9 floor room inside a wall border.
OPEN_ROOM = (
    "###############",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "#.............#",
    "###############",
)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def grid() -> MazeGrid:
    return default_grid()


@pytest.fixture
def cell_room() -> MazeGrid:
    return MazeGrid.from_rows(CELL_ROOM)


@pytest.fixture
def open_room() -> MazeGrid:
    return MazeGrid.from_rows(OPEN_ROOM)


@pytest.fixture(scope="module")
def pygame_headless() -> Iterator[None]:
    """Initialise pygame in headless mode for the duration of the module."""
    pygame.init()
    pygame.display.set_mode((1, 1))
    try:
        yield
    finally:
        pygame.quit()
