"""
Spawn placement - picks player start, treasure and enemy cells from the free floor
"""

import math
import random
from collections import namedtuple

from utils.constants import (
    MAX_TREASURES, TREASURE_CELL_RATIO, MAX_ENEMIES, ENEMY_CELL_RATIO,
    PLAYER_START_CANDIDATES
)


SpawnPlan = namedtuple('SpawnPlan', ['player_start', 'treasures', 'enemies'])


def shuffle_positions(positions, rng=random):
    """
    Fisher-Yates shuffle in place

    Args:
        positions: List to shuffle
        rng: Anything with a random() method returning [0, 1)
    """
    for i in range(len(positions) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        positions[i], positions[j] = positions[j], positions[i]
    return positions


def treasure_count_for(free_cells):
    """How many treasures a pool of free cells gets"""
    return min(MAX_TREASURES, free_cells // TREASURE_CELL_RATIO)


def enemy_count_for(free_cells):
    """How many enemies a pool of free cells gets"""
    return min(MAX_ENEMIES, free_cells // ENEMY_CELL_RATIO)


def _same_position(a, b):
    return a[0] == b[0] and a[1] == b[1]


def pick_player_start(pool, preferred_starts):
    """
    First preferred start found in the pool, else the pool's first entry

    Returns:
        Index into pool
    """
    for candidate in preferred_starts:
        for i, pos in enumerate(pool):
            if _same_position(pos, candidate):
                return i
    return 0


def plan_spawns(legal_positions, rng=random, treasure_count=None, enemy_count=None,
                preferred_starts=PLAYER_START_CANDIDATES):
    """
    Choose disjoint spawn points for the player, treasures and enemies

    Args:
        legal_positions: World positions of every floor cell
        rng: Random source used for the shuffle
        treasure_count: Treasures wanted, or None to derive from the pool size
        enemy_count: Enemies wanted, or None to derive from the pool size
        preferred_starts: Player start positions to try, in order

    Returns:
        SpawnPlan(player_start, treasures, enemies)
    """
    pool = [tuple(pos) for pos in legal_positions]
    if not pool:
        raise ValueError("No free cells to place the player on")

    shuffle_positions(pool, rng)

    # Player
    player_start = pool.pop(pick_player_start(pool, preferred_starts))

    # Treasures come off the end of the pool
    if treasure_count is None:
        treasure_count = treasure_count_for(len(pool))
    treasure_count = max(0, min(treasure_count, len(pool)))
    split = len(pool) - treasure_count
    treasures = pool[split:]
    del pool[split:]

    # Enemies come off the front of what's left
    if enemy_count is None:
        enemy_count = enemy_count_for(len(pool))
    enemy_count = max(0, min(enemy_count, len(pool)))
    enemies = pool[:enemy_count]

    return SpawnPlan(player_start, treasures, enemies)
