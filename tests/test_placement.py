"""Spawn planning: shuffle, preferred start and disjoint selections."""

from __future__ import annotations

import random

import pytest

from maze.maze_core import MazeGrid
from maze.placement import (
    enemy_count_for, plan_spawns, shuffle_positions, treasure_count_for
)


def test_shuffle_is_a_permutation() -> None:
    items = list(range(50))
    shuffled = shuffle_positions(list(items), random.Random(3))
    assert sorted(shuffled) == items
    assert shuffled != items


def test_shuffle_is_reproducible_with_a_seed() -> None:
    a = shuffle_positions(list(range(30)), random.Random(42))
    b = shuffle_positions(list(range(30)), random.Random(42))
    assert a == b


def test_shuffle_follows_fisher_yates(scripted_rng) -> None:
    # random() == 0 always swaps position i with 0.
    positions = [1, 2, 3, 4]
    shuffle_positions(positions, scripted_rng(randoms=[0.0]))
    assert positions == [2, 3, 4, 1]


def test_derived_counts() -> None:
    assert treasure_count_for(400) == 8
    assert treasure_count_for(13) == 3
    assert enemy_count_for(400) == 6
    assert enemy_count_for(14) == 2
    assert treasure_count_for(3) == 0


@pytest.mark.parametrize("seed", range(25))
def test_reference_spawns_are_disjoint_floor_cells(grid: MazeGrid, seed: int) -> None:
    plan = plan_spawns(grid.legal_positions(), random.Random(seed))

    cells = [grid.cell_at(*plan.player_start)]
    cells += [grid.cell_at(*pos) for pos in plan.treasures]
    cells += [grid.cell_at(*pos) for pos in plan.enemies]

    assert len(cells) == len(set(cells))
    assert all(not grid.is_wall(col, row) for col, row in cells)


def test_reference_counts(grid: MazeGrid, rng: random.Random) -> None:
    plan = plan_spawns(grid.legal_positions(), rng)
    assert len(plan.treasures) == 8
    assert len(plan.enemies) == 6


def test_player_takes_first_preferred_start_present(rng: random.Random) -> None:
    legal = [(140, 60), (100, 60), (500, 500), (60, 100)]
    plan = plan_spawns(legal, rng, treasure_count=0, enemy_count=0)
    assert plan.player_start == (60, 100)


def test_player_falls_back_to_first_shuffled_cell(scripted_rng) -> None:
    legal = [(500, 500), (540, 500), (580, 500)]
    # randoms of 0.99 keep every element in place.
    plan = plan_spawns(legal, scripted_rng(randoms=[0.99]), treasure_count=0, enemy_count=0)
    assert plan.player_start == (500, 500)


def test_treasures_from_the_back_enemies_from_the_front(scripted_rng) -> None:
    legal = [(x, 500) for x in range(0, 400, 40)]
    plan = plan_spawns(legal, scripted_rng(randoms=[0.99]), treasure_count=3, enemy_count=2)

    assert plan.player_start == (0, 500)
    assert plan.treasures == [(280, 500), (320, 500), (360, 500)]
    assert plan.enemies == [(40, 500), (80, 500)]


def test_zero_treasures_selects_nothing(rng: random.Random) -> None:
    legal = [(x, 500) for x in range(0, 400, 40)]
    plan = plan_spawns(legal, rng, treasure_count=0, enemy_count=0)
    assert plan.treasures == []
    assert plan.enemies == []


def test_short_pool_clamps_counts(rng: random.Random) -> None:
    legal = [(500, 500), (540, 500), (580, 500)]
    plan = plan_spawns(legal, rng, treasure_count=10, enemy_count=10)

    assert len(plan.treasures) == 2
    assert plan.enemies == []


def test_single_cell_pool(cell_room: MazeGrid, rng: random.Random) -> None:
    plan = plan_spawns(cell_room.legal_positions(), rng)
    assert plan.player_start == (60.0, 60.0)
    assert plan.treasures == []
    assert plan.enemies == []


def test_empty_pool_is_rejected(rng: random.Random) -> None:
    with pytest.raises(ValueError):
        plan_spawns([], rng)
