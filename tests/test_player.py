"""Player movement, facing priority, diagonal speed and walk animation."""

from __future__ import annotations

import math

import pytest

from entities.animation import Direction
from entities.obstacle import Obstacle
from entities.player import Player
from game.input_source import NO_INPUT, InputState
from utils.constants import ANIMATION_SPEED, PLAYER_SPEED

DT = 1 / 60
WIDE = (10_000, 10_000)


def held(*directions: str) -> InputState:
    return InputState.from_directions(*directions)


@pytest.mark.parametrize(
    "keys, expected",
    [
        (("up",), (0, -3)),
        (("down",), (0, 3)),
        (("left",), (-3, 0)),
        (("right",), (3, 0)),
    ],
)
def test_axis_moves_at_full_speed(keys, expected) -> None:
    player = Player(500, 500)
    player.update(DT, held(*keys), [], WIDE)
    assert player.x - 500 == pytest.approx(expected[0])
    assert player.y - 500 == pytest.approx(expected[1])


@pytest.mark.parametrize("keys", [("up", "left"), ("up", "right"), ("down", "left"), ("down", "right")])
def test_diagonal_speed_is_normalized(keys) -> None:
    player = Player(500, 500)
    player.update(DT, held(*keys), [], WIDE)
    moved = math.hypot(player.x - 500, player.y - 500)
    assert moved == pytest.approx(PLAYER_SPEED * DT, rel=1e-6)


def test_up_beats_down_and_left_beats_right() -> None:
    player = Player(500, 500)
    player.update(DT, held("up", "down"), [], WIDE)
    assert player.y < 500
    assert player.facing == Direction.UP

    player = Player(500, 500)
    player.update(DT, held("left", "right"), [], WIDE)
    assert player.x < 500
    assert player.facing == Direction.LEFT


def test_horizontal_direction_wins_the_facing() -> None:
    player = Player(500, 500)
    player.update(DT, held("down", "right"), [], WIDE)
    assert player.facing == Direction.RIGHT


def test_blocked_move_leaves_player_in_place() -> None:
    player = Player(500, 500)
    wall = Obstacle(500, 462)  # 38 away now, 35 after the step; contact is 36
    collided = player.update(DT, held("up"), [wall], WIDE)
    assert collided
    assert (player.x, player.y) == (500, 500)
    # Still animates as if walking.
    assert player.facing == Direction.UP


def test_player_is_clamped_to_screen() -> None:
    player = Player(17, 20)
    for _ in range(10):
        player.update(DT, held("left"), [], (1000, 700))
    assert player.x == player.radius


def test_walk_animation_toggles_every_speed_ticks() -> None:
    player = Player(500, 500)
    for _ in range(ANIMATION_SPEED - 1):
        player.update(DT, held("right"), [], WIDE)
    assert player.animation.frame == 0

    player.update(DT, held("right"), [], WIDE)
    assert player.animation.frame == 1

    for _ in range(ANIMATION_SPEED):
        player.update(DT, held("right"), [], WIDE)
    assert player.animation.frame == 0


def test_no_input_resets_to_idle() -> None:
    player = Player(500, 500)
    for _ in range(ANIMATION_SPEED):
        player.update(DT, held("down"), [], WIDE)
    assert player.animation.frame == 1

    player.update(DT, NO_INPUT, [], WIDE)
    assert player.facing == Direction.IDLE
    assert player.animation.frame == 0
    assert (player.x, player.y) == pytest.approx((500, 500 + 3 * ANIMATION_SPEED))


def test_take_damage_never_goes_negative() -> None:
    player = Player(0, 0)
    assert not player.take_damage(40)
    assert player.take_damage(80)
    assert player.health == 0
    assert player.damage_taken == 100
    assert not player.is_alive()
