"""
Enemy AI entities
Goblins wander the maze and periodically turn toward the player
"""

import random

from entities.animation import (
    Animation, Direction, EntityKind, MOVE_DIRECTIONS, DIRECTION_VECTORS
)
from game.collision import resolve_movement, clamp_to_screen
from utils.constants import (
    ENEMY_SPEED, ENEMY_RADIUS, ENEMY_REDIRECT_INTERVAL, ENEMY_PURSUIT_CHANCE,
    SCREEN_WIDTH, SCREEN_HEIGHT
)
from utils.helpers import entities_overlap


def random_direction(rng):
    """Pick one of the four move directions uniformly"""
    return MOVE_DIRECTIONS[rng.randrange(len(MOVE_DIRECTIONS))]


def pursuit_direction(from_x, from_y, to_x, to_y):
    """
    Direction along the axis with the larger gap toward a target
    Ties go to the horizontal axis
    """
    dx = to_x - from_x
    dy = to_y - from_y

    if abs(dx) >= abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class Enemy:
    """
    Goblin enemy: always moving in one of the four directions
    """
    kind = EntityKind.ENEMY

    def __init__(self, x, y, rng=random):
        """
        Args:
            x, y: World position
            rng: Random source (random module or a random.Random instance)
        """
        self.x = x
        self.y = y
        self.radius = ENEMY_RADIUS
        self.speed = ENEMY_SPEED
        self.rng = rng

        # AI state
        self.redirect_timer = 0.0
        self.animation = Animation(random_direction(rng))

        # Tracking
        self.collisions = 0

    @property
    def facing(self):
        return self.animation.direction

    def choose_direction(self, player):
        """Pick a new heading: usually toward the player, sometimes random"""
        if self.rng.random() < ENEMY_PURSUIT_CHANCE:
            return pursuit_direction(self.x, self.y, player.x, player.y)
        return random_direction(self.rng)

    def update(self, dt, player, obstacles, bounds=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        """
        Update enemy AI

        Args:
            dt: Delta time in seconds
            player: Player object (already moved this frame)
            obstacles: List of Obstacle
            bounds: (width, height) of the playfield

        Returns:
            True if the enemy bumped into a wall
        """
        self.redirect_timer += dt
        if self.redirect_timer >= ENEMY_REDIRECT_INTERVAL:
            self.redirect_timer = 0.0
            self.animation.direction = self.choose_direction(player)

        vx, vy = DIRECTION_VECTORS[self.animation.direction]
        step = self.speed * dt

        (x, y), collided = resolve_movement(
            self.x, self.y, vx * step, vy * step, self.radius, obstacles
        )
        self.x, self.y = clamp_to_screen(x, y, self.radius, bounds[0], bounds[1])

        if collided:
            # Bounce off in a random direction; redirect timer keeps running
            self.animation.direction = random_direction(self.rng)
            self.collisions += 1

        self.animation.advance()
        return collided

    def __repr__(self):
        return f"Enemy(pos=({self.x:.1f},{self.y:.1f}), dir={self.facing.name})"


class EnemyManager:
    """
    Manages all enemies in the level
    """
    def __init__(self, rng=random):
        self.enemies = []
        self.rng = rng

    def add_enemy(self, x, y):
        """Add an enemy to the level"""
        enemy = Enemy(x, y, self.rng)
        self.enemies.append(enemy)
        return enemy

    def update(self, dt, player, obstacles, bounds=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        """
        Update all enemies in order; each sees the player's current position

        Returns:
            Number of enemies that hit a wall this frame
        """
        bumped = 0
        for enemy in self.enemies:
            if enemy.update(dt, player, obstacles, bounds):
                bumped += 1
        return bumped

    def count_overlapping(self, entity):
        """Number of enemies touching the entity"""
        return sum(1 for enemy in self.enemies if entities_overlap(entity, enemy))

    def __len__(self):
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    def __repr__(self):
        return f"EnemyManager(enemies={len(self.enemies)})"
