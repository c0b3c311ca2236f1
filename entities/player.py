"""
Player entity with health, score and keyboard-driven movement
"""

from entities.animation import Animation, Direction, EntityKind
from game.collision import resolve_movement, clamp_to_screen
from utils.constants import (
    PLAYER_SPEED, PLAYER_RADIUS, PLAYER_MAX_HEALTH, DIAGONAL_FACTOR,
    SCREEN_WIDTH, SCREEN_HEIGHT
)


class Player:
    """
    Player entity with stats and walk animation
    """
    kind = EntityKind.PLAYER

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.radius = PLAYER_RADIUS
        self.speed = PLAYER_SPEED

        # Stats
        self.health = PLAYER_MAX_HEALTH
        self.max_health = PLAYER_MAX_HEALTH
        self.score = 0

        self.animation = Animation()

        # Gameplay tracking
        self.damage_taken = 0.0
        self.distance_moved = 0.0

    @property
    def facing(self):
        return self.animation.direction

    def movement_intent(self, input_state, dt):
        """
        Turn held keys into this frame's displacement

        Up beats Down and Left beats Right. When both axes are held the
        horizontal direction wins the facing.

        Returns:
            (dx, dy, direction)
        """
        dx = dy = 0.0
        direction = Direction.IDLE
        step = self.speed * dt

        if input_state.up:
            dy = -step
            direction = Direction.UP
        elif input_state.down:
            dy = step
            direction = Direction.DOWN

        if input_state.left:
            dx = -step
            direction = Direction.LEFT
        elif input_state.right:
            dx = step
            direction = Direction.RIGHT

        # Normalize diagonal movement
        if dx != 0 and dy != 0:
            dx *= DIAGONAL_FACTOR
            dy *= DIAGONAL_FACTOR

        return dx, dy, direction

    def update(self, dt, input_state, obstacles, bounds=(SCREEN_WIDTH, SCREEN_HEIGHT)):
        """
        Move the player for one frame

        Args:
            dt: Delta time in seconds
            input_state: InputState snapshot
            obstacles: List of Obstacle
            bounds: (width, height) of the playfield

        Returns:
            True if the move was blocked by an obstacle
        """
        dx, dy, direction = self.movement_intent(input_state, dt)

        old_x, old_y = self.x, self.y
        (x, y), collided = resolve_movement(self.x, self.y, dx, dy, self.radius, obstacles)
        self.x, self.y = clamp_to_screen(x, y, self.radius, bounds[0], bounds[1])
        self.distance_moved += abs(self.x - old_x) + abs(self.y - old_y)

        if direction != Direction.IDLE:
            self.animation.advance(direction)
        else:
            self.animation.reset_idle()

        return collided

    def take_damage(self, amount):
        """
        Take damage, health never drops below zero
        Returns True if player is dead
        """
        if self.health <= 0:
            return True

        dealt = min(amount, self.health)
        self.health -= dealt
        self.damage_taken += dealt

        if self.health <= 0:
            self.health = 0
            return True

        return False

    def add_score(self, points):
        self.score += points

    def get_health_percent(self):
        """Get health as percentage (0-1)"""
        return self.health / self.max_health

    def is_alive(self):
        """Check if player is alive"""
        return self.health > 0

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), hp={self.health:.1f}, score={self.score})"
