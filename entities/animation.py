"""
Shared animation component and entity tags
Player and Enemy embed an Animation rather than inheriting from a sprite base
"""

from enum import Enum, auto

from utils.constants import ANIMATION_SPEED


class EntityKind(Enum):
    """Tag carried by every entity"""
    PLAYER = auto()
    ENEMY = auto()
    TREASURE = auto()
    OBSTACLE = auto()


class Direction(Enum):
    """Facing / movement direction (cosmetic and AI state, not physics)"""
    IDLE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


# Order matters: random picks index into this list
MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_VECTORS = {
    Direction.IDLE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def frame_count(direction):
    """Number of animation frames for a direction (idle has a single pose)"""
    return 1 if direction == Direction.IDLE else 2


class Animation:
    """
    Walk cycle state: current direction, frame index and tick counter
    """
    def __init__(self, direction=Direction.IDLE, speed=ANIMATION_SPEED):
        self.direction = direction
        self.frame = 0
        self.counter = 0
        self.speed = speed

    def advance(self, direction=None):
        """
        Count one update tick, toggling the frame every `speed` ticks

        Args:
            direction: New direction, or None to keep the current one
        """
        if direction is not None:
            self.direction = direction

        self.counter += 1
        if self.counter >= self.speed:
            self.counter = 0
            self.frame = (self.frame + 1) % frame_count(self.direction)

    def reset_idle(self):
        """Stand still: idle pose, first frame"""
        self.direction = Direction.IDLE
        self.frame = 0

    def __repr__(self):
        return f"Animation(dir={self.direction.name}, frame={self.frame}, counter={self.counter})"
