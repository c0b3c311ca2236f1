"""
Wall obstacle - one per wall cell, fixed for the whole session
"""

from entities.animation import EntityKind
from utils.constants import OBSTACLE_RADIUS


class Obstacle:
    """
    Immutable circular blocker centered on a wall cell
    """
    __slots__ = ('_x', '_y', '_radius')

    kind = EntityKind.OBSTACLE

    def __init__(self, x, y, radius=OBSTACLE_RADIUS):
        self._x = x
        self._y = y
        self._radius = radius

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def radius(self):
        return self._radius

    def __eq__(self, other):
        if not isinstance(other, Obstacle):
            return NotImplemented
        return (self._x, self._y, self._radius) == (other._x, other._y, other._radius)

    def __hash__(self):
        return hash((self._x, self._y, self._radius))

    def __repr__(self):
        return f"Obstacle(pos=({self._x},{self._y}), r={self._radius})"
