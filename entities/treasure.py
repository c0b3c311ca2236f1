"""
Treasure chests - collected on contact, never respawn
"""

from entities.animation import EntityKind
from utils.constants import TREASURE_RADIUS
from utils.helpers import entities_overlap


class Treasure:
    """
    A chest sitting on a floor cell
    """
    kind = EntityKind.TREASURE

    def __init__(self, x, y, radius=TREASURE_RADIUS):
        self.x = x
        self.y = y
        self.radius = radius

    def __repr__(self):
        return f"Treasure(pos=({self.x},{self.y}))"


class TreasureManager:
    """
    Owns the live treasure set; it only ever shrinks
    """
    def __init__(self):
        self.treasures = []
        self.initial_count = 0

    def add_treasure(self, x, y):
        """Place a treasure in the level"""
        treasure = Treasure(x, y)
        self.treasures.append(treasure)
        self.initial_count += 1
        return treasure

    def collect(self, entity):
        """
        Remove every treasure the entity overlaps

        Args:
            entity: Anything with x, y, radius (the player)

        Returns:
            List of collected Treasure objects
        """
        collected = []
        # Walk backwards so removal doesn't skip items
        for i in range(len(self.treasures) - 1, -1, -1):
            treasure = self.treasures[i]
            if entities_overlap(entity, treasure):
                collected.append(treasure)
                del self.treasures[i]
        return collected

    def remaining(self):
        """Number of treasures still in the maze"""
        return len(self.treasures)

    def collected_count(self):
        """Number of treasures picked up so far"""
        return self.initial_count - len(self.treasures)

    def is_empty(self):
        return not self.treasures

    def __repr__(self):
        return f"TreasureManager(remaining={len(self.treasures)}/{self.initial_count})"
