"""
Collision detection and handling
"""

from utils.constants import TREASURE_SCORE, ENEMY_DAMAGE_PER_SEC
from utils.helpers import circles_collide, clamp


def hits_obstacle(x, y, radius, obstacles):
    """Return the first obstacle a circle at (x, y) overlaps, or None"""
    for obstacle in obstacles:
        if circles_collide(x, y, radius, obstacle.x, obstacle.y, obstacle.radius):
            return obstacle
    return None


def resolve_movement(x, y, dx, dy, radius, obstacles):
    """
    Move a circle by (dx, dy) unless the new spot overlaps an obstacle

    All-or-nothing: a blocked move leaves the entity where it was, there is
    no sliding along the free axis.

    Args:
        x, y: Current position
        dx, dy: Displacement for this frame
        radius: Entity radius
        obstacles: Iterable of Obstacle

    Returns:
        ((new_x, new_y), collided)
    """
    if dx == 0 and dy == 0:
        return (x, y), False

    new_x = x + dx
    new_y = y + dy
    if hits_obstacle(new_x, new_y, radius, obstacles) is not None:
        return (x, y), True
    return (new_x, new_y), False


def clamp_to_screen(x, y, radius, width, height):
    """Keep a circle fully inside the screen"""
    return (clamp(x, radius, width - radius), clamp(y, radius, height - radius))


class CollisionHandler:
    """
    Handles pickups and damage between the player and other entities
    """
    def collect_treasures(self, player, treasure_manager):
        """
        Pick up every treasure the player touches

        Returns:
            List of collected treasures
        """
        collected = treasure_manager.collect(player)
        if collected:
            player.add_score(TREASURE_SCORE * len(collected))
        return collected

    def apply_enemy_damage(self, player, enemy_manager, dt):
        """
        Continuous contact damage, stacking per overlapping enemy

        Returns:
            (enemies_touching, damage_dealt)
        """
        touching = enemy_manager.count_overlapping(player)
        if touching == 0:
            return 0, 0.0

        health_before = player.health
        for _ in range(touching):
            player.take_damage(ENEMY_DAMAGE_PER_SEC * dt)
        return touching, health_before - player.health

    def check_player(self, player, treasure_manager, enemy_manager, dt):
        """
        Resolve this tick's player interactions: treasure first, then damage

        Args:
            player: Player object
            treasure_manager: TreasureManager object
            enemy_manager: EnemyManager object
            dt: Tick length in seconds

        Returns:
            Dictionary with collision results:
            {
                'treasures_collected': int,
                'enemies_touching': int,
                'damage': float,
                'player_died': bool
            }
        """
        was_alive = player.is_alive()

        collected = self.collect_treasures(player, treasure_manager)
        touching, damage = self.apply_enemy_damage(player, enemy_manager, dt)

        result = {
            'treasures_collected': len(collected),
            'enemies_touching': touching,
            'damage': damage,
            'player_died': was_alive and not player.is_alive(),
        }
        return result
