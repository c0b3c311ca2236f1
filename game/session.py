"""
Game session - builds the maze and its entities and runs one simulation tick
"""

import random

from entities.enemy import EnemyManager
from entities.player import Player
from entities.treasure import TreasureManager
from game.collision import CollisionHandler
from game.game_state import GameState, GameStateManager
from maze.maze_core import default_grid, build_obstacles
from maze.placement import plan_spawns
from utils.constants import SCREEN_WIDTH, SCREEN_HEIGHT


class GameSession:
    """
    One play-through of the maze: grid, obstacles, player, enemies, treasure
    """
    def __init__(self, grid=None, rng=None, screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT),
                 treasure_count=None, enemy_count=None, state_manager=None):
        """
        Args:
            grid: MazeGrid, or None for the reference layout
            rng: Random source (random.Random instance); None uses the random module
            screen_size: (width, height) of the playfield
            treasure_count, enemy_count: Override the derived spawn counts
            state_manager: GameStateManager, or None for a fresh one
        """
        self.rng = rng if rng is not None else random
        self.grid = grid if grid is not None else default_grid()
        self.screen_size = screen_size
        self.state_manager = state_manager or GameStateManager()
        self.collision_handler = CollisionHandler()

        # Static level
        self.obstacles = build_obstacles(self.grid)

        # Entities
        self.spawn_plan = plan_spawns(
            self.grid.legal_positions(), self.rng,
            treasure_count=treasure_count, enemy_count=enemy_count
        )
        self.player = Player(*self.spawn_plan.player_start)

        self.treasure_manager = TreasureManager()
        for x, y in self.spawn_plan.treasures:
            self.treasure_manager.add_treasure(x, y)

        self.enemy_manager = EnemyManager(self.rng)
        for x, y in self.spawn_plan.enemies:
            self.enemy_manager.add_enemy(x, y)

        # Session tracking
        self.time_elapsed = 0.0
        self.ticks = 0

    @property
    def enemies(self):
        return self.enemy_manager.enemies

    @property
    def treasures(self):
        return self.treasure_manager.treasures

    def update(self, dt, input_state):
        """
        Run one simulation tick

        Order: player, each enemy (seeing the moved player), treasure
        pickup, enemy contact damage.

        Args:
            dt: Delta time in seconds
            input_state: InputState snapshot

        Returns:
            Collision result dict, or None if the tick was skipped (paused/stopped)
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            return None

        self.time_elapsed += dt
        self.ticks += 1

        self.player.update(dt, input_state, self.obstacles, self.screen_size)
        self.enemy_manager.update(dt, self.player, self.obstacles, self.screen_size)

        return self.collision_handler.check_player(
            self.player, self.treasure_manager, self.enemy_manager, dt
        )

    def is_paused(self):
        return self.state_manager.is_paused()

    def is_defeated(self):
        """Player health hit zero"""
        return not self.player.is_alive()

    def is_victorious(self):
        """Every treasure has been collected"""
        return self.treasure_manager.is_empty()

    def draw(self, renderer):
        """Hand this frame's entities to the renderer"""
        renderer.draw_frame(
            self.player, self.enemies, self.treasures, self.obstacles,
            self.is_paused(), self.is_defeated(), self.is_victorious()
        )

    def stats(self):
        """Summary numbers for the HUD and logs"""
        return {
            'time_elapsed': self.time_elapsed,
            'ticks': self.ticks,
            'score': self.player.score,
            'health': self.player.health,
            'damage_taken': self.player.damage_taken,
            'distance_moved': self.player.distance_moved,
            'treasures_collected': self.treasure_manager.collected_count(),
            'treasures_remaining': self.treasure_manager.remaining(),
        }

    def __repr__(self):
        return (f"GameSession(grid={self.grid}, enemies={len(self.enemies)}, "
                f"treasures={len(self.treasures)}, state={self.state_manager.get_state_name()})")
