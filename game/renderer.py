"""
Renderer - draws one frame of the maze, its entities and the HUD
Sprites are built once up front; drawing never touches simulation state
"""

import random

import pygame

from entities.animation import Direction, EntityKind, frame_count
from utils.colors import (
    COLOR_BLACK, COLOR_FLOOR, COLOR_FLOOR_SPECK, COLOR_FLOOR_CRACK,
    COLOR_STONE, COLOR_STONE_FACE, COLOR_STONE_LIGHT, COLOR_STONE_DARK, COLOR_GRAY,
    COLOR_HERO_SKIN, COLOR_HERO_ARMOR, COLOR_HERO_CAPE, COLOR_HERO_SWORD, COLOR_HERO_BOOTS,
    COLOR_GOBLIN_SKIN, COLOR_GOBLIN_BODY, COLOR_GOBLIN_EYES,
    COLOR_CHEST, COLOR_CHEST_DARK, COLOR_GOLD,
    COLOR_TEXT, COLOR_HEALTH_BAR_BG, COLOR_HEALTH_BAR_FULL, COLOR_HEALTH_BAR_BORDER,
    COLOR_BANNER, COLOR_VICTORY
)
from utils.constants import (
    CELL_SIZE, HEALTH_BAR_X, HEALTH_BAR_Y, HEALTH_BAR_W, HEALTH_BAR_H
)
from utils.helpers import format_health, format_score


# ========== SPRITE BUILDERS ==========

def _hero_sprite(frame):
    """32x32 hero facing down; frame 1 lifts the legs a pixel"""
    surf = pygame.Surface((32, 32), pygame.SRCALPHA)
    bob = 1 if frame % 2 == 1 else 0

    surf.fill(COLOR_HERO_SKIN, (12, 6, 8, 8))        # head
    surf.fill(COLOR_HERO_ARMOR, (10, 14, 12, 10))    # armor
    surf.fill(COLOR_HERO_CAPE, (8, 16, 16, 8))       # cape
    surf.fill(COLOR_HERO_BOOTS, (11, 24 + bob, 3, 6))
    surf.fill(COLOR_HERO_BOOTS, (18, 24 + bob, 3, 6))
    surf.fill(COLOR_HERO_SWORD, (24, 12, 2, 12))
    surf.fill(COLOR_BLACK, (13, 8, 1, 1))            # eyes
    surf.fill(COLOR_BLACK, (18, 8, 1, 1))
    return surf


def _goblin_sprite(frame):
    """24x24 goblin facing down"""
    surf = pygame.Surface((24, 24), pygame.SRCALPHA)
    bob = 1 if frame % 2 == 1 else 0

    surf.fill(COLOR_GOBLIN_SKIN, (8, 4, 8, 6))       # head
    surf.fill(COLOR_GOBLIN_SKIN, (6, 3, 2, 4))       # ears
    surf.fill(COLOR_GOBLIN_SKIN, (16, 3, 2, 4))
    surf.fill(COLOR_GOBLIN_BODY, (7, 10, 10, 8))
    surf.fill(COLOR_GOBLIN_SKIN, (8, 18 + bob, 2, 4))
    surf.fill(COLOR_GOBLIN_SKIN, (14, 18 + bob, 2, 4))
    surf.fill(COLOR_GOBLIN_EYES, (9, 6, 1, 1))
    surf.fill(COLOR_GOBLIN_EYES, (14, 6, 1, 1))
    return surf


def _chest_sprite():
    surf = pygame.Surface((24, 20), pygame.SRCALPHA)
    surf.fill(COLOR_CHEST, (2, 8, 20, 12))           # base
    surf.fill(COLOR_CHEST_DARK, (2, 8, 20, 2))
    surf.fill(COLOR_CHEST, (2, 4, 20, 6))            # lid
    surf.fill(COLOR_CHEST_DARK, (2, 4, 20, 2))
    surf.fill(COLOR_GOLD, (10, 10, 4, 3))            # lock
    surf.fill(COLOR_GOLD, (4, 12, 2, 2))             # studs
    surf.fill(COLOR_GOLD, (18, 12, 2, 2))
    return surf


def _wall_sprite():
    surf = pygame.Surface((CELL_SIZE, CELL_SIZE))
    surf.fill(COLOR_STONE)
    surf.fill(COLOR_GRAY, (0, 0, CELL_SIZE, 2))
    surf.fill(COLOR_GRAY, (0, 0, 2, CELL_SIZE))
    surf.fill(COLOR_STONE_FACE, (5, 5, 30, 30))
    surf.fill(COLOR_STONE_LIGHT, (10, 10, 8, 8))
    surf.fill(COLOR_STONE_LIGHT, (22, 22, 8, 8))
    surf.fill(COLOR_STONE_DARK, (18, 8, 6, 6))
    surf.fill(COLOR_STONE_DARK, (8, 25, 6, 6))
    return surf


def _orient(surf, direction):
    """Turn a down-facing sprite toward a direction"""
    if direction == Direction.UP:
        return pygame.transform.flip(surf, False, True)
    if direction == Direction.LEFT:
        return pygame.transform.rotate(surf, -90)
    if direction == Direction.RIGHT:
        return pygame.transform.rotate(surf, 90)
    return surf


class SpriteAtlas:
    """
    Every sprite the renderer needs, keyed by (direction, frame)
    """
    def __init__(self):
        self.hero = self._build_walk_cycle(_hero_sprite)
        self.goblin = self._build_walk_cycle(_goblin_sprite)
        self.chest = _chest_sprite()
        self.wall = _wall_sprite()

    @staticmethod
    def _build_walk_cycle(builder):
        frames = {}
        for direction in Direction:
            for frame in range(frame_count(direction)):
                frames[(direction, frame)] = _orient(builder(frame), direction)
        return frames

    def walk_frame(self, frames, animation):
        """Sprite for an entity's current animation state"""
        frame = animation.frame % frame_count(animation.direction)
        return frames[(animation.direction, frame)]

    def sprite_for(self, entity):
        """Sprite for any entity, picked by its kind tag"""
        if entity.kind == EntityKind.PLAYER:
            return self.walk_frame(self.hero, entity.animation)
        if entity.kind == EntityKind.ENEMY:
            return self.walk_frame(self.goblin, entity.animation)
        if entity.kind == EntityKind.TREASURE:
            return self.chest
        if entity.kind == EntityKind.OBSTACLE:
            return self.wall
        raise ValueError(f"No sprite for entity kind {entity.kind}")


# ========== RENDERERS ==========

class PygameRenderer:
    """
    Draws a frame onto a pygame surface
    """
    def __init__(self, screen, seed=0):
        """
        Args:
            screen: pygame.Surface to draw on
            seed: Seed for the floor texture pattern
        """
        self.screen = screen
        self.atlas = SpriteAtlas()

        pygame.font.init()
        self.font_small = pygame.font.SysFont("arial", 20)
        self.font_medium = pygame.font.SysFont("arial", 24)
        self.font_large = pygame.font.SysFont("arial", 36)
        self.font_title = pygame.font.SysFont("arial", 48)

        self.background = self._build_background(screen.get_size(), seed)

    def _build_background(self, size, seed):
        """Stone floor with random specks, generated once"""
        width, height = size
        rng = random.Random(seed)
        surf = pygame.Surface(size)
        surf.fill(COLOR_FLOOR)

        for x in range(0, width, CELL_SIZE):
            for y in range(0, height, CELL_SIZE):
                if rng.random() < 0.3:
                    surf.fill(COLOR_FLOOR_SPECK, (x + 10, y + 10, 4, 4))
                if rng.random() < 0.2:
                    surf.fill(COLOR_FLOOR_CRACK, (x + 20, y + 25, 3, 3))
        return surf

    def _blit_centered(self, sprite, x, y):
        self.screen.blit(sprite, (x - sprite.get_width() / 2, y - sprite.get_height() / 2))

    def draw_frame(self, player, enemies, treasures, obstacles, paused, defeated, victorious):
        """
        Draw everything for one frame

        Args:
            player: Player object
            enemies: List of Enemy
            treasures: List of Treasure (live ones only)
            obstacles: List of Obstacle
            paused, defeated, victorious: Session flags for the HUD
        """
        self.screen.blit(self.background, (0, 0))

        # Back to front: walls, chests, goblins, hero
        for entity in (*obstacles, *treasures, *enemies, player):
            self._blit_centered(self.atlas.sprite_for(entity), entity.x, entity.y)

        self.draw_hud(player, paused, defeated, victorious)

    def draw_hud(self, player, paused, defeated, victorious):
        """Health bar, score, instructions and status banners"""
        screen_w, screen_h = self.screen.get_size()

        self._draw_health_bar(player)

        text = self.font_medium.render(f"Health: {format_health(player.health)}", True, COLOR_TEXT)
        self.screen.blit(text, (HEALTH_BAR_X, 45))
        text = self.font_medium.render(f"Treasure: {format_score(player.score)}", True, COLOR_TEXT)
        self.screen.blit(text, (HEALTH_BAR_X, 75))

        # Instructions
        if victorious:
            line = self.font_small.render("All treasure collected! You escaped the maze!", True, COLOR_VICTORY)
        else:
            line = self.font_small.render("Navigate the maze! Collect treasure! Avoid goblins!", True, COLOR_TEXT)
        self.screen.blit(line, (HEALTH_BAR_X, screen_h - 70))
        line = self.font_small.render("WASD to move, P to pause, ESC to quit", True, COLOR_TEXT)
        self.screen.blit(line, (HEALTH_BAR_X, screen_h - 40))

        if paused:
            banner = self.font_large.render("PAUSED", True, COLOR_BANNER)
            self.screen.blit(banner, banner.get_rect(center=(screen_w // 2, 50)))

        if defeated:
            banner = self.font_title.render("GAME OVER", True, COLOR_BANNER)
            self.screen.blit(banner, banner.get_rect(center=(screen_w // 2, screen_h // 2)))

    def _draw_health_bar(self, player):
        """Red background, white fill for remaining health"""
        rect = (HEALTH_BAR_X, HEALTH_BAR_Y, HEALTH_BAR_W, HEALTH_BAR_H)
        pygame.draw.rect(self.screen, COLOR_HEALTH_BAR_BG, rect)

        fill_width = int(HEALTH_BAR_W * player.get_health_percent())
        if fill_width > 0:
            pygame.draw.rect(self.screen, COLOR_HEALTH_BAR_FULL,
                             (HEALTH_BAR_X, HEALTH_BAR_Y, fill_width, HEALTH_BAR_H))

        pygame.draw.rect(self.screen, COLOR_HEALTH_BAR_BORDER, rect, 2)


class NullRenderer:
    """
    Records what it was asked to draw; for tests and headless runs
    """
    def __init__(self):
        self.frames = []

    def draw_frame(self, player, enemies, treasures, obstacles, paused, defeated, victorious):
        self.frames.append({
            'player': (player.x, player.y),
            'enemies': len(enemies),
            'treasures': len(treasures),
            'obstacles': len(obstacles),
            'paused': paused,
            'defeated': defeated,
            'victorious': victorious,
        })
