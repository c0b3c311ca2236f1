"""
Color palette for Treasure Maze
"""

# Basic colors
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_RED = (220, 50, 50)
COLOR_GOLD = (255, 215, 0)
COLOR_GRAY = (128, 128, 128)

# Floor
COLOR_FLOOR = (64, 64, 64)            # Stone floor
COLOR_FLOOR_SPECK = (80, 80, 80)      # Light floor texture
COLOR_FLOOR_CRACK = (48, 48, 48)      # Dark floor texture

# Walls
COLOR_STONE = (105, 105, 105)         # Wall block
COLOR_STONE_FACE = (90, 90, 90)       # Wall inner face
COLOR_STONE_LIGHT = (140, 140, 140)   # Wall highlight stones
COLOR_STONE_DARK = (80, 80, 80)       # Wall shadow stones

# Hero
COLOR_HERO_SKIN = (255, 221, 187)
COLOR_HERO_ARMOR = (70, 130, 180)
COLOR_HERO_CAPE = (178, 34, 34)
COLOR_HERO_SWORD = (192, 192, 192)
COLOR_HERO_BOOTS = (101, 67, 33)

# Goblin
COLOR_GOBLIN_SKIN = (76, 153, 76)
COLOR_GOBLIN_BODY = (51, 102, 51)
COLOR_GOBLIN_EYES = (255, 0, 0)

# Treasure chest
COLOR_CHEST = (101, 67, 33)
COLOR_CHEST_DARK = (62, 39, 35)

# HUD
COLOR_TEXT = COLOR_WHITE
COLOR_HEALTH_BAR_BG = COLOR_RED
COLOR_HEALTH_BAR_FULL = COLOR_WHITE
COLOR_HEALTH_BAR_BORDER = COLOR_BLACK
COLOR_BANNER = COLOR_RED
COLOR_VICTORY = COLOR_GOLD
