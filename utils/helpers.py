"""
Helper utility functions for Treasure Maze
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def circles_collide(x1, y1, r1, x2, y2, r2):
    """Check if two circles collide"""
    return distance(x1, y1, x2, y2) < (r1 + r2)


def entities_overlap(a, b):
    """Check if two entities (anything with x, y, radius) overlap"""
    return circles_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"


def format_health(health):
    """Format health as a whole number, rounded down"""
    return str(int(math.floor(health)))
