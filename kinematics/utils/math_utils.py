"""Scalar helpers shared by the heading and position types.

All angles in this module are degrees.
"""

from __future__ import annotations

import math
from functools import lru_cache

FULL_TURN = 360.0
HALF_TURN = 180.0
QUARTER_TURN = 90.0


def normalize_degrees(angle: float) -> float:
    """Normalize angle to range [0, 360).

    Args:
        angle: Angle in degrees, any sign or magnitude

    Returns:
        Normalized angle in range [0, 360), or NaN for infinite input
    """
    if math.isinf(angle):
        return math.nan
    wrapped = math.fmod(angle, FULL_TURN)
    if wrapped < 0.0:
        wrapped += FULL_TURN
    # fmod of a tiny negative value lands on 360.0 after the shift
    if wrapped >= FULL_TURN:
        wrapped -= FULL_TURN
    return wrapped


@lru_cache(maxsize=1024)
def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate squared distance between two points.

    Args:
        x1, y1: Coordinates of first point
        x2, y2: Coordinates of second point

    Returns:
        Squared Euclidean distance between the points
    """
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


@lru_cache(maxsize=1024)
def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate Euclidean distance between two points.

    Uses LRU cache for repeated queries.
    """
    return math.sqrt(distance_squared(x1, y1, x2, y2))


def circular_gap(a: float, b: float) -> float:
    """Shortest arc between two headings, in [0, 180]."""
    gap = normalize_degrees(a - b)
    return min(gap, FULL_TURN - gap)


def acos_degrees(ratio: float) -> float:
    """Arc cosine in degrees, NaN outside [-1, 1] instead of raising."""
    if not -1.0 <= ratio <= 1.0:
        return math.nan
    return math.degrees(math.acos(ratio))


__all__ = [
    "FULL_TURN",
    "HALF_TURN",
    "QUARTER_TURN",
    "acos_degrees",
    "circular_gap",
    "distance",
    "distance_squared",
    "normalize_degrees",
]
