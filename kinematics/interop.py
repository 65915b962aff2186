"""Conversions between the kinematics value types and pygame vectors."""

from __future__ import annotations

from pygame.math import Vector2

from .geometry.direction import Direction
from .geometry.position import Position
from .utils.math_utils import QUARTER_TURN, normalize_degrees


def position_to_vector(position: Position) -> Vector2:
    return Vector2(position.x, position.y)


def position_from_vector(vector: Vector2) -> Position:
    return Position(float(vector.x), float(vector.y))


def direction_to_vector(direction: Direction, length: float = 1.0) -> Vector2:
    """Return a vector of ``length`` pointing along ``direction``.

    Unlike :meth:`Position.extend_forward` this is a true rotation, so the
    result always has the requested length.
    """

    # pygame rotates from +x towards +y, which is clockwise on screen
    return Vector2(0.0, -length).rotate(direction.angle)


def direction_from_vector(vector: Vector2) -> Direction:
    """Heading of ``vector``; the zero vector maps to heading 0."""

    if vector.length_squared() == 0:
        return Direction(0.0)
    _, phi = vector.as_polar()
    return Direction(normalize_degrees(phi + QUARTER_TURN))


__all__ = [
    "direction_from_vector",
    "direction_to_vector",
    "position_from_vector",
    "position_to_vector",
]
