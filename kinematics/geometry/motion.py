"""Instantaneous kinematic state of a moving entity."""

from __future__ import annotations

from dataclasses import dataclass

from .direction import Direction
from .position import Position


@dataclass(frozen=True)
class MotionVector:
    """Where an entity is, where it is heading and how fast.

    A passive bundle: nothing relates the three fields to each other, and
    moving an entity means building a new ``MotionVector``.
    """

    position: Position
    direction: Direction
    rate: float

    def get_position(self) -> Position:
        return self.position

    def get_direction(self) -> Direction:
        return self.direction

    def get_rate(self) -> float:
        return self.rate


__all__ = ["MotionVector"]
