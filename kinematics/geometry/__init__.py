"""Heading, point and motion value types."""

from .direction import Axis, Direction, UniformIntSource
from .motion import MotionVector
from .position import Position

__all__ = [
    "Axis",
    "Direction",
    "MotionVector",
    "Position",
    "UniformIntSource",
]
