"""2D heading, position and motion primitives for simulations and games."""

from __future__ import annotations

from .config import settings as settings
from .geometry import Axis, Direction, MotionVector, Position, UniformIntSource

__all__ = [
    "Axis",
    "Direction",
    "MotionVector",
    "Position",
    "UniformIntSource",
    "settings",
]
