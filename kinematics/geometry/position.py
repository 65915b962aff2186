"""Planar points and the heading arithmetic that connects them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..utils import math_utils
from ..utils.math_utils import FULL_TURN, HALF_TURN, QUARTER_TURN, acos_degrees
from .direction import Direction

logger = logging.getLogger("kinematics.position")

_THREE_QUARTER_TURN = 270.0


@dataclass(frozen=True)
class Position:
    """Immutable 2D point in screen coordinates (y grows downwards)."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: "Position") -> float:
        return math_utils.distance(self.x, self.y, other.x, other.y)

    def extend_forward(self, direction: Direction, dist: float) -> "Position":
        """Return the point ``dist`` units away from this one along ``direction``.

        Displacement is interpolated linearly inside each 90 degree quadrant
        instead of using sine and cosine, so at 45 degrees both axes move by
        half of ``dist``. Angles of 360 and above (or NaN) do not move the
        point at all.
        """

        angle = direction.angle
        pos_x = self.x
        pos_y = self.y

        if angle < QUARTER_TURN:
            pos_x += (angle / QUARTER_TURN) * dist
            pos_y -= ((QUARTER_TURN - angle) / QUARTER_TURN) * dist
        elif angle < HALF_TURN:
            pos_x += ((HALF_TURN - angle) / QUARTER_TURN) * dist
            pos_y += ((angle - QUARTER_TURN) / QUARTER_TURN) * dist
        elif angle < _THREE_QUARTER_TURN:
            pos_x -= ((angle - HALF_TURN) / QUARTER_TURN) * dist
            pos_y += ((_THREE_QUARTER_TURN - angle) / QUARTER_TURN) * dist
        elif angle < FULL_TURN:
            pos_x -= ((FULL_TURN - angle) / QUARTER_TURN) * dist
            pos_y -= ((angle - _THREE_QUARTER_TURN) / QUARTER_TURN) * dist
        else:
            logger.debug("Heading %.3f outside quadrants, no displacement", angle)
        return Position(pos_x, pos_y)

    def get_dir(self, target: "Position") -> float:
        """Heading in degrees from this point towards ``target``.

        Each quadrant recovers the angle as ``acos(adjacent / hypotenuse)``
        plus the quadrant offset. The bottom-left quadrant divides *after*
        taking the arc cosine of the raw vertical leg, which is a known
        defect kept for compatibility; legs longer than one unit give NaN
        there. Coincident points raise :class:`ZeroDivisionError`.
        """

        hypotenuse = self.distance(target)
        if target.x > self.x:  # right
            if target.y < self.y:  # top right
                return acos_degrees((self.y - target.y) / hypotenuse)
            return QUARTER_TURN + acos_degrees((target.x - self.x) / hypotenuse)
        if target.y > self.y:  # bottom left
            logger.debug("Bottom-left heading from %r to %r", self, target)
            return HALF_TURN + acos_degrees(target.y - self.y) / hypotenuse
        return _THREE_QUARTER_TURN + acos_degrees((self.x - target.x) / hypotenuse)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Position(x={self.x:.3f}, y={self.y:.3f})"


__all__ = ["Position"]
