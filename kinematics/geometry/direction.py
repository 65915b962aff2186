"""Headings expressed as degree angles.

Headings use screen orientation: 0 degrees points up (negative y), 90 right,
180 down and 270 left. Adding degrees turns clockwise, subtracting turns
counter-clockwise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from ..config import settings
from ..utils.math_utils import FULL_TURN, HALF_TURN, circular_gap, normalize_degrees

logger = logging.getLogger("kinematics.direction")

_VERTICAL_MIRROR_HIGH = 540.0


class Axis(Enum):
    """Surface orientation used by :meth:`Direction.reflect`."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class UniformIntSource(Protocol):
    """Anything that can sample a uniform integer from ``[start, stop)``.

    :class:`random.Random` satisfies this protocol.
    """

    def randrange(self, start: int, stop: int) -> int:  # pragma: no cover - protocol
        ...


@dataclass(frozen=True)
class Direction:
    """Immutable heading in degrees.

    The angle is stored verbatim; ``add`` and ``subtract`` bring the result
    back into ``[0, 360)`` while ``reflect`` does not renormalise.
    """

    angle: float = 0.0

    @classmethod
    def random(cls, rng: UniformIntSource) -> "Direction":
        """Sample a whole-degree heading uniformly from ``[0, 360)``."""

        sampled = rng.randrange(0, int(FULL_TURN))
        logger.debug("Sampled random heading %d", sampled)
        return cls(float(sampled))

    def reflect(self, axis: Axis) -> "Direction":
        """Mirror the heading as if bouncing off a surface aligned with ``axis``.

        A heading of 15 reflected on :attr:`Axis.VERTICAL` becomes 165, while
        on :attr:`Axis.HORIZONTAL` it becomes 345.

        Vertical reflection leaves exactly 180 untouched. Horizontal
        reflection of exactly 0 yields 360, outside the canonical range.
        """

        if axis == Axis.VERTICAL:
            if self.angle < HALF_TURN:  # heading right
                return Direction(HALF_TURN - self.angle)
            if self.angle > HALF_TURN:  # heading left
                return Direction(_VERTICAL_MIRROR_HIGH - self.angle)
            logger.debug("Vertical reflect of %.3f left unchanged", self.angle)
            return self
        mirrored = FULL_TURN - self.angle
        if mirrored >= FULL_TURN:
            logger.debug("Horizontal reflect of %.3f produced %.3f", self.angle, mirrored)
        return Direction(mirrored)

    @staticmethod
    def difference(first: "Direction", second: "Direction") -> float:
        """Absolute separation of two headings folded into ``[0, 180)``.

        The fold happens every 180 degrees, so headings 10 and 190 degrees
        apart both report 10. This is not the shortest arc.
        """

        return abs(first.angle - second.angle) % HALF_TURN

    def subtract(self, amount: float) -> "Direction":
        """Rotate counter-clockwise by ``amount`` degrees."""

        return Direction(normalize_degrees(self.angle - amount))

    def add(self, amount: float) -> "Direction":
        """Rotate clockwise by ``amount`` degrees."""

        return Direction(normalize_degrees(self.angle + amount))

    def opposite(self) -> "Direction":
        return Direction(normalize_degrees(self.angle + HALF_TURN))

    def is_cw_of(self, other: "Direction") -> bool:
        """Return whether this heading lies clockwise of ``other``.

        Headings below 180 form the right half and headings above 180 the
        left half. When ``a.is_cw_of(b)`` and ``b.is_cw_of(a)`` are both
        False the two headings are exactly opposite, equal, or one of them
        sits exactly on 180.
        """

        own = self.angle
        theirs = other.angle
        if own > HALF_TURN:  # left half
            if theirs > HALF_TURN:
                if own < theirs:
                    return False
                if own > theirs:
                    return True
            elif theirs < HALF_TURN:
                # arc opens to the bottom when the gap is under half a turn
                if own - theirs < HALF_TURN:
                    return True
                if own - theirs > HALF_TURN:
                    return False
        elif own < HALF_TURN:  # right half
            if theirs < HALF_TURN:
                if own < theirs:
                    return False
                if own > theirs:
                    return True
            elif theirs > HALF_TURN:
                if theirs - own < HALF_TURN:
                    return False
                if theirs - own > HALF_TURN:
                    return True
        return False

    def is_close(self, other: "Direction", tolerance: Optional[float] = None) -> bool:
        """Circular comparison, so 359.9 and 0.0 are close for tolerance 0.2."""

        if tolerance is None:
            tolerance = settings.current_settings().HEADING_TOLERANCE
        return circular_gap(self.angle, other.angle) <= tolerance

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Direction(angle={self.angle:.3f})"


__all__ = ["Axis", "Direction", "UniformIntSource"]
