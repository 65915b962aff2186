"""Runtime configuration for the kinematics package."""

from __future__ import annotations

from . import settings

__all__ = ["settings"]
