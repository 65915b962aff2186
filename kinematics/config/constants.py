"""Constant values for the kinematics primitives."""

from __future__ import annotations

DEFAULTS = {
    "HEADING_TOLERANCE": 1e-6,
    "LOG_DIRECTORY": "logs",
    "DEBUG_LOG_FILE": "kinematics_debug.log",
    "DEBUG_LOG_LEVEL": "INFO",
}
