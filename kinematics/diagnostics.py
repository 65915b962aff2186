"""Debug log wiring for the kinematics package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import settings

ROOT_LOGGER_NAME = "kinematics"


def initialise_logger(runtime_settings: Optional[settings.KinematicsSettings] = None) -> logging.Logger:
    """Attach a file handler to the ``kinematics`` logger hierarchy.

    Calling it again once a handler is attached returns the existing logger
    untouched.
    """

    runtime_settings = runtime_settings or settings.current_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if logger.handlers:
        return logger

    log_dir = runtime_settings.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / runtime_settings.DEBUG_LOG_FILE

    level_name = str(runtime_settings.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "initialise_logger"]
