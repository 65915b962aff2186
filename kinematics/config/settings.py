"""Configuration values for the kinematics primitives."""

from __future__ import annotations

import argparse
import logging
import os
import random
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from .constants import DEFAULTS

logger = logging.getLogger("kinematics.config")

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_FLOAT_FIELDS = {"HEADING_TOLERANCE"}
_OPTIONAL_INT_FIELDS = {"RANDOM_SEED"}

HEADING_TOLERANCE = float(os.getenv("KINEMATICS_HEADING_TOLERANCE", str(DEFAULTS["HEADING_TOLERANCE"])))

CONFIG_ENV_VAR = "KINEMATICS_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/kinematics.yaml")
LOG_DIRECTORY = Path(os.getenv("KINEMATICS_LOG_DIR", DEFAULTS["LOG_DIRECTORY"]))
DEBUG_LOG_FILE = os.getenv("KINEMATICS_DEBUG_LOG", DEFAULTS["DEBUG_LOG_FILE"])
DEBUG_LOG_LEVEL = os.getenv("KINEMATICS_DEBUG_LOG_LEVEL", DEFAULTS["DEBUG_LOG_LEVEL"])


@dataclass(frozen=True)
class KinematicsSettings:
    HEADING_TOLERANCE: float = HEADING_TOLERANCE
    RANDOM_SEED: Optional[int] = None
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL

    def with_updates(self, overrides: Dict[str, Any]) -> "KinematicsSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return KinematicsSettings(**merged)

    def make_rng(self) -> random.Random:
        """Return a fresh random source seeded with ``RANDOM_SEED``.

        The result is meant to be handed to :meth:`Direction.random`; an unset
        seed yields an OS-seeded generator.
        """
        return random.Random(self.RANDOM_SEED)


_ACTIVE_SETTINGS = KinematicsSettings()
_ENV_VARS: Dict[str, str] = {
    "HEADING_TOLERANCE": "KINEMATICS_HEADING_TOLERANCE",
    "RANDOM_SEED": "KINEMATICS_RANDOM_SEED",
    "LOG_DIRECTORY": "KINEMATICS_LOG_DIR",
    "DEBUG_LOG_FILE": "KINEMATICS_DEBUG_LOG",
    "DEBUG_LOG_LEVEL": "KINEMATICS_DEBUG_LOG_LEVEL",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _FLOAT_FIELDS:
        return float(value)
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _OPTIONAL_INT_FIELDS:
        if value is None:
            return None
        return int(_normalize_numeric(value, int))
    if field in _FLOAT_FIELDS:
        return float(_normalize_numeric(value, float))
    return int(_normalize_numeric(value, int))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "HEADING_TOLERANCE": (0.0, 180.0),
    "RANDOM_SEED": (0, 2**63 - 1),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(KinematicsSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    logger.debug("Loaded %d config override(s) from %s", len(overrides), path)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kinematics runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--heading-tolerance", type=float, help="Degrees within which two headings compare as close")
    parser.add_argument("--random-seed", type=int, help="Seed for random sources built from the settings")
    parser.add_argument("--log-directory", type=str, help="Directory for the debug log file")
    parser.add_argument("--debug-log-file", type=str, help="File name of the debug log")
    parser.add_argument("--debug-log-level", type=str, help="Logging level name (DEBUG, INFO, ...)")
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> KinematicsSettings:
    env_mapping = os.environ if env is None else env
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "HEADING_TOLERANCE": parsed.heading_tolerance,
        "RANDOM_SEED": parsed.random_seed,
        "LOG_DIRECTORY": None if parsed.log_directory is None else Path(parsed.log_directory),
        "DEBUG_LOG_FILE": parsed.debug_log_file,
        "DEBUG_LOG_LEVEL": parsed.debug_log_level,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: KinematicsSettings) -> KinematicsSettings:
    global _ACTIVE_SETTINGS

    _ACTIVE_SETTINGS = new_settings
    return _ACTIVE_SETTINGS


def current_settings() -> KinematicsSettings:
    return _ACTIVE_SETTINGS
