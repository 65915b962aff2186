"""Tests for the runtime configuration loader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from kinematics import Direction
from kinematics.config import settings


def _write_tmp_config(tmp_path: Path, content: str) -> Path:
    file_path = tmp_path / "conf.yaml"
    file_path.write_text(content, encoding="utf-8")
    return file_path


def test_defaults_without_overrides():
    conf = settings.load_runtime_settings(args=[], env={"PATH": ""})
    assert conf.HEADING_TOLERANCE == pytest.approx(1e-6)
    assert conf.RANDOM_SEED is None
    assert conf.DEBUG_LOG_LEVEL == "INFO"


def test_env_overrides_take_effect(monkeypatch):
    monkeypatch.setenv("KINEMATICS_HEADING_TOLERANCE", "0.5")
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.HEADING_TOLERANCE == 0.5


def test_cli_overrides_take_precedence():
    conf = settings.load_runtime_settings(args=["--heading-tolerance", "2.5"])
    assert conf.HEADING_TOLERANCE == 2.5


def test_config_file_used_when_provided(tmp_path):
    config = _write_tmp_config(tmp_path, "heading_tolerance: 0.25\nrandom_seed: 42\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)])
    assert conf.HEADING_TOLERANCE == 0.25
    assert conf.RANDOM_SEED == 42


def test_config_file_from_env(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "debug_log_level: debug\n")
    monkeypatch.setenv("KINEMATICS_CONFIG_FILE", str(config))
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.DEBUG_LOG_LEVEL == "DEBUG"


def test_env_overrides_config(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "random_seed: 1\n")
    monkeypatch.setenv("KINEMATICS_RANDOM_SEED", "2")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env=os.environ)
    assert conf.RANDOM_SEED == 2


def test_cli_overrides_config_and_env(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "random_seed: 1\n")
    monkeypatch.setenv("KINEMATICS_RANDOM_SEED", "2")
    conf = settings.load_runtime_settings(args=["--config", str(config), "--random-seed", "3"], env=os.environ)
    assert conf.RANDOM_SEED == 3


def test_log_directory_is_a_path(tmp_path):
    config = _write_tmp_config(tmp_path, f"log_directory: {tmp_path / 'logs'}\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)])
    assert conf.LOG_DIRECTORY == tmp_path / "logs"


def test_invalid_field_in_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "unknown_value: 1\n")
    with pytest.raises(ValueError, match="Unknown config field"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_non_mapping_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ValueError, match="must define a mapping"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_invalid_yaml_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "heading_tolerance: [1\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_missing_config_file_errors(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        settings.load_runtime_settings(args=["--config", str(missing)])


def test_invalid_numeric_range_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "heading_tolerance: 500\n")
    with pytest.raises(ValueError, match="HEADING_TOLERANCE"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_invalid_log_level_raises():
    with pytest.raises(ValueError, match="DEBUG_LOG_LEVEL"):
        settings.load_runtime_settings(args=["--debug-log-level", "chatty"])


def test_seeded_rng_is_reproducible():
    conf = settings.load_runtime_settings(args=["--random-seed", "7"])
    first_rng = conf.make_rng()
    second_rng = conf.make_rng()
    first = [Direction.random(first_rng) for _ in range(4)]
    second = [Direction.random(second_rng) for _ in range(4)]
    assert first == second


def test_apply_runtime_settings_changes_default_tolerance():
    previous = settings.current_settings()
    try:
        settings.apply_runtime_settings(previous.with_updates({"HEADING_TOLERANCE": 1.0}))
        assert Direction(10.0).is_close(Direction(10.5))
    finally:
        settings.apply_runtime_settings(previous)
    assert not Direction(10.0).is_close(Direction(10.5))


def test_empty_env_mapping_ignores_process_environment(monkeypatch):
    monkeypatch.setenv("KINEMATICS_HEADING_TOLERANCE", "0.5")
    conf = settings.load_runtime_settings(args=[], env={})
    assert conf.HEADING_TOLERANCE == pytest.approx(1e-6)
