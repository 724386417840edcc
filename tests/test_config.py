"""Tests for environment-driven configuration."""

import pytest

from dungeon_robot.config import Config

ENV_VARS = ("ROBOT_STARTING_ENERGY", "ROBOT_LEVEL", "ROBOT_LEVEL_FILE",
            "ROBOT_LOG_FILE", "ROBOT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = Config.from_env()
    cfg.validate()
    assert cfg.starting_energy == 100
    assert cfg.level == "1"
    assert cfg.level_file is None
    assert cfg.log_file == "dungeon_robot.log"
    assert cfg.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROBOT_STARTING_ENERGY", "40")
    monkeypatch.setenv("ROBOT_LEVEL", "training")
    monkeypatch.setenv("ROBOT_LEVEL_FILE", "maps/custom.txt")
    monkeypatch.setenv("ROBOT_LOG_FILE", "")
    monkeypatch.setenv("ROBOT_LOG_LEVEL", "debug")
    cfg = Config.from_env()
    cfg.validate()
    assert cfg.starting_energy == 40
    assert cfg.level == "training"
    assert cfg.level_file == "maps/custom.txt"
    assert cfg.log_file == ""
    assert cfg.log_level == "DEBUG"
    text = cfg.display()
    assert "Starting Energy: 40" in text
    assert "Level: maps/custom.txt" in text
    assert "Log File: (disabled)" in text


def test_environment_is_read_per_call(monkeypatch):
    monkeypatch.setenv("ROBOT_STARTING_ENERGY", "7")
    first = Config.from_env()
    monkeypatch.setenv("ROBOT_STARTING_ENERGY", "8")
    second = Config.from_env()
    first.validate()
    second.validate()
    assert (first.starting_energy, second.starting_energy) == (7, 8)


def test_non_integer_energy_is_reported_by_validate(monkeypatch):
    monkeypatch.setenv("ROBOT_STARTING_ENERGY", "lots")
    cfg = Config.from_env()
    assert cfg.starting_energy == "lots"
    with pytest.raises(ValueError, match="must be an integer"):
        cfg.validate()


def test_validate_rejects_bad_values():
    with pytest.raises(ValueError, match="positive"):
        Config(starting_energy=0).validate()
    with pytest.raises(ValueError, match="logging level"):
        Config(log_level="loud").validate()
