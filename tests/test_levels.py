"""Tests for built-in levels and the level file loader."""

import pytest

from dungeon_robot.game import GameEngine, GameState
from dungeon_robot.levels import LEVELS, TRAINING, get_level, load_level_file
from dungeon_robot.world import LevelError


@pytest.mark.parametrize("name", sorted(LEVELS))
def test_builtin_levels_are_playable(name):
    engine = GameEngine(get_level(name))
    assert engine.state is GameState.RUNNING
    assert engine.map.get(*engine.start_pos).discovered


def test_default_level():
    assert get_level() is LEVELS['1']


def test_unknown_level():
    with pytest.raises(LevelError, match="unknown level"):
        get_level('nope')


def test_load_level_file_strips_line_endings_and_trailing_blanks(tmp_path):
    path = tmp_path / "level.txt"
    path.write_bytes(b"#####\r\n#S.E#\r\n####\r\n\r\n\n")
    rows = load_level_file(path)
    assert rows == ("#####", "#S.E#", "####")
    engine = GameEngine(rows)
    assert engine.exit_pos == (3, 1)


def test_load_level_file_missing(tmp_path):
    with pytest.raises(LevelError, match="cannot read"):
        load_level_file(tmp_path / "missing.txt")


def test_load_level_file_not_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"S.\xff.E\n")
    with pytest.raises(LevelError, match="cannot read"):
        load_level_file(path)


def test_load_level_file_empty(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(LevelError, match="empty"):
        load_level_file(path)


def test_training_level_can_be_finished():
    engine = GameEngine(TRAINING)
    for _ in range(6):
        engine.try_move(engine.player.x + 1, engine.player.y)
    assert engine.state is GameState.WON
    assert engine.player.keys == 0
