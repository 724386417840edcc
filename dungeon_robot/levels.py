"""Built-in level layouts and the level text file loader."""

import logging
import pathlib

from .world import LevelError

logger = logging.getLogger(__name__)

# '#' wall  '.' floor  'S' start  'E' exit  'K' key  'D' door  '^' trap
LEVEL_1 = (
    "########################",
    "#S....#.......#.......E#",
    "#.##.#.#####.#.#####.###",
    "#....#.....#.#.....#...#",
    "###.#####.#.#.###.#.#.#",
    "#...#..K..#.#...#.#.#.#",
    "#.#.#.###.#.###.#.#.#.#",
    "#.#...#...#...#.#...#.#",
    "#.#####.#####.#.#####.#",
    "#.....#.....D.#.....#.#",
    "###.#.###.###.#.###.#.#",
    "#...#.....^.....#.....#",
    "########################",
)

# Short corridor that walks through every tile type once
TRAINING = (
    "#########",
    "#S.K.D.E#",
    "#..^....#",
    "#########",
)

LEVELS = {
    '1':        LEVEL_1,
    'training': TRAINING,
}

DEFAULT_LEVEL = '1'


def get_level(name=DEFAULT_LEVEL):
    """Return the rows of a built-in level."""
    try:
        return LEVELS[name]
    except KeyError:
        known = ', '.join(sorted(LEVELS))
        raise LevelError(f"unknown level {name!r} (known: {known})") from None


def load_level_file(path):
    """Read a level from a UTF-8 text file, one map row per line."""
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise LevelError(f"cannot read level file {path}: {exc}") from exc

    rows = [line.rstrip('\r\n') for line in text.splitlines()]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise LevelError(f"level file {path} is empty")
    logger.info("loaded level file %s (%d rows)", path, len(rows))
    return tuple(rows)
