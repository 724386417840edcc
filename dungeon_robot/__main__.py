"""Entry point — run with: python3 -m dungeon_robot"""

import argparse
import curses
import logging
import os
import sys
from textwrap import dedent

from . import ui
from .config import Config
from .game import GameEngine, GameState
from .levels import LEVELS, get_level, load_level_file
from .world import LevelError

logger = logging.getLogger(__name__)

EXIT_WON         = 0
EXIT_LOST        = 1
EXIT_SETUP_ERROR = 2


# ── Command line ─────────────────────────────────────────────────────────────

def parse_args(argv):
    epilog = dedent(
        """
        Environment variables (also read from a .env file):
          ROBOT_STARTING_ENERGY  Energy at the start of a game (default: 100)
          ROBOT_LEVEL            Built-in level name (default: 1)
          ROBOT_LEVEL_FILE       Path to a level text file
          ROBOT_LOG_FILE         Log file path, empty to disable (default: dungeon_robot.log)
          ROBOT_LOG_LEVEL        DEBUG, INFO, WARNING or ERROR (default: INFO)

        Controls:
          Arrows / WASD   move the robot
          1 / 2           toggle the Sensor / Efficiency module
          Q / Esc         give up
        """
    )
    parser = argparse.ArgumentParser(
        prog="dungeon-robot",
        description="Guide the robot to the exit before its energy runs out.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--level",
        choices=sorted(LEVELS),
        default=None,
        help="Built-in level to play (default: env ROBOT_LEVEL or 1)",
    )
    parser.add_argument(
        "--level-file",
        dest="level_file",
        default=None,
        help="Play a level from a text file instead of a built-in one",
    )
    parser.add_argument(
        "--energy",
        type=int,
        default=None,
        help="Starting energy (default: env ROBOT_STARTING_ENERGY or 100)",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write the game log here; pass an empty string to disable",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (default: env ROBOT_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved configuration and exit",
    )
    return parser.parse_args(argv)


def apply_overrides(config, args):
    """Copy CLI flags over the environment-derived values of this run's config."""
    if args.energy is not None:
        config.starting_energy = args.energy
    if args.level_file is not None:
        config.level_file = args.level_file
    elif args.level is not None:
        config.level      = args.level
        config.level_file = None
    if args.log_file is not None:
        config.log_file = args.log_file
    if args.log_level is not None:
        config.log_level = args.log_level.upper()
    return config


def setup_logging(log_file, level):
    """Send logs to a file; curses owns the terminal while the game runs."""
    if not log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, mode='w')
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)


def resolve_layout(config):
    if config.level_file:
        return load_level_file(config.level_file)
    return get_level(config.level)


# ── Curses session ───────────────────────────────────────────────────────────

def play(stdscr, engine):
    """Run one game inside curses. Returns the terminal GameState."""
    curses.curs_set(0)
    stdscr.keypad(True)
    ui.setup_colors()

    state = engine.run(lambda e: ui.draw(stdscr, e),
                       lambda: ui.read_command(stdscr))
    ui.show_end_screen(stdscr, engine)
    return state


def _prepare_terminal():
    """Clear the console before curses starts."""
    if sys.platform == 'win32':
        os.system('cls')
    else:
        # Clear visible screen + scrollback so the prompt history is gone
        sys.stdout.write('\033[2J\033[3J\033[H')
        sys.stdout.flush()


# ── Main ─────────────────────────────────────────────────────────────────────

def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = apply_overrides(Config.from_env(), args)
    try:
        config.validate()
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_SETUP_ERROR

    if args.show_config:
        print(config.display())
        return 0

    try:
        setup_logging(config.log_file, config.log_level)
    except OSError as exc:
        print(f"[ERROR] cannot open log file {config.log_file}: {exc}", file=sys.stderr)
        return EXIT_SETUP_ERROR

    try:
        engine = GameEngine(resolve_layout(config), starting_energy=config.starting_energy)
    except LevelError as exc:
        logger.error("cannot start game: %s", exc)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_SETUP_ERROR

    _prepare_terminal()
    state = curses.wrapper(play, engine)
    print(ui.end_message(state))
    return EXIT_WON if state is GameState.WON else EXIT_LOST


if __name__ == '__main__':
    raise SystemExit(main())
