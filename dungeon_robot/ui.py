"""All curses rendering and input decoding."""

import curses
import logging

from .constants import *
from .entities import TileType, TILE_GLYPHS
from .game import Command, UP, DOWN, LEFT, RIGHT, QUIT, NOOP, GameState

logger = logging.getLogger(__name__)

# Per-cell visibility states handed to the drawing code
SEEN_PLAYER = 'player'
SEEN_NOW    = 'visible'
SEEN_BEFORE = 'remembered'
SEEN_NEVER  = 'hidden'

KEY_COMMANDS = {
    curses.KEY_UP:    UP,
    curses.KEY_DOWN:  DOWN,
    curses.KEY_LEFT:  LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('w'):         UP,
    ord('s'):         DOWN,
    ord('a'):         LEFT,
    ord('d'):         RIGHT,
    ord('1'):         Command(toggle=0),
    ord('2'):         Command(toggle=1),
    ord('q'):         QUIT,
    ord('Q'):         QUIT,
    27:               QUIT,   # Esc
}

TILE_COLORS = {
    TileType.WALL: COLOR_WALL,
    TileType.KEY:  COLOR_KEY,
    TileType.DOOR: COLOR_DOOR,
    TileType.TRAP: COLOR_HAZARD,
    TileType.EXIT: COLOR_EXIT,
}


def glyph_for(tile_type):
    return TILE_GLYPHS.get(tile_type, UNKNOWN)


def decode_key(key):
    """Map a curses key code to a Command; unknown keys do nothing."""
    return KEY_COMMANDS.get(key, NOOP)


def read_command(stdscr):
    """Block until a key is pressed and decode it."""
    key = stdscr.getch()
    command = decode_key(key)
    logger.debug("key %r -> %s", key, command)
    return command


# ── Frame building (pure) ────────────────────────────────────────────────────

def frame_cells(engine):
    """Return rows of (glyph, seen_state, tile_type) for the current snapshot.

    Only reads the engine: the visible set is recomputed here and never
    written back to the map.
    """
    player  = engine.player
    visible = engine.visible_cells()
    rows = []
    for y, tiles in enumerate(engine.map.rows()):
        row = []
        for x, tile in enumerate(tiles):
            if (x, y) == player.pos:
                row.append((PLAYER, SEEN_PLAYER, tile.type))
            elif (x, y) in visible:
                row.append((glyph_for(tile.type), SEEN_NOW, tile.type))
            elif tile.discovered:
                row.append((glyph_for(tile.type), SEEN_BEFORE, tile.type))
            else:
                row.append((HIDDEN, SEEN_NEVER, tile.type))
        rows.append(row)
    return rows


def module_labels(player):
    return [f"{i + 1}:{m.name}[{ON_LABEL if m.enabled else OFF_LABEL}]"
            for i, m in enumerate(player.modules)]


def status_lines(engine):
    player = engine.player
    return [
        f"Energy: {player.energy}   Keys: {player.keys}   Moves: {engine.turns}",
        "  ".join(module_labels(player)),
        HINT,
    ]


def frame_lines(engine):
    """Plain-text frame: map rows, a blank line, then the status lines."""
    lines = [''.join(ch for ch, _, _ in row) for row in frame_cells(engine)]
    lines.append('')
    lines.extend(status_lines(engine))
    return lines


# ── Curses drawing ───────────────────────────────────────────────────────────

def setup_colors():
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_WALL,   curses.COLOR_WHITE,   -1)
    curses.init_pair(COLOR_FLOOR,  curses.COLOR_BLACK,   -1)
    curses.init_pair(COLOR_PLAYER, curses.COLOR_YELLOW,  -1)
    curses.init_pair(COLOR_PANEL,  curses.COLOR_CYAN,    -1)
    curses.init_pair(COLOR_LOW,    curses.COLOR_RED,     -1)
    curses.init_pair(COLOR_DARK,   curses.COLOR_WHITE,   -1)
    curses.init_pair(COLOR_KEY,    curses.COLOR_GREEN,   -1)
    curses.init_pair(COLOR_EXIT,   curses.COLOR_MAGENTA, -1)
    curses.init_pair(COLOR_DOOR,   curses.COLOR_YELLOW,  -1)
    curses.init_pair(COLOR_HAZARD, curses.COLOR_RED,     -1)


def _cell_attr(seen, tile_type):
    if seen == SEEN_PLAYER:
        return curses.color_pair(COLOR_PLAYER) | curses.A_BOLD
    if seen == SEEN_BEFORE:
        return curses.color_pair(COLOR_DARK) | curses.A_DIM
    if seen == SEEN_NEVER:
        return 0
    cp = TILE_COLORS.get(tile_type)
    if cp is None:
        return curses.color_pair(COLOR_FLOOR) | curses.A_DIM
    return curses.color_pair(cp) | curses.A_BOLD


def draw(stdscr, engine):
    """Draw the map, the status panel and the message log."""
    stdscr.erase()
    term_h, term_w = stdscr.getmaxyx()

    # --- Map area ---
    cells = frame_cells(engine)
    for sy, row in enumerate(cells):
        if sy >= term_h:
            break
        for sx, (ch, seen, tile_type) in enumerate(row):
            if sx >= term_w - 1:
                break
            try:
                stdscr.addch(sy, sx, ch, _cell_attr(seen, tile_type))
            except curses.error:
                pass

    # --- Status panel ---
    panel_attr = curses.color_pair(COLOR_PANEL)
    energy_attr = (curses.color_pair(COLOR_LOW) | curses.A_BOLD
                   if engine.player.energy <= LOW_ENERGY else panel_attr)
    row = len(cells) + 1
    for i, text in enumerate(status_lines(engine)):
        attr = energy_attr if i == 0 else panel_attr
        try:
            stdscr.addstr(row + i, 0, text[: term_w - 1], attr)
        except curses.error:
            pass

    # --- Message log ---
    row += len(status_lines(engine)) + 1
    for i, text in enumerate(engine.messages):
        attr = curses.A_BOLD if i == 0 else (0 if i == 1 else curses.A_DIM)
        try:
            stdscr.addstr(row + i, 0, text[: term_w - 1], attr)
        except curses.error:
            pass

    stdscr.refresh()


def end_message(state):
    return WIN_MESSAGE if state is GameState.WON else LOSE_MESSAGE


def show_end_screen(stdscr, engine):
    """Draw the final frame with the outcome and wait for a key."""
    draw(stdscr, engine)
    term_h, term_w = stdscr.getmaxyx()
    attr = (curses.color_pair(COLOR_KEY) if engine.state is GameState.WON
            else curses.color_pair(COLOR_LOW)) | curses.A_BOLD
    try:
        stdscr.addstr(term_h - 2, 0, end_message(engine.state)[: term_w - 1], attr)
        stdscr.addstr(term_h - 1, 0, "Press any key."[: term_w - 1])
    except curses.error:
        pass
    stdscr.refresh()
    stdscr.getch()
