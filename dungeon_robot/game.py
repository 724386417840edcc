"""Game engine: level setup, the move/interaction state machine and the turn loop."""

import collections
import enum
import logging

from .constants import START, EXIT, STARTING_ENERGY, LOG_LINES, ON_LABEL, OFF_LABEL
from .entities import Player, TileType
from .world import Map, LevelError, visible_cells

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    RUNNING = 'running'
    WON     = 'won'
    LOST    = 'lost'


class Command(collections.namedtuple('Command', 'move toggle forfeit')):
    """One decoded input event.

    move    -- (dx, dy) step or None
    toggle  -- module index or None
    forfeit -- give up the game (counts as a loss)

    Toggle and move are independent, so one event may carry both.
    """
    __slots__ = ()

    def __new__(cls, move=None, toggle=None, forfeit=False):
        return super().__new__(cls, move, toggle, forfeit)


UP    = Command(move=( 0, -1))
DOWN  = Command(move=( 0,  1))
LEFT  = Command(move=(-1,  0))
RIGHT = Command(move=( 1,  0))
QUIT  = Command(forfeit=True)
NOOP  = Command()


def find_markers(layout):
    """Return the level with 'S' replaced by floor, plus the start and exit positions.

    A level needs exactly one 'S' and one 'E'.
    """
    starts, exits = [], []
    rows = []
    for y, row in enumerate(layout):
        for x, ch in enumerate(row):
            if ch == START:
                starts.append((x, y))
            elif ch == EXIT:
                exits.append((x, y))
        rows.append(row.replace(START, '.'))

    if len(starts) != 1:
        raise LevelError(f"level needs exactly one '{START}' start marker, found {len(starts)}")
    if len(exits) != 1:
        raise LevelError(f"level needs exactly one '{EXIT}' exit marker, found {len(exits)}")
    return rows, starts[0], exits[0]


class GameEngine:
    """Owns the map and the robot and moves the game between states."""

    def __init__(self, layout, starting_energy=STARTING_ENERGY):
        if starting_energy <= 0:
            raise ValueError(f"starting energy must be positive, got {starting_energy}")
        rows, self.start_pos, self.exit_pos = find_markers(layout)
        self.map      = Map(rows)
        self.player   = Player(*self.start_pos, starting_energy)
        self.state    = GameState.RUNNING
        self.turns    = 0
        self.messages = collections.deque(maxlen=LOG_LINES)   # index 0 = newest

        self.map.discover_radius(*self.player.pos, self.player.current_vision_radius())
        logger.info("game started: %dx%d map, start=%s exit=%s energy=%d",
                    self.map.width, self.map.height, self.start_pos,
                    self.exit_pos, starting_energy)

    @property
    def is_over(self):
        return self.state is not GameState.RUNNING

    def visible_cells(self):
        """Cells inside the robot's current vision radius (recomputed on every call)."""
        return visible_cells(self.map, *self.player.pos,
                             self.player.current_vision_radius())

    def _finish(self, state, message):
        if self.is_over:
            return
        self.state = state
        self.messages.appendleft(message)
        logger.info("game over: %s after %d moves (%s)", state.value, self.turns, message)

    # ── Input ────────────────────────────────────────────────────────────────

    def handle_command(self, command):
        """Apply one input event. Returns False once the game has ended."""
        if self.is_over:
            return False

        if command.toggle is not None:
            self.toggle_module(command.toggle)

        if command.forfeit:
            self._finish(GameState.LOST, "Mission aborted.")
            return False

        if command.move is not None:
            dx, dy = command.move
            self.try_move(self.player.x + dx, self.player.y + dy)

        return not self.is_over

    def toggle_module(self, index):
        modules = self.player.modules
        if not 0 <= index < len(modules):
            return
        self.player.toggle_module(index)
        module = modules[index]
        label  = ON_LABEL if module.enabled else OFF_LABEL
        self.messages.appendleft(f"{module.name} module {label}.")
        logger.info("module %s toggled %s", module.name, label)

    # ── Movement ─────────────────────────────────────────────────────────────

    def try_move(self, nx, ny):
        """Attempt to step onto (nx, ny), resolving doors, keys, traps and the exit."""
        player = self.player
        if not self.map.in_bounds(nx, ny):
            return
        dest = self.map.get(nx, ny)
        if dest.type is TileType.WALL:
            return

        if dest.type is TileType.DOOR:
            if not player.use_key():
                self.messages.appendleft("The door is locked. Find a key.")
                return
            dest.turn_into(TileType.EMPTY)
            self.messages.appendleft("Door unlocked.")
            logger.info("door at (%d, %d) unlocked, %d key(s) left", nx, ny, player.keys)

        cost = player.current_move_energy_cost()
        player.consume_energy(cost)
        if not player.alive:
            self._finish(GameState.LOST, "Energy depleted.")
            return

        player.move_to(nx, ny)
        self.turns += 1
        logger.debug("move %d to (%d, %d), cost=%d energy=%d",
                     self.turns, nx, ny, cost, player.energy)

        if dest.type is TileType.KEY:
            player.add_key()
            dest.turn_into(TileType.EMPTY)
            self.messages.appendleft("Picked up a key.")
            logger.info("key picked up at (%d, %d), keys=%d", nx, ny, player.keys)
        elif dest.type is TileType.TRAP:
            player.damage_by_trap()
            self._finish(GameState.LOST, "The robot triggered a trap!")
        elif dest.type is TileType.EXIT:
            self._finish(GameState.WON, "Exit reached!")

        self.map.discover_radius(nx, ny, player.current_vision_radius())

    # ── Turn loop ────────────────────────────────────────────────────────────

    def run(self, render, read_command):
        """Render, block for one command, apply it; repeat until the game ends.

        `render` receives the engine and must not mutate it. The final frame
        is rendered once more before the terminal state is returned.
        """
        while not self.is_over:
            render(self)
            self.handle_command(read_command())
        render(self)
        return self.state
