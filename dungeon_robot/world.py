"""Tile map and radius visibility. Nothing here touches curses."""

import logging

from .constants import WALL
from .entities import Tile, char_to_tile

logger = logging.getLogger(__name__)


class LevelError(ValueError):
    """Raised when a level layout cannot be turned into a playable map."""


class Map:
    """Fixed-size grid of tiles built from level text rows.

    Cells live in one dense list indexed ``y * width + x``. Columns missing
    from a short row are filled with walls.
    """

    def __init__(self, layout):
        layout = list(layout)
        if not layout:
            raise LevelError("level layout has no rows")
        self.height = len(layout)
        self.width  = max(len(row) for row in layout)
        if self.width == 0:
            raise LevelError("level layout rows are all empty")

        self.cells = []
        for row in layout:
            for x in range(self.width):
                ch = row[x] if x < len(row) else WALL
                self.cells.append(Tile(char_to_tile(ch)))
        logger.debug("built %dx%d map", self.width, self.height)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} map")
        return self.cells[y * self.width + x]

    def rows(self):
        """Yield each row of tiles, top to bottom."""
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def cells_in_radius(self, cx, cy, radius):
        """Yield every in-bounds (x, y) with squared distance <= radius**2."""
        if radius < 0:
            return
        r2 = radius * radius
        for y in range(max(0, cy - radius), min(self.height - 1, cy + radius) + 1):
            for x in range(max(0, cx - radius), min(self.width - 1, cx + radius) + 1):
                dx, dy = x - cx, y - cy
                if dx * dx + dy * dy <= r2:
                    yield x, y

    def discover_radius(self, cx, cy, radius):
        """Mark every cell within `radius` of (cx, cy) as discovered."""
        for x, y in self.cells_in_radius(cx, cy, radius):
            self.cells[y * self.width + x].discovered = True


def visible_cells(game_map, cx, cy, radius):
    """Return the set of (x, y) cells currently in sight. Nothing is persisted."""
    return set(game_map.cells_in_radius(cx, cy, radius))
