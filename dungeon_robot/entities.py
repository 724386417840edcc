"""Game entity classes — zero curses dependency."""

import enum

from .constants import (BASE_VISION_RADIUS, BASE_MOVE_COST, SENSOR_BONUS,
                        SENSOR_NAME, EFFICIENCY_NAME, WALL, EMPTY, KEY, DOOR,
                        TRAP, EXIT)


class TileType(enum.Enum):
    EMPTY = 'empty'
    WALL  = 'wall'
    KEY   = 'key'
    DOOR  = 'door'
    TRAP  = 'trap'
    EXIT  = 'exit'


# Level character -> tile type. Anything not listed is EMPTY.
CHAR_TO_TILE = {
    WALL: TileType.WALL,
    KEY:  TileType.KEY,
    DOOR: TileType.DOOR,
    TRAP: TileType.TRAP,
    EXIT: TileType.EXIT,
}

TILE_GLYPHS = {
    TileType.EMPTY: EMPTY,
    TileType.WALL:  WALL,
    TileType.KEY:   KEY,
    TileType.DOOR:  DOOR,
    TileType.TRAP:  TRAP,
    TileType.EXIT:  EXIT,
}


def char_to_tile(ch):
    return CHAR_TO_TILE.get(ch, TileType.EMPTY)


class Tile:
    __slots__ = ('type', 'discovered')

    def __init__(self, tile_type):
        self.type       = tile_type
        self.discovered = False

    def turn_into(self, new_type):
        """Rewrite the tile type in place. Walls are permanent."""
        if TileType.WALL in (self.type, new_type):
            raise ValueError(f"cannot turn {self.type.name} into {new_type.name}")
        self.type = new_type

    def __repr__(self):
        return f"Tile({self.type.name}, discovered={self.discovered})"


class Module:
    """A togglable robot module. Disabled modules leave every stat alone."""

    def __init__(self, name):
        self.name    = name
        self.enabled = False

    def toggle(self):
        self.enabled = not self.enabled

    def modify_vision_radius(self, base):
        return base

    def modify_move_energy_cost(self, base):
        return base


class SensorModule(Module):
    def __init__(self):
        super().__init__(SENSOR_NAME)

    def modify_vision_radius(self, base):
        return base + SENSOR_BONUS if self.enabled else base


class EfficiencyModule(Module):
    def __init__(self):
        super().__init__(EFFICIENCY_NAME)

    def modify_move_energy_cost(self, base):
        return max(1, base // 2) if self.enabled else base


class Player:
    """The robot. Position, keys, energy and its ordered module rack."""

    def __init__(self, x, y, energy):
        self.x      = x
        self.y      = y
        self.keys   = 0
        self.energy = energy
        self.alive  = True
        self.base_vision_radius = BASE_VISION_RADIUS
        self.base_move_cost     = BASE_MOVE_COST
        self.modules = [SensorModule(), EfficiencyModule()]

    @property
    def pos(self):
        return self.x, self.y

    def current_vision_radius(self):
        """Base vision radius folded through every module, in rack order."""
        radius = self.base_vision_radius
        for module in self.modules:
            radius = module.modify_vision_radius(radius)
        return radius

    def current_move_energy_cost(self):
        """Base move cost folded through every module, in rack order."""
        cost = self.base_move_cost
        for module in self.modules:
            cost = module.modify_move_energy_cost(cost)
        return cost

    def add_key(self):
        self.keys += 1

    def use_key(self):
        if self.keys > 0:
            self.keys -= 1
            return True
        return False

    def damage_by_trap(self):
        self.alive = False

    def consume_energy(self, amount):
        self.energy -= amount
        if self.energy <= 0:
            self.energy = 0
            self.alive  = False

    def move_to(self, x, y):
        self.x, self.y = x, y

    def toggle_module(self, index):
        """Toggle the module at `index`; out-of-range indices are ignored."""
        if 0 <= index < len(self.modules):
            self.modules[index].toggle()
