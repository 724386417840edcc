"""Tests for modules and the player's derived stats and resources."""

from dungeon_robot.entities import (EfficiencyModule, Module, Player,
                                    SensorModule, TileType, char_to_tile)


def test_char_to_tile_defaults_to_empty():
    assert char_to_tile('#') is TileType.WALL
    assert char_to_tile('S') is TileType.EMPTY
    assert char_to_tile('?') is TileType.EMPTY


def test_modules_start_disabled_and_are_identity():
    for module in (SensorModule(), EfficiencyModule()):
        assert module.enabled is False
        assert module.modify_vision_radius(3) == 3
        assert module.modify_move_energy_cost(2) == 2


def test_sensor_only_changes_vision():
    sensor = SensorModule()
    sensor.toggle()
    assert sensor.modify_vision_radius(3) == 5
    assert sensor.modify_move_energy_cost(2) == 2
    sensor.toggle()
    assert sensor.modify_vision_radius(3) == 3


def test_efficiency_halves_with_floor_of_one():
    eff = EfficiencyModule()
    eff.toggle()
    assert eff.modify_move_energy_cost(2) == 1
    assert eff.modify_move_energy_cost(5) == 2
    assert eff.modify_move_energy_cost(1) == 1
    assert eff.modify_vision_radius(3) == 3


def test_player_defaults():
    p = Player(2, 3, 100)
    assert p.pos == (2, 3)
    assert (p.keys, p.energy, p.alive) == (0, 100, True)
    assert [m.name for m in p.modules] == ['Sensor', 'Efficiency']
    assert p.current_vision_radius() == 3
    assert p.current_move_energy_cost() == 2


def test_toggle_sensor_changes_vision_by_two():
    p = Player(0, 0, 100)
    p.toggle_module(0)
    assert p.current_vision_radius() == 5
    p.toggle_module(0)
    assert p.current_vision_radius() == 3


def test_toggle_efficiency_halves_move_cost():
    p = Player(0, 0, 100)
    p.toggle_module(1)
    assert p.current_move_energy_cost() == 1
    assert p.current_vision_radius() == 3


def test_toggle_out_of_range_is_silent():
    p = Player(0, 0, 100)
    p.toggle_module(2)
    p.toggle_module(-1)
    assert not any(m.enabled for m in p.modules)


class _Doubler(Module):
    def __init__(self):
        super().__init__('Doubler')

    def modify_vision_radius(self, base):
        return base * 2 if self.enabled else base


def test_modules_fold_in_rack_order():
    p = Player(0, 0, 100)
    p.modules.append(_Doubler())
    p.toggle_module(0)
    p.toggle_module(2)
    # (3 + 2) * 2, not 3 * 2 + 2
    assert p.current_vision_radius() == 10


def test_keys():
    p = Player(0, 0, 100)
    assert p.use_key() is False
    assert p.keys == 0
    p.add_key()
    p.add_key()
    assert p.use_key() is True
    assert p.keys == 1


def test_consume_energy_clamps_and_kills():
    p = Player(0, 0, 5)
    p.consume_energy(2)
    assert (p.energy, p.alive) == (3, True)
    p.consume_energy(10)
    assert (p.energy, p.alive) == (0, False)
    p.consume_energy(2)
    assert (p.energy, p.alive) == (0, False)


def test_consume_energy_exactly_to_zero_kills():
    p = Player(0, 0, 4)
    p.consume_energy(4)
    assert (p.energy, p.alive) == (0, False)


def test_trap_kills_regardless_of_energy():
    p = Player(0, 0, 100)
    p.damage_by_trap()
    assert p.alive is False
    assert p.energy == 100


def test_move_to_overwrites_position():
    p = Player(0, 0, 100)
    p.move_to(7, -3)
    assert p.pos == (7, -3)
