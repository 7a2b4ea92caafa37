import random

import pytest

from tankbattle.game_map import (
    BASE_HEALTH,
    Base,
    GameMap,
    HealthPack,
    MapTile,
    TileType,
)
from tankbattle.tank import MAX_HEALTH, TILE_SIZE, Tank

WIDTH, HEIGHT = 25, 19


class _ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


@pytest.fixture
def game_map():
    return GameMap(WIDTH, HEIGHT, random.Random(1))


def test_default_tile():
    tile = MapTile()
    assert tile.type == TileType.EMPTY
    assert tile.health == 100


def test_tiles_covers_whole_map(game_map):
    cells = list(game_map.tiles())
    assert len(cells) == WIDTH * HEIGHT
    assert {(x, y) for x, y, _ in cells} == {(x, y) for x in range(WIDTH) for y in range(HEIGHT)}


def test_tiles_matches_tile_lookup(game_map):
    for x, y, tile in game_map.tiles():
        assert game_map.tile(x, y) is tile


def test_border_is_wall(game_map):
    for x, y, tile in game_map.tiles():
        if x in (0, WIDTH - 1) or y in (0, HEIGHT - 1):
            assert tile.type == TileType.WALL


def test_corner_blocks_are_walls(game_map):
    for x in range(1, 4):
        for y in range(1, 4):
            assert game_map.tile(x, y).type == TileType.WALL
            assert game_map.tile(WIDTH - 1 - x, HEIGHT - 1 - y).type == TileType.WALL


def test_letters_in_middle(game_map):
    start_x = WIDTH // 2 - 2
    start_y = HEIGHT // 2 - 2
    assert all(game_map.tile(start_x, y).type == TileType.WALL for y in range(start_y, start_y + 5))
    assert game_map.tile(start_x + 1, start_y + 2).type == TileType.EMPTY


def test_tile_outside_map_is_none(game_map):
    assert game_map.tile(-1, 0) is None
    assert game_map.tile(WIDTH, 0) is None
    assert game_map.tile(0, HEIGHT) is None


def test_bases(game_map):
    assert game_map.base1 == Base(1, 1, BASE_HEALTH)
    assert game_map.base2 == Base(WIDTH - 3, HEIGHT - 3, BASE_HEALTH)


def test_base_rect_has_no_size_by_default():
    assert Base(1, 1, 50).rect() == (1, 1, 0, 0)


def test_health_pack_rect():
    assert HealthPack(64, 96).rect() == (64, 96, 32, 32)


def test_too_small_map_raises():
    with pytest.raises(ValueError):
        GameMap(3, 3)


def test_walkable_open_tile(game_map):
    assert game_map.is_walkable(5 * TILE_SIZE, 5 * TILE_SIZE) is True


def test_walls_not_walkable(game_map):
    assert game_map.is_walkable(0, 0) is False


@pytest.mark.parametrize(
    "x, y", [(-0.5, 100), (100, -1), (WIDTH * TILE_SIZE, 100), (100, HEIGHT * TILE_SIZE)]
)
def test_outside_not_walkable(game_map, x, y):
    assert game_map.is_walkable(x, y) is False


def test_base_blocks_even_without_wall(game_map):
    game_map.tile(1, 1).type = TileType.EMPTY
    game_map.tile(2, 2).type = TileType.EMPTY
    assert game_map.is_walkable(TILE_SIZE, TILE_SIZE) is False
    assert game_map.is_walkable(2 * TILE_SIZE + 5, 2 * TILE_SIZE + 5) is False


def test_destroyed_wall_becomes_walkable(game_map):
    game_map.tile(5, 0).type = TileType.EMPTY
    assert game_map.is_walkable(5 * TILE_SIZE, 0) is True


def test_spawn_health_pack_on_empty_tile(game_map):
    for _ in range(20):
        pack = game_map.spawn_health_pack()
        assert pack.x % TILE_SIZE == 0 and pack.y % TILE_SIZE == 0
        assert game_map.tile(pack.x // TILE_SIZE, pack.y // TILE_SIZE).type == TileType.EMPTY
        assert pack.active is True
    assert len(game_map.health_packs) == 20


def test_spawn_retries_on_walls():
    game_map = GameMap(WIDTH, HEIGHT, _ScriptedRng([0, 0, 1, 1, 5, 5]))
    pack = game_map.spawn_health_pack()
    assert (pack.x, pack.y) == (5 * TILE_SIZE, 5 * TILE_SIZE)
    assert game_map.health_packs == [pack]


def test_tank_picks_up_overlapping_pack(game_map):
    pack = HealthPack(5 * TILE_SIZE, 5 * TILE_SIZE)
    game_map.health_packs.append(pack)
    tank = Tank(5 * TILE_SIZE - 10.7, 5 * TILE_SIZE - 10.2)
    tank.health = 50
    game_map.check_tank_health_collision(tank)
    assert tank.health == 50 + 20
    assert pack.active is False


def test_used_pack_does_not_heal_again(game_map):
    pack = HealthPack(5 * TILE_SIZE, 5 * TILE_SIZE)
    game_map.health_packs.append(pack)
    tank = Tank(5 * TILE_SIZE, 5 * TILE_SIZE)
    tank.health = 10
    game_map.check_tank_health_collision(tank)
    healed = tank.health
    game_map.check_tank_health_collision(tank)
    assert tank.health == healed


def test_touching_pack_is_not_picked_up(game_map):
    pack = HealthPack(5 * TILE_SIZE, 5 * TILE_SIZE)
    game_map.health_packs.append(pack)
    tank = Tank(4 * TILE_SIZE, 5 * TILE_SIZE)
    tank.health = 40
    game_map.check_tank_health_collision(tank)
    assert tank.health == 40
    assert pack.active is True


def test_pickup_respects_max_health(game_map):
    game_map.health_packs.append(HealthPack(5 * TILE_SIZE, 5 * TILE_SIZE))
    tank = Tank(5 * TILE_SIZE, 5 * TILE_SIZE)
    game_map.check_tank_health_collision(tank)
    assert tank.health == MAX_HEALTH