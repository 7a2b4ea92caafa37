"""The tile map: walls, bases and health packs."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from .tank import TILE_SIZE, Tank, check_collision

BASE_HEALTH = 50
BASE_SIZE_TILES = 2
HEALTH_PACK_SIZE = 32
HEALTH_PACK_HEAL = 20
TANK_PICKUP_SIZE = 32

Rect = tuple[int, int, int, int]


class TileType(IntEnum):
    EMPTY = 0
    WALL = 1


@dataclass
class MapTile:
    type: TileType = TileType.EMPTY
    health: int = 100


@dataclass
class Base:
    """A player's base; ``x`` and ``y`` are in tiles."""

    x: int
    y: int
    health: int
    width: int = 0
    height: int = 0

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)


@dataclass
class HealthPack:
    """A pickup; ``x`` and ``y`` are in pixels."""

    x: int
    y: int
    active: bool = True

    def rect(self) -> Rect:
        return (self.x, self.y, HEALTH_PACK_SIZE, HEALTH_PACK_SIZE)


class GameMap:
    """A grid of tiles with a wall border, walled corners and an "IT" in the middle."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._tiles = [MapTile() for _ in range(width * height)]
        self.health_packs: list[HealthPack] = []

        for x, y, tile in self.tiles():
            on_border = x in (0, width - 1) or y in (0, height - 1)
            top_left = 1 <= x <= 3 and 1 <= y <= 3
            bottom_right = width - 4 <= x <= width - 2 and height - 4 <= y <= height - 2
            if on_border or top_left or bottom_right:
                tile.type = TileType.WALL

        start_x = width // 2 - 2
        start_y = height // 2 - 2
        letters = [(start_x, y) for y in range(start_y, start_y + 5)]
        letters += [(x, start_y) for x in range(start_x + 2, start_x + 6)]
        letters += [(start_x + 3, y) for y in range(start_y, start_y + 5)]
        for x, y in letters:
            tile = self.tile(x, y)
            if tile is None:
                raise ValueError(f"map {width}x{height} is too small")
            tile.type = TileType.WALL

        self.base1 = Base(1, 1, BASE_HEALTH)
        self.base2 = Base(width - 3, height - 3, BASE_HEALTH)

    def tile(self, x: int, y: int) -> MapTile | None:
        """Return the tile at (x, y), or None outside the map."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self._tiles[y * self.width + x]

    def tiles(self) -> Iterator[tuple[int, int, MapTile]]:
        """Yield (x, y, tile) for every tile, row by row."""
        for index, tile in enumerate(self._tiles):
            y, x = divmod(index, self.width)
            yield x, y, tile

    def _in_base(self, tile_x: int, tile_y: int) -> bool:
        return any(
            base.x <= tile_x < base.x + BASE_SIZE_TILES
            and base.y <= tile_y < base.y + BASE_SIZE_TILES
            for base in (self.base1, self.base2)
        )

    def is_walkable(self, x: float, y: float) -> bool:
        """Return True if the pixel position lies on an empty tile outside both bases."""
        if x < 0 or y < 0 or x >= self.width * TILE_SIZE or y >= self.height * TILE_SIZE:
            return False
        tile_x = int(x) // TILE_SIZE
        tile_y = int(y) // TILE_SIZE
        if self._in_base(tile_x, tile_y):
            return False
        tile = self.tile(tile_x, tile_y)
        return tile is not None and tile.type == TileType.EMPTY

    def spawn_health_pack(self) -> HealthPack:
        """Place a health pack on a random empty tile and return it."""
        while True:
            x = self._rng.randrange(self.width) * TILE_SIZE
            y = self._rng.randrange(self.height) * TILE_SIZE
            tile = self.tile(x // TILE_SIZE, y // TILE_SIZE)
            if tile is not None and tile.type == TileType.EMPTY:
                break
        pack = HealthPack(x, y, True)
        self.health_packs.append(pack)
        return pack

    def check_tank_health_collision(self, tank: Tank) -> None:
        """Heal the tank for every active pack it overlaps and use those packs up."""
        tank_rect = (int(tank.x), int(tank.y), TANK_PICKUP_SIZE, TANK_PICKUP_SIZE)
        for pack in self.health_packs:
            if pack.active and check_collision(*tank_rect, *pack.rect()):
                tank.heal(HEALTH_PACK_HEAL)
                pack.active = False