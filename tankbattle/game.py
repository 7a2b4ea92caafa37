"""Game state for a two-player tank battle, independent of any display."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from enum import Enum

from .bullet import BULLET_HEIGHT, BULLET_WIDTH, Bullet
from .game_map import BASE_SIZE_TILES, GameMap, HealthPack, TileType
from .tank import TANK_HEIGHT, TANK_SPEED, TANK_WIDTH, TILE_SIZE, Tank, check_collision

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
BULLET_SPEED = 10
BULLET_DAMAGE = 20
BASE_DAMAGE = 10
SPAWN_INTERVAL_MS = 5000
MAP_WIDTH = 25
MAP_HEIGHT = 19
PLAYER1_START = (100.0, 140.0)
PLAYER2_START = (700.0, 445.0)

_BASE_PIXELS = BASE_SIZE_TILES * TILE_SIZE


class Action(Enum):
    """A movement request: (player index, dx, dy, facing in degrees)."""

    P1_UP = (0, 0, -1, 270)
    P1_LEFT = (0, -1, 0, 180)
    P1_DOWN = (0, 0, 1, 90)
    P1_RIGHT = (0, 1, 0, 0)
    P2_UP = (1, 0, -1, 270)
    P2_LEFT = (1, -1, 0, 180)
    P2_DOWN = (1, 0, 1, 90)
    P2_RIGHT = (1, 1, 0, 0)

    def __init__(self, player: int, dx: int, dy: int, direction: int) -> None:
        self.player = player
        self.dx = dx
        self.dy = dy
        self.direction = direction


class Outcome(Enum):
    RUNNING = "running"
    PLAYER1_WINS = "player1"
    PLAYER2_WINS = "player2"


def check_tank_collision(x1: float, y1: float, x2: float, y2: float) -> bool:
    """Return True if two tanks at these positions would overlap."""
    return abs(x1 - x2) < TANK_WIDTH and abs(y1 - y2) < TANK_HEIGHT


class Game:
    """Two tanks, their bullets and the map they fight on."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._last_spawn_ms: int | None = None
        self.reset()

    def reset(self) -> None:
        """Put both tanks back at their start, clear bullets and rebuild the map."""
        self.player1 = Tank(*PLAYER1_START)
        self.player2 = Tank(*PLAYER2_START)
        self.bullets: list[Bullet] = []
        self.map = GameMap(MAP_WIDTH, MAP_HEIGHT, self._rng)

    @property
    def players(self) -> tuple[Tank, Tank]:
        return self.player1, self.player2

    def apply_movement(self, actions: Iterable[Action]) -> None:
        """Move the tanks for the held actions, player one first, in a fixed order.

        A step that would bring the two tanks into contact is skipped entirely.
        """
        held = set(actions)
        for action in Action:
            if action not in held:
                continue
            mover = self.players[action.player]
            other = self.players[1 - action.player]
            dx = action.dx * TANK_SPEED
            dy = action.dy * TANK_SPEED
            if check_tank_collision(mover.x + dx, mover.y + dy, other.x, other.y):
                continue
            mover.move(dx, dy, self.map)
            mover.set_direction(action.direction)

    def fire(self, owner: int) -> Bullet:
        """Fire a bullet from the given player's tank in the direction it faces."""
        tank = self.players[owner]
        bullet = Bullet(
            tank.x + TANK_WIDTH / 2.0,
            tank.y + TANK_HEIGHT / 2.0,
            tank.angle,
            owner,
        )
        self.bullets.append(bullet)
        return bullet

    def tick(self, now_ms: int) -> HealthPack | None:
        """Spawn a health pack once the spawn interval has passed since the last one.

        The first call only starts the clock.
        """
        if self._last_spawn_ms is None:
            self._last_spawn_ms = now_ms
            return None
        if now_ms - self._last_spawn_ms >= SPAWN_INTERVAL_MS:
            self._last_spawn_ms = now_ms
            return self.map.spawn_health_pack()
        return None

    def update(self) -> None:
        """Advance bullets, apply hits on bases, walls and tanks, and collect pickups."""
        for bullet in self.bullets:
            if bullet.alive:
                self._advance(bullet)

        for bullet in self.bullets:
            if not bullet.alive:
                continue
            target = self.player2 if bullet.owner == 0 else self.player1
            if check_collision(
                bullet.x, bullet.y, BULLET_WIDTH, BULLET_HEIGHT,
                target.x, target.y, TANK_WIDTH, TANK_HEIGHT,
            ):
                bullet.alive = False
                target.health = max(target.health - BULLET_DAMAGE, 0)

        for tank in self.players:
            self.map.check_tank_health_collision(tank)
        self.bullets = [bullet for bullet in self.bullets if bullet.alive]

    def _advance(self, bullet: Bullet) -> None:
        radians = bullet.angle * math.pi / 180.0
        bullet.x += BULLET_SPEED * math.cos(radians)
        bullet.y += BULLET_SPEED * math.sin(radians)

        # The bullet's own box grows with its distance from the origin.
        width = int(bullet.x / TILE_SIZE)
        height = int(bullet.y / TILE_SIZE)
        for base in (self.map.base1, self.map.base2):
            if check_collision(
                bullet.x, bullet.y, width, height,
                base.x * TILE_SIZE, base.y * TILE_SIZE, _BASE_PIXELS, _BASE_PIXELS,
            ):
                base.health -= BASE_DAMAGE
                bullet.alive = False

        if not (0 <= bullet.x <= SCREEN_WIDTH and 0 <= bullet.y <= SCREEN_HEIGHT):
            bullet.alive = False

        tile = self.map.tile(int(bullet.x / TILE_SIZE), int(bullet.y / TILE_SIZE))
        if tile is not None and tile.type == TileType.WALL:
            tile.type = TileType.EMPTY
            bullet.alive = False

    def outcome(self) -> Outcome:
        """Report who has won, if anyone.

        A destroyed base of either side is announced as player one's victory.
        """
        if self.player1.health <= 0:
            return Outcome.PLAYER2_WINS
        if self.player2.health <= 0:
            return Outcome.PLAYER1_WINS
        if self.map.base1.health <= 0 or self.map.base2.health <= 0:
            return Outcome.PLAYER1_WINS
        return Outcome.RUNNING