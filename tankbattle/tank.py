"""Player tanks and the rectangle overlap test."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

TANK_WIDTH = 50
TANK_HEIGHT = 30
TANK_SPEED = 3
TURRET_ROTATION_SPEED = 3
TANK_SIZE = 32
TILE_SIZE = 32
MAX_HEALTH = 100


class Terrain(Protocol):
    """Anything that can say whether a point may be driven over."""

    def is_walkable(self, x: float, y: float) -> bool: ...


def check_collision(
    x1: float, y1: float, w1: float, h1: float,
    x2: float, y2: float, w2: float, h2: float,
) -> bool:
    """Return True if the two rectangles overlap (touching edges do not count)."""
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


@dataclass
class Tank:
    """A player's tank: position, facing, turret facing and health."""

    x: float
    y: float
    angle: float = field(default=0.0, init=False)
    turret_angle: float = field(default=0.0, init=False)
    health: int = field(default=MAX_HEALTH, init=False)

    def move(self, dx: int, dy: int, game_map: Terrain) -> None:
        """Move by (dx, dy) if all four corners of the tank land on walkable ground.

        The turret turns towards the direction of travel even when the move
        is blocked.
        """
        new_x = self.x + dx
        new_y = self.y + dy
        if dx > 0:
            self.turret_angle = 0
        if dx < 0:
            self.turret_angle = 180
        if dy > 0:
            self.turret_angle = 90
        if dy < 0:
            self.turret_angle = 270

        far = TANK_SIZE - 1
        corners = ((0, 0), (far, 0), (0, far), (far, far))
        if all(game_map.is_walkable(new_x + ox, new_y + oy) for ox, oy in corners):
            self.x = new_x
            self.y = new_y

    def set_direction(self, direction: int) -> None:
        """Face the tank towards ``direction`` degrees, normalised to [0, 360)."""
        self.angle = int(direction) % 360

    def heal(self, amount: int) -> None:
        """Add health, never going above the maximum."""
        self.health = min(self.health + amount, MAX_HEALTH)