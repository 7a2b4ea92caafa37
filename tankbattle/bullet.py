"""Projectiles fired by tanks."""

from __future__ import annotations

from dataclasses import dataclass, field

BULLET_WIDTH = 10
BULLET_HEIGHT = 10

Point = tuple[float, float]


@dataclass
class Bullet:
    """A bullet travelling along one of the four axis directions.

    ``angle`` is in degrees (0, 90, 180 or 270) and ``owner`` is 0 for
    player one and 1 for player two.
    """

    x: float
    y: float
    angle: float
    owner: int
    alive: bool = field(default=True, init=False)


def bullet_triangle(x: float, y: float) -> tuple[Point, Point, Point]:
    """Return the top, bottom-left and bottom-right corners of a bullet's outline."""
    half_width = BULLET_WIDTH / 2.0
    half_height = BULLET_HEIGHT / 2.0
    top = (x, y - half_height)
    bottom_left = (x - half_width, y + half_height)
    bottom_right = (x + half_width, y + half_height)
    return top, bottom_left, bottom_right