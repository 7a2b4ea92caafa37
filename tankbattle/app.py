"""The playable window: input, drawing and screens."""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from pathlib import Path

import pygame

from .bullet import bullet_triangle
from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Action, Game, Outcome
from .game_map import BASE_SIZE_TILES, TileType
from .tank import TANK_SIZE, TILE_SIZE, Tank

HEALTH_BAR_WIDTH = 100
HEALTH_BAR_HEIGHT = 10
MUSIC_VOLUME = 7
FRAME_DELAY_MS = 10

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)

Rect = tuple[int, int, int, int]

_KEY_ACTIONS = {
    pygame.K_w: Action.P1_UP,
    pygame.K_a: Action.P1_LEFT,
    pygame.K_s: Action.P1_DOWN,
    pygame.K_d: Action.P1_RIGHT,
    pygame.K_UP: Action.P2_UP,
    pygame.K_LEFT: Action.P2_LEFT,
    pygame.K_DOWN: Action.P2_DOWN,
    pygame.K_RIGHT: Action.P2_RIGHT,
}

_FIRE_KEYS = {pygame.K_SPACE: 0, pygame.K_k: 1}

_VICTORY_IMAGES = {
    Outcome.PLAYER1_WINS: "player1.png",
    Outcome.PLAYER2_WINS: "player2.png",
}


class _Quit(Exception):
    """The window was closed."""


def health_bar_rects(
    x: int, y: int, health: int, max_health: int, bar_width: int, bar_height: int
) -> tuple[Rect, Rect]:
    """Return the background rectangle and the filled rectangle of a health bar."""
    filled = int(bar_width * (health / max_health))
    return (x, y, bar_width, bar_height), (x, y, filled, bar_height)


def draw_health_bar(
    surface: pygame.Surface,
    x: int, y: int, health: int, max_health: int, bar_width: int, bar_height: int,
) -> None:
    """Draw a black bar, filled green in proportion to health, with a white border."""
    background, filled = health_bar_rects(x, y, health, max_health, bar_width, bar_height)
    pygame.draw.rect(surface, BLACK, background)
    if filled[2] > 0:
        pygame.draw.rect(surface, GREEN, filled)
    pygame.draw.rect(surface, WHITE, background, 1)


def pressed_actions(keys: Mapping[int, bool]) -> set[Action]:
    """Return the movement actions whose keys are held down."""
    return {action for key, action in _KEY_ACTIONS.items() if keys[key]}


def _load_image(path: Path, size: tuple[int, int] | None = None) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"Cannot load image {path}: {exc}")
        return None
    if size is not None:
        image = pygame.transform.smoothscale(image.convert_alpha(), size)
    return image


def _play_music(path: Path) -> None:
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
        pygame.mixer.music.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"Failed to load background music: {exc}")
        return
    pygame.mixer.music.set_volume(MUSIC_VOLUME / 128)
    pygame.mixer.music.play(-1)


def _show_until_input(
    screen: pygame.Surface, image: pygame.Surface | None, accept_mouse: bool, delay_ms: int
) -> None:
    if image is None:
        return
    while True:
        screen.blit(image, (0, 0))
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise _Quit
            if event.type == pygame.KEYDOWN:
                return
            if accept_mouse and event.type == pygame.MOUSEBUTTONDOWN:
                return
        pygame.time.delay(delay_ms)


def _victory_screen(screen: pygame.Surface, image: pygame.Surface | None) -> bool:
    """Show the victory image; return True to play again, False to quit."""
    if image is None:
        return False
    screen.fill(BLACK)
    screen.blit(image, (0, 0))
    pygame.display.flip()
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    return True
                if event.key == pygame.K_q:
                    return False
        clock.tick(100)


def _draw_tank(screen: pygame.Surface, tank: Tank, texture: pygame.Surface | None) -> None:
    if texture is None:
        return
    rotated = pygame.transform.rotate(texture, -tank.angle)
    rect = rotated.get_rect(center=(int(tank.x) + TANK_SIZE // 2, int(tank.y) + TANK_SIZE // 2))
    screen.blit(rotated, rect)


def _render(screen: pygame.Surface, game: Game, textures: dict[str, pygame.Surface | None]) -> None:
    screen.fill(BLACK)
    wall = textures["wall"]
    for x, y, tile in game.map.tiles():
        if tile.type == TileType.WALL and wall is not None:
            screen.blit(wall, (x * TILE_SIZE, y * TILE_SIZE))

    base = textures["base"]
    if base is not None:
        for b in (game.map.base1, game.map.base2):
            screen.blit(base, (b.x * TILE_SIZE, b.y * TILE_SIZE))

    thickness, size = 6, 12
    for pack in game.map.health_packs:
        if pack.active:
            cx, cy = pack.x + 16, pack.y + 16
            pygame.draw.rect(screen, GREEN, (cx - size, cy - thickness // 2, size * 2, thickness))
            pygame.draw.rect(screen, GREEN, (cx - thickness // 2, cy - size, thickness, size * 2))

    _draw_tank(screen, game.player1, textures["tank1"])
    _draw_tank(screen, game.player2, textures["tank2"])

    for bullet in game.bullets:
        if bullet.alive:
            pygame.draw.polygon(screen, WHITE, bullet_triangle(bullet.x, bullet.y), 1)

    draw_health_bar(screen, 10, 10, game.player1.health, 100, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT)
    draw_health_bar(
        screen, SCREEN_WIDTH - HEALTH_BAR_WIDTH - 10, 10, game.player2.health, 100,
        HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT,
    )
    pygame.display.flip()


def _play(screen: pygame.Surface, assets: Path) -> None:
    full = (SCREEN_WIDTH, SCREEN_HEIGHT)
    _show_until_input(screen, _load_image(assets / "batdau.png", full), False, 10)
    _show_until_input(screen, _load_image(assets / "huongdan.png", full), True, 5)

    tile = (TILE_SIZE, TILE_SIZE)
    base_size = (BASE_SIZE_TILES * TILE_SIZE,) * 2
    textures = {
        "wall": _load_image(assets / "stone.png", tile),
        "base": _load_image(assets / "base.png", base_size),
        "tank1": _load_image(assets / "tank1.png", (TANK_SIZE, TANK_SIZE)),
        "tank2": _load_image(assets / "tank2.png", (TANK_SIZE, TANK_SIZE)),
    }

    game = Game()
    while True:
        game.tick(pygame.time.get_ticks())
        game.apply_movement(pressed_actions(pygame.key.get_pressed()))
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise _Quit
            if event.type == pygame.KEYDOWN and event.key in _FIRE_KEYS:
                game.fire(_FIRE_KEYS[event.key])
        game.update()
        _render(screen, game, textures)

        outcome = game.outcome()
        if outcome is not Outcome.RUNNING:
            image = _load_image(assets / _VICTORY_IMAGES[outcome], full)
            if not _victory_screen(screen, image):
                return
            game.reset()
        pygame.time.delay(FRAME_DELAY_MS)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until a player quits."""
    parser = argparse.ArgumentParser(prog="tankbattle", description="Two-player tank battle.")
    parser.add_argument(
        "--assets", type=Path, default=Path("."),
        help="directory holding the images and music (default: current directory)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Tank Game")
        _play_music(args.assets / "nhacnen.mp3")
        _play(screen, args.assets)
    except _Quit:
        pass
    finally:
        pygame.quit()
    return 0