# tankbattle

A two-player tank battle for one keyboard. Each player steers a tank around a
walled arena and shoots at the other tank. The arena is 25 by 19 tiles of 32
pixels. It has stone walls around its edge and in the middle, and a walled
base in the top-left and bottom-right corners. A bullet that hits a wall tile
destroys that tile. Every five seconds a health pack appears on a random empty
tile.

## Installing

```
pip install .
```

## Playing

```
tankbattle
tankbattle --assets path/to/assets
```

`--assets` names the directory that holds the images and music. The default
is the current directory.

The game shows a start screen, then a how-to-play screen. Press any key to
leave the start screen. Press any key or click the mouse to leave the
how-to-play screen.

| Player | Move       | Fire  |
|--------|------------|-------|
| 1      | W, A, S, D | Space |
| 2      | Arrow keys | K     |

- A bullet flies in the direction its tank faces. It disappears when it hits a
  wall, a base or the other tank, or when it leaves the screen.
- A hit on a tank takes 20 health. Each tank starts with 100.
- A hit on a base takes 10 from that base's 50 health.
- Driving over a health pack restores 20 health, up to a maximum of 100.
- Tanks cannot drive through walls, through bases or into each other.

The round ends when a tank's health reaches zero. The other player wins. The
round also ends when either base's health reaches zero. That win is always
given to player 1. The victory screen then appears. Press **R** to play again
or **Q** to quit. Closing the window also quits.

### Asset files

The game loads these images from the asset directory: `batdau.png` (start
screen), `huongdan.png` (how-to-play screen), `tank1.png`, `tank2.png`,
`stone.png` (walls), `base.png`, `player1.png` and `player2.png` (victory
screens). It loads its background music from `nhacnen.mp3`.

The game still runs when a file is missing, but some things change:

- A missing start or how-to-play image skips that screen.
- A missing wall, base or tank image leaves that piece undrawn.
- A missing victory image ends the game.
- Missing music means the game plays silently.

The package does not include these files.

## Using the game logic

The rules do not depend on a display, so other code can drive them directly:

```python
import random
from tankbattle.game import Game, Action

game = Game(random.Random(1))
game.apply_movement({Action.P1_RIGHT})
game.fire(0)
game.update()
print(game.outcome())
```

The modules:

- `tankbattle.game` holds `Game`, `Action`, `Outcome` and
  `check_tank_collision`.
  - `Game.tick(now_ms)` spawns a health pack once 5000 ms have passed since
    the last one. The first call only starts the clock.
  - `Game.reset()` starts a new round.
- `tankbattle.game_map` holds `GameMap` (the arena) together with `MapTile`,
  `TileType`, `Base` and `HealthPack`.
- `tankbattle.tank` holds `Tank` and `check_collision`.
- `tankbattle.bullet` holds `Bullet` and `bullet_triangle`.
- `tankbattle.app` holds the pygame window. Its functions include
  `health_bar_rects`, `draw_health_bar`, `pressed_actions` and `main`.

## Limits

The game is for two players at one keyboard only. It has no computer
opponent, no network play and no saved scores.

## Running the tests

```
pip install ".[test]"
pytest
```