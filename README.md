# zombiearena

A top-down arena shooter. You spawn in the middle of a walled arena, and each
wave sends more zombies at you from its edges. Before every wave you choose an
upgrade. Each new arena is larger and holds more zombies. Wave *n* is
`n * 500` pixels square and holds `n * 2` zombies.

## Installing

```
pip install .
```

The game runs on pygame.

## Playing

```
zombiearena [--assets DIR] [--windowed]
```

- `--assets DIR`: the directory that holds `graphics/` and `fonts/`. The
  default is the current directory. The game loads `graphics/<name>.png` for
  `player`, `crosshair`, `background_sheet`, `background`, `ammo_icon`,
  `health_pickup`, `ammo_pickup`, `bloater`, `chaser`, `crawler` and `blood`,
  and it loads `fonts/zombiecontrol.ttf`. If an image is missing or cannot be
  read, a plain magenta placeholder takes its place. If the font is missing,
  pygame's default font is used.
- `--windowed`: run in a 1920×1080 window. Without this option the game runs
  full screen.

Controls:

| Key / button  | Action                                   |
|---------------|------------------------------------------|
| W A S D       | Move                                     |
| Mouse         | Aim                                      |
| Left button   | Fire                                     |
| R             | Reload from spare ammunition             |
| Enter         | Start a game, pause, resume              |
| 1 – 6         | Pick an upgrade between waves            |
| Escape        | Quit                                     |

Upgrades:

1. Rate of fire increases by one shot per second.
2. Clip size doubles. This takes effect at the next reload.
3. Maximum health rises by 20.
4. Running speed rises by 40 pixels per second.
5. Starts the next wave and has no other effect.
6. Starts the next wave and has no other effect.

You start each game with 6 rounds in the clip and 24 spare. A health pickup
heals 50 points, up to your maximum health. An ammunition pickup adds 12 spare
rounds. Each pickup shows for 5 seconds, then reappears 10 seconds later at a
random spot.

There are three kinds of zombie:

- Bloaters: medium speed, and the most hits to kill.
- Chasers: the fastest, and the fewest hits to kill.
- Crawlers: the slowest, and between the other two in toughness.

Each zombie's speed is scaled at random to between 70% and 100% of its kind's
base speed.

Each kill scores 10 points. The high score lasts until the program exits and
is not saved. A zombie that touches you costs one point of health, at most
once every 200 ms. The game ends when your health reaches zero.

The HUD shows ammunition, score, high score, wave and zombies remaining. These
texts refresh every 1000 frames of play. The health bar updates every frame.

## Using the game logic

`zombiearena.session.GameSession` holds the rules and does not depend on the
display, so you can drive it from code:

```python
import random
from zombiearena.geometry import Vec2
from zombiearena.session import GameSession, State

game = GameSession(Vec2(1920, 1080), random.Random(1))
game.press_enter()          # leave the title screen
game.choose_upgrade(1)      # pick an upgrade; wave 1 starts
assert game.state is State.PLAYING
game.set_movement(up=True, down=False, left=False, right=False)
game.fire(Vec2(300, 300))
game.update(0.016, Vec2(960, 540), Vec2(300, 300))
print(game.hud_text())
```

Pass the same `random.Random` seed to get the same arena layout, horde and
pickup placement.

Other modules:

- `zombiearena.arena`: `create_background` and `create_horde`.
- `zombiearena.player`, `zombiearena.zombie`, `zombiearena.bullet` and
  `zombiearena.pickup`: the game's entities.
- `zombiearena.geometry`: `Vec2`, `IntRect` and `FloatRect`.
- `zombiearena.app`: the pygame front end, with `main`, `Assets` and
  `screen_to_world`.

## What it does not do

The game has no sound. It does not save high scores or settings. It ships no
graphics or font files of its own.

## Running the tests

```
pip install .[test]
pytest
```