# craftorio

The game state and rules of a small voxel sandbox game, with no rendering.
It covers:

- a block world split into 16×16 chunks, with breakable blocks (grass, dirt,
  stone, wood, leaves) and tree generation (`craftorio.world`,
  `craftorio.blocks`, `craftorio.structures`);
- an in-game calendar in which one real second is one in-game minute, with
  seasons and lunar phases (`craftorio.gametime`);
- a day/night light curve that changes with the season and the moon
  (`craftorio.lighting`);
- a first- and third-person camera, and a player and a zombie with gravity
  and box collisions (`craftorio.camera`, `craftorio.entities`);
- hotbar, inventory and HUD state (`craftorio.ui`), and items
  (`craftorio.items`);
- JSON settings (`craftorio.settings`) and world saves kept under `saves/`
  (`craftorio.saves`);
- the main menu and world selection screen (`craftorio.menus`) and a game
  session that ties it all together (`craftorio.session`).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Building a world

```python
from craftorio.geometry import Vec3
from craftorio.world import BlockManager
from craftorio.structures import Tree

world = BlockManager()
world.load_chunk_at(0, 0)          # a 16×16 grass floor at y = 0
Tree().generate(world, 4, 1, 4)    # a five-block trunk and a crown of leaves

near = world.nearby_blocks(Vec3(4, 1, 4), 5.0)
```

`BlockManager.interact(delta_time, origin, direction, max_distance)` mines
the first block along a ray and removes it once its durability is used up.

### The calendar and the light

```python
from craftorio.gametime import GameTime
from craftorio.lighting import light_intensity_for

clock = GameTime()
clock.update(600.0)                # ten real minutes
print(clock.format_date())         # Solar 1, Lunar 1, Day 01 - 16:00
print(clock.format_season(), clock.format_phase())   # Spring New Moon
print(light_intensity_for(clock.calendar()))
```

### Worlds on disk

```python
from craftorio.saves import SaveManager

saves = SaveManager()              # keeps worlds under ./saves
saves.create_world("Sandbox", seed=42)
print(saves.list_worlds())
```

`create_world` raises `WorldExistsError` if the world is already there, and
`delete_world` raises `WorldNotFoundError` if it is missing.

### Playing a session

```python
from craftorio.controls import Controls
from craftorio.session import GameSession
from craftorio.settings import SettingsData

with GameSession(SettingsData(), "Sandbox", saves) as game:
    game.update(1 / 60, Controls(move_forward=True), mouse_delta=(4.0, 0.0))
    print(game.player.position, game.hour)
```

Entering the session builds the terrain and a tree and loads the saved
player and clock; leaving it saves them back.

### Settings

```python
from craftorio.settings import load_settings, save_settings

settings = load_settings("assets/config/settings.json")
settings.video.render_distance = 64
save_settings(settings, "assets/config/settings.json")
```

A missing settings file gives the defaults: 1280×720, 144 FPS, a render
distance of 48, and English.

## What it does not do

The package has no window, no drawing, no sound and no asset loading, and it
does not read the keyboard or mouse itself: each frame's input is passed in
as a `Controls` value and a mouse delta. There is no command to start the
game; the main loop that moves from `MainMenu` to `WorldSelect` to a
`GameSession` is left to the program that uses the package.