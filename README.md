# evolasm

A small tile-world simulation sandbox. It opens a 1200 × 720 window and
generates a 128 × 128 terrain from layered value noise. The terrain has
water in three depths, dirt, grass, stone and snow. It spawns a player that
you move with the keyboard, and the camera follows the player.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
evolasm
evolasm --content path/to/assets
```

The game reads its assets from `content/` under the current working
directory. Use `--content` to read them from another directory. The asset
directory must contain all four of these subdirectories:

```
content/
  textures/   # images; "tilemap" draws the terrain, "player" the player, "bot" is the window icon
  fonts/
  musics/
  sounds/
```

Every file is registered under its name without directory and extension.
For example, `content/textures/player.png` becomes the texture `player`.

Loading fails with `evolasm.content.ContentError` in these cases:

- a directory is missing or cannot be listed
- a texture cannot be opened as an image
- a font, music or sound file is empty or cannot be read

If there is no `tilemap` texture, the terrain is not drawn. If there is no
`player` texture, the player is not drawn.

### Controls

| Key           | Action                                 |
|---------------|----------------------------------------|
| W / A / S / D | Move the player one step per key press |
| Mouse wheel   | Zoom the camera                        |
| Window close  | Quit                                   |

The player only walks onto tiles whose physical type is `PhysicalType.GAS`. It does not leave the grid.

## Using the pieces

The modules can also be used on their own:

```python
from evolasm.noise import PerlinNoise
from evolasm.tiles import TileGrid, terrain_index
from evolasm.event import Event

noise = PerlinNoise()
height = noise.value_noise_2d(10, 20)
print(terrain_index(height))   # tilemap column, or None

grid = TileGrid(32, 32)
print(grid.tile(3, 4).phys_type)

on_hit = Event()
on_hit += lambda amount: print("hit for", amount)
on_hit.invoke(5)
```

What each module provides:

- `evolasm.primitives`: the shared types `Vector2`, `Color`, `FloatRect`, `Texture`, `Key`, `Keyboard`, `Transformable` and `View`, and the function `distance`.
- `evolasm.state`:
  - `StateManager` holds named `State` objects.
  - `set(name)` calls `end()` on the old state and `start()` on the new one.
  - `set(name)` raises `StateNotFoundError` for an unknown name.
- `evolasm.world`:
  - `StateWorld` keeps a list of game objects, ticks them and drops destroyed ones.
  - `closest_object` and `closest_object_by_name` find the nearest live object within 10000 units.
  - `StateLoading` loads the content, then switches to `StateWorldMain`, which spawns the player.
- `evolasm.gameobject`:
  - `GameObject` is the base of everything in the world.
  - `Entity` adds health that is capped at its maximum, along with `damage`, `heal` and `kill`.
- `evolasm.camera`:
  - `Camera` follows a focused object.
  - With nothing focused, it moves with W/A/S/D.
  - It starts locked: locked cameras neither move nor zoom.
- `evolasm.core`:
  - `Core` runs the fixed-step loop at 60 ticks per second.
  - `Core.advance(elapsed)` and `Core.handle_event(event)` drive it without a window.
  - `main(argv=None)` is the `evolasm` command.
- `evolasm.logger`: `info`, `warn` and `error` write coloured, level-prefixed lines to standard output.

## What it does not do

- There are no bots or other creatures besides the player, and nothing in the world evolves or runs programs.
- Fonts, music and sounds are loaded but never played or shown.
- No interface widgets are drawn over the world. `State.draw_overlay` only counts frames.