# ats_game

A small real-time strategy prototype built on pygame. Units glide smoothly
between timed waypoints. The left mouse button places a corner of a selection
box, and a right click sends the selected units towards the cursor.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
ats-game
```

When the game starts, two units glide from the origin (the centre of the
window) to random points up to 200 units right of and above it. This takes one second.

Mouse controls:

- **Left button press or release**: moves the first corner of the selection box
  to the cursor. The second corner stays at the world origin. On every frame,
  each unit strictly inside the box spanned by the two corners is added to the
  selection.
- **Right click**: each selected unit heads for the point under the cursor and
  reaches it ten seconds later. Any waypoints it had at that time or later are
  dropped.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width` | 1280 | window width in pixels |
| `--height` | 720 | window height in pixels |
| `--image` | `assets/tiles.png` | image drawn for each unit |
| `--fps` | 60 | frame-rate limit |
| `--seed` | none | seed for the units' starting targets |
| `--frames` | none | stop after this many frames |

If the image cannot be loaded, each unit is drawn as a white 16×16 square.

## Using the pieces

The package can also be used as a library.

- `ats_game.lerp` provides `Position`, `LerpPoint` and `Lerp`.
  - `Position.lerp(stop, percentage)` blends linearly between two positions.
  - A `Lerp` holds waypoints sorted by time. `current_value(t)` returns `None`
    at or before the first waypoint and the last value at or after the last one.
    Between those it returns the interpolated value. It raises `RuntimeError` if
    there are no waypoints.
  - `insert_point_delete_later(val, time)` drops every waypoint at `time` or
    later and appends the new one.
- `ats_game.mouse_world_position` provides `Camera2d` and `MouseWorldPosition`.
  - `Camera2d` converts between viewport pixels (y down) and world coordinates
    (y up) with `viewport_to_world` and `world_to_viewport`.
  - `MouseWorldPosition.update(cursor, camera)` stores the cursor's world
    position, or `None` when either argument is `None`. `get()` returns the
    stored value.
- `ats_game.selection_box` provides `Selected`, `SelectionBox` and `is_inside`.
  - `Selected` is a growing set of entities, read with `entities()` and
    extended with `add()`.
  - `SelectionBox.move` sets the first corner on a press or a release.
  - `SelectionBox.select_units` adds units that lie inside the box.
  - `is_inside(point, first, second)` checks for strict containment. It accepts
    three corner layouts: `first` above-right, below-right or below-left of
    `second`, with y up. It does not accept the layout with `first` above-left
    of `second`.
- `ats_game.tilemap` provides `TileMap`, a grid of tiles centred on the world
  origin (64×64 tiles of 16×16 by default).
  - `tile_at(x, y)` returns a tile.
  - `tile_world_position(x, y)` returns the centre of a tile.
  - `tiles()` iterates over all tiles.
  - Both `tile_at` and `tile_world_position` raise `IndexError` outside the map.
- `ats_game.app` provides `Unit`, `spawn_units`, `command_units` and the `main`
  entry point.

## What it does not do

- The selection only grows. Nothing removes units from it.
- The selection box is not drawn, and its second corner does not follow the
  mouse.
- The tile map is not drawn in the game window. It exists only as a library
  class.
- There are no opponents, resources or combat. Units only move.