# flatpack

flatpack is the game-world model of a side-scrolling action game and its
level editor. It is a plain Python library with no dependencies. It keeps
the state of the game and decides what happens in it. It draws nothing and
plays no sound.

## What is in it

- `flatpack.geometry`: the immutable `Vec2` (with `length()`) and `Rect`
  (with `intersects`, `intersection`, `contains`, `center`). It also has the
  helper functions `dot` and `normalize`.
- `flatpack.collision`:
  - `collision_side(bounds1, bounds2)` tells which side of the first box hit
    the second. It returns a `CollisionSide`.
  - `sat_overlap` and `polygons_collide` test convex polygons with the
    separating-axis test.
  - `transformed_corners` gives the four corners of a box after origin,
    scale, rotation (in degrees) and translation.
- `flatpack.camera`: `Camera`. It eases towards a target position at a set
  smoothness, where zero means it moves at once. `move_to_next_part` steps it
  by whole screens. `is_moving` and `view_bounds` report on it.
- `flatpack.entity`:
  - `Entity` is the base object. It has a position, velocity, size, origin,
    scale, rotation, a priority layer and a `should_be_dead` flag.
  - `Entity.collide` returns the side that was hit. It marks the entity as
    grounded when it lands on a solid object.
  - `Background` is always on screen and sits on layer -1000.
- `flatpack.animation`:
  - `Animation` steps through named rows of a sprite sheet.
    `texture_rect()` gives the cell to draw, mirrored unless `flipped` is set.
  - `HappyEnd` is a one-shot effect. It marks itself dead after its second
    pass through its last frame.
- `flatpack.cutscene`: `CutScene` fades each frame in, then out, then pauses
  before the next one. `update` returns `True` when all frames are done.
  `alpha` and `frame_scale()` describe the current frame.
- `flatpack.terrain`: `Terrain` is a ground block. Its `what` setting picks
  the behaviour:
  - 0: the block stays still.
  - 1: the block falls once an object with `is_player` set touches it.
  - 2: the block bobs up and down on a sine wave.
- `flatpack.pacman`: `PacMan`. With `what == 0` it flies straight along
  `degrees`. With `what == 1` it turns towards the world's `player_ref` and
  fades from yellow to purple. Its life is limited.
- `flatpack.boss`: `Boss`. It follows the player and takes damage from
  objects named `"akBullet"`: each hit darkens its colour, and black means
  dead. As its health falls it moves through three attack phases, and in
  each phase it spawns `"laser"` and `"table"` objects through the world.
- `flatpack.factory`:
  - `create_object(kind, position, rotation, world)` builds the kinds
    `"pacman"`, `"ikeaman"` (the boss) and `"HappyEnd"`. It returns `None`
    for any other kind.
  - `property_descriptors(kind)` lists the editable properties as
    `PropertyDescriptor` tuples. Only `"pacman"` and `"Terrain"` have any.
- `flatpack.mapfile`: the binary level format.
  - `load_map` and `dump_map` work on streams. `read_map` and `write_map`
    work on paths.
  - Each record is a `PlacedObject`. It holds the kind, position, size,
    texture path and string properties.
  - Integers are 32-bit little-endian and strings are length-prefixed UTF-8.
    Properties are written sorted by name.
  - Truncated or malformed data raises `MapFormatError`.
- `flatpack.editor`:
  - `Palette` is the pick list of objects, terrain textures and
    backgrounds. `item_at` hit-tests it.
  - `EditorMap` manages the placed objects of a level: add, remove, set a
    property, load and save.
  - `PropertyEditor` provides text fields for a selected object's
    properties.
  - Helpers: `file_stem` and `wrap_text`.
- `flatpack.world`: `GameMap`.
  - It loads a level, builds live objects with `spawn_objects`, and tracks
    the current screen part.
  - `update_objects` moves objects, in up to 10 sub-steps when they are
    fast, and resolves their collisions.
  - `remove_dead_objects` drops dead objects. `visible_objects` returns
    objects in drawing order.
- `flatpack.screens`: `MainMenu`, with a Play button that turns red under
  the mouse, and `GameOverScreen`, with a "Return to Menu" button. Both are
  built from `Button`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from flatpack.geometry import Rect
from flatpack.collision import collision_side, CollisionSide
from flatpack.camera import Camera
from flatpack.mapfile import PlacedObject, write_map, read_map

side = collision_side(Rect(0, 0, 10, 10), Rect(8, 2, 10, 6))
assert side is CollisionSide.RIGHT

camera = Camera(800, 600)
camera.move_to_next_part(1, 0, True)
print(camera.view_bounds())  # Rect(left=800.0, top=0.0, width=800.0, height=600.0)

write_map("level.bin", [PlacedObject("Terrain", 0, 500, 800, 100, "../imgs/dirt0.png", {"what": "2"})])
print(read_map("level.bin"))
```

## What it does not do

- There is no window, rendering, input handling, audio or game loop. Music
  and sounds are only tracked as flags, such as `GameOverScreen.music_playing`
  and `PacMan.sound_playing`.
- There is no command to start the game or the editor.
- The player, weapons, bullets, items, the inventory, NPCs and the other
  level objects are not included. The factory cannot build them, so a level
  that places them spawns nothing for them.