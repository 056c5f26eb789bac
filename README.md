# rubydung

Building blocks for a small voxel sandbox game: box collision, view-frustum
culling, a first-person camera, a layer stack driven by a fixed-rate main
loop, keyboard and mouse state, levelled logging, and the OpenGL pieces
(shaders, vertex buffers, textures, a window) that a block renderer needs.

## Installing

```
pip install .
```

`numpy` is used for the vector maths, `pillow` for decoding images and
`pyglet` for the window and the OpenGL calls. Modules that only compute
(`math3d`, `aabb`, `frustum`, `camera`, `tile`, `layers`, `input`,
`timing`, `log`) work without a display; pyglet is imported only when a
window, a buffer, a shader or a texture is actually created.

## The modules

- `rubydung.math3d` – `identity`, `normalize`, `cross`, `perspective`,
  `look_at`, `translate` and `rotate` on 4×4 numpy matrices that act on
  column vectors. Angles are in radians.
- `rubydung.aabb` – `AABB`, a box from `p0` to `p1` with `expand`, `grow`,
  `intersects`, `move`, and `clip_x_collide` / `clip_y_collide` /
  `clip_z_collide`, which shorten a movement of another box along one axis
  so that it stops at this one.
- `rubydung.frustum` – `Frustum` builds six planes from a projection and a
  view matrix (`calculate`) and tests points, boxes and spheres against
  them (`point_inside`, `cube_inside`, `cube_fully_inside`,
  `sphere_inside`). `ray_point` steps along a ray.
- `rubydung.camera` – `Camera` with a position, yaw/pitch in degrees
  (`rot`), `update` to recompute the direction vectors and frustum, and
  `view`, `projection` and `in_frustum`.
- `rubydung.tile` – `TileType` (`AIR`, `GRASS`, `ROCK`), `Face`, and
  `Tile`, which gives each cube face's four corners (`face_vertices`) and
  the tile's coordinates in a 16×16 texture atlas (`texcoords`).
- `rubydung.layers` – the abstract `Layer`, the do-nothing `DefaultLayer`
  and `LayerStack`, which forwards every callback to its visible layers in
  the order they were pushed.
- `rubydung.input` – key, mouse-button and gamepad codes (`Key`,
  `MouseButton`, `GamepadButton`, `GamepadAxis`), `Event` / `EventType`,
  and `InputState`, which tracks held keys, held buttons and the cursor
  position from events.
- `rubydung.timing` – `Timer` (elapsed milliseconds or seconds) and
  `Timestep`.
- `rubydung.log` – `init` selects console and/or file output
  (`LogTarget`); with `FILE` it opens a log named after the current time
  (`YYYY-MM-DD_HH-MM-SS.log`). `set_level` sets the threshold and `info`,
  `warn`, `error`, `fatal`, `debug`, `trace` and `log` write a timestamped
  line with the caller's file and line. Levels are in `LogLevel`.
- `rubydung.shader` – `parse_shader_text` and `parse_shader_file` split a
  file holding both stages, each introduced by a `#shader vertex` or
  `#shader fragment` line; `Shader` compiles and links such a file and
  sets uniforms (`set_int`, `set_float`, `set_vec3`, `set_mat4`, …).
  Failures raise `ShaderError`.
- `rubydung.buffers` – `VertexLayout` / `VertexAttrib`, `VertexBuffer`,
  `IndexBuffer` and `VertexArray`.
- `rubydung.image` – `load_image` decodes a file into an `Image`;
  `Texture` and `load_texture` upload it with repeat wrapping and mipmaps.
- `rubydung.window` – `Window` opens a pyglet window from
  `WindowProperties` and turns its input into queued `Event`s, read with
  `events()`.
- `rubydung.application` – `Application` owns a window, an `InputState`
  and a `LayerStack`. `start` runs the loop: updates at a fixed 60 per
  second, one render per frame, `on_tick` once a second, optionally capped
  by `set_fps_goal`, until `stop` is called or the window is closed.
  `current_application` returns the most recently created one.

## Examples

Stopping a falling box on the block below it:

```python
from rubydung.aabb import AABB

block = AABB((0, 0, 0), (1, 1, 1))
player = AABB((0, 1, 0), (1, 2, 1))
block.clip_y_collide(player, -0.5)   # 0.0: the fall is cut short
```

Splitting a combined shader file:

```python
from rubydung.shader import parse_shader_text

sources = parse_shader_text(
    "#shader vertex\nvoid main() {}\n#shader fragment\nvoid main() {}\n"
)
sources.vertex     # "void main() {}\n"
```

Running a layer in a window:

```python
from rubydung.application import Application
from rubydung.layers import DefaultLayer
from rubydung.window import WindowProperties

app = Application("Game", WindowProperties(1024, 768, cursor_enabled=True))
app.set_fps_goal(60)
app.push_layer(DefaultLayer())
app.start()
```

## What is not here

The package holds the engine pieces only. It has no block world: there is
no level store, no chunk meshing, no player movement or block picking, no
saved level file, and no command that starts a game. A game is built by
subclassing `Layer` (or `DefaultLayer`) and pushing it onto an
`Application`.

## Tests

```
pip install .[test]
pytest
```