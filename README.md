# latren

Engine-independent building blocks for a small game engine, in pure Python
with no runtime dependencies.

## Modules

- `latren.idfactory`: `IDFactory`, which hands out increasing integer ids
  through `next_id()`.
- `latren.events`: `SingleEventHandler` (one event, many callbacks),
  `EventHandler` (callbacks grouped by event kind) and `VariantEventHandler`,
  which calls callbacks that take no parameters without the dispatched
  arguments. `subscribe` returns an id for `unsubscribe`; unknown ids are
  ignored.
- `latren.components`: `Component` with the lifecycle hooks `start`,
  `delete`, `update` and `fixed_update`; `ComponentMemoryPool`, which keeps
  the components of one type in order and indexed by entity;
  `ComponentMemoryManager`, which holds one pool per component type; and
  `ComponentReference`, a handle to an entity's component in a pool.
- `latren.systems`: `Systems`, which resolves the running game's systems
  (`entity_manager`, `game_window`, `input_system`, `renderer`, `resources`,
  `audio_player`, `physics`, `time`, `delta_time`) through replaceable
  getters. `use_game_instance` reads them from a game object's attributes.
  Asking for a system without a getter raises `SystemNotConfiguredError`; an
  unknown name raises `ValueError`.
- `latren.text`: `Font`, `Character`, `BaseLine` and `HorizontalAlignment`,
  with the measurements `line_width`, `line_widths`, `text_width`,
  `row_baseline`, `baseline`, `row_height`, `text_height` and
  `fixed_text_height`. `layout_text` places glyphs, and `build_quads` turns
  placed glyphs into two triangles each of `(x, y, u, v)` vertices.
- `latren.quaternion`: `Quaternion`, an orientation that can be set from a
  `(w, x, y, z)` quaternion or from Euler angles, together with
  `quat_from_eulers` and `eulers_from_quat`.
- `latren.postprocessing`: the `PostProcessing`, `Kernel` and `Vignette`
  settings. `PostProcessing.apply_kernel` accepts 3x3, 5x5 or 7x7 kernels and
  ignores any other size with a warning. The module also provides the kernel
  helpers `fill`, `box_blur`, `gaussian_blur` and `normalize`.
- `latren.plane`: `Plane`, a tiled unit plane with optional random jitter
  and heights. It produces vertices, texture coordinates, triangle indices and
  per-vertex normals, plus `height_map()` for a heightfield collider.
  Pass `seed` to make the result repeatable.
- `latren.camera`: `Camera`, `ViewFrustum`, `FrustumPlane` and `AABB`.
- `latren.material`: `Material`, a shader, a texture and named uniforms of
  fixed types (`UniformType`). It starts with `fog.use`, `opacity` and
  `color`.
- `latren.uigeometry`: `Rect`, `UITransform` and
  `CanvasBackgroundVerticalAnchor`. `clip_bounds` limits a component's bounds
  to its canvas background, `canvas_projection` builds the orthographic
  projection of the 1280x720 base window, and `container_local_bounds`
  returns a container's bounds.
- `latren.enums`: `ShaderID`, `RenderPass`, `RenderMode`, `WindowEventType`
  and `LightType`.
- `latren.audio`: `AudioHandle`, `AudioBufferData` and
  `AudioSourceRelativeTo`.
- `latren.logsetup`: `init_logging(pattern, level)`, which sends log output
  to standard output. Output is formatted by a `%`-flag pattern (the default
  is `"[%T] %^%-10l%$ %v"`), and `LogLevel.DEBUG` lowers the root level to
  debug.

## Examples

```python
from latren.events import EventHandler

handler = EventHandler()
event_id = handler.subscribe("mouseUp", lambda: print("clicked"))
handler.dispatch("mouseUp")
handler.unsubscribe("mouseUp", event_id)
```

```python
from latren.components import Component, ComponentMemoryManager, ComponentMemoryPool

class Health(Component):
    pass

manager = ComponentMemoryManager()
manager.move_pools({Health: ComponentMemoryPool(Health)})
ref = manager.alloc_new_component(1, Health)
assert ref.component().parent == 1
ref.delete()
assert ref.is_null()
```

```python
from latren.text import Character, Font, line_width

font = Font(char_map={ord("A"): Character(size=(8, 10), bearing=(1, 10), advance=9)})
assert line_width(font, "AA") == 18  # advance of the first glyph, extent of the last
```

```python
from latren.plane import Plane

plane = Plane(tiling=(4, 4), height_variation=0.2, seed=1)
plane.generate_vertices()
assert len(plane.vertices) == 5 * 5 * 3
```

## What this package does not do

The package has no window, no graphics or audio output, no input handling,
no physics simulation and no loading of font, image or model files. It holds
the data, bookkeeping and arithmetic those parts work with. `Font` objects are
built by the caller, and the vertices from `build_quads` and `Plane` are
returned as plain lists for whatever renderer is in use. The package provides
no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```