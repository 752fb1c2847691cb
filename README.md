# rengine

rengine is the core of a small 2D game engine, written in pure Python. It has
no dependencies. It gives you the math, the scene hierarchy, the collision
checks and the key-event plumbing that a game loop needs. It does not draw
anything and it does not open windows.

## Modules

- `rengine.vector2d`: `Vector2D`, a mutable `(x, y)` pair of floats, and the
  constants `PI`, `DEG2RAD`, `RAD2DEG` and `ZERO_VECTOR`.
- `rengine.transformation`: `Transformation2D`. It holds a position, a size and
  a rotation, each in an absolute and a parent-relative form. `matrix()` returns
  a column-major 4×4 model matrix as a list of 16 floats. The rotation is in
  degrees.
- `rengine.mathutil`: `make_projection_matrix(left, right, bottom, top)`, plus
  the `Color` (RGBA, defaulting to opaque white) and `Timer` records.
- `rengine.delegate`: `Delegate`, a list of callbacks. `bind()` adds a callback.
  Calling the delegate calls every bound callback in the order they were bound.
- `rengine.filesystem`: `get_file_contents`, `import_textures`,
  `make_directory`, and `TextureConfig`, which saves and loads
  `<file>.import` sidecar files holding `wrap format filter`.
- `rengine.settings`: `WindowSettings`, `ContextSettings`,
  `default_window_settings()`, `default_context_settings()`, and the
  state-only `Window` and `Context` classes.
- `rengine.objects`: `GameObject`, `Component`, `EmptyWorldObject` and
  `WorldObject`.
- `rengine.world`: `World`, `Engine`, `Camera` and `ProjectionMode`.
- `rengine.physics`: `Shape`, `Extent`, `CollisionShape2D` and `Physics`.
- `rengine.input`: `KeyAction`, `KeyEvent`, `InputBuffer` and a shared
  `input_buffer`.

## Installation

```
pip install .
```

## Scene objects and the engine loop

`World.instance()` returns the shared world. `world.instantiate(cls)` creates
an object, calls its `init()`, gives it the next id and registers it.
`Engine.init()` calls `start()` on every registered object.
`Engine.loop(dt)` calls `loop(dt)` on every registered object whose
`processing` flag is set.

```python
from rengine.vector2d import Vector2D
from rengine.objects import WorldObject
from rengine.world import World, Engine

class Mover(WorldObject):
    def loop(self, delta_time):
        super().loop(delta_time)
        self.position = self.position + Vector2D(10 * delta_time, 0)

world = World.instance()
mover = world.instantiate(Mover)

engine = Engine()
engine.init()
engine.loop(0.016)
print(mover.position.x, mover.position.y)
```

A `WorldObject`'s `init()` sets its size to 100×100 at the origin. Setting
`position`, `size` or `rotation` marks the object as `updated` and passes the
change on to its `WorldObject` children. `Engine.end()` sets the attached
window's `running` flag to false. If the engine has no window, it raises
`RuntimeError`.

## Components

```python
obj = world.instantiate(WorldObject)
shape = obj.add_component(CollisionShape2D)      # created, attached, init() called
assert obj.get_component(CollisionShape2D) is shape
obj.remove_component(shape)
```

`get_component` matches the exact type only. Subclasses do not match.

## Collisions

A `CollisionShape2D` registers itself with `Physics.instance()` when it is
started. Each `loop()` call copies its parent's position into
`extent.reference_point`. For a circle, `extent.size.x` is the radius.

`Physics.loop()` looks only at pairs made of one trigger and one solid shape.
A pair collides when it passes both `test_collision` (a broad check along x)
and `handle_collision` (which needs `a.mask == b.layer` and then runs a
rectangle/rectangle, rectangle/circle or circle/circle test). For a colliding
pair, the solid shape gets `on_collision_enter` and the trigger gets
`on_trigger_enter`. Both receive the parent of the second shape in the pair.
To react, append callables to `collision_enter_listeners`,
`trigger_enter_listeners`, `collision_exit_listeners` or
`trigger_exit_listeners`.

## Input

```python
from rengine.input import InputBuffer, KeyAction

buffer = InputBuffer()
buffer.bind_key_event(32, KeyAction.PRESS, lambda: print("jump"))
buffer.key_callback(32, KeyAction.PRESS)
```

`update_key_states(pressed_keys)` moves all 256 key states forward. A key in
the set goes to `PRESS`, or to `HOLD` if it was already at `PRESS`. Every
other key goes to `UP`. The method then fires the events bound to each key's
new state.

## Behaviour to be aware of

- `Vector2D` subtraction returns `other - self` component by component. For
  example, `a - b` is `Vector2D(b.x - a.x, b.y - a.y)`. Subtracting a scalar
  works the usual way.
- `Vector2D.__ne__` is true only when both components differ.
- `Vector2D.distance_squared` is `(o.x - x)² + (o.x - y)(o.y - y)`.
  `distance` returns NaN when that value is negative.
- `Vector2D * Vector2D` returns `dot()`, which is
  `|a|·|b|·cos(a.angle_to(b))`.
- `Transformation2D` objects compare equal when any one of position, size or
  rotation matches.
- `make_directory(path, name)` joins the two parts with no separator. It
  returns `""` when the directory was created and the joined path when it
  could not be created.
- `GameObject.destroy(time)` only marks the object as dead, and only when
  `time` is 0.

## What this package does not do

There is no rendering, texture loading, shader or sprite support, and no
platform windowing. `Window` and `Context` only hold settings and state. There
is no mouse input and no command-line program. Your own code must run the
frame loop, draw the scene and feed key states into `InputBuffer`.

## Running the tests

```
pip install .[test]
pytest
```