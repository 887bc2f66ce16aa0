# ykengine

Building blocks for real-time games in plain Python, with no third-party
dependencies: vector and matrix math, collision tests, interpolation,
tunable values kept in JSON files, level files, timed fades and animations,
a worker thread pool, scene switching, sphere colliders and a spawn-script
reader.

## Modules

- `ykengine.vector` — immutable `Vector2`, `Vector3`, `Vector4` and
  `Quaternion` dataclasses. `Vector3` has `dot`, `length`, `normalized`,
  `cross`, `project` and `perpendicular`, plus `+`, `-`, scalar `*`, `/` and
  unary minus. `Quaternion` has `dot`, `length`, `normalized`, `+`, scalar
  `*` and `/`. `Vector2` has `dot`, `length`, `+` and `-`.
- `ykengine.matrix` — `Matrix3x3` and `Matrix4x4` (row-vector convention)
  with `identity()`, `inverse()`, `transpose()`, `determinant()`, `+`, `-`
  and `@` for multiplication. Builders: `make_translate_matrix`,
  `make_scale_matrix`, `make_rotate_x_matrix`, `make_rotate_y_matrix`,
  `make_rotate_z_matrix`, `make_rotate_matrix` (Euler angles, X then Y then
  Z), `make_rotate_matrix_from_quaternion`, `make_affine_matrix` (Euler
  angles or a quaternion), `make_affine_matrix_from_transform`,
  `make_perspective_fov_matrix`, `make_orthographic_matrix`,
  `make_viewport_matrix` and `make_identity_4x4`; 2D counterparts
  `make_translate_matrix_2d`, `make_rotate_matrix_2d`,
  `make_orthographic_matrix_2d` and `make_viewport_matrix_2d`.
  `transform` / `transform_2d` map points with the homogeneous divide
  (raising `ValueError` when w is zero); `transform_normal` maps directions.
  `aabb_contains_point` tests a point against a box.
- `ykengine.shapes` — primitives `Circle`, `Square`, `Sphere`, `Line`, `Ray`,
  `Segment`, `Plane`, `Triangle`, `AABB`, `OBB`, and data records
  `EulerTransform`, `QuaternionTransform`, `Particle`, `Emitter`,
  `AccelerationField`, `KeyFrame`, `ObjectData`, `LevelData`, `RandomRange`,
  `EmitterRangeParams` and `ParticleRandomizationFlags`.
- `ykengine.collision` — `is_collision(a, b)` for square/point,
  square/circle, sphere/sphere, sphere/plane, line, ray or segment against a
  plane, a triangle or an AABB, AABB/AABB, AABB/sphere, AABB/point,
  OBB against a sphere, line, ray or segment, and OBB/OBB (separating axes).
  An unsupported pair raises `TypeError`. Also `capsule_collision` and
  `box_collision` for 2D.
- `ykengine.interpolation` — `lerp` (numbers, `Vector2`, `Vector3`,
  `Quaternion`), `slerp` (`Vector3`, `Quaternion`), `lerp_short_angle`,
  `ease_in` and `ease_out`.
- `ykengine.global_variables` — `GlobalVariables`: named groups of `int`,
  `float`, `Vector3` and `bool` items with `create_group`, `set_value`,
  `add_item` (only adds a missing key), typed getters
  (`get_int_value`, `get_float_value`, `get_vector3_value`,
  `get_bool_value`), and `save_file` / `load_file` / `load_files`, one
  `<group>.json` file per group in a directory
  (`Resources/GlobalVariables` by default).
- `ykengine.level_data` — `load_level_data(base_directory, file_name,
  extension)` reads a JSON scene whose `name` is `"scene"` and keeps its
  `MESH` objects, converting rotations from degrees to radians and
  swapping axes from a Z-up to a Y-up frame. Invalid files raise
  `LevelDataError`.
- `ykengine.fade` — `Fade` and `FadeStatus`: `start`, `update` (advances
  1/60 s per call), `stop`, `is_finished`, and the overlay `color` / `alpha`.
- `ykengine.animator` — `SRTAnimator` moves a `Vector3` from a start to an
  end value over a duration; `update(delta_time)` keeps its own clock,
  `advance(elapsed_time, delta_time)` works with a clock you keep.
- `ykengine.thread_pool` — `ThreadPool` with `start`, `enqueue_task`,
  `wait_for_completion` and `shutdown`; usable as a context manager.
  Exceptions raised by tasks are collected in `errors`.
- `ykengine.scene` — `BaseScene`, `AbstractSceneFactory`, `SceneFactory`
  (a table of names and scene constructors) and `SceneManager`, which
  switches to a requested scene at the start of the next `update`.
- `ykengine.colliders` — `Collider`, `CollisionTypeId` and
  `CollisionManager`, which tests every registered pair of collision
  spheres and calls `on_collision` on both members of each touching pair.
- `ykengine.enemy_pop` — `EnemyPopScript` runs `POP,x,y,z` and
  `WAIT,frames` lines one frame at a time, calling back for each spawn.

## Example

```python
from ykengine.vector import Vector3
from ykengine.shapes import Sphere, AABB
from ykengine.collision import is_collision
from ykengine.interpolation import lerp
from ykengine.matrix import make_affine_matrix, transform

a = Sphere(Vector3(0.0, 0.0, 0.0), 1.0)
b = Sphere(Vector3(1.5, 0.0, 0.0), 1.0)
print(is_collision(a, b))  # True

box = AABB(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
print(is_collision(box, b))  # True

print(lerp(Vector3(0.0, 0.0, 0.0), Vector3(10.0, 0.0, 0.0), 0.25))
# Vector3(x=2.5, y=0.0, z=0.0)

world = make_affine_matrix(
    Vector3(2.0, 2.0, 2.0), Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)
)
print(transform(Vector3(1.0, 0.0, 0.0), world))  # Vector3(x=3.0, y=0.0, z=0.0)
```

## What it does not do

There is no rendering, window, input or audio here. `Fade` computes the
overlay colour but does not draw it, `CollisionManager.is_draw_collider`
only reports a setting, and scenes' `draw` methods are whatever your
subclasses make them. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```