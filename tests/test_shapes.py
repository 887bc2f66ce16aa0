import dataclasses
import math

import pytest

from ykengine.shapes import (
    AABB,
    OBB,
    EmitterRangeParams,
    EulerTransform,
    KeyFrame,
    LevelData,
    ObjectData,
    Particle,
    ParticleRandomizationFlags,
    RandomRange,
    Sphere,
    Triangle,
)
from ykengine.vector import Quaternion, Vector3


def test_triangle_keeps_vertices_as_tuple():
    verts = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)]
    tri = Triangle(verts)
    assert tri.vertices == tuple(verts)
    verts.append(Vector3(5, 5, 5))
    assert len(tri.vertices) == 3


@pytest.mark.parametrize("count", [0, 2, 4])
def test_triangle_requires_three_vertices(count):
    with pytest.raises(ValueError):
        Triangle([Vector3()] * count)


def test_obb_requires_three_orientations():
    with pytest.raises(ValueError):
        OBB(Vector3(), [Vector3(1, 0, 0), Vector3(0, 1, 0)], Vector3(1, 1, 1))


def test_obb_stores_axes():
    axes = [Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)]
    obb = OBB(Vector3(1, 2, 3), axes, Vector3(0.5, 0.5, 0.5))
    assert obb.orientations == tuple(axes)
    assert obb.center == Vector3(1, 2, 3)


def test_sphere_is_frozen():
    s = Sphere(Vector3(1, 2, 3), 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.radius = 3.0  # type: ignore[misc]
    assert s.radius == 2.0


def test_aabb_equality_by_value():
    box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
    assert tuple(box.min) == (-1, -1, -1)
    assert tuple(box.max) == (1, 1, 1)
    assert (box == AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))) is True


def test_emitter_range_defaults():
    params = EmitterRangeParams()
    assert params.translate == RandomRange(max=Vector3(1, 1, 1), min=Vector3(-1, -1, -1))
    assert params.scale == RandomRange(max=Vector3(1, 1, 1), min=Vector3(-1, -1, -1))
    assert tuple(params.rotate.max) == (math.pi, math.pi, math.pi)
    assert tuple(params.rotate.min) == (-math.pi, -math.pi, -math.pi)


def test_randomization_flags_default_off():
    flags = ParticleRandomizationFlags()
    assert dataclasses.astuple(flags) == (False,) * 6


def test_level_data_lists_are_independent():
    a = LevelData()
    b = LevelData()
    a.objects.append(ObjectData(file_name="cube.obj"))
    assert b.objects == []
    assert a.objects[0].file_name == "cube.obj"


def test_transforms_are_mutable_and_independent():
    p1 = Particle()
    p2 = Particle()
    p1.transform.translation = Vector3(1, 2, 3)
    assert p2.transform.translation == Vector3()
    assert p1.transform == EulerTransform(translation=Vector3(1, 2, 3))


def test_keyframe_holds_generic_value():
    frame = KeyFrame(time=0.25, value=Quaternion(0, 0, 0, 1))
    assert frame.value == Quaternion(0, 0, 0, 1)
    assert frame.time == 0.25