"""Geometric primitives, transforms and particle data records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .vector import Quaternion, Vector2, Vector3, Vector4

T = TypeVar("T")


@dataclass(frozen=True)
class Circle:
    center: Vector2 = field(default_factory=Vector2)
    radius: float = 0.0


@dataclass(frozen=True)
class Square:
    """Axis-aligned 2D rectangle given by its corners."""

    min: Vector2 = field(default_factory=Vector2)
    max: Vector2 = field(default_factory=Vector2)


@dataclass(frozen=True)
class Sphere:
    center: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0


@dataclass(frozen=True)
class Line:
    """Infinite line through ``origin`` along ``diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Ray:
    """Half-line starting at ``origin`` along ``diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Segment:
    """Segment from ``origin`` to ``origin + diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Plane:
    """Plane of points p with ``normal . p == distance``."""

    normal: Vector3 = field(default_factory=Vector3)
    distance: float = 0.0


def _three(name: str, items) -> tuple:
    values = tuple(items)
    if len(values) != 3:
        raise ValueError(f"{name} needs exactly 3 vectors, got {len(values)}")
    return values


@dataclass(frozen=True)
class Triangle:
    vertices: tuple[Vector3, Vector3, Vector3]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _three("vertices", self.vertices))


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class OBB:
    """Oriented bounding box.

    ``orientations`` are the box axes (orthonormal); ``size`` holds the
    half-extents along them.
    """

    center: Vector3
    orientations: tuple[Vector3, Vector3, Vector3]
    size: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "orientations", _three("orientations", self.orientations)
        )


@dataclass
class EulerTransform:
    """Scale, Euler rotation and translation."""

    scale: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)


@dataclass
class QuaternionTransform:
    """Scale, quaternion rotation and translation."""

    scale: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)
    translation: Vector3 = field(default_factory=Vector3)


@dataclass
class Particle:
    transform: EulerTransform = field(default_factory=EulerTransform)
    velocity: Vector3 = field(default_factory=Vector3)
    color: Vector4 = field(default_factory=Vector4)
    life_time: float = 0.0
    current_time: float = 0.0


@dataclass
class Emitter:
    transform: EulerTransform = field(default_factory=EulerTransform)
    count: int = 0
    frequency: float = 0.0
    frequency_time: float = 0.0


@dataclass
class AccelerationField:
    acceleration: Vector3 = field(default_factory=Vector3)
    area: AABB = field(default_factory=AABB)


@dataclass(frozen=True)
class KeyFrame(Generic[T]):
    """A value at a point in time on an animation curve."""

    time: float
    value: T


@dataclass
class ObjectData:
    """One object placed in a level."""

    file_name: str = ""
    transform: EulerTransform = field(default_factory=EulerTransform)


@dataclass
class LevelData:
    objects: list[ObjectData] = field(default_factory=list)


@dataclass(frozen=True)
class RandomRange(Generic[T]):
    max: T
    min: T


def _symmetric_range(extent: float) -> RandomRange[Vector3]:
    return RandomRange(
        max=Vector3(extent, extent, extent), min=Vector3(-extent, -extent, -extent)
    )


@dataclass
class EmitterRangeParams:
    """Randomisation ranges for emitted particles."""

    translate: RandomRange[Vector3] = field(default_factory=lambda: _symmetric_range(1.0))
    scale: RandomRange[Vector3] = field(default_factory=lambda: _symmetric_range(1.0))
    rotate: RandomRange[Vector3] = field(
        default_factory=lambda: _symmetric_range(math.pi)
    )


@dataclass
class ParticleRandomizationFlags:
    """Which particle properties are randomised on emission."""

    color: bool = False
    translate: bool = False
    velocity: bool = False
    rotate: bool = False
    scale: bool = False
    life_time: bool = False