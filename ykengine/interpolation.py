"""Linear and spherical interpolation and easing curves."""

from __future__ import annotations

import math
from functools import singledispatch

from .vector import Quaternion, Vector2, Vector3


@singledispatch
def lerp(p0, p1, t: float):
    """Linear interpolation between ``p0`` and ``p1`` at parameter ``t``."""
    raise TypeError(f"cannot interpolate values of type {type(p0).__name__}")


@lerp.register(float)
@lerp.register(int)
def _lerp_scalar(p0: float, p1: float, t: float) -> float:
    return (1 - t) * p0 + t * p1


@lerp.register
def _lerp_vector2(p0: Vector2, p1: Vector2, t: float) -> Vector2:
    return Vector2(*((1 - t) * a + t * b for a, b in zip(p0, p1)))


@lerp.register
def _lerp_vector3(p0: Vector3, p1: Vector3, t: float) -> Vector3:
    return Vector3(*((1 - t) * a + t * b for a, b in zip(p0, p1)))


@lerp.register
def _lerp_quaternion(p0: Quaternion, p1: Quaternion, t: float) -> Quaternion:
    return Quaternion(*((1 - t) * a + t * b for a, b in zip(p0, p1)))


def lerp_short_angle(a: float, b: float, t: float) -> float:
    """Interpolate from angle ``a`` towards ``b`` along the shorter arc."""
    diff = math.fmod(b - a, 2.0 * math.pi)
    if diff > math.pi:
        diff -= 2.0 * math.pi
    elif diff < -math.pi:
        diff += 2.0 * math.pi
    return a + diff * t


@singledispatch
def slerp(v1, v2, t: float):
    """Spherical linear interpolation between two unit vectors or quaternions."""
    raise TypeError(f"cannot slerp values of type {type(v1).__name__}")


def _slerp_core(v1, v2, t: float):
    dot = min(v1.dot(v2), 1.0)
    if dot == 1.0:
        return lerp(v1, v2, t)
    theta = math.acos(dot)
    sin_theta = math.sin(theta)
    sin_from = math.sin((1 - t) * theta)
    sin_to = math.sin(t * theta)
    return (sin_from * v1 + sin_to * v2) / sin_theta


@slerp.register
def _slerp_vector3(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    return _slerp_core(v1, v2, t)


@slerp.register
def _slerp_quaternion(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    if q1 == q2:
        return q1
    return _slerp_core(q1, q2, t)


def ease_in(x: float) -> float:
    """Sine ease-in curve on [0, 1]."""
    return 1 - math.cos((x * math.pi) / 2)


def ease_out(x: float) -> float:
    """Sine ease-out curve on [0, 1]."""
    return math.sin((x * math.pi) / 2)