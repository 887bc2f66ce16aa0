"""Intersection tests between 2D and 3D primitives."""

from __future__ import annotations

import math
from typing import Callable

from .matrix import Matrix4x4, aabb_contains_point, transform
from .shapes import (
    AABB,
    OBB,
    Circle,
    Line,
    Plane,
    Ray,
    Segment,
    Sphere,
    Square,
    Triangle,
)
from .vector import Vector2, Vector3

__all__ = ["capsule_collision", "box_collision", "is_collision"]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator yields an infinity or NaN."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _half_int(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def capsule_collision(
    capsule_a: Vector2,
    capsule_b: Vector2,
    circle_c: Vector2,
    radius_c: float,
    radius_a: float,
) -> bool:
    """Whether a circle overlaps a 2D capsule from ``capsule_a`` to ``capsule_b``."""
    d = circle_c - capsule_a
    ba = capsule_b - capsule_a
    length = ba.length()
    if length == 0.0:
        return d.length() < radius_c + radius_a

    unit = Vector2(ba.x / length, ba.y / length)
    t = _clamp(d.dot(unit) / length, 0.0, 1.0)
    closest = Vector2(
        (1.0 - t) * capsule_a.x + t * capsule_b.x,
        (1.0 - t) * capsule_a.y + t * capsule_b.y,
    )
    return (circle_c - closest).length() < radius_c + radius_a


def box_collision(
    box_a: Vector2,
    box_a_width: int,
    box_a_height: int,
    box_b: Vector2,
    box_b_width: int,
    box_b_height: int,
) -> bool:
    """Whether two centred boxes with integer sizes overlap.

    Half sizes are computed with integer division, as the sizes are integers.
    """
    half_aw, half_ah = _half_int(box_a_width), _half_int(box_a_height)
    half_bw, half_bh = _half_int(box_b_width), _half_int(box_b_height)
    return (
        box_a.x - half_aw <= box_b.x + half_bw
        and box_a.x + half_aw >= box_b.x - half_bw
        and box_a.y - half_ah <= box_b.y + half_bh
        and box_a.y + half_ah >= box_b.y - half_bh
    )


# --- 2D -------------------------------------------------------------------


def _square_point(square: Square, point: Vector2) -> bool:
    return (
        square.min.x <= point.x <= square.max.x
        and square.min.y <= point.y <= square.max.y
    )


def _square_circle(square: Square, circle: Circle) -> bool:
    closest = Vector2(
        _clamp(circle.center.x, square.min.x, square.max.x),
        _clamp(circle.center.y, square.min.y, square.max.y),
    )
    return (circle.center - closest).length() <= circle.radius


# --- spheres and planes ----------------------------------------------------


def _sphere_sphere(s1: Sphere, s2: Sphere) -> bool:
    return (s2.center - s1.center).length() <= s1.radius + s2.radius


def _sphere_plane(sphere: Sphere, plane: Plane) -> bool:
    return abs(plane.normal.dot(sphere.center) - plane.distance) <= sphere.radius


def _plane_parameter(origin: Vector3, diff: Vector3, plane: Plane) -> float | None:
    dot = diff.dot(plane.normal)
    if dot == 0.0:
        return None
    return (plane.distance - origin.dot(plane.normal)) / dot


def _line_plane(line: Line, plane: Plane) -> bool:
    return line.diff.dot(plane.normal) != 0.0


def _ray_plane(ray: Ray, plane: Plane) -> bool:
    t = _plane_parameter(ray.origin, ray.diff, plane)
    return t is not None and 0 <= t


def _segment_plane(segment: Segment, plane: Plane) -> bool:
    t = _plane_parameter(segment.origin, segment.diff, plane)
    return t is not None and 0 <= t <= 1


# --- triangles -------------------------------------------------------------


def _triangle_hit(
    triangle: Triangle,
    origin: Vector3,
    diff: Vector3,
    accepts: Callable[[float], bool],
) -> bool:
    v0, v1, v2 = triangle.vertices
    v01 = v1 - v0
    v12 = v2 - v1
    cross = v01.cross(v12)
    if cross.length() == 0.0:
        return False
    normal = cross.normalized()
    plane = Plane(normal, v0.dot(normal))

    t = _plane_parameter(origin, diff, plane)
    if t is None or not accepts(t):
        return False

    point = origin + t * diff
    v20 = v0 - v2
    return all(
        edge.cross(point - vertex).dot(normal) >= 0.0
        for edge, vertex in ((v01, v1), (v12, v2), (v20, v0))
    )


def _triangle_line(triangle: Triangle, line: Line) -> bool:
    return _triangle_hit(triangle, line.origin, line.diff, lambda t: True)


def _triangle_ray(triangle: Triangle, ray: Ray) -> bool:
    return _triangle_hit(triangle, ray.origin, ray.diff, lambda t: t >= 0)


def _triangle_segment(triangle: Triangle, segment: Segment) -> bool:
    return _triangle_hit(triangle, segment.origin, segment.diff, lambda t: 0 <= t <= 1)


# --- axis-aligned boxes ----------------------------------------------------


def _aabb_aabb(a: AABB, b: AABB) -> bool:
    return all(
        a_min <= b_max and a_max >= b_min
        for a_min, a_max, b_min, b_max in zip(a.min, a.max, b.min, b.max)
    )


def _aabb_sphere(aabb: AABB, sphere: Sphere) -> bool:
    closest = Vector3(
        *(_clamp(c, lo, hi) for c, lo, hi in zip(sphere.center, aabb.min, aabb.max))
    )
    return (sphere.center - closest).length() <= sphere.radius


def _slab_interval(aabb: AABB, origin: Vector3, diff: Vector3) -> tuple[float, float]:
    nears = []
    fars = []
    for lo, hi, o, d in zip(aabb.min, aabb.max, origin, diff):
        t_lo = _divide(lo - o, d)
        t_hi = _divide(hi - o, d)
        nears.append(min(t_lo, t_hi))
        fars.append(max(t_lo, t_hi))
    t_min = max(max(nears[0], nears[1]), nears[2])
    t_max = min(min(fars[0], fars[1]), fars[2])
    return t_min, t_max


def _aabb_line(aabb: AABB, line: Line) -> bool:
    t_min, t_max = _slab_interval(aabb, line.origin, line.diff)
    return t_min <= t_max


def _aabb_ray(aabb: AABB, ray: Ray) -> bool:
    t_min, t_max = _slab_interval(aabb, ray.origin, ray.diff)
    return t_min <= t_max and t_max >= 0.0


def _aabb_segment(aabb: AABB, segment: Segment) -> bool:
    t_min, t_max = _slab_interval(aabb, segment.origin, segment.diff)
    if not t_min <= t_max:
        return False
    if 0.0 <= t_min <= 1.0 or 0.0 <= t_max <= 1.0:
        return True
    return t_min < 0.0 and t_max > 1.0


# --- oriented boxes --------------------------------------------------------


def _obb_world_inverse(obb: OBB) -> Matrix4x4:
    axis_x, axis_y, axis_z = obb.orientations
    world = Matrix4x4(
        (
            (axis_x.x, axis_x.y, axis_x.z, 0.0),
            (axis_y.x, axis_y.y, axis_y.z, 0.0),
            (axis_z.x, axis_z.y, axis_z.z, 0.0),
            (obb.center.x, obb.center.y, obb.center.z, 1.0),
        )
    )
    return world.inverse()


def _obb_local_aabb(obb: OBB) -> AABB:
    return AABB(-obb.size, obb.size)


def _obb_local_linear(obb: OBB, origin: Vector3, diff: Vector3):
    inverse = _obb_world_inverse(obb)
    local_origin = transform(origin, inverse)
    local_end = transform(origin + diff, inverse)
    return local_origin, local_end - local_origin


def _obb_sphere(obb: OBB, sphere: Sphere) -> bool:
    local_center = transform(sphere.center, _obb_world_inverse(obb))
    return _aabb_sphere(_obb_local_aabb(obb), Sphere(local_center, sphere.radius))


def _obb_line(obb: OBB, line: Line) -> bool:
    origin, diff = _obb_local_linear(obb, line.origin, line.diff)
    return _aabb_line(_obb_local_aabb(obb), Line(origin, diff))


def _obb_ray(obb: OBB, ray: Ray) -> bool:
    origin, diff = _obb_local_linear(obb, ray.origin, ray.diff)
    return _aabb_ray(_obb_local_aabb(obb), Ray(origin, diff))


def _obb_segment(obb: OBB, segment: Segment) -> bool:
    origin, diff = _obb_local_linear(obb, segment.origin, segment.diff)
    return _aabb_segment(_obb_local_aabb(obb), Segment(origin, diff))


def _separation_axes(obb1: OBB, obb2: OBB):
    yield from obb1.orientations
    yield from obb2.orientations
    for a in obb1.orientations:
        for b in obb2.orientations:
            yield a.cross(b)


def _projected_radius(obb: OBB, axis: Vector3) -> float:
    return sum(
        extent * abs(axis.dot(orientation))
        for extent, orientation in zip(obb.size, obb.orientations)
    )


def _obb_obb(obb1: OBB, obb2: OBB) -> bool:
    offset = obb2.center - obb1.center
    for axis in _separation_axes(obb1, obb2):
        distance = abs(offset.dot(axis))
        if not distance <= _projected_radius(obb1, axis) + _projected_radius(obb2, axis):
            return False
    return True


_TESTS: dict[tuple[type, type], Callable[[object, object], bool]] = {
    (Square, Vector2): _square_point,
    (Square, Circle): _square_circle,
    (Sphere, Sphere): _sphere_sphere,
    (Sphere, Plane): _sphere_plane,
    (Line, Plane): _line_plane,
    (Ray, Plane): _ray_plane,
    (Segment, Plane): _segment_plane,
    (Triangle, Line): _triangle_line,
    (Triangle, Ray): _triangle_ray,
    (Triangle, Segment): _triangle_segment,
    (AABB, AABB): _aabb_aabb,
    (AABB, Sphere): _aabb_sphere,
    (AABB, Line): _aabb_line,
    (AABB, Ray): _aabb_ray,
    (AABB, Segment): _aabb_segment,
    (AABB, Vector3): aabb_contains_point,
    (OBB, Sphere): _obb_sphere,
    (OBB, Line): _obb_line,
    (OBB, Ray): _obb_ray,
    (OBB, Segment): _obb_segment,
    (OBB, OBB): _obb_obb,
}


def is_collision(a, b) -> bool:
    """Whether shapes ``a`` and ``b`` intersect.

    Raises TypeError for a pair of shapes that has no test.
    """
    test = _TESTS.get((type(a), type(b)))
    if test is None:
        raise TypeError(
            f"no collision test for {type(a).__name__} and {type(b).__name__}"
        )
    return test(a, b)