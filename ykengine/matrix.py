"""3x3 and 4x4 matrices in row-vector convention, and transform builders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from .shapes import AABB, EulerTransform, QuaternionTransform
from .vector import Quaternion, Vector2, Vector3

Rows = tuple[tuple[float, ...], ...]


def _minor(rows: Rows, skip_row: int, skip_col: int) -> Rows:
    return tuple(
        tuple(value for c, value in enumerate(row) if c != skip_col)
        for r, row in enumerate(rows)
        if r != skip_row
    )


def _determinant(rows: Rows) -> float:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    return sum(
        (-1) ** col * value * _determinant(_minor(rows, 0, col))
        for col, value in enumerate(rows[0])
    )


def _inverse_rows(rows: Rows) -> Rows:
    """Inverse by the adjugate; raises ZeroDivisionError if singular."""
    inv_det = 1.0 / _determinant(rows)
    size = len(rows)
    return tuple(
        tuple(
            inv_det * (-1) ** (r + c) * _determinant(_minor(rows, c, r))
            for c in range(size)
        )
        for r in range(size)
    )


def _transpose_rows(rows: Rows) -> Rows:
    return tuple(zip(*rows))


class _SquareMatrix:
    """Shared behaviour of the fixed-size square matrices."""

    SIZE: ClassVar[int]
    m: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.m)
        if len(rows) != self.SIZE or any(len(row) != self.SIZE for row in rows):
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE}x{self.SIZE} values"
            )
        object.__setattr__(self, "m", rows)

    @classmethod
    def _identity(cls):
        size = cls.SIZE
        return cls(
            tuple(
                tuple(1.0 if r == c else 0.0 for c in range(size)) for r in range(size)
            )
        )

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            tuple(
                tuple(a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.m, other.m)
            )
        )

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            tuple(
                tuple(a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.m, other.m)
            )
        )

    def __matmul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        columns = tuple(zip(*other.m))
        return type(self)(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.m
            )
        )

    def determinant(self) -> float:
        """Determinant of the matrix."""
        return _determinant(self.m)


@dataclass(frozen=True)
class Matrix3x3(_SquareMatrix):
    """A 3x3 matrix used for 2D homogeneous transforms."""

    SIZE: ClassVar[int] = 3
    m: Rows = field(default=((0.0,) * 3,) * 3)

    @staticmethod
    def identity() -> Matrix3x3:
        """The 3x3 identity matrix."""
        return Matrix3x3._identity()

    def inverse(self) -> Matrix3x3:
        """Inverse matrix; raises ZeroDivisionError if singular."""
        return Matrix3x3(_inverse_rows(self.m))

    def transpose(self) -> Matrix3x3:
        """Matrix with rows and columns swapped."""
        return Matrix3x3(_transpose_rows(self.m))


@dataclass(frozen=True)
class Matrix4x4(_SquareMatrix):
    """A 4x4 matrix used for 3D homogeneous transforms."""

    SIZE: ClassVar[int] = 4
    m: Rows = field(default=((0.0,) * 4,) * 4)

    @staticmethod
    def identity() -> Matrix4x4:
        """The 4x4 identity matrix."""
        return Matrix4x4._identity()

    def inverse(self) -> Matrix4x4:
        """Inverse matrix; raises ZeroDivisionError if singular."""
        return Matrix4x4(_inverse_rows(self.m))

    def transpose(self) -> Matrix4x4:
        """Matrix with rows and columns swapped."""
        return Matrix4x4(_transpose_rows(self.m))


def make_translate_matrix_2d(translate: Vector2) -> Matrix3x3:
    """2D translation matrix."""
    return Matrix3x3(
        ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (translate.x, translate.y, 1.0))
    )


def make_orthographic_matrix_2d(
    left: float, top: float, right: float, bottom: float
) -> Matrix3x3:
    """2D orthographic projection into normalised coordinates."""
    return Matrix3x3(
        (
            (2 / (right - left), 0.0, 0.0),
            (0.0, 2 / (top - bottom), 0.0),
            ((left + right) / (left - right), (top + bottom) / (bottom - top), 1.0),
        )
    )


def make_viewport_matrix_2d(
    left: float, top: float, width: float, height: float
) -> Matrix3x3:
    """2D viewport matrix from normalised to screen coordinates."""
    return Matrix3x3(
        (
            (width / 2, 0.0, 0.0),
            (0.0, -(height / 2), 0.0),
            (left + width / 2, top + height / 2, 1.0),
        )
    )


def make_rotate_matrix_2d(theta: float) -> Matrix3x3:
    """2D rotation by ``theta`` radians."""
    cos, sin = math.cos(theta), math.sin(theta)
    return Matrix3x3(((cos, sin, 0.0), (-sin, cos, 0.0), (0.0, 0.0, 1.0)))


def transform_2d(vector: Vector2, matrix: Matrix3x3) -> Vector2:
    """Transform a 2D point, dividing by w; raises ValueError when w is zero."""
    m = matrix.m
    x = vector.x * m[0][0] + vector.y * m[1][0] + m[2][0]
    y = vector.x * m[0][1] + vector.y * m[1][1] + m[2][1]
    w = vector.x * m[0][2] + vector.y * m[1][2] + m[2][2]
    if w == 0.0:
        raise ValueError("homogeneous w component is zero")
    return Vector2(x / w, y / w)


def make_identity_4x4() -> Matrix4x4:
    """The 4x4 identity matrix."""
    return Matrix4x4.identity()


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """3D translation matrix."""
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (translate.x, translate.y, translate.z, 1.0),
        )
    )


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """3D scaling matrix."""
    return Matrix4x4(
        (
            (scale.x, 0.0, 0.0, 0.0),
            (0.0, scale.y, 0.0, 0.0),
            (0.0, 0.0, scale.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a 3D point, dividing by w; raises ValueError when w is zero."""
    m = matrix.m
    coords = tuple(
        vector.x * m[0][c] + vector.y * m[1][c] + vector.z * m[2][c] + m[3][c]
        for c in range(4)
    )
    w = coords[3]
    if w == 0.0:
        raise ValueError("homogeneous w component is zero")
    return Vector3(coords[0] / w, coords[1] / w, coords[2] / w)


def transform_normal(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Apply only the rotation and scale part of ``matrix`` to a direction."""
    m = matrix.m
    return Vector3(
        *(
            vector.x * m[0][c] + vector.y * m[1][c] + vector.z * m[2][c]
            for c in range(3)
        )
    )


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    cos, sin = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, cos, sin, 0.0),
            (0.0, -sin, cos, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    cos, sin = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (cos, 0.0, -sin, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (sin, 0.0, cos, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    cos, sin = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        (
            (cos, sin, 0.0, 0.0),
            (-sin, cos, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_rotate_matrix(rotate: Vector3) -> Matrix4x4:
    """Euler rotation applied in X, Y, Z order."""
    return (
        make_rotate_x_matrix(rotate.x)
        @ make_rotate_y_matrix(rotate.y)
        @ make_rotate_z_matrix(rotate.z)
    )


def make_rotate_matrix_from_quaternion(q: Quaternion) -> Matrix4x4:
    """Rotation matrix of a quaternion (normalised first)."""
    n = q.normalized()
    xx, yy, zz = n.x * n.x, n.y * n.y, n.z * n.z
    xy, xz, yz = n.x * n.y, n.x * n.z, n.y * n.z
    wx, wy, wz = n.w * n.x, n.w * n.y, n.w * n.z
    return Matrix4x4(
        (
            (1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0),
            (2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0),
            (2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_affine_matrix(
    scale: Vector3, rotate: Vector3 | Quaternion, translate: Vector3
) -> Matrix4x4:
    """Scale, then rotate (Euler angles or quaternion), then translate."""
    if isinstance(rotate, Quaternion):
        rotation = make_rotate_matrix_from_quaternion(rotate)
    elif isinstance(rotate, Vector3):
        rotation = make_rotate_matrix(rotate)
    else:
        raise TypeError(f"unsupported rotation type {type(rotate).__name__}")
    return make_scale_matrix(scale) @ rotation @ make_translate_matrix(translate)


def make_affine_matrix_from_transform(
    transform: EulerTransform | QuaternionTransform,
) -> Matrix4x4:
    """Affine matrix of a scale/rotation/translation record."""
    return make_affine_matrix(transform.scale, transform.rotation, transform.translation)


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Perspective projection mapping depth [near, far] to [0, 1]."""
    cot = 1 / math.tan(fov_y / 2)
    depth = far_clip - near_clip
    return Matrix4x4(
        (
            ((1 / aspect_ratio) * cot, 0.0, 0.0, 0.0),
            (0.0, cot, 0.0, 0.0),
            (0.0, 0.0, far_clip / depth, 1.0),
            (0.0, 0.0, (-near_clip * far_clip) / depth, 0.0),
        )
    )


def make_orthographic_matrix(
    left: float,
    top: float,
    right: float,
    bottom: float,
    near_clip: float,
    far_clip: float,
) -> Matrix4x4:
    """Orthographic projection mapping depth [near, far] to [0, 1]."""
    return Matrix4x4(
        (
            (2 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 1 / (far_clip - near_clip), 0.0),
            (
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ),
        )
    )


def make_viewport_matrix(
    left: float,
    top: float,
    width: float,
    height: float,
    min_depth: float,
    max_depth: float,
) -> Matrix4x4:
    """Viewport matrix from normalised device coordinates to the screen."""
    return Matrix4x4(
        (
            (width / 2, 0.0, 0.0, 0.0),
            (0.0, -(height / 2), 0.0, 0.0),
            (0.0, 0.0, max_depth - min_depth, 0.0),
            (left + width / 2, top + height / 2, min_depth, 1.0),
        )
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def aabb_contains_point(aabb: AABB, point: Vector3) -> bool:
    """Whether ``point`` lies inside or on the surface of ``aabb``."""
    closest = Vector3(
        *(_clamp(p, lo, hi) for p, lo, hi in zip(point, aabb.min, aabb.max))
    )
    return (point - closest).length() <= 0.0