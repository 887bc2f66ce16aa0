import math

import pytest

from ykengine.matrix import (
    Matrix3x3,
    Matrix4x4,
    aabb_contains_point,
    make_affine_matrix,
    make_affine_matrix_from_transform,
    make_identity_4x4,
    make_orthographic_matrix,
    make_orthographic_matrix_2d,
    make_perspective_fov_matrix,
    make_rotate_matrix,
    make_rotate_matrix_2d,
    make_rotate_matrix_from_quaternion,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
    make_translate_matrix_2d,
    make_viewport_matrix,
    make_viewport_matrix_2d,
    transform,
    transform_2d,
    transform_normal,
)
from ykengine.shapes import AABB, EulerTransform, QuaternionTransform
from ykengine.vector import Quaternion, Vector2, Vector3

TOL = {"rel": 1e-9, "abs": 1e-9}


def flat(matrix):
    return tuple(v for row in matrix.m for v in row)


SAMPLE4 = Matrix4x4(
    (
        (3.2, 0.7, 9.6, 4.4),
        (5.5, 1.3, 7.8, 2.1),
        (6.9, 8.0, 2.6, 1.0),
        (0.5, 7.2, 5.1, 3.3),
    )
)


def test_identity_matches_helper():
    assert make_identity_4x4() == Matrix4x4.identity()
    assert Matrix4x4.identity().m[2][2] == 1.0
    assert Matrix4x4.identity().m[0][3] == 0.0


def test_default_matrix_is_zero():
    assert all(v == 0.0 for row in Matrix4x4().m for v in row)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4x4(((1.0, 2.0), (3.0, 4.0)))
    with pytest.raises(ValueError):
        Matrix3x3(((1.0,) * 4,) * 3)


def test_add_and_subtract_round_trip():
    other = Matrix4x4.identity()
    assert flat((SAMPLE4 + other) - other) == pytest.approx(flat(SAMPLE4), **TOL)
    assert flat(SAMPLE4 + other)[0] == pytest.approx(4.2)


def test_multiply_by_identity():
    assert flat(SAMPLE4 @ Matrix4x4.identity()) == pytest.approx(flat(SAMPLE4), **TOL)
    assert flat(Matrix4x4.identity() @ SAMPLE4) == pytest.approx(flat(SAMPLE4), **TOL)


def test_inverse_times_matrix_is_identity():
    identity = flat(Matrix4x4.identity())
    assert flat(SAMPLE4 @ SAMPLE4.inverse()) == pytest.approx(identity, **TOL)
    assert flat(SAMPLE4.inverse() @ SAMPLE4) == pytest.approx(identity, **TOL)


def test_singular_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4x4().inverse()
    with pytest.raises(ZeroDivisionError):
        Matrix3x3().inverse()


def test_transpose_twice_is_original():
    t = SAMPLE4.transpose()
    assert t.m[0][3] == SAMPLE4.m[3][0]
    assert t.transpose() == SAMPLE4


def test_transpose_of_product():
    a = SAMPLE4
    b = make_affine_matrix(Vector3(1, 2, 3), Vector3(0.1, 0.2, 0.3), Vector3(4, 5, 6))
    assert flat((a @ b).transpose()) == pytest.approx(
        flat(b.transpose() @ a.transpose()), **TOL
    )


def test_matrix3x3_inverse_round_trip():
    m = Matrix3x3(((2.0, 1.0, 0.5), (0.3, 4.0, 1.0), (1.0, 2.0, 3.0)))
    assert flat(m @ m.inverse()) == pytest.approx(flat(Matrix3x3.identity()), **TOL)


def test_translate_2d():
    m = make_translate_matrix_2d(Vector2(3.0, -2.0))
    assert tuple(transform_2d(Vector2(1.0, 1.0), m)) == pytest.approx((4.0, -1.0), **TOL)


def test_rotate_2d_quarter_turn():
    result = transform_2d(Vector2(1.0, 0.0), make_rotate_matrix_2d(math.pi / 2))
    assert tuple(result) == pytest.approx((0.0, 1.0), **TOL)


def test_orthographic_and_viewport_2d_round_trip():
    ortho = make_orthographic_matrix_2d(-10.0, 5.0, 10.0, -5.0)
    view = make_viewport_matrix_2d(0.0, 0.0, 1280.0, 720.0)
    assert tuple(transform_2d(Vector2(-10.0, 5.0), ortho)) == pytest.approx((-1.0, 1.0), **TOL)
    assert tuple(transform_2d(Vector2(-1.0, 1.0), view)) == pytest.approx((0.0, 0.0), **TOL)
    assert tuple(transform_2d(Vector2(1.0, -1.0), view)) == pytest.approx((1280.0, 720.0), **TOL)


def test_transform_2d_zero_w_raises():
    with pytest.raises(ValueError):
        transform_2d(Vector2(1.0, 1.0), Matrix3x3())


def test_translate_and_scale_3d():
    p = Vector3(1.0, 2.0, 3.0)
    assert tuple(transform(p, make_translate_matrix(Vector3(1, 1, 1)))) == pytest.approx(
        (2.0, 3.0, 4.0), **TOL
    )
    assert tuple(transform(p, make_scale_matrix(Vector3(2, 2, 2)))) == pytest.approx(
        (2.0, 4.0, 6.0), **TOL
    )


def test_transform_zero_w_raises():
    with pytest.raises(ValueError):
        transform(Vector3(1.0, 1.0, 1.0), Matrix4x4())


def test_transform_normal_ignores_translation():
    m = make_translate_matrix(Vector3(5.0, 6.0, 7.0))
    assert transform_normal(Vector3(1.0, 2.0, 3.0), m) == Vector3(1.0, 2.0, 3.0)


def test_rotate_z_quarter_turn():
    result = transform(Vector3(1.0, 0.0, 0.0), make_rotate_z_matrix(math.pi / 2))
    assert tuple(result) == pytest.approx((0.0, 1.0, 0.0), **TOL)


def test_rotations_preserve_length():
    v = Vector3(1.0, 2.0, 3.0)
    for m in (make_rotate_x_matrix(0.7), make_rotate_y_matrix(-1.1), make_rotate_z_matrix(2.3)):
        assert math.isclose(transform_normal(v, m).length(), v.length())


def test_rotate_matrix_is_xyz_product():
    r = Vector3(0.3, -0.4, 1.2)
    expected = make_rotate_x_matrix(0.3) @ make_rotate_y_matrix(-0.4) @ make_rotate_z_matrix(1.2)
    assert flat(make_rotate_matrix(r)) == pytest.approx(flat(expected), **TOL)


def test_identity_quaternion_gives_identity_matrix():
    m = make_rotate_matrix_from_quaternion(Quaternion(0.0, 0.0, 0.0, 1.0))
    assert flat(m) == pytest.approx(flat(Matrix4x4.identity()), **TOL)


def test_quaternion_matches_axis_rotation():
    half = math.pi / 4
    q = Quaternion(0.0, 0.0, math.sin(half), math.cos(half))
    assert flat(make_rotate_matrix_from_quaternion(q)) == pytest.approx(
        flat(make_rotate_z_matrix(math.pi / 2)), **TOL
    )


def test_quaternion_is_normalised_first():
    half = math.pi / 4
    q = Quaternion(0.0, 0.0, math.sin(half), math.cos(half))
    assert flat(make_rotate_matrix_from_quaternion(q * 3.0)) == pytest.approx(
        flat(make_rotate_matrix_from_quaternion(q)), **TOL
    )


def test_affine_is_scale_rotate_translate():
    s, r, t = Vector3(1, 2, 3), Vector3(0.2, 0.5, -0.3), Vector3(7, 8, 9)
    expected = make_scale_matrix(s) @ make_rotate_matrix(r) @ make_translate_matrix(t)
    assert flat(make_affine_matrix(s, r, t)) == pytest.approx(flat(expected), **TOL)
    assert tuple(transform(Vector3(), make_affine_matrix(s, r, t))) == pytest.approx(
        (7.0, 8.0, 9.0), **TOL
    )


def test_affine_with_quaternion():
    q = Quaternion(0.0, 0.0, 0.0, 1.0)
    m = make_affine_matrix(Vector3(2, 2, 2), q, Vector3(1, 0, 0))
    expected = make_scale_matrix(Vector3(2, 2, 2)) @ make_translate_matrix(Vector3(1, 0, 0))
    assert flat(m) == pytest.approx(flat(expected), **TOL)


def test_affine_rejects_bad_rotation():
    with pytest.raises(TypeError):
        make_affine_matrix(Vector3(1, 1, 1), (0.0, 0.0, 0.0), Vector3())


def test_affine_from_transform():
    et = EulerTransform(Vector3(1, 1, 1), Vector3(0.1, 0.2, 0.3), Vector3(4, 5, 6))
    assert make_affine_matrix_from_transform(et) == make_affine_matrix(
        et.scale, et.rotation, et.translation
    )
    qt = QuaternionTransform(Vector3(1, 1, 1), Quaternion(0, 0, 0, 1), Vector3(4, 5, 6))
    assert flat(make_affine_matrix_from_transform(qt)) == pytest.approx(
        flat(make_translate_matrix(Vector3(4, 5, 6))), **TOL
    )


def test_perspective_maps_clip_planes_to_unit_depth():
    m = make_perspective_fov_matrix(0.45, 16 / 9, 0.1, 100.0)
    assert math.isclose(transform(Vector3(0, 0, 0.1), m).z, 0.0, abs_tol=1e-9)
    assert math.isclose(transform(Vector3(0, 0, 100.0), m).z, 1.0)


def test_orthographic_maps_corners():
    m = make_orthographic_matrix(-4.0, 3.0, 4.0, -3.0, 0.5, 50.0)
    assert tuple(transform(Vector3(-4.0, 3.0, 0.5), m)) == pytest.approx((-1.0, 1.0, 0.0), **TOL)
    assert tuple(transform(Vector3(4.0, -3.0, 50.0), m)) == pytest.approx((1.0, -1.0, 1.0), **TOL)


def test_viewport_maps_ndc_to_screen():
    m = make_viewport_matrix(0.0, 0.0, 1280.0, 720.0, 0.0, 1.0)
    assert tuple(transform(Vector3(-1.0, 1.0, 0.0), m)) == pytest.approx((0.0, 0.0, 0.0), **TOL)
    assert tuple(transform(Vector3(1.0, -1.0, 1.0), m)) == pytest.approx(
        (1280.0, 720.0, 1.0), **TOL
    )


def test_aabb_contains_point():
    box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
    assert aabb_contains_point(box, Vector3(0.5, 0.0, -0.5)) is True
    assert aabb_contains_point(box, Vector3(1.0, 1.0, 1.0)) is True
    assert aabb_contains_point(box, Vector3(1.5, 0.0, 0.0)) is False