import math

import pytest

from affinemath.matrix import (
    Matrix4x4,
    format_matrix,
    make_affine_matrix,
    make_rotate_x_matrix,
    make_rotate_xyz_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
    transform,
)
from affinemath.vector import Vector3

SCALE = Vector3(1.2, 0.79, -2.1)
ROTATE = Vector3(0.4, 1.43, -0.8)
TRANSLATE = Vector3(2.7, -4.15, 1.57)

IDENTITY_FLAT = [1.0 if i == j else 0.0 for i in range(4) for j in range(4)]


def _sample() -> Matrix4x4:
    return make_affine_matrix(SCALE, ROTATE, TRANSLATE)


def test_identity_diagonal():
    ident = Matrix4x4.identity()
    assert all(ident[i, j] == (1.0 if i == j else 0.0) for i in range(4) for j in range(4))


def test_default_is_zero_matrix():
    assert Matrix4x4() - Matrix4x4.identity() + Matrix4x4.identity() == Matrix4x4()


def test_getitem_row_and_element():
    m = _sample()
    assert m[3] == m.rows[3]
    assert m[3, 0] == pytest.approx(2.7)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4x4([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    with pytest.raises(ValueError):
        Matrix4x4([[1, 2, 3, 4]] * 3 + [[1, 2, 3]])


def test_add_subtract_round_trip():
    a = _sample()
    b = make_rotate_xyz_matrix(ROTATE)
    result = (a + b) - b
    assert [v for row in result.rows for v in row] == pytest.approx(
        [v for row in a.rows for v in row], abs=1e-9
    )


def test_multiply_by_identity():
    m = _sample()
    right = m @ Matrix4x4.identity()
    left = Matrix4x4.identity() @ m
    expected = [v for row in m.rows for v in row]
    assert [v for row in right.rows for v in row] == pytest.approx(expected, abs=1e-9)
    assert [v for row in left.rows for v in row] == pytest.approx(expected, abs=1e-9)


def test_matmul_is_associative():
    a = make_scale_matrix(SCALE)
    b = make_rotate_xyz_matrix(ROTATE)
    c = make_translate_matrix(TRANSLATE)
    first = (a @ b) @ c
    second = a @ (b @ c)
    assert [v for row in first.rows for v in row] == pytest.approx(
        [v for row in second.rows for v in row], abs=1e-9
    )


def test_inverse_times_matrix_is_identity():
    m = _sample()
    right = m @ m.inverse()
    left = m.inverse() @ m
    assert [v for row in right.rows for v in row] == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    assert [v for row in left.rows for v in row] == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_inverse_of_singular_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4x4().inverse()


def test_determinant_of_product():
    a = _sample()
    b = make_rotate_xyz_matrix(Vector3(0.3, -0.2, 1.1))
    assert math.isclose((a @ b).determinant(), a.determinant() * b.determinant())


def test_determinant_of_scale_matrix_is_component_product():
    m = make_scale_matrix(SCALE)
    assert math.isclose(m.determinant(), SCALE.x * SCALE.y * SCALE.z)


def test_transpose_twice_is_original():
    m = _sample()
    assert m.transpose().transpose() == m
    assert m.transpose()[0, 3] == m[3, 0]


def test_rotation_inverse_is_transpose():
    r = make_rotate_xyz_matrix(ROTATE)
    inverse = r.inverse()
    transposed = r.transpose()
    assert [v for row in inverse.rows for v in row] == pytest.approx(
        [v for row in transposed.rows for v in row], abs=1e-9
    )


@pytest.mark.parametrize(
    "maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix]
)
def test_single_axis_rotation_preserves_length(maker):
    v = Vector3(1.2, 0.79, -2.1)
    assert math.isclose(transform(v, maker(0.7)).length(), v.length())


def test_rotate_x_quarter_turn_maps_y_to_z():
    result = transform(Vector3(0, 1, 0), make_rotate_x_matrix(math.pi / 2))
    assert (result.x, result.y, result.z) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)


def test_rotate_xyz_composition_order():
    expected = (
        make_rotate_x_matrix(ROTATE.x)
        @ make_rotate_y_matrix(ROTATE.y)
        @ make_rotate_z_matrix(ROTATE.z)
    )
    result = make_rotate_xyz_matrix(ROTATE)
    assert [v for row in result.rows for v in row] == pytest.approx(
        [v for row in expected.rows for v in row], abs=1e-9
    )


def test_affine_equals_scale_rotate_translate():
    expected = (
        make_scale_matrix(SCALE) @ make_rotate_xyz_matrix(ROTATE) @ make_translate_matrix(TRANSLATE)
    )
    result = _sample()
    assert [v for row in result.rows for v in row] == pytest.approx(
        [v for row in expected.rows for v in row], abs=1e-9
    )


def test_translate_moves_point():
    v = Vector3(1.2, 0.79, -2.1)
    result = transform(v, make_translate_matrix(TRANSLATE))
    assert (result.x, result.y, result.z) == pytest.approx(
        (1.2 + 2.7, 0.79 - 4.15, -2.1 + 1.57), abs=1e-9
    )


def test_scale_scales_point():
    v = Vector3(0.4, 1.43, -0.8)
    result = transform(v, make_scale_matrix(SCALE))
    assert (result.x, result.y, result.z) == pytest.approx(
        (v.x * SCALE.x, v.y * SCALE.y, v.z * SCALE.z), abs=1e-9
    )


def test_transform_with_inverse_round_trip():
    v = Vector3(0.4, 1.43, -0.8)
    m = _sample()
    result = transform(transform(v, m), m.inverse())
    assert (result.x, result.y, result.z) == pytest.approx((0.4, 1.43, -0.8), abs=1e-9)


def test_transform_zero_w_raises():
    with pytest.raises(ZeroDivisionError):
        transform(Vector3(1, 2, 3), Matrix4x4())


def test_format_matrix_layout():
    text = format_matrix(make_translate_matrix(TRANSLATE), "worldMatrix")
    lines = text.split("\n")
    assert lines[0] == "worldMatrix"
    assert len(lines) == 5
    assert lines[1] == "  1.00   0.00   0.00   0.00"
    assert lines[4] == "  2.70  -4.15   1.57   1.00"