"""4x4 matrices for affine transforms of row vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .vector import Vector3

_SIZE = 4


def _zero_rows() -> tuple[tuple[float, ...], ...]:
    return tuple((0.0,) * _SIZE for _ in range(_SIZE))


def _det3(m: list[list[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable row-major 4x4 matrix; vectors are rows multiplied on the left."""

    rows: tuple[tuple[float, ...], ...] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Matrix4x4:
        """Return the identity matrix."""
        return cls(
            tuple(1.0 if i == j else 0.0 for j in range(_SIZE)) for i in range(_SIZE)
        )

    def __getitem__(self, index):
        """Return a row for an int index, or an element for a (row, column) pair."""
        if isinstance(index, tuple):
            row, column = index
            return self.rows[row][column]
        return self.rows[index]

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows)
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows)
        )

    def __matmul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix4x4(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        )

    def _cofactor(self, row: int, column: int) -> float:
        minor = [
            [value for c, value in enumerate(r) if c != column]
            for i, r in enumerate(self.rows)
            if i != row
        ]
        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * _det3(minor)

    def determinant(self) -> float:
        """Return the determinant."""
        return sum(self.rows[0][c] * self._cofactor(0, c) for c in range(_SIZE))

    def inverse(self) -> Matrix4x4:
        """Return the inverse; raises ZeroDivisionError for a singular matrix."""
        det = self.determinant()
        if det == 0:
            raise ZeroDivisionError("matrix is singular")
        return Matrix4x4(
            tuple(self._cofactor(j, i) / det for j in range(_SIZE)) for i in range(_SIZE)
        )

    def transpose(self) -> Matrix4x4:
        """Return the transposed matrix."""
        return Matrix4x4(zip(*self.rows))


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Return a matrix that moves points by ``translate``."""
    rows = [list(row) for row in Matrix4x4.identity().rows]
    rows[3][:3] = [translate.x, translate.y, translate.z]
    return Matrix4x4(rows)


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Return a matrix scaling each axis by the components of ``scale``."""
    return Matrix4x4(
        [
            [scale.x, 0, 0, 0],
            [0, scale.y, 0, 0],
            [0, 0, scale.z, 0],
            [0, 0, 0, 1],
        ]
    )


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([[1, 0, 0, 0], [0, c, s, 0], [0, -s, c, 0], [0, 0, 0, 1]])


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([[c, 0, -s, 0], [0, 1, 0, 0], [s, 0, c, 0], [0, 0, 0, 1]])


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([[c, s, 0, 0], [-s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def make_rotate_xyz_matrix(rotate: Vector3) -> Matrix4x4:
    """Return the combined rotation X @ (Y @ Z) for the angles in ``rotate``."""
    return make_rotate_x_matrix(rotate.x) @ (
        make_rotate_y_matrix(rotate.y) @ make_rotate_z_matrix(rotate.z)
    )


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Return the scale, then rotate, then translate transform."""
    rotation = make_rotate_xyz_matrix(rotate)
    factors = (scale.x, scale.y, scale.z)
    rows: list[Iterable[float]] = [
        [factor * value for value in rotation.rows[i][:3]] + [0.0]
        for i, factor in enumerate(factors)
    ]
    rows.append([translate.x, translate.y, translate.z, 1.0])
    return Matrix4x4(rows)


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by ``matrix`` with a homogeneous divide."""
    point = (vector.x, vector.y, vector.z, 1.0)
    x, y, z, w = (
        sum(p * m for p, m in zip(point, column)) for column in zip(*matrix.rows)
    )
    if w == 0:
        raise ZeroDivisionError("homogeneous w component is zero")
    return Vector3(x / w, y / w, z / w)


def format_matrix(matrix: Matrix4x4, label: str) -> str:
    """Render a label line followed by the four rows with two decimals."""
    lines = [label]
    lines.extend(" ".join(f"{value:6.2f}" for value in row) for row in matrix.rows)
    return "\n".join(lines)