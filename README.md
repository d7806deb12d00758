# affinemath

Small, dependency-free 3D math for building affine transformations, with a
command that prints the resulting matrices as text.

## What is in the package

### `affinemath.vector`

- `Vector3(x=0.0, y=0.0, z=0.0)` is an immutable dataclass.
  - `a + b` and `a - b` work component by component.
  - `v * s` and `s * v` scale by a real number.
  - `dot(other)` returns the dot product.
  - `length()` returns the Euclidean norm.
  - `normalized()` returns a unit vector. A zero vector comes back unchanged.
- `format_vector(vector, label)` returns the three components with two
  decimals. Each value is left-aligned in a 10-character column, and the label
  follows the last column.

### `affinemath.matrix`

- `Matrix4x4(rows)` is an immutable, row-major 4x4 matrix. The values are
  stored as floats in `rows`. Any shape other than 4 rows of 4 values raises
  `ValueError`. With no arguments you get the zero matrix.
  - `Matrix4x4.identity()` returns the identity matrix.
  - `m[i]` returns a row, and `m[i, j]` returns one element.
  - `a + b` and `a - b` work element-wise, and `a @ b` is the matrix product.
  - `determinant()` returns the determinant.
  - `inverse()` returns the inverse. A singular matrix raises `ZeroDivisionError`.
  - `transpose()` returns the transposed matrix.
- Builders:
  - `make_translate_matrix(translate)`
  - `make_scale_matrix(scale)`
  - `make_rotate_x_matrix(radian)`, `make_rotate_y_matrix(radian)` and
    `make_rotate_z_matrix(radian)`
  - `make_rotate_xyz_matrix(rotate)`, which returns `X @ (Y @ Z)` for the
    angles in `rotate`.
  - `make_affine_matrix(scale, rotate, translate)`, which scales each row of the
    XYZ rotation by the matching scale component and puts the translation in
    the bottom row.
- `transform(vector, matrix)` treats `vector` as the row `(x, y, z, 1)`,
  multiplies it by `matrix` and divides by the resulting `w`. It raises
  `ZeroDivisionError` when `w` is zero.
- `format_matrix(matrix, label)` returns the label on its own line, followed by
  the four rows. Each value is printed with the format `6.2f`.

The matrices use the row-vector convention. Points multiply on the left, and
the translation sits in the bottom row.

## Installation

```
pip install .
```

## Usage

```python
from affinemath.vector import Vector3
from affinemath.matrix import make_affine_matrix, transform, format_matrix

scale = Vector3(1.2, 0.79, -2.1)
rotate = Vector3(0.4, 1.43, -0.8)
translate = Vector3(2.7, -4.15, 1.57)

world = make_affine_matrix(scale, rotate, translate)
print(format_matrix(world, "worldMatrix"))
print(transform(Vector3(1.0, 0.0, 0.0), world))
```

## Command line

```
affinemath
affinemath --scale 1 1 1 --rotate 0 0 0.5 --translate 3 0 0
```

The command prints two blocks, separated by a blank line:

- `worldMatrix`, the affine matrix.
- `rotateMatrix`, the XYZ rotation matrix.

It builds them from a scale, a rotation in radians and a translation. Each of
`--scale`, `--rotate` and `--translate` takes three numbers. When an option is
left out, its default applies:

| Option        | Default             |
|---------------|---------------------|
| `--scale`     | `1.2 0.79 -2.1`     |
| `--rotate`    | `0.4 1.43 -0.8`     |
| `--translate` | `2.7 -4.15 1.57`    |

The command exits with status 0.

## What it does not do

The output is plain text on standard output. There is no window, no
interactive display and no keyboard handling.

## Running the tests

```
pip install .[test]
pytest
```