"""Command that prints the world and rotation matrices for an affine transform."""

from __future__ import annotations

import argparse

from .matrix import format_matrix, make_affine_matrix, make_rotate_xyz_matrix
from .vector import Vector3

_DEFAULT_SCALE = (1.2, 0.79, -2.1)
_DEFAULT_ROTATE = (0.4, 1.43, -0.8)
_DEFAULT_TRANSLATE = (2.7, -4.15, 1.57)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the affine world matrix and its rotation matrix."
    )
    for name, default in (
        ("scale", _DEFAULT_SCALE),
        ("rotate", _DEFAULT_ROTATE),
        ("translate", _DEFAULT_TRANSLATE),
    ):
        parser.add_argument(
            f"--{name}",
            nargs=3,
            type=float,
            metavar=("X", "Y", "Z"),
            default=list(default),
        )
    return parser


def main(argv=None) -> int:
    """Print the world matrix and the rotation matrix; return the exit status."""
    args = _parser().parse_args(argv)
    scale = Vector3(*args.scale)
    rotate = Vector3(*args.rotate)
    translate = Vector3(*args.translate)

    rotate_matrix = make_rotate_xyz_matrix(rotate)
    world_matrix = make_affine_matrix(scale, rotate, translate)

    print(format_matrix(world_matrix, "worldMatrix"))
    print()
    print(format_matrix(rotate_matrix, "rotateMatrix"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())