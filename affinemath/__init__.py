"""3D vectors, 4x4 affine transformation matrices and a command that prints them."""

__version__ = "0.1.0"
__all__ = ["app", "matrix", "vector"]