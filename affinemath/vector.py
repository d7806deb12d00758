"""Three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

_COLUMN_WIDTH = 10


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def dot(self, other: Vector3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vector3(self.x / length, self.y / length, self.z / length)


def format_vector(vector: Vector3, label: str) -> str:
    """Render the components with two decimals in columns, followed by the label."""
    cells = (f"{value:.2f}".ljust(_COLUMN_WIDTH) for value in (vector.x, vector.y, vector.z))
    return "".join(cells) + label