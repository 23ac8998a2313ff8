"""
Immutable 2-D vector type and the distance/interpolation helpers built on it.
"""
import math
from dataclasses import dataclass

from .errors import DegenerateGeometryError


@dataclass(frozen=True)
class Vector2:
    """
    A 2-D vector in surface coordinates. All operators return a new vector.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> 'Vector2':
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> 'Vector2':
        if divisor == 0:
            raise DegenerateGeometryError(f"Cannot divide {self} by zero")
        return Vector2(self.x / divisor, self.y / divisor)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def rescale(self, magnitude: float) -> 'Vector2':
        """
        Returns a vector pointing the same way with the given magnitude.

        Raises:
            DegenerateGeometryError: If this vector has zero length, since it
                has no direction to keep.
        """
        current = self.magnitude()
        if current == 0:
            raise DegenerateGeometryError(f"Cannot rescale zero-length vector {self}")
        return self * (magnitude / current)


def lerp(v1: Vector2, v2: Vector2, t: float) -> Vector2:
    """
    Linear interpolation from v1 (t=0) to v2 (t=1). Values of t outside
    [0, 1] extrapolate along the same line.
    """
    return v1 + (v2 - v1) * t


def vector_distance(v1: Vector2, v2: Vector2) -> Vector2:
    """The offset that takes v1 to v2."""
    return v2 - v1


def float_distance(v1: Vector2, v2: Vector2) -> float:
    return vector_distance(v1, v2).magnitude()
