"""Two-dimensional vectors, rectangles and float comparison helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Machine epsilon of a 32-bit float, the default tolerance for float_eq.
FLOAT_EPSILON = 1.1920928955078125e-07


@dataclass
class Vector:
    """A mutable 2D vector with component-wise arithmetic."""

    x: float = 0
    y: float = 0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Unit vector in the same direction; NaN components for a zero vector."""
        length = self.length()
        if length == 0:
            return Vector(math.nan, math.nan)
        return Vector(self.x / length, self.y / length)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x / other.x, self.y / other.y)


# Screen coordinates are integer-valued vectors.
ScreenCoord = Vector


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def top_left(self) -> Vector:
        return Vector(self.x, self.y)

    def contains(self, point: Vector) -> bool:
        """True if the point lies inside the rectangle or on its border."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )


def float_eq(x: float, y: float, epsilon: float = FLOAT_EPSILON) -> bool:
    """True if x and y differ by no more than epsilon."""
    return math.fabs(x - y) <= epsilon


def direction(lhs: Vector, rhs: Vector) -> Vector:
    """The vector pointing from lhs to rhs."""
    return Vector(rhs.x - lhs.x, rhs.y - lhs.y)