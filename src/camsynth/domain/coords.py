"""Core 2D coordinate types.

This module defines the fundamental geometric types used throughout camsynth:
- Vector: A 2D displacement or direction
- Point: Alias of Vector used for absolute positions
- Transform: A 2x2 linear map (identity or pure rotation) applied to points
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """A pair of double-precision coordinates.

    Immutable and hashable. All operations return new instances.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector":
        return Vector(self.x / divisor, self.y / divisor)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def unit(self) -> "Vector":
        """Return the vector scaled to length 1.

        Raises:
            ZeroDivisionError: If the vector has zero length
        """
        length = self.length()
        return Vector(self.x / length, self.y / length)

    def rotate_90_cw(self) -> "Vector":
        """Rotate by -90 degrees (clockwise in a y-up frame)."""
        return Vector(self.y, -self.x)

    def rotate_90_ccw(self) -> "Vector":
        """Rotate by +90 degrees (counter-clockwise in a y-up frame)."""
        return Vector(-self.y, self.x)

    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


# Absolute positions and displacements share one representation.
Point = Vector

ORIGIN = Vector(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2x2 linear transform applied to points by matrix multiplication.

    The matrix is laid out as::

        | a  b |
        | c  d |

    so that ``Transform(a, b, c, d) * Point(x, y)`` is
    ``Point(a*x + b*y, c*x + d*y)``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0

    @classmethod
    def identity(cls) -> "Transform":
        """Transform that leaves points unchanged."""
        return cls()

    @classmethod
    def rotate(cls, angle: float) -> "Transform":
        """Counter-clockwise rotation by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(cos_a, -sin_a, sin_a, cos_a)

    @property
    def angle(self) -> float:
        """Rotation angle represented by the matrix, in radians."""
        return math.atan2(self.c, self.a)

    def apply(self, point: Vector) -> Vector:
        """Multiply the matrix with a point."""
        return Vector(
            self.a * point.x + self.b * point.y,
            self.c * point.x + self.d * point.y,
        )

    def __mul__(self, point: Vector) -> Vector:
        return self.apply(point)
