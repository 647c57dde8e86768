"""Arc-length parametrized curve primitives.

Every primitive starts at its local origin and is addressed by the distance
travelled along it. ``value(s)`` returns the local position and the unit
tangent at arc length ``s``; translating to a global position is the
caller's job (see CompositeCurve).

Key classes:
- Curve: Protocol shared by all primitives
- Line: Straight segment defined by a displacement
- CircleArc: Circular arc defined by radius and signed angular span
- Bezier: Cubic Bezier with a memoized arc-length table
"""

import math
from typing import Protocol, runtime_checkable

from camsynth.core._bezier import (
    CubicPoints,
    build_length_table,
    cubic_derivative,
    cubic_point,
    fallback_direction,
    parameter_at_length,
)
from camsynth.domain import ORIGIN, Point, Vector


@runtime_checkable
class Curve(Protocol):
    """Capability set of an arc-length parametrized curve."""

    def length(self) -> float:
        """Total arc length."""
        ...

    def value(self, s: float) -> tuple[Point, Vector]:
        """Local position and unit tangent at arc length s."""
        ...


class Line:
    """Straight segment from the local origin to ``displacement``.

    A zero-length line is legal. Its direction is the zero vector, so
    callers must tolerate an arbitrary direction for it.
    """

    __slots__ = ("_direction", "_displacement", "_length")

    def __init__(self, displacement: Vector) -> None:
        self._displacement = displacement
        self._length = displacement.length()
        self._direction = displacement.unit() if self._length > 0.0 else ORIGIN

    @property
    def displacement(self) -> Vector:
        return self._displacement

    def length(self) -> float:
        return self._length

    def value(self, s: float) -> tuple[Point, Vector]:
        if self._length == 0.0:
            return ORIGIN, self._direction
        return self._displacement * (s / self._length), self._direction

    def __repr__(self) -> str:
        return f"Line({self._displacement.x!r}, {self._displacement.y!r})"


class CircleArc:
    """Circular arc of radius ``radius`` from ``start_angle`` to ``end_angle``.

    Angles are in radians relative to the arc's center. The sign of the span
    gives the direction of travel. The arc is shifted so that its first
    point sits at the local origin.
    """

    __slots__ = ("_end_angle", "_radius", "_sign", "_start_angle", "_start_offset")

    def __init__(self, radius: float, start_angle: float, end_angle: float) -> None:
        if radius <= 0.0:
            raise ValueError(f"Arc radius must be positive, got {radius}")
        self._radius = radius
        self._start_angle = start_angle
        self._end_angle = end_angle
        self._sign = 1.0 if end_angle >= start_angle else -1.0
        self._start_offset = Vector(
            radius * math.cos(start_angle), radius * math.sin(start_angle)
        )

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def start_angle(self) -> float:
        return self._start_angle

    @property
    def end_angle(self) -> float:
        return self._end_angle

    @property
    def center(self) -> Point:
        """Center of the circle in the local frame."""
        return -self._start_offset

    def length(self) -> float:
        return self._radius * abs(self._end_angle - self._start_angle)

    def value(self, s: float) -> tuple[Point, Vector]:
        theta = self._start_angle + self._sign * s / self._radius
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        position = Vector(self._radius * cos_t, self._radius * sin_t) - self._start_offset
        return position, Vector(-sin_t, cos_t) * self._sign

    def __repr__(self) -> str:
        return (
            f"CircleArc(radius={self._radius!r}, "
            f"start={self._start_angle!r}, end={self._end_angle!r})"
        )


class Bezier:
    """Cubic Bezier starting at the local origin.

    Arc length has no closed form for cubics, so the constructor splits the
    native parameter range into equal intervals and measures each with
    fontTools' adaptive arc-length routine. The resulting monotonic table of
    (parameter, cumulative length) pairs is kept for the lifetime of the
    curve; ``value`` only bisects it and refines locally.

    Args:
        ctrl1: First control point relative to the start
        ctrl2: Second control point relative to the start
        end: End point relative to the start
        intervals: Number of parameter intervals in the length table
        tolerance: Relative tolerance for each interval length
    """

    __slots__ = ("_lengths", "_params", "_points")

    def __init__(
        self,
        ctrl1: Vector,
        ctrl2: Vector,
        end: Vector,
        intervals: int = 64,
        tolerance: float = 1e-6,
    ) -> None:
        self._points: CubicPoints = (
            (0.0, 0.0),
            ctrl1.to_tuple(),
            ctrl2.to_tuple(),
            end.to_tuple(),
        )
        self._params, self._lengths = build_length_table(
            self._points, intervals, tolerance
        )

    @property
    def ctrl1(self) -> Vector:
        return Vector(*self._points[1])

    @property
    def ctrl2(self) -> Vector:
        return Vector(*self._points[2])

    @property
    def end(self) -> Vector:
        return Vector(*self._points[3])

    def length(self) -> float:
        return self._lengths[-1]

    def parameter_at(self, s: float) -> float:
        """Native parameter t at arc length s."""
        return parameter_at_length(self._points, self._params, self._lengths, s)

    def value(self, s: float) -> tuple[Point, Vector]:
        t = self.parameter_at(s)
        if t >= 1.0:
            position = self.end
        else:
            position = Vector(*cubic_point(self._points, t))

        dx, dy = cubic_derivative(self._points, t)
        if math.hypot(dx, dy) <= 1e-12:
            dx, dy = fallback_direction(self._points, t)
        tangent = Vector(dx, dy)
        if tangent.length() > 0.0:
            tangent = tangent.unit()
        return position, tangent

    def __repr__(self) -> str:
        return f"Bezier({self.ctrl1!r}, {self.ctrl2!r}, {self.end!r})"
