"""Composite curve built from an ordered chain of primitives."""

import bisect
from collections.abc import Iterator
from dataclasses import dataclass

from camsynth.core.curves import Curve
from camsynth.domain import Point, Vector
from camsynth.exceptions import EmptyCurveError

# Relative slack for queries that overshoot the ends by rounding
_RANGE_SLACK = 1e-9


@dataclass(frozen=True, slots=True)
class CurveEntry:
    """One primitive placed in the composite.

    Attributes:
        curve: The primitive
        anchor: Absolute position of the primitive's local origin
        start: Cumulative arc length at the primitive's start
    """

    curve: Curve
    anchor: Point
    start: float


class CompositeCurve:
    """A single curve addressed by global arc length.

    Primitives are appended in order together with the absolute position
    their local origin maps to. The caller keeps those anchors consistent by
    advancing its cursor with each primitive's end displacement.

    Example:
        composite = CompositeCurve()
        composite.add(Line(Vector(8, 0)), Point(0, 0))
        composite.add(Line(Vector(0, 8)), Point(8, 0))
        point, tangent = composite.value(12.0)  # (8, 4), (0, 1)
    """

    def __init__(self) -> None:
        self._entries: list[CurveEntry] = []
        self._starts: list[float] = []
        self._length = 0.0

    def add(self, curve: Curve, anchor: Point) -> None:
        """Append a primitive whose local origin sits at ``anchor``."""
        self._entries.append(CurveEntry(curve=curve, anchor=anchor, start=self._length))
        self._starts.append(self._length)
        self._length += curve.length()

    def length(self) -> float:
        """Total arc length of all appended primitives."""
        return self._length

    def value(self, s: float) -> tuple[Point, Vector]:
        """Absolute position and unit tangent at global arc length s.

        Args:
            s: Arc length from the start, 0 <= s <= length()

        Returns:
            Tuple of (position, tangent)

        Raises:
            EmptyCurveError: If no primitive has been appended
            ValueError: If s lies outside the curve
        """
        if not self._entries:
            raise EmptyCurveError()

        slack = _RANGE_SLACK * max(1.0, self._length)
        if s < -slack or s > self._length + slack:
            raise ValueError(f"Arc length {s} outside curve of length {self._length}")

        if s >= self._length:
            entry = self._entries[-1]
            local_s = entry.curve.length()
        else:
            index = max(bisect.bisect_right(self._starts, s) - 1, 0)
            entry = self._entries[index]
            local_s = min(max(s - entry.start, 0.0), entry.curve.length())

        point, tangent = entry.curve.value(local_s)
        return entry.anchor + point, tangent

    def end_point(self) -> Point:
        """Absolute position of the last primitive's final point."""
        point, _ = self.value(self._length)
        return point

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CurveEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CompositeCurve(primitives={len(self._entries)}, length={self._length!r})"
