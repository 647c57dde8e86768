"""Segment descriptors produced by path extraction.

Each descriptor is an immutable value holding absolute coordinates (or, for
arcs, the center parameterization). A descriptor is produced once by the SVG
reader and consumed once by the segment-to-curve converter.
"""

from dataclasses import dataclass

from camsynth.domain.coords import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start of a new subpath. No curve is drawn."""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the cursor to ``point``."""

    point: Point


@dataclass(frozen=True, slots=True)
class CloseTo:
    """Straight line back to the start of the current subpath."""

    point: Point


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier from the cursor to ``end``.

    Attributes:
        end: Absolute end point
        ctrl1: Absolute first control point
        ctrl2: Absolute second control point
    """

    end: Point
    ctrl1: Point
    ctrl2: Point


@dataclass(frozen=True, slots=True)
class Arc:
    """Elliptical arc in center parameterization.

    Angles are in radians. The sweep runs from ``start_angle`` to
    ``end_angle``; its sign gives the direction of travel.

    Attributes:
        radius_x: Radius along the ellipse's own x axis
        radius_y: Radius along the ellipse's own y axis
        start_angle: Angle of the first point relative to the center
        end_angle: Angle of the last point relative to the center
        x_axis_rotation: Rotation of the ellipse axes
    """

    radius_x: float
    radius_y: float
    start_angle: float
    end_angle: float
    x_axis_rotation: float = 0.0

    @property
    def sweep(self) -> float:
        """Signed angular span of the arc."""
        return self.end_angle - self.start_angle


Segment = MoveTo | LineTo | CloseTo | CurveTo | Arc
