"""Conversion between segment descriptors and curve primitives.

This module handles the conversion from the absolute-coordinate segment
descriptors produced by the SVG reader to the relative curve primitives
making up a CompositeCurve.
"""

import logging

from camsynth.config import CurveConfig
from camsynth.core.composite import CompositeCurve
from camsynth.core.curves import Bezier, CircleArc, Curve, Line
from camsynth.domain import Arc, CloseTo, CurveTo, LineTo, MoveTo, Point, Segment
from camsynth.exceptions import EmptyCurveError, UnsupportedGeometryError

logger = logging.getLogger(__name__)


def segment_to_curve(
    segment: Segment,
    cursor: Point,
    config: CurveConfig | None = None,
) -> tuple[Curve, Point]:
    """Convert one drawable segment to a curve primitive.

    Args:
        segment: A LineTo, CloseTo, CurveTo or Arc descriptor
        cursor: Absolute position the segment starts from
        config: Curve construction settings

    Returns:
        Tuple of (primitive, absolute end position)

    Raises:
        UnsupportedGeometryError: For elliptical arcs and MoveTo
    """
    if config is None:
        config = CurveConfig()

    if isinstance(segment, (LineTo, CloseTo)):
        return Line(segment.point - cursor), segment.point

    if isinstance(segment, CurveTo):
        curve = Bezier(
            segment.ctrl1 - cursor,
            segment.ctrl2 - cursor,
            segment.end - cursor,
            intervals=config.bezier_intervals,
            tolerance=config.bezier_tolerance,
        )
        return curve, segment.end

    if isinstance(segment, Arc):
        rx, ry = segment.radius_x, segment.radius_y
        if abs(rx - ry) > config.radius_tolerance * max(1.0, abs(rx)):
            raise UnsupportedGeometryError(segment, "only circular arcs are supported")
        rotation = segment.x_axis_rotation
        arc = CircleArc(rx, segment.start_angle + rotation, segment.end_angle + rotation)
        end, _ = arc.value(arc.length())
        return arc, cursor + end

    raise UnsupportedGeometryError(segment, "segment does not describe a curve")


def segments_to_curve(
    segments: list[Segment],
    config: CurveConfig | None = None,
) -> CompositeCurve:
    """Build a composite curve from ordered segment descriptors.

    MoveTo resets the cursor without emitting a primitive. A CloseTo
    ending within the close tolerance of the cursor is dropped, so no
    zero-length closing line enters the curve.

    Args:
        segments: Descriptors in path order
        config: Curve construction settings

    Returns:
        CompositeCurve with primitives anchored at absolute positions

    Raises:
        UnsupportedGeometryError: If a segment cannot be represented
        EmptyCurveError: If no segment produced a primitive
    """
    if config is None:
        config = CurveConfig()

    composite = CompositeCurve()
    # CloseTo targets are absolute, so only the cursor needs tracking
    cursor = Point(0.0, 0.0)

    for segment in segments:
        if isinstance(segment, MoveTo):
            cursor = segment.point
            continue

        if isinstance(segment, CloseTo) and (cursor - segment.point).length() < config.close_tolerance:
            logger.debug("Skipping degenerate close at (%.6f, %.6f)", cursor.x, cursor.y)
            cursor = segment.point
            continue

        curve, end = segment_to_curve(segment, cursor, config)
        composite.add(curve, cursor)
        cursor = end

    if len(composite) == 0:
        raise EmptyCurveError()

    logger.debug(
        "Built composite curve: %d primitives, length %.3f",
        len(composite),
        composite.length(),
    )
    return composite
