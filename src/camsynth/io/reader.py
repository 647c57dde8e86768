"""SVG reader for extracting path segments.

This module provides the SvgPathReader class for loading an SVG document
and turning the data of its ``<path>`` elements into absolute-coordinate
segment descriptors.
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import IO

from camsynth.domain import (
    Arc,
    CloseTo,
    CurveTo,
    LineTo,
    MoveTo,
    Point,
    Segment,
    Transform,
)
from camsynth.exceptions import PathSyntaxError, SourceReadError

logger = logging.getLogger(__name__)

PathFilter = Callable[[Mapping[str, str]], bool]
SvgSource = Path | str | IO[bytes] | IO[str]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")
_COMMANDS = frozenset("MmLlHhVvCcSsQqTtAaZz")


def include_all(attributes: Mapping[str, str]) -> bool:  # noqa: ARG001
    """Default path filter accepting every path element."""
    return True


def select_paths_by_id(ids: Iterable[str]) -> PathFilter:
    """Build a path filter matching the ``id`` attribute.

    Args:
        ids: Identifiers of the path elements to keep

    Returns:
        Filter accepting only paths whose id is in ``ids``
    """
    wanted = frozenset(ids)

    def _matches(attributes: Mapping[str, str]) -> bool:
        return attributes.get("id") in wanted

    return _matches


def arc_endpoint_to_center(
    start: Point,
    end: Point,
    radius_x: float,
    radius_y: float,
    rotation_degrees: float,
    large_arc: bool,
    sweep: bool,
) -> Arc:
    """Convert an SVG endpoint arc to center parameterization.

    Follows the SVG implementation notes: the half-chord is rotated into
    the ellipse frame, radii too small to span the chord are scaled up, the
    center is solved from the radius constraint, and the start angle and
    signed sweep come from the endpoint vectors relative to that center.

    Args:
        start: Absolute start point
        end: Absolute end point, distinct from start
        radius_x: Ellipse x radius, non-zero
        radius_y: Ellipse y radius, non-zero
        rotation_degrees: Rotation of the ellipse x axis
        large_arc: SVG large-arc flag
        sweep: SVG sweep flag (True for increasing angles)

    Returns:
        Arc with possibly corrected radii and angles in radians
    """
    rx = abs(radius_x)
    ry = abs(radius_y)
    phi = math.radians(rotation_degrees % 360.0)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    half_dx = (start.x - end.x) * 0.5
    half_dy = (start.y - end.y) * 0.5
    x1 = cos_phi * half_dx + sin_phi * half_dy
    y1 = -sin_phi * half_dx + cos_phi * half_dy

    # Scale radii up when the chord does not fit
    radii_scale = (x1 * x1) / (rx * rx) + (y1 * y1) / (ry * ry)
    if radii_scale > 1.0:
        scale = math.sqrt(radii_scale)
        rx *= scale
        ry *= scale

    rx_sq = rx * rx
    ry_sq = ry * ry
    numerator = rx_sq * ry_sq - rx_sq * y1 * y1 - ry_sq * x1 * x1
    denominator = rx_sq * y1 * y1 + ry_sq * x1 * x1
    coef = math.sqrt(max(numerator / denominator, 0.0))
    if large_arc == sweep:
        coef = -coef
    cx = coef * rx * y1 / ry
    cy = -coef * ry * x1 / rx

    start_angle = math.atan2((y1 - cy) / ry, (x1 - cx) / rx)
    end_angle = math.atan2((-y1 - cy) / ry, (-x1 - cx) / rx)
    delta = end_angle - start_angle
    if sweep and delta < 0.0:
        delta += 2.0 * math.pi
    elif not sweep and delta > 0.0:
        delta -= 2.0 * math.pi

    return Arc(
        radius_x=rx,
        radius_y=ry,
        start_angle=start_angle,
        end_angle=start_angle + delta,
        x_axis_rotation=phi,
    )


class _PathScanner:
    """Cursor over SVG path data yielding commands, numbers and flags."""

    def __init__(self, data: str) -> None:
        self._data = data
        self._pos = 0
        self._skip()

    def _skip(self) -> None:
        match = _SEPARATOR_RE.match(self._data, self._pos)
        if match:
            self._pos = match.end()

    def _fail(self, reason: str) -> PathSyntaxError:
        return PathSyntaxError(self._data, f"{reason} at offset {self._pos}")

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def command(self) -> str:
        char = self._data[self._pos]
        if char not in _COMMANDS:
            raise self._fail(f"unexpected character '{char}'")
        self._pos += 1
        self._skip()
        return char

    def has_number(self) -> bool:
        return _NUMBER_RE.match(self._data, self._pos) is not None

    def number(self) -> float:
        match = _NUMBER_RE.match(self._data, self._pos)
        if match is None:
            raise self._fail("expected number")
        self._pos = match.end()
        self._skip()
        return float(match.group())

    def flag(self) -> bool:
        # Flags may be packed without separators ("a5 5 0 011 1")
        if self.at_end() or self._data[self._pos] not in "01":
            raise self._fail("expected arc flag")
        value = self._data[self._pos] == "1"
        self._pos += 1
        self._skip()
        return value

    def point(self) -> Point:
        x = self.number()
        return Point(x, self.number())


class _PathBuilder:
    """Running state while resolving one path's commands."""

    def __init__(self, transform: Transform) -> None:
        self.transform = transform
        self.segments: list[Segment] = []
        self.cursor = Point(0.0, 0.0)
        self.subpath_start = self.cursor
        self.last_cubic_ctrl: Point | None = None
        self.last_quad_ctrl: Point | None = None

    def _map(self, point: Point) -> Point:
        return self.transform * point

    def move_to(self, point: Point) -> None:
        self.segments.append(MoveTo(self._map(point)))
        self.cursor = point
        self.subpath_start = point

    def line_to(self, point: Point) -> None:
        self.segments.append(LineTo(self._map(point)))
        self.cursor = point

    def curve_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        self.segments.append(CurveTo(self._map(end), self._map(ctrl1), self._map(ctrl2)))
        self.cursor = end
        self.last_cubic_ctrl = ctrl2

    def quad_to(self, ctrl: Point, end: Point) -> None:
        start = self.cursor
        ctrl1 = start + (ctrl - start) * (2.0 / 3.0)
        ctrl2 = end + (ctrl - end) * (2.0 / 3.0)
        self.segments.append(CurveTo(self._map(end), self._map(ctrl1), self._map(ctrl2)))
        self.cursor = end
        self.last_quad_ctrl = ctrl

    def arc_to(
        self,
        radius_x: float,
        radius_y: float,
        rotation: float,
        large_arc: bool,
        sweep: bool,
        end: Point,
    ) -> None:
        if end == self.cursor:
            return
        if radius_x == 0.0 or radius_y == 0.0:
            self.line_to(end)
            return
        arc = arc_endpoint_to_center(
            self.cursor, end, radius_x, radius_y, rotation, large_arc, sweep
        )
        self.segments.append(
            Arc(
                radius_x=arc.radius_x,
                radius_y=arc.radius_y,
                start_angle=arc.start_angle,
                end_angle=arc.end_angle,
                x_axis_rotation=arc.x_axis_rotation + self.transform.angle,
            )
        )
        self.cursor = end

    def close(self) -> None:
        self.segments.append(CloseTo(self._map(self.subpath_start)))
        self.cursor = self.subpath_start


def parse_path_data(data: str, transform: Transform | None = None) -> list[Segment]:
    """Resolve SVG path data into absolute segment descriptors.

    Args:
        data: Content of a path's ``d`` attribute
        transform: Transform applied to every emitted coordinate

    Returns:
        Ordered list of segment descriptors

    Raises:
        PathSyntaxError: If the path data is malformed
    """
    builder = _PathBuilder(transform or Transform.identity())
    scanner = _PathScanner(data)
    previous = ""

    while not scanner.at_end():
        command = scanner.command()
        relative = command.islower()
        upper = command.upper()

        if upper == "Z":
            builder.close()
            previous = upper
            continue

        first = True
        while first or scanner.has_number():
            origin = builder.cursor if relative else Point(0.0, 0.0)

            if upper == "M":
                point = origin + scanner.point()
                if first:
                    builder.move_to(point)
                else:
                    builder.line_to(point)
            elif upper == "L":
                builder.line_to(origin + scanner.point())
            elif upper == "H":
                x = scanner.number() + (builder.cursor.x if relative else 0.0)
                builder.line_to(Point(x, builder.cursor.y))
            elif upper == "V":
                y = scanner.number() + (builder.cursor.y if relative else 0.0)
                builder.line_to(Point(builder.cursor.x, y))
            elif upper == "C":
                ctrl1 = origin + scanner.point()
                ctrl2 = origin + scanner.point()
                builder.curve_to(ctrl1, ctrl2, origin + scanner.point())
            elif upper == "S":
                if previous in ("C", "S") and builder.last_cubic_ctrl is not None:
                    ctrl1 = builder.cursor * 2.0 - builder.last_cubic_ctrl
                else:
                    ctrl1 = builder.cursor
                ctrl2 = origin + scanner.point()
                builder.curve_to(ctrl1, ctrl2, origin + scanner.point())
            elif upper == "Q":
                ctrl = origin + scanner.point()
                builder.quad_to(ctrl, origin + scanner.point())
            elif upper == "T":
                if previous in ("Q", "T") and builder.last_quad_ctrl is not None:
                    ctrl = builder.cursor * 2.0 - builder.last_quad_ctrl
                else:
                    ctrl = builder.cursor
                builder.quad_to(ctrl, origin + scanner.point())
            elif upper == "A":
                radius_x = scanner.number()
                radius_y = scanner.number()
                rotation = scanner.number()
                large_arc = scanner.flag()
                sweep = scanner.flag()
                builder.arc_to(
                    radius_x, radius_y, rotation, large_arc, sweep, origin + scanner.point()
                )

            previous = upper
            first = False

    return builder.segments


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


class SvgPathReader:
    """Loads SVG documents and extracts their path segments.

    Every ``<path>`` element is visited in document order, at any nesting
    depth. Elements rejected by the path filter contribute nothing.

    Example:
        reader = SvgPathReader(include=select_paths_by_id(["cam"]))
        segments = reader.read(Path("curve.svg"))
    """

    def __init__(
        self,
        transform: Transform | None = None,
        include: PathFilter | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            transform: Transform applied to all coordinates (identity if None)
            include: Filter over path element attributes (all paths if None)
        """
        self._transform = transform or Transform.identity()
        self._include = include or include_all

    def read(self, source: SvgSource) -> list[Segment]:
        """Parse an SVG document and return its segments.

        Args:
            source: File path, or a text or binary stream

        Returns:
            Ordered segment descriptors of all included paths

        Raises:
            SourceReadError: If the document cannot be read or parsed
            PathSyntaxError: If path data is malformed
        """
        name = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", "<stream>")
        try:
            tree = ET.parse(source)
        except (OSError, ET.ParseError) as e:
            raise SourceReadError(str(name), str(e)) from e

        segments: list[Segment] = []
        for element in tree.getroot().iter():
            if _local_name(element.tag) != "path":
                continue
            attributes = dict(element.attrib)
            if not self._include(attributes):
                logger.debug("Skipping path %s", attributes.get("id", "<anonymous>"))
                continue
            path_segments = parse_path_data(attributes.get("d", ""), self._transform)
            logger.debug(
                "Extracted %d segments from path %s",
                len(path_segments),
                attributes.get("id", "<anonymous>"),
            )
            segments.extend(path_segments)
        return segments


def extract_segments(
    source: SvgSource,
    transform: Transform | None = None,
    include: PathFilter | None = None,
) -> list[Segment]:
    """Extract the segment descriptors of an SVG document.

    Convenience wrapper around SvgPathReader.read().
    """
    return SvgPathReader(transform=transform, include=include).read(source)
