"""Unit tests for the curve primitives.

Tests for Line, CircleArc and Bezier arc-length parametrization.
"""

import math

import pytest

from camsynth.core._bezier import cubic_point
from camsynth.core.curves import Bezier, CircleArc, Curve, Line
from camsynth.domain import ORIGIN, Vector

# Control point offset of the classic quarter-circle cubic
KAPPA = 0.5522847498307936


def _close(a: Vector, b: Vector, tol: float = 1e-9) -> bool:
    return (a - b).length() <= tol


def _polyline_length(points: tuple, steps: int = 20000) -> float:
    total = 0.0
    prev = cubic_point(points, 0.0)
    for i in range(1, steps + 1):
        cur = cubic_point(points, i / steps)
        total += math.hypot(cur[0] - prev[0], cur[1] - prev[1])
        prev = cur
    return total


class TestLine:
    """Tests for Line primitive."""

    def test_length(self) -> None:
        """Length is the displacement magnitude."""
        assert Line(Vector(3.0, 4.0)).length() == 5.0

    def test_endpoints(self) -> None:
        """Start at the origin, end at the displacement."""
        line = Line(Vector(3.0, 4.0))
        start, start_dir = line.value(0.0)
        end, end_dir = line.value(line.length())
        assert start == ORIGIN
        assert _close(end, Vector(3.0, 4.0))
        assert _close(start_dir, Vector(0.6, 0.8))
        assert start_dir == end_dir

    def test_constant_direction(self) -> None:
        """Direction is the same for every s."""
        line = Line(Vector(-2.0, 7.0))
        directions = {line.value(s)[1] for s in (0.0, 1.0, 3.5, line.length())}
        assert len(directions) == 1

    def test_interpolation(self) -> None:
        """Midpoint lies halfway along the displacement."""
        line = Line(Vector(8.0, 0.0))
        point, _ = line.value(4.0)
        assert point == Vector(4.0, 0.0)

    def test_zero_length_line(self) -> None:
        """A zero-length line is legal with an arbitrary direction."""
        line = Line(ORIGIN)
        assert line.length() == 0.0
        point, direction = line.value(0.0)
        assert point == ORIGIN
        assert direction == ORIGIN

    def test_satisfies_protocol(self) -> None:
        """Line implements the Curve protocol."""
        assert isinstance(Line(Vector(1.0, 0.0)), Curve)


class TestCircleArc:
    """Tests for CircleArc primitive."""

    def test_length(self) -> None:
        """Length is radius times absolute span."""
        assert abs(CircleArc(6.0, 0.0, math.pi).length() - 6.0 * math.pi) < 1e-12
        assert abs(CircleArc(2.0, 1.0, -0.5).length() - 3.0) < 1e-12

    def test_starts_at_origin(self) -> None:
        """The first point sits at the local origin."""
        arc = CircleArc(5.0, 0.7, 2.0)
        point, _ = arc.value(0.0)
        assert _close(point, ORIGIN)

    @pytest.mark.parametrize("start,end", [(0.0, math.pi), (0.3, -1.2), (-2.0, 4.0)])
    def test_constant_radius(self, start: float, end: float) -> None:
        """Every point is at the radius from the center."""
        arc = CircleArc(4.0, start, end)
        for i in range(11):
            point, _ = arc.value(arc.length() * i / 10)
            assert abs((point - arc.center).length() - 4.0) < 1e-9

    def test_semicircle_end(self) -> None:
        """A half turn ends one diameter away."""
        arc = CircleArc(6.0, 0.0, math.pi)
        end, _ = arc.value(arc.length())
        assert _close(end, Vector(-12.0, 0.0))

    def test_semicircle_midpoint(self) -> None:
        """The midpoint of the half turn is at the top of the circle."""
        arc = CircleArc(6.0, 0.0, math.pi)
        mid, tangent = arc.value(3.0 * math.pi)
        assert _close(mid, Vector(-6.0, 6.0))
        assert _close(tangent, Vector(-1.0, 0.0))

    def test_tangent_direction_follows_sweep(self) -> None:
        """Tangent sign follows the direction of travel."""
        forward = CircleArc(1.0, 0.0, 1.0)
        backward = CircleArc(1.0, 0.0, -1.0)
        assert _close(forward.value(0.0)[1], Vector(0.0, 1.0))
        assert _close(backward.value(0.0)[1], Vector(0.0, -1.0))

    def test_tangent_is_unit(self) -> None:
        """Tangents are unit vectors."""
        arc = CircleArc(3.0, 0.2, 2.5)
        for i in range(5):
            _, tangent = arc.value(arc.length() * i / 4)
            assert abs(tangent.length() - 1.0) < 1e-12

    def test_invalid_radius(self) -> None:
        """Radius must be positive."""
        with pytest.raises(ValueError):
            CircleArc(0.0, 0.0, 1.0)


class TestBezier:
    """Tests for Bezier primitive."""

    def test_straight_bezier(self) -> None:
        """Evenly spaced collinear controls give uniform speed."""
        bezier = Bezier(Vector(3.0, 0.0), Vector(6.0, 0.0), Vector(9.0, 0.0))
        assert abs(bezier.length() - 9.0) < 1e-9
        for s in (0.0, 1.5, 4.0, 7.25):
            point, tangent = bezier.value(s)
            assert _close(point, Vector(s, 0.0), 1e-7)
            assert _close(tangent, Vector(1.0, 0.0))

    def test_endpoints(self) -> None:
        """value(0) is the origin and value(length) is the endpoint."""
        bezier = Bezier(Vector(1.0, 3.0), Vector(5.0, -2.0), Vector(7.0, 1.0))
        start, _ = bezier.value(0.0)
        end, _ = bezier.value(bezier.length())
        assert start == ORIGIN
        assert end == Vector(7.0, 1.0)

    def test_length_accuracy(self) -> None:
        """Table length matches a dense polyline within 1e-4 relative."""
        bezier = Bezier(Vector(0.0, KAPPA), Vector(1.0 - KAPPA, 1.0), Vector(1.0, 1.0))
        points = ((0.0, 0.0), (0.0, KAPPA), (1.0 - KAPPA, 1.0), (1.0, 1.0))
        reference = _polyline_length(points)
        assert abs(bezier.length() - reference) / reference < 1e-4

    def test_sub_range_consistency(self) -> None:
        """Distance travelled between two arc lengths matches their difference."""
        bezier = Bezier(Vector(1.0, 4.0), Vector(6.0, 5.0), Vector(8.0, -1.0))
        s1 = 0.3 * bezier.length()
        s2 = 0.7 * bezier.length()
        steps = 400
        prev, _ = bezier.value(s1)
        travelled = 0.0
        for i in range(1, steps + 1):
            cur, _ = bezier.value(s1 + (s2 - s1) * i / steps)
            travelled += (cur - prev).length()
            prev = cur
        assert abs(travelled - (s2 - s1)) / (s2 - s1) < 1e-4

    def test_arc_length_consistency(self) -> None:
        """Distance between samples approximates the arc-length step."""
        bezier = Bezier(Vector(2.0, 6.0), Vector(8.0, -4.0), Vector(10.0, 2.0))
        steps = 200
        step = bezier.length() / steps
        prev, _ = bezier.value(0.0)
        travelled = 0.0
        for i in range(1, steps + 1):
            cur, _ = bezier.value(min(i * step, bezier.length()))
            chord = (cur - prev).length()
            assert abs(chord - step) / step < 1e-3
            travelled += chord
            prev = cur
        assert abs(travelled - bezier.length()) / bezier.length() < 1e-4

    def test_parameter_monotonic(self) -> None:
        """The parameter grows with arc length."""
        bezier = Bezier(Vector(0.0, 5.0), Vector(5.0, 5.0), Vector(5.0, 0.0))
        params = [bezier.parameter_at(bezier.length() * i / 50) for i in range(51)]
        assert params[0] == 0.0
        assert params[-1] == 1.0
        assert all(a < b for a, b in zip(params, params[1:]))

    def test_tangent_is_unit(self) -> None:
        """Tangents are unit vectors."""
        bezier = Bezier(Vector(1.0, 3.0), Vector(5.0, -2.0), Vector(7.0, 1.0))
        for i in range(11):
            _, tangent = bezier.value(bezier.length() * i / 10)
            assert abs(tangent.length() - 1.0) < 1e-12

    def test_tangent_at_coincident_control(self) -> None:
        """A control point on the start still yields a direction."""
        bezier = Bezier(ORIGIN, Vector(4.0, 4.0), Vector(4.0, 0.0))
        _, tangent = bezier.value(0.0)
        assert _close(tangent, Vector(1.0, 1.0).unit())

    def test_degenerate_bezier(self) -> None:
        """All control points at the origin give a zero-length curve."""
        bezier = Bezier(ORIGIN, ORIGIN, ORIGIN)
        assert bezier.length() == 0.0
        point, tangent = bezier.value(0.0)
        assert point == ORIGIN
        assert tangent == ORIGIN

    def test_table_resolution(self) -> None:
        """A coarse table still reaches the endpoint exactly."""
        bezier = Bezier(Vector(0.0, 3.0), Vector(3.0, 3.0), Vector(3.0, 0.0), intervals=4)
        end, _ = bezier.value(bezier.length())
        assert end == Vector(3.0, 0.0)
