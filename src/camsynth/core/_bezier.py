"""Internal cubic Bezier arc-length helpers.

This is an internal module containing helper functions for the Bezier curve
primitive. Not intended for public use.

Points are plain ``(x, y)`` tuples so they can be handed straight to
fontTools' bezierTools.
"""

import bisect
import math

from fontTools.misc.bezierTools import calcCubicArcLength, splitCubicAtT

CubicPoints = tuple[
    tuple[float, float], tuple[float, float], tuple[float, float], tuple[float, float]
]

# 5-point Gauss-Legendre rule on [-1, 1]
_GAUSS_NODES = (
    -0.9061798459386640,
    -0.5384693101056831,
    0.0,
    0.5384693101056831,
    0.9061798459386640,
)
_GAUSS_WEIGHTS = (
    0.2369268850561891,
    0.4786286704993665,
    0.5688888888888889,
    0.4786286704993665,
    0.2369268850561891,
)

_NEWTON_STEPS = 8


def cubic_point(points: CubicPoints, t: float) -> tuple[float, float]:
    """Evaluate the cubic at parameter t."""
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = points
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return (
        a * x0 + b * x1 + c * x2 + d * x3,
        a * y0 + b * y1 + c * y2 + d * y3,
    )


def cubic_derivative(points: CubicPoints, t: float) -> tuple[float, float]:
    """First derivative of the cubic with respect to t."""
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = points
    mt = 1.0 - t
    a = 3.0 * mt * mt
    b = 6.0 * mt * t
    c = 3.0 * t * t
    return (
        a * (x1 - x0) + b * (x2 - x1) + c * (x3 - x2),
        a * (y1 - y0) + b * (y2 - y1) + c * (y3 - y2),
    )


def speed(points: CubicPoints, t: float) -> float:
    """Magnitude of the derivative at t."""
    dx, dy = cubic_derivative(points, t)
    return math.hypot(dx, dy)


def gauss_length(points: CubicPoints, t0: float, t1: float) -> float:
    """Arc length between two parameters by Gauss-Legendre quadrature.

    Only accurate over short parameter spans; used to refine lookups inside
    one interval of the arc-length table.
    """
    half = 0.5 * (t1 - t0)
    mid = 0.5 * (t1 + t0)
    total = 0.0
    for node, weight in zip(_GAUSS_NODES, _GAUSS_WEIGHTS):
        total += weight * speed(points, mid + half * node)
    return total * half


def build_length_table(
    points: CubicPoints, intervals: int, tolerance: float
) -> tuple[list[float], list[float]]:
    """Build a monotonic table of parameters and cumulative arc lengths.

    The parameter range is split into ``intervals`` equal pieces, and the
    length of each piece is measured with fontTools' adaptive arc length
    routine on the split sub-curve.

    Args:
        points: The four control points
        intervals: Number of equal parameter intervals
        tolerance: Relative tolerance passed to calcCubicArcLength

    Returns:
        Tuple of (parameters, cumulative lengths), both of size intervals + 1
    """
    params = [i / intervals for i in range(intervals + 1)]
    pieces = splitCubicAtT(*points, *params[1:-1])

    lengths = [0.0]
    for piece in pieces:
        lengths.append(lengths[-1] + calcCubicArcLength(*piece, tolerance=tolerance))
    return params, lengths


def parameter_at_length(
    points: CubicPoints,
    params: list[float],
    lengths: list[float],
    s: float,
) -> float:
    """Find the native parameter at arc length s.

    Bisects the table for the enclosing interval, interpolates linearly
    inside it and refines with Newton iterations on the quadrature length.

    Args:
        points: The four control points
        params: Table parameters from build_length_table
        lengths: Table cumulative lengths from build_length_table
        s: Arc length from the start, 0 <= s <= lengths[-1]

    Returns:
        Parameter t in [0, 1]
    """
    total = lengths[-1]
    if s <= 0.0 or total <= 0.0:
        return 0.0
    if s >= total:
        return 1.0

    i = bisect.bisect_right(lengths, s) - 1
    i = min(max(i, 0), len(params) - 2)
    t0, t1 = params[i], params[i + 1]
    piece_length = lengths[i + 1] - lengths[i]
    remaining = s - lengths[i]
    if piece_length <= 0.0:
        return t0

    t = t0 + (t1 - t0) * (remaining / piece_length)
    eps = 1e-12 * max(1.0, total)
    for _ in range(_NEWTON_STEPS):
        error = gauss_length(points, t0, t) - remaining
        if abs(error) <= eps:
            break
        v = speed(points, t)
        if v <= 0.0:
            break
        t = min(max(t - error / v, t0), t1)
    return t


def fallback_direction(points: CubicPoints, t: float) -> tuple[float, float]:
    """Direction of travel where the derivative vanishes.

    At a control point that coincides with an endpoint, the curve leaves
    along the next distinct control polygon direction.
    """
    p0, p1, p2, p3 = points
    if t < 0.5:
        candidates = ((p0, p1), (p0, p2), (p0, p3))
    else:
        candidates = ((p2, p3), (p1, p3), (p0, p3))
    for (ax, ay), (bx, by) in candidates:
        dx, dy = bx - ax, by - ay
        if dx or dy:
            return dx, dy
    return 0.0, 0.0
