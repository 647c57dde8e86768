"""Four-bar linkage synthesis of follower profiles.

The composite cam curve is sampled at uniform arc-length steps while the
mechanism turns through one revolution in as many uniform angular steps.
For each sample the coupler triangle is solved by circle-circle
intersection, which gives two arm directions (one per assembly branch).
Each branch places an output point that is rotated by the input angle, and
consecutive output points are shifted toward the center by the follower
radius.

Key classes:
- FollowerProfiles: The two synthesized polylines
- LinkageSynthesizer: Runs the construction for a composite curve
"""

import math
from dataclasses import dataclass

from camsynth.config import LinkageConfig
from camsynth.core.composite import CompositeCurve
from camsynth.domain import Point, Transform, Vector
from camsynth.exceptions import LinkageInfeasibleError


@dataclass(frozen=True)
class FollowerProfiles:
    """Follower contact curves of both linkage branches.

    The polylines are implicitly closed: serializers pair the last point
    with the first.

    Attributes:
        first: Profile of the counter-clockwise branch
        second: Profile of the clockwise branch
    """

    first: list[Point]
    second: list[Point]

    def __len__(self) -> int:
        return len(self.first)


def follower_offset(previous: Point, current: Point, radius: float) -> Point:
    """Contact point between two raw profile points.

    Takes the chord midpoint and moves it along the chord's left normal by
    the follower radius.

    Raises:
        ZeroDivisionError: If the two points coincide
    """
    chord = current - previous
    return chord.rotate_90_ccw().unit() * radius + (current + previous) * 0.5


class LinkageSynthesizer:
    """Derives follower profiles from a cam curve.

    Example:
        synthesizer = LinkageSynthesizer(LinkageConfig(samples=400))
        profiles = synthesizer.synthesize(curve)
    """

    def __init__(self, config: LinkageConfig) -> None:
        """Initialize the synthesizer with mechanism constants.

        Args:
            config: Linkage configuration
        """
        self.config = config
        self._pivot = Point(config.pivot_x, 0.0)
        self._base = Vector(config.base_offset, 0.0)

    def solve(self, cam_point: Point, step: int = 0) -> tuple[Point, Point]:
        """Output points of both branches for one cam point, before rotation.

        Args:
            cam_point: Absolute cam-profile point
            step: Sample index, used in error reports

        Returns:
            Tuple of (counter-clockwise branch point, clockwise branch point)

        Raises:
            LinkageInfeasibleError: If the coupler arms cannot reach the point
        """
        cfg = self.config
        p = cam_point + self._base
        distance = p.length()
        if distance == 0.0:
            raise LinkageInfeasibleError(step, cam_point.to_tuple(), "cam point at input pivot")

        half_base = distance * 0.5
        height_sq = cfg.coupler_length * cfg.coupler_length - half_base * half_base
        if not height_sq >= 0.0:
            raise LinkageInfeasibleError(
                step,
                cam_point.to_tuple(),
                f"distance {distance:.3f} exceeds twice the coupler length",
            )
        height = math.sqrt(height_sq)

        ccw_dir = (-p * 0.5 + p.rotate_90_ccw().unit() * height).unit()
        cw_dir = (-p * 0.5 + p.rotate_90_cw().unit() * height).unit()

        first = ccw_dir * cfg.arm_length + ccw_dir.rotate_90_ccw() * cfg.arm_offset + self._pivot
        second = cw_dir * cfg.arm_length + cw_dir.rotate_90_cw() * cfg.arm_offset + self._pivot
        return first, second

    def raw_points(self, curve: CompositeCurve) -> list[tuple[Point, Point]]:
        """Rotated output points of both branches for samples 0..N inclusive."""
        samples = self.config.samples
        length = curve.length()
        raw: list[tuple[Point, Point]] = []

        for step in range(samples + 1):
            cam_point, _ = curve.value(step * length / samples)
            first, second = self.solve(cam_point, step)
            rotation = Transform.rotate(step * 2.0 * math.pi / samples)
            first_r = rotation * first
            second_r = rotation * second
            if not (first_r.is_finite() and second_r.is_finite()):
                raise LinkageInfeasibleError(step, cam_point.to_tuple(), "non-finite output point")
            raw.append((first_r, second_r))
        return raw

    def synthesize(self, curve: CompositeCurve) -> FollowerProfiles:
        """Synthesize both follower profiles for one revolution.

        Args:
            curve: Cam curve, sampled over its full length

        Returns:
            FollowerProfiles with ``samples`` points per polyline

        Raises:
            LinkageInfeasibleError: If any sample is unreachable or two
                consecutive raw points coincide
            EmptyCurveError: If the curve has no primitives
        """
        radius = self.config.follower_radius
        raw = self.raw_points(curve)

        first: list[Point] = []
        second: list[Point] = []
        for step in range(1, len(raw)):
            prev_first, prev_second = raw[step - 1]
            cur_first, cur_second = raw[step]
            try:
                first.append(follower_offset(prev_first, cur_first, radius))
                second.append(follower_offset(prev_second, cur_second, radius))
            except ZeroDivisionError:
                raise LinkageInfeasibleError(
                    step, cur_first.to_tuple(), "consecutive profile points coincide"
                ) from None

        return FollowerProfiles(first=first, second=second)
