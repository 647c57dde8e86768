"""Core algorithms for camsynth.

This module contains the core algorithms for:

- Arc-length parametrized curve primitives (line, circular arc, cubic Bezier)
- Composite curves addressed by global arc length
- Four-bar linkage synthesis of follower profiles
- Pipeline orchestration

All curve objects are immutable after construction, and the synthesis is
deterministic: identical input produces identical profiles.

Key classes:
- Curve: Protocol shared by all primitives
- Line, CircleArc, Bezier: Curve primitives
- CompositeCurve: Ordered chain of anchored primitives
- LinkageSynthesizer: Derives follower profiles from a composite curve
- CamProcessor: Runs the full pipeline
"""

from camsynth.core.composite import CompositeCurve, CurveEntry
from camsynth.core.curves import Bezier, CircleArc, Curve, Line
from camsynth.core.linkage import FollowerProfiles, LinkageSynthesizer, follower_offset

__all__ = [
    # Curve primitives
    "Bezier",
    "CircleArc",
    # Composite
    "CompositeCurve",
    "Curve",
    "CurveEntry",
    # Linkage
    "FollowerProfiles",
    "Line",
    "LinkageSynthesizer",
    "follower_offset",
]
