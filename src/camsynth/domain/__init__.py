"""Domain models for camsynth.

This module contains the value types shared by the curve engine, the SVG
reader and the serializers. All models are:

- Immutable (frozen dataclasses)
- Pure (operations return new instances)
- Independent of the XML parsing and output formats

Key classes:
- Vector / Point: 2D coordinates
- Transform: Linear map applied to points
- MoveTo, LineTo, CloseTo, CurveTo, Arc: Segment descriptors
"""

from camsynth.domain.coords import ORIGIN, Point, Transform, Vector
from camsynth.domain.segment import Arc, CloseTo, CurveTo, LineTo, MoveTo, Segment

__all__: list[str] = [
    # Coordinates
    "ORIGIN",
    "Point",
    "Transform",
    "Vector",
    # Segment descriptors
    "Arc",
    "CloseTo",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "Segment",
]
