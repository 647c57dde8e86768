"""SVG input and profile output layer for camsynth.

This module handles reading SVG documents and writing follower profiles.
It provides a clean abstraction layer between file formats and the curve
engine.

Key responsibilities:
- Extract path segments from SVG documents
- Convert segment descriptors into composite curves
- Write profiles as SVG, LDraw or binary STL
- Output naming convention (``_1``/``_2`` suffixes, ``-`` for stdout)

Key classes:
- SvgPathReader: Load SVG documents and extract segments
- ProfileWriter: Save profiles in the supported formats
"""

from camsynth.io.converter import segment_to_curve, segments_to_curve
from camsynth.io.reader import (
    SvgPathReader,
    arc_endpoint_to_center,
    extract_segments,
    include_all,
    parse_path_data,
    select_paths_by_id,
)
from camsynth.io.writer import ProfileWriter

__all__ = [
    "ProfileWriter",
    "SvgPathReader",
    "arc_endpoint_to_center",
    "extract_segments",
    "include_all",
    "parse_path_data",
    "segment_to_curve",
    "segments_to_curve",
    "select_paths_by_id",
]
