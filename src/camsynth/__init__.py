"""camsynth - Synthesize cam-follower profiles from SVG curves.

camsynth is a CLI tool that reads a closed curve from an SVG path, samples it
by arc length, and derives the pair of follower profiles of a four-bar
linkage that traces the curve. The profiles can be exported as an SVG
drawing, as LDraw quads, or as binary STL meshes.

Example:
    $ camsynth curve.svg -o profiles.svg

This will write profiles.svg containing both follower curves.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
