"""Profile writers for SVG, LDraw and STL output.

This module provides the stream-level serializers for follower profiles and
the ProfileWriter class handling file names, suffixes and standard output.
"""

import struct
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, TextIO

from camsynth.config import MeshConfig
from camsynth.core.linkage import FollowerProfiles
from camsynth.domain import Point, Vector
from camsynth.exceptions import OutputPathError, OutputWriteError

# Drawing area of the SVG output, in millimetres
SVG_WIDTH = 100.0
SVG_HEIGHT = 100.0

STDOUT_NAME = "-"

STL_HEADER = bytes(80)
_STL_VECTOR = struct.Struct("<3f")
_STL_COUNT = struct.Struct("<I")
_STL_PAD = struct.Struct("<H")


def _num(value: float) -> str:
    """Shortest round-trip text for a coordinate, without a trailing '.0'."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def svg_prologue() -> str:
    """XML declaration and opening ``<svg>`` tag of a 100mm square drawing."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg"\n'
        f'     width="{_num(SVG_WIDTH)}mm" height="{_num(SVG_HEIGHT)}mm" '
        f'viewBox="{_num(-SVG_HEIGHT / 2)} {_num(-SVG_WIDTH / 2)} '
        f'{_num(SVG_HEIGHT)} {_num(SVG_HEIGHT)}">\n'
    )


def svg_epilogue() -> str:
    """Closing ``</svg>`` tag."""
    return "</svg>\n"


def svg_path_element(points: Sequence[Point]) -> str:
    """One closed, unfilled ``<path>`` element through the points."""
    coords = "".join(f" {_num(p.x)}, {_num(p.y)}" for p in points)
    return f'<path style="fill:none;stroke:black" d="M{coords} z"/>\n'


def write_svg(out: TextIO, profiles: FollowerProfiles) -> None:
    """Write both profiles as an SVG document."""
    out.write(svg_prologue())
    out.write(svg_path_element(profiles.first))
    out.write(svg_path_element(profiles.second))
    out.write(svg_epilogue())


def write_svg_template(out: TextIO) -> None:
    """Write an empty SVG document with the drawing viewport."""
    out.write(svg_prologue())
    out.write(svg_epilogue())


def _ldraw_coord(xy: Point, z: float) -> str:
    return f"{xy.x:.3f} {xy.y:.3f} {z:.3f}"


def _ldraw_quad(*corners: tuple[Point, float]) -> str:
    return "4 16 " + " ".join(_ldraw_coord(xy, z) for xy, z in corners) + "\n"


def write_ldraw(out: TextIO, path: Sequence[Point], config: MeshConfig) -> None:
    """Write one profile as an LDraw wall between the profile and a circle.

    Each vertex is paired with its predecessor, the first with the last, and
    produces four quads: outer wall, top cap, bottom cap and inner wall.
    """
    lower = config.ldraw_lower
    upper = config.ldraw_upper
    scale = config.ldraw_scale
    radius = config.ldraw_inner_radius

    out.write("0 BFC CERTIFY CCW\n")
    if not path:
        return

    prev = path[-1] * scale
    for vertex in path:
        p = vertex * scale
        c = p * (radius / p.length())
        prev_c = prev * (radius / prev.length())
        out.write(_ldraw_quad((prev, upper), (p, upper), (p, lower), (prev, lower)))
        out.write(_ldraw_quad((prev, upper), (prev_c, upper), (c, upper), (p, upper)))
        out.write(_ldraw_quad((prev, lower), (prev_c, lower), (c, lower), (p, lower)))
        out.write(_ldraw_quad((prev_c, upper), (prev_c, lower), (c, lower), (c, upper)))
        prev = p


def _stl_vector(xy: Vector, z: float) -> bytes:
    return _STL_VECTOR.pack(xy.x, xy.y, z)


def _stl_triangle(normal: tuple[Vector, float], vertices: Sequence[tuple[Vector, float]]) -> bytes:
    data = _stl_vector(*normal)
    for xy, z in vertices:
        data += _stl_vector(xy, z)
    return data + _STL_PAD.pack(0)


def _stl_quad(normal: tuple[Vector, float], vertices: Sequence[tuple[Vector, float]]) -> bytes:
    v0, v1, v2, v3 = vertices
    return _stl_triangle(normal, (v0, v1, v2)) + _stl_triangle(normal, (v2, v3, v0))


def write_stl(out: BinaryIO, path: Sequence[Point], config: MeshConfig) -> None:
    """Write one profile as a binary STL wall with a top cap.

    Each vertex paired with its predecessor contributes a wall quad and a
    top-cap quad, two triangles each.
    """
    lower = config.stl_lower
    upper = config.stl_upper
    radius = config.stl_inner_radius

    out.write(STL_HEADER)
    out.write(_STL_COUNT.pack(len(path) * 2 * 2))
    if not path:
        return

    up = (Vector(0.0, 0.0), 1.0)
    prev = path[-1]
    for p in path:
        c = p * (radius / p.length())
        prev_c = prev * (radius / prev.length())
        out.write(_stl_quad((p, 0.0), ((prev, lower), (p, lower), (p, upper), (prev, upper))))
        out.write(_stl_quad(up, ((p, upper), (c, upper), (prev_c, upper), (prev, upper))))
        prev = p


@contextmanager
def open_output(path: Path, binary: bool = False) -> Iterator[TextIO | BinaryIO]:
    """Open a file for writing; ``-`` selects standard output.

    Raises:
        OutputWriteError: If the file cannot be created
    """
    if str(path) == STDOUT_NAME:
        stream = sys.stdout.buffer if binary else sys.stdout
        yield stream
        stream.flush()
        return

    try:
        handle = open(path, "wb" if binary else "w", encoding=None if binary else "utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), str(e)) from e
    with handle:
        yield handle


class ProfileWriter:
    """Writes follower profiles to files in the supported formats.

    SVG output holds both profiles in one document. LDraw and STL output
    write one file per profile, suffixed ``_1`` and ``_2``.

    Example:
        writer = ProfileWriter(MeshConfig())
        written = writer.write_stl(profiles, Path("cam.stl"))
        # [Path("cam_1.stl"), Path("cam_2.stl")]
    """

    def __init__(self, config: MeshConfig | None = None) -> None:
        """Initialize the profile writer.

        Args:
            config: Mesh dimensions for LDraw and STL output
        """
        self._config = config or MeshConfig()

    def write_template(self, path: Path) -> list[Path]:
        """Write an empty SVG drawing."""
        with open_output(path) as out:
            write_svg_template(out)
        return [path]

    def write_svg(self, profiles: FollowerProfiles, path: Path) -> list[Path]:
        """Write both profiles into one SVG drawing."""
        with open_output(path) as out:
            write_svg(out, profiles)
        return [path]

    def write_ldraw(self, profiles: FollowerProfiles, path: Path) -> list[Path]:
        """Write each profile to its own LDraw file."""
        written = []
        for suffix, points in (("_1", profiles.first), ("_2", profiles.second)):
            target = self.get_suffixed_path(path, suffix)
            with open_output(target) as out:
                write_ldraw(out, points, self._config)
            written.append(target)
        return written

    def write_stl(self, profiles: FollowerProfiles, path: Path) -> list[Path]:
        """Write each profile to its own binary STL file."""
        written = []
        for suffix, points in (("_1", profiles.first), ("_2", profiles.second)):
            target = self.get_suffixed_path(path, suffix)
            with open_output(target, binary=True) as out:
                write_stl(out, points, self._config)
            written.append(target)
        return written

    @staticmethod
    def get_suffixed_path(path: Path, suffix: str) -> Path:
        """Generate output path with a suffix appended to the stem.

        Converts: cam.stl -> cam_1.stl
                  out/cam -> out/cam_1

        Args:
            path: Requested output path
            suffix: Text appended to the stem

        Returns:
            Path with the suffix before the extension

        Raises:
            OutputPathError: If the path has no file name
        """
        if not path.name or not path.stem:
            raise OutputPathError(str(path), "no file name to suffix")
        return path.parent / f"{path.stem}{suffix}{path.suffix}"
