"""Unit tests for the profile writers."""

import io
import struct
from pathlib import Path

import pytest

from camsynth.config import MeshConfig
from camsynth.core.linkage import FollowerProfiles
from camsynth.domain import Point
from camsynth.exceptions import OutputPathError, OutputWriteError
from camsynth.io.writer import (
    ProfileWriter,
    svg_epilogue,
    svg_path_element,
    svg_prologue,
    write_ldraw,
    write_stl,
    write_svg,
    write_svg_template,
)


@pytest.fixture
def profiles() -> FollowerProfiles:
    """Two small triangular profiles around the origin."""
    return FollowerProfiles(
        first=[Point(10.0, 0.0), Point(0.0, 10.0), Point(-10.0, -10.0)],
        second=[Point(20.0, 0.0), Point(0.0, 20.0), Point(-20.0, -20.0)],
    )


class TestSvgOutput:
    """Tests for the SVG serializer."""

    def test_prologue(self) -> None:
        """The drawing is 100mm square centered on the origin."""
        text = svg_prologue()
        assert text.startswith("<?xml")
        assert 'width="100mm"' in text
        assert 'height="100mm"' in text
        assert 'viewBox="-50 -50 100 100"' in text

    def test_path_element(self) -> None:
        """Points are written as one closed path."""
        element = svg_path_element([Point(1.0, 2.5), Point(-3.0, 4.0)])
        assert element == '<path style="fill:none;stroke:black" d="M 1, 2.5 -3, 4 z"/>\n'

    def test_full_precision_coordinates(self) -> None:
        """Coordinates round-trip through their text form."""
        value = 0.1 + 0.2
        element = svg_path_element([Point(value, 1.0)])
        assert repr(value) in element

    def test_document(self, profiles: FollowerProfiles) -> None:
        """One path per profile between prologue and epilogue."""
        out = io.StringIO()
        write_svg(out, profiles)
        text = out.getvalue()
        assert text.startswith(svg_prologue())
        assert text.endswith(svg_epilogue())
        assert text.count("<path ") == 2

    def test_template(self) -> None:
        """The template holds no paths."""
        out = io.StringIO()
        write_svg_template(out)
        assert out.getvalue() == svg_prologue() + svg_epilogue()


class TestLdrawOutput:
    """Tests for the LDraw serializer."""

    def test_line_count(self, profiles: FollowerProfiles) -> None:
        """Header plus four quads per vertex."""
        out = io.StringIO()
        write_ldraw(out, profiles.first, MeshConfig())
        lines = out.getvalue().splitlines()
        assert lines[0] == "0 BFC CERTIFY CCW"
        assert len(lines) == 1 + 4 * len(profiles.first)
        assert all(line.startswith("4 16 ") for line in lines[1:])

    def test_quad_format(self, profiles: FollowerProfiles) -> None:
        """Each quad has four corners of three fixed-point coordinates."""
        out = io.StringIO()
        write_ldraw(out, profiles.first, MeshConfig())
        fields = out.getvalue().splitlines()[1].split()
        assert len(fields) == 2 + 12
        assert all(len(value.split(".")[1]) == 3 for value in fields[2:])

    def test_scaled_outer_wall(self, profiles: FollowerProfiles) -> None:
        """The first quad joins the last vertex to the first, scaled."""
        out = io.StringIO()
        write_ldraw(out, profiles.first, MeshConfig())
        first_quad = out.getvalue().splitlines()[1]
        assert first_quad == (
            "4 16 -25.000 -25.000 20.000 25.000 0.000 20.000 "
            "25.000 0.000 0.000 -25.000 -25.000 0.000"
        )

    def test_empty_path(self) -> None:
        """An empty profile writes the header only."""
        out = io.StringIO()
        write_ldraw(out, [], MeshConfig())
        assert out.getvalue() == "0 BFC CERTIFY CCW\n"


class TestStlOutput:
    """Tests for the binary STL serializer."""

    def test_size_and_count(self, profiles: FollowerProfiles) -> None:
        """Four triangles of 50 bytes per vertex after the header."""
        out = io.BytesIO()
        write_stl(out, profiles.first, MeshConfig())
        data = out.getvalue()
        n = len(profiles.first)
        assert len(data) == 84 + 200 * n
        assert data[:80] == bytes(80)
        assert struct.unpack_from("<I", data, 80)[0] == 4 * n

    def test_top_normal(self, profiles: FollowerProfiles) -> None:
        """Cap triangles point up."""
        out = io.BytesIO()
        write_stl(out, profiles.first, MeshConfig())
        data = out.getvalue()
        # third triangle of the first vertex is the first cap triangle
        normal = struct.unpack_from("<3f", data, 84 + 2 * 50)
        assert normal == (0.0, 0.0, 1.0)

    def test_wall_vertices(self, profiles: FollowerProfiles) -> None:
        """Wall triangles span the lower and upper heights."""
        out = io.BytesIO()
        write_stl(out, profiles.first, MeshConfig())
        values = struct.unpack_from("<12f", out.getvalue(), 84)
        assert values[3:6] == (-10.0, -10.0, 0.0)
        assert values[6:9] == (10.0, 0.0, 0.0)
        assert values[9:12] == (10.0, 0.0, 8.0)

    def test_empty_path(self) -> None:
        """An empty profile writes a zero triangle count."""
        out = io.BytesIO()
        write_stl(out, [], MeshConfig())
        assert out.getvalue() == bytes(80) + struct.pack("<I", 0)


class TestProfileWriter:
    """Tests for ProfileWriter class."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("cam.stl", "cam_1.stl"),
            ("out/cam.dat", "out/cam_1.dat"),
            ("cam", "cam_1"),
            ("cam.tar.gz", "cam.tar_1.gz"),
        ],
    )
    def test_get_suffixed_path(self, path: str, expected: str) -> None:
        """The suffix goes before the last extension."""
        assert ProfileWriter.get_suffixed_path(Path(path), "_1") == Path(expected)

    def test_suffixed_path_without_name(self) -> None:
        """Paths without a file name cannot be suffixed."""
        with pytest.raises(OutputPathError):
            ProfileWriter.get_suffixed_path(Path("/"), "_1")

    def test_write_svg_file(self, tmp_path: Path, profiles: FollowerProfiles) -> None:
        """SVG output is a single file."""
        target = tmp_path / "cam.svg"
        written = ProfileWriter().write_svg(profiles, target)
        assert written == [target]
        assert target.read_text(encoding="utf-8").count("<path ") == 2

    def test_write_ldraw_files(self, tmp_path: Path, profiles: FollowerProfiles) -> None:
        """LDraw output writes one suffixed file per profile."""
        written = ProfileWriter().write_ldraw(profiles, tmp_path / "cam.dat")
        assert written == [tmp_path / "cam_1.dat", tmp_path / "cam_2.dat"]
        for path in written:
            assert path.read_text(encoding="utf-8").startswith("0 BFC CERTIFY CCW\n")

    def test_write_stl_files(self, tmp_path: Path, profiles: FollowerProfiles) -> None:
        """STL output writes one suffixed file per profile."""
        written = ProfileWriter(MeshConfig()).write_stl(profiles, tmp_path / "cam.stl")
        assert written == [tmp_path / "cam_1.stl", tmp_path / "cam_2.stl"]
        for path in written:
            assert path.stat().st_size == 84 + 200 * 3

    def test_write_template(self, tmp_path: Path) -> None:
        """The template is written without any profile."""
        target = tmp_path / "template.svg"
        assert ProfileWriter().write_template(target) == [target]
        assert "<path" not in target.read_text(encoding="utf-8")

    def test_unwritable_target(self, tmp_path: Path, profiles: FollowerProfiles) -> None:
        """A missing directory raises OutputWriteError."""
        with pytest.raises(OutputWriteError):
            ProfileWriter().write_svg(profiles, tmp_path / "missing" / "cam.svg")
