"""End-to-end rendering of SVG documents to WAV files."""

import math
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from scopefig.config import OutputConfig, ScopefigSettings
from scopefig.core import Synthesizer, compute_extent
from scopefig.domain import Begin, Document, End, Line, Point, Shape, ViewBox
from scopefig.exceptions import EmptyGeometryError

SAMPLE_RATE = 44100


class TestSquare:
    """A closed square renders to a single looping stroke."""

    def test_render(self, square_svg: Path, tmp_path: Path) -> None:
        output = tmp_path / "square.wav"
        synthesizer = Synthesizer(ScopefigSettings(output=OutputConfig(loop_count=4)))

        stats = synthesizer.render(square_svg, output)

        # 80 units of a 100 unit canvas is 1.6 canonical units
        edge = math.floor(SAMPLE_RATE * 1.6 * 0.01)
        home = math.floor(SAMPLE_RATE * 0.0005 * 0.8 * math.sqrt(2.0))
        per_pass = 1 + 4 * edge + home

        data, rate = sf.read(str(output), dtype="float32")
        assert rate == SAMPLE_RATE
        assert data.shape == (4 * per_pass, 2)
        assert stats.waypoint_count == per_pass

        np.testing.assert_allclose(data[0], [-1.0, 1.0], atol=1e-6)
        np.testing.assert_allclose(data[1 + edge], [1.0, 1.0], atol=1e-6)
        np.testing.assert_allclose(data[1 + 2 * edge], [1.0, -1.0], atol=1e-6)
        np.testing.assert_allclose(data[1 + 3 * edge], [-1.0, -1.0], atol=1e-6)
        assert np.abs(data).max() == pytest.approx(1.0)

    def test_passes_repeat(self, square_svg: Path, tmp_path: Path) -> None:
        output = tmp_path / "square.wav"
        Synthesizer(ScopefigSettings(output=OutputConfig(loop_count=2))).render(square_svg, output)

        data, _ = sf.read(str(output), dtype="float32")
        first, second = np.split(data, 2)
        np.testing.assert_array_equal(first, second)

    def test_default_output_path(self, square_svg: Path, tmp_path: Path) -> None:
        source = tmp_path / "logo.svg"
        source.write_bytes(square_svg.read_bytes())

        Synthesizer(ScopefigSettings()).render(source)

        assert (tmp_path / "logo.wav").exists()


class TestEmptyDocument:
    """A document without geometry fails and writes nothing."""

    def test_render(self, empty_svg: Path, tmp_path: Path) -> None:
        output = tmp_path / "empty.wav"

        with pytest.raises(EmptyGeometryError):
            Synthesizer(ScopefigSettings()).render(empty_svg, output)

        assert not output.exists()
        assert list(tmp_path.iterdir()) == []


class TestDisjointPoints:
    """Two dots are joined by an eased transit."""

    def test_waypoints(self, two_points_svg: Path) -> None:
        result = Synthesizer(ScopefigSettings()).synthesize_file(two_points_svg)
        waypoints = result.waypoints

        jump = math.floor(SAMPLE_RATE * 0.0005 * 1.0)
        assert len(waypoints) == 2 + jump + 2
        assert result.stats.subpath_count == 2
        assert result.stats.transit_count == 2

        assert waypoints[0].x == pytest.approx(-1.0)
        assert waypoints[-1].x == pytest.approx(1.0)
        transit = [p.x for p in waypoints[2 : 2 + jump]]
        assert transit == sorted(transit)
        assert all(p.y == pytest.approx(0.0) for p in waypoints)


class TestCurvedDocument:
    """Curves and circles are flattened before sampling."""

    def test_render(self, curved_svg: Path, tmp_path: Path) -> None:
        output = tmp_path / "curved.wav"

        stats = Synthesizer(ScopefigSettings()).render(curved_svg, output)

        assert stats.shape_count == 2
        assert stats.subpath_count == 2
        assert stats.segment_count > 10
        data, _ = sf.read(str(output), dtype="float32")
        assert np.abs(data).max() == pytest.approx(1.0)


class TestUnitSquare:
    """A unit square on a 1x1 view box fills the canonical range."""

    def test_waypoints(self) -> None:
        corners = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        events = [Begin(corners[0])]
        events += [Line(a, b) for a, b in zip(corners, corners[1:])]
        events.append(End(last=corners[-1], first=corners[0], closed=True))
        document = Document(ViewBox(0.0, 0.0, 1.0, 1.0), [Shape(events=events)])

        result = Synthesizer(ScopefigSettings()).synthesize(document)
        extent = compute_extent(result.waypoints)

        assert (extent.min_x, extent.min_y) == pytest.approx((-1.0, -1.0))
        assert (extent.max_x, extent.max_y) == pytest.approx((1.0, 1.0))

        # Source edges of length 1 are sampled at their canonical length of 2
        edge = math.floor(SAMPLE_RATE * 2.0 * 0.01)
        home = math.floor(SAMPLE_RATE * 0.0005 * math.sqrt(2.0))
        assert len(result.waypoints) == 1 + 4 * edge + home
        assert result.stats.segment_count == 4
        assert result.stats.transit_count == 1
