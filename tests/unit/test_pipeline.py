"""Tests for the Synthesizer pipeline."""

import math
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from scopefig.config import OutputConfig, ScopefigSettings, TimingConfig
from scopefig.core import Synthesizer, compute_extent
from scopefig.domain import Begin, Cubic, Document, End, Line, Point, Shape, Transform, ViewBox
from scopefig.exceptions import (
    ConfigurationError,
    DegenerateGeometryError,
    EmptyGeometryError,
    UnsupportedGeometryError,
)

SAMPLE_RATE = 44100
CANVAS = ViewBox(-1.0, -1.0, 2.0, 2.0)


def square_shape() -> Shape:
    """Closed square covering the whole canvas, in y-down source coordinates."""
    return Shape(
        events=[
            Begin(Point(-1.0, -1.0)),
            Line(Point(-1.0, -1.0), Point(1.0, -1.0)),
            Line(Point(1.0, -1.0), Point(1.0, 1.0)),
            Line(Point(1.0, 1.0), Point(-1.0, 1.0)),
            End(last=Point(-1.0, 1.0), first=Point(-1.0, -1.0), closed=True),
        ],
        shape_id="square",
    )


def dot_shape(at: Point) -> Shape:
    return Shape(events=[Begin(at), Line(at, at), End(last=at, first=at, closed=False)])


@pytest.fixture
def synthesizer() -> Synthesizer:
    return Synthesizer(ScopefigSettings())


class TestSynthesize:
    """Tests for Synthesizer.synthesize."""

    def test_square_waypoints(self, synthesizer: Synthesizer) -> None:
        result = synthesizer.synthesize(Document(CANVAS, [square_shape()]))

        edge = math.floor(SAMPLE_RATE * 2.0 * 0.01)
        home = math.floor(SAMPLE_RATE * 0.0005 * math.sqrt(2.0))
        waypoints = result.waypoints

        assert len(waypoints) == 1 + 4 * edge + home
        # Y axis points up in canonical space
        corners = [waypoints[i] for i in (0, 1 + edge, 1 + 2 * edge, 1 + 3 * edge, 1 + 4 * edge)]
        expected = [(-1.0, 1.0), (1.0, 1.0), (1.0, -1.0), (-1.0, -1.0), (-1.0, 1.0)]
        for point, (x, y) in zip(corners, expected):
            assert point.x == pytest.approx(x)
            assert point.y == pytest.approx(y)
        assert waypoints[-1].distance_to(Point(0.0, 0.0)) < 0.05

    def test_stats(self, synthesizer: Synthesizer) -> None:
        result = synthesizer.synthesize(Document(CANVAS, [square_shape()]))
        stats = result.stats

        assert result.view_box == CANVAS
        assert stats.shape_count == 1
        assert stats.subpath_count == 1
        assert stats.segment_count == 4
        assert stats.transit_count == 1
        assert stats.waypoint_count == len(result.waypoints)
        assert stats.frame_count == len(result.waypoints)
        assert stats.refresh_rate == pytest.approx(SAMPLE_RATE / len(result.waypoints))

    def test_stream_loops(self) -> None:
        synthesizer = Synthesizer(ScopefigSettings(output=OutputConfig(loop_count=3)))

        result = synthesizer.synthesize(Document(CANVAS, [square_shape()]))

        assert result.stream.dtype == np.float32
        assert len(result.stream) == 2 * 3 * len(result.waypoints)
        assert result.stats.frame_count == 3 * len(result.waypoints)
        assert result.stats.playback_seconds == pytest.approx(
            3 * len(result.waypoints) / SAMPLE_RATE
        )

    def test_output_is_normalized(self, synthesizer: Synthesizer) -> None:
        document = Document(
            ViewBox(0.0, 0.0, 100.0, 100.0),
            [Shape(events=[Begin(Point(10.0, 40.0)), Line(Point(10.0, 40.0), Point(30.0, 45.0))])],
        )

        extent = compute_extent(synthesizer.synthesize(document).waypoints)

        assert extent.span == pytest.approx(2.0)
        assert extent.center.x == pytest.approx(0.0, abs=1e-9)
        assert extent.center.y == pytest.approx(0.0, abs=1e-9)

    def test_declared_transform_applied(self, synthesizer: Synthesizer) -> None:
        """Two identical shapes offset by their transform draw apart."""
        left = dot_shape(Point(0.0, 0.0))
        right = Shape(
            events=[Begin(Point(0.0, 0.0)), Line(Point(0.0, 0.0), Point(0.0, 0.0))],
            transform=Transform.translation(10.0, 0.0),
        )

        result = synthesizer.synthesize(Document(ViewBox(0.0, 0.0, 10.0, 10.0), [left, right]))

        xs = [p.x for p in result.waypoints]
        assert min(xs) == pytest.approx(-1.0)
        assert max(xs) == pytest.approx(1.0)
        assert result.stats.transit_count == 2

    def test_cubic_is_flattened(self, synthesizer: Synthesizer) -> None:
        shape = Shape(
            events=[
                Begin(Point(-1.0, 0.0)),
                Cubic(Point(-1.0, 0.0), Point(-0.5, -1.0), Point(0.5, 1.0), Point(1.0, 0.0)),
                End(last=Point(1.0, 0.0), first=Point(-1.0, 0.0), closed=False),
            ]
        )

        result = synthesizer.synthesize(Document(CANVAS, [shape]))

        assert result.stats.segment_count > 1

    def test_empty_document(self, synthesizer: Synthesizer) -> None:
        with pytest.raises(EmptyGeometryError):
            synthesizer.synthesize(Document(CANVAS, []))

    def test_shape_without_events(self, synthesizer: Synthesizer) -> None:
        with pytest.raises(EmptyGeometryError):
            synthesizer.synthesize(Document(CANVAS, [Shape(events=[])]))

    def test_single_point_at_home(self, synthesizer: Synthesizer) -> None:
        """A dot at the canvas center never leaves home."""
        document = Document(ViewBox(0.0, 0.0, 10.0, 10.0), [dot_shape(Point(5.0, 5.0))])

        with pytest.raises(DegenerateGeometryError):
            synthesizer.synthesize(document)

    def test_zero_view_box(self, synthesizer: Synthesizer) -> None:
        document = Document(ViewBox(0.0, 0.0, 0.0, 0.0), [square_shape()])

        with pytest.raises(ConfigurationError):
            synthesizer.synthesize(document)

    def test_collapsing_transform(self, synthesizer: Synthesizer) -> None:
        shape = square_shape()
        shape.transform = Transform(a=1.0, b=0.0, c=0.0, d=0.0, e=0.0, f=0.0)

        with pytest.raises(ConfigurationError, match="collapses"):
            synthesizer.synthesize(Document(CANVAS, [shape]))

    def test_unsupported_event(self, synthesizer: Synthesizer) -> None:
        shape = Shape(events=[Begin(Point(0.0, 0.0)), "arc"])  # type: ignore[list-item]

        with pytest.raises(UnsupportedGeometryError):
            synthesizer.synthesize(Document(CANVAS, [shape]))

    def test_velocity_mode(self) -> None:
        settings = ScopefigSettings(timing=TimingConfig(velocity=100.0))
        synthesizer = Synthesizer(settings)

        result = synthesizer.synthesize(Document(CANVAS, [square_shape()]))

        edge = math.floor(SAMPLE_RATE * 2.0 / 100.0)
        home = math.floor(SAMPLE_RATE * 0.0005 * math.sqrt(2.0))
        assert len(result.waypoints) == 1 + 4 * edge + home


class TestWrite:
    """Tests for Synthesizer.write."""

    def test_write_result(self, synthesizer: Synthesizer, tmp_path: Path) -> None:
        result = synthesizer.synthesize(Document(CANVAS, [square_shape()]))
        output = tmp_path / "square.wav"

        synthesizer.write(result, output)

        data, rate = sf.read(str(output), dtype="float32")
        assert rate == SAMPLE_RATE
        assert data.shape == (result.stats.frame_count, 2)
