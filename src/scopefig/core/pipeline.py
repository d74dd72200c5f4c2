"""Orchestration of the synthesis pipeline.

This module wires the pipeline stages together:
document -> composed transforms -> flattening -> waypoint accumulation ->
extent normalization -> sample stream assembly -> audio file.

Key components:
- SynthesisResult: Output of one synthesis run
- Synthesizer: Main orchestrator class
"""

import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import structlog

from scopefig.config import ScopefigSettings
from scopefig.core.accumulator import WaypointAccumulator
from scopefig.core.assembler import assemble
from scopefig.core.flatten import flatten_events
from scopefig.core.normalizer import compute_extent, normalize
from scopefig.core.sampler import SegmentSampler
from scopefig.core.transform import compose_transform
from scopefig.core.transit import TransitSynthesizer
from scopefig.domain import Document, Point, ViewBox
from scopefig.exceptions import ConfigurationError, EmptyGeometryError
from scopefig.io.reader import DocumentReader
from scopefig.io.writer import AudioWriter
from scopefig.utils import SynthesisLogger, SynthesisStats


@dataclass
class SynthesisResult:
    """Output of one synthesis run.

    Attributes:
        waypoints: Normalized waypoints of one traversal of the drawing
        stream: Interleaved, looped float32 samples
        stats: Counters and timing of the run
        view_box: Canvas of the source document
    """

    waypoints: list[Point]
    stream: np.ndarray
    stats: SynthesisStats
    view_box: ViewBox


class Synthesizer:
    """Turns documents into XY sample streams.

    Runs are synchronous and self-contained: every stage consumes its input
    completely before the next one starts, and nothing is written unless the
    whole stream was produced.

    Example:
        settings = ScopefigSettings()
        synthesizer = Synthesizer(settings)
        stats = synthesizer.render(
            input_path=Path("logo.svg"),
            output_path=Path("logo.wav"),
        )
    """

    def __init__(
        self,
        config: ScopefigSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the synthesizer with configuration.

        Args:
            config: Scopefig settings
            logger: Structured logger (the "scopefig" logger if None)
        """
        self.config = config
        self.logger = logger or structlog.get_logger("scopefig")

    def create_accumulator(self) -> WaypointAccumulator:
        """Build a fresh accumulator from the timing and geometry settings."""
        timing = self.config.timing
        sampler = SegmentSampler(
            sample_rate=timing.sample_rate,
            dwell_time=timing.dwell_time,
            velocity=timing.velocity,
        )
        transit = TransitSynthesizer(
            sample_rate=timing.sample_rate,
            transit_time=timing.transit_time,
            easing_order=timing.easing_order,
        )
        return WaypointAccumulator(sampler, transit, home=Point(*self.config.geometry.home))

    def synthesize(self, document: Document) -> SynthesisResult:
        """Run the pipeline on a parsed document.

        Args:
            document: Canvas and shapes in drawing order

        Returns:
            SynthesisResult with normalized waypoints and the sample stream

        Raises:
            ConfigurationError: If the view box or a shape transform is degenerate
            UnsupportedGeometryError: If a shape yields events that cannot be drawn
            EmptyGeometryError: If the document yields no waypoints
            DegenerateGeometryError: If all waypoints coincide
        """
        stats = SynthesisStats(
            sample_rate=self.config.timing.sample_rate,
            loop_count=self.config.output.loop_count,
        )
        stats.start_time = time.time()
        synthesis_logger = SynthesisLogger(self.logger, stats)
        geometry = self.config.geometry

        self.logger.info(
            "Starting synthesis",
            shapes=len(document.shapes),
            view_box=(document.view_box.width, document.view_box.height),
            sample_rate=stats.sample_rate,
        )

        accumulator = self.create_accumulator()

        for index, shape in enumerate(document.shapes):
            shape_start = time.time()
            before = len(accumulator)
            synthesis_logger.log_shape_start(index, shape.shape_id)

            try:
                transform = compose_transform(
                    shape.transform, document.view_box, geometry.canonical_span
                )
                scale = transform.scale_factor()
                if scale == 0:
                    raise ConfigurationError(
                        f"Transform of shape {shape.shape_id or index} collapses it to a line"
                    )
                # Tolerance is given in canonical units; events are still in shape units
                events = flatten_events(shape.events, geometry.tolerance / scale)
                accumulator.feed(events, transform)
            except Exception as e:
                synthesis_logger.log_shape_error(index, shape.shape_id, e)
                raise

            synthesis_logger.log_shape_complete(
                index,
                shape.shape_id,
                waypoints=len(accumulator) - before,
                duration_ms=(time.time() - shape_start) * 1000,
            )

        raw = accumulator.finish()
        stats.subpath_count = accumulator.subpath_count
        stats.segment_count = accumulator.segment_count
        stats.transit_count = accumulator.transit_count

        if not raw:
            raise EmptyGeometryError()

        waypoints = normalize(raw, geometry.canonical_span)
        synthesis_logger.log_normalization(compute_extent(raw), compute_extent(waypoints))
        stats.waypoint_count = len(waypoints)

        stream = assemble(waypoints, self.config.output.loop_count)
        # Two interleaved channels per frame
        synthesis_logger.log_stream(
            len(stream) // 2, self.config.output.loop_count, stats.playback_seconds
        )

        stats.end_time = time.time()
        return SynthesisResult(
            waypoints=waypoints, stream=stream, stats=stats, view_box=document.view_box
        )

    def synthesize_file(self, input_path: Path) -> SynthesisResult:
        """Read a document and run the pipeline on it.

        The document stays open until its lazy event sequences are consumed.

        Raises:
            FileNotFoundError: If the document does not exist
            DocumentLoadError: If the document cannot be parsed
        """
        with DocumentReader(input_path) as reader:
            self.logger.info("Document loaded", input=str(input_path))
            return self.synthesize(reader.read())

    def render(self, input_path: Path, output_path: Path | None = None) -> SynthesisStats:
        """Synthesize a document and write it as a WAV file.

        Args:
            input_path: Path to the SVG document
            output_path: Path for the WAV file (auto-generated if None)

        Returns:
            SynthesisStats with counts and timing

        Raises:
            ScopefigError: If synthesis fails; no output file is created
            FileNotFoundError: If the document does not exist
        """
        if output_path is None:
            output_path = AudioWriter.get_output_path(input_path)

        self.logger.info("Starting render", input=str(input_path), output=str(output_path))

        result = self.synthesize_file(input_path)
        self.write(result, output_path)
        return result.stats

    def write(self, result: SynthesisResult, output_path: Path) -> None:
        """Write a synthesized stream as a WAV file.

        Raises:
            AudioWriteError: If the file cannot be written
        """
        writer = AudioWriter(
            output_path,
            sample_rate=self.config.timing.sample_rate,
            subtype=self.config.output.subtype,
        )
        writer.write(result.stream, clip=self.config.output.clip)

        self.logger.info(
            "Render complete",
            output=str(output_path),
            waypoints=result.stats.waypoint_count,
            frames=result.stats.frame_count,
            duration_seconds=round(result.stats.duration_seconds, 2),
        )
