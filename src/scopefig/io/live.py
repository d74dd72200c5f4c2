"""Real-time XY output through the sound card.

The audio device pulls samples from a callback running on its own thread.
Sources compute each block from their own position state only, so the
callback never blocks and independent outputs never share state.
"""

from collections.abc import Sequence

import numpy as np
import structlog

from scopefig.config import CurveKind, LiveConfig
from scopefig.core.parametric import Phase, get_curve
from scopefig.domain import Point
from scopefig.exceptions import EmptyGeometryError


class CurveSource:
    """Samples a parametric curve driven by a phase accumulator."""

    def __init__(self, curve: CurveKind | str, scan_rate: float, sample_rate: int) -> None:
        self.curve = get_curve(curve)
        self.scan_rate = scan_rate
        self.phase = Phase.for_sample_rate(sample_rate)

    def fill(self, out: np.ndarray, ramp: np.ndarray) -> None:
        """Write ``len(ramp)`` frames into ``out`` (shape ``(frames, 2)``)."""
        x, y = self.curve(self.phase.times(ramp), self.scan_rate)
        out[:, 0] = x
        out[:, 1] = y


class LoopSource:
    """Replays a waypoint buffer endlessly."""

    def __init__(self, points: Sequence[Point]) -> None:
        if not points:
            raise EmptyGeometryError("Cannot loop an empty waypoint buffer")
        self.frames = np.array([p.to_tuple() for p in points], dtype=np.float32)
        self.index = 0

    def fill(self, out: np.ndarray, ramp: np.ndarray) -> None:
        """Write ``len(ramp)`` frames into ``out``, wrapping around the buffer."""
        indices = (self.index + ramp) % len(self.frames)
        out[:, :] = self.frames[indices]
        self.index = (self.index + len(ramp)) % len(self.frames)


class LiveOutput:
    """Streams a source to the sound card.

    Left channel = X, right channel = Y. Buffer under/overruns reported by
    the device are logged and the stream keeps running.

    Example:
        with LiveOutput(CurveSource("heart", 100.0, 48000), 48000, config):
            time.sleep(10)
    """

    def __init__(
        self,
        source: CurveSource | LoopSource,
        sample_rate: int,
        config: LiveConfig | None = None,
    ) -> None:
        self.source = source
        self.sample_rate = sample_rate
        self.config = config or LiveConfig()
        self.logger = structlog.get_logger("scopefig")
        self.stream = None
        self.overrun_count = 0
        self._ramp = np.arange(self.config.blocksize)

    @property
    def running(self) -> bool:
        return self.stream is not None

    def _audio_callback(self, outdata: np.ndarray, frames: int, time_info: object, status: object) -> None:
        """Called by sounddevice to fill the output buffer."""
        if status:
            self.overrun_count += 1
            self.logger.warning("Audio stream overrun", status=str(status), frames=frames)

        ramp = self._ramp[:frames] if frames <= len(self._ramp) else np.arange(frames)
        self.source.fill(outdata, ramp)
        outdata *= self.config.amplitude

    def start(self) -> None:
        """Open and start the audio stream."""
        if self.running:
            return

        import sounddevice as sd

        self.stream = sd.OutputStream(
            samplerate=self.sample_rate,
            channels=2,
            dtype="float32",
            callback=self._audio_callback,
            blocksize=self.config.blocksize,
            device=self.config.device,
        )
        self.stream.start()
        self.logger.info(
            "Audio stream started",
            sample_rate=self.sample_rate,
            blocksize=self.config.blocksize,
            device=self.config.device,
        )

    def stop(self) -> None:
        """Stop and close the audio stream."""
        if self.stream is None:
            return

        stream, self.stream = self.stream, None
        stream.stop()
        stream.close()
        self.logger.info("Audio stream stopped", overruns=self.overrun_count)

    def __enter__(self) -> "LiveOutput":
        self.start()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.stop()


def default_sample_rate(device: int | str | None = None) -> int:
    """Native output sample rate of a device."""
    import sounddevice as sd

    info = sd.query_devices(device, "output")
    return int(info["default_samplerate"])
