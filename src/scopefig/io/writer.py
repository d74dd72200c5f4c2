"""Audio writer for rendered sample streams.

The stream is written to a hidden sibling file first and moved into place
only once it is complete, so a failed run never leaves a partial output.
"""

from pathlib import Path

import numpy as np
import soundfile as sf

from scopefig.exceptions import AudioWriteError


class AudioWriter:
    """Writes interleaved XY sample streams as two-channel WAV files.

    Channel 0 carries X and channel 1 carries Y.

    Example:
        writer = AudioWriter(Path("logo.wav"), sample_rate=44100)
        writer.write(stream)
    """

    def __init__(self, output_path: Path, sample_rate: int, subtype: str = "FLOAT") -> None:
        """Initialize the audio writer.

        Args:
            output_path: Path where the WAV file will be saved
            sample_rate: Sample rate in Hz
            subtype: libsndfile sample subtype (e.g. "FLOAT", "PCM_16")
        """
        self._output_path = output_path
        self._sample_rate = sample_rate
        self._subtype = subtype

    @property
    def partial_path(self) -> Path:
        """Temporary path used while writing."""
        return self._output_path.with_name(f".{self._output_path.name}.partial")

    def write(self, stream: np.ndarray, clip: bool = False) -> None:
        """Write the stream.

        Args:
            stream: Interleaved 1-D stream ``x0, y0, x1, y1, ...``
            clip: Hard-limit samples to [-1, 1] first

        Raises:
            AudioWriteError: If the file cannot be written
        """
        frames = stream.reshape(-1, 2)
        if clip:
            frames = np.clip(frames, -1.0, 1.0)

        partial = self.partial_path
        try:
            sf.write(
                str(partial),
                frames,
                self._sample_rate,
                subtype=self._subtype,
                format="WAV",
            )
            partial.replace(self._output_path)
        except (OSError, RuntimeError, ValueError, TypeError) as e:
            partial.unlink(missing_ok=True)
            raise AudioWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a document.

        Converts: logo.svg -> logo.wav

        Args:
            input_path: Source document path

        Returns:
            Path next to the input with a .wav extension
        """
        return input_path.with_suffix(".wav")
