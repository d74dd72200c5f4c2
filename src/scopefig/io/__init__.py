"""Document and audio I/O layer for scopefig.

This module handles reading SVG documents with svgelements and writing or
playing audio with soundfile and sounddevice. It keeps those libraries out of
the synthesis core.

Key classes:
- DocumentReader: Load SVG documents and extract shapes
- AudioWriter: Save sample streams as WAV files
- LiveOutput: Stream samples to the sound card
"""

from scopefig.io.live import CurveSource, LiveOutput, LoopSource
from scopefig.io.reader import DocumentReader
from scopefig.io.writer import AudioWriter

__all__ = [
    "AudioWriter",
    "CurveSource",
    "DocumentReader",
    "LiveOutput",
    "LoopSource",
]
