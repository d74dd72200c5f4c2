"""Core synthesis algorithms for scopefig.

This module contains the waypoint synthesis and timing engine:

- Transform composition (document coordinates to canonical space)
- Stroke sampling at a dwell time or velocity
- Eased transits between disconnected subpaths
- Waypoint accumulation from path events
- Extent normalization
- Sample stream assembly
- Curve flattening
- Parametric curves for live output

All stages are synchronous and return new buffers; none keeps state between
runs.

Key functions:
- compose_transform: Build the source-to-canonical transform
- ease: Symmetric ease-in/ease-out curve
- normalize: Center and rescale a waypoint buffer
- assemble: Interleave and loop a waypoint buffer
- flatten_events: Replace curves with straight lines

Key classes:
- SegmentSampler: Samples straight strokes
- TransitSynthesizer: Samples eased jumps
- WaypointAccumulator: Builds the waypoint buffer from path events
- Synthesizer: Runs the whole pipeline
"""

from scopefig.core.accumulator import AccumulatorState, WaypointAccumulator
from scopefig.core.assembler import assemble, duration_seconds
from scopefig.core.flatten import flatten_cubic, flatten_events, flatten_quadratic
from scopefig.core.normalizer import compute_extent, normalize, verify_normalized
from scopefig.core.pipeline import SynthesisResult, Synthesizer
from scopefig.core.sampler import SegmentSampler
from scopefig.core.transform import compose_transform
from scopefig.core.transit import TransitSynthesizer, ease

__all__ = [
    # Accumulation
    "AccumulatorState",
    # Pipeline
    "SegmentSampler",
    "SynthesisResult",
    "Synthesizer",
    "TransitSynthesizer",
    "WaypointAccumulator",
    # Functions
    "assemble",
    "compose_transform",
    "compute_extent",
    "duration_seconds",
    "ease",
    "flatten_cubic",
    "flatten_events",
    "flatten_quadratic",
    "normalize",
    "verify_normalized",
]
