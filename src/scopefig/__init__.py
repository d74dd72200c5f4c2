"""Scopefig - Draw SVG figures on an oscilloscope in XY mode.

Scopefig converts the paths of an SVG document into a stereo audio signal in
which the left channel drives the X deflection and the right channel the Y
deflection of an oscilloscope, vector laser or vectorscope.

Example:
    $ scopefig render logo.svg

This will create logo.wav, a looping 32-bit float WAV file that traces the
drawing when played into a scope in XY mode.
"""

__version__ = "0.1.0"
__author__ = "scopefig contributors"

__all__ = ["__author__", "__version__"]
