"""Utility functions for scopefig.

This module provides logging setup and synthesis statistics.
"""

from scopefig.utils.logging import (
    SynthesisLogger,
    SynthesisStats,
    configure_logging,
)

__all__ = [
    "SynthesisLogger",
    "SynthesisStats",
    "configure_logging",
]
