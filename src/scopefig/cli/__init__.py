"""Command-line interface for scopefig.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- render: SVG to looping XY WAV file
- live: Real-time output of a drawing or parametric curve
- Verbose/quiet output modes
- Detailed error reporting
"""

from scopefig.cli.app import cli, main

__all__ = ["cli", "main"]
