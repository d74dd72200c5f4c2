"""Shared fixtures for Scopefig tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def square_svg() -> Path:
    """A single closed square in the middle of a 100x100 canvas."""
    return FIXTURES_DIR / "square.svg"


@pytest.fixture
def empty_svg() -> Path:
    """A document with no drawable shapes."""
    return FIXTURES_DIR / "empty.svg"


@pytest.fixture
def two_points_svg() -> Path:
    """Two zero-length subpaths ten units apart."""
    return FIXTURES_DIR / "points.svg"


@pytest.fixture
def curved_svg() -> Path:
    """Cubic curves and a circle."""
    return FIXTURES_DIR / "curved.svg"


@pytest.fixture
def mixed_svg() -> Path:
    """Path, transformed rect, text and a hidden path on a 100x50 canvas."""
    return FIXTURES_DIR / "mixed.svg"
