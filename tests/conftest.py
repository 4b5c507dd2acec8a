"""Shared test fixtures."""

from __future__ import annotations

import pytest

from penpath.engine.segments import (
    ClosePath,
    CurveTo,
    EllipticalArc,
    LineTo,
    MoveTo,
    Quadratic,
    SmoothCurveTo,
)

# Curve whose control points sit on its own chord: degrades to a line.
FLAT_CUBIC_PATH = [
    MoveTo(0, 0),
    LineTo(10, 0),
    CurveTo(10, 0, 20, 0, 20, 0),
]

# Single arch, sampled at full density.
ARCH_QUADRATIC_PATH = [
    MoveTo(0, 0),
    Quadratic(5, 10, 10, 0),
]

# Two closed squares, the second drawn with relative commands.
TWO_SQUARES_PATH = [
    MoveTo(1, 1),
    LineTo(5, 1),
    LineTo(5, 5),
    LineTo(1, 5),
    ClosePath(),
    MoveTo(10, 10),
    LineTo(2, 0, absolute=False),
    LineTo(0, 2, absolute=False),
    ClosePath(),
]

# S-curve: cubic followed by its smooth continuation.
S_CURVE_PATH = [
    MoveTo(0, 0),
    CurveTo(0, 10, 10, 10, 10, 0),
    SmoothCurveTo(20, -10, 20, 0),
]

SEMICIRCLE_PATH = [
    MoveTo(0, 0),
    EllipticalArc(1, 1, 0, False, True, 2, 0),
]

ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''


@pytest.fixture
def flat_cubic_path() -> list:
    return list(FLAT_CUBIC_PATH)


@pytest.fixture
def arch_quadratic_path() -> list:
    return list(ARCH_QUADRATIC_PATH)


@pytest.fixture
def two_squares_path() -> list:
    return list(TWO_SQUARES_PATH)


@pytest.fixture
def s_curve_path() -> list:
    return list(S_CURVE_PATH)


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG
