"""Leaf-node numpy helpers over point sequences. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def points_to_array(points: Iterable) -> NDArray[np.float64]:
    """Stack (x, y) pairs or Points into an Nx2 float array."""
    rows = [(float(x), float(y)) for x, y in points]
    if not rows:
        return np.empty((0, 2))
    return np.array(rows, dtype=np.float64)


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of the polyline through ``points``."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))

