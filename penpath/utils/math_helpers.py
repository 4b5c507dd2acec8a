"""Scalar math helpers for arc parameterization. No engine imports."""

from __future__ import annotations

import math

TAU = 2 * math.pi


def sqr(x: float) -> float:
    return x * x


def truncated_mod(value: float, modulus: float) -> float:
    """Remainder whose sign follows ``value`` (C-style), unlike Python's ``%``.

    -90 mod 360 stays -90: a negative sweep keeps its direction.
    """
    return math.fmod(value, modulus)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def angle_between(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from u to v in (-pi, pi].

    sign(u x v) * acos(u.v / (|u||v|)), with the sign taken as positive when
    the vectors are parallel. Zero-length vectors give 0.
    """
    dot = ux * vx + uy * vy
    norm = math.sqrt((sqr(ux) + sqr(uy)) * (sqr(vx) + sqr(vy)))
    if norm == 0.0:
        return 0.0
    sign = -1.0 if ux * vy - uy * vx < 0.0 else 1.0
    # Rounding can push the cosine a hair outside [-1, 1].
    return sign * math.acos(clamp(dot / norm, -1.0, 1.0))
