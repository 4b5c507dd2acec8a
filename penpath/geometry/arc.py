"""Endpoint-to-center elliptical arc conversion.

Follows the SVG 1.1 implementation notes (appendix F.6.5): given the two
endpoints, the radii, the x-axis rotation and the two flags, recover the
ellipse center and the start/sweep angles that ``EllipseCurve`` consumes.

Out-of-range radii are scaled up (F.6.6) rather than rejected. Coincident
endpoints and zero radii are the caller's responsibility.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from penpath.geometry.curves import EllipseCurve
from penpath.geometry.point import Point
from penpath.utils.math_helpers import TAU, angle_between, sqr, truncated_mod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcParameters:
    start_angle: float
    sweep_angle: float
    # Radii after out-of-range correction
    rx: float
    ry: float
    # x-axis rotation in radians
    rotation: float
    center: Point

    def to_curve(self) -> EllipseCurve:
        return EllipseCurve(
            start_angle=self.start_angle,
            sweep_angle=self.sweep_angle,
            rx=self.rx,
            ry=self.ry,
            rotation=self.rotation,
            center=self.center,
        )


def center_parameterize(
    current: Point,
    end: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
) -> ArcParameters:
    """Convert an SVG endpoint arc to center form."""
    rx_abs = abs(rx)
    ry_abs = abs(ry)
    rotation = math.radians(truncated_mod(x_axis_rotation, 360.0))
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)

    dx = (current.x - end.x) / 2.0
    dy = (current.y - end.y) / 2.0

    # Step 1: half-chord in the ellipse frame
    dx_rot = cos_r * dx + sin_r * dy
    dy_rot = -sin_r * dx + cos_r * dy

    radii_check = sqr(dx_rot) / sqr(rx_abs) + sqr(dy_rot) / sqr(ry_abs)
    if radii_check > 1.0:
        scale = math.sqrt(radii_check)
        logger.debug("Arc radii (%.4g, %.4g) too small for chord, scaling by %.4g", rx_abs, ry_abs, scale)
        rx_abs *= scale
        ry_abs *= scale

    # Step 2: center in the ellipse frame
    numerator = sqr(rx_abs) * sqr(ry_abs) - sqr(rx_abs) * sqr(dy_rot) - sqr(ry_abs) * sqr(dx_rot)
    denominator = sqr(rx_abs) * sqr(dy_rot) + sqr(ry_abs) * sqr(dx_rot)
    radicand = max(numerator / denominator, 0.0)

    coef = math.sqrt(radicand)
    if large_arc == sweep:
        coef = -coef
    cx_rot = coef * (rx_abs * dy_rot / ry_abs)
    cy_rot = coef * (-ry_abs * dx_rot / rx_abs)

    # Step 3: back to user space
    center = Point(
        cos_r * cx_rot - sin_r * cy_rot + (current.x + end.x) / 2.0,
        sin_r * cx_rot + cos_r * cy_rot + (current.y + end.y) / 2.0,
    )

    # Step 4: angles on the unit circle
    start_vx = (dx_rot - cx_rot) / rx_abs
    start_vy = (dy_rot - cy_rot) / ry_abs
    end_vx = (-dx_rot - cx_rot) / rx_abs
    end_vy = (-dy_rot - cy_rot) / ry_abs

    start_angle = angle_between(1.0, 0.0, start_vx, start_vy)
    sweep_angle = angle_between(start_vx, start_vy, end_vx, end_vy)
    if not sweep and sweep_angle > 0:
        sweep_angle -= TAU
    elif sweep and sweep_angle < 0:
        sweep_angle += TAU
    sweep_angle = truncated_mod(sweep_angle, TAU)

    return ArcParameters(
        start_angle=start_angle,
        sweep_angle=sweep_angle,
        rx=rx_abs,
        ry=ry_abs,
        rotation=rotation,
        center=center,
    )
