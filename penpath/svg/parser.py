"""SVG path adapter: facade over svgpathtools.

svgpathtools resolves relative and shorthand commands while parsing, so the
segments produced here are all absolute LineTo/CurveTo/Quadratic/EllipticalArc,
with a MoveTo at the start of every subpath.
"""

from __future__ import annotations

import logging
import re

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path

from penpath.engine.segments import CurveTo, EllipticalArc, LineTo, MoveTo, PathSegment, Quadratic

logger = logging.getLogger(__name__)

_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]+)"[^>]*/?\s*>', re.IGNORECASE)


def segments_from_path(path: Path) -> list[PathSegment]:
    """Convert an svgpathtools Path into absolute segments."""
    segments: list[PathSegment] = []
    previous_end: complex | None = None

    for seg in path:
        # svgpathtools has no move segments; a gap between segments is one
        if previous_end is None or seg.start != previous_end:
            segments.append(MoveTo(seg.start.real, seg.start.imag))
        segments.append(_convert(seg))
        previous_end = seg.end

    return segments


def _convert(seg) -> PathSegment:
    end = seg.end
    if isinstance(seg, Line):
        return LineTo(end.real, end.imag)
    if isinstance(seg, CubicBezier):
        c1, c2 = seg.control1, seg.control2
        return CurveTo(c1.real, c1.imag, c2.real, c2.imag, end.real, end.imag)
    if isinstance(seg, QuadraticBezier):
        c = seg.control
        return Quadratic(c.real, c.imag, end.real, end.imag)
    if isinstance(seg, Arc):
        return EllipticalArc(
            rx=seg.radius.real,
            ry=seg.radius.imag,
            x_axis_rotation=seg.rotation,
            large_arc=bool(seg.large_arc),
            sweep=bool(seg.sweep),
            x=end.real,
            y=end.imag,
        )
    raise TypeError(f"Unsupported path segment: {type(seg).__name__}")


def parse_path_data(d: str) -> list[PathSegment]:
    """Parse an SVG ``d`` attribute into absolute segments."""
    try:
        path = parse_path(d)
    except Exception as e:
        raise ValueError(f"Invalid path data {d!r}: {e}") from e
    return segments_from_path(path)


def parse_svg_paths(svg_text: str) -> list[list[PathSegment]]:
    """Extract every ``<path d="...">`` in an SVG document, in document order."""
    results: list[list[PathSegment]] = []

    for match in _PATH_D_RE.finditer(svg_text):
        d = match.group(1)
        try:
            segments = parse_path_data(d)
        except ValueError as e:
            logger.warning("Failed to parse path: %s", e)
            continue
        results.append(segments)

    logger.info("Parsed SVG: %d paths", len(results))
    return results
