"""Curve sampling and resynthesis.

This module reads a curve back into evenly spaced heights and rebuilds a
smooth curve from such heights. Together they let the interlock generator
offset any pattern family without knowing how it was drawn.
"""

from __future__ import annotations

import logging
from itertools import pairwise

from tidewave.core.waves.grammar import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    command_points,
    parse_path,
    serialize_path,
)

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT = 20

# Control points sit this fraction of a segment in from each end.
# Changing it changes the character of every rebuilt edge.
TANGENT_FRACTION = 0.4


def _wave_points(commands: list[PathCommand]) -> list[Point]:
    """Coordinate pairs of the drawn wave, without the two baseline corners.

    The corners are the opening move and the line that returns to the
    baseline right before the close.
    """
    body = list(commands)
    if body and isinstance(body[0], MoveTo):
        body = body[1:]
    if len(body) >= 2 and isinstance(body[-1], ClosePath) and isinstance(body[-2], LineTo):
        body = body[:-2]
    return [point for command in body for point in command_points(command)]


def sample_grid(width: float, sample_count: int) -> list[float]:
    """Evenly spaced x positions covering [0, width], both ends included.

    Example:
        >>> sample_grid(100, 5)
        [0.0, 25.0, 50.0, 75.0, 100.0]
    """
    if sample_count <= 0:
        return []
    if sample_count == 1:
        return [0.0]
    return [i * width / (sample_count - 1) for i in range(sample_count)]


def interpolate_at(points: list[Point], target_x: float) -> float:
    """Linearly interpolate y at target_x from points sorted by x.

    The first bracketing pair wins. Outside the covered range the line
    through the first and last points is extended.

    Args:
        points: At least two points with non-decreasing x.
        target_x: Horizontal position to evaluate.

    Returns:
        Interpolated y value.
    """
    left, right = points[0], points[-1]
    for a, b in pairwise(points):
        if a[0] <= target_x <= b[0]:
            left, right = a, b
            break

    if right[0] == left[0]:
        return left[1]
    t = (target_x - left[0]) / (right[0] - left[0])
    return left[1] + t * (right[1] - left[1])


def sample_y(curve: str, width: float, sample_count: int = DEFAULT_SAMPLE_COUNT) -> list[float]:
    """Sample a curve's height at evenly spaced x positions.

    Every coordinate pair of the wave (control points included) takes part.
    Pairs outside [0, width] are discarded and the rest are stably sorted by x.

    Args:
        curve: Path string in the restricted grammar.
        width: Horizontal extent to sample across.
        sample_count: Number of samples.

    Returns:
        Exactly sample_count heights; all zeros when fewer than two usable
        points remain.

    Raises:
        PathSyntaxError: If curve is not in the restricted grammar.

    Example:
        >>> sample_y("M 0 10 L 0 0 L 10 10 L 10 10 Z", 10, 3)
        [0.0, 5.0, 10.0]
    """
    points = [p for p in _wave_points(parse_path(curve)) if 0 <= p[0] <= width]
    if len(points) < 2:
        logger.debug("Curve has %d usable points, returning flat samples", len(points))
        return [0.0] * max(sample_count, 0)

    points.sort(key=lambda p: p[0])
    return [interpolate_at(points, x) for x in sample_grid(width, sample_count)]


def build_path_from_samples(
    samples: list[float],
    width: float,
    height: float,
    tangent: float = TANGENT_FRACTION,
) -> str:
    """Rebuild a smooth closed curve through evenly spaced heights.

    Consecutive samples are joined by cubic segments whose two control
    points hold the segment's end heights, ``tangent`` of a segment width
    in from either end.

    Args:
        samples: Heights at evenly spaced x positions across [0, width].
        width: Curve width.
        height: Baseline y.
        tangent: Control point inset as a fraction of segment width.

    Returns:
        Path string starting at (0, height) and ending with a close.

    Example:
        >>> build_path_from_samples([5, 5], 10, 10)
        'M 0 10 L 0 5 C 4 5, 6 5, 10 5 L 10 10 Z'
    """
    ys = [float(y) for y in samples]
    if not ys:
        ys = [0.0, 0.0]
    elif len(ys) == 1:
        ys = ys * 2

    segments = len(ys) - 1
    segment_width = width / segments
    commands: list[PathCommand] = [MoveTo(0.0, height), LineTo(0.0, ys[0])]
    for i, (y0, y1) in enumerate(pairwise(ys)):
        x0 = i * width / segments
        x1 = (i + 1) * width / segments
        commands.append(
            CubicTo(
                x0 + segment_width * tangent,
                y0,
                x1 - segment_width * tangent,
                y1,
                x1,
                y1,
            )
        )
    commands.extend([LineTo(width, height), ClosePath()])
    return serialize_path(commands)
