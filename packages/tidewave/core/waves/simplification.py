"""Ramer-Douglas-Peucker path simplification.

Reduces a curve to the polyline of its significant points. Useful when a
curve is consumed by something that only understands straight segments,
such as a clip-path polygon.
"""

from __future__ import annotations

import math

from tidewave.core.waves.grammar import (
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    extract_points,
    serialize_path,
)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from point to the segment line_start -> line_end.

    If the perpendicular from the point falls outside the segment,
    returns the distance to the nearest endpoint.

    Example:
        >>> perpendicular_distance((5.0, 5.0), (0.0, 0.0), (10.0, 0.0))
        5.0
    """
    px, py = point
    ax, ay = line_start
    bx, by = line_end

    abx, aby = bx - ax, by - ay
    ab_len_sq = abx * abx + aby * aby

    # Degenerate case: line_start == line_end
    if ab_len_sq < 1e-10:
        return math.hypot(px - ax, py - ay)

    t = ((px - ax) * abx + (py - ay) * aby) / ab_len_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(px - (ax + t * abx), py - (ay + t * aby))


def simplify_rdp(points: list[Point], epsilon: float = 1.0) -> list[Point]:
    """Simplify a polyline, keeping both endpoints.

    Args:
        points: Polyline vertices in drawing order.
        epsilon: Maximum distance (px) a dropped point may lie from the result.

    Returns:
        Simplified list of points.

    Example:
        >>> simplify_rdp([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)], epsilon=0.5)
        [(0.0, 0.0), (2.0, 0.0)]
    """
    if len(points) <= 2:
        return list(points)

    def rdp_recursive(start_idx: int, end_idx: int) -> list[int]:
        if end_idx - start_idx <= 1:
            return []

        max_dist = 0.0
        max_idx = start_idx
        for i in range(start_idx + 1, end_idx):
            dist = perpendicular_distance(points[i], points[start_idx], points[end_idx])
            if dist > max_dist:
                max_dist = dist
                max_idx = i

        if max_dist > epsilon:
            return rdp_recursive(start_idx, max_idx) + [max_idx] + rdp_recursive(max_idx, end_idx)
        return []

    keep = [0, *rdp_recursive(0, len(points) - 1), len(points) - 1]
    return [points[i] for i in keep]


def optimize_path(path: str, epsilon: float = 1.0) -> str:
    """Simplify a curve into move/line/close instructions.

    Args:
        path: Path string in the restricted grammar.
        epsilon: Tolerance in px; higher values drop more points.

    Returns:
        Simplified path, or the input unchanged when epsilon <= 0 or the
        curve has two or fewer points.
    """
    if epsilon <= 0:
        return path

    points = extract_points(path)
    if len(points) <= 2:
        return path

    simplified = simplify_rdp(points, epsilon)
    commands: list[PathCommand] = [MoveTo(*simplified[0])]
    commands.extend(LineTo(*p) for p in simplified[1:])
    commands.append(ClosePath())
    return serialize_path(commands)
