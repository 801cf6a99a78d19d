"""CSS clip-path polygons from wave curves.

Used to cut a background (image, video, gradient) to the wave's shape when
the curve cannot be drawn on top of it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from tidewave.core.waves.grammar import Point, extract_points
from tidewave.core.waves.models import (
    DEFAULT_AMPLITUDE,
    DEFAULT_FREQUENCY,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
    GeometryConfig,
    PatternName,
)
from tidewave.core.waves.patterns import generate_path

NO_CLIP = "none"


class WavePosition(str, Enum):
    """Edge of the section a wave sits on."""

    TOP = "top"
    BOTTOM = "bottom"


class ClipPathCSSOptions(BaseModel):
    """Wave settings for :func:`generate_clip_path_css`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName | str = PatternName.SMOOTH
    height: float = DEFAULT_WAVE_HEIGHT
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    position: WavePosition = WavePosition.BOTTOM
    width: float = DEFAULT_VIEWBOX_WIDTH
    seed: int | None = None


def _to_percent(point: Point, width: float, height: float) -> str:
    x, y = point
    return f"{x / width * 100:.2f}% {y / height * 100:.2f}%"


def generate_clip_path(
    path: str,
    height: float,
    position: WavePosition | str = WavePosition.BOTTOM,
    width: float = DEFAULT_VIEWBOX_WIDTH,
) -> str:
    """Build a ``polygon(...)`` clip-path value tracing a wave.

    Args:
        path: Wave curve.
        height: Height of the curve's viewBox.
        position: BOTTOM anchors the polygon to the top edge, TOP to the
            bottom edge.
        width: Width of the curve's viewBox.

    Returns:
        Polygon string, or ``"none"`` when the curve has no points.

    Example:
        >>> generate_clip_path("M 0 10 L 50 5 Z", 10, width=100)
        'polygon(0% 0%, 0.00% 100.00%, 50.00% 50.00%, 100% 0%)'
    """
    points = extract_points(path)
    if not points:
        return NO_CLIP

    corner = "0%" if WavePosition(position) is WavePosition.BOTTOM else "100%"
    polygon = [
        f"0% {corner}",
        *(_to_percent(p, width, height) for p in points),
        f"100% {corner}",
    ]
    return f"polygon({', '.join(polygon)})"


def generate_dual_clip_path(
    top_path: str,
    bottom_path: str,
    height: float,
    width: float = DEFAULT_VIEWBOX_WIDTH,
) -> str:
    """Build one polygon with a wave on both the top and bottom edges.

    The bottom wave is traversed right to left and flipped vertically so the
    polygon closes without crossing itself.
    """
    top_points = extract_points(top_path)
    bottom_points = extract_points(bottom_path)
    if not top_points and not bottom_points:
        return NO_CLIP

    polygon = [
        *(_to_percent(p, width, height) for p in top_points),
        "100% 100%",
        *(_to_percent((x, height - y), width, height) for x, y in reversed(bottom_points)),
        "0% 0%",
    ]
    return f"polygon({', '.join(polygon)})"


def generate_clip_path_css(options: ClipPathCSSOptions | None = None) -> str:
    """Build a clip-path polygon straight from wave settings.

    The wave is generated with zero phase and no mirroring, then traced by
    :func:`generate_clip_path` in the same viewBox.

    Args:
        options: Wave settings; defaults to ClipPathCSSOptions().

    Returns:
        Polygon string suitable for a CSS ``clip-path`` value.
    """
    opts = options or ClipPathCSSOptions()
    path = generate_path(
        opts.pattern,
        GeometryConfig(
            width=opts.width,
            height=opts.height,
            amplitude=opts.amplitude,
            frequency=opts.frequency,
            seed=opts.seed,
        ),
    )
    return generate_clip_path(path, opts.height, opts.position, opts.width)
