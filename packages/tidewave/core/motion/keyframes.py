"""CSS keyframes for animated waves.

A morph animation is a loop of curve variants: each frame regenerates the
base curve with its phase nudged and its amplitude scaled along one sine
cycle. The last frame is the first frame again, so the loop has no seam.

Frames are rendered into a ``@keyframes`` block whose stops set the ``d``
property, for renderers that interpolate path instructions between stops.

The transform animations are fixed stop tables that move or scale the
whole wave element instead, for renderers that cannot interpolate ``d``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from enum import Enum
from functools import partial

from pydantic import BaseModel, ConfigDict, Field

from tidewave.core.utils.logging import log_performance
from tidewave.core.utils.math import round_half_up
from tidewave.core.waves.grammar import format_number
from tidewave.core.waves.models import GeometryConfig, PatternName
from tidewave.core.waves.patterns import generate_path

logger = logging.getLogger(__name__)


class MorphVariant(str, Enum):
    """Built-in morph animations."""

    DRIFT = "drift"  # Mostly horizontal glide
    BREATHE = "breathe"  # Mostly amplitude pulse
    UNDULATE = "undulate"  # Combined phase and amplitude motion
    RIPPLE_OUT = "ripple-out"  # Wide phase sweep


class PathKeyframeOptions(BaseModel):
    """The three knobs that shape a morph loop."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    frame_count: int = Field(..., ge=1)
    phase_range: float
    amplitude_variation: float


MORPH_PRESETS: dict[MorphVariant, PathKeyframeOptions] = {
    MorphVariant.DRIFT: PathKeyframeOptions(frame_count=5, phase_range=0.4, amplitude_variation=0.05),
    MorphVariant.BREATHE: PathKeyframeOptions(frame_count=5, phase_range=0.05, amplitude_variation=0.2),
    MorphVariant.UNDULATE: PathKeyframeOptions(frame_count=7, phase_range=0.5, amplitude_variation=0.15),
    MorphVariant.RIPPLE_OUT: PathKeyframeOptions(frame_count=7, phase_range=0.8, amplitude_variation=0.1),
}


class TransformAnimation(str, Enum):
    """Built-in transform animations, applied to the wave element as a whole."""

    FLOW = "flow"  # Horizontal sway
    PULSE = "pulse"  # Vertical scale
    MORPH = "morph"  # Scale-based stand-in for path morphing
    RIPPLE = "ripple"  # Small sway combined with scale
    BOUNCE = "bounce"  # Lift and settle


# (stop percentage, transform value) pairs per animation.
TRANSFORM_STOPS: dict[TransformAnimation, tuple[tuple[float, str], ...]] = {
    TransformAnimation.FLOW: (
        (0, "translateX(0)"),
        (50, "translateX(-5%)"),
        (100, "translateX(0)"),
    ),
    TransformAnimation.PULSE: (
        (0, "scaleY(1)"),
        (50, "scaleY(1.15)"),
        (100, "scaleY(1)"),
    ),
    TransformAnimation.MORPH: (
        (0, "scaleY(1) scaleX(1)"),
        (25, "scaleY(1.08) scaleX(1.02)"),
        (50, "scaleY(0.92) scaleX(1.04)"),
        (75, "scaleY(1.05) scaleX(0.98)"),
        (100, "scaleY(1) scaleX(1)"),
    ),
    TransformAnimation.RIPPLE: (
        (0, "translateX(0) scaleY(1)"),
        (20, "translateX(-2%) scaleY(1.05)"),
        (40, "translateX(1%) scaleY(0.95)"),
        (60, "translateX(-1%) scaleY(1.03)"),
        (80, "translateX(0.5%) scaleY(0.98)"),
        (100, "translateX(0) scaleY(1)"),
    ),
    TransformAnimation.BOUNCE: (
        (0, "translateY(0)"),
        (40, "translateY(-8px)"),
        (60, "translateY(-4px)"),
        (80, "translateY(-6px)"),
        (100, "translateY(0)"),
    ),
}


def _loop_position(index: int, frame_count: int) -> float:
    # The final frame maps back to t=0 so it equals the first exactly.
    if index == frame_count - 1:
        return 0.0
    return index / (frame_count - 1)


@log_performance
def generate_path_keyframes(
    pattern: PatternName | str,
    config: GeometryConfig | None,
    frame_count: int,
    phase_range: float,
    amplitude_variation: float,
) -> list[str]:
    """Generate a loopable sequence of curve variants.

    Frame i sits at ``t = i / (frame_count - 1)`` (the last frame at t = 0)
    and uses ``phase + sin(2*pi*t) * phase_range`` and
    ``amplitude * (1 + sin(2*pi*t) * amplitude_variation)``.

    Args:
        pattern: Base pattern family.
        config: Base geometry; defaults to GeometryConfig().
        frame_count: Number of frames, including the closing repeat.
        phase_range: Peak phase deviation.
        amplitude_variation: Peak relative amplitude deviation.

    Returns:
        frame_count path strings with frames[0] == frames[-1].
    """
    config = config or GeometryConfig()
    frames: list[str] = []

    for i in range(frame_count):
        wave = math.sin(_loop_position(i, frame_count) * math.pi * 2)
        frame_config = config.model_copy(
            update={
                "phase": config.phase + wave * phase_range,
                "amplitude": config.amplitude * (1 + wave * amplitude_variation),
            }
        )
        frames.append(generate_path(pattern, frame_config))

    return frames


def percentage_stops(count: int) -> list[float]:
    """Evenly spaced stops from 0 to 100, rounded to two decimals.

    Example:
        >>> percentage_stops(5)
        [0.0, 25.0, 50.0, 75.0, 100.0]
    """
    if count <= 1:
        return [0.0] * count
    return [round_half_up(i / (count - 1) * 100, 2) for i in range(count)]


def _render_keyframes(name: str, stops: Iterable[tuple[float, str]]) -> str:
    steps = "\n".join(f"  {format_number(pct)}% {{ {declaration}; }}" for pct, declaration in stops)
    return f"@keyframes {name} {{\n{steps}\n}}"


def build_path_keyframes_css(name: str, frames: list[str]) -> str:
    """Render frames as a ``@keyframes`` block animating the ``d`` property.

    Example:
        >>> print(build_path_keyframes_css("wave", ["M 0 1 Z", "M 0 1 Z"]))
        @keyframes wave {
          0% { d: path("M 0 1 Z"); }
          100% { d: path("M 0 1 Z"); }
        }
    """
    return _render_keyframes(
        name,
        ((pct, f'd: path("{path}")') for pct, path in zip(percentage_stops(len(frames)), frames, strict=True)),
    )


def morph_keyframes(
    variant: MorphVariant | str,
    name: str,
    pattern: PatternName | str = PatternName.SMOOTH,
    config: GeometryConfig | None = None,
) -> str:
    """Build the ``@keyframes`` block for a built-in morph variant.

    Raises:
        ValueError: If variant is not a MorphVariant name.
    """
    preset = MORPH_PRESETS[MorphVariant(variant)]
    frames = generate_path_keyframes(
        pattern,
        config,
        preset.frame_count,
        preset.phase_range,
        preset.amplitude_variation,
    )
    logger.debug("Built %s keyframes %r with %d frames", MorphVariant(variant).value, name, len(frames))
    return build_path_keyframes_css(name, frames)


def drift_keyframes(name: str, pattern: PatternName | str = PatternName.SMOOTH, config: GeometryConfig | None = None) -> str:
    """Horizontal glide: waves appear to slide left and right."""
    return morph_keyframes(MorphVariant.DRIFT, name, pattern, config)


def breathe_keyframes(name: str, pattern: PatternName | str = PatternName.SMOOTH, config: GeometryConfig | None = None) -> str:
    """Amplitude grows and shrinks rhythmically."""
    return morph_keyframes(MorphVariant.BREATHE, name, pattern, config)


def undulate_keyframes(name: str, pattern: PatternName | str = PatternName.SMOOTH, config: GeometryConfig | None = None) -> str:
    """Combined phase and amplitude motion."""
    return morph_keyframes(MorphVariant.UNDULATE, name, pattern, config)


def ripple_out_keyframes(name: str, pattern: PatternName | str = PatternName.SMOOTH, config: GeometryConfig | None = None) -> str:
    """Wide phase sweep: a disturbance radiating across the edge."""
    return morph_keyframes(MorphVariant.RIPPLE_OUT, name, pattern, config)


def transform_keyframes(animation: TransformAnimation | str, name: str) -> str:
    """Build the ``@keyframes`` block for a built-in transform animation.

    Unlike the morph variants these never touch the path, so they work in
    renderers that cannot interpolate ``d``.

    Example:
        >>> print(transform_keyframes("pulse", "wave-pulse"))
        @keyframes wave-pulse {
          0% { transform: scaleY(1); }
          50% { transform: scaleY(1.15); }
          100% { transform: scaleY(1); }
        }

    Raises:
        ValueError: If animation is not a TransformAnimation name.
    """
    stops = TRANSFORM_STOPS[TransformAnimation(animation)]
    return _render_keyframes(name, ((pct, f"transform: {value}") for pct, value in stops))


KEYFRAME_GENERATORS: dict[TransformAnimation, Callable[[str], str]] = {
    animation: partial(transform_keyframes, animation) for animation in TransformAnimation
}
