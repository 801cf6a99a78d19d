"""Named wave presets."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from tidewave.core.waves.models import (
    DEFAULT_AMPLITUDE,
    DEFAULT_FREQUENCY,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
    GeometryConfig,
    PatternName,
)

logger = logging.getLogger(__name__)


class WavePreset(BaseModel):
    """Partial preset; unset fields fall back to library defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName | None = None
    height: float | None = None
    amplitude: float | None = None
    frequency: float | None = None
    animate: str | None = None
    shadow: bool = False
    glow: bool = False
    layers: int | None = None
    layer_opacity: float | None = None


class ResolvedPreset(BaseModel):
    """Preset with every field filled in."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName
    height: float
    amplitude: float
    frequency: float
    animate: str
    shadow: bool
    glow: bool
    layers: int
    layer_opacity: float

    def geometry(self, width: float = DEFAULT_VIEWBOX_WIDTH, seed: int | None = None) -> GeometryConfig:
        """Geometry for this preset at the given width."""
        return GeometryConfig(
            width=width,
            height=self.height,
            amplitude=self.amplitude,
            frequency=self.frequency,
            seed=seed,
        )


PRESETS: dict[str, WavePreset] = {
    "hero": WavePreset(pattern=PatternName.SMOOTH, height=200, amplitude=0.6, frequency=1),
    "footer": WavePreset(pattern=PatternName.SMOOTH, height=150, amplitude=0.4, frequency=1),
    "dark-light": WavePreset(pattern=PatternName.SMOOTH, height=120, amplitude=0.5, frequency=1),
    "dramatic": WavePreset(pattern=PatternName.ORGANIC, height=250, amplitude=0.7, frequency=1),
    "subtle": WavePreset(pattern=PatternName.SMOOTH, height=80, amplitude=0.3, frequency=1),
    "angular": WavePreset(pattern=PatternName.SHARP, height=120, amplitude=0.5, frequency=2),
    "peaks": WavePreset(pattern=PatternName.MOUNTAIN, height=150, amplitude=0.6, frequency=3),
}


def resolve_preset(name: str) -> ResolvedPreset | None:
    """Resolve a preset name to a fully populated config.

    Returns:
        ResolvedPreset, or None if the preset does not exist.
    """
    preset = PRESETS.get(name)
    if preset is None:
        logger.debug("No preset named %r", name)
        return None

    return ResolvedPreset(
        pattern=preset.pattern or PatternName.SMOOTH,
        height=preset.height if preset.height is not None else DEFAULT_WAVE_HEIGHT,
        amplitude=preset.amplitude if preset.amplitude is not None else DEFAULT_AMPLITUDE,
        frequency=preset.frequency if preset.frequency is not None else DEFAULT_FREQUENCY,
        animate=preset.animate or "none",
        shadow=preset.shadow,
        glow=preset.glow,
        layers=preset.layers if preset.layers is not None else 1,
        layer_opacity=preset.layer_opacity if preset.layer_opacity is not None else 0.3,
    )


def get_all_presets() -> dict[str, ResolvedPreset]:
    """Resolve every built-in preset."""
    return {name: resolved for name in PRESETS if (resolved := resolve_preset(name)) is not None}
