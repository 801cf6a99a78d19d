"""Configuration models for Tidewave.

The core wave records accept any numbers; these models are where caller
input gets range-checked before it reaches the generators.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tidewave.core.motion.scroll_tracker import ScrollTrackerOptions
from tidewave.core.waves.models import (
    DEFAULT_AMPLITUDE,
    DEFAULT_FREQUENCY,
    DEFAULT_INTERLOCK_SEED,
    DEFAULT_VIEWBOX_WIDTH,
    DEFAULT_WAVE_HEIGHT,
    GeometryConfig,
    InterlockMode,
    InterlockOptions,
    PatternName,
    SeparationConfig,
)


class WaveSettings(BaseModel):
    """Validated wave settings loaded from a config file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName = Field(default=PatternName.SMOOTH, description="Pattern family")

    width: float = Field(default=DEFAULT_VIEWBOX_WIDTH, gt=0, description="ViewBox width in px")

    height: float = Field(default=DEFAULT_WAVE_HEIGHT, gt=0, description="ViewBox height in px")

    amplitude: float = Field(
        default=DEFAULT_AMPLITUDE, ge=0.0, le=1.0, description="Fraction of height the wave spans"
    )

    frequency: float = Field(
        default=DEFAULT_FREQUENCY, gt=0, description="Cycles or peaks across the width"
    )

    phase: float = Field(default=0.0, description="Horizontal shift as a fraction of a cycle")

    seed: int | None = Field(default=None, description="Pattern seed (None = family default)")

    mirror: bool = Field(default=False, description="Flip the wave horizontally")

    mode: InterlockMode = Field(default=InterlockMode.INTERLOCK, description="Interlock layout")

    intensity: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Jitter strength for interlock paths"
    )

    gap: float = Field(default=0.0, ge=0.0, description="Vertical gap between paths in px")

    interlock_seed: int = Field(
        default=DEFAULT_INTERLOCK_SEED, description="Seed for interlock jitter"
    )

    def to_geometry(self) -> GeometryConfig:
        """Geometry part of these settings."""
        return GeometryConfig(
            width=self.width,
            height=self.height,
            amplitude=self.amplitude,
            frequency=self.frequency,
            phase=self.phase,
            seed=self.seed,
            mirror=self.mirror,
        )

    def to_separation(self) -> SeparationConfig:
        """Separation part of these settings."""
        return SeparationConfig(mode=self.mode, intensity=self.intensity, gap=self.gap)

    def to_interlock_options(self) -> InterlockOptions:
        """Full interlock request for these settings."""
        return InterlockOptions.from_parts(
            self.pattern,
            self.to_geometry(),
            self.to_separation(),
            seed=self.interlock_seed,
        )


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: str = Field(
        default="INFO",
        pattern="^(?i:debug|info|warning|error|critical)$",
        description="Root log level (case-insensitive)",
    )

    format: str | None = Field(default=None, description="Format string for text output")

    filename: str | None = Field(default=None, description="Log file path (None = stdout)")

    structured: bool = Field(default=False, description="Emit one JSON object per record")


class ScrollSettings(BaseModel):
    """Validated scroll tracker tuning loaded from a config file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_velocity: float = Field(
        default=2000.0, gt=0, description="Speed (px/s) at which damping bottoms out"
    )

    min_damping: float = Field(
        default=0.02, ge=0.0, le=1.0, description="Damping at max_velocity"
    )

    max_damping: float = Field(default=0.15, ge=0.0, le=1.0, description="Damping at rest")

    @model_validator(mode="after")
    def _validate_damping_order(self) -> ScrollSettings:
        if self.min_damping > self.max_damping:
            raise ValueError("min_damping must be <= max_damping")
        return self

    def to_tracker_options(self) -> ScrollTrackerOptions:
        """Tracker options for these settings."""
        return ScrollTrackerOptions(
            max_velocity=self.max_velocity,
            min_damping=self.min_damping,
            max_damping=self.max_damping,
        )


class TidewaveConfig(BaseModel):
    """Top-level config file layout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    wave: WaveSettings = Field(default_factory=WaveSettings)

    scroll: ScrollSettings = Field(default_factory=ScrollSettings)
