"""Value records for wave geometry.

This module defines the immutable inputs and outputs of the generators:
- GeometryConfig: size and shape knobs for one base curve
- SeparationConfig: how two facing edges relate (mode, intensity, gap)
- InterlockOptions: geometry + separation + pattern for a dual-path call
- DualPathResult: the two facing edges plus the base curve they came from

Records carry types, not ranges. Range checking belongs to the caller;
see :class:`tidewave.core.config.models.WaveSettings`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VIEWBOX_WIDTH = 1440.0
DEFAULT_WAVE_HEIGHT = 120.0
DEFAULT_AMPLITUDE = 0.5
DEFAULT_FREQUENCY = 1.0
DEFAULT_INTERLOCK_SEED = 42


class PatternName(str, Enum):
    """Identifiers for the built-in curve families."""

    SMOOTH = "smooth"  # Sine-like arcs, one crest per frequency unit
    ORGANIC = "organic"  # Seeded irregular blob
    SHARP = "sharp"  # Zig-zag of straight segments
    MOUNTAIN = "mountain"  # Triangular ridge with seeded peak heights
    FLOWING = "flowing"  # Single asymmetric S-sweep
    RIBBON = "ribbon"  # Sine carrier under a seeded width envelope
    LAYERED_ORGANIC = "layered-organic"  # Denser organic for stacked copies


class InterlockMode(str, Enum):
    """How the two facing edges of adjacent sections relate."""

    INTERLOCK = "interlock"
    OVERLAP = "overlap"
    APART = "apart"
    FLUSH = "flush"


class GeometryConfig(BaseModel):
    """Geometry of a single base curve.

    Attributes:
        width: Curve width in px (viewBox units).
        height: Curve height in px; the baseline sits at y=height.
        amplitude: Wave excursion as a fraction of height.
        frequency: Number of oscillations across the width.
        phase: Horizontal shift as a fraction of the width.
        seed: Seed for seeded families. None uses the family's own default.
        mirror: Reflect the curve around the vertical centre line.

    Example:
        >>> config = GeometryConfig(height=200, amplitude=0.6)
        >>> config.width
        1440.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float = DEFAULT_VIEWBOX_WIDTH
    height: float = DEFAULT_WAVE_HEIGHT
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    phase: float = 0.0
    seed: int | None = None
    mirror: bool = False


class SeparationConfig(BaseModel):
    """Relationship between the two edges derived from one base curve.

    Stroke fields are cosmetic and never read by the geometry code.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: InterlockMode = InterlockMode.INTERLOCK
    intensity: float = 0.5
    gap: float = 0.0
    stroke_color: str | None = None
    stroke_width: float | None = None


class InterlockOptions(BaseModel):
    """Full input for :func:`tidewave.core.waves.interlock.generate_interlock_paths`.

    Unlike GeometryConfig, an absent seed here means 42, so two sections
    that never set a seed still produce the same pair of edges.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: PatternName | str = PatternName.SMOOTH
    width: float = DEFAULT_VIEWBOX_WIDTH
    height: float = DEFAULT_WAVE_HEIGHT
    amplitude: float = DEFAULT_AMPLITUDE
    frequency: float = DEFAULT_FREQUENCY
    phase: float = 0.0
    mirror: bool = False
    seed: int = DEFAULT_INTERLOCK_SEED
    mode: InterlockMode = InterlockMode.INTERLOCK
    intensity: float = 0.5
    gap: float = 0.0

    @classmethod
    def from_parts(
        cls,
        pattern: PatternName | str,
        geometry: GeometryConfig,
        separation: SeparationConfig,
        seed: int | None = None,
    ) -> InterlockOptions:
        """Combine a geometry and a separation config into one options record."""
        resolved_seed = seed if seed is not None else geometry.seed
        return cls(
            pattern=pattern,
            width=geometry.width,
            height=geometry.height,
            amplitude=geometry.amplitude,
            frequency=geometry.frequency,
            phase=geometry.phase,
            mirror=geometry.mirror,
            seed=DEFAULT_INTERLOCK_SEED if resolved_seed is None else resolved_seed,
            mode=separation.mode,
            intensity=separation.intensity,
            gap=separation.gap,
        )

    def geometry(self) -> GeometryConfig:
        """Geometry portion of these options."""
        return GeometryConfig(
            width=self.width,
            height=self.height,
            amplitude=self.amplitude,
            frequency=self.frequency,
            phase=self.phase,
            seed=self.seed,
            mirror=self.mirror,
        )


class DualPathResult(BaseModel):
    """The two facing edges of a section boundary.

    Attributes:
        path_a: Upper edge (belongs to the section above).
        path_b: Lower edge (belongs to the section below).
        base_curve: Curve both edges were derived from.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path_a: str = Field(..., min_length=1)
    path_b: str = Field(..., min_length=1)
    base_curve: str = Field(..., min_length=1)
