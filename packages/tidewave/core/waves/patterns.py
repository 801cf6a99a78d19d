"""Base curve generators.

Each family is a *profile*: a function from horizontal position u in [0, 1]
to a level in the wave band (0 = crest line, 1 = baseline) and its slope.
Curved families are emitted as cubic Hermite segments converted to bezier
form between breakpoints; angular families are emitted as straight lines
through their vertices.

All generators are pure: the same (pattern, config) always yields the same
string, byte for byte.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from itertools import pairwise
from typing import assert_never

from tidewave.core.utils.math import fract, lerp
from tidewave.core.waves.grammar import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    map_points,
    reverse_commands,
    serialize_path,
)
from tidewave.core.waves.models import GeometryConfig, PatternName
from tidewave.core.waves.seeds import pattern_random

logger = logging.getLogger(__name__)

# level(u), d level / d u
Profile = Callable[[float], tuple[float, float]]

DEFAULT_SEEDS: dict[PatternName, int] = {
    PatternName.ORGANIC: 42,
    PatternName.MOUNTAIN: 7,
    PatternName.RIBBON: 17,
    PatternName.LAYERED_ORGANIC: 91,
}

_EPS = 1e-9
_MAX_SEGMENTS = 4096

SMOOTH_SWING = 0.4  # half peak-to-trough, in band units
FLOWING_INFLECTION = 0.42  # inflection position at phase 0, fraction of width
FLOWING_DRIFT = 0.3  # how far phase moves the inflection
RIBBON_RADII = 4


@dataclass(frozen=True)
class _Band:
    """Vertical band the wave lives in: from the crest line down to the baseline."""

    width: float
    height: float
    wave_height: float

    @property
    def crest(self) -> float:
        return self.height - self.wave_height

    def y(self, level: float) -> float:
        return self.crest + self.wave_height * level


def _band(config: GeometryConfig) -> _Band:
    return _Band(
        width=config.width,
        height=config.height,
        wave_height=config.height * config.amplitude,
    )


def _cycles(frequency: float) -> int:
    return max(1, round(frequency))


def _grid(step: float, offset: float) -> list[float]:
    """Points u in (0, 1) with u = k * step - offset for integer k."""
    step = max(step, 1.0 / _MAX_SEGMENTS)
    first = step - fract(offset / step) * step
    points = []
    k = 0
    while True:
        u = first + k * step
        if u >= 1.0 - _EPS:
            break
        if u > _EPS:
            points.append(u)
        k += 1
    return points


def _breakpoints(*grids: list[float]) -> list[float]:
    merged = sorted(set([0.0, 1.0, *(u for grid in grids for u in grid)]))
    result = [merged[0]]
    for u in merged[1:]:
        if u - result[-1] > _EPS:
            result.append(u)
    result[-1] = 1.0
    return result


def _frame(band: _Band, start_level: float, body: list[PathCommand]) -> list[PathCommand]:
    return [
        MoveTo(0.0, band.height),
        LineTo(0.0, band.y(start_level)),
        *body,
        LineTo(band.width, band.height),
        ClosePath(),
    ]


def _curved(band: _Band, profile: Profile, breakpoints: list[float]) -> list[PathCommand]:
    """Hermite interpolation of the profile, one cubic per breakpoint interval."""
    samples = [profile(u) for u in breakpoints]
    body: list[PathCommand] = []
    for (u0, (l0, d0)), (u1, (l1, d1)) in pairwise(zip(breakpoints, samples, strict=True)):
        du = u1 - u0
        body.append(
            CubicTo(
                band.width * (u0 + du / 3),
                band.y(l0 + d0 * du / 3),
                band.width * (u1 - du / 3),
                band.y(l1 - d1 * du / 3),
                band.width * u1,
                band.y(l1),
            )
        )
    return _frame(band, samples[0][0], body)


def _angular(band: _Band, profile: Profile, breakpoints: list[float]) -> list[PathCommand]:
    levels = [profile(u)[0] for u in breakpoints]
    body: list[PathCommand] = [
        LineTo(band.width * u, band.y(level))
        for u, level in zip(breakpoints[1:], levels[1:], strict=True)
    ]
    return _frame(band, levels[0], body)


def _polyline_profile(levels: list[float], phase: float) -> Profile:
    """Periodic piecewise-linear profile through evenly spaced knots."""
    count = len(levels)

    def profile(u: float) -> tuple[float, float]:
        t = (u + phase) * count
        k = math.floor(t)
        s = t - k
        a = levels[k % count]
        b = levels[(k + 1) % count]
        return lerp(a, b, s), (b - a) * count

    return profile


def _catmull_rom_profile(levels: list[float], phase: float) -> Profile:
    """Periodic uniform Catmull-Rom spline through evenly spaced knots."""
    count = len(levels)

    def profile(u: float) -> tuple[float, float]:
        t = (u + phase) * count
        k = math.floor(t)
        s = t - k
        p0 = levels[(k - 1) % count]
        p1 = levels[k % count]
        p2 = levels[(k + 1) % count]
        p3 = levels[(k + 2) % count]
        c1 = p2 - p0
        c2 = 2 * p0 - 5 * p1 + 4 * p2 - p3
        c3 = -p0 + 3 * p1 - 3 * p2 + p3
        value = 0.5 * (2 * p1 + c1 * s + c2 * s * s + c3 * s * s * s)
        slope = 0.5 * (c1 + 2 * c2 * s + 3 * c3 * s * s) * count
        return value, slope

    return profile


def _seed_for(pattern: PatternName, config: GeometryConfig) -> int:
    return config.seed if config.seed is not None else DEFAULT_SEEDS[pattern]


def _smooth(config: GeometryConfig) -> list[PathCommand]:
    band = _band(config)
    omega = 2 * math.pi * config.frequency

    def profile(u: float) -> tuple[float, float]:
        angle = omega * (u + config.phase)
        return 0.5 - SMOOTH_SWING * math.sin(angle), -SMOOTH_SWING * omega * math.cos(angle)

    step = 1.0 / (4 * config.frequency)
    return _curved(band, profile, _breakpoints(_grid(step, config.phase)))


def _organic_levels(seed: int, count: int, low: float, span: float) -> list[float]:
    return [low + span * pattern_random(seed, k + 1) for k in range(count)]


def _organic(config: GeometryConfig, knots_per_cycle: int, low: float, span: float, seed: int) -> list[PathCommand]:
    band = _band(config)
    count = knots_per_cycle * _cycles(config.frequency)
    levels = _organic_levels(seed, count, low, span)
    profile = _catmull_rom_profile(levels, config.phase)
    return _curved(band, profile, _breakpoints(_grid(1.0 / count, config.phase)))


def _sharp(config: GeometryConfig) -> list[PathCommand]:
    band = _band(config)
    peaks = _cycles(config.frequency)
    profile = _polyline_profile([1.0, 0.0] * peaks, config.phase)
    return _angular(band, profile, _breakpoints(_grid(1.0 / (2 * peaks), config.phase)))


def mountain_levels(seed: int, peaks: int) -> list[float]:
    """Knot levels for a ridge: valley, shoulder, summit, shoulder per peak."""
    levels: list[float] = []
    for i in range(peaks):
        summit = 0.35 * pattern_random(seed, 3 * i + 1)
        rise = (1.0 + summit) / 2 + 0.12 * (pattern_random(seed, 3 * i + 2) - 0.5)
        fall = (1.0 + summit) / 2 + 0.12 * (pattern_random(seed, 3 * i + 3) - 0.5)
        levels.extend([1.0, rise, summit, fall])
    return levels


def _mountain(config: GeometryConfig, seed: int) -> list[PathCommand]:
    band = _band(config)
    peaks = _cycles(config.frequency)
    profile = _polyline_profile(mountain_levels(seed, peaks), config.phase)
    return _angular(band, profile, _breakpoints(_grid(1.0 / (4 * peaks), config.phase)))


def _flowing(config: GeometryConfig) -> list[PathCommand]:
    band = _band(config)
    width = band.width
    inflection = width * (FLOWING_INFLECTION + FLOWING_DRIFT * math.sin(2 * math.pi * config.phase))
    start, middle, end = band.y(0.15), band.y(0.5), band.y(0.85)
    slope = 1.8 * band.wave_height / width
    left = 0.45 * inflection
    right = 0.35 * (width - inflection)

    body: list[PathCommand] = [
        CubicTo(
            0.4 * inflection,
            start,
            inflection - left,
            middle - slope * left,
            inflection,
            middle,
        ),
        CubicTo(
            inflection + right,
            middle + slope * right,
            width - 0.6 * (width - inflection),
            end,
            width,
            end,
        ),
    ]
    return _frame(band, 0.15, body)


def ribbon_radii(seed: int) -> list[float]:
    """The four envelope radii of a ribbon, fixed for a given seed."""
    return [0.35 + 0.65 * pattern_random(seed, i + 1) for i in range(RIBBON_RADII)]


def _ribbon(config: GeometryConfig, seed: int) -> list[PathCommand]:
    band = _band(config)
    radii = ribbon_radii(seed)
    omega = 2 * math.pi * config.frequency

    def envelope(u: float) -> tuple[float, float]:
        t = u * RIBBON_RADII
        k = math.floor(t)
        s = t - k
        a = radii[k % RIBBON_RADII]
        b = radii[(k + 1) % RIBBON_RADII]
        blend = (1 - math.cos(math.pi * s)) / 2
        d_blend = math.pi * math.sin(math.pi * s) / 2 * RIBBON_RADII
        return lerp(a, b, blend), (b - a) * d_blend

    def profile(u: float) -> tuple[float, float]:
        env, d_env = envelope(u)
        angle = omega * (u + config.phase)
        carrier = math.sin(angle)
        level = 0.5 - 0.45 * env * carrier
        slope = -0.45 * (d_env * carrier + env * omega * math.cos(angle))
        return level, slope

    carrier_grid = _grid(1.0 / (4 * config.frequency), config.phase)
    envelope_grid = _grid(1.0 / RIBBON_RADII, 0.0)
    return _curved(band, profile, _breakpoints(carrier_grid, envelope_grid))


def resolve_pattern(pattern: PatternName | str) -> PatternName:
    """Map a pattern name onto a known family, falling back to smooth.

    Unknown names are never an error: a warning is logged and smooth is used.
    """
    if isinstance(pattern, PatternName):
        return pattern
    try:
        return PatternName(pattern)
    except ValueError:
        available = ", ".join(p.value for p in PatternName)
        logger.warning(
            "Unknown pattern %r, falling back to 'smooth'. Available patterns: %s",
            pattern,
            available,
        )
        return PatternName.SMOOTH


def generate_commands(pattern: PatternName | str, config: GeometryConfig | None = None) -> list[PathCommand]:
    """Generate a base curve as typed commands.

    Args:
        pattern: Family name; unknown names fall back to smooth.
        config: Geometry; defaults to GeometryConfig().

    Returns:
        Commands starting at (0, height) and ending with a close.
    """
    config = config or GeometryConfig()
    name = resolve_pattern(pattern)

    match name:
        case PatternName.SMOOTH:
            commands = _smooth(config)
        case PatternName.ORGANIC:
            commands = _organic(config, 4, 0.1, 0.8, _seed_for(name, config))
        case PatternName.SHARP:
            commands = _sharp(config)
        case PatternName.MOUNTAIN:
            commands = _mountain(config, _seed_for(name, config))
        case PatternName.FLOWING:
            commands = _flowing(config)
        case PatternName.RIBBON:
            commands = _ribbon(config, _seed_for(name, config))
        case PatternName.LAYERED_ORGANIC:
            commands = _organic(config, 8, 0.2, 0.6, _seed_for(name, config))
        case _:
            assert_never(name)

    if config.mirror:
        width = config.width
        commands = reverse_commands(map_points(commands, lambda x, y: (width - x, y)))

    return commands


def generate_path(pattern: PatternName | str, config: GeometryConfig | None = None) -> str:
    """Generate a base curve as a path string.

    Example:
        >>> path = generate_path("sharp", GeometryConfig(width=100, height=10))
        >>> path
        'M 0 10 L 0 10 L 50 5 L 100 10 L 100 10 Z'
    """
    return serialize_path(generate_commands(pattern, config))
