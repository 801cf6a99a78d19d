"""Wave geometry: base curves, sampling and interlocking edges."""

from tidewave.core.waves.grammar import PathSyntaxError, parse_path, serialize_path
from tidewave.core.waves.interlock import generate_interlock_paths
from tidewave.core.waves.models import (
    DualPathResult,
    GeometryConfig,
    InterlockMode,
    InterlockOptions,
    PatternName,
    SeparationConfig,
)
from tidewave.core.waves.patterns import generate_commands, generate_path, resolve_pattern
from tidewave.core.waves.sampling import build_path_from_samples, sample_y
from tidewave.core.waves.seeds import auto_seed, seeded_random

__all__ = [
    "DualPathResult",
    "GeometryConfig",
    "InterlockMode",
    "InterlockOptions",
    "PathSyntaxError",
    "PatternName",
    "SeparationConfig",
    "auto_seed",
    "build_path_from_samples",
    "generate_commands",
    "generate_interlock_paths",
    "generate_path",
    "parse_path",
    "resolve_pattern",
    "sample_y",
    "seeded_random",
    "serialize_path",
]
