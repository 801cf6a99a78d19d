"""Whole-curve transforms: flips, mirrors and layered stacks."""

from __future__ import annotations

from tidewave.core.waves.grammar import map_points, parse_path, reverse_commands, serialize_path
from tidewave.core.waves.models import GeometryConfig, PatternName
from tidewave.core.waves.patterns import generate_path

LAYER_AMPLITUDE_STEP = 0.15
LAYER_PHASE_STEP = 0.2


def flip_path_vertically(path: str, height: float) -> str:
    """Turn a downward wave into an upward one (y -> height - y).

    Example:
        >>> flip_path_vertically("M 0 10 L 0 4 L 10 10 Z", 10)
        'M 0 0 L 0 6 L 10 0 Z'
    """
    commands = map_points(parse_path(path), lambda x, y: (x, height - y))
    return serialize_path(commands)


def mirror_path(path: str, width: float) -> str:
    """Reflect a curve around the vertical centre line.

    The result is traced in reverse so it still starts at the left baseline
    corner.
    """
    commands = map_points(parse_path(path), lambda x, y: (width - x, y))
    return serialize_path(reverse_commands(commands))


def generate_layered_paths(
    pattern: PatternName | str,
    layers: int,
    config: GeometryConfig | None = None,
) -> list[str]:
    """Generate a stack of progressively flatter, phase-shifted copies.

    Layer i uses ``amplitude * (1 - 0.15 * i)`` and ``phase + 0.2 * i``.

    Args:
        pattern: Family for every layer.
        layers: Number of layers.
        config: Geometry of the front layer.

    Returns:
        One path string per layer, front layer first.
    """
    config = config or GeometryConfig()
    paths: list[str] = []
    for i in range(layers):
        layer_config = config.model_copy(
            update={
                "amplitude": config.amplitude * (1 - i * LAYER_AMPLITUDE_STEP),
                "phase": config.phase + i * LAYER_PHASE_STEP,
            }
        )
        paths.append(generate_path(pattern, layer_config))
    return paths
