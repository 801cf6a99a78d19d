"""Interlocking dual-edge generation.

Two adjacent sections share one boundary. Instead of a single edge, each
section gets its own curve derived from a shared base curve:

1. Generate the base curve for the chosen pattern
2. Sample its height at evenly spaced positions
3. Push the samples up (edge A) and down (edge B) by a mode-dependent amount
4. Add independent seeded jitter to each edge and widen by the gap
5. Rebuild a smooth curve from each offset sample set
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from tidewave.core.utils.logging import log_performance
from tidewave.core.waves.models import DualPathResult, InterlockMode, InterlockOptions
from tidewave.core.waves.patterns import generate_path
from tidewave.core.waves.sampling import build_path_from_samples, sample_y
from tidewave.core.waves.seeds import JITTER_STRIDE, random_sequence

logger = logging.getLogger(__name__)

INTERLOCK_SAMPLES = 20
JITTER_FRACTION = 0.3
# Jitter basis in px when max_offset is zero, so the edges stay distinct at zero intensity.
MIN_JITTER_OFFSET = 1.0

# (edge A, edge B) multipliers of the maximum offset.
MODE_FACTORS: dict[InterlockMode, tuple[float, float]] = {
    InterlockMode.INTERLOCK: (-1.0, 1.0),
    InterlockMode.OVERLAP: (-1.3, 0.7),
    InterlockMode.APART: (-0.6, 1.4),
}


def _jitter(seed: int, count: int, span: float) -> np.ndarray:
    draws = np.array(random_sequence(seed, count, JITTER_STRIDE))
    return (draws - 0.5) * span


def _resolve_options(options: InterlockOptions | None, overrides: dict[str, Any]) -> InterlockOptions:
    if options is None:
        return InterlockOptions.model_validate(overrides)
    if not overrides:
        return options
    return InterlockOptions.model_validate({**options.model_dump(), **overrides})


@log_performance
def generate_interlock_paths(options: InterlockOptions | None = None, **overrides: Any) -> DualPathResult:
    """Generate the two facing edges of a section boundary.

    Args:
        options: Full interlock options. Keyword overrides are applied on top,
            or build the options on their own when options is None.
        **overrides: Any InterlockOptions field.

    Returns:
        DualPathResult. Under flush mode all three curves are the same string.

    Example:
        >>> result = generate_interlock_paths(height=120, mode="flush")
        >>> result.path_a == result.path_b == result.base_curve
        True
    """
    opts = _resolve_options(options, overrides)
    base_curve = generate_path(opts.pattern, opts.geometry())

    if opts.mode is InterlockMode.FLUSH:
        return DualPathResult(path_a=base_curve, path_b=base_curve, base_curve=base_curve)

    base = np.asarray(sample_y(base_curve, opts.width, INTERLOCK_SAMPLES), dtype=float)

    max_offset = opts.height * opts.amplitude * opts.intensity * 0.5
    jitter_span = (max_offset if max_offset > 0 else MIN_JITTER_OFFSET) * JITTER_FRACTION
    half_gap = opts.gap / 2
    factor_a, factor_b = MODE_FACTORS[opts.mode]

    ys_a = base + factor_a * max_offset + _jitter(opts.seed + 1, INTERLOCK_SAMPLES, jitter_span) - half_gap
    ys_b = base + factor_b * max_offset + _jitter(opts.seed + 2, INTERLOCK_SAMPLES, jitter_span) + half_gap

    logger.debug(
        "Interlock %s/%s: max_offset=%.3f gap=%.3f seed=%d",
        opts.pattern,
        opts.mode.value,
        max_offset,
        opts.gap,
        opts.seed,
    )

    return DualPathResult(
        path_a=build_path_from_samples(ys_a.tolist(), opts.width, opts.height),
        path_b=build_path_from_samples(ys_b.tolist(), opts.width, opts.height),
        base_curve=base_curve,
    )
