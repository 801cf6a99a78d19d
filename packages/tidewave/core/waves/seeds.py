"""Deterministic seed helpers.

Everything "random" in a wave comes from here, so identical inputs always
produce byte-identical curves.

The pseudo-random sequence is the classic ``fract(sin(n) * 10000)`` hash.
It relies on the platform ``sin``; results are stable for a given
interpreter and libm, and are compared exactly only within one runtime.
"""

from __future__ import annotations

import math

from tidewave.core.utils.math import fract

# Multipliers for the two index streams. Pattern shapes and interlock jitter
# draw from different streams so a pattern seed never aliases edge jitter.
PATTERN_STRIDE = 5381
JITTER_STRIDE = 49297
SEED_STRIDE = 9301

_SECTION_HASH = 2654435761  # Knuth's multiplicative constant (golden ratio * 2^32)
_TRANSITION_HASH = 340573321
_SEED_MODULUS = 10000


def auto_seed(section_index: int, transition_index: int) -> int:
    """Derive a seed from a section's position in the page.

    Uses golden-ratio multiplicative hashing folded to 32 bits, then reduced
    to [0, 10000). Collisions are possible but rare over small ranges.

    Example:
        >>> auto_seed(0, 0)
        0
        >>> auto_seed(1, 0)
        5761
        >>> auto_seed(0, 1)
        3321
    """
    mixed = (section_index * _SECTION_HASH + transition_index * _TRANSITION_HASH) % 2**32
    return mixed % _SEED_MODULUS


def seeded_random(seed: int, index: int, stride: int = JITTER_STRIDE) -> float:
    """Pseudo-random value in [0, 1) for (seed, index).

    Args:
        seed: Sequence seed.
        index: Position in the sequence.
        stride: Index multiplier selecting the stream.

    Returns:
        Deterministic float in [0, 1).
    """
    x = math.sin(seed * SEED_STRIDE + index * stride) * 10000
    return fract(x)


def pattern_random(seed: int, index: int) -> float:
    """Value from the pattern-shape stream."""
    return seeded_random(seed, index, PATTERN_STRIDE)


def random_sequence(seed: int, count: int, stride: int = JITTER_STRIDE, start: int = 0) -> list[float]:
    """First ``count`` values of a seeded stream, beginning at ``start``."""
    return [seeded_random(seed, start + i, stride) for i in range(count)]
