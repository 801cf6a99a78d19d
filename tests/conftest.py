"""Shared pytest fixtures for tidewave tests."""

from __future__ import annotations

import pytest

from tidewave.core.waves.models import InterlockOptions

# ============================================================================
# Interlock Fixtures
# ============================================================================


@pytest.fixture
def boundary_options() -> InterlockOptions:
    """Smooth interlocking boundary between two 120px sections."""
    return InterlockOptions(
        pattern="smooth",
        height=120,
        amplitude=0.5,
        frequency=1,
        intensity=0.5,
        mode="interlock",
        seed=42,
    )
