"""Shared pytest fixtures for wave tests."""

from __future__ import annotations

import pytest

from tidewave.core.waves.models import GeometryConfig


@pytest.fixture
def section_config() -> GeometryConfig:
    """Full-width section boundary, 120px tall."""
    return GeometryConfig(height=120, amplitude=0.5, frequency=1)


@pytest.fixture
def small_config() -> GeometryConfig:
    """Small 100x10 viewBox with round coordinates."""
    return GeometryConfig(width=100, height=10)
