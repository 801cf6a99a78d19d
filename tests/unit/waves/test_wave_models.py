"""Tests for wave value records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tidewave.core.waves.models import (
    DualPathResult,
    GeometryConfig,
    InterlockMode,
    InterlockOptions,
    PatternName,
    SeparationConfig,
)


class TestGeometryConfig:
    """Tests for GeometryConfig."""

    def test_defaults(self) -> None:
        """Defaults describe a full-width 120px wave."""
        config = GeometryConfig()
        assert config.width == 1440
        assert config.height == 120
        assert config.amplitude == 0.5
        assert config.frequency == 1
        assert config.phase == 0
        assert config.seed is None
        assert config.mirror is False

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = GeometryConfig()
        with pytest.raises(ValidationError):
            config.height = 10

    def test_extra_fields_rejected(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            GeometryConfig(colour="red")

    def test_ranges_not_enforced(self) -> None:
        """Out-of-range values are the caller's responsibility."""
        config = GeometryConfig(width=-5, amplitude=2.0)
        assert config.width == -5
        assert config.amplitude == 2.0


class TestSeparationConfig:
    """Tests for SeparationConfig."""

    def test_defaults(self) -> None:
        """Interlock at half intensity with no gap."""
        config = SeparationConfig()
        assert config.mode is InterlockMode.INTERLOCK
        assert config.intensity == 0.5
        assert config.gap == 0
        assert config.stroke_color is None

    def test_mode_by_name(self) -> None:
        """Modes parse from their string names."""
        assert SeparationConfig(mode="apart").mode is InterlockMode.APART


class TestInterlockOptions:
    """Tests for InterlockOptions."""

    def test_default_seed(self) -> None:
        """An unset interlock seed is 42."""
        assert InterlockOptions().seed == 42

    def test_from_parts(self) -> None:
        """Geometry and separation merge into one record."""
        options = InterlockOptions.from_parts(
            PatternName.ORGANIC,
            GeometryConfig(height=200, seed=9),
            SeparationConfig(mode="overlap", gap=4),
        )
        assert options.pattern == PatternName.ORGANIC
        assert options.height == 200
        assert options.mode is InterlockMode.OVERLAP
        assert options.gap == 4
        assert options.seed == 9

    def test_from_parts_seed_precedence(self) -> None:
        """An explicit seed beats the geometry seed; neither means 42."""
        geometry = GeometryConfig(seed=9)
        assert InterlockOptions.from_parts("smooth", geometry, SeparationConfig(), seed=1).seed == 1
        assert InterlockOptions.from_parts("smooth", GeometryConfig(), SeparationConfig()).seed == 42

    def test_geometry_round_trip(self) -> None:
        """geometry() returns the geometry fields."""
        options = InterlockOptions(width=800, height=90, phase=0.25, mirror=True, seed=5)
        geometry = options.geometry()
        assert geometry == GeometryConfig(width=800, height=90, phase=0.25, mirror=True, seed=5)

    def test_unknown_pattern_name_accepted(self) -> None:
        """Pattern names are resolved at generation time, not validated here."""
        assert InterlockOptions(pattern="custom").pattern == "custom"


class TestDualPathResult:
    """Tests for DualPathResult."""

    def test_empty_paths_rejected(self) -> None:
        """All three curves must be non-empty."""
        with pytest.raises(ValidationError):
            DualPathResult(path_a="", path_b="M 0 1 Z", base_curve="M 0 1 Z")
