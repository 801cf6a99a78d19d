"""Tests for curve sampling and resynthesis."""

from __future__ import annotations

import pytest

from tidewave.core.waves.grammar import CubicTo, PathSyntaxError, parse_path
from tidewave.core.waves.models import GeometryConfig
from tidewave.core.waves.patterns import generate_path
from tidewave.core.waves.sampling import (
    TANGENT_FRACTION,
    build_path_from_samples,
    interpolate_at,
    sample_grid,
    sample_y,
)


class TestSampleGrid:
    """Tests for sample_grid."""

    def test_covers_both_ends(self) -> None:
        """Grid includes 0 and width."""
        assert sample_grid(100, 5) == [0.0, 25.0, 50.0, 75.0, 100.0]

    def test_degenerate_counts(self) -> None:
        """Zero and one sample are handled."""
        assert sample_grid(100, 0) == []
        assert sample_grid(100, 1) == [0.0]


class TestInterpolateAt:
    """Tests for interpolate_at."""

    def test_between_points(self) -> None:
        """Linear interpolation inside a bracket."""
        points = [(0.0, 0.0), (10.0, 20.0)]
        assert interpolate_at(points, 5.0) == pytest.approx(10.0)

    def test_first_bracket_wins(self) -> None:
        """Duplicate x positions use the earliest bracket."""
        points = [(0.0, 0.0), (5.0, 10.0), (5.0, 50.0), (10.0, 50.0)]
        assert interpolate_at(points, 5.0) == pytest.approx(10.0)

    def test_extrapolates_outside(self) -> None:
        """Outside the range the first-to-last line is extended."""
        points = [(2.0, 2.0), (4.0, 4.0)]
        assert interpolate_at(points, 6.0) == pytest.approx(6.0)

    def test_vertical_bracket(self) -> None:
        """A zero-width bracket returns its left y."""
        points = [(3.0, 1.0), (3.0, 9.0)]
        assert interpolate_at(points, 3.0) == 1.0


class TestSampleY:
    """Tests for sample_y."""

    def test_sharp_wave(self, small_config: GeometryConfig) -> None:
        """Samples of a single peak follow its two slopes."""
        path = generate_path("sharp", small_config)
        assert sample_y(path, 100, 5) == pytest.approx([10.0, 7.5, 5.0, 7.5, 10.0])

    def test_returns_requested_length(self, section_config: GeometryConfig) -> None:
        """The sample set always has sample_count entries."""
        path = generate_path("organic", section_config)
        assert len(sample_y(path, 1440, 20)) == 20
        assert len(sample_y(path, 1440, 7)) == 7

    def test_samples_stay_in_band(self, section_config: GeometryConfig) -> None:
        """Samples of a smooth wave lie between crest line and baseline."""
        path = generate_path("smooth", section_config)
        for y in sample_y(path, 1440, 20):
            assert 60.0 <= y <= 120.0

    def test_drops_points_outside_width(self) -> None:
        """Points beyond the width are ignored."""
        path = "M 0 10 L 0 2 L 5 2 L 50 100 L 10 10 Z"
        assert sample_y(path, 10, 3) == pytest.approx([2.0, 2.0, 2.0])

    def test_too_few_points_gives_zeros(self) -> None:
        """Fewer than two usable points degrades to zeros."""
        assert sample_y("M 0 10 Z", 100, 4) == [0.0, 0.0, 0.0, 0.0]
        assert sample_y("", 100, 3) == [0.0, 0.0, 0.0]

    def test_rejects_unsupported_grammar(self) -> None:
        """Curves outside the restricted grammar raise."""
        with pytest.raises(PathSyntaxError):
            sample_y("M 0 10 q 5 5 10 10 Z", 10)


class TestBuildPathFromSamples:
    """Tests for build_path_from_samples."""

    def test_exact_output(self) -> None:
        """Three samples make two cubic segments."""
        path = build_path_from_samples([0, 10, 20], 20, 30)
        assert path == "M 0 30 L 0 0 C 4 0, 6 10, 10 10 C 14 10, 16 20, 20 20 L 20 30 Z"

    def test_empty_samples_are_flat(self) -> None:
        """No samples give a flat line at y=0."""
        assert build_path_from_samples([], 20, 30) == "M 0 30 L 0 0 C 8 0, 12 0, 20 0 L 20 30 Z"

    def test_single_sample_is_flat(self) -> None:
        """One sample is held across the width."""
        assert build_path_from_samples([5], 20, 30) == "M 0 30 L 0 5 C 8 5, 12 5, 20 5 L 20 30 Z"

    def test_tangent_fraction(self) -> None:
        """Control points sit at 40% and 60% of every segment."""
        samples = [float(i % 3) for i in range(20)]
        commands = parse_path(build_path_from_samples(samples, 1440, 120))
        cubics = [c for c in commands if isinstance(c, CubicTo)]
        segment = 1440 / 19
        assert TANGENT_FRACTION == 0.4
        assert len(cubics) == 19
        for i, cubic in enumerate(cubics):
            assert cubic.x1 == pytest.approx(segment * (i + 0.4))
            assert cubic.x2 == pytest.approx(segment * (i + 0.6))
            assert cubic.y1 == pytest.approx(samples[i])
            assert cubic.y2 == pytest.approx(samples[i + 1])

    def test_resample_recovers_samples(self) -> None:
        """Sampling a rebuilt curve at its knots returns the input."""
        samples = [100.0, 80.0, 95.0, 70.0, 110.0]
        path = build_path_from_samples(samples, 400, 120)
        assert sample_y(path, 400, 5) == pytest.approx(samples)
