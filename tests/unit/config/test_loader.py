"""Tests for configuration loading."""

from __future__ import annotations

import doctest
import json
from pathlib import Path

import pytest

from tidewave.core.config import loader
from tidewave.core.config.loader import (
    ConfigError,
    detect_format,
    dump_wave_settings,
    load_config,
    load_tidewave_config,
    load_tracker_options,
    load_wave_settings,
)
from tidewave.core.config.models import TidewaveConfig, WaveSettings
from tidewave.core.motion.scroll_tracker import ScrollTrackerOptions
from tidewave.core.waves.models import InterlockMode, PatternName

WAVE_YAML = """
wave:
  pattern: organic
  height: 200
  amplitude: 0.7
  seed: 11
  mode: overlap
  gap: 6
scroll:
  max_velocity: 1500
"""


@pytest.fixture
def yaml_config(tmp_path: Path) -> Path:
    """YAML config with wave and scroll sections."""
    path = tmp_path / "waves.yaml"
    path.write_text(WAVE_YAML, encoding="utf-8")
    return path


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.yml", "yaml"), ("A.YAML", "yaml")],
    )
    def test_known_extensions(self, name: str, expected: str) -> None:
        """JSON and YAML extensions are recognised."""
        assert detect_format(name) == expected

    def test_unknown_extension(self) -> None:
        """Other extensions are rejected."""
        with pytest.raises(ConfigError, match="Unsupported config format"):
            detect_format("waves.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml(self, yaml_config: Path) -> None:
        """YAML files load as dictionaries."""
        raw = load_config(yaml_config)
        assert raw["wave"]["pattern"] == "organic"
        assert raw["scroll"]["max_velocity"] == 1500

    def test_json(self, tmp_path: Path) -> None:
        """JSON files load as dictionaries."""
        path = tmp_path / "waves.json"
        path.write_text(json.dumps({"wave": {"height": 80}}), encoding="utf-8")
        assert load_config(path) == {"wave": {"height": 80}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """An empty YAML file is an empty config."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken YAML raises ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("wave: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Broken JSON raises ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        """A YAML list is not a config."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_config(path)


class TestLoadSettings:
    """Tests for the typed loaders."""

    def test_load_wave_settings(self, yaml_config: Path) -> None:
        """The wave section becomes WaveSettings."""
        settings = load_wave_settings(yaml_config)
        assert settings.pattern is PatternName.ORGANIC
        assert settings.height == 200
        assert settings.amplitude == 0.7
        assert settings.seed == 11
        assert settings.mode is InterlockMode.OVERLAP
        assert settings.gap == 6
        assert settings.width == 1440

    def test_load_tracker_options(self, yaml_config: Path) -> None:
        """The scroll section becomes ScrollTrackerOptions."""
        options = load_tracker_options(yaml_config)
        assert options == ScrollTrackerOptions(max_velocity=1500)

    def test_zero_max_velocity_rejected(self, tmp_path: Path) -> None:
        """A zero max_velocity never reaches the tracker."""
        path = tmp_path / "scroll.yaml"
        path.write_text("scroll:\n  max_velocity: 0\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_tracker_options(path)

    def test_inverted_damping_rejected(self, tmp_path: Path) -> None:
        """min_damping above max_damping is rejected at load time."""
        path = tmp_path / "scroll.json"
        path.write_text(
            json.dumps({"scroll": {"min_damping": 0.5, "max_damping": 0.1}}), encoding="utf-8"
        )
        with pytest.raises(ConfigError, match="min_damping must be <= max_damping"):
            load_tracker_options(path)

    def test_no_path_gives_defaults(self) -> None:
        """Without a file every section is default."""
        assert load_tidewave_config(None) == TidewaveConfig()

    def test_out_of_range_rejected(self, tmp_path: Path) -> None:
        """Settings outside their ranges are rejected at load time."""
        path = tmp_path / "waves.yaml"
        path.write_text("wave:\n  amplitude: 1.5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_wave_settings(path)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        """Unknown keys are rejected."""
        path = tmp_path / "waves.yaml"
        path.write_text("wave:\n  colour: red\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_wave_settings(path)

    def test_dump_and_reload(self, tmp_path: Path) -> None:
        """Dumped settings load back unchanged."""
        settings = WaveSettings(pattern="ribbon", height=90, intensity=0.8, mirror=True)
        path = tmp_path / "out" / "waves.json"
        dump_wave_settings(path, settings)
        assert load_wave_settings(path) == settings


class TestLoaderDocstrings:
    """Tests for the loader's docstring examples."""

    def test_examples_run(self) -> None:
        """Every docstring example in the loader runs as written."""
        results = doctest.testmod(loader)
        assert results.failed == 0
        assert results.attempted > 0
