"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tidewave.core.config.models import LoggingConfig, TidewaveConfig, WaveSettings
from tidewave.core.motion.scroll_tracker import ScrollTrackerOptions
from tidewave.core.utils.json import read_json, write_json
from tidewave.core.utils.logging import configure_logging, get_logger

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be turned into settings."""


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ConfigError: If format cannot be determined

    Example:
        >>> detect_format("waves.json")
        'json'
        >>> detect_format("waves.yaml")
        'yaml'
        >>> detect_format("waves.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ConfigError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension. An empty YAML file loads as ``{}``.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ConfigError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_tidewave_config(path: str | Path | None = None) -> TidewaveConfig:
    """Load and validate a full config file.

    Args:
        path: Path to config file. None returns all defaults.

    Returns:
        Validated TidewaveConfig

    Raises:
        ConfigError: If the file content fails validation
    """
    if path is None:
        return TidewaveConfig()

    log = get_logger(__name__, config_path=str(path))
    raw_config = load_config(path)
    try:
        config = TidewaveConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    log.debug("Loaded config sections: %s", sorted(raw_config))
    return config


def load_wave_settings(path: str | Path) -> WaveSettings:
    """Load the ``wave`` section of a config file.

    The result feeds the generators through its conversion helpers, e.g.
    ``generate_interlock_paths(settings.to_interlock_options())``.
    """
    return load_tidewave_config(path).wave


def load_tracker_options(path: str | Path) -> ScrollTrackerOptions:
    """Load the ``scroll`` section of a config file."""
    return load_tidewave_config(path).scroll.to_tracker_options()


def dump_wave_settings(path: str | Path, settings: WaveSettings) -> None:
    """Write wave settings as a JSON config file with a single ``wave`` section."""
    write_json(path, {"wave": settings})


def apply_logging_config(config: LoggingConfig | None = None) -> None:
    """Configure Python logging from a LoggingConfig.

    Args:
        config: Logging settings (defaults if None)
    """
    config = config or LoggingConfig()
    configure_logging(
        level=config.level,
        format_string=config.format,
        filename=config.filename,
        structured=config.structured,
    )
    logger.debug("Logging configured at %s", config.level.upper())
