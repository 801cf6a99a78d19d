"""Configuration models and file loaders."""

from tidewave.core.config.loader import (
    ConfigError,
    apply_logging_config,
    detect_format,
    dump_wave_settings,
    load_config,
    load_tidewave_config,
    load_tracker_options,
    load_wave_settings,
)
from tidewave.core.config.models import (
    LoggingConfig,
    ScrollSettings,
    TidewaveConfig,
    WaveSettings,
)

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "ScrollSettings",
    "TidewaveConfig",
    "WaveSettings",
    "apply_logging_config",
    "detect_format",
    "dump_wave_settings",
    "load_config",
    "load_tidewave_config",
    "load_tracker_options",
    "load_wave_settings",
]
