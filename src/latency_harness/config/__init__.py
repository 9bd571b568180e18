"""Config – env-driven settings for the harness."""
from latency_harness.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from latency_harness.config.latency import LatencySettings
from latency_harness.config.loader import EnvSettingsLoader, Settings, SettingsLoader

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LatencySettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
