"""Config – 12-factor query defaults loaded from the environment."""

from ssm_filters.config.settings import EnvSettingsLoader, QuerySettings, Settings, SettingsLoader
from ssm_filters.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsLoader",
]
