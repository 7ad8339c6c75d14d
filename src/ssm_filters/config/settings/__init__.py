"""Config settings – env-based query defaults."""
from ssm_filters.config.settings.base import Settings
from ssm_filters.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from ssm_filters.config.settings.query import MAX_RESULTS_LIMIT, QuerySettings

__all__ = ["MAX_RESULTS_LIMIT", "EnvSettingsLoader", "QuerySettings", "Settings", "SettingsLoader"]
