"""Configuration package for runtime settings and startup validation."""

from .logging import config_configure_logging, config_log_event
from .resource_defaults import ConfigResourceRequirementsProvider
from .settings import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings

__all__ = [
    "AppSettings",
    "ConfigResourceRequirementsProvider",
    "SettingsLoadError",
    "config_configure_logging",
    "config_load_database_url",
    "config_load_settings",
    "config_log_event",
]
