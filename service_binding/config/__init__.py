"""Configuration package for runtime settings and load-time validation."""

from .settings import ServiceBindingSettings, SettingsLoadError, config_load_settings

__all__ = ["ServiceBindingSettings", "SettingsLoadError", "config_load_settings"]
