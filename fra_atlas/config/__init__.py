"""Configuration package for runtime settings and startup validation."""

from .settings import AtlasSettings, SettingsLoadError, config_load_settings

__all__ = ["AtlasSettings", "SettingsLoadError", "config_load_settings"]
