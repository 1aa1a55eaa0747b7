"""Configuration package for runtime settings, logging and startup validation."""

from .logging import logging_configure
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = ["AppSettings", "SettingsLoadError", "config_load_settings", "logging_configure"]
