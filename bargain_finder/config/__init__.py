"""Configuration module for the bargain finder."""

from .settings import (
    APP_CONFIG,
    AppSettings,
    RepliersConfig,
    get_settings,
    load_app_config,
)

__all__ = [
    'APP_CONFIG',
    'AppSettings',
    'RepliersConfig',
    'get_settings',
    'load_app_config',
]
