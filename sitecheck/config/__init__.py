"""Configuration module for sitecheck."""

from .check_config import (
    CHECK_CONFIG,
    SUPPORTED_BROWSERS,
    BrowserConfig,
    CheckSettings,
    DriverConfig,
    TargetConfig,
    get_check_settings,
    load_check_config,
)

__all__ = [
    'CHECK_CONFIG',
    'SUPPORTED_BROWSERS',
    'BrowserConfig',
    'CheckSettings',
    'DriverConfig',
    'TargetConfig',
    'get_check_settings',
    'load_check_config',
]
