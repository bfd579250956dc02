"""
Error handling module for sitecheck.

Provides the exception hierarchy and failure diagnostics.
"""

from .error_handler import ErrorHandler
from .errors import (
    BrowserCheckError,
    BrowserSessionError,
    ConfigurationError,
    EnvironmentSetupError,
    DriverProvisioningError,
    SessionStartError,
    NavigationError,
    TitleMismatchError,
)

__all__ = [
    'ErrorHandler',
    'BrowserCheckError',
    'BrowserSessionError',
    'ConfigurationError',
    'EnvironmentSetupError',
    'DriverProvisioningError',
    'SessionStartError',
    'NavigationError',
    'TitleMismatchError',
]
