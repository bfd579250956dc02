"""
Failure diagnostics for sitecheck.

Classifies errors raised while provisioning drivers, launching browsers and
checking pages, and produces recovery suggestions for the operator.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List

from sitecheck.error_handling.errors import (
    BrowserSessionError,
    ConfigurationError,
    EnvironmentSetupError,
    DriverProvisioningError,
    NavigationError,
    TitleMismatchError,
)


# Configure logging
logger = logging.getLogger(__name__)


ENVIRONMENT = "environment"
NAVIGATION = "navigation"
ASSERTION = "assertion"
CONFIGURATION = "configuration"
UNEXPECTED = "unexpected"


class ErrorHandler:
    """
    Error classification and diagnostic logging for browser checks.

    Checks run exactly once; this class never retries. It only explains
    what went wrong and what the operator can try next.
    """

    def classify(self, error: Exception) -> str:
        """
        Map an exception to one of the failure categories.

        Args:
            error: The exception to classify

        Returns:
            One of "environment", "navigation", "assertion",
            "configuration" or "unexpected"
        """
        if isinstance(error, (EnvironmentSetupError, BrowserSessionError)):
            return ENVIRONMENT
        if isinstance(error, NavigationError):
            return NAVIGATION
        if isinstance(error, AssertionError):
            return ASSERTION
        if isinstance(error, ConfigurationError):
            return CONFIGURATION
        return UNEXPECTED

    def describe_failure(self, error: Exception) -> Dict[str, Any]:
        """
        Provide an analysis and recovery suggestions for a failed check.

        Args:
            error: The exception raised by the check

        Returns:
            Dictionary with error_type, category, error_message, timestamp
            and recovery_suggestions keys
        """
        category = self.classify(error)
        description = {
            'error_type': type(error).__name__,
            'category': category,
            'error_message': str(error),
            'timestamp': datetime.now().isoformat(),
            'recovery_suggestions': self._suggestions_for(category, error),
        }

        logger.warning(f"{category.capitalize()} failure: {error}")
        logger.info(f"Recovery suggestions: {description['recovery_suggestions']}")

        return description

    def log_failure(self, operation_name: str, error: Exception, **context: Any) -> None:
        """
        Log an error with timestamp and diagnostic context.

        Args:
            operation_name: Name of the operation that failed
            error: The exception that occurred
            **context: Extra values worth recording (url, browser, ...)
        """
        details = {
            'timestamp': datetime.now().isoformat(),
            'operation': operation_name,
            'category': self.classify(error),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'context': {k: str(v) for k, v in context.items()},
        }

        logger.error(
            f"Operation failed: {operation_name} | "
            f"Error: {type(error).__name__}: {str(error)}"
        )
        logger.debug(f"Full error context: {details}")

    def _suggestions_for(self, category: str, error: Exception) -> List[str]:
        error_str = str(error).lower()

        if category == ENVIRONMENT:
            if isinstance(error, DriverProvisioningError):
                return [
                    'Check network access to the driver download servers',
                    'Set SITECHECK_DRIVER_PATH to a pre-installed driver executable',
                    'Run with --no-driver-manager to let selenium resolve the driver',
                ]
            suggestions = [
                'Verify the browser is installed and matches the driver version',
                'Try running with --headless on machines without a display',
            ]
            if 'permission' in error_str:
                suggestions.append('Make sure the driver executable is marked executable')
            return suggestions

        if category == NAVIGATION:
            suggestions = [
                'Verify the URL is correct and reachable from this machine',
                'Check DNS resolution and proxy settings',
            ]
            if 'timeout' in error_str or 'timed out' in error_str:
                suggestions.append('Increase --page-load-timeout')
            return suggestions

        if category == ASSERTION:
            if isinstance(error, TitleMismatchError) and not error.actual:
                return ['The page reported an empty title; check it finished loading']
            return [
                'Open the page manually and compare its title',
                'Update the expected text if the site changed its title',
            ]

        if category == CONFIGURATION:
            return ['Review SITECHECK_* environment variables and CLI flags']

        return ['Re-run with --verbose for the full traceback']
