"""
Exception hierarchy for sitecheck.

Environment failures (driver provisioning, browser launch) are kept apart from
navigation failures and title mismatches so callers can report them differently.
"""

from typing import Optional


class BrowserCheckError(Exception):
    """Base class for all sitecheck errors."""


class ConfigurationError(BrowserCheckError):
    """Raised when configuration values are missing or malformed."""


class EnvironmentSetupError(BrowserCheckError):
    """Raised when the browser environment cannot be prepared."""


class DriverProvisioningError(EnvironmentSetupError):
    """Raised when a driver executable cannot be resolved or installed."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Could not provision {browser} driver: {reason}")


class SessionStartError(EnvironmentSetupError):
    """Raised when a browser session fails to launch."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Could not start {browser} session: {reason}")


class BrowserSessionError(BrowserCheckError):
    """Raised when a running browser stops responding or fails to quit."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"{browser} session failed: {reason}")


class NavigationError(BrowserCheckError):
    """Raised when the browser fails to load a URL (network, DNS, timeout)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Navigation to {url} failed: {reason}")


class TitleMismatchError(BrowserCheckError, AssertionError):
    """
    Raised when a page title does not contain the expected text.

    Subclasses AssertionError so test runners report it as a failed
    assertion rather than an error.

    Attributes:
        expected: Substring the title was expected to contain
        actual: Title the browser reported
        url: Page that was checked
    """

    def __init__(self, expected: str, actual: str, url: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.url = url
        location = f" at {url}" if url else ""
        super().__init__(
            f"Expected page title{location} to contain {expected!r}, "
            f"but it was {actual!r}"
        )
