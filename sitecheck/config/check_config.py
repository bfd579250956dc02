"""Check configuration settings for sitecheck."""

from dataclasses import dataclass
from typing import List, Optional
import math
import os

from sitecheck.error_handling.errors import ConfigurationError


SUPPORTED_BROWSERS = ("chrome", "firefox")

DEFAULT_URL = "https://www.github.com"
DEFAULT_EXPECTED_TITLE = "GitHub"


@dataclass
class BrowserConfig:
    """Browser launch configuration."""
    browser: str = "chrome"
    headless: bool = False
    page_load_timeout_seconds: Optional[float] = None
    browser_args: List[str] = None

    def __post_init__(self):
        """Normalize the browser name and default the argument list."""
        self.browser = self.browser.strip().lower()
        if self.browser_args is None:
            self.browser_args = []


@dataclass
class DriverConfig:
    """Driver binary resolution configuration."""
    driver_path: Optional[str] = None
    use_driver_manager: bool = True


@dataclass
class TargetConfig:
    """Page under check."""
    url: str = DEFAULT_URL
    expected_title_substring: str = DEFAULT_EXPECTED_TITLE


@dataclass
class CheckSettings:
    """Main check configuration settings."""
    browser_config: BrowserConfig = None
    driver_config: DriverConfig = None
    target_config: TargetConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided and validate them."""
        if self.browser_config is None:
            self.browser_config = BrowserConfig()
        if self.driver_config is None:
            self.driver_config = DriverConfig()
        if self.target_config is None:
            self.target_config = TargetConfig()

        if self.browser_config.browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{self.browser_config.browser}'. "
                f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        timeout = self.browser_config.page_load_timeout_seconds
        if timeout is not None and (not math.isfinite(timeout) or timeout <= 0):
            raise ConfigurationError(
                f"Page load timeout must be a positive finite number, got {timeout}"
            )

        if not self.target_config.url or not self.target_config.url.strip():
            raise ConfigurationError("Target URL must not be empty")
        if not self.target_config.expected_title_substring:
            raise ConfigurationError("Expected title text must not be empty")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}")


def _env_list(name: str) -> List[str]:
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


def load_check_config() -> dict:
    """
    Read the check configuration from environment variables.

    Returns:
        Nested dictionary with browser_config, driver_config and
        target_config sections
    """
    return {
        "browser_config": {
            "browser": os.getenv("SITECHECK_BROWSER", "chrome"),
            "headless": _env_flag("SITECHECK_HEADLESS", False),
            "page_load_timeout_seconds": _env_float("SITECHECK_PAGE_LOAD_TIMEOUT"),
            "browser_args": _env_list("SITECHECK_BROWSER_ARGS"),
        },
        "driver_config": {
            "driver_path": os.getenv("SITECHECK_DRIVER_PATH") or None,
            "use_driver_manager": _env_flag("SITECHECK_USE_DRIVER_MANAGER", True),
        },
        "target_config": {
            "url": os.getenv("SITECHECK_URL", DEFAULT_URL),
            "expected_title_substring": os.getenv("SITECHECK_EXPECTED_TITLE", DEFAULT_EXPECTED_TITLE),
        },
    }


# Configuration as seen at import time
CHECK_CONFIG = load_check_config()


def get_check_settings() -> CheckSettings:
    """Get check settings from the current environment."""
    config = load_check_config()
    return CheckSettings(
        browser_config=BrowserConfig(**config["browser_config"]),
        driver_config=DriverConfig(**config["driver_config"]),
        target_config=TargetConfig(**config["target_config"]),
    )
