"""
Driver binary provisioning for browser sessions.

Resolves the driver executable that bridges selenium to a browser, either from
an explicit path or by downloading a matching build with webdriver-manager.
Intended to run once per test suite.
"""

import logging
import os
from typing import Callable, Dict, Optional

from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from sitecheck.config.check_config import CheckSettings, SUPPORTED_BROWSERS
from sitecheck.error_handling.errors import DriverProvisioningError


# Configure logging
logger = logging.getLogger(__name__)


# Manager classes are resolved at call time
_MANAGER_FACTORIES: Dict[str, Callable[[], object]] = {
    "chrome": lambda: ChromeDriverManager(),
    "firefox": lambda: GeckoDriverManager(),
}


class DriverInstaller:
    """
    Resolves and caches the driver executable for one browser backend.

    Attributes:
        browser: Browser backend name ("chrome" or "firefox")
        driver_path: Explicit driver executable, skips downloading when set
        use_driver_manager: Download drivers with webdriver-manager when no
            explicit path is given
    """

    def __init__(
        self,
        browser: str = "chrome",
        driver_path: Optional[str] = None,
        use_driver_manager: bool = True
    ):
        """
        Initialize driver installer.

        Args:
            browser: Browser backend name (default: "chrome")
            driver_path: Explicit driver executable path (optional)
            use_driver_manager: Whether webdriver-manager may download
                drivers (default: True)
        """
        if browser not in SUPPORTED_BROWSERS:
            raise DriverProvisioningError(browser, "unsupported browser")

        self.browser = browser
        self.driver_path = driver_path
        self.use_driver_manager = use_driver_manager
        self._resolved_path: Optional[str] = None
        self._installed = False

    @classmethod
    def from_settings(cls, settings: CheckSettings) -> "DriverInstaller":
        """Create an installer for the configured browser and driver options."""
        return cls(
            browser=settings.browser_config.browser,
            driver_path=settings.driver_config.driver_path,
            use_driver_manager=settings.driver_config.use_driver_manager,
        )

    @property
    def resolved_path(self) -> Optional[str]:
        """Driver path found by the last successful install, if any."""
        return self._resolved_path

    def install(self) -> Optional[str]:
        """
        Make a driver executable available for the configured browser.

        Resolution happens once; later calls return the cached result.

        Returns:
            Path to the driver executable, or None when selenium should
            locate the driver itself

        Raises:
            DriverProvisioningError: If the explicit path does not exist or
                webdriver-manager cannot install a driver
        """
        if self._installed:
            return self._resolved_path

        if self.driver_path:
            if not os.path.isfile(self.driver_path):
                raise DriverProvisioningError(
                    self.browser, f"driver executable not found at {self.driver_path}"
                )
            logger.info(f"Using {self.browser} driver at {self.driver_path}")
            path = self.driver_path
        elif self.use_driver_manager:
            logger.info(f"Installing {self.browser} driver with webdriver-manager")
            try:
                path = _MANAGER_FACTORIES[self.browser]().install()
            except Exception as e:
                logger.error(f"Driver installation for {self.browser} failed: {e}")
                raise DriverProvisioningError(self.browser, str(e)) from e
            logger.info(f"Installed {self.browser} driver at {path}")
        else:
            logger.info(
                f"Driver manager disabled; selenium will resolve the {self.browser} driver"
            )
            path = None

        self._resolved_path = path
        self._installed = True
        return path
