"""
Selenium-backed browser session.

Owns one webdriver instance: launching it, navigating, reading the page title
and quitting it. A session handle is started at most once and quitting it is
always safe.
"""

import logging
from typing import Any, Callable, Dict, Optional

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService

from sitecheck.config.check_config import BrowserConfig
from sitecheck.error_handling.errors import (
    BrowserSessionError,
    NavigationError,
    SessionStartError,
)


# Configure logging
logger = logging.getLogger(__name__)


def _build_chrome(config: BrowserConfig, driver_path: Optional[str]) -> Any:
    options = webdriver.ChromeOptions()
    if config.headless:
        options.add_argument("--headless=new")
    for arg in config.browser_args:
        options.add_argument(arg)
    service = ChromeService(executable_path=driver_path) if driver_path else ChromeService()
    return webdriver.Chrome(service=service, options=options)


def _build_firefox(config: BrowserConfig, driver_path: Optional[str]) -> Any:
    options = webdriver.FirefoxOptions()
    if config.headless:
        options.add_argument("-headless")
    for arg in config.browser_args:
        options.add_argument(arg)
    service = FirefoxService(executable_path=driver_path) if driver_path else FirefoxService()
    return webdriver.Firefox(service=service, options=options)


BACKENDS: Dict[str, Callable[[BrowserConfig, Optional[str]], Any]] = {
    "chrome": _build_chrome,
    "firefox": _build_firefox,
}


class BrowserSession:
    """
    A live, controllable browser instance.

    Attributes:
        config: Browser launch configuration
        driver_path: Driver executable to launch, or None to let selenium
            resolve it
    """

    def __init__(self, config: BrowserConfig, driver_path: Optional[str] = None):
        self.config = config
        self.driver_path = driver_path
        self._driver = None
        self._started = False

    @classmethod
    def launch(cls, config: BrowserConfig, driver_path: Optional[str] = None) -> "BrowserSession":
        """Create a session and start the browser in one step."""
        session = cls(config, driver_path)
        session.start()
        return session

    @property
    def browser(self) -> str:
        """Browser backend name this session launches."""
        return self.config.browser

    @property
    def is_active(self) -> bool:
        """True while the underlying browser process is held."""
        return self._driver is not None

    @property
    def session_id(self) -> Optional[str]:
        """Webdriver session identifier, None when no browser is running."""
        if self._driver is None:
            return None
        return self._driver.session_id

    @property
    def driver(self) -> Any:
        """The underlying selenium webdriver."""
        if self._driver is None:
            raise SessionStartError(self.browser, "session is not running")
        return self._driver

    def start(self) -> None:
        """
        Launch the browser.

        Raises:
            SessionStartError: If the session was already started, or the
                browser or driver fails to launch
        """
        if self._started:
            raise SessionStartError(self.browser, "session was already started")

        build = BACKENDS.get(self.browser)
        if build is None:
            raise SessionStartError(self.browser, "no backend registered for this browser")

        self._started = True
        logger.info(f"Starting {self.browser} session (headless={self.config.headless})")

        try:
            driver = build(self.config, self.driver_path)
        except (WebDriverException, OSError) as e:
            logger.error(f"Failed to start {self.browser}: {e}")
            raise SessionStartError(self.browser, str(e)) from e

        self._driver = driver

        timeout = self.config.page_load_timeout_seconds
        if timeout is not None:
            try:
                driver.set_page_load_timeout(timeout)
            except Exception as e:
                logger.error(f"Failed to set page load timeout {timeout!r}: {e}")
                try:
                    self.quit()
                except BrowserSessionError as quit_error:
                    logger.warning(f"Quit after failed start also failed: {quit_error}")
                raise SessionStartError(
                    self.browser, f"could not set page load timeout {timeout!r}: {e}"
                ) from e
            logger.debug(f"Page load timeout set to {timeout}s")

        logger.info(f"Started {self.browser} session {driver.session_id}")

    def navigate(self, url: str) -> None:
        """
        Load a URL, blocking until the page loads or the driver times out.

        Args:
            url: The URL to navigate to

        Raises:
            NavigationError: If the page cannot be loaded
        """
        logger.info(f"Navigating to URL: {url}")
        try:
            self.driver.get(url)
        except TimeoutException as e:
            raise NavigationError(url, f"timed out: {e.msg or e}") from e
        except WebDriverException as e:
            raise NavigationError(url, e.msg or str(e)) from e
        logger.info(f"Successfully navigated to {url}")

    @property
    def title(self) -> str:
        """
        Title of the current page.

        Raises:
            BrowserSessionError: If the browser no longer responds
        """
        try:
            return self.driver.title or ""
        except WebDriverException as e:
            logger.error(f"Failed to read page title from {self.browser}: {e}")
            raise BrowserSessionError(self.browser, f"could not read page title: {e.msg or e}") from e

    def quit(self) -> None:
        """
        Terminate the browser and release its process.

        Safe to call on a session that never started or already quit. The
        driver handle is released even when the browser fails to quit.

        Raises:
            BrowserSessionError: If the driver reports an error while quitting
        """
        driver = self._driver
        if driver is None:
            logger.debug(f"No running {self.browser} session to quit")
            return

        session_id = driver.session_id
        try:
            driver.quit()
        except WebDriverException as e:
            logger.error(f"Failed to quit {self.browser} session {session_id}: {e}")
            raise BrowserSessionError(self.browser, f"could not quit session: {e.msg or e}") from e
        finally:
            self._driver = None
        logger.info(f"Quit {self.browser} session {session_id}")

    def __enter__(self) -> "BrowserSession":
        if not self._started:
            self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.quit()

    def __repr__(self) -> str:
        return f"BrowserSession(browser={self.browser!r}, session_id={self.session_id!r})"
