"""
pytest configuration for sitecheck tests.

The ``driver_path`` fixture provisions the browser driver once per test
session; the ``browser`` fixture gives each test its own browser session and
quits it afterwards, whether the test passed or failed.
"""

import itertools

import pytest

from sitecheck.browser_automation.browser_session import BrowserSession
from sitecheck.browser_automation.lifecycle import open_browser_session
from sitecheck.config.check_config import get_check_settings
from sitecheck.driver_provisioning.driver_installer import DriverInstaller


@pytest.fixture(scope="session")
def check_settings():
    """Settings read from SITECHECK_* environment variables."""
    return get_check_settings()


@pytest.fixture(scope="session")
def driver_path(check_settings):
    """Install the browser driver once for the whole run."""
    return DriverInstaller.from_settings(check_settings).install()


@pytest.fixture
def browser(check_settings, driver_path):
    """A fresh browser session, quit when the test ends."""
    with open_browser_session(
        lambda: BrowserSession.launch(check_settings.browser_config, driver_path)
    ) as session:
        yield session


class FakeSession:
    """Stand-in for BrowserSession that records quit calls."""

    _ids = itertools.count(1)

    def __init__(self, title="", browser="chrome"):
        self.session_id = f"fake-{next(self._ids)}"
        self.browser = browser
        self.title = title
        self.visited = []
        self.quit_calls = 0

    def navigate(self, url):
        self.visited.append(url)

    def quit(self):
        self.quit_calls += 1


@pytest.fixture
def fake_session_factory():
    """Factory producing FakeSession objects; all created sessions are kept."""
    created = []

    def factory(title="", browser="chrome"):
        session = FakeSession(title=title, browser=browser)
        created.append(session)
        return session

    factory.created = created
    return factory


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SITECHECK_* variables so defaults apply."""
    for name in (
        "SITECHECK_BROWSER",
        "SITECHECK_HEADLESS",
        "SITECHECK_PAGE_LOAD_TIMEOUT",
        "SITECHECK_BROWSER_ARGS",
        "SITECHECK_DRIVER_PATH",
        "SITECHECK_USE_DRIVER_MANAGER",
        "SITECHECK_URL",
        "SITECHECK_EXPECTED_TITLE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
