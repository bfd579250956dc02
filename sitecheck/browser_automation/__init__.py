"""Browser automation module for selenium-driven sessions."""

from sitecheck.browser_automation.browser_session import BrowserSession
from sitecheck.browser_automation.lifecycle import close_session, open_browser_session

__all__ = ["BrowserSession", "close_session", "open_browser_session"]
