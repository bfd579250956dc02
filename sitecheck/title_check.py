"""
Page title verification.

Navigates a browser session to a URL, reads the resulting title and checks
that it contains an expected substring. Each check is tried exactly once.
"""

import logging
from datetime import datetime
from typing import Optional

from sitecheck.browser_automation.browser_session import BrowserSession
from sitecheck.error_handling.error_handler import ErrorHandler
from sitecheck.error_handling.errors import NavigationError, TitleMismatchError
from sitecheck.models import TitleCheckResult


# Configure logging
logger = logging.getLogger(__name__)


def title_contains(title: Optional[str], expected: str) -> bool:
    """Case-sensitive substring match; a missing title never matches."""
    return expected in (title or "")


class TitleVerifier:
    """
    Checks page titles through a browser session.

    Attributes:
        error_handler: ErrorHandler used to log failures with context
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        self.error_handler = error_handler or ErrorHandler()

    def check(self, session: BrowserSession, url: str, expected: str) -> TitleCheckResult:
        """
        Load a page and compare its title with the expected text.

        Args:
            session: Started browser session
            url: Page to load
            expected: Substring the title should contain

        Returns:
            TitleCheckResult describing the comparison

        Raises:
            ValueError: If expected is empty
            NavigationError: If the page cannot be loaded
        """
        if not expected:
            raise ValueError("Expected title text must not be empty")

        try:
            session.navigate(url)
        except NavigationError as e:
            self.error_handler.log_failure("navigate", e, url=url, browser=session.browser)
            raise

        title = session.title
        passed = title_contains(title, expected)

        logger.info(f"Page title for {url}: {title!r}")
        if passed:
            logger.info(f"Title contains {expected!r}")
        else:
            logger.warning(f"Title does not contain {expected!r}")

        return TitleCheckResult(
            url=url,
            expected_substring=expected,
            actual_title=title,
            passed=passed,
            browser=session.browser,
            checked_at=datetime.now(),
        )

    def verify(self, session: BrowserSession, url: str, expected: str) -> TitleCheckResult:
        """
        Like check(), but fail loudly when the title does not match.

        Raises:
            TitleMismatchError: If the title does not contain expected
        """
        result = self.check(session, url, expected)
        if not result.passed:
            error = TitleMismatchError(expected, result.actual_title, url)
            self.error_handler.log_failure("verify_title", error, url=url, browser=result.browser)
            raise error
        return result
