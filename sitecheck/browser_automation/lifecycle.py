"""
Scoped browser session lifecycle.

Sessions are acquired and released inside one scope so a failing check still
terminates the browser it started.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sitecheck.browser_automation.browser_session import BrowserSession


logger = logging.getLogger(__name__)


def close_session(session: Optional[BrowserSession]) -> None:
    """Quit a session; does nothing when no session was created."""
    if session is None:
        logger.debug("Teardown skipped: no session was created")
        return
    session.quit()


@contextmanager
def open_browser_session(factory: Callable[[], BrowserSession]) -> Iterator[BrowserSession]:
    """
    Acquire a browser session for the duration of a block.

    The session is quit when the block exits, whether it finished normally
    or raised. If ``factory`` raises, the error propagates and there is
    nothing to tear down.

    Args:
        factory: Callable returning a started session

    Yields:
        The started session
    """
    session = None
    try:
        session = factory()
        yield session
    finally:
        close_session(session)
