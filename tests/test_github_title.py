"""
End-to-end title checks against a live site.

Needs a real browser and network access; run with ``pytest -m e2e``.
The target page and expected text come from SITECHECK_URL and
SITECHECK_EXPECTED_TITLE (default: https://www.github.com, "GitHub").
"""

import pytest

from sitecheck.error_handling.errors import TitleMismatchError
from sitecheck.title_check import TitleVerifier


pytestmark = pytest.mark.e2e


def test_verify_page_title(browser, check_settings):
    target = check_settings.target_config

    result = TitleVerifier().verify(browser, target.url, target.expected_title_substring)

    assert result.passed


def test_absent_title_text_is_reported(browser, check_settings):
    with pytest.raises(TitleMismatchError) as exc_info:
        TitleVerifier().verify(browser, check_settings.target_config.url, "NotGitHubAtAll")

    assert exc_info.value.actual == browser.title
