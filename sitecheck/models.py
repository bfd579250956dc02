"""
Data models for sitecheck.

This module defines the record produced by a page title check.
"""

from dataclasses import dataclass, asdict
from datetime import datetime


@dataclass
class TitleCheckResult:
    """Outcome of one page title check.

    Attributes:
        url: Page that was loaded
        expected_substring: Text the title was expected to contain
        actual_title: Title reported by the browser
        passed: Whether the title contained the expected text
        browser: Browser backend that ran the check
        checked_at: Timestamp when the title was read
    """
    url: str
    expected_substring: str
    actual_title: str
    passed: bool
    browser: str
    checked_at: datetime

    def to_dict(self) -> dict:
        """Convert result to dictionary for JSON serialization.

        Returns:
            Dictionary representation with datetime converted to ISO format
        """
        data = asdict(self)
        data['checked_at'] = self.checked_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'TitleCheckResult':
        """Create TitleCheckResult instance from dictionary.

        Args:
            data: Dictionary containing result data

        Returns:
            TitleCheckResult instance
        """
        if isinstance(data.get('checked_at'), str):
            data = data.copy()
            data['checked_at'] = datetime.fromisoformat(data['checked_at'])
        return cls(**data)

    def summary(self) -> str:
        """One-line human readable description of the result."""
        status = "PASS" if self.passed else "FAIL"
        return (
            f"[{status}] {self.url} ({self.browser}): "
            f"title {self.actual_title!r} "
            f"{'contains' if self.passed else 'does not contain'} {self.expected_substring!r}"
        )
