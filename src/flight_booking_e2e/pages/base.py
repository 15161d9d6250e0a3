"""
base.py

What this module does
- Shared plumbing for the BlazeDemo page objects: config, bounded waits and failure screenshots.

Why it matters
- Every page waits on external page state; all of those waits must be bounded and
  must fail the same way (PageTimeoutError + a screenshot in the artifacts dir).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from playwright.sync_api import Error as PWError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PWTimeoutError

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.utils.errors import PageTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BasePage:
    def __init__(self, page: Page, config: BookingConfig | None = None) -> None:
        self.page = page
        self.config = config or BookingConfig()

    def _bounded(self, action: Callable[[], T], *, timeout_ms: int, tag: str, what: str) -> T:
        """
        What it does:
        - Runs one bounded Playwright call (navigation, load-state or selector wait).

        Behavior:
        - On Playwright timeout: saves `<tag>_<timestamp>.png` and raises PageTimeoutError
          from the original error.
        """
        try:
            return action()
        except PWTimeoutError as e:
            self.debug_dump(tag)
            raise PageTimeoutError(f"Timed out after {timeout_ms}ms waiting for {what}") from e

    def _wait_for_selector(self, selector: str, *, timeout_ms: int, tag: str) -> None:
        """Waits until `selector` is attached to the DOM."""
        self._bounded(
            lambda: self.page.wait_for_selector(selector, timeout=timeout_ms),
            timeout_ms=timeout_ms,
            tag=tag,
            what=f"{tag.replace('_', ' ')}: {selector}",
        )

    def debug_dump(self, tag: str) -> str | None:
        """
        What it does:
        - Captures a full-page screenshot for debugging.

        Behavior:
        - Writes <artifacts_dir>/<tag>_<timestamp>.png and returns the path.
        - Best effort: returns None if the screenshot cannot be taken.
        """
        out_dir = self.config.artifacts_dir
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        out = out_dir / f"{tag}_{stamp}.png"
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            self.page.screenshot(path=str(out), full_page=True)
        except (PWError, OSError) as e:
            logger.warning("Could not save screenshot %s: %s", out, e)
            return None
        logger.info("Saved screenshot %s", out)
        return str(out)
