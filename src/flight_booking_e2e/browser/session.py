"""
session.py

What this module does
- Owns one Playwright browser session: Playwright driver, Chromium, one context, one page.

Why it matters
- Each scenario gets its own isolated context, and every run releases the browser
  whether it passed or failed.

Behavior summary
- `start()` is idempotent and returns the page.
- `close()` is safe to call multiple times.
- Usable as a context manager: `with BrowserSession(config) as page: ...`
"""

from __future__ import annotations

import logging

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from flight_booking_e2e.config.settings import BookingConfig

logger = logging.getLogger(__name__)


class BrowserSession:
    def __init__(self, config: BookingConfig | None = None) -> None:
        self.config = config or BookingConfig()

        self._pw: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    def __enter__(self) -> Page:
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def start(self) -> Page:
        """
        What it does:
        - Starts Playwright, launches Chromium and opens a fresh context and page.

        Behavior:
        - If Chromium isn't installed, Playwright raises; we re-raise with the install hint:
            playwright install chromium
        - A failure after launch (context or page creation) closes the browser and driver
          before the original error propagates.
        """
        if self._page is not None:
            return self._page

        self._pw = sync_playwright().start()
        try:
            self._browser = self._pw.chromium.launch(headless=self.config.headless)
        except Exception as e:
            self.close()
            raise RuntimeError(
                "Failed to launch Playwright Chromium.\n"
                "If this is the first time on this machine, run:\n\n"
                "  playwright install chromium\n"
            ) from e

        try:
            self._context = self._browser.new_context(locale="en-US")
            self._page = self._context.new_page()
            self._page.set_default_timeout(self.config.navigation_timeout_ms)
        except Exception:
            self.close()
            raise
        logger.debug("Browser session started (headless=%s)", self.config.headless)
        return self._page

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Playwright page not initialized. Did start() run?")
        return self._page

    def close(self) -> None:
        try:
            if self._context:
                self._context.close()
        finally:
            self._context = None

        try:
            if self._browser:
                self._browser.close()
        finally:
            self._browser = None

        try:
            if self._pw:
                self._pw.stop()
        finally:
            self._pw = None
            self._page = None
