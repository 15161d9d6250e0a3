import logging
import random

import pytest

from flight_booking_e2e.browser import session as session_module
from flight_booking_e2e.browser.session import BrowserSession
from flight_booking_e2e.config.log_setup import configure_logging
from flight_booking_e2e.utils.randomness import pick_random


def test_pick_random_rejects_empty():
    with pytest.raises(ValueError):
        pick_random([], random.Random(0))


def test_pick_random_returns_member():
    items = ["Paris", "Boston", "Rome"]
    assert pick_random(items, random.Random(1)) in items


def test_configure_logging_does_not_stack_handlers():
    configure_logging("DEBUG")
    configure_logging("WARNING")

    logger = logging.getLogger("flight_booking_e2e")
    ours = [h for h in logger.handlers if getattr(h, "_flight_booking_e2e", False)]
    assert len(ours) == 1
    assert logger.level == logging.WARNING


def test_browser_session_close_is_safe_before_start():
    session = BrowserSession()
    session.close()
    session.close()

    with pytest.raises(RuntimeError, match="not initialized"):
        session.page


class _FakeBrowser:
    def __init__(self, events):
        self.events = events

    def new_context(self, **kwargs):
        self.events.append("new_context")
        raise RuntimeError("context refused")

    def close(self):
        self.events.append("browser.close")


class _FakeChromium:
    def __init__(self, events):
        self.events = events

    def launch(self, **kwargs):
        self.events.append("launch")
        return _FakeBrowser(self.events)


class _FakeDriver:
    def __init__(self, events):
        self.events = events
        self.chromium = _FakeChromium(events)

    def stop(self):
        self.events.append("driver.stop")


class _FakeSyncPlaywright:
    def __init__(self, events):
        self.events = events

    def start(self):
        return _FakeDriver(self.events)


def test_browser_session_releases_browser_when_context_fails(monkeypatch):
    events = []
    monkeypatch.setattr(session_module, "sync_playwright", lambda: _FakeSyncPlaywright(events))
    session = BrowserSession()

    with pytest.raises(RuntimeError, match="context refused"):
        session.start()

    assert events == ["launch", "new_context", "browser.close", "driver.stop"]
    assert session._pw is None
    assert session._browser is None
    with pytest.raises(RuntimeError, match="not initialized"):
        session.page
