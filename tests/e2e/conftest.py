from __future__ import annotations

import pytest

from flight_booking_e2e.browser.session import BrowserSession
from flight_booking_e2e.config.log_setup import configure_logging
from flight_booking_e2e.config.settings import settings


@pytest.fixture(scope="session")
def booking_config():
    configure_logging()
    return settings.booking_config()


@pytest.fixture()
def browser_page(booking_config):
    """
    One isolated browser context per scenario, closed whether the scenario passes or fails.
    """
    with BrowserSession(booking_config) as page:
        yield page
