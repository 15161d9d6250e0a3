from __future__ import annotations

import pytest

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.testing.fakes import FakeBlazeDemoPage


@pytest.fixture()
def config(tmp_path):
    return BookingConfig(artifacts_dir=tmp_path / "artifacts")


@pytest.fixture()
def fake_page():
    page = FakeBlazeDemoPage()
    page.goto("https://blazedemo.com/")
    return page
