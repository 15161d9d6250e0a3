"""
home_page.py

What this module does
- Page object for the BlazeDemo landing page: city dropdowns and the "Find Flights" button.

Behavior summary
- `select_cities(departure, destination)`: validates requested cities against the live
  dropdown options, or picks random ones when omitted.
- `search_flights()`: submits the search and waits for the results page to go idle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Locator, Page

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.domain.enums import CityRole
from flight_booking_e2e.domain.models import NOT_SELECTED, AvailableCities
from flight_booking_e2e.pages.base import BasePage
from flight_booking_e2e.utils.errors import CityNotFoundError, NoCitiesAvailableError
from flight_booking_e2e.utils.randomness import RandomSource, default_random_source, pick_random

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HomeSelectors:
    departure_dropdown: str = "xpath=//select[@name='fromPort']"
    destination_dropdown: str = "xpath=//select[@name='toPort']"
    find_flights: str = "xpath=//input[@type='submit']"

    # Relative to a dropdown; skips the blank placeholder option
    dropdown_options: str = "xpath=./option[@value!='']"


class HomePage(BasePage):
    def __init__(
        self,
        page: Page,
        config: BookingConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(page, config)
        self.sel = HomeSelectors()
        self.rng = rng or default_random_source()

        self.departure_dropdown = page.locator(self.sel.departure_dropdown)
        self.destination_dropdown = page.locator(self.sel.destination_dropdown)
        self.find_flights_button = page.locator(self.sel.find_flights)

    def navigate(self) -> None:
        logger.info("Opening %s", self.config.base_url)
        timeout_ms = self.config.navigation_timeout_ms
        self._bounded(
            lambda: self.page.goto(self.config.base_url, timeout=timeout_ms),
            timeout_ms=timeout_ms,
            tag="home_navigation",
            what=f"home page {self.config.base_url}",
        )
        self._wait_for_selector(
            self.sel.departure_dropdown,
            timeout_ms=self.config.element_timeout_ms,
            tag="home_dropdowns",
        )

    def select_cities(
        self,
        departure_city: str | None = None,
        destination_city: str | None = None,
    ) -> None:
        self._select_city(self.departure_dropdown, departure_city, CityRole.DEPARTURE)
        self._select_city(self.destination_dropdown, destination_city, CityRole.DESTINATION)

    def _select_city(self, dropdown: Locator, city: str | None, role: CityRole) -> None:
        if city:
            self._validate_and_select_city(dropdown, city, role)
        else:
            self._select_random_city(dropdown, role)

    def _validate_and_select_city(self, dropdown: Locator, city: str, role: CityRole) -> None:
        available = self._dropdown_options(dropdown)
        if city not in available:
            raise CityNotFoundError(
                f'{role.capitalize()} city "{city}" not found. '
                f"Available cities: {', '.join(available)}"
            )
        dropdown.select_option(city)
        logger.info("Selected %s city: %s", role, city)

    def _select_random_city(self, dropdown: Locator, role: CityRole) -> None:
        available = self._dropdown_options(dropdown)
        if not available:
            raise NoCitiesAvailableError(f"No {role} cities available in dropdown")

        city = pick_random(available, self.rng)
        dropdown.select_option(city)
        logger.info("Selected random %s city: %s", role, city)

    def _dropdown_options(self, dropdown: Locator) -> list[str]:
        return dropdown.locator(self.sel.dropdown_options).evaluate_all(
            "options => options.map(option => option.value)"
        )

    def get_departure_cities(self) -> list[str]:
        return self._dropdown_options(self.departure_dropdown)

    def get_destination_cities(self) -> list[str]:
        return self._dropdown_options(self.destination_dropdown)

    def get_selected_departure_city(self) -> str:
        return self.departure_dropdown.input_value() or NOT_SELECTED

    def get_selected_destination_city(self) -> str:
        return self.destination_dropdown.input_value() or NOT_SELECTED

    def search_flights(self) -> None:
        """
        Clicks "Find Flights" and returns once the results page has no network activity,
        so the flight table is present when control comes back.
        """
        self.find_flights_button.click()
        timeout_ms = self.config.navigation_timeout_ms
        self._bounded(
            lambda: self.page.wait_for_load_state("networkidle", timeout=timeout_ms),
            timeout_ms=timeout_ms,
            tag="search_results",
            what="search results to go idle",
        )

    def get_all_available_cities(self) -> AvailableCities:
        cities = AvailableCities(
            departure_cities=self.get_departure_cities(),
            destination_cities=self.get_destination_cities(),
        )
        logger.info("Available departure cities: %s", ", ".join(cities.departure_cities))
        logger.info("Available destination cities: %s", ", ".join(cities.destination_cities))
        return cities

    def validate_city_pair(self, departure_city: str, destination_city: str) -> bool:
        return (
            departure_city in self.get_departure_cities()
            and destination_city in self.get_destination_cities()
            and departure_city != destination_city
        )
