"""
flight_selection_page.py

What this module does
- Page object for the BlazeDemo results page (reserve.php): lists flights and picks one.

Behavior summary
- Rows are addressed 0-based internally, 1-based ("flight sequence") publicly.
- Reading a row never fails on a missing cell; the field becomes "Unknown".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Page

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.domain.models import UNKNOWN, FlightOption
from flight_booking_e2e.pages.base import BasePage
from flight_booking_e2e.services.input_validation import validate_flight_sequence
from flight_booking_e2e.utils.errors import NoFlightsAvailableError, SequenceOutOfRangeError
from flight_booking_e2e.utils.randomness import RandomSource, default_random_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlightSelectors:
    flight_rows: str = "xpath=//table[contains(@class, 'table')]//tbody/tr"

    # Relative to a row
    row_cells: str = "td"
    choose_button: str = "xpath=.//input[@type='submit']"


# Row layout: [Choose, Flight #, Airline, Departs, Arrives, Price]
FLIGHT_NUMBER_CELL = 1
AIRLINE_CELL = 2
DEPARTS_CELL = 3
ARRIVES_CELL = 4
PRICE_CELL = 5


class FlightSelectionPage(BasePage):
    def __init__(
        self,
        page: Page,
        config: BookingConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(page, config)
        self.sel = FlightSelectors()
        self.rng = rng or default_random_source()

        self.flight_rows = page.locator(self.sel.flight_rows)

    def select_flight(self, flight_sequence: int | None = None) -> FlightOption:
        """
        What it does:
        - Picks one flight row and clicks its "Choose This Flight" button.

        Behavior:
        - flight_sequence <= 0 -> InvalidSequenceError, whatever the table holds.
        - Empty table -> NoFlightsAvailableError.
        - flight_sequence above the row count -> SequenceOutOfRangeError.
        - flight_sequence None -> a uniformly random row.
        - Returns the row details read before the click navigates away.
        """
        if flight_sequence is not None:
            validate_flight_sequence(flight_sequence)

        flight_count = self.get_available_flights_count()
        if flight_count == 0:
            raise NoFlightsAvailableError("No flights available for the selected route")

        index = self._flight_index(flight_sequence, flight_count)
        flight = self.get_flight_details(index)

        logger.info(
            "Selecting flight %d of %d: %s %s for %s",
            index + 1,
            flight_count,
            flight.airline,
            flight.flight_number,
            flight.price,
        )
        self.flight_rows.nth(index).locator(self.sel.choose_button).click()
        return flight

    def _flight_index(self, flight_sequence: int | None, flight_count: int) -> int:
        if flight_sequence is None:
            return self.rng.randrange(flight_count)

        if flight_sequence > flight_count:
            raise SequenceOutOfRangeError(
                f"Flight sequence {flight_sequence} exceeds available flights ({flight_count})"
            )
        return flight_sequence - 1

    def get_flight_details(self, index: int) -> FlightOption:
        cells = self.flight_rows.nth(index).locator(self.sel.row_cells).all_text_contents()
        return FlightOption(
            airline=_cell_text(cells, AIRLINE_CELL, "airline"),
            price=_cell_text(cells, PRICE_CELL, "price"),
            flight_number=_cell_text(cells, FLIGHT_NUMBER_CELL, "flight number"),
            departs=_cell_text(cells, DEPARTS_CELL, "departure"),
            arrives=_cell_text(cells, ARRIVES_CELL, "arrival"),
        )

    def get_all_flights(self) -> list[FlightOption]:
        flight_count = self.get_available_flights_count()
        logger.info("Found %d available flights", flight_count)

        flights = []
        for i in range(flight_count):
            flight = self.get_flight_details(i)
            logger.info("  %d. %s - %s (%s)", i + 1, flight.airline, flight.price, flight.flight_number)
            flights.append(flight)
        return flights

    def get_available_flights_count(self) -> int:
        return self.flight_rows.count()

    def wait_for_flights_to_load(self) -> None:
        self._wait_for_selector(
            self.sel.flight_rows,
            timeout_ms=self.config.element_timeout_ms,
            tag="flight_rows",
        )


def _cell_text(cells: list[str], index: int, field_name: str) -> str:
    if index < len(cells) and cells[index].strip():
        return cells[index].strip()
    logger.warning("Missing %s data in flight row", field_name)
    return UNKNOWN
