from __future__ import annotations

import logging
from collections.abc import Callable

from playwright.sync_api import Page

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.domain.models import BookingResult, PassengerRecord, TripRequest
from flight_booking_e2e.pages.confirmation_page import ConfirmationPage
from flight_booking_e2e.pages.flight_selection_page import FlightSelectionPage
from flight_booking_e2e.pages.home_page import HomePage
from flight_booking_e2e.pages.purchase_page import PurchasePage
from flight_booking_e2e.services.data_generator import generate_passenger_record
from flight_booking_e2e.services.input_validation import sanitize_request, validate_inputs
from flight_booking_e2e.utils.errors import ValidationFailedError
from flight_booking_e2e.utils.randomness import RandomSource, default_random_source

logger = logging.getLogger(__name__)

PassengerFactory = Callable[[RandomSource], PassengerRecord]


class BookingWorkflow:
    """
    What it does:
    - Runs one end-to-end booking on a single page: home -> results -> purchase -> confirmation.

    Why it matters:
    - Scenario declarations and the CLI share one entry point; page objects stay
      free of sequencing logic.

    Behavior:
    - Input problems raise before the browser is touched.
    - Page-object errors propagate unchanged; a screenshot is saved first.
    - A failed business-rule check raises ValidationFailedError.
    """

    def __init__(
        self,
        page: Page,
        *,
        config: BookingConfig | None = None,
        rng: RandomSource | None = None,
        passenger_factory: PassengerFactory = generate_passenger_record,
    ) -> None:
        self.config = config or BookingConfig()
        self.rng = rng or default_random_source()
        self.passenger_factory = passenger_factory

        self.home_page = HomePage(page, self.config, self.rng)
        self.flight_selection_page = FlightSelectionPage(page, self.config, self.rng)
        self.purchase_page = PurchasePage(page, self.config)
        self.confirmation_page = ConfirmationPage(page, self.config)

    def run(self, request: TripRequest) -> BookingResult:
        request = sanitize_request(request)
        validate_inputs(request.departure_city, request.destination_city, request.flight_sequence)

        try:
            return self._book(request)
        except Exception:
            self.home_page.debug_dump("booking_failed")
            raise

    def _book(self, request: TripRequest) -> BookingResult:
        self.home_page.navigate()
        if not request.departure_city or not request.destination_city:
            self.home_page.get_all_available_cities()

        self.home_page.select_cities(request.departure_city, request.destination_city)
        departure_city = self.home_page.get_selected_departure_city()
        destination_city = self.home_page.get_selected_destination_city()

        self.home_page.search_flights()
        self.flight_selection_page.wait_for_flights_to_load()
        flight = self.flight_selection_page.select_flight(request.flight_sequence)

        passenger = self.passenger_factory(self.rng)
        self.purchase_page.fill_passenger_details(passenger)
        self.purchase_page.complete_purchase()

        validation = self.confirmation_page.validate_purchase()
        if not validation.is_valid:
            raise ValidationFailedError(validation)

        logger.info(
            "Booked %s -> %s on %s: %s $%.2f (id %s)",
            departure_city,
            destination_city,
            flight.flight_number,
            validation.actual_status,
            validation.actual_price,
            validation.confirmation_id,
        )
        return BookingResult(
            status=validation.actual_status,
            price=validation.actual_price,
            success=True,
            departure_city=departure_city,
            destination_city=destination_city,
            confirmation_id=validation.confirmation_id,
            flight=flight,
        )


def purchase_end_to_end(
    page: Page,
    departure_city: str | None = None,
    destination_city: str | None = None,
    flight_sequence: int | None = None,
    *,
    config: BookingConfig | None = None,
    rng: RandomSource | None = None,
) -> BookingResult:
    workflow = BookingWorkflow(page, config=config, rng=rng)
    return workflow.run(
        TripRequest(
            departure_city=departure_city,
            destination_city=destination_city,
            flight_sequence=flight_sequence,
        )
    )
