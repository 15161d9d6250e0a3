from __future__ import annotations

import argparse
import random

from flight_booking_e2e.browser.session import BrowserSession
from flight_booking_e2e.config.log_setup import configure_logging
from flight_booking_e2e.config.settings import settings
from flight_booking_e2e.pages.flight_selection_page import FlightSelectionPage
from flight_booking_e2e.pages.home_page import HomePage
from flight_booking_e2e.services.booking_flow import purchase_end_to_end
from flight_booking_e2e.services.input_validation import sanitize_input, validate_inputs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flight-booking-e2e")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_book = sub.add_parser("book", help="Run one end-to-end booking and validate the confirmation.")
    p_book.add_argument("--from", dest="departure", default=None, help="Departure city (random if omitted).")
    p_book.add_argument("--to", dest="destination", default=None, help="Destination city (random if omitted).")
    p_book.add_argument("--flight", type=int, default=None, help="1-based flight row (random if omitted).")
    p_book.add_argument("--seed", type=int, default=None, help="Seed for reproducible random choices.")
    p_book.add_argument("--headful", action="store_true", help="Show the browser window for debugging.")

    p_list = sub.add_parser("list-flights", help="Print every flight listed for a route (no purchase).")
    p_list.add_argument("--from", dest="departure", required=True)
    p_list.add_argument("--to", dest="destination", required=True)
    p_list.add_argument("--headful", action="store_true", help="Show the browser window for debugging.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    What it does:
    - Provides two run modes against the live site:
        1) book: full purchase flow, exits non-zero on any failure
        2) list-flights: search a route and print the results table

    Behavior:
    - Inputs are validated before the browser starts.
    - The browser session is always closed.
    """
    args = _build_parser().parse_args(argv)
    configure_logging()

    departure = sanitize_input(args.departure)
    destination = sanitize_input(args.destination)
    validate_inputs(departure, destination, getattr(args, "flight", None))

    config = settings.booking_config(headless=settings.headless and not args.headful)
    session = BrowserSession(config)

    try:
        page = session.start()

        if args.cmd == "book":
            result = purchase_end_to_end(
                page,
                departure,
                destination,
                args.flight,
                config=config,
                rng=random.Random(args.seed),
            )
            print(
                f"OK: {result.departure_city} -> {result.destination_city} "
                f"status={result.status} price={result.price:.2f} "
                f"confirmation_id={result.confirmation_id}"
            )
            return

        if args.cmd == "list-flights":
            home = HomePage(page, config)
            home.navigate()
            home.select_cities(departure, destination)
            home.search_flights()

            flights_page = FlightSelectionPage(page, config)
            flights_page.wait_for_flights_to_load()
            for i, flight in enumerate(flights_page.get_all_flights(), start=1):
                print(
                    f"{i}. {flight.flight_number} {flight.airline} "
                    f"{flight.departs} -> {flight.arrives} {flight.price}"
                )
            return

    finally:
        session.close()


if __name__ == "__main__":
    main()
