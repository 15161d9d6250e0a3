from __future__ import annotations

from dataclasses import replace

from flight_booking_e2e.domain.models import TripRequest
from flight_booking_e2e.utils.errors import InvalidRouteError, InvalidSequenceError


def sanitize_input(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip()


def sanitize_request(request: TripRequest) -> TripRequest:
    """Trims both city names; a blank city becomes None so it is picked at random."""
    return replace(
        request,
        departure_city=sanitize_input(request.departure_city) or None,
        destination_city=sanitize_input(request.destination_city) or None,
    )


def validate_flight_sequence(sequence: object) -> int:
    """
    What it does:
    - The one rule for flight sequences, shared by input validation and flight selection.

    Behavior:
    - Accepts integers >= 1 and returns them unchanged.
    - Rejects 0, negatives, bools and non-integers with InvalidSequenceError.
    """
    if isinstance(sequence, bool) or not isinstance(sequence, int) or sequence <= 0:
        raise InvalidSequenceError(
            f"Flight sequence must be greater than 0 (a positive integer), got {sequence!r}"
        )
    return sequence


def validate_inputs(
    departure: str | None,
    destination: str | None,
    flight_sequence: int | None = None,
) -> None:
    """
    What it does:
    - Checks trip parameters before any browser interaction.

    Behavior:
    - Same non-empty departure and destination -> InvalidRouteError.
    - A flight_sequence that is given but not >= 1 -> InvalidSequenceError.
    - Rules run in that order; the first violation is raised.
    """
    departure = sanitize_input(departure)
    destination = sanitize_input(destination)

    if departure and destination and departure == destination:
        raise InvalidRouteError("Departure and destination cities cannot be the same")

    if flight_sequence is not None:
        validate_flight_sequence(flight_sequence)
