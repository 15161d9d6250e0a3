from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flight_booking_e2e.domain.models import PurchaseValidation


class BookingFlowError(Exception):
    """Base class for every failure raised by the booking flow."""


class InvalidRouteError(BookingFlowError, ValueError):
    """Raised when departure and destination cities are the same."""


class InvalidSequenceError(BookingFlowError, ValueError):
    """Raised when a flight sequence is not a positive integer."""


class SequenceOutOfRangeError(BookingFlowError, IndexError):
    """Raised when a flight sequence exceeds the number of listed flights."""


class CityNotFoundError(BookingFlowError, LookupError):
    """Raised when a requested city is not one of the dropdown options."""


class NoCitiesAvailableError(BookingFlowError):
    """Raised when a city dropdown has no selectable options."""


class NoFlightsAvailableError(BookingFlowError):
    """Raised when the results table lists no flights for the route."""


class PageTimeoutError(BookingFlowError, TimeoutError):
    """Raised when a bounded wait on page state runs out."""


class ValidationFailedError(BookingFlowError, AssertionError):
    """Raised when the confirmation outcome violates a business rule."""

    def __init__(self, validation: PurchaseValidation) -> None:
        self.validation = validation
        super().__init__(f"Purchase validation failed: {', '.join(validation.errors)}")
