from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

UNKNOWN = "Unknown"
NOT_SELECTED = "Not selected"


@dataclass(frozen=True)
class TripRequest:
    """
    What it does:
    - Carries the parameters of one booking scenario.

    Behavior:
    - Any field left as None is chosen at random by the page objects.
    """

    departure_city: str | None = None
    destination_city: str | None = None
    flight_sequence: int | None = None


@dataclass(frozen=True)
class FlightOption:
    airline: str
    price: str
    flight_number: str
    departs: str = UNKNOWN
    arrives: str = UNKNOWN


@dataclass(frozen=True)
class PassengerRecord:
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    credit_card_number: str
    expiry_month: str
    expiry_year: str
    name_on_card: str


@dataclass(frozen=True)
class PurchaseOutcome:
    status: str
    price: float
    confirmation_id: str


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """
    What it does:
    - Wraps one element read from the confirmation page.

    Why it matters:
    - A sentinel ("Unknown" / 0.0) looks like data; `ok` says whether it is.

    Behavior:
    - success(value): ok=True, error=None.
    - fallback(sentinel, error): ok=False, value is the sentinel, error describes the failure.
    """

    value: T
    ok: bool = True
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> ReadResult[T]:
        return cls(value=value, ok=True)

    @classmethod
    def fallback(cls, sentinel: T, error: str) -> ReadResult[T]:
        return cls(value=sentinel, ok=False, error=error)


@dataclass(frozen=True)
class PurchaseValidation:
    is_valid: bool
    errors: tuple[str, ...]
    actual_status: str
    actual_price: float
    confirmation_id: str = UNKNOWN
    failed_reads: tuple[str, ...] = ()


@dataclass(frozen=True)
class AvailableCities:
    departure_cities: list[str] = field(default_factory=list)
    destination_cities: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BookingResult:
    status: str
    price: float
    success: bool
    departure_city: str
    destination_city: str
    confirmation_id: str = UNKNOWN
    flight: FlightOption | None = None
