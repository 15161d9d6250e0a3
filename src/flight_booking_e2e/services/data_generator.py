from __future__ import annotations

from datetime import date

from flight_booking_e2e.domain.models import PassengerRecord
from flight_booking_e2e.utils.randomness import RandomSource, default_random_source, pick_random

NAMES = ("John Doe", "Jane Smith", "Robert Johnson", "Maria Garcia", "David Brown")
CITIES = ("New York", "Los Angeles", "Chicago", "Houston", "Phoenix")
STATES = ("NY", "CA", "IL", "TX", "AZ")

EXPIRY_YEARS_AHEAD = 5


def generate_passenger_record(
    rng: RandomSource | None = None,
    *,
    today: date | None = None,
) -> PassengerRecord:
    """
    What it does:
    - Builds a synthetic passenger/payment record for one purchase attempt.

    Behavior:
    - Name, city and state come from small fixed pools; name_on_card repeats the name.
    - zip_code is 5 digits, credit_card_number 16 digits (no leading zero).
    - expiry_month is zero-padded "01".."12"; expiry_year is this year up to +4.
    """
    rng = rng or default_random_source()
    today = today or date.today()

    name = pick_random(NAMES, rng)

    return PassengerRecord(
        name=name,
        address=f"{rng.randrange(1000)} Main St",
        city=pick_random(CITIES, rng),
        state=pick_random(STATES, rng),
        zip_code=str(rng.randint(10_000, 99_999)),
        credit_card_number=str(rng.randint(10**15, 10**16 - 1)),
        expiry_month=f"{rng.randint(1, 12):02d}",
        expiry_year=f"{today.year + rng.randrange(EXPIRY_YEARS_AHEAD):04d}",
        name_on_card=name,
    )
