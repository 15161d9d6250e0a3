from __future__ import annotations

from enum import StrEnum


class CityRole(StrEnum):
    DEPARTURE = "departure"
    DESTINATION = "destination"


class CardType(StrEnum):
    VISA = "visa"


class ConfirmationField(StrEnum):
    STATUS = "status"
    PRICE = "price"
    CONFIRMATION_ID = "confirmation_id"
