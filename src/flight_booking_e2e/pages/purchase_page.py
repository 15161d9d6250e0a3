from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Page

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.domain.enums import CardType
from flight_booking_e2e.domain.models import PassengerRecord
from flight_booking_e2e.pages.base import BasePage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurchaseSelectors:
    name: str = "#inputName"
    address: str = "#address"
    city: str = "#city"
    state: str = "#state"
    zip_code: str = "#zipCode"
    card_type: str = "#cardType"
    credit_card_number: str = "#creditCardNumber"
    credit_card_month: str = "#creditCardMonth"
    credit_card_year: str = "#creditCardYear"
    name_on_card: str = "#nameOnCard"
    purchase_flight: str = "xpath=//input[@type='submit']"


class PurchasePage(BasePage):
    """
    Passenger/payment form (purchase.php).

    The card type is always "visa"; it is not driven by the passenger record.
    """

    def __init__(self, page: Page, config: BookingConfig | None = None) -> None:
        super().__init__(page, config)
        self.sel = PurchaseSelectors()

    def fill_passenger_details(self, record: PassengerRecord) -> None:
        page = self.page
        page.locator(self.sel.name).fill(record.name)
        page.locator(self.sel.address).fill(record.address)
        page.locator(self.sel.city).fill(record.city)
        page.locator(self.sel.state).fill(record.state)
        page.locator(self.sel.zip_code).fill(record.zip_code)
        page.locator(self.sel.card_type).select_option(CardType.VISA.value)
        page.locator(self.sel.credit_card_number).fill(record.credit_card_number)
        page.locator(self.sel.credit_card_month).fill(record.expiry_month)
        page.locator(self.sel.credit_card_year).fill(record.expiry_year)
        page.locator(self.sel.name_on_card).fill(record.name_on_card)
        logger.info("Filled passenger details for %s", record.name)

    def complete_purchase(self) -> None:
        # The confirmation page object waits for the next page to settle
        self.page.locator(self.sel.purchase_flight).click()
