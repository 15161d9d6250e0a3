"""
confirmation_page.py

What this module does
- Page object for the BlazeDemo confirmation page (confirmation.php).
- Reads the purchase outcome and checks it against the configured business rules.

Why it matters
- A single flaky cell read must not abort the validation, but it must not pass
  silently as real data either. Reads return ReadResult; the get_* helpers unwrap
  to the sentinel values ("Unknown" / 0.0).

Behavior summary
- `wait_for_page_load()` is fatal on timeout.
- `validate_purchase()` evaluates every rule and reports all violations together.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from playwright.sync_api import Error as PWError
from playwright.sync_api import Locator, Page

from flight_booking_e2e.config.settings import BookingConfig
from flight_booking_e2e.domain.enums import ConfirmationField
from flight_booking_e2e.domain.models import (
    UNKNOWN,
    PurchaseOutcome,
    PurchaseValidation,
    ReadResult,
)
from flight_booking_e2e.pages.base import BasePage

logger = logging.getLogger(__name__)

PRICE_PATTERN = re.compile(r"(\d+\.?\d*)")


@dataclass(frozen=True)
class ConfirmationSelectors:
    heading: str = "xpath=//h1[contains(text(), 'Thank you for your purchase today!')]"

    # Value cell next to its label cell in the receipt table
    status_cell: str = "xpath=//td[contains(text(), 'Status')]/following-sibling::td"
    amount_cell: str = "xpath=//td[contains(text(), 'Amount')]/following-sibling::td"
    confirmation_id_cell: str = "xpath=//td[contains(text(), 'Id')]/following-sibling::td"


class ConfirmationPage(BasePage):
    def __init__(self, page: Page, config: BookingConfig | None = None) -> None:
        super().__init__(page, config)
        self.sel = ConfirmationSelectors()

        self.status_element = page.locator(self.sel.status_cell).first
        self.price_element = page.locator(self.sel.amount_cell).first
        self.confirmation_id_element = page.locator(self.sel.confirmation_id_cell).first

    def wait_for_page_load(self) -> None:
        self._wait_for_selector(
            self.sel.heading,
            timeout_ms=self.config.confirmation_timeout_ms,
            tag="confirmation_heading",
        )

    # -------------------- Reads --------------------

    def _read_text(self, element: Locator, field: ConfirmationField) -> ReadResult[str]:
        try:
            text = element.text_content(timeout=self.config.element_timeout_ms)
        except PWError as e:
            logger.warning("Failed to read %s: %s", field, e)
            return ReadResult.fallback(UNKNOWN, f"{field} read failed: {e}")

        text = (text or "").strip()
        if not text:
            return ReadResult.fallback(UNKNOWN, f"{field} cell is empty")
        return ReadResult.success(text)

    def read_status(self) -> ReadResult[str]:
        return self._read_text(self.status_element, ConfirmationField.STATUS)

    def read_confirmation_id(self) -> ReadResult[str]:
        return self._read_text(self.confirmation_id_element, ConfirmationField.CONFIRMATION_ID)

    def read_price(self) -> ReadResult[float]:
        try:
            price_text = self.price_element.text_content(timeout=self.config.element_timeout_ms)
        except PWError as e:
            logger.warning("Error getting price: %s", e)
            return ReadResult.fallback(0.0, f"price read failed: {e}")

        if not price_text or not price_text.strip():
            logger.warning("No price text found")
            return ReadResult.fallback(0.0, "price cell is empty")

        match = PRICE_PATTERN.search(price_text)
        if match is None:
            logger.warning('Could not parse price from: "%s"', price_text)
            return ReadResult.fallback(0.0, f"unparsable price {price_text!r}")

        return ReadResult.success(float(match.group(1)))

    def get_status(self) -> str:
        return self.read_status().value

    def get_price(self) -> float:
        return self.read_price().value

    def get_confirmation_id(self) -> str:
        return self.read_confirmation_id().value

    def get_outcome(self) -> PurchaseOutcome:
        return PurchaseOutcome(
            status=self.get_status(),
            price=self.get_price(),
            confirmation_id=self.get_confirmation_id(),
        )

    # -------------------- Validation --------------------

    def validate_purchase(self) -> PurchaseValidation:
        """
        What it does:
        - Waits for the confirmation page, reads status/price/id and applies the rules.

        Behavior:
        - status must equal config.expected_status.
        - price must be strictly greater than config.minimum_price.
        - Both rules are always evaluated; errors keep that order.
        - is_valid is True only when no rule was violated.
        """
        self.wait_for_page_load()

        status = self.read_status()
        price = self.read_price()
        confirmation_id = self.read_confirmation_id()

        logger.info(
            "Purchase validation - ID: %s, Status: %s, Price: $%s",
            confirmation_id.value,
            status.value,
            price.value,
        )

        expected_status = self.config.expected_status
        minimum_price = self.config.minimum_price

        errors: list[str] = []
        if status.value != expected_status:
            errors.append(f'Expected status "{expected_status}" but got "{status.value}"')
        if price.value <= minimum_price:
            errors.append(f"Price ${price.value:.2f} is not greater than ${minimum_price:.2f}")

        failed_reads = tuple(
            str(name)
            for name, result in (
                (ConfirmationField.STATUS, status),
                (ConfirmationField.PRICE, price),
                (ConfirmationField.CONFIRMATION_ID, confirmation_id),
            )
            if not result.ok
        )

        return PurchaseValidation(
            is_valid=not errors,
            errors=tuple(errors),
            actual_status=status.value,
            actual_price=price.value,
            confirmation_id=confirmation_id.value,
            failed_reads=failed_reads,
        )

    def debug_confirmation_page(self) -> None:
        """
        Logs URL, title, element visibility and raw cell texts. Never raises.
        """
        logger.info("=== Confirmation Page Debug ===")
        try:
            logger.info("Current URL: %s", self.page.url)
            logger.info("Page title: %s", self.page.title())
            logger.info(
                "Element visibility - Status: %s Price: %s ID: %s",
                self.status_element.is_visible(),
                self.price_element.is_visible(),
                self.confirmation_id_element.is_visible(),
            )
            logger.info(
                "Actual text - Status: %r Price: %r ID: %r",
                self.status_element.text_content(timeout=self.config.element_timeout_ms),
                self.price_element.text_content(timeout=self.config.element_timeout_ms),
                self.confirmation_id_element.text_content(timeout=self.config.element_timeout_ms),
            )
        except PWError as e:
            logger.warning("Debug failed: %s", e)
        logger.info("=== End Debug ===")
