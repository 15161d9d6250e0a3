from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flight_booking_e2e.config.paths import default_artifacts_dir, env_file_path

DEFAULT_BASE_URL = "https://blazedemo.com/"
DEFAULT_EXPECTED_STATUS = "PendingCapture"
DEFAULT_MINIMUM_PRICE = 100.00


@dataclass(frozen=True)
class BookingConfig:
    """
    Runtime knobs handed to every page object at construction.

    What it does:
    - Holds the target address, the business-rule thresholds and the wait budgets.

    Behavior:
    - base_url: landing page of the booking site.
    - expected_status: the only confirmation status accepted as a success.
    - minimum_price: confirmed amount must be strictly greater than this.
    - element_timeout_ms: bound for dropdown/table readiness (10s).
    - confirmation_timeout_ms: bound for the confirmation heading (30s).
    - navigation_timeout_ms: bound for page loads and the post-search idle wait (30s).
    - artifacts_dir: where failure screenshots are written.
    """

    base_url: str = DEFAULT_BASE_URL
    expected_status: str = DEFAULT_EXPECTED_STATUS
    minimum_price: float = DEFAULT_MINIMUM_PRICE
    element_timeout_ms: int = 10_000
    confirmation_timeout_ms: int = 30_000
    navigation_timeout_ms: int = 30_000
    headless: bool = True
    artifacts_dir: Path = field(default_factory=default_artifacts_dir)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(env_file_path()),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = "INFO"

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="BLAZEDEMO_BASE_URL")
    headless: bool = Field(default=True, alias="BROWSER_HEADLESS")
    expected_status: str = Field(default=DEFAULT_EXPECTED_STATUS, alias="EXPECTED_STATUS")
    minimum_price: float = Field(default=DEFAULT_MINIMUM_PRICE, alias="MINIMUM_PRICE")
    element_timeout_ms: int = Field(default=10_000, alias="ELEMENT_TIMEOUT_MS")
    confirmation_timeout_ms: int = Field(default=30_000, alias="CONFIRMATION_TIMEOUT_MS")
    navigation_timeout_ms: int = Field(default=30_000, alias="NAVIGATION_TIMEOUT_MS")
    artifacts_dir: str | None = Field(default=None, alias="ARTIFACTS_DIR")

    e2e_enabled: bool = Field(default=False, alias="E2E_ENABLED")

    def booking_config(self, **overrides: object) -> BookingConfig:
        """
        Builds the BookingConfig the page objects consume.

        Keyword overrides win over environment values (the CLI uses this for --headful).
        """
        values: dict[str, object] = {
            "base_url": self.base_url,
            "expected_status": self.expected_status,
            "minimum_price": self.minimum_price,
            "element_timeout_ms": self.element_timeout_ms,
            "confirmation_timeout_ms": self.confirmation_timeout_ms,
            "navigation_timeout_ms": self.navigation_timeout_ms,
            "headless": self.headless,
        }
        if self.artifacts_dir:
            values["artifacts_dir"] = Path(self.artifacts_dir)
        values.update(overrides)
        return BookingConfig(**values)  # type: ignore[arg-type]


settings = Settings()
