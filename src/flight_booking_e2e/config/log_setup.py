from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int | None = None) -> None:
    """
    What it does:
    - Installs a single timestamped stream handler on the package logger.

    Behavior:
    - `level` defaults to settings.log_level.
    - Calling it again only updates the level (no duplicate handlers).
    """
    if level is None:
        from flight_booking_e2e.config.settings import settings

        level = settings.log_level

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("flight_booking_e2e")
    logger.setLevel(level)

    if not any(getattr(h, "_flight_booking_e2e", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._flight_booking_e2e = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
