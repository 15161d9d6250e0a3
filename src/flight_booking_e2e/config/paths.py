from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    """
    Returns the directory holding `.env` and the default `artifacts/` folder.

    Running from source: .../src/flight_booking_e2e/config/paths.py -> repo root is 3 parents up.
    """
    return Path(__file__).resolve().parents[3]


def env_file_path() -> Path:
    return project_root() / ".env"


def default_artifacts_dir() -> Path:
    return project_root() / "artifacts"
