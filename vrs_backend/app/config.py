"""Environment-driven settings for the Flask app."""

from __future__ import annotations

import os
from datetime import date
from typing import List, Optional


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    CORS_ORIGINS: List[str] = _split_origins(
        os.environ.get(
            "VRS_CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173",
        )
    )
    LOG_LEVEL: str = os.environ.get("VRS_LOG_LEVEL", "INFO")
    # ISO date the calculations are pinned to; unset means "today".
    REFERENCE_DATE: Optional[str] = os.environ.get("VRS_REFERENCE_DATE") or None


def parse_reference_date(value: object) -> Optional[date]:
    """Accept a date, an ISO string, or nothing."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError(f"REFERENCE_DATE must be an ISO date, got {value!r}")
