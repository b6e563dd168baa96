"""Service period (tenure) calculation."""

from __future__ import annotations

import math
from datetime import date

from vrs_backend.schemas.vrs import ServicePeriodInfo

# Fixed year length; leap days are only accounted for through the quarter day.
DAYS_IN_YEAR = 365.25
DAYS_IN_MONTH = DAYS_IN_YEAR / 12


def _split_years_months(elapsed_days: float) -> tuple[int, int]:
    """Whole years, then whole months of what is left after removing the years.

    ``math.fmod`` keeps the sign of the dividend, so a negative interval gives
    negative years and months instead of wrapping the months around.
    """
    years = math.floor(elapsed_days / DAYS_IN_YEAR)
    months = math.floor(math.fmod(elapsed_days, DAYS_IN_YEAR) / DAYS_IN_MONTH)
    return years, months


def calculate_service_period(
    joining_date: date,
    retirement_date: date,
    today: date,
) -> ServicePeriodInfo:
    """Compute completed and remaining service as of ``today``.

    The "X years Y months" split uses a 365.25/12 day month, while the decimal
    year recombines the split with a plain ``months / 12``.
    """
    completed_days = (today - joining_date).days
    remaining_days = (retirement_date - today).days

    completed_years, completed_months = _split_years_months(completed_days)
    remaining_years, remaining_months = _split_years_months(remaining_days)

    return ServicePeriodInfo(
        today=today,
        completed_years=completed_years,
        completed_months=completed_months,
        completed_service_decimal=completed_years + completed_months / 12,
        remaining_years=remaining_years,
        remaining_months=remaining_months,
        remaining_service_decimal=remaining_years + remaining_months / 12,
        remaining_total_months=math.floor(remaining_days / DAYS_IN_MONTH),
    )
