"""Monthly salary aggregates and statutory contributions."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from vrs_backend.schemas.vrs import SalaryInfo

PF_RATE = 0.12
SBFP_RATE = 0.03
DAYS_PER_SALARY_MONTH = 30

_CENT = Decimal("0.01")
# Floats this large carry no fractional digits, so there is nothing to round.
_WHOLE_NUMBERS_ONLY = 2.0 ** 52


def round_currency(value: float) -> float:
    """Round to two places, half away from zero, on the exact binary value."""
    if abs(value) >= _WHOLE_NUMBERS_ONLY:
        return float(value)
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def calculate_salary_info(basic: float, da: float, remaining_months: int) -> SalaryInfo:
    """Derive Basic+DA figures for the remaining service.

    PF and SBFP use the fixed 12% / 3% rates regardless of any percentage the
    caller carried on the input record.
    """
    basic_plus_da = basic + da

    return SalaryInfo(
        basic_plus_da=basic_plus_da,
        per_day_salary=round_currency(basic_plus_da / DAYS_PER_SALARY_MONTH),
        basic_plus_da_till_retirement=round_currency(basic_plus_da * remaining_months),
        pf_contribution=round_currency(basic_plus_da * PF_RATE),
        sbfp_contribution=round_currency(basic_plus_da * SBFP_RATE),
    )
