"""VRS compensation under the Gujarat pattern, after tax and with interest."""

from __future__ import annotations

from vrs_backend.schemas.vrs import VRSCalculations

DAYS_PER_COMPLETED_YEAR = 35
DAYS_PER_REMAINING_YEAR = 25

TAX_RATE = 0.32
TAX_FREE_AMOUNT = 500000


def apply_vrs_tax(amount: float) -> float:
    """Tax everything above the tax-free amount at the flat rate.

    Applied unconditionally: an amount below the threshold comes back larger
    than it went in.
    """
    return (amount - TAX_FREE_AMOUNT) * (1 - TAX_RATE) + TAX_FREE_AMOUNT


def calculate_vrs_benefits(
    per_day_salary: float,
    completed_service_years: float,
    remaining_service_years: float,
    basic_plus_da_till_retirement: float,
    bank_interest_rate: float,
) -> VRSCalculations:
    """
    Compute the one-time VRS payout and what it grows to by retirement.

      1) 35 days of salary per completed year, 25 days per remaining year.
      2) Cap the sum at the Basic+DA the employee would still have earned.
      3) Tax the capped amount, then project simple monthly interest and
         annual compounding over the (fractional) remaining years.
    """
    comp_completed = per_day_salary * DAYS_PER_COMPLETED_YEAR * completed_service_years
    comp_remaining = per_day_salary * DAYS_PER_REMAINING_YEAR * remaining_service_years
    total = comp_completed + comp_remaining

    final = min(basic_plus_da_till_retirement, total)
    after_tax = apply_vrs_tax(final)

    return VRSCalculations(
        compensation_for_completed_service=comp_completed,
        compensation_for_remaining_service=comp_remaining,
        total_extrapolated_compensation=total,
        final_compensation=final,
        after_tax_amount=after_tax,
        monthly_interest=after_tax * bank_interest_rate / (100 * 12),
        matured_amount_at_retirement=(
            after_tax * (1 + bank_interest_rate / 100) ** remaining_service_years
        ),
    )
