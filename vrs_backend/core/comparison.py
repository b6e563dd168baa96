"""Taking VRS versus working until retirement."""

from __future__ import annotations

from vrs_backend.core.vrs_benefit import TAX_RATE
from vrs_backend.schemas.vrs import ComparisonMetrics

# Perks and allowances on top of Basic+DA, as a flat uplift.
SALARY_UPLIFT_FACTOR = 1.46


def calculate_comparison(
    basic_plus_da: float,
    remaining_months: int,
    pf_contribution: float,
    sbfp_contribution: float,
    after_tax_amount: float,
    matured_amount_at_retirement: float,
) -> ComparisonMetrics:
    """Compare what continued service earns with the VRS payout.

    Future salary is taxed at the same flat rate; PF and SBFP are tax exempt.
    """
    salary_till_retirement = (
        basic_plus_da * SALARY_UPLIFT_FACTOR * remaining_months * (1 - TAX_RATE)
    )
    benefits_till_retirement = (pf_contribution + sbfp_contribution) * remaining_months
    total_financials = salary_till_retirement + benefits_till_retirement

    return ComparisonMetrics(
        salary_till_retirement=salary_till_retirement,
        benefits_till_retirement=benefits_till_retirement,
        total_financials=total_financials,
        vrs_loss=total_financials - after_tax_amount,
        vrs_loss_with_interest=total_financials - matured_amount_at_retirement,
    )
