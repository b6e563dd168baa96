"""Runs the four VRS calculators in order and merges their results."""

from __future__ import annotations

import logging

from vrs_backend.core.comparison import calculate_comparison
from vrs_backend.core.salary import calculate_salary_info
from vrs_backend.core.service_period import calculate_service_period
from vrs_backend.core.vrs_benefit import calculate_vrs_benefits
from vrs_backend.schemas.vrs import VRSInputs, VRSResult

logger = logging.getLogger(__name__)


def calculate_vrs(inputs: VRSInputs) -> VRSResult:
    """Compute the full VRS result for one set of inputs."""
    service_period = calculate_service_period(
        inputs.date_of_joining,
        inputs.date_of_retirement,
        inputs.today,
    )
    salary = calculate_salary_info(
        inputs.basic,
        inputs.da,
        service_period.remaining_total_months,
    )
    vrs = calculate_vrs_benefits(
        per_day_salary=salary.per_day_salary,
        completed_service_years=service_period.completed_service_decimal,
        remaining_service_years=service_period.remaining_service_decimal,
        basic_plus_da_till_retirement=salary.basic_plus_da_till_retirement,
        bank_interest_rate=inputs.bank_interest_rate,
    )
    comparison = calculate_comparison(
        basic_plus_da=salary.basic_plus_da,
        remaining_months=service_period.remaining_total_months,
        pf_contribution=salary.pf_contribution,
        sbfp_contribution=salary.sbfp_contribution,
        after_tax_amount=vrs.after_tax_amount,
        matured_amount_at_retirement=vrs.matured_amount_at_retirement,
    )

    logger.debug(
        "VRS as of %s: completed=%s remaining=%s final=%.2f after_tax=%.2f loss=%.2f",
        inputs.today.isoformat(),
        service_period.completed_service,
        service_period.remaining_service,
        vrs.final_compensation,
        vrs.after_tax_amount,
        comparison.vrs_loss,
    )

    return VRSResult(
        inputs=inputs,
        service_period=service_period,
        salary=salary,
        vrs=vrs,
        comparison=comparison,
    )
