"""Data contracts for VRS calculations."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class VRSInputs(_Record):
    """Raw inputs for one calculation. Not validated here; see VRSRequest."""

    basic: float
    da: float
    date_of_joining: date
    date_of_retirement: date
    pf_monthly_contribution_pct: float = 12.0
    sbfp_monthly_contribution_pct: float = 3.0
    bank_interest_rate: float = 5.5
    today: date


class ServicePeriodInfo(_Record):
    """Completed and remaining tenure as of ``today``."""

    today: date
    completed_years: int
    completed_months: int
    completed_service_decimal: float
    remaining_years: int
    remaining_months: int
    remaining_service_decimal: float
    remaining_total_months: int = Field(
        ..., description="Flat month count of the remaining service, not split into years."
    )

    @computed_field
    @property
    def completed_service(self) -> str:
        return f"{self.completed_years} Years {self.completed_months} Months"

    @computed_field
    @property
    def remaining_service(self) -> str:
        return f"{self.remaining_years} Years {self.remaining_months} Months"


class SalaryInfo(_Record):
    basic_plus_da: float
    per_day_salary: float
    basic_plus_da_till_retirement: float
    pf_contribution: float
    sbfp_contribution: float


class VRSCalculations(_Record):
    compensation_for_completed_service: float
    compensation_for_remaining_service: float
    total_extrapolated_compensation: float
    final_compensation: float
    after_tax_amount: float
    monthly_interest: float
    matured_amount_at_retirement: float


class ComparisonMetrics(_Record):
    salary_till_retirement: float
    benefits_till_retirement: float
    total_financials: float
    vrs_loss: float
    vrs_loss_with_interest: float


class VRSResult(_Record):
    """Everything one run of the pipeline produces."""

    inputs: VRSInputs
    service_period: ServicePeriodInfo
    salary: SalaryInfo
    vrs: VRSCalculations
    comparison: ComparisonMetrics
