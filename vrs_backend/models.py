from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from vrs_backend.core.salary import round_currency
from vrs_backend.schemas.vrs import VRSInputs

# Prefill values of the calculator form
DEFAULT_BASIC = 77380.00
DEFAULT_DA = 168534.00
DEFAULT_DATE_OF_JOINING = date(1992, 1, 28)
DEFAULT_DATE_OF_RETIREMENT = date(2029, 12, 31)
DEFAULT_PF_CONTRIBUTION = 12.0
DEFAULT_SBFP_CONTRIBUTION = 3.0
DEFAULT_BANK_INTEREST_RATE = 5.5

# 2**53 - 1: above this a float no longer holds every whole amount
MAX_SAFE_PAY = 9007199254740991


class VRSRequest(BaseModel):
    """Calculator form as submitted by the frontend."""

    model_config = ConfigDict(extra="forbid")

    basic: float = Field(gt=0, le=MAX_SAFE_PAY, allow_inf_nan=False)
    da: float = Field(gt=0, le=MAX_SAFE_PAY, allow_inf_nan=False)
    dateOfJoining: date
    dateOfRetirement: date
    pfMonthlyContribution: float = Field(default=DEFAULT_PF_CONTRIBUTION, ge=0, le=100)
    sbfpMonthlyContribution: float = Field(default=DEFAULT_SBFP_CONTRIBUTION, ge=0, le=100)
    bankInterestRate: float = Field(default=DEFAULT_BANK_INTEREST_RATE, ge=0, le=15)
    today: Optional[date] = None

    @field_validator("basic", "da")
    @classmethod
    def round_pay(cls, value: float) -> float:
        return round_currency(value)

    @field_validator("dateOfRetirement")
    @classmethod
    def ensure_after_joining(cls, value: date, info: ValidationInfo) -> date:
        joining = info.data.get("dateOfJoining")
        if joining is not None and value <= joining:
            raise ValueError("dateOfRetirement must be after dateOfJoining")
        return value

    def to_inputs(self, default_today: date) -> VRSInputs:
        return VRSInputs(
            basic=self.basic,
            da=self.da,
            date_of_joining=self.dateOfJoining,
            date_of_retirement=self.dateOfRetirement,
            pf_monthly_contribution_pct=self.pfMonthlyContribution,
            sbfp_monthly_contribution_pct=self.sbfpMonthlyContribution,
            bank_interest_rate=self.bankInterestRate,
            today=self.today or default_today,
        )
