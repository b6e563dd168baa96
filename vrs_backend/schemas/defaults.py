"""Default form values served to the frontend."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class DefaultsResponse(BaseModel):
    """Prefill values for the calculator form."""

    basic: float = Field(..., gt=0)
    da: float = Field(..., gt=0)
    dateOfJoining: date
    dateOfRetirement: date
    pfMonthlyContribution: float
    sbfpMonthlyContribution: float
    bankInterestRate: float
    referenceDate: Optional[date] = Field(
        None, description="Date results are pinned to, when the server is configured with one."
    )
