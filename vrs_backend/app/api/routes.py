"""HTTP routes for the Flask API."""

import logging
from datetime import date
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from vrs_backend.core.health import get_health_status
from vrs_backend.core.pipeline import calculate_vrs
from vrs_backend.models import (
    DEFAULT_BANK_INTEREST_RATE,
    DEFAULT_BASIC,
    DEFAULT_DA,
    DEFAULT_DATE_OF_JOINING,
    DEFAULT_DATE_OF_RETIREMENT,
    DEFAULT_PF_CONTRIBUTION,
    DEFAULT_SBFP_CONTRIBUTION,
    VRSRequest,
)
from vrs_backend.schemas.defaults import DefaultsResponse
from vrs_backend.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected VRS request with %d error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _reference_date() -> date:
    return current_app.config.get("REFERENCE_DATE") or date.today()


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(**get_health_status())
    return jsonify(response.model_dump())


@api_bp.get("/vrs/defaults")
def defaults() -> Any:
    """Prefill values for the calculator form."""
    response = DefaultsResponse(
        basic=DEFAULT_BASIC,
        da=DEFAULT_DA,
        dateOfJoining=DEFAULT_DATE_OF_JOINING,
        dateOfRetirement=DEFAULT_DATE_OF_RETIREMENT,
        pfMonthlyContribution=DEFAULT_PF_CONTRIBUTION,
        sbfpMonthlyContribution=DEFAULT_SBFP_CONTRIBUTION,
        bankInterestRate=DEFAULT_BANK_INTEREST_RATE,
        referenceDate=current_app.config.get("REFERENCE_DATE"),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/vrs/calculate")
def calculate() -> Any:
    """Validate the form, run the VRS pipeline and return every derived figure."""
    raw_payload = request.get_json(silent=True)
    if not isinstance(raw_payload, dict):
        return (
            jsonify({"detail": "request body must be a JSON object"}),
            HTTPStatus.BAD_REQUEST,
        )

    payload = VRSRequest.model_validate(raw_payload)
    inputs = payload.to_inputs(default_today=_reference_date())
    logger.info("Calculating VRS as of %s", inputs.today.isoformat())

    result = calculate_vrs(inputs)
    return jsonify(result.model_dump(mode="json"))
