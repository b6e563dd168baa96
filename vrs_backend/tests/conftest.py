from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from vrs_backend.app import create_app
from vrs_backend.schemas.vrs import VRSInputs

REFERENCE_DATE = date(2025, 3, 31)


@pytest.fixture()
def app():
    return create_app({"TESTING": True, "REFERENCE_DATE": REFERENCE_DATE.isoformat()})


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def scenario_a_inputs() -> VRSInputs:
    return VRSInputs(
        basic=77380,
        da=168534,
        date_of_joining=date(1992, 1, 28),
        date_of_retirement=date(2029, 12, 31),
        bank_interest_rate=5.5,
        today=REFERENCE_DATE,
    )
