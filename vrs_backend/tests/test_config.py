from __future__ import annotations

import logging
from datetime import date

import pytest

from vrs_backend.app import create_app
from vrs_backend.app.config import parse_reference_date
from vrs_backend.app.logging_config import ROOT_LOGGER, setup_logging


def test_parse_reference_date():
    assert parse_reference_date(None) is None
    assert parse_reference_date("") is None
    assert parse_reference_date("2025-03-31") == date(2025, 3, 31)
    assert parse_reference_date(date(2024, 1, 1)) == date(2024, 1, 1)


def test_bad_reference_date_fails_app_creation():
    with pytest.raises(ValueError):
        create_app({"REFERENCE_DATE": "31/03/2025"})


def test_config_overrides_are_applied():
    app = create_app({"CORS_ORIGINS": ["https://vrs.example.org"], "LOG_LEVEL": "DEBUG"})

    assert app.config["CORS_ORIGINS"] == ["https://vrs.example.org"]
    assert logging.getLogger(ROOT_LOGGER).level == logging.DEBUG


def test_setup_logging_does_not_stack_handlers():
    logger = setup_logging("INFO")
    handler_count = len(logger.handlers)

    setup_logging(logging.WARNING)

    assert len(logger.handlers) == handler_count
    assert logger.level == logging.WARNING


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_calculation_is_logged(client, caplog):
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
        client.post(
            "/api/vrs/calculate",
            json={
                "basic": 77380,
                "da": 168534,
                "dateOfJoining": "1992-01-28",
                "dateOfRetirement": "2029-12-31",
            },
        )

    messages = [record.getMessage() for record in caplog.records]
    assert "Calculating VRS as of 2025-03-31" in messages
    assert any("completed=33 Years 2 Months" in message for message in messages)
