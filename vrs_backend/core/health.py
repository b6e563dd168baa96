"""Health-check payload for the API."""

SERVICE_NAME = "vrs-calculator"


def get_health_status() -> dict:
    """Return the static status reported by the health-check endpoint."""
    return {"status": "ok", "service": SERVICE_NAME}
