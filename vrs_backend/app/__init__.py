"""Application factory and app-wide configuration."""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from vrs_backend.app.api.routes import api_bp
from vrs_backend.app.config import Config, parse_reference_date
from vrs_backend.app.logging_config import setup_logging


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    app.config["REFERENCE_DATE"] = parse_reference_date(app.config.get("REFERENCE_DATE"))
    setup_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
