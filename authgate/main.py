"""Flask application factory and server entry point."""

import logging
import sqlite3

from flask import Flask, jsonify
from flask_cors import CORS

from .auth.api import SETTINGS_KEY, auth_bp
from .config import Settings
from .db import get_schema_version, init_db
from .exceptions import AuthGateError, StoreError
from .responses import error_response

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Error handlers
def handle_auth_gate_error(error):
    """Handle AuthGateError exceptions raised outside the handlers' results."""
    return error_response(error)


def handle_store_error(error):
    """Handle sqlite3 errors that escape a request (e.g. unopenable database)."""
    logger.error(f"Store error: {error}")
    return error_response(StoreError())


def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


def create_app(settings: Settings | None = None) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Application settings. Loaded from the environment if omitted.

    The settings object is stored in ``app.config`` and read by the auth
    handlers; nothing else holds configuration.
    """
    if settings is None:
        settings = Settings()

    app = Flask(__name__)
    app.config[SETTINGS_KEY] = settings

    # CORS configuration
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    if settings.uses_default_secret:
        logger.warning(
            "JWT_SECRET_KEY is not set; tokens are signed with the insecure default key"
        )

    # Database initialization (runs once on app startup)
    try:
        if init_db(settings.database_path):
            logger.info(f"Database initialized at {settings.database_path}")
        logger.info(f"Database schema version {get_schema_version(settings.database_path)}")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    app.register_error_handler(AuthGateError, handle_auth_gate_error)
    app.register_error_handler(sqlite3.Error, handle_store_error)
    app.register_error_handler(500, handle_internal_error)

    app.add_url_rule("/health", "health", health)
    app.register_blueprint(auth_bp, url_prefix=settings.api_prefix)

    return app


def main():
    """Run the development server on the configured host and port."""
    settings = Settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
