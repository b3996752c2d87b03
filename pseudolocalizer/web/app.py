"""Flask application for the pseudo-localization API."""

from __future__ import annotations

from pathlib import Path

from flask import Flask, jsonify

from pseudolocalizer.logger import get_logger

from .routes.pseudo import pseudo_bp
from .routes.settings import settings_bp

logger = get_logger(__name__)

# Upload size limit
MAX_UPLOAD_BYTES = 16 * 1024 * 1024


def build_app(config_file: Path) -> Flask:
    """Build the Flask app bound to one config file."""
    app = Flask(__name__)

    # Ensure JSON responses keep Unicode data (accented pseudo text).
    app.json.ensure_ascii = False
    app.config["CONFIG_PATH"] = Path(config_file)
    app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_BYTES

    register_blueprints(app)
    register_health_route(app)
    register_error_handlers(app)

    return app


def register_blueprints(app: Flask) -> None:
    """Register Flask blueprints."""
    app.register_blueprint(pseudo_bp, url_prefix="/api")
    app.register_blueprint(settings_bp, url_prefix="/api/settings")


def register_health_route(app: Flask) -> None:
    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})


def register_error_handlers(app: Flask) -> None:
    """Answer errors with JSON instead of HTML pages."""

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({"error": "Uploaded file is too large"}), 413

    @app.errorhandler(500)
    def server_error(e):
        logger.exception("Unhandled error while serving %s", e)
        return jsonify({"error": "Unexpected server error"}), 500
