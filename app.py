"""
Yotion: Flask Web Application

Local JSON API over the personal record store: language learning with
spaced repetition, tech notes, projects, a planner and a personal vault.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Flask, Response, jsonify

import database
from blueprints import register_blueprints
from errors import NotFoundError, StorageError, ValidationError
from obfuscator import Obfuscator

logger = logging.getLogger(__name__)


def create_app(test_config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__)

    # Load config
    from config import config_by_name
    if test_config is not None:
        app.config.from_object(config_by_name["testing"])
        app.config.update(test_config)
    else:
        env = os.environ.get("FLASK_ENV", "development")
        cfg = config_by_name.get(env, config_by_name["development"])
        app.config.from_object(cfg)
        if hasattr(cfg, "validate"):
            cfg.validate()

    # Structured logging
    from logging_config import init_logging
    init_logging(app)

    # One connection for the process, one obfuscator for the vault
    database.init_app(app)
    app.extensions["obfuscator"] = Obfuscator.from_config(app.config)

    register_blueprints(app)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.error("Storage failure: %s", e.__cause__ or e)
        return jsonify({"error": "Internal storage error"}), 500

    @app.errorhandler(404)
    def handle_unknown_route(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def handle_bad_method(e):
        return jsonify({"error": "Method not allowed"}), 405

    # Security headers
    @app.after_request
    def set_security_headers(response: Response) -> Response:
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store"
        return response

    return app


if __name__ == "__main__":
    create_app().run(debug=True, port=5001)
