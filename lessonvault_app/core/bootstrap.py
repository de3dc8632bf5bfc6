"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import cors
from .logging_config import setup_logging
from .module_registry import register_default_modules
from .storage import init_storage


def configure_logging(app: Flask) -> None:
    """Route app.logger (and module loggers under the package) to our handlers."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        logger_name=app.logger.name,
    )
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    cors.init_app(app, origins=app.config.get("CORS_ORIGINS", "*"), send_wildcard=True)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def initialize_storage(app: Flask) -> None:
    """Create the JSON documents with empty defaults on first startup."""

    storage = init_storage(app)
    app.logger.info(
        "Storage ready (backend=%s, courses=%s, challenge=%s)",
        app.config.get("STORAGE_BACKEND", "json"),
        type(storage.courses).__name__,
        type(storage.challenge).__name__,
    )
