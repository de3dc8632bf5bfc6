"""Application factory for the LessonVault app."""

from __future__ import annotations

from flask import Flask

from .core.config import Config
from .core.bootstrap import (
    configure_logging,
    initialize_storage,
    register_blueprints,
    register_extensions,
)

__all__ = ["create_app", "main"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    config_class.init_app(app)

    configure_logging(app)
    register_extensions(app)
    register_blueprints(app)
    initialize_storage(app)

    return app


def main() -> None:
    """Run the development server on the configured host and port."""

    app = create_app()
    app.logger.info("Server running on http://localhost:%s", app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"])
