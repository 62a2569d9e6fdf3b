"""Application factory for the WordQuiz app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    initialize_store,
    register_blueprints,
    register_commands,
    register_context_processors,
    register_error_handling,
    register_extensions,
)
from .extensions import vocabulary_store

__all__ = ["create_app", "vocabulary_store"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    configure_logging(app)
    register_extensions(app)
    register_context_processors(app)
    register_blueprints(app)
    register_error_handling(app)
    register_commands(app)

    initialize_store(app)

    return app
