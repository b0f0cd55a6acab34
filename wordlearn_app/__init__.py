"""Application factory for the wordlearn app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    initialize_database,
    register_blueprints,
    register_commands,
    register_context_processors,
    register_extensions,
    register_word_store,
)
from .core.extensions import db

__all__ = ["create_app", "db"]


def create_app(config_class: type[Config] = Config, word_store=None) -> Flask:
    """Create and configure a Flask application instance.

    ``word_store`` replaces the database-backed store, e.g. with a
    ``FixedWordStore`` in tests.
    """

    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    configure_logging(app)
    register_extensions(app)
    register_word_store(app, word_store)
    register_context_processors(app)
    register_blueprints(app)
    register_commands(app)

    # Tables exist and are seeded before the app can serve a request.
    with app.app_context():
        initialize_database(app)

    return app
