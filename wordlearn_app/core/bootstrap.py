"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from typing import Callable, Optional

import click
from flask import Blueprint, Flask
from werkzeug.utils import import_string

from .error_handlers import register_error_handlers
from .extensions import csrf_protect, db
from .logging_config import setup_logging

# (import path, blueprint attribute, url prefix)
BLUEPRINTS: tuple[tuple[str, str, Optional[str]], ...] = (
    ("wordlearn_app.modules.words.routes", "words_bp", None),
    ("wordlearn_app.modules.api.routes", "api_bp", "/api"),
)


def configure_logging(app: Flask) -> None:
    """Configure the package logger, which Flask also uses as ``app.logger``."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=bool(app.config.get("LOG_JSON")),
    )
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    csrf_protect.init_app(app)
    register_error_handlers(app)


def register_word_store(app: Flask, word_store=None) -> None:
    """Install the word store the views read from."""

    if word_store is None:
        from ..modules.words.store import DatabaseWordStore

        word_store = DatabaseWordStore()
    app.extensions["word_store"] = word_store
    app.logger.debug("Word store installed: %s", type(word_store).__name__)


def register_blueprints(app: Flask) -> None:
    for import_path, attribute, url_prefix in BLUEPRINTS:
        blueprint = getattr(import_string(import_path), attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (attribute, import_path, type(blueprint))
            )
        app.register_blueprint(blueprint, url_prefix=url_prefix)
        app.logger.debug("Registered blueprint %s at prefix %s", blueprint.name, url_prefix or "<root>")


def register_context_processors(app: Flask) -> None:
    """Register global template context processors."""

    @app.context_processor
    def inject_word_count() -> dict[str, Callable[[], int]]:
        def word_count() -> int:
            return app.extensions["word_store"].count()

        return {"word_count": word_count}


def register_commands(app: Flask) -> None:
    """Attach the ``flask seed-words`` command."""

    @app.cli.command("seed-words")
    @click.argument("path", required=False)
    @click.option("--replace", is_flag=True, help="Delete existing words before seeding.")
    def seed_words_command(path: Optional[str], replace: bool) -> None:
        """Load word pairs from a JSON fixture file into the database."""
        from ..modules.words.fixtures import load_word_fixtures, seed_words

        fixture_path = path or app.config["WORDS_FIXTURE_PATH"]
        pairs = load_word_fixtures(fixture_path)
        inserted = seed_words(pairs, replace=replace)
        click.echo(f"Seeded {inserted} words from {fixture_path}.")


def initialize_database(app: Flask) -> None:
    """Create tables and seed default words when the table is empty."""

    from ..models import Word
    from ..modules.words.fixtures import load_word_fixtures, seed_words

    db.create_all()

    existing = db.session.query(Word).count()
    if existing:
        app.logger.info("Words table already holds %d words, skipping seed.", existing)
        return

    if not app.config.get("AUTO_SEED_WORDS"):
        app.logger.warning("Words table is empty and AUTO_SEED_WORDS is off; /learn will fail until words are added.")
        return

    fixture_path = app.config["WORDS_FIXTURE_PATH"]
    inserted = seed_words(load_word_fixtures(fixture_path))
    app.logger.info("Seeded %d words from %s.", inserted, fixture_path)
