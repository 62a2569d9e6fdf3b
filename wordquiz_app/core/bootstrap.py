"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import json
import logging

import click
from flask import Flask, current_app

from ..extensions import csrf_protect, vocabulary_store
from .error_handlers import StoreError, register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging if no handlers are present."""

    if not app.testing:
        setup_logging(
            app,
            log_level=app.config.get('LOG_LEVEL', 'INFO'),
            log_dir=app.config.get('LOG_DIR'),
            json_format=app.config.get('LOG_JSON', False),
        )

    if app.logger.handlers:
        return

    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    csrf_protect.init_app(app)
    vocabulary_store.init_app(app)


def register_context_processors(app: Flask) -> None:
    """Register global template context processors."""

    @app.context_processor
    def inject_quiz_settings() -> dict[str, object]:
        return {
            "quiz_min_vocabulary": app.config.get("QUIZ_MIN_VOCABULARY", 4),
            "quiz_feedback_delay_ms": app.config.get("QUIZ_FEEDBACK_DELAY_MS", 1500),
        }

    @app.template_filter("percent")
    def percent_filter(value: float) -> str:
        return f"{value:.0f}%"


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints and their event handlers with the app."""

    register_default_modules(app)

    # Importing events connects the signal receivers
    from ..modules.vocabulary import events as _vocabulary_events  # noqa: F401
    from ..modules.quiz import events as _quiz_events  # noqa: F401


def register_error_handling(app: Flask) -> None:
    register_error_handlers(app)


def register_commands(app: Flask) -> None:
    """Register Flask CLI commands."""

    @app.cli.command("seed-vocabulary")
    @click.argument("source", type=click.Path(exists=True, dir_okay=False))
    @click.option("--replace", is_flag=True, help="Drop the existing collection first.")
    def seed_vocabulary(source: str, replace: bool) -> None:
        """Import records from a JSON array file into the vocabulary store."""
        from ..modules.vocabulary.services.vocabulary_service import VocabularyService

        with open(source, encoding="utf-8") as f:
            entries = json.load(f)
        if not isinstance(entries, list):
            raise click.ClickException("Seed file must contain a JSON array of records.")

        result = VocabularyService.import_records(entries, replace=replace)
        current_app.logger.info("Seeded %d records from %s", len(result["added"]), source)
        click.echo(f"Added {len(result['added'])} words, skipped {len(result['skipped'])}.")


def initialize_store(app: Flask) -> None:
    """Make sure the store file can be read at startup."""

    try:
        records = vocabulary_store.load()
    except StoreError as e:
        # Requests touching the store will answer 500 until the file is fixed
        app.logger.error("Vocabulary store unreadable at startup: %s", e.message)
        return
    app.logger.info("Loaded %d vocabulary records.", len(records))
