"""Flask CLI commands managing the database schema without migrations."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from bloggy.core.extensions import db

LOGGER = logging.getLogger(__name__)


def ensure_non_production(command: str) -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    app_env = str(config.get("APP_ENV", "")).lower()
    if app_env == "production" and not config.get("TESTING"):
        raise click.UsageError(
            f"The 'flask {command}' command is restricted to non-production environments."
        )


@click.command("db-init")
@with_appcontext
def db_init_command() -> None:
    """Create every table known to the models (no-op for existing ones)."""
    db.create_all()
    LOGGER.info("Database schema created")
    click.echo("Database initialised.")


@click.command("db-drop")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def db_drop_command(yes: bool) -> None:
    """Drop every application table."""
    ensure_non_production("db-drop")
    if not yes:
        click.confirm("This will DROP all application tables. Continue?", abort=True)
    db.session.remove()
    db.drop_all()
    LOGGER.info("Database schema dropped")
    click.echo("Database dropped.")
