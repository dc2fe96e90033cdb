"""Command-line interface registration for the Flask application."""

from __future__ import annotations

from flask import Flask

from .database import db_drop_command, db_init_command
from .seed import seed_cli


def init_app(app: Flask) -> None:
    """Register application-specific CLI commands.

    Parameters
    ----------
    app:
        Flask application instance whose CLI registry will receive the
        schema commands and the seed command group.
    """
    app.cli.add_command(db_init_command)
    app.cli.add_command(db_drop_command)
    app.cli.add_command(seed_cli)
