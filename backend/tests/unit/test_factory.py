"""Tests for the application factory."""

from __future__ import annotations

from bloggy import create_app
from bloggy.core.config import TestingConfig


def test_create_app_selects_config_from_app_env(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    assert app.config["APP_ENV"] == "testing"
    assert app.config["TESTING"] is True


def test_create_app_wires_components() -> None:
    app = create_app(TestingConfig)

    assert {"health", "auth", "users", "posts", "comments"} <= set(app.blueprints)
    assert {"db-init", "db-drop", "seed"} <= set(app.cli.commands)
    assert "sqlalchemy" in app.extensions
    assert "flask-jwt-extended" in app.extensions
