"""
Configuration classes for the people & zombies app.

Loaded by create_app() through app.config.from_object(). SECRET_KEY, DATABASE_URL
and LOG_LEVEL come from the environment; the defaults only suit a local checkout.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Defaults for running the app locally."""

    # Signs the session cookie that carries flash messages
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me-please")

    # SQLite file next to this module unless DATABASE_URL says otherwise
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'zombies.db'}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Every form posts a csrf_token
    WTF_CSRF_ENABLED = True

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Page title / header
    APP_NAME = "Pessoas & Zumbis"


class TestingConfig(Config):
    """Used by the test-suite; the database URI is normally overridden per test."""

    TESTING = True
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_LEVEL = "DEBUG"
