"""
app/__init__.py

Flask application factory for People & Zombies.

- One blueprint: people, mounted at /people.
- SQLite by default (DATABASE_URL overrides it).
- Flash messages are stored in the signed session cookie, so SECRET_KEY matters.
"""

from __future__ import annotations

import logging

import click
from flask import Flask, redirect, url_for
from flask.logging import default_handler

from .errors import register_error_handlers
from .extensions import csrf, db
from .middleware import MethodOverrideMiddleware

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(app: Flask) -> None:
    """Set app.logger level from LOG_LEVEL and give Flask's stderr handler our format."""
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    default_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def create_app(config_object: str = "config.Config", **overrides) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    _configure_logging(app)

    # Extensions
    db.init_app(app)
    csrf.init_app(app)

    # HTML forms reach PUT/DELETE routes through ?_method=
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # ----------------------------------------------------------------------
    # Blueprints
    # ----------------------------------------------------------------------
    from .blueprints.people import people_bp

    app.register_blueprint(people_bp)

    register_error_handlers(app)

    # ----------------------------------------------------------------------
    # Context globals
    # ----------------------------------------------------------------------
    @app.context_processor
    def inject_globals():
        return {"config": app.config}

    # ----------------------------------------------------------------------
    # CLI
    # ----------------------------------------------------------------------
    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-zombies")
    def seed_zombies_command():
        """Seed default zombies."""
        from .seed import seed_zombies

        added = seed_zombies()
        db.session.commit()
        click.echo(f"Default zombies seeded ({added} added).")

    # ----------------------------------------------------------------------
    # Home
    # ----------------------------------------------------------------------
    @app.route("/")
    def index():
        """Home: the people list."""
        return redirect(url_for("people.list_people"))

    return app
