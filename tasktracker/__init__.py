"""
Recent Tasks: a small Flask API that keeps the five newest pending tasks in view.
"""

import logging
from typing import Any, Mapping, Optional

import click
from flask import Flask
from sqlalchemy.engine import make_url

from .config import from_env
from .extensions import cors, db
from .routes.tasks import tasks_bp
from .services.task_service import TaskService
from .services.task_store import TaskStore

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_engine(app: Flask) -> None:
    # SQLite uses SQLAlchemy's default pool; server databases get a bounded pool.
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        return
    options = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS") or {})
    options.setdefault("pool_size", app.config["DB_POOL_SIZE"])
    options.setdefault("max_overflow", 0)
    options.setdefault("pool_pre_ping", True)
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = options


def _register_commands(app: Flask, store: TaskStore) -> None:
    @app.cli.command("init-db")
    def init_db():
        """Create the task table if it does not exist."""
        store.create_schema()
        click.echo("Task table ready.")

    @app.cli.command("reset-db")
    def reset_db():
        """Delete every task (test support only)."""
        removed = store.clear()
        click.echo(f"Removed {removed} task(s).")


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Application factory."""
    app = Flask(__name__)
    app.config.from_mapping(from_env())
    if overrides:
        app.config.from_mapping(overrides)

    _configure_logging(app.config["LOG_LEVEL"])
    _configure_engine(app)

    db.init_app(app)
    cors.init_app(app)

    store = TaskStore(db)
    app.extensions["task_service"] = TaskService(store)
    app.register_blueprint(tasks_bp)
    _register_commands(app, store)

    # Otherwise the table is created by `flask init-db`.
    if app.config["CREATE_SCHEMA"] or app.config.get("TESTING"):
        with app.app_context():
            store.create_schema()

    db_url = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    logger.info("Task API ready db=%s", db_url.render_as_string(hide_password=True))
    return app
