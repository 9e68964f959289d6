"""
Database Handle
===============

Shared Flask-SQLAlchemy handle. The engine is bound in create_app() only
when DATABASE_URL is configured; routes call require_database() first so a
missing URL surfaces as a per-request 500 instead of a crash at import.
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class DatabaseNotConfigured(RuntimeError):
    """DATABASE_URL is missing from the app config."""


def init_database(app):
    """Bind the db handle to the app. Returns False when no URL is set."""
    url = app.config.get('DATABASE_URL')
    if not url:
        return False

    app.config.setdefault('SQLALCHEMY_DATABASE_URI', url)
    # Managed Postgres drops idle connections; check before reuse
    app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {'pool_pre_ping': True})
    db.init_app(app)
    return True


def require_database():
    if 'sqlalchemy' not in current_app.extensions:
        raise DatabaseNotConfigured('DATABASE_URL is not configured.')
    return db
