"""
Database Base Module

Creates the SQLAlchemy instance shared by all models, kept apart from
the application factory to avoid circular imports.
"""

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in create_app()
db = SQLAlchemy()


def utcnow():
    """Timezone-aware creation/edit timestamp."""
    return datetime.now(timezone.utc)
