import logging
import sqlite3

from flask import Flask, jsonify
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db
from routes import recipes_bp, lists_bp
from services import UnparsableIngredientLine

logger = logging.getLogger(__name__)

migrate = Migrate()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # Enable SQLite foreign key enforcement
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def register_error_handlers(app):
    """Answer every error with a JSON body."""

    @app.errorhandler(UnparsableIngredientLine)
    def handle_unparsable_line(e):
        return jsonify({'error': str(e), 'line': e.line}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        logger.exception("Database error")
        return jsonify({'error': 'Database error'}), 500


def create_app(config_name=None):
    """Build the Flask app for an environment name ('development', 'testing', ...)."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.json.sort_keys = False

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(recipes_bp)
    app.register_blueprint(lists_bp)
    register_error_handlers(app)

    @app.route('/api/health')
    def health_check():
        return jsonify({'status': 'ok'})

    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create any missing tables (use `flask db upgrade` for managed schemas)."""
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
