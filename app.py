"""Flask backend for the Spring Aventure administration.

Architecture:
- API Layer (admin/): Routes HTTP, formulaires, messages flash
- Service Layer (services/): Logique métier
- Repository Layer (repositories/): Accès données
- Domain Layer (models): Entités
"""
import logging
import os

from flask import Flask, render_template
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import HTTPException

from models import db
from cli import register_commands

# Configure basic logging so INFO logs appear in the Flask console by default
logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logging.getLogger('werkzeug').setLevel(logging.INFO)

csrf = CSRFProtect()


def create_app(config_override=None):
    """Application factory.

    Args:
        config_override: valeurs de configuration appliquées en dernier (tests)
    """
    app = Flask(__name__)
    app.logger.setLevel(logging.INFO)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///aventure.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['ADMIN_PAGE_SIZE'] = int(os.environ.get('ADMIN_PAGE_SIZE', 10))
    if config_override:
        app.config.update(config_override)

    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)

    from admin import bp as admin_bp
    app.register_blueprint(admin_bp)

    register_error_handlers(app)
    register_commands(app)

    # Create tables
    with app.app_context():
        db.create_all()

    return app


def register_error_handlers(app):

    @app.errorhandler(Exception)
    def _handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return render_template('errors/error.html', code=e.code, title=e.name), e.code
        logging.getLogger(__name__).exception('Unhandled exception in request')
        db.session.rollback()
        return render_template('errors/error.html', code=500, title='Internal Server Error'), 500


if __name__ == '__main__':
    create_app().run(host='0.0.0.0', port=8080, debug=True)
