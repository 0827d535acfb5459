"""
Flask application factory for the ScreenKit admin panel.

Host applications either call ``create_app()`` directly or reuse the
module-level extensions and ``register_blueprints`` on their own app.
"""

import os
import logging
from flask import Flask, request, jsonify
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect, CSRFError

from .dashboard import AccessMixin, Dashboard, dashboard

logger = logging.getLogger(__name__)

login_manager = LoginManager()
csrf = CSRFProtect()


@login_manager.user_loader
def load_user(user_id):
    """Default loader: no persistent users. Host applications register their own."""
    return None


def create_app(config_object=None):
    app = Flask(__name__)
    if config_object is None:
        from .config import Config
        config_object = Config
    app.config.from_object(config_object)

    # Configure Python logging level from LOG_LEVEL env (default ERROR)
    try:
        log_level_name = str(app.config.get('LOG_LEVEL') or os.getenv('LOG_LEVEL', 'ERROR')).upper()
        log_level = getattr(logging, log_level_name, logging.ERROR)
        logging.getLogger().setLevel(log_level)
        app.logger.setLevel(log_level)
    except Exception:
        pass

    if not app.config.get('SECRET_KEY'):
        raise RuntimeError("SECRET_KEY must be set in environment or config")

    csrf.init_app(app)
    login_manager.init_app(app)

    @app.context_processor
    def inject_csrf_token():
        """Make CSRF token available in all templates."""
        from flask_wtf.csrf import generate_csrf
        return dict(csrf_token=generate_csrf)

    from .template_context import register_context_processors
    from .template_filters import register_markdown_filters
    register_context_processors(app)
    register_markdown_filters(app)

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        """Async panel requests get a JSON error they can act on."""
        logger.warning(f"CSRF validation failed for {request.path}: {e.description}")
        from flask_wtf.csrf import generate_csrf
        return jsonify({
            'error': 'CSRF token missing or invalid',
            'message': 'Please refresh the page and try again. Include X-CSRFToken header for async requests.',
            'csrf_token': generate_csrf()
        }), 400

    from .routes import register_blueprints
    register_blueprints(app)

    app.extensions['screenkit'] = dashboard
    return app


__all__ = ['AccessMixin', 'Dashboard', 'create_app', 'csrf', 'dashboard', 'login_manager']
