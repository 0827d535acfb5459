"""
Routes package initialization.
Registers the panel blueprints on the application.
"""

import logging

from .async_routes import platform_bp

logger = logging.getLogger(__name__)


def register_blueprints(app):
    """Register all panel blueprints under PANEL_PREFIX."""
    prefix = app.config.get('PANEL_PREFIX', '/admin')
    app.register_blueprint(platform_bp, url_prefix=prefix)
    logger.info(f"Panel routes registered under '{prefix}'")
