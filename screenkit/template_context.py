"""
Template context processors for making panel settings available in templates.
"""

from flask import current_app


def inject_panel_config():
    """Make panel configuration available in all templates."""
    return {
        'panel_name': current_app.config.get('PANEL_NAME', 'ScreenKit'),
        'panel_prefix': current_app.config.get('PANEL_PREFIX', '/admin'),
    }


def register_context_processors(app):
    """Register all template context processors with the Flask app."""
    app.context_processor(inject_panel_config)
