import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

import pytest
from flask import Blueprint, g
from flask_login import UserMixin

from screenkit.config import Config
from screenkit import AccessMixin, create_app, dashboard, login_manager


class PanelTestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    PANEL_ENCRYPTION_KEY = None
    WTF_CSRF_ENABLED = False
    PANEL_DEBUG = False
    PANEL_FIELD_WRAPPER = 'vertical'


class PanelUser(UserMixin, AccessMixin):
    def __init__(self, user_id, permissions):
        self.id = user_id
        self.permissions = permissions


USERS = {
    'admin': PanelUser('admin', {'platform.users': True}),
    'viewer': PanelUser('viewer', {'platform.users': False}),
}


@login_manager.request_loader
def load_user_from_request(req):
    return USERS.get(req.headers.get('X-Test-User'))


def build_app(config=PanelTestConfig):
    from screens import PublicScreen, UserEditScreen

    app = create_app(config)
    screens_bp = Blueprint('screens', __name__)
    dashboard.register_screen(screens_bp, '/users/<int:user_id>', UserEditScreen, 'user_edit')
    dashboard.register_screen(screens_bp, '/public', PublicScreen)
    app.register_blueprint(screens_bp, url_prefix=app.config['PANEL_PREFIX'])

    # pytest-flask shares one app context across a test's requests
    @app.before_request
    def reset_loaded_user():
        g.pop('_login_user', None)

    return app


@pytest.fixture
def app():
    return build_app()


@pytest.fixture
def admin_headers():
    return {'X-Test-User': 'admin'}
