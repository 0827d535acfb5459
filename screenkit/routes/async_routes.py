"""
Async fragment endpoint.

The browser posts here to re-render one layout of a screen with fresh
data from one of the screen's ``async_*`` methods.
"""

import logging

from flask import Blueprint, abort, request
from flask_login import current_user, login_required
from werkzeug.utils import ImportStringError, import_string

from ..crypto import decrypt_string
from ..exceptions import DecryptError
from ..screen import Screen

logger = logging.getLogger(__name__)

platform_bp = Blueprint('platform', __name__)


def _load_screen_class(token: str):
    try:
        path = decrypt_string(token)
    except DecryptError:
        abort(404)

    try:
        screen_cls = import_string(path)
    except ImportStringError:
        logger.warning(f"Async request for unknown screen '{path}'")
        abort(404)

    if not isinstance(screen_cls, type) or not issubclass(screen_cls, Screen):
        logger.warning(f"Async request for non-screen '{path}'")
        abort(404)

    return screen_cls


def _request_parameters() -> dict:
    params = request.get_json(silent=True)
    if not isinstance(params, dict):
        params = request.form.to_dict()
    params.pop('csrf_token', None)
    return params


@platform_bp.route('/async/<screen>/<method>/<template>', methods=['POST'], endpoint='async')
@login_required
def async_fragment(screen, method, template):
    """Render a single layout of ``screen`` using the data of ``method``."""
    screen_cls = _load_screen_class(screen)
    instance = screen_cls()

    if not instance.check_access(current_user):
        abort(403)

    return instance.async_build(method, template, _request_parameters())
