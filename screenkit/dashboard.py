"""
Panel-wide registry: the screen serving the current request, the
permission catalogue and screen route registration.
"""

import logging
from typing import Dict, Iterable, List, Optional

from flask import Blueprint, g, has_app_context
from flask_login import login_required

logger = logging.getLogger(__name__)

_CURRENT_SCREEN_ATTR = '_screenkit_current_screen'


class AccessMixin:
    """Permission checks for flask-login user classes.

    ``permissions`` maps permission keys (as registered on the dashboard)
    to booleans.
    """

    permissions: Dict[str, bool] = {}

    def has_access(self, permission: str) -> bool:
        return bool((self.permissions or {}).get(permission, False))

    def has_any_access(self, permissions: Iterable[str]) -> bool:
        return any(self.has_access(permission) for permission in permissions)


class Dashboard:
    """Holds the current screen and the permissions known to the panel."""

    def __init__(self):
        self._permissions: Dict[str, Dict[str, str]] = {}

    def set_current_screen(self, screen) -> None:
        setattr(g, _CURRENT_SCREEN_ATTR, screen)

    def get_current_screen(self):
        """Return the screen handling this request, or None outside of one."""
        if not has_app_context():
            return None
        return getattr(g, _CURRENT_SCREEN_ATTR, None)

    def register_permissions(self, group: str, permissions: Dict[str, str]) -> 'Dashboard':
        """Add ``{key: label}`` permissions under a display group."""
        self._permissions.setdefault(group, {}).update(permissions)
        logger.debug(f"Registered {len(permissions)} permission(s) under '{group}'")
        return self

    def get_permissions(self, group: Optional[str] = None) -> Dict[str, Dict[str, str]]:
        if group is not None:
            return {group: dict(self._permissions.get(group, {}))}
        return {name: dict(items) for name, items in self._permissions.items()}

    def permission_keys(self) -> List[str]:
        return [key for items in self._permissions.values() for key in items]

    def register_screen(self, blueprint: Blueprint, rule: str, screen_cls, endpoint: Optional[str] = None) -> None:
        """Route GET ``rule`` to the screen view and POST ``rule/<method>`` to its methods."""
        endpoint = endpoint or screen_cls.__name__.lower()

        @login_required
        def screen_view(**params):
            return screen_cls().handle(**params)

        blueprint.add_url_rule(rule, endpoint, screen_view, methods=['GET'])
        blueprint.add_url_rule(
            f"{rule.rstrip('/')}/<method>",
            f"{endpoint}_method",
            screen_view,
            methods=['POST'],
        )


dashboard = Dashboard()
