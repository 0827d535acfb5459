"""
Admin screens.

A screen pairs a ``query()`` producing the page data with a ``layout()``
describing how to show it. Screens are routed through
``Dashboard.register_screen`` and may expose ``async_*`` methods feeding
partial re-renders of individual layouts.
"""

import inspect
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from flask import abort, render_template, request
from flask_login import current_user
from markupsafe import Markup

from ..dashboard import dashboard
from ..debug_system import debug_async_request
from .layout import resolve_layout
from .layouts.blank import Blank
from .repository import Repository

logger = logging.getLogger(__name__)

# Screen methods that can never be reached through a POST dispatch
_RESERVED_METHODS = frozenset({
    'async_build', 'build', 'check_access', 'handle', 'layout', 'query', 'view',
})


def _accepted_params(handler, params: Dict[str, Any]) -> Dict[str, Any]:
    """Keep the request parameters ``handler`` can take as keyword arguments."""
    parameters = inspect.signature(handler).parameters.values()
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters):
        return dict(params)

    accepted = {
        p.name for p in parameters
        if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }
    return {key: value for key, value in params.items() if key in accepted}


class Screen:
    name: Optional[str] = None
    description: Optional[str] = None
    permission: Optional[Union[str, Iterable[str]]] = None

    def __init__(self):
        self.source: Optional[Repository] = None
        self.arguments: Dict[str, Any] = {}

    def query(self, **params) -> Dict[str, Any]:
        return {}

    def layout(self) -> List:
        return []

    def build(self) -> Optional[Markup]:
        return Blank(self.layout()).build(self.source or Repository())

    def view(self, **params):
        dashboard.set_current_screen(self)
        self.arguments = params
        self.source = Repository(self.query(**params))
        return render_template('platform/layouts/base.html', screen=self)

    def async_build(self, method: str, slug: str, params: Optional[Dict[str, Any]] = None) -> Markup:
        """Render the layout ``slug`` alone, fed by the screen method ``method``."""
        dashboard.set_current_screen(self)

        handler = getattr(self, method, None) if method.startswith('async') else None
        if not callable(handler):
            logger.warning(f"Async method '{method}' not found on {type(self).__name__}")
            abort(404, description=f"Async method: {method} not found")

        source = Repository(handler(**_accepted_params(handler, params or {})))

        layout = None
        for declaration in self.layout():
            layout = resolve_layout(declaration).find_by_slug(slug)
            if layout is not None:
                break

        debug_async_request(self, method, slug, layout is not None)

        if layout is None:
            abort(404, description=f"Async template: {slug} not found")

        # hidden layouts stay hidden when addressed directly
        if not layout.check_permission(layout, source):
            abort(404, description=f"Async template: {slug} not found")

        return layout.current_async().build(source)

    def _permissions(self) -> List[str]:
        if not self.permission:
            return []
        if isinstance(self.permission, str):
            return [self.permission]
        return list(self.permission)

    def check_access(self, user=None) -> bool:
        permissions = self._permissions()
        if not permissions:
            return True

        has_any_access = getattr(user, 'has_any_access', None)
        return bool(callable(has_any_access) and has_any_access(permissions))

    def handle(self, method: Optional[str] = None, **params):
        dashboard.set_current_screen(self)

        if not self.check_access(current_user):
            abort(403)

        if request.method == 'GET':
            return self.view(**params)

        if not method or method.startswith('_') or method in _RESERVED_METHODS:
            abort(404)

        handler = getattr(self, method, None)
        if not callable(handler):
            abort(404, description=f"Method: {method} not found")

        self.arguments = params
        return handler(**params)
