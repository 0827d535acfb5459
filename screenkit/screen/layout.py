"""
Composable screen layouts.

A layout renders a template and may nest other layouts under keys
(columns, tabs, ...). Every layout is addressable by its slug, a hash of
its public state, so a single fragment can be re-rendered on its own
during an async request.
"""

import copy
import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

from flask import render_template, url_for
from markupsafe import Markup
from werkzeug.utils import ImportStringError, import_string

from ..crypto import encrypt_string
from ..dashboard import dashboard
from ..debug_system import debug_layout_build, debug_slug_lookup
from ..exceptions import LayoutResolutionError
from ..utils import class_path
from .repository import Repository

logger = logging.getLogger(__name__)

BLANK_TEMPLATE = 'platform/layouts/blank.html'

# Runtime state that must not influence the slug
_UNSERIALIZED_ATTRIBUTES = ('query', 'is_async')


def resolve_layout(layout: Any) -> 'Layout':
    """Turn a layout declaration (instance, class or dotted path) into an instance."""
    if isinstance(layout, Layout):
        return layout

    if isinstance(layout, str):
        try:
            layout = import_string(layout)
        except ImportStringError as e:
            logger.error(f"Failed to import layout '{layout}': {e}")
            raise LayoutResolutionError(f"Layout '{layout}' could not be imported") from e

    if isinstance(layout, type) and issubclass(layout, Layout):
        return layout()

    logger.error(f"Refusing to build non-layout declaration {layout!r}")
    raise LayoutResolutionError(f"{layout!r} is not a layout")


def _wrap(layouts: Any) -> list:
    if layouts is None:
        return []
    if isinstance(layouts, (list, tuple)):
        return list(layouts)
    return [layouts]


def _flatten(layouts: Any) -> list:
    flat = []
    items = layouts.values() if isinstance(layouts, dict) else _wrap(layouts)
    for item in items:
        if isinstance(item, (list, tuple, dict)):
            flat.extend(_flatten(item))
        elif item is not None:
            flat.append(item)
    return flat


class LayoutEncoder(json.JSONEncoder):
    """JSON encoder that understands nested layouts and layout classes."""

    def default(self, o):
        if isinstance(o, Layout):
            return o.json_serialize()
        if isinstance(o, type):
            return class_path(o)
        return super().default(o)


class Layout:
    """Base class of every layout.

    Subclasses set ``template`` and may declare ``layouts`` either as a
    class attribute or as a method computing them.
    """

    template: Optional[str] = None
    layouts: Any = []
    variables: Dict[str, Any] = {}

    def __init__(self, layouts=None):
        self.template = type(self).template
        if layouts is not None:
            self.layouts = layouts
        elif not callable(getattr(type(self), 'layouts', None)):
            self.layouts = copy.copy(type(self).layouts)
        self.async_method: Optional[str] = None
        self.is_async = False
        self.variables = dict(type(self).variables)

    def build(self, repository: Repository):
        raise NotImplementedError(f"{type(self).__name__} must implement build()")

    def async_(self, method: str) -> 'Layout':
        """Use the screen method ``method`` as data source for async refreshes."""
        if not method.startswith('async'):
            method = f"async_{method}"

        self.async_method = method
        return self

    def current_async(self) -> 'Layout':
        self.is_async = True
        return self

    def can_see(self, repository: Repository) -> bool:
        return True

    def check_permission(self, layout: 'Layout', repository: Repository) -> bool:
        can_see = getattr(layout, 'can_see', None)
        return callable(can_see) and bool(can_see(repository))

    def get_layouts(self):
        """Child declarations, whether stored as data or produced by a ``layouts()`` method."""
        layouts = self.layouts
        if callable(layouts) and not isinstance(layouts, type):
            return layouts()
        return layouts

    def build_as_deep(self, repository: Repository):
        if not self.check_permission(self, repository):
            return None

        layouts = self.get_layouts()
        entries = layouts.items() if isinstance(layouts, dict) else enumerate(_wrap(layouts))

        many_forms: Dict[Any, List[Markup]] = {}
        for key, children in entries:
            many_forms.update(self.build_child(_wrap(children), key, repository))

        variables = dict(self.variables)
        variables.update({
            'many_forms': many_forms,
            'template_slug': self.get_slug(),
            'async_enable': 1 if self.async_method else 0,
            'async_route': self.async_route(),
        })

        template = BLANK_TEMPLATE if self.is_async else self.template
        debug_layout_build(self, template, many_forms)
        return Markup(render_template(template, **variables))

    def build_child(self, layouts: list, key, repository: Repository) -> Dict[Any, List[Markup]]:
        built = []
        for layout in layouts:
            layout = resolve_layout(layout)
            if not self.check_permission(layout, repository):
                continue
            html = layout.build(repository)
            if html is not None:
                built.append(html)

        return {key: built} if built else {}

    def async_route(self) -> Optional[str]:
        """URL the browser posts to for refreshing this layout alone."""
        screen = dashboard.get_current_screen()

        if screen is None or not self.async_method:
            return None

        return url_for(
            'platform.async',
            screen=encrypt_string(class_path(type(screen))),
            method=self.async_method,
            template=self.get_slug(),
        )

    def get_slug(self) -> str:
        payload = json.dumps(self, cls=LayoutEncoder)
        return hashlib.sha1(payload.encode('utf-8')).hexdigest()

    def find_by_slug(self, slug: str) -> Optional['Layout']:
        if self.get_slug() == slug:
            debug_slug_lookup(self, slug)
            return self

        for child in _flatten(self.get_layouts()):
            found = resolve_layout(child).find_by_slug(slug)
            if found is not None:
                return found

        return None

    def json_serialize(self) -> Dict[str, Any]:
        state = {
            name: value
            for name, value in vars(self).items()
            if not name.startswith('_') and name not in _UNSERIALIZED_ATTRIBUTES
        }
        state['layout'] = class_path(type(self))
        return state


class Layouts:
    """Shortcuts for building the stock layouts inline inside ``Screen.layout()``."""

    @staticmethod
    def blank(layouts) -> 'Layout':
        from .layouts.blank import Blank
        return Blank(layouts)

    @staticmethod
    def columns(layouts) -> 'Layout':
        from .layouts.columns import Columns
        return Columns(layouts)

    @staticmethod
    def tabs(layouts: dict) -> 'Layout':
        from .layouts.tabs import Tabs
        return Tabs(layouts)

    @staticmethod
    def view(template: str, variables: Optional[dict] = None) -> 'Layout':
        from .layouts.view import View
        return View(template, variables)
