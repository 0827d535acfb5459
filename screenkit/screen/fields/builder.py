"""
Binds a list of fields to screen data and renders them as one form body.
"""

from typing import Any, Dict, List, Optional

from flask import render_template
from markupsafe import Markup

from ..repository import Repository
from .field import Field
from .group import Group


GROUP_TEMPLATE = 'platform/partials/fields/group.html'


def convert_dot_to_array(name: str) -> str:
    """``user.address.city`` -> ``user[address][city]``; a trailing dot gives ``[]``."""
    head, *rest = name.split('.')
    return head + ''.join(f'[{part}]' for part in rest)


class Builder:
    def __init__(self, fields: List, data: Any = None):
        self.fields = fields
        self.data = data if isinstance(data, Repository) else Repository(data)
        self.language: Optional[str] = None
        self.prefix: Optional[str] = None

    def set_language(self, language: Optional[str] = None) -> 'Builder':
        self.language = language
        return self

    def set_prefix(self, prefix: Optional[str] = None) -> 'Builder':
        self.prefix = prefix
        return self

    def generate_form(self) -> Markup:
        form = []
        for field in self.fields:
            if isinstance(field, Group):
                html = self._render_group(field.get_group()) if field.is_see() else None
            elif isinstance(field, (list, tuple)):
                html = self._render_group(field)
            else:
                html = self._render(field)

            if html:
                form.append(html)

        return Markup(''.join(form))

    def _render_group(self, fields: List[Field]) -> Optional[Markup]:
        cols = [html for html in (self._render(field) for field in fields) if html]
        if not cols:
            return None
        return Markup(render_template(GROUP_TEMPLATE, cols=cols))

    def _render(self, field: Field) -> Optional[Markup]:
        field.set('lang', self.language)
        field.set('prefix', self._build_prefix(field))

        for key, value in self._fill(field.get_attributes()).items():
            field.set(key, value)

        return field.render()

    def _build_prefix(self, field: Field) -> Optional[str]:
        return field.get('prefix') or self.prefix

    def _fill(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        name = attributes.get('name')
        if name is None:
            return attributes

        bind_name = name.rstrip('.')
        attributes['value'] = self._get_value(bind_name, attributes.get('value'))

        parts = [attributes.get('prefix'), attributes.get('lang'), name]
        attributes['name'] = convert_dot_to_array('.'.join(part for part in parts if part))
        return attributes

    def _get_value(self, key: str, value: Any = None) -> Any:
        if self.language is not None:
            key = f"{self.language}.{key}"

        if self.prefix is not None:
            key = f"{self.prefix}.{key}"

        data = self.data.get_content(key)

        if callable(value):
            return value(data, self.data)

        return value if data is None else data
