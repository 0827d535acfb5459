"""
Base form field.

A field is a bag of attributes filled fluently (``Input.make('user.name')
.title('Name').required()``) and rendered through its own template,
wrapped in a vertical or horizontal row template.
"""

from typing import Any, Dict, List, Optional

from flask import current_app, render_template
from markupsafe import Markup
from wtforms.widgets import html_params

from ...exceptions import FieldRequiredAttributeError
from ...utils import slugify


WRAPPER_TEMPLATES = {
    'vertical': 'platform/partials/fields/vertical.html',
    'horizontal': 'platform/partials/fields/horizontal.html',
}


class Field:
    view: Optional[str] = None

    # Attributes that must be set before the field can render
    required_attributes: List[str] = ['name']

    # Attributes copied onto the HTML element itself
    inline_attributes: List[str] = []

    # Defaults applied to every new instance
    default_attributes: Dict[str, Any] = {}

    def __init__(self):
        self.attributes: Dict[str, Any] = {'value': None}
        self.attributes.update(self.default_attributes)
        self.display = True
        self.type_form: Optional[str] = None

    @classmethod
    def make(cls, name: Optional[str] = None) -> 'Field':
        field = cls()
        if name is not None:
            field.set('name', name)
        return field

    def set(self, key: str, value: Any = True) -> 'Field':
        self.attributes[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self.attributes)

    def name(self, name: str) -> 'Field':
        return self.set('name', name)

    def title(self, title: str) -> 'Field':
        return self.set('title', title)

    def help(self, text: str) -> 'Field':
        return self.set('help', text)

    def placeholder(self, text: str) -> 'Field':
        return self.set('placeholder', text)

    def value(self, value: Any) -> 'Field':
        return self.set('value', value)

    def required(self, value: bool = True) -> 'Field':
        return self.set('required', value)

    def readonly(self, value: bool = True) -> 'Field':
        return self.set('readonly', value)

    def popover(self, text: str) -> 'Field':
        return self.set('popover', text)

    def vertical(self) -> 'Field':
        self.type_form = WRAPPER_TEMPLATES['vertical']
        return self

    def horizontal(self) -> 'Field':
        self.type_form = WRAPPER_TEMPLATES['horizontal']
        return self

    def can_see(self, value: bool) -> 'Field':
        self.display = bool(value)
        return self

    def is_see(self) -> bool:
        return self.display

    def check_required(self) -> None:
        for attribute in self.required_attributes:
            if self.attributes.get(attribute) is None:
                raise FieldRequiredAttributeError(attribute, self)

    def get_id(self) -> str:
        if self.attributes.get('id'):
            return self.attributes['id']
        # the bound name already carries the prefix and language
        return slugify(f"field-{self.attributes.get('name') or ''}")

    def prepare_attributes(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for subclasses to adjust attributes right before rendering."""
        return attributes

    def get_inline_attributes(self, attributes: Dict[str, Any]) -> Markup:
        inline = {}
        for key in self.inline_attributes:
            value = attributes.get(key)
            if value is None or value is False:
                continue
            inline[key] = value
        return Markup(html_params(**inline))

    def _wrapper_template(self) -> str:
        if self.type_form:
            return self.type_form
        style = current_app.config.get('PANEL_FIELD_WRAPPER', 'vertical')
        return WRAPPER_TEMPLATES.get(style, WRAPPER_TEMPLATES['vertical'])

    def render(self) -> Optional[Markup]:
        if not self.is_see():
            return None

        self.check_required()

        attributes = self.get_attributes()
        attributes['id'] = self.get_id()
        attributes['slug'] = slugify(attributes.get('name'))
        attributes = self.prepare_attributes(attributes)
        attributes['html_attributes'] = self.get_inline_attributes(attributes)

        field = Markup(render_template(self.view, **attributes))
        return Markup(render_template(self._wrapper_template(), field=field, **attributes))
