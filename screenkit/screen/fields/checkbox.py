from typing import Any, Dict

from .field import Field


class CheckBox(Field):
    """Checkbox bound to a truthy value.

    The element always submits ``1``; with ``send_true_or_false()`` a hidden
    ``0`` is submitted when the box is left unchecked.
    """

    view = 'platform/fields/checkbox.html'

    default_attributes = {
        'type': 'checkbox',
        'class': 'form-check-input',
        'novalue': 0,
        'yesvalue': 1,
    }

    inline_attributes = [
        'autofocus', 'checked', 'class', 'disabled', 'form', 'id', 'name',
        'readonly', 'required', 'tabindex', 'type', 'value',
    ]

    def send_true_or_false(self) -> 'CheckBox':
        return self.set('send_false', True)

    def prepare_attributes(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        value = attributes.get('value')
        attributes['checked'] = value not in (None, False, 0, '0', '', 'false', 'off')
        attributes['value'] = attributes.get('yesvalue')
        return attributes
