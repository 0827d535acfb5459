from typing import Any, Dict, List, Tuple

from .field import Field


class Select(Field):
    view = 'platform/fields/select.html'

    default_attributes = {
        'class': 'form-control',
        'options': {},
    }

    inline_attributes = [
        'autofocus', 'class', 'disabled', 'form', 'id', 'multiple', 'name',
        'required', 'size', 'tabindex',
    ]

    def options(self, options) -> 'Select':
        """Accept ``{value: label}``, a list of pairs, or a flat list used for both."""
        if isinstance(options, dict):
            pairs = list(options.items())
        else:
            pairs = [
                tuple(option) if isinstance(option, (list, tuple)) else (option, option)
                for option in options
            ]
        return self.set('options', dict(pairs))

    def empty(self, label: str = '', value: Any = '') -> 'Select':
        options = {value: label}
        options.update(self.get('options') or {})
        return self.set('options', options)

    def multiple(self) -> 'Select':
        return self.set('multiple', True)

    def prepare_attributes(self, attributes: Dict[str, Any]) -> Dict[str, Any]:
        value = attributes.get('value')
        if value is None:
            selected: List[str] = []
        elif isinstance(value, (list, tuple, set)):
            selected = [str(item) for item in value]
        else:
            selected = [str(value)]

        choices: List[Tuple[str, Any, bool]] = [
            (str(key), label, str(key) in selected)
            for key, label in (attributes.get('options') or {}).items()
        ]
        attributes['choices'] = choices
        if attributes.get('multiple') and not str(attributes.get('name', '')).endswith('[]'):
            attributes['name'] = f"{attributes['name']}[]"
        return attributes
