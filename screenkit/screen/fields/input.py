from .field import Field


class Input(Field):
    """Single-line ``<input>``; ``type`` defaults to text."""

    view = 'platform/fields/input.html'

    default_attributes = {
        'type': 'text',
        'class': 'form-control',
    }

    inline_attributes = [
        'accept', 'autocomplete', 'autofocus', 'class', 'disabled', 'form',
        'id', 'list', 'max', 'maxlength', 'min', 'minlength', 'multiple',
        'name', 'pattern', 'placeholder', 'readonly', 'required', 'size',
        'step', 'tabindex', 'type', 'value',
    ]

    def type(self, value: str) -> 'Input':
        return self.set('type', value)

    def max_length(self, value: int) -> 'Input':
        return self.set('maxlength', value)
