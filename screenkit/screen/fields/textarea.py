from .field import Field


class TextArea(Field):
    view = 'platform/fields/textarea.html'

    default_attributes = {
        'class': 'form-control',
        'rows': 3,
    }

    inline_attributes = [
        'autofocus', 'class', 'cols', 'disabled', 'form', 'id', 'maxlength',
        'name', 'placeholder', 'readonly', 'required', 'rows', 'tabindex', 'wrap',
    ]

    def rows(self, value: int) -> 'TextArea':
        return self.set('rows', value)
