from .field import Field


class Label(Field):
    """Read-only text showing the bound value, or the title when no value is bound."""

    view = 'platform/fields/label.html'
    required_attributes = []
    inline_attributes = ['class', 'id']
