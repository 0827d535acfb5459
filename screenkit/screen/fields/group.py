from typing import List

from .field import Field


class Group(Field):
    """Lays several fields out side by side on a single row."""

    view = 'platform/partials/fields/group.html'
    required_attributes = []

    def __init__(self):
        super().__init__()
        self.group: List[Field] = []

    @classmethod
    def make(cls, fields=None) -> 'Group':
        group = cls()
        group.group = list(fields or [])
        return group

    def get_group(self) -> List[Field]:
        return self.group
