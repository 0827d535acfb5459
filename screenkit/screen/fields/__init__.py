"""Form fields and the builder that binds them to screen data."""

from .builder import Builder
from .checkbox import CheckBox
from .field import Field
from .group import Group
from .input import Input
from .label import Label
from .select import Select
from .textarea import TextArea

__all__ = ['Builder', 'CheckBox', 'Field', 'Group', 'Input', 'Label', 'Select', 'TextArea']
