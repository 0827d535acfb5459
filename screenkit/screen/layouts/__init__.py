"""Stock layouts."""

from .blank import Blank
from .columns import Columns
from .rows import Rows
from .tabs import Tabs
from .view import View

__all__ = ['Blank', 'Columns', 'Rows', 'Tabs', 'View']
