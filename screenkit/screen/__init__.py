"""Screens, layouts and fields."""

from .layout import Layout, Layouts, resolve_layout
from .layouts import Blank, Columns, Rows, Tabs, View
from .repository import Repository
from .screen import Screen

__all__ = [
    'Blank',
    'Columns',
    'Layout',
    'Layouts',
    'Repository',
    'Rows',
    'Screen',
    'Tabs',
    'View',
    'resolve_layout',
]
