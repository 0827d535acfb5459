"""Small helpers shared by layouts, fields and routes."""

import re
from typing import Any

_SLUG_INVALID = re.compile(r'[^a-z0-9]+')


def class_path(cls: type) -> str:
    """Return the dotted import path of a class, usable with import_string."""
    return f"{cls.__module__}.{cls.__qualname__}"


def slugify(value: Any, separator: str = '-') -> str:
    """Lowercase the value and collapse anything that is not a letter or digit."""
    if value is None:
        return ''
    slug = _SLUG_INVALID.sub(separator, str(value).lower())
    return slug.strip(separator)
