"""Read-only access to the data produced by a screen's query."""

from collections.abc import Mapping
from typing import Any, Iterator, Optional

_MISSING = object()
_SCALARS = (str, bytes, int, float, bool)


def _step(target: Any, segment: str) -> Any:
    """Resolve one path segment against a mapping, a sequence or an object."""
    if target is None or isinstance(target, _SCALARS):
        return _MISSING
    if isinstance(target, Mapping):
        if segment in target:
            return target[segment]
        if segment.isdigit() and int(segment) in target:
            return target[int(segment)]
        return _MISSING
    if isinstance(target, (list, tuple)):
        if not segment.isdigit():
            return _MISSING
        index = int(segment)
        return target[index] if index < len(target) else _MISSING
    return getattr(target, segment, _MISSING)


class Repository:
    """Wraps query data and resolves dot-notation keys against it.

    Keys walk mappings, lists and plain objects alike, so
    ``repo.get('user.roles.0.name')`` works whether ``user`` is a dict or
    a model instance.
    """

    def __init__(self, data: Optional[Mapping] = None):
        self._data = dict(data) if data else {}

    def get(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None or key == '':
            return self._data

        if key in self._data:
            return self._data[key]

        target: Any = self._data
        for segment in str(key).split('.'):
            target = _step(target, segment)
            if target is _MISSING:
                return default
        return target

    def get_content(self, key: Optional[str] = None, default: Any = None) -> Any:
        return self.get(key, default)

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def all(self) -> dict:
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Repository({self._data!r})"
