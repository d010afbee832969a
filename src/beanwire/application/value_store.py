import copy
from typing import Any, Dict, List, Mapping, Optional, Tuple

from beanwire.domain import IValueStore

_MISSING = object()


def _split(key: str) -> List[str]:
    parts = key.split(".")
    if not key or any(not part for part in parts):
        raise ValueError(f"Invalid key: {key!r}")
    return parts


def _assign(tree: Dict[str, Any], key: str, value: Any) -> None:
    *parents, leaf = _split(key)
    node = tree
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = copy.deepcopy(value) if isinstance(value, Mapping) else value


def _lookup(tree: Mapping[str, Any], key: str) -> Tuple[bool, Any]:
    node: Any = tree
    for part in _split(key):
        if not isinstance(node, Mapping) or part not in node:
            return False, _MISSING
        node = node[part]
    return True, node


def _merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class DictValueStore(IValueStore):
    """Nested-dictionary configuration store addressed by dot-separated keys.

    Explicit values take precedence over defaults. Reading a key that holds a
    mapping returns the defaults and explicit values of that subtree merged.
    An explicit scalar hides every default beneath its key.

    Attributes:
        _defaults: Fallback values.
        _values: Explicitly set values.

    Example:
        >>> store = DictValueStore({"db": {"host": "localhost", "port": 5432}})
        >>> store.set("db.port", 6543)
        >>> store.get("db")
        {'host': 'localhost', 'port': 6543}
    """

    def __init__(self, defaults: Optional[Mapping[str, Any]] = None) -> None:
        self._defaults: Dict[str, Any] = {}
        self._values: Dict[str, Any] = {}
        for key, value in (defaults or {}).items():
            self.set_default(key, value)

    def set_default(self, key: str, value: Any) -> None:
        _assign(self._defaults, key, value)

    def set(self, key: str, value: Any) -> None:
        _assign(self._values, key, value)

    def get(self, key: str, default: Any = None) -> Any:
        found, value = _lookup(self.get_all(), key)
        return value if found else default

    def get_all(self) -> Dict[str, Any]:
        return _merge(self._defaults, self._values)
