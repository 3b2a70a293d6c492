"""Dotted-path access to nested mappings.

A path such as ``"address.city"`` addresses ``obj["address"]["city"]``. These
helpers are the only place where nested structure is walked; everything else
reads and writes field values through them.
"""

from typing import Any, Dict, MutableMapping

SEPARATOR = "."


class _Missing:
    """Sentinel for a value that is absent, as opposed to an explicit None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


MISSING: Any = _Missing()


def split(path: str) -> list:
    """Split a dotted path into its segments."""
    return path.split(SEPARATOR)


def get(path: str, obj: Any) -> Any:
    """Return the value at ``path`` or ``MISSING`` if any segment is absent."""
    current = obj
    for segment in split(path):
        if not isinstance(current, MutableMapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def set(path: str, value: Any, obj: MutableMapping) -> None:
    """Assign ``value`` at ``path``, creating intermediate dicts as needed.

    Intermediate values that are not mappings are overwritten.
    """
    segments = split(path)
    current = obj
    for segment in segments[:-1]:
        child = current.get(segment, MISSING)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value


def remove(path: str, obj: MutableMapping) -> Any:
    """Delete the leaf at ``path`` and return it, or ``MISSING`` if absent.

    Intermediate containers left empty are kept.
    """
    segments = split(path)
    parent = get(SEPARATOR.join(segments[:-1]), obj) if len(segments) > 1 else obj
    if not isinstance(parent, MutableMapping) or segments[-1] not in parent:
        return MISSING
    return parent.pop(segments[-1])


def flatten(obj: MutableMapping, prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into ``{dotted_path: leaf_value}``.

    Non-empty mappings are walked; everything else, empty mappings and lists
    included, is a leaf.
    """
    flat: Dict[str, Any] = {}
    for key, value in obj.items():
        path = f"{prefix}{SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, MutableMapping) and value:
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat
