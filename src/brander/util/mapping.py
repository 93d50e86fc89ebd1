"""Lookup helpers for nested configuration mappings"""

from typing import Any, Mapping


def get_path(data: Mapping | None, name: str, default: Any = None) -> Any:
    """Return data[name], falling back to walking a dotted path through nested mappings."""
    if not isinstance(data, Mapping):
        return default
    if name in data:
        return data[name]
    current: Any = data
    for part in name.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def trim(value: Any) -> str:
    """Return value as a stripped string ('' for None)."""
    return "" if value is None else str(value).strip()
