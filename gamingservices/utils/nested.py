from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_nested(container: Any, *keys: str) -> Any | None:
    current = container
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def get_mapping(container: Any, *keys: str) -> Mapping[str, Any] | None:
    value = get_nested(container, *keys)
    if isinstance(value, Mapping):
        return value
    return None


def get_string(container: Any, key: str) -> str | None:
    value = get_nested(container, key)
    if isinstance(value, str):
        return value
    return None
