from __future__ import annotations

from typing import Any

from .constants import PATH_SEPARATOR
from .paths import split_path


def get_value_by_path(data: Any, path: str) -> Any:
    """Retrieve a value from nested objects using a dot-notation path.

    Returns None when any segment is missing or the walk reaches a
    non-object before the path ends.
    """
    keys = split_path(path)
    if not keys:
        return None
    val = data

    i = 0
    while i < len(keys):
        if not isinstance(val, dict):
            return None

        key = keys[i]
        if key in val:
            val = val[key]
            i += 1
            continue

        # Fallback for dotted object keys (e.g. 'contact.email' stored as
        # one key) when the incoming path is 'contact.email'.
        matched = False
        candidate = key
        for j in range(i + 1, len(keys)):
            candidate = candidate + PATH_SEPARATOR + keys[j]
            if candidate in val:
                val = val[candidate]
                i = j + 1
                matched = True
                break
        if not matched:
            return None

    return val


def first_value(data: Any, *paths: str) -> Any:
    """Return the first non-empty value found among `paths`."""
    for path in paths:
        val = get_value_by_path(data, path)
        if val not in (None, '', [], {}):
            return val
    return None
