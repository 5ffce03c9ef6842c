from __future__ import annotations

from typing import List

from .constants import PATH_SEPARATOR


def join_path(parent: str, key) -> str:
    """Build the flattened column name for `key` nested under `parent`.

    Keys are used verbatim: a key that itself contains the separator yields
    the same column name as the equivalent nested path.
    """
    if not isinstance(key, str):
        key = str(key)
    return f"{parent}{PATH_SEPARATOR}{key}" if parent else key


def split_path(path: str) -> List[str]:
    """Split a dot path into its segments, dropping empty ones."""
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    return [p for p in path.split(PATH_SEPARATOR) if p != '']
