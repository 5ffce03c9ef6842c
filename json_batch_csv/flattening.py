from __future__ import annotations

import logging
from typing import Any, Dict

from .constants import ROOT_VALUE_KEY
from .paths import join_path
from .scalarize import RECURSE, scalarize

logger = logging.getLogger(__name__)

FlatRecord = Dict[str, str]


def flatten_document(document: Any) -> FlatRecord:
    """Flatten one parsed JSON document into an ordered dot-path -> cell map.

    Keys keep their first-encounter order from a depth-first walk of the
    document. A root that is not an object lands in a single `value` column.
    """
    flat: FlatRecord = {}

    if not isinstance(document, dict):
        flat[ROOT_VALUE_KEY] = scalarize(document)
        return flat

    _walk(document, '', flat)
    return flat


def _walk(obj: Dict[str, Any], prefix: str, out: FlatRecord) -> None:
    # One (prefix, remaining items) entry per open object, innermost last
    stack = [(prefix, iter(obj.items()))]
    while stack:
        parent, items = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            continue

        k, v = entry
        key = join_path(parent, k)
        cell = scalarize(v)
        if cell is RECURSE:
            stack.append((key, iter(v.items())))
            continue

        if key in out:
            # Same dotted path reached twice, e.g. {"a.b": 1, "a": {"b": 2}}
            logger.warning("Column %r produced more than once in one document; keeping the last value", key)
        out[key] = cell
