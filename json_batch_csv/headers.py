"""Merge each document's column order into one global header.

Documents are folded in arrival order. The first document fixes the
baseline order. Every later document only contributes keys the header has
not seen yet, and each new key is placed next to its nearest already-known
neighbour from the same document:

    header [a, b] + document keys [a, c, b]  ->  [a, c, b]
    header [a, b] + document keys [x, y]     ->  [a, b, x, y]

Known keys are never moved.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


class HeaderBuilder:
    """Ordered, duplicate-free column list with a key -> position index."""

    def __init__(self, columns: Optional[Iterable[str]] = None):
        self._columns: List[str] = []
        self._index: Dict[str, int] = {}
        if columns is not None:
            self.merge(list(columns))

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._columns))

    def position(self, key: str) -> int:
        return self._index[key]

    def merge(self, local_keys: Sequence[str]) -> List[str]:
        """Fold one document's keys into the header; returns the keys added."""
        added: List[str] = []

        if not self._columns:
            for key in local_keys:
                if key not in self._index:
                    self._index[key] = len(self._columns)
                    self._columns.append(key)
                    added.append(key)
            return added

        for i, key in enumerate(local_keys):
            if key in self._index:
                continue
            at = self._insertion_point(local_keys, i)
            self._insert(at, key)
            added.append(key)

        if added:
            logger.debug("Header grew by %d column(s): %s", len(added), ", ".join(added))
        return added

    def _insertion_point(self, local_keys: Sequence[str], i: int) -> int:
        # After the nearest known key before it in this document
        for j in range(i - 1, -1, -1):
            prev_key = local_keys[j]
            if prev_key in self._index:
                return self._index[prev_key] + 1

        # Otherwise before the nearest known key after it
        for j in range(i + 1, len(local_keys)):
            next_key = local_keys[j]
            if next_key in self._index:
                return self._index[next_key]

        return len(self._columns)

    def _insert(self, at: int, key: str) -> None:
        self._columns.insert(at, key)
        # Later insertions from the same document depend on fresh positions
        for pos in range(at, len(self._columns)):
            self._index[self._columns[pos]] = pos


def merge_header(header: Sequence[str], local_keys: Sequence[str]) -> List[str]:
    """Return `header` with the unseen `local_keys` inserted next to their neighbours."""
    builder = HeaderBuilder(header)
    builder.merge(local_keys)
    return builder.columns


def build_header(key_lists: Iterable[Sequence[str]]) -> List[str]:
    builder = HeaderBuilder()
    for keys in key_lists:
        builder.merge(keys)
    return builder.columns
