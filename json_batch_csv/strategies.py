"""Row-production strategies.

A strategy turns a batch of parsed documents into a header and one row per
document. The pipeline picks one when it is built; the rest of the
conversion (reading, encoding, download) is shared.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

from .constants import STRATEGY_MERGED, STRATEGY_PROFILE
from .flattening import flatten_document
from .headers import build_header
from .profile_mapping import PROFILE_HEADERS, map_profile_document
from .records import Row, materialize_rows

logger = logging.getLogger(__name__)


class RowStrategy:
    name = ''
    label = ''

    def build(self, documents: Sequence[Any]) -> Tuple[List[str], List[Row]]:
        raise NotImplementedError


class MergedColumnsStrategy(RowStrategy):
    """Flatten every document and merge their column orders."""

    name = STRATEGY_MERGED
    label = 'All keys (merged columns)'

    def build(self, documents):
        flat_records = [flatten_document(doc) for doc in documents]

        header = build_header(list(flat) for flat in flat_records)
        return header, materialize_rows(header, flat_records)


class FixedProfileStrategy(RowStrategy):
    """Map every document onto the predeclared profile columns."""

    name = STRATEGY_PROFILE
    label = 'Profile columns (fixed)'

    def build(self, documents):
        header = list(PROFILE_HEADERS)
        rows = [map_profile_document(doc) for doc in documents]
        skipped = sum(1 for doc in documents if not isinstance(doc, dict))
        if skipped:
            logger.warning("%d document(s) are not JSON objects and produced blank profile rows", skipped)
        return header, rows


STRATEGIES: Dict[str, RowStrategy] = {
    s.name: s for s in (MergedColumnsStrategy(), FixedProfileStrategy())
}


def get_strategy(strategy) -> RowStrategy:
    if isinstance(strategy, RowStrategy):
        return strategy
    try:
        return STRATEGIES[strategy]
    except KeyError:
        choices = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown row strategy {strategy!r} (expected one of: {choices})") from None
