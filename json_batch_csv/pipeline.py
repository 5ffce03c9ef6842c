from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

from .constants import STRATEGY_MERGED
from .csv_encoding import encode_csv, encode_payload
from .errors import ConversionError
from .io_utils import read_documents
from .records import Row
from .strategies import get_strategy

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    header: List[str]
    rows: List[Row]
    csv_text: str
    strategy: str = STRATEGY_MERGED

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.header)

    def payload(self) -> bytes:
        """BOM-prefixed UTF-8 bytes ready for saving."""
        return encode_payload(self.csv_text)

    def summary(self) -> str:
        return f"{self.row_count} row(s), {self.column_count} column(s)."


def convert_documents(documents: Sequence[Any], strategy=STRATEGY_MERGED) -> ConversionResult:
    """Convert already-parsed documents, in the given order, to CSV."""
    documents = list(documents)
    if not documents:
        raise ConversionError("Add some JSON files first.")

    row_strategy = get_strategy(strategy)
    header, rows = row_strategy.build(documents)
    csv_text = encode_csv(header, rows)

    result = ConversionResult(header=header, rows=rows, csv_text=csv_text, strategy=row_strategy.name)
    logger.info("Converted with %s strategy: %s", row_strategy.name, result.summary())
    return result


def convert_files(files: Sequence[Any], strategy=STRATEGY_MERGED) -> ConversionResult:
    """Read, parse and convert a batch of files; any bad file aborts the run."""
    files = list(files or [])
    if not files:
        raise ConversionError("Add some JSON files first.")

    # Resolve before reading so an unknown strategy fails fast
    row_strategy = get_strategy(strategy)
    documents = read_documents(files)
    return convert_documents(documents, row_strategy)
