from __future__ import annotations

import csv
import io
from typing import Iterable, Mapping, Sequence

from .constants import CSV_DELIMITER, CSV_LINE_TERMINATOR, OUTPUT_ENCODING, UTF8_BOM
from .records import row_values


def _cell(value) -> str:
    return '' if value is None else str(value)


def encode_csv(header: Sequence[str], rows: Iterable[Mapping[str, str]]) -> str:
    """Serialize `rows` under `header` as fully quoted CSV text.

    Every field (header included) is wrapped in double quotes with embedded
    quotes doubled. Lines are joined with CRLF; there is no trailing line
    break after the last row.
    """
    buf = io.StringIO(newline='')
    writer = csv.writer(
        buf,
        delimiter=CSV_DELIMITER,
        quoting=csv.QUOTE_ALL,
        doublequote=True,
        lineterminator=CSV_LINE_TERMINATOR,
    )
    writer.writerow([_cell(h) for h in header])
    for row in rows:
        writer.writerow([_cell(v) for v in row_values(header, row)])

    text = buf.getvalue()
    if text.endswith(CSV_LINE_TERMINATOR):
        text = text[:-len(CSV_LINE_TERMINATOR)]
    return text


def with_bom(text: str) -> str:
    if text.startswith(UTF8_BOM):
        return text
    return UTF8_BOM + text


def encode_payload(text: str) -> bytes:
    """UTF-8 bytes of `text` prefixed with a byte-order mark."""
    return with_bom(text).encode(OUTPUT_ENCODING)
