from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

Row = Dict[str, str]


def build_row(header: Sequence[str], flat_record: Mapping[str, str]) -> Row:
    """Align one flattened document to `header`, blank where a key is absent."""
    return {h: flat_record[h] if h in flat_record else '' for h in header}


def materialize_rows(header: Sequence[str], flat_records: Iterable[Mapping[str, str]]) -> List[Row]:
    return [build_row(header, rec) for rec in flat_records]


def row_values(header: Sequence[str], row: Mapping[str, str]) -> List[str]:
    return [row.get(h, '') for h in header]
