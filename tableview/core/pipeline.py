"""
Pure stage functions of the view pipeline: filter -> sort -> paginate.

They never mutate their inputs and always return new lists holding the
same record objects, so TableView can cache each stage's output.
"""

from __future__ import annotations

import numbers
from functools import cmp_to_key
from typing import Any, Dict, List, Sequence

from tableview.core.state import PageConfig, SortOrder, SortSpec
from tableview.core.values import stringify

Record = Dict[str, Any]

# Joined between field values so a term can't match across two adjacent fields
FIELD_DELIMITER = "(◕‿◕)"


def search_string(record: Record) -> str:
    return "".join(stringify(value) + FIELD_DELIMITER for value in record.values()).lower()


def filter_records(records: Sequence[Record], term: str) -> List[Record]:
    needle = term.strip().lower()
    if not needle:
        return list(records)
    return [record for record in records if needle in search_string(record)]


def _fallback_key(value: Any) -> tuple[str, str]:
    return type(value).__name__, stringify(value)


def _is_nan(value: Any) -> bool:
    return isinstance(value, numbers.Real) and value != value


def _compare(a: Any, b: Any, descending: bool) -> int:
    # NaN (missing numeric value) sorts last in both directions
    a_nan, b_nan = _is_nan(a), _is_nan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)

    try:
        if a == b:
            return 0
        if descending:
            return -1 if a > b else 1
        return -1 if a < b else 1
    except TypeError:
        # Mixed-type column (or None): order by type name then text form
        ka, kb = _fallback_key(a), _fallback_key(b)
        if ka == kb:
            return 0
        if descending:
            return -1 if ka > kb else 1
        return -1 if ka < kb else 1


def sort_records(records: Sequence[Record], spec: SortSpec) -> List[Record]:
    """
    Stable sort of the records by spec.key.

    Equal values keep their relative order. An inactive spec returns the
    records in their incoming order.
    """
    if not spec.active:
        return list(records)

    key = spec.key
    descending = spec.order is SortOrder.DESC
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: _compare(a[key], b[key], descending)),
    )


def paginate(records: Sequence[Record], page: PageConfig) -> List[Record]:
    start, end = page.window(len(records))
    return list(records[start:end])


def max_pages(total: int, page_size: int) -> int:
    if page_size > 0:
        return -(-total // page_size)
    return 1
