"""Filter, search and paginate a record set.

Every function here is pure: the same records and query always produce
the same page.
"""

import math
from collections.abc import Mapping, Sequence

from sheetfinder.query.models import QueryResult, QueryState
from sheetfinder.records.models import Record
from sheetfinder.text.normalize import normalize


def apply_filters(records: Sequence[Record], filters: Mapping[str, str]) -> list[Record]:
    """Keep records whose trimmed value equals the selected value for every active filter."""
    active = {key: value for key, value in filters.items() if value}
    if not active:
        return list(records)
    matched: list[Record] = []
    for record in records:
        for key, wanted in active.items():
            got = record.get(key).strip()
            if not got or got != wanted:
                break
        else:
            matched.append(record)
    return matched


def search_terms(search: str) -> list[str]:
    return normalize(search).split()


def apply_search(records: Sequence[Record], search: str) -> list[Record]:
    """Keep records whose search blob contains every normalized term."""
    terms = search_terms(search)
    if not terms:
        return list(records)
    return [
        record
        for record in records
        if all(term in record.search_blob for term in terms)
    ]


def total_pages(total: int, page_size: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def clamp_page(page: int, pages: int) -> int:
    if pages == 0:
        return 1
    return min(max(page, 1), pages)


def paginate(records: Sequence[Record], page: int, page_size: int) -> QueryResult:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total = len(records)
    pages = total_pages(total, page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return QueryResult(
        page_records=list(records[start : start + page_size]),
        total_matched=total,
        total_pages=pages,
        page=current,
    )


def run_query(
    records: Sequence[Record],
    filters: Mapping[str, str],
    search: str,
    page: int,
    page_size: int,
) -> QueryResult:
    """Filters first, then search, then the requested page (clamped)."""
    matched = apply_search(apply_filters(records, filters), search)
    return paginate(matched, page, page_size)


def execute(records: Sequence[Record], state: QueryState) -> QueryResult:
    return run_query(records, state.filters, state.search, state.page, state.page_size)
