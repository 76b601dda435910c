from dataclasses import dataclass, field

from sheetfinder.records.models import Record


@dataclass
class QueryState:
    """What the user is currently asking for."""

    search: str = ""
    filters: dict[str, str] = field(default_factory=dict)
    page: int = 1
    page_size: int = 25


@dataclass(frozen=True)
class QueryResult:
    """One page of matching records plus totals."""

    page_records: list[Record]
    total_matched: int
    total_pages: int
    page: int
