from sheetfinder.query.engine import apply_filters, apply_search, paginate, run_query
from sheetfinder.query.models import QueryResult, QueryState

__all__ = [
    "QueryResult",
    "QueryState",
    "apply_filters",
    "apply_search",
    "paginate",
    "run_query",
]
