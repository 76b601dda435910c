"""Automatic choice of categorical filter columns.

A column makes a good filter when most records fill it and it repeats a
moderate number of distinct values. Free-text columns (too many distinct
values), constant columns and sparse columns are rejected.
"""

import math
from collections import Counter
from collections.abc import Sequence

from sheetfinder.filters.models import ColumnStats, FilterDefinition, FilterPolicy
from sheetfinder.logging.logger import Log
from sheetfinder.records.models import Record
from sheetfinder.text.collation import Collation
from sheetfinder.text.normalize import prettify_label


def column_stats(records: Sequence[Record], key: str, value_key_length: int) -> ColumnStats:
    values = [record.get(key).strip() for record in records]
    filled = [value for value in values if value]
    counts = Counter(value[:value_key_length] for value in filled)
    return ColumnStats(
        key=key,
        total=len(records) or 1,
        filled=len(filled),
        counts=dict(counts),
    )


def score_column(stats: ColumnStats, policy: FilterPolicy) -> float | None:
    """Score a candidate column, or None when it is unusable as a filter."""
    min_filled = max(policy.min_filled, math.floor(stats.total * policy.min_filled_ratio))
    if stats.filled < min_filled:
        return None
    unique = stats.unique_count
    if unique <= 1 or unique > policy.max_unique:
        return None
    fill_ratio = stats.filled / stats.total
    return policy.fill_weight * fill_ratio + policy.cardinality_weight * (
        policy.max_unique - unique
    )


class FilterHeuristic:
    """Builds the ranked list of filter definitions for a record set."""

    def __init__(self, policy: FilterPolicy, collation: Collation) -> None:
        self._policy = policy
        self._collation = collation

    def build(
        self,
        records: Sequence[Record],
        labels: Sequence[str],
        contact_key: str | None = None,
    ) -> list[FilterDefinition]:
        scored: list[tuple[float, FilterDefinition]] = []
        for key in labels:
            if not key or key == contact_key:
                continue
            stats = column_stats(records, key, self._policy.value_key_length)
            score = score_column(stats, self._policy)
            if score is None:
                continue
            definition = FilterDefinition(
                key=key,
                label=prettify_label(key),
                values=tuple(self._collation.sorted(stats.counts)),
            )
            scored.append((score, definition))

        # Stable sort keeps header order among equal scores
        scored.sort(key=lambda item: item[0], reverse=True)
        definitions = [definition for _, definition in scored[: self._policy.max_filters]]
        Log.debug(
            f"Filter heuristic kept {len(definitions)} of {len(scored)} candidate columns"
        )
        return definitions
