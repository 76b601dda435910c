from collections.abc import Sequence

from sheetfinder.records.models import ColumnSelection, Record
from sheetfinder.text.normalize import normalize
from sheetfinder.tsv.parser import header_label

SEARCH_BLOB_SEPARATOR = " | "


class RecordProjector:
    """Maps parsed rows onto the configured column subset."""

    def __init__(self, column_indexes: Sequence[int]) -> None:
        self._column_indexes = tuple(column_indexes)

    def select(self, headers: Sequence[str]) -> ColumnSelection:
        """Keep configured positions that exist in *headers* and resolve their labels.

        Positions past the last header are dropped silently.
        """
        indexes = tuple(i for i in self._column_indexes if 0 <= i < len(headers))
        labels = tuple(header_label(headers[i], i) for i in indexes)
        return ColumnSelection(indexes=indexes, labels=labels)

    def project(
        self,
        selection: ColumnSelection,
        rows: Sequence[Sequence[str]],
    ) -> list[Record]:
        records: list[Record] = []
        for row in rows:
            if not row:
                continue
            values = {
                label: (row[idx] if idx < len(row) else "").strip()
                for idx, label in zip(selection.indexes, selection.labels)
            }
            records.append(
                Record(values=values, search_blob=build_search_blob(values, selection.labels))
            )
        return records


def build_search_blob(values: dict[str, str], labels: Sequence[str]) -> str:
    parts = [values[label] for label in labels if values.get(label)]
    return normalize(SEARCH_BLOB_SEPARATOR.join(parts))
