from dataclasses import dataclass
from datetime import datetime

from sheetfinder.filters.models import FilterDefinition
from sheetfinder.records.models import Record


@dataclass(frozen=True)
class DatasetSnapshot:
    """Everything derived from one raw document; replaced wholesale on re-ingest."""

    raw_text: str
    updated_at: datetime
    headers: tuple[str, ...]
    indexes: tuple[int, ...]
    labels: tuple[str, ...]
    records: tuple[Record, ...]
    contact_key: str | None
    filter_definitions: tuple[FilterDefinition, ...]
    generation: int = 0

    @property
    def filter_keys(self) -> frozenset[str]:
        return frozenset(definition.key for definition in self.filter_definitions)
