from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from sheetfinder.filters.models import FilterDefinition
from sheetfinder.records.models import ColumnSelection, Record
from sheetfinder.tsv.models import ParsedTable


@dataclass(slots=True)
class IngestContext:
    raw_text: str
    updated_at: datetime
    table: ParsedTable | None = None
    selection: ColumnSelection = field(default_factory=ColumnSelection)
    records: list[Record] = field(default_factory=list)
    contact_key: str | None = None
    filter_definitions: list[FilterDefinition] = field(default_factory=list)


class IngestStep(ABC):
    @abstractmethod
    def run(self, context: IngestContext) -> IngestContext:
        raise NotImplementedError
