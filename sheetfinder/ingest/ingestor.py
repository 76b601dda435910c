from datetime import datetime

from sheetfinder.config.settings import Settings
from sheetfinder.contact.resolver import ContactResolver
from sheetfinder.filters.heuristic import FilterHeuristic
from sheetfinder.filters.models import FilterPolicy
from sheetfinder.ingest.models import DatasetSnapshot
from sheetfinder.ingest.pipeline import IngestContext, IngestStep
from sheetfinder.ingest.steps import (
    BuildFiltersStep,
    DetectContactStep,
    ParseStep,
    ProjectRecordsStep,
    SelectColumnsStep,
)
from sheetfinder.records.projector import RecordProjector
from sheetfinder.text.collation import Collation


class Ingestor:
    """Runs the ingest steps over one raw document.

    Pipeline: parse -> select columns -> project -> detect contact -> filters.
    """

    def __init__(self, steps: list[IngestStep]) -> None:
        self._steps = steps

    def ingest(self, raw_text: str, updated_at: datetime, generation: int = 0) -> DatasetSnapshot:
        """Build a snapshot from *raw_text*.

        Raises:
            TsvError: if the document cannot be parsed; nothing is built.
        """
        context = IngestContext(raw_text=raw_text, updated_at=updated_at)
        for step in self._steps:
            context = step.run(context)

        headers = context.table.headers if context.table is not None else []
        return DatasetSnapshot(
            raw_text=raw_text,
            updated_at=updated_at,
            headers=tuple(headers),
            indexes=context.selection.indexes,
            labels=context.selection.labels,
            records=tuple(context.records),
            contact_key=context.contact_key,
            filter_definitions=tuple(context.filter_definitions),
            generation=generation,
        )


def build_ingestor(settings: Settings, resolver: ContactResolver) -> Ingestor:
    """Build an Ingestor with the standard steps."""
    projector = RecordProjector(settings.column_indexes)
    heuristic = FilterHeuristic(FilterPolicy.from_settings(settings), Collation("es"))
    return Ingestor(
        steps=[
            ParseStep(),
            SelectColumnsStep(projector),
            ProjectRecordsStep(projector),
            DetectContactStep(resolver),
            BuildFiltersStep(heuristic),
        ]
    )
