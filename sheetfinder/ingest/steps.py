from sheetfinder.contact.resolver import ContactResolver
from sheetfinder.filters.heuristic import FilterHeuristic
from sheetfinder.ingest.pipeline import IngestContext, IngestStep
from sheetfinder.logging.logger import Log
from sheetfinder.records.projector import RecordProjector
from sheetfinder.tsv.parser import parse_tsv


class ParseStep(IngestStep):
    def run(self, context: IngestContext) -> IngestContext:
        context.table = parse_tsv(context.raw_text)
        Log.info(
            f"Parsed TSV: {context.table.width} columns, {len(context.table.rows)} rows"
        )
        return context


class SelectColumnsStep(IngestStep):
    def __init__(self, projector: RecordProjector) -> None:
        self._projector = projector

    def run(self, context: IngestContext) -> IngestContext:
        if context.table is None:
            raise ValueError("IngestContext.table must be set before column selection")
        context.selection = self._projector.select(context.table.headers)
        return context


class ProjectRecordsStep(IngestStep):
    def __init__(self, projector: RecordProjector) -> None:
        self._projector = projector

    def run(self, context: IngestContext) -> IngestContext:
        if context.table is None:
            raise ValueError("IngestContext.table must be set before projection")
        context.records = self._projector.project(context.selection, context.table.rows)
        Log.info(
            f"Projected {len(context.records)} records over "
            f"{len(context.selection.labels)} selected columns"
        )
        return context


class DetectContactStep(IngestStep):
    def __init__(self, resolver: ContactResolver) -> None:
        self._resolver = resolver

    def run(self, context: IngestContext) -> IngestContext:
        context.contact_key = self._resolver.detect_contact_key(context.selection.labels)
        Log.debug(f"Contact column: {context.contact_key!r}")
        return context


class BuildFiltersStep(IngestStep):
    def __init__(self, heuristic: FilterHeuristic) -> None:
        self._heuristic = heuristic

    def run(self, context: IngestContext) -> IngestContext:
        context.filter_definitions = self._heuristic.build(
            context.records,
            context.selection.labels,
            contact_key=context.contact_key,
        )
        Log.info(
            "Filters: "
            + (", ".join(d.key for d in context.filter_definitions) or "none")
        )
        return context
