from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from sheetfinder.config.settings import Settings
from sheetfinder.contact.canonicalizer import CountryCodeCanonicalizer
from sheetfinder.contact.resolver import ContactResolver
from sheetfinder.ingest.ingestor import Ingestor, build_ingestor
from sheetfinder.ingest.pipeline import IngestContext
from sheetfinder.ingest.steps import ProjectRecordsStep, SelectColumnsStep
from sheetfinder.records.projector import RecordProjector
from sheetfinder.tsv.exceptions import EmptyDocumentError

T0 = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


def _make_ingestor() -> Ingestor:
    resolver = ContactResolver(CountryCodeCanonicalizer("57"))
    return build_ingestor(Settings(), resolver)


class TestIngestor:
    def test_builds_full_snapshot(self, roster_tsv: str) -> None:
        snapshot = _make_ingestor().ingest(roster_tsv, T0, generation=3)

        assert snapshot.headers[0] == "Nombre"
        assert snapshot.indexes == (0, 1, 2, 3, 4, 5)
        assert snapshot.labels == ("Nombre", "Instrumento", "Sede", "Celular", "Correo", "Notas")
        assert len(snapshot.records) == 12
        assert snapshot.contact_key == "Celular"
        assert [d.key for d in snapshot.filter_definitions] == [
            "Sede",
            "Instrumento",
            "Nombre",
            "Correo",
        ]
        assert snapshot.filter_keys == frozenset({"Sede", "Instrumento", "Nombre", "Correo"})
        assert snapshot.updated_at == T0
        assert snapshot.generation == 3
        assert hash(snapshot) == hash(_make_ingestor().ingest(roster_tsv, T0, generation=3))

    def test_reingest_is_idempotent(self, roster_tsv: str) -> None:
        ingestor = _make_ingestor()
        first = ingestor.ingest(roster_tsv, T0)
        second = ingestor.ingest(roster_tsv, T0)
        assert first == second

    def test_line_endings_do_not_change_result(
        self, roster_tsv: str, roster_tsv_crlf: str
    ) -> None:
        ingestor = _make_ingestor()
        lf = ingestor.ingest(roster_tsv, T0)
        crlf = ingestor.ingest(roster_tsv_crlf, T0)
        assert lf.records == crlf.records
        assert lf.filter_definitions == crlf.filter_definitions

    def test_parse_failure_propagates(self) -> None:
        with pytest.raises(EmptyDocumentError):
            _make_ingestor().ingest("  \n ", T0)

    def test_runs_steps_in_order(self) -> None:
        calls: list[str] = []
        first = MagicMock()
        first.run.side_effect = lambda ctx: (calls.append("first"), ctx)[1]
        second = MagicMock()
        second.run.side_effect = lambda ctx: (calls.append("second"), ctx)[1]

        Ingestor(steps=[first, second]).ingest("a\n", T0)

        assert calls == ["first", "second"]


class TestStepPreconditions:
    def test_select_requires_table(self) -> None:
        step = SelectColumnsStep(RecordProjector([0]))
        with pytest.raises(ValueError, match="table must be set"):
            step.run(IngestContext(raw_text="a", updated_at=T0))

    def test_project_requires_table(self) -> None:
        step = ProjectRecordsStep(RecordProjector([0]))
        with pytest.raises(ValueError, match="table must be set"):
            step.run(IngestContext(raw_text="a", updated_at=T0))
