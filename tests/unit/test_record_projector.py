import pytest

from sheetfinder.records.models import ColumnSelection, Record
from sheetfinder.records.projector import RecordProjector
from sheetfinder.tsv.parser import parse_tsv

DEFAULT_COLUMNS = [*range(11), 28]


class TestSelect:
    def test_drops_positions_past_last_header(self) -> None:
        projector = RecordProjector(DEFAULT_COLUMNS)
        selection = projector.select(["a", "b", "c"])
        assert selection.indexes == (0, 1, 2)
        assert selection.labels == ("a", "b", "c")

    def test_keeps_column_ac_when_present(self) -> None:
        headers = [f"h{i}" for i in range(30)]
        selection = RecordProjector(DEFAULT_COLUMNS).select(headers)
        assert selection.indexes == (*range(11), 28)
        assert selection.labels[-1] == "h28"

    def test_blank_headers_get_fallback_labels(self) -> None:
        headers = ["Nombre", "", *[f"h{i}" for i in range(2, 28)], "  "]
        selection = RecordProjector(DEFAULT_COLUMNS).select(headers)
        assert selection.labels[1] == "Col B"
        assert selection.labels[-1] == "Col AC"


class TestProject:
    def test_every_record_exposes_exactly_selected_labels(self, roster_tsv: str) -> None:
        table = parse_tsv(roster_tsv)
        projector = RecordProjector([0, 2, 40])
        selection = projector.select(table.headers)
        records = projector.project(selection, table.rows)
        assert len(records) == 12
        assert all(set(r.values) == {"Nombre", "Sede"} for r in records)

    def test_values_are_trimmed(self) -> None:
        projector = RecordProjector([0, 1])
        selection = ColumnSelection(indexes=(0, 1), labels=("a", "b"))
        [record] = projector.project(selection, [["  x ", "y  "]])
        assert record.get("a") == "x"
        assert record.get("b") == "y"

    def test_search_blob_is_normalized_and_pipe_joined(self) -> None:
        projector = RecordProjector([0, 1, 2])
        selection = ColumnSelection(indexes=(0, 1, 2), labels=("a", "b", "c"))
        [record] = projector.project(selection, [["María  Gómez", "", "PIANO"]])
        assert record.search_blob == "maria gomez | piano"

    def test_empty_rows_are_skipped(self) -> None:
        projector = RecordProjector([0])
        selection = ColumnSelection(indexes=(0,), labels=("a",))
        assert projector.project(selection, [[], ["x"]]) == [Record({"a": "x"}, "x")]

    def test_round_trip_to_tsv_reproduces_trimmed_cells(self, roster_tsv: str) -> None:
        table = parse_tsv(roster_tsv)
        projector = RecordProjector(DEFAULT_COLUMNS)
        selection = projector.select(table.headers)
        records = projector.project(selection, table.rows)
        for record, row in zip(records, table.rows):
            assert record.to_tsv_line(selection.labels) == "\t".join(c.strip() for c in row)


class TestRecord:
    def test_values_are_read_only(self) -> None:
        record = Record({"a": "1"}, "1")
        with pytest.raises(TypeError):
            record.values["a"] = "2"  # type: ignore[index]
        assert record.get("a") == "1"

    def test_missing_key_reads_as_empty(self) -> None:
        assert Record({"a": "1"}).get("zzz") == ""

    def test_equal_records_hash_alike(self) -> None:
        first = Record({"a": "1", "b": "2"}, "1 | 2")
        second = Record({"a": "1", "b": "2"}, "1 | 2")
        assert first == second
        assert len({first, second, Record({"a": "1"}, "1")}) == 2
