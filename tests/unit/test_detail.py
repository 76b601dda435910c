from sheetfinder.finder.detail import build_chips, build_summary, pick_title
from sheetfinder.records.models import Record

LABELS = ("Código", "Nombre", "Sede", "Perfil", "Barrio")


class TestPickTitle:
    def test_first_non_empty_of_first_three(self) -> None:
        record = Record({"Código": "", "Nombre": "Ana", "Sede": "Norte"})
        assert pick_title(record, LABELS) == "Ana"

    def test_falls_back_to_any_column(self) -> None:
        record = Record({"Perfil": "Pianista"})
        assert pick_title(record, LABELS) == "Pianista"

    def test_empty_record(self) -> None:
        assert pick_title(Record({}), LABELS) == ""


class TestBuildChips:
    def test_skips_long_and_duplicate_values(self) -> None:
        record = Record(
            {
                "Código": "Ana",
                "Nombre": "Ana",
                "Sede": "Norte",
                "Perfil": "Pianista con veinte años de experiencia",
                "Barrio": "Chapinero",
            }
        )
        assert build_chips(record, LABELS) == ["Ana", "Norte", "Chapinero"]

    def test_no_chips_for_empty_record(self) -> None:
        assert build_chips(Record({}), LABELS) == []


class TestBuildSummary:
    def test_default_takes_first_six_filled_fields(self) -> None:
        labels = [f"c_{i}" for i in range(8)]
        record = Record({label: f"v{i}" for i, label in enumerate(labels)})
        summary = build_summary(record, labels)
        assert summary.splitlines() == [f"c {i}: v{i}" for i in range(6)]

    def test_configured_keys_keep_their_order(self) -> None:
        record = Record({"Nombre": "Ana", "Sede": "Norte"})
        assert build_summary(record, LABELS, ["Sede", "Nombre"]) == "Sede: Norte\nNombre: Ana"

    def test_empty_record(self) -> None:
        assert build_summary(Record({}), LABELS) == ""
