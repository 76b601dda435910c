import pytest

HEADERS = ["Nombre", "Instrumento", "Sede", "Celular", "Correo", "Notas"]

ROWS = [
    ["María Gómez", "Piano", "Norte", "3001234501", "maria@example.com", "Lunes"],
    ["Juan Pérez", "Guitarra", "Sur", "3001234502", "juan@example.com"],
    ["Ana Ruiz", "Piano", "Norte", "3001234503", "ana@example.com"],
    ["Luis Díaz", "Violín", "Sur", "3001234504", "luis@example.com"],
    ["Sofía Mora", "Piano", "Norte", "3001234505", "sofia@example.com", "Martes"],
    ["Pedro León", "Guitarra", "Norte", "3001234506", "pedro@example.com"],
    ["Laura Vega", "Violín", "Sur", "3001234507", "laura@example.com"],
    ["Carlos Ríos", "Piano", "Norte", "3001234508", "carlos@example.com"],
    ["Elena Soto", "Guitarra", "Sur", "3001234509", "elena@example.com"],
    ["Diego Paz", "Violín", "Norte", "3001234510", "diego@example.com"],
    ["Marta Gil", "Piano", "Sur", "3001234511", "marta@example.com"],
    ["Andrés Luna", "Guitarra", "Norte", "3001234512", "andres@example.com"],
]


def make_tsv(headers: list[str], rows: list[list[str]], newline: str = "\n") -> str:
    return newline.join("\t".join(cells) for cells in [headers, *rows]) + newline


@pytest.fixture()
def roster_tsv() -> str:
    """Twelve instructors: 5 piano / 4 guitar / 3 violin, 7 north / 5 south."""
    return make_tsv(HEADERS, ROWS)


@pytest.fixture()
def roster_tsv_crlf() -> str:
    return make_tsv(HEADERS, ROWS, newline="\r\n")


@pytest.fixture()
def tsv_builder():  # type: ignore[no-untyped-def]
    return make_tsv
