from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedTable:
    """Header row plus data rows, each row exactly len(headers) cells long."""

    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.headers)
