from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ColumnSelection:
    """Selected column positions and their resolved header labels, in order."""

    indexes: tuple[int, ...] = ()
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class Record:
    """One projected row: label -> trimmed value, plus its normalized search blob."""

    values: Mapping[str, str] = field(default_factory=dict)
    search_blob: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash((tuple(self.values.items()), self.search_blob))

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def to_tsv_line(self, labels: tuple[str, ...] | list[str]) -> str:
        """Serialize the record back to one tab-separated line in *labels* order."""
        return "\t".join(self.get(label) for label in labels)
