from dataclasses import dataclass

from sheetfinder.config.settings import Settings


@dataclass(frozen=True)
class FilterPolicy:
    """Thresholds and weights for choosing categorical filter columns."""

    max_filters: int = 6
    min_filled: int = 10
    min_filled_ratio: float = 0.25
    max_unique: int = 40
    fill_weight: float = 10.0
    cardinality_weight: float = 0.12
    value_key_length: int = 80

    @classmethod
    def from_settings(cls, settings: Settings) -> "FilterPolicy":
        return cls(
            max_filters=settings.max_filters,
            min_filled=settings.filter_min_filled,
            min_filled_ratio=settings.filter_min_filled_ratio,
            max_unique=settings.filter_max_unique,
            fill_weight=settings.filter_fill_weight,
            cardinality_weight=settings.filter_cardinality_weight,
            value_key_length=settings.filter_value_key_length,
        )


@dataclass(frozen=True)
class FilterDefinition:
    """A categorical facet: column key, display label and its sorted value domain."""

    key: str
    label: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class ColumnStats:
    """Fill and cardinality figures of one candidate column."""

    key: str
    total: int
    filled: int
    counts: dict[str, int]

    @property
    def unique_count(self) -> int:
        return len(self.counts)
