from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CacheEntry:
    """The last successfully fetched raw document for one source."""

    raw_text: str
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CacheLookup:
    """A cache hit together with its freshness at read time."""

    entry: CacheEntry
    age_ms: float | None
    ttl_ms: int

    @property
    def is_stale(self) -> bool:
        # Entries without a usable timestamp are never considered fresh
        if self.age_ms is None:
            return True
        return self.age_ms > self.ttl_ms

    @property
    def is_fresh(self) -> bool:
        return not self.is_stale
