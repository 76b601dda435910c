from abc import ABC, abstractmethod
from datetime import datetime

from sheetfinder.cache.models import CacheLookup


class BaseCacheStore(ABC):
    """Contract for the single-entry raw document cache."""

    @abstractmethod
    def read(self, now: datetime | None = None) -> CacheLookup | None:
        """Return the cached entry flagged fresh or stale, or None when absent.

        Malformed stored data reads as absent. Stale entries are returned,
        never deleted.
        """

    @abstractmethod
    def write(self, raw_text: str, updated_at: datetime | None = None) -> bool:
        """Overwrite the entry. Returns False when the medium rejected the write."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the entry if present."""
