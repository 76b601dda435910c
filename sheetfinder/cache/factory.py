from pathlib import Path

from sheetfinder.cache.base import BaseCacheStore
from sheetfinder.cache.keys import storage_key
from sheetfinder.cache.store import FileCacheStore
from sheetfinder.config.settings import Settings


class CacheStoreFactory:
    """Creates the cache store for the configured source."""

    @classmethod
    def create(cls, settings: Settings) -> BaseCacheStore:
        return FileCacheStore(
            directory=Path(settings.cache_dir),
            key=storage_key(settings.tsv_url, settings.storage_key),
            ttl_ms=settings.cache_ttl_ms,
        )
