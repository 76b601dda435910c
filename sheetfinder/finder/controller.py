"""Owns the loaded dataset and the user's query.

Load flow: show the cached document first, then fetch when the cache is
missing or stale. A failed fetch keeps whatever is already shown, falling
back to the cached document when nothing is loaded yet.

Refreshes are single-flight by generation: a refresh started later wins,
and an older one finishing afterwards is discarded.
"""

from datetime import datetime

from sheetfinder.cache.base import BaseCacheStore
from sheetfinder.cache.factory import CacheStoreFactory
from sheetfinder.cache.store import utc_now
from sheetfinder.config.settings import Settings
from sheetfinder.contact.factory import PhoneCanonicalizerFactory
from sheetfinder.contact.resolver import ContactResolver
from sheetfinder.filters.models import FilterDefinition
from sheetfinder.finder.detail import build_chips, build_summary, pick_title
from sheetfinder.finder.exceptions import MissingSourceError
from sheetfinder.finder.state import SyncStatus
from sheetfinder.ingest.ingestor import Ingestor, build_ingestor
from sheetfinder.ingest.models import DatasetSnapshot
from sheetfinder.logging.logger import Log
from sheetfinder.query.engine import execute
from sheetfinder.query.models import QueryResult, QueryState
from sheetfinder.records.models import Record
from sheetfinder.source.base import BaseDocumentFetcher
from sheetfinder.source.exceptions import TransportError
from sheetfinder.source.factory import DocumentFetcherFactory
from sheetfinder.tsv.exceptions import TsvError


class FinderController:
    def __init__(
        self,
        settings: Settings,
        ingestor: Ingestor,
        cache: BaseCacheStore,
        fetcher: BaseDocumentFetcher,
        resolver: ContactResolver,
    ) -> None:
        self._settings = settings
        self._ingestor = ingestor
        self._cache = cache
        self._fetcher = fetcher
        self._resolver = resolver
        self._snapshot: DatasetSnapshot | None = None
        self._generation = 0
        self.status = SyncStatus.IDLE
        self.query = QueryState(page_size=settings.page_size)

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> DatasetSnapshot | None:
        return self._snapshot

    @property
    def labels(self) -> tuple[str, ...]:
        return self._snapshot.labels if self._snapshot else ()

    @property
    def records(self) -> tuple[Record, ...]:
        return self._snapshot.records if self._snapshot else ()

    @property
    def filter_definitions(self) -> tuple[FilterDefinition, ...]:
        return self._snapshot.filter_definitions if self._snapshot else ()

    @property
    def updated_at(self) -> datetime | None:
        return self._snapshot.updated_at if self._snapshot else None

    def ingest(self, raw_text: str, updated_at: datetime | None = None) -> DatasetSnapshot:
        """Parse *raw_text* and install it as the current dataset.

        Raises:
            TsvError: if the text cannot be parsed. The current dataset is kept.
        """
        snapshot = self._ingestor.ingest(
            raw_text, updated_at or utc_now(), generation=self._generation
        )
        self._install(snapshot)
        return snapshot

    def _install(self, snapshot: DatasetSnapshot) -> None:
        valid_keys = snapshot.filter_keys
        self.query.filters = {
            key: value for key, value in self.query.filters.items() if key in valid_keys
        }
        self.query.page = 1
        self._snapshot = snapshot

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> SyncStatus:
        """Show cached data if any, then fetch unless the cache is fresh."""
        self._require_source()

        lookup = self._cache.read()
        if lookup is not None:
            try:
                self.ingest(lookup.entry.raw_text, lookup.entry.updated_at)
                self.status = SyncStatus.OK_CACHE
                Log.info(f"Loaded {len(self.records)} records from cache")
            except TsvError as exc:
                Log.warning(f"Cached document is invalid, discarding it: {exc}")
                self._cache.clear()
                lookup = None

        if lookup is None or lookup.is_stale:
            return await self.refresh(force=True)
        return self.status

    async def refresh(self, force: bool = True) -> SyncStatus:
        """Fetch the source document and replace the dataset with it."""
        url = self._require_source()
        self._generation += 1
        generation = self._generation
        self.status = SyncStatus.LOADING

        try:
            raw_text = await self._fetcher.fetch(url, force=force)
        except TransportError as exc:
            if generation != self._generation:
                return self.status
            return self._fall_back(exc)

        if generation != self._generation:
            Log.debug(f"Refresh {generation} superseded by {self._generation}, discarding")
            return self.status

        try:
            snapshot = self._ingestor.ingest(raw_text, utc_now(), generation=generation)
        except TsvError as exc:
            Log.error(f"Fetched document could not be parsed: {exc}")
            self.status = SyncStatus.ERROR
            return self.status

        self._install(snapshot)
        self._cache.write(raw_text, snapshot.updated_at)
        self.status = SyncStatus.OK
        Log.info(f"Loaded {len(snapshot.records)} records from source")
        return self.status

    def _fall_back(self, exc: TransportError) -> SyncStatus:
        Log.error(f"Could not fetch TSV: {exc}")
        if self._snapshot is None:
            lookup = self._cache.read()
            if lookup is not None:
                try:
                    self.ingest(lookup.entry.raw_text, lookup.entry.updated_at)
                except TsvError as parse_exc:
                    Log.warning(f"Cached document is invalid: {parse_exc}")
        self.status = SyncStatus.ERROR if self._snapshot is None else SyncStatus.STALE_FALLBACK
        return self.status

    def _require_source(self) -> str:
        if not self._settings.tsv_url:
            self.status = SyncStatus.ERROR
            raise MissingSourceError("tsv_url is not configured")
        return self._settings.tsv_url

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def set_search(self, text: str) -> None:
        self.query.search = text or ""
        self.query.page = 1

    def set_filter(self, key: str, value: str) -> None:
        """Constrain *key* to *value*; an empty value removes the constraint."""
        if value:
            self.query.filters[key] = value
        else:
            self.query.filters.pop(key, None)
        self.query.page = 1

    def reset_filters(self) -> None:
        self.query.filters = {}
        self.query.page = 1

    def set_page(self, page: int) -> QueryResult:
        self.query.page = page
        return self.view()

    def next_page(self) -> QueryResult:
        return self.set_page(self.query.page + 1)

    def previous_page(self) -> QueryResult:
        return self.set_page(self.query.page - 1)

    def view(self) -> QueryResult:
        """Current page of results; the stored page is clamped to what exists."""
        result = execute(self.records, self.query)
        self.query.page = result.page
        return result

    # ------------------------------------------------------------------
    # Record detail
    # ------------------------------------------------------------------

    def contact_value(self, record: Record) -> str:
        contact_key = self._snapshot.contact_key if self._snapshot else None
        return self._resolver.contact_value(record, self.labels, contact_key)

    def whatsapp_link(self, record: Record) -> str | None:
        return self._resolver.whatsapp_link(self.contact_value(record))

    def title(self, record: Record) -> str:
        return pick_title(record, self.labels)

    def chips(self, record: Record) -> list[str]:
        return build_chips(record, self.labels)

    def summary(self, record: Record) -> str:
        return build_summary(record, self.labels, self._settings.summary_keys)


def build_controller(
    settings: Settings,
    fetcher: BaseDocumentFetcher | None = None,
    cache: BaseCacheStore | None = None,
) -> FinderController:
    """Build a FinderController with all required adapters."""
    resolver = ContactResolver(
        PhoneCanonicalizerFactory.create(settings),
        contact_key=settings.contact_key,
    )
    return FinderController(
        settings=settings,
        ingestor=build_ingestor(settings, resolver),
        cache=cache if cache is not None else CacheStoreFactory.create(settings),
        fetcher=fetcher if fetcher is not None else DocumentFetcherFactory.create(settings),
        resolver=resolver,
    )
