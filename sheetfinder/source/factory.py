from sheetfinder.config.settings import Settings
from sheetfinder.source.base import BaseDocumentFetcher
from sheetfinder.source.http_fetcher import HttpxDocumentFetcher


class DocumentFetcherFactory:
    """Creates the transport used to download the source document."""

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentFetcher:
        return HttpxDocumentFetcher(timeout_seconds=settings.fetch_timeout_seconds)
