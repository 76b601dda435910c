from abc import ABC, abstractmethod


class BaseDocumentFetcher(ABC):
    """Contract for all raw document transports."""

    @abstractmethod
    async def fetch(self, url: str, *, force: bool = False) -> str:
        """Fetch the raw TSV text at *url*.

        Args:
            url: Published document location.
            force: Bypass intermediate HTTP caches.

        Raises:
            TransportError: on any network or HTTP failure.
        """
