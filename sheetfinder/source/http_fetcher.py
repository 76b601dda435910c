import time

import httpx

from sheetfinder.logging.logger import Log
from sheetfinder.source.base import BaseDocumentFetcher
from sheetfinder.source.exceptions import TransportError


def cache_busted(url: str, stamp_ms: int) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}__t={stamp_ms}"


class HttpxDocumentFetcher(BaseDocumentFetcher):
    """Fetches published TSV documents over HTTP with httpx."""

    ACCEPT = "text/tab-separated-values,text/plain"

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch(self, url: str, *, force: bool = False) -> str:
        target = cache_busted(url, int(time.time() * 1000)) if force else url
        headers = {"Accept": self.ACCEPT}
        if force:
            headers["Cache-Control"] = "no-store"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(target, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"HTTP {exc.response.status_code} fetching TSV"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error fetching TSV: {exc}") from exc

        Log.debug(f"Fetched {len(response.text)} chars from {url}")
        return response.text
