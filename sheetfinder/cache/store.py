"""Raw document cache backed by JSON documents.

Persisted shape: {"rawTSV": "<text>", "updatedAt": "<ISO-8601>"}.
Caching is an optimization only, so every medium failure is logged and
swallowed here instead of reaching the caller.
"""

import json
from abc import abstractmethod
from collections.abc import Callable
from contextlib import suppress
from datetime import datetime, timezone
from pathlib import Path

from sheetfinder.cache.base import BaseCacheStore
from sheetfinder.cache.exceptions import CachePersistenceError
from sheetfinder.cache.models import CacheEntry, CacheLookup
from sheetfinder.logging.logger import Log


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def parse_timestamp(value: object) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def encode_entry(entry: CacheEntry) -> str:
    updated_at = entry.updated_at or utc_now()
    return json.dumps({"rawTSV": entry.raw_text, "updatedAt": format_timestamp(updated_at)})


def decode_entry(payload: str) -> CacheEntry | None:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    raw_text = data.get("rawTSV")
    if not raw_text or not isinstance(raw_text, str):
        return None
    return CacheEntry(raw_text=raw_text, updated_at=parse_timestamp(data.get("updatedAt")))


class JsonCacheStore(BaseCacheStore):
    """TTL bookkeeping and JSON encoding shared by all media."""

    def __init__(
        self,
        key: str,
        ttl_ms: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._key = key
        self._ttl_ms = ttl_ms
        self._clock = clock

    @property
    def key(self) -> str:
        return self._key

    def read(self, now: datetime | None = None) -> CacheLookup | None:
        try:
            payload = self._load(self._key)
        except CachePersistenceError as exc:
            Log.warning(f"Cache read failed for '{self._key}': {exc}")
            return None
        if payload is None:
            return None

        entry = decode_entry(payload)
        if entry is None:
            Log.warning(f"Ignoring malformed cache entry '{self._key}'")
            return None

        age_ms: float | None = None
        if entry.updated_at is not None:
            current = now or self._clock()
            if current.tzinfo is None:
                current = current.replace(tzinfo=timezone.utc)
            age_ms = (current - entry.updated_at).total_seconds() * 1000
        return CacheLookup(entry=entry, age_ms=age_ms, ttl_ms=self._ttl_ms)

    def write(self, raw_text: str, updated_at: datetime | None = None) -> bool:
        entry = CacheEntry(raw_text=raw_text, updated_at=updated_at or self._clock())
        try:
            self._save(self._key, encode_entry(entry))
        except CachePersistenceError as exc:
            Log.warning(f"Cache write skipped for '{self._key}': {exc}")
            return False
        Log.debug(f"Cached {len(raw_text)} chars under '{self._key}'")
        return True

    def clear(self) -> None:
        try:
            self._delete(self._key)
        except CachePersistenceError as exc:
            Log.warning(f"Cache clear failed for '{self._key}': {exc}")

    @abstractmethod
    def _load(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def _save(self, key: str, payload: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def _delete(self, key: str) -> None:
        raise NotImplementedError


class FileCacheStore(JsonCacheStore):
    """One JSON file per key inside a cache directory."""

    def __init__(
        self,
        directory: Path,
        key: str,
        ttl_ms: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(key, ttl_ms, clock)
        self._directory = directory

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def _load(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CachePersistenceError(f"Cannot read {path}: {exc}") from exc

    def _save(self, key: str, payload: str) -> None:
        path = self._path(key)
        # Old entry stays intact until the new one is fully on disk
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as exc:
            with suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise CachePersistenceError(f"Cannot write {path}: {exc}") from exc

    def _delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise CachePersistenceError(f"Cannot delete cache file: {exc}") from exc


class MemoryCacheStore(JsonCacheStore):
    """Process-local medium; holds encoded payloads like the file store does."""

    def __init__(
        self,
        key: str,
        ttl_ms: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(key, ttl_ms, clock)
        self._payloads: dict[str, str] = {}

    def _load(self, key: str) -> str | None:
        return self._payloads.get(key)

    def _save(self, key: str, payload: str) -> None:
        self._payloads[key] = payload

    def _delete(self, key: str) -> None:
        self._payloads.pop(key, None)
