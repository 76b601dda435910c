from enum import Enum


class SyncStatus(str, Enum):
    """Where the currently shown data came from."""

    IDLE = "idle"
    LOADING = "loading"
    OK = "ok"
    OK_CACHE = "ok (cache)"
    STALE_FALLBACK = "stale fallback"
    ERROR = "error"
