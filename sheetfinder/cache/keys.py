_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619

KEY_PREFIX = "sheetfinder_cache__"


def fnv1a_32(text: str) -> str:
    """32-bit FNV-1a over UTF-16 code units, as lowercase hex without padding."""
    data = text.encode("utf-16-le")
    h = _FNV_OFFSET_BASIS
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return format(h, "x")


def storage_key(source_url: str, override: str = "") -> str:
    """Cache key for a source: the explicit override, else a hash of the URL."""
    if override:
        return override
    return f"{KEY_PREFIX}{fnv1a_32(source_url or 'no_url')}"
