import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Fold text for matching: lowercase, strip diacritics, collapse whitespace.

    "Café  Niño" and "cafe nino" normalize to the same string.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def prettify_label(label: str | None) -> str:
    """Display form of a header label: underscores become spaces, whitespace collapsed."""
    if not label:
        return ""
    return _WHITESPACE_RE.sub(" ", label.replace("_", " ")).strip()
