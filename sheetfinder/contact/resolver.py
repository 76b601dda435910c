"""Heuristics for finding a reachable phone or e-mail in a record."""

import re
from collections.abc import Sequence
from typing import ClassVar

from sheetfinder.contact.base import BasePhoneCanonicalizer
from sheetfinder.records.models import Record
from sheetfinder.text.normalize import normalize

WHATSAPP_URL = "https://wa.me/"


class ContactResolver:
    """Detects the contact column of a document and extracts contact values."""

    CONTACT_HEADER_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(whatsapp|wpp|cel|m[oó]vil|tel[eé]fono|phone|contacto|correo|e-?mail|mail)",
        re.IGNORECASE,
    )
    FALLBACK_KEYWORDS: ClassVar[tuple[str, ...]] = (
        "telefono",
        "cel",
        "whatsapp",
        "correo",
        "email",
    )

    def __init__(
        self,
        canonicalizer: BasePhoneCanonicalizer,
        contact_key: str = "",
    ) -> None:
        self._canonicalizer = canonicalizer
        self._contact_key = contact_key

    def detect_contact_key(self, labels: Sequence[str]) -> str | None:
        """First label that looks like a contact column, in header order."""
        for label in labels:
            if self.CONTACT_HEADER_RE.search(label):
                return label
        for label in labels:
            folded = normalize(label)
            if any(keyword in folded for keyword in self.FALLBACK_KEYWORDS):
                return label
        return None

    def contact_value(
        self,
        record: Record,
        labels: Sequence[str],
        detected_key: str | None,
    ) -> str:
        """Contact for *record*: configured key, then detected key, then a value scan."""
        if self._contact_key and record.get(self._contact_key).strip():
            return record.get(self._contact_key).strip()
        if detected_key and record.get(detected_key).strip():
            return record.get(detected_key).strip()
        for label in labels:
            value = record.get(label).strip()
            if self._canonicalizer.is_phone_like(value) or "@" in value:
                return value
        return ""

    def phone(self, value: str) -> str | None:
        return self._canonicalizer.canonicalize(value)

    def whatsapp_link(self, value: str) -> str | None:
        digits = self.phone(value)
        if not digits:
            return None
        return f"{WHATSAPP_URL}{digits}"
