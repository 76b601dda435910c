import re
from typing import ClassVar

from sheetfinder.contact.base import BasePhoneCanonicalizer


class CountryCodeCanonicalizer(BasePhoneCanonicalizer):
    """Prefixes national numbers with a fixed country code.

    Best effort only: numbers that are neither national nor already
    prefixed are returned as bare digits, which may not be dialable.
    """

    PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(r"(\+?\d[\d\s().-]{6,}\d)")
    _NON_DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\D")

    def __init__(self, country_code: str, national_length: int = 10) -> None:
        self._country_code = country_code
        self._national_length = national_length
        self._full_length = len(country_code) + national_length

    def is_phone_like(self, text: str) -> bool:
        return bool(text) and self.PHONE_RE.search(text) is not None

    def canonicalize(self, text: str) -> str | None:
        if not text:
            return None
        match = self.PHONE_RE.search(text)
        if match is None:
            return None
        digits = self._NON_DIGIT_RE.sub("", match.group(1))

        if len(digits) == self._national_length:
            return f"{self._country_code}{digits}"
        if digits.startswith(self._country_code) and len(digits) >= self._full_length:
            return digits[: self._full_length]
        return digits
