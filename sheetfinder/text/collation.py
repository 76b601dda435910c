"""Locale-aware ordering of filter values via ICU."""

from collections.abc import Iterable

import icu  # type: ignore[import-untyped]


class Collation:
    """Sorts strings the way a Spanish reader expects, ignoring case and accents."""

    def __init__(self, locale: str = "es") -> None:
        self._collator: icu.Collator = icu.Collator.createInstance(icu.Locale(locale))
        # Primary strength: base letters only, so "Ábaco" == "abaco"
        self._collator.setStrength(icu.Collator.PRIMARY)

    def sorted(self, values: Iterable[str]) -> list[str]:
        return sorted(values, key=self._collator.getSortKey)
