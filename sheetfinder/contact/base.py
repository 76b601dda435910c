from abc import ABC, abstractmethod


class BasePhoneCanonicalizer(ABC):
    """Contract for region-specific phone canonicalization strategies."""

    @abstractmethod
    def canonicalize(self, text: str) -> str | None:
        """Extract a phone number from *text* as an international digit string.

        Args:
            text: Free-form contact value, e.g. "+57 300 123 4567".

        Returns:
            Digits suitable for a wa.me link, or None when *text* holds
            nothing phone-like.
        """

    def is_phone_like(self, text: str) -> bool:
        """True when *text* holds something this strategy would canonicalize."""
        return self.canonicalize(text) is not None
