from typing import ClassVar

from sheetfinder.config.settings import Settings
from sheetfinder.contact.base import BasePhoneCanonicalizer
from sheetfinder.contact.canonicalizer import CountryCodeCanonicalizer


class PhoneCanonicalizerFactory:
    """Creates the phone canonicalizer for the configured region."""

    REGIONS: ClassVar[dict[str, tuple[str, int]]] = {
        "CO": ("57", 10),
        "MX": ("52", 10),
        "US": ("1", 10),
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePhoneCanonicalizer:
        region = settings.phone_region.upper()
        spec = cls.REGIONS.get(region)
        if spec is None:
            raise ValueError(
                f"Unknown phone region '{region}'. Choose from: {list(cls.REGIONS)}"
            )
        country_code, national_length = spec
        return CountryCodeCanonicalizer(country_code, national_length=national_length)
