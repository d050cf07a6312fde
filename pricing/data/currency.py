"""
Country-name normalisation and conversion of local prices to EUR.
"""
from __future__ import annotations

from typing import Mapping, Optional

from pricing.config import COUNTRY_ALIASES, EXCHANGE_RATES


class CurrencyNormalizer:
    """Country lookups over fixed alias / exchange-rate tables.

    Tables default to the static configuration; pass alternates to override.
    Never raises: unknown countries keep their cleaned spelling and convert 1:1.
    """

    def __init__(
        self,
        exchange_rates: Mapping[str, float] | None = None,
        country_aliases: Mapping[str, str] | None = None,
    ) -> None:
        rates = EXCHANGE_RATES if exchange_rates is None else exchange_rates
        aliases = COUNTRY_ALIASES if country_aliases is None else country_aliases
        self._rates = {k.strip().upper(): float(v) for k, v in rates.items()}
        self._aliases = {k.strip().upper(): v for k, v in aliases.items()}

    def normalize_country(self, raw: Optional[str]) -> str:
        """Map a code, abbreviation or spelling to its canonical country name."""
        if raw is None:
            return ""
        key = str(raw).strip().upper()
        return self._aliases.get(key, key)

    def rate(self, country: Optional[str]) -> float:
        """Local units per EUR; 1.0 for unknown countries."""
        if not country:
            return 1.0
        rate = self._rates.get(str(country).strip().upper())
        # a zero rate would make conversion undefined; treat it like an unknown country
        return rate if rate else 1.0

    def convert_to_reference(self, value: float, country: Optional[str]) -> float:
        return value / self.rate(country)
