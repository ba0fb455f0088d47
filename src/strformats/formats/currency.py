"""ISO 4217 currency codes."""

from __future__ import annotations

import re

from strformats.formats import register
from strformats.formats.base import StringFormat

ISO_CURRENCIES: dict[str, bool] = {
    code: True
    for code in (
        "AED ARS AUD BGN BRL CAD CHF CLP CNY COP CZK DKK EGP EUR GBP HKD HUF IDR ILS INR "
        "ISK JPY KES KRW MAD MXN MYR NGN NOK NZD PEN PHP PKR PLN RON RSD RUB SAR SEK SGD "
        "THB TRY TWD UAH USD VND ZAR"
    ).split()
}
"""Known currency codes. Setting a code to False forbids it without removing it."""

_CURRENCY = re.compile(r"^[A-Za-z]{3}$")


class Currency(StringFormat):
    """A three-letter ISO 4217 currency code, e.g. ``Currency("EUR")``."""

    schema_format = "currency"


def is_currency(value: str) -> bool:
    """Check for a known, allowed currency code (case-insensitive)."""
    if not _CURRENCY.match(value):
        return False
    return ISO_CURRENCIES.get(value.upper(), False)


register("currency", Currency, is_currency)
