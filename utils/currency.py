"""Price formatting for the storefront."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_CODE = "KES"


def display_currency(amount, currency: str = CURRENCY_CODE) -> str:
    """Format ``amount`` as ``"KES 1,250.00"``."""

    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {abs(value):,.2f}"
