"""
Money formatting. Amounts are stored and passed around in pence.
"""
from decimal import Decimal, ROUND_HALF_UP


def format_pence(amount_pence) -> str:
    """10500 -> "£105.00"."""
    pounds = (Decimal(int(amount_pence)) / Decimal("100")).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"£{pounds}"
