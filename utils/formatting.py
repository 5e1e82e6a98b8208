# utils/formatting.py
"""Display helpers for metric cards and reports. Not used by the calculations."""
from decimal import Decimal, ROUND_HALF_UP


def format_currency(value: float, symbol: str = "$") -> str:
    """
    Whole currency units with thousands separators, halves rounded away
    from zero. The sign goes in front of the symbol: -1234.5 -> '-$1,235'.
    """
    amount = int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,}"


def format_percent(value: float) -> str:
    """Signed percent with two decimals: 1.234 -> '+1.23%', -0.5 -> '-0.50%'."""
    # adding 0.0 turns -0.0 into 0.0 so it prints as '+0.00%'
    return f"{value + 0.0:+.2f}%"
