"""
Formatting helpers shared by the exporters.
"""

from datetime import datetime
from decimal import Decimal


def format_number(value: float) -> str:
    """
    Render a percentage value in plain decimal notation without trailing zeros.

    The shortest repr of the float is used, so no digits are rounded away.

    Example:
        >>> format_number(7.0), format_number(7.5), format_number(1e-7)
        ('7', '7.5', '0.0000001')
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def format_percentage(value: float) -> str:
    return f"{format_number(value)}%"


def format_period(moment: datetime, strings: dict) -> str:
    """Month and year in the locale's words, e.g. "October 2026"."""
    return f"{strings['months'][moment.month - 1]} {moment.year}"
