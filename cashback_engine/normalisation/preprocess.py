"""
Preprocessing utilities for cashback offer normalization.
Handles category text cleanup and percentage coercion of untrusted oracle values.
"""

import math
import re
from typing import Any, Optional


_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: Optional[str]) -> str:
    """
    Collapse runs of whitespace and trim.

    Args:
        text: Raw text (may be None or a non-string)

    Returns:
        Cleaned text, empty string for missing values
    """
    if text is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


def category_display(text: Optional[str], fallback: str = "Unknown") -> str:
    """Trimmed category text with original case, used for rendering."""
    display = normalize_whitespace(text)
    return display or fallback


def category_key(text: Optional[str], fallback: str = "Unknown") -> str:
    """
    Build the equality key for a category.

    Example:
        >>> category_key("  Такси ")
        'такси'
    """
    return category_display(text, fallback).lower()


def coerce_percentage(value: Any) -> float:
    """
    Coerce an untrusted percentage to a non-negative float.

    Accepts numbers and strings like "7", "7.5%", "7,5 %".
    Anything missing, non-finite, negative or unparsable becomes 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().rstrip("%").strip().replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return 0.0

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number
