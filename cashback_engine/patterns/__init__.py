"""
Bank Alias Pattern Definitions for the Cashback Reconciliation Engine.

Contains the ordered alias tables used to canonicalize bank names:
- Default table (Latin, Cyrillic and transliterated aliases)
- Legacy table (original case-sensitive aliases)
"""

from .bank_aliases import (
    BANK_ALIAS_PATTERNS,
    LEGACY_BANK_ALIAS_PATTERNS,
)

__all__ = [
    "BANK_ALIAS_PATTERNS",
    "LEGACY_BANK_ALIAS_PATTERNS",
]
