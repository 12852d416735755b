"""
Matrix Module for the Cashback Reconciliation Engine.

Builds the category x bank matrix through:
- Deduplication (one offer per bank and category)
- Selection (Top-N offers per enabled bank)
- Matrix building (rows per category, columns per enabled bank)
- Winner resolution (best selected offer per category)
"""

from .dedupe import dedupe
from .selector import select, enabled_banks, partition_by_bank, rank_bank_entries
from .builder import build
from .winners import resolve_winners, annotate_winners

__all__ = [
    "dedupe",
    "select",
    "enabled_banks",
    "partition_by_bank",
    "rank_bank_entries",
    "build",
    "resolve_winners",
    "annotate_winners",
]
