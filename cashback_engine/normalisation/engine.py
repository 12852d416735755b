"""
Entry Normalizer for cashback offers.
Turns untrusted oracle entries into canonical (bank, category key) offers.
"""

from typing import Iterable, List, Optional

from ..models import Bank, NormalizedEntry, RawEntry
from ..config.reconciliation_config import RECONCILIATION_CONFIG
from .alias_matching import AliasPolicy, DEFAULT_ALIAS_POLICY, canonicalize_bank
from .preprocess import category_display, coerce_percentage


class EntryNormalizer:
    """Canonicalizes bank names and category text of raw entries."""

    def __init__(
        self,
        alias_policy: Optional[AliasPolicy] = None,
        fallback_bank: Bank = RECONCILIATION_CONFIG["fallback_bank"],
        fallback_category: str = RECONCILIATION_CONFIG["fallback_category"]
    ):
        """
        Initialize the normalizer.

        Args:
            alias_policy: Alias table and case rule (default: case-insensitive table)
            fallback_bank: Tag for names no alias matches
            fallback_category: Label for missing or empty categories
        """
        self.alias_policy = alias_policy or DEFAULT_ALIAS_POLICY
        self.fallback_bank = fallback_bank
        self.fallback_category = fallback_category

    def normalize(self, raw: RawEntry) -> NormalizedEntry:
        """
        Normalize a single raw entry. Never fails; bad fields are defaulted.

        Args:
            raw: Raw entry from an oracle

        Returns:
            NormalizedEntry with canonical bank, category key and display text
        """
        display = category_display(raw.category, self.fallback_category)
        return NormalizedEntry(
            bank=canonicalize_bank(raw.bank_name, self.alias_policy, self.fallback_bank),
            category_key=display.lower(),
            category_display=display,
            percentage=coerce_percentage(raw.percentage),
            source_id=raw.id,
        )

    def normalize_entries(self, entries: Iterable[RawEntry]) -> List[NormalizedEntry]:
        """Normalize entries, preserving input order."""
        return [self.normalize(raw) for raw in entries]
