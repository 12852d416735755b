"""
Normalisation Module for the Cashback Reconciliation Engine.

Canonicalizes raw oracle entries through:
- Preprocessing (category cleanup, percentage coercion)
- Alias matching (ordered bank alias tables under a case policy)
"""

from .engine import EntryNormalizer
from .preprocess import (
    normalize_whitespace,
    category_display,
    category_key,
    coerce_percentage,
)
from .alias_matching import (
    AliasPolicy,
    DEFAULT_ALIAS_POLICY,
    LEGACY_ALIAS_POLICY,
    ALIAS_POLICIES,
    get_alias_policy,
    match_bank_alias,
    canonicalize_bank,
)

__all__ = [
    # Main normalizer
    "EntryNormalizer",
    # Preprocessing utilities
    "normalize_whitespace",
    "category_display",
    "category_key",
    "coerce_percentage",
    # Alias matching
    "AliasPolicy",
    "DEFAULT_ALIAS_POLICY",
    "LEGACY_ALIAS_POLICY",
    "ALIAS_POLICIES",
    "get_alias_policy",
    "match_bank_alias",
    "canonicalize_bank",
]
