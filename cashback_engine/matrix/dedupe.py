"""
Offer deduplication.
Collapses normalized entries sharing a (bank, category key) into a single offer.
"""

from typing import Dict, Iterable, List, Tuple

from ..models import Bank, NormalizedEntry


def dedupe(entries: Iterable[NormalizedEntry]) -> List[NormalizedEntry]:
    """
    Keep one entry per (bank, category key), the one with the highest percentage.

    On an exact tie the entry seen first wins. Groups are returned in the
    order their key first appeared, so repeated runs over the same input
    give the same sequence.

    Args:
        entries: Normalized entries in input order

    Returns:
        Deduplicated entries
    """
    best: Dict[Tuple[Bank, str], NormalizedEntry] = {}

    for entry in entries:
        key = entry.offer_key
        existing = best.get(key)
        if existing is None or entry.percentage > existing.percentage:
            best[key] = entry

    return list(best.values())
