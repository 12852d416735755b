"""
Top-N category selection per bank.
"""

from collections import OrderedDict
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from ..models import Bank, BankConfig, NormalizedEntry


def enabled_banks(config: Mapping[Bank, BankConfig]) -> List[Bank]:
    """Enabled banks in configuration order."""
    return [bank for bank, settings in config.items() if settings.enabled]


def partition_by_bank(
    entries: Iterable[NormalizedEntry],
    banks: Iterable[Bank]
) -> Dict[Bank, List[NormalizedEntry]]:
    """Group entries of the given banks, keeping input order within each group."""
    partitions = OrderedDict((bank, []) for bank in banks)
    for entry in entries:
        if entry.bank in partitions:
            partitions[entry.bank].append(entry)
    return partitions


def rank_bank_entries(entries: List[NormalizedEntry]) -> List[NormalizedEntry]:
    """Sort by percentage descending; the sort is stable so ties keep input order."""
    return sorted(entries, key=lambda entry: -entry.percentage)


def select(
    deduped: Iterable[NormalizedEntry],
    config: Mapping[Bank, BankConfig]
) -> FrozenSet[Tuple[Bank, str]]:
    """
    Mark the top-N offers of every enabled bank as selected.

    N is the bank's configured limit. A bank with fewer offers than its
    limit has all of them selected; a limit of 0 selects nothing. Banks that
    are disabled or missing from the configuration select nothing.

    Args:
        deduped: Deduplicated offers
        config: Bank configuration

    Returns:
        Set of (bank, category key) pairs that are selected
    """
    selections = set()
    partitions = partition_by_bank(deduped, enabled_banks(config))

    for bank, bank_entries in partitions.items():
        limit = max(config[bank].limit, 0)
        for entry in rank_bank_entries(bank_entries)[:limit]:
            selections.add(entry.offer_key)

    return frozenset(selections)
