"""
Reconciliation pipeline.

Raw entries + bank configuration -> normalize -> dedupe -> select -> build -> winners.
The pipeline is a pure function of its inputs; it keeps no state between runs.
"""

import logging
from typing import Iterable, Mapping, Optional

from .models import Bank, BankConfig, RawEntry, ReconciliationResult
from .config.reconciliation_config import DEFAULT_BANK_CONFIG
from .normalisation.alias_matching import AliasPolicy
from .normalisation.engine import EntryNormalizer
from .matrix.dedupe import dedupe
from .matrix.selector import select, enabled_banks
from .matrix.builder import build
from .matrix.winners import annotate_winners

logger = logging.getLogger(__name__)


def reconcile(
    raw_entries: Iterable[RawEntry],
    bank_config: Optional[Mapping[Bank, BankConfig]] = None,
    alias_policy: Optional[AliasPolicy] = None
) -> ReconciliationResult:
    """
    Run the full reconciliation over a snapshot of entries and configuration.

    Args:
        raw_entries: Accumulated raw entries
        bank_config: Bank configuration (default: DEFAULT_BANK_CONFIG)
        alias_policy: Bank alias policy (default: case-insensitive table)

    Returns:
        ReconciliationResult with deduplicated offers, selections and matrix rows
    """
    config = dict(bank_config) if bank_config is not None else dict(DEFAULT_BANK_CONFIG)
    raw_entries = list(raw_entries)

    normalizer = EntryNormalizer(alias_policy=alias_policy)
    normalized = normalizer.normalize_entries(raw_entries)
    deduped = dedupe(normalized)
    selections = select(deduped, config)
    rows = annotate_winners(build(deduped, selections, config))

    result = ReconciliationResult(
        banks=tuple(enabled_banks(config)),
        rows=tuple(rows),
        entries=tuple(deduped),
        selections=selections,
    )

    logger.debug(
        f"Reconciled {len(raw_entries)} raw entries into {len(deduped)} offers: "
        f"{len(result.rows)} rows, {len(selections)} selected, "
        f"{len(result.winning_rows)} rows with a winner"
    )
    return result
