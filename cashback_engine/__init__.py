"""
Cashback Engine - Cashback Matrix Reconciliation System.

Reconciles cashback-category offers from several banks, extracted from
screenshots and comments by external oracles, into a single matrix: which
category to select in which bank this period.

Main Components:
    - patterns: Bank alias tables
    - config: Default bank settings, locales and config loaders
    - normalisation: Bank and category canonicalization
    - matrix: Deduplication, Top-N selection, matrix building, winners
    - export: Tab-separated table, cheat sheet, DataFrames and charts
    - ingest: Oracle payload parsing and session snapshots
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from datetime import datetime

from .models import (
    Bank,
    RawEntry,
    NormalizedEntry,
    BankConfig,
    MatrixCell,
    MatrixRow,
    ReconciliationResult,
)

from .pipeline import reconcile

from .normalisation import (
    EntryNormalizer,
    AliasPolicy,
    DEFAULT_ALIAS_POLICY,
    LEGACY_ALIAS_POLICY,
    get_alias_policy,
)

from .matrix import (
    dedupe,
    select,
    build,
    resolve_winners,
    annotate_winners,
)

from .export import (
    export_tabular,
    export_cheat_sheet,
    matrix_to_dataframe,
    winners_to_dataframe,
    build_winner_chart,
    format_percentage,
)

from .ingest import (
    CashbackSession,
    OraclePayloadError,
    coerce_raw_entries,
    parse_oracle_payload,
)

from .config import (
    DEFAULT_BANK_CONFIG,
    RECONCILIATION_CONFIG,
    EXPORT_LOCALES,
    load_bank_config_csv,
    bank_config_from_dict,
    bank_config_to_dict,
)

from .patterns import (
    BANK_ALIAS_PATTERNS,
    LEGACY_BANK_ALIAS_PATTERNS,
)


__version__ = "1.0.0"
__all__ = [
    # Data model
    "Bank",
    "RawEntry",
    "NormalizedEntry",
    "BankConfig",
    "MatrixCell",
    "MatrixRow",
    "ReconciliationResult",
    # Pipeline stages
    "reconcile",
    "EntryNormalizer",
    "AliasPolicy",
    "DEFAULT_ALIAS_POLICY",
    "LEGACY_ALIAS_POLICY",
    "get_alias_policy",
    "dedupe",
    "select",
    "build",
    "resolve_winners",
    "annotate_winners",
    # Exports
    "export_tabular",
    "export_cheat_sheet",
    "matrix_to_dataframe",
    "winners_to_dataframe",
    "build_winner_chart",
    "format_percentage",
    # Ingest
    "CashbackSession",
    "OraclePayloadError",
    "coerce_raw_entries",
    "parse_oracle_payload",
    # Configuration
    "DEFAULT_BANK_CONFIG",
    "RECONCILIATION_CONFIG",
    "EXPORT_LOCALES",
    "load_bank_config_csv",
    "bank_config_from_dict",
    "bank_config_to_dict",
    # Patterns
    "BANK_ALIAS_PATTERNS",
    "LEGACY_BANK_ALIAS_PATTERNS",
    # Main function
    "run_cashback_reconciliation",
]


def run_cashback_reconciliation(
    entries: List[Dict],
    bank_config: Optional[Union[Mapping[Bank, BankConfig], Dict[str, Dict]]] = None,
    alias_policy: Optional[str] = None,
    locale: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Main entry point for cashback reconciliation.

    This function orchestrates the complete pipeline:
    1. Coerce oracle records into raw entries
    2. Normalize, deduplicate and select Top-N offers per bank
    3. Build the category x bank matrix and resolve winners
    4. Render both exports

    Args:
        entries: Oracle records with keys:
            - bankName: Bank name (free text)
            - category: Category name (free text)
            - percentage: Cashback percentage
            - id: (Optional) Entry identifier
            - originalText: (Optional) Source text
        bank_config: Bank configuration, either Bank-keyed BankConfig values or
            a JSON-style mapping {"Sber": {"enabled": true, "limit": 5}, ...}
            (default: DEFAULT_BANK_CONFIG)
        alias_policy: "default" (case-insensitive) or "legacy" (original table)
        locale: Export locale ("en", "ru")
        generated_at: Date shown in the cheat sheet (default: now)

    Returns:
        Dictionary containing:
            - banks: Enabled banks in column order
            - rows: Matrix rows with cells, selection and winner flags
            - entries: Deduplicated offers
            - selected_count: Number of selected offers
            - exports: {"tabular": str, "cheat_sheet": str}

    Example:
        >>> result = run_cashback_reconciliation([
        ...     {"bankName": "Sber", "category": "Такси", "percentage": 5},
        ...     {"bankName": "Sber", "category": "такси ", "percentage": 7},
        ...     {"bankName": "T-Bank", "category": "Такси", "percentage": 6},
        ... ])
        >>> result["rows"][0]["winners"]
        ['Sber']
    """
    raw_entries = coerce_raw_entries(entries, source="api")

    if bank_config is None:
        config = dict(DEFAULT_BANK_CONFIG)
    elif isinstance(bank_config, Mapping) and all(isinstance(bank, Bank) for bank in bank_config):
        config = dict(bank_config)
    else:
        config = bank_config_from_dict(bank_config)

    result = reconcile(raw_entries, config, alias_policy=get_alias_policy(alias_policy))

    rows = []
    for row in result.rows:
        rows.append({
            "category": row.category_display,
            "category_key": row.category_key,
            "cells": {
                bank.value: (
                    {
                        "percentage": cell.percentage,
                        "is_selected": cell.is_selected,
                        "is_winner": cell.is_winner,
                    }
                    if cell is not None else None
                )
                for bank, cell in row.cells.items()
            },
            "winners": [bank.value for bank in row.winners],
        })

    return {
        "banks": [bank.value for bank in result.banks],
        "rows": rows,
        "entries": [
            {
                "bank": entry.bank.value,
                "category_key": entry.category_key,
                "category": entry.category_display,
                "percentage": entry.percentage,
                "is_selected": entry.offer_key in result.selections,
                "source_id": entry.source_id,
            }
            for entry in result.entries
        ],
        "selected_count": len(result.selections),
        "bank_config": bank_config_to_dict(config),
        "exports": {
            "tabular": export_tabular(result, locale=locale),
            "cheat_sheet": export_cheat_sheet(result, generated_at=generated_at, locale=locale),
        },
    }
