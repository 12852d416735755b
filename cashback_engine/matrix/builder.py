"""
Category x bank matrix construction.

Rows are the categories offered by enabled banks; columns are the enabled
banks in configuration order. Rows are identified by category key, so
"Такси" and "такси " from different banks share one row.
"""

from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models import Bank, BankConfig, MatrixCell, MatrixRow, NormalizedEntry
from .selector import enabled_banks


def build(
    deduped: Iterable[NormalizedEntry],
    selections: AbstractSet[Tuple[Bank, str]],
    config: Mapping[Bank, BankConfig]
) -> List[MatrixRow]:
    """
    Build the ordered matrix rows.

    Args:
        deduped: Deduplicated offers (one per bank and category key)
        selections: Selected (bank, category key) pairs
        config: Bank configuration

    Returns:
        Rows sorted by display text (code-point order), then by key
    """
    columns = enabled_banks(config)
    column_set = set(columns)

    offers: Dict[Tuple[Bank, str], NormalizedEntry] = {}
    category_keys: Dict[str, None] = {}
    for entry in deduped:
        if entry.bank not in column_set:
            continue
        offers[entry.offer_key] = entry
        category_keys.setdefault(entry.category_key)

    rows = []
    for key in category_keys:
        cells: Dict[Bank, Optional[MatrixCell]] = {}
        display = None
        for bank in columns:
            entry = offers.get((bank, key))
            if entry is None:
                cells[bank] = None
                continue
            if display is None:
                display = entry.category_display
            cells[bank] = MatrixCell(
                bank=bank,
                percentage=entry.percentage,
                is_selected=(bank, key) in selections,
            )
        rows.append(MatrixRow(category_key=key, category_display=display, cells=cells))

    rows.sort(key=lambda row: (row.category_display, row.category_key))
    return rows
