"""
pandas renderings of the reconciled matrix.
"""

from typing import Optional

import pandas as pd

from ..models import ReconciliationResult
from ..config.reconciliation_config import get_export_locale
from .formatting import format_percentage


def matrix_to_dataframe(
    result: ReconciliationResult,
    locale: Optional[str] = None,
    formatted: bool = False
) -> pd.DataFrame:
    """
    Convert matrix rows to a pandas DataFrame.

    Args:
        result: Reconciliation result
        locale: Locale for the category column header
        formatted: If True, cells are "7%" strings with "" for no offer;
                   otherwise percentages as numbers with missing values for no offer

    Returns:
        DataFrame with one row per category and one column per enabled bank
    """
    header = get_export_locale(locale)["category_header"]
    columns = [header] + [bank.value for bank in result.banks]

    rows = []
    for row in result.rows:
        record = {header: row.category_display}
        for bank, cell in row.cells.items():
            if formatted:
                record[bank.value] = format_percentage(cell.percentage) if cell is not None else ""
            else:
                record[bank.value] = cell.percentage if cell is not None else None
        rows.append(record)

    return pd.DataFrame(rows, columns=columns)


def winners_to_dataframe(result: ReconciliationResult) -> pd.DataFrame:
    """
    One DataFrame row per winning cell.

    Returns:
        DataFrame with Category, Bank and Percentage columns
    """
    rows = []
    for row in result.winning_rows:
        for cell in row.winner_cells():
            rows.append({
                "Category": row.category_display,
                "Bank": cell.bank.value,
                "Percentage": cell.percentage,
            })

    return pd.DataFrame(rows, columns=["Category", "Bank", "Percentage"])
