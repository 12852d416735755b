"""
Tab-separated matrix export for pasting into spreadsheets.
"""

from typing import Optional

from ..models import ReconciliationResult
from .dataframe import matrix_to_dataframe


def export_tabular(result: ReconciliationResult, locale: Optional[str] = None) -> str:
    """
    Render the matrix as tab-separated text.

    The first line is the header (category label, then enabled banks). Each
    following line is a category with "<percentage>%" per bank, or an empty
    field where the bank has no offer. Selection and winner flags are not
    encoded. Fields are written as-is, without CSV quoting, so a category
    such as 'Магазин "Ромашка"' keeps its quotes.

    Args:
        result: Reconciliation result
        locale: Locale for the category header

    Returns:
        TSV text without a trailing newline
    """
    df = matrix_to_dataframe(result, locale=locale, formatted=True)

    lines = ["\t".join(str(column) for column in df.columns)]
    for record in df.itertuples(index=False, name=None):
        lines.append("\t".join(str(value) for value in record))

    return "\n".join(lines)
