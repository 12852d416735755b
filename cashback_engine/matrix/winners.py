"""
Winner resolution for matrix rows.

A winner is a selected cell holding the highest percentage among the row's
selected cells. Ties produce several winners.
"""

from dataclasses import replace
from typing import Iterable, List, Tuple

from ..models import Bank, MatrixRow


def resolve_winners(row: MatrixRow) -> Tuple[Bank, ...]:
    """
    Find the winning banks of a row.

    Args:
        row: Matrix row

    Returns:
        Winning banks in column order; empty if no cell is selected
    """
    selected = [cell for cell in row.present_cells() if cell.is_selected]
    if not selected:
        return ()

    max_percent = max(cell.percentage for cell in selected)
    return tuple(cell.bank for cell in selected if cell.percentage == max_percent)


def annotate_winners(rows: Iterable[MatrixRow]) -> List[MatrixRow]:
    """
    Flag winning cells without altering their values.

    Returns:
        New rows with `winners` set and `is_winner` marked on winning cells
    """
    annotated = []
    for row in rows:
        winners = resolve_winners(row)
        cells = {
            bank: (replace(cell, is_winner=True) if cell is not None and bank in winners else cell)
            for bank, cell in row.cells.items()
        }
        annotated.append(replace(row, cells=cells, winners=winners))
    return annotated
