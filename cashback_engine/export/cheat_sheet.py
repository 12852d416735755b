"""
Cheat-sheet export: which bank to pick for each category this period.
"""

from datetime import datetime
from typing import Optional

from ..models import ReconciliationResult
from ..config.reconciliation_config import get_export_locale
from .formatting import format_percentage, format_period


def format_winner_line(row, strings: dict) -> str:
    """
    Render one category line from the row's resolved winners.

    Example:
        ✅ Кафе: Sber (5%) or Alfa (5%)
    """
    winner_text = strings["or_connector"].join(
        f"{cell.bank.value} ({format_percentage(cell.percentage)})"
        for cell in row.winner_cells()
    )
    return f"{strings['winner_marker']} {row.category_display}: {winner_text}"


def export_cheat_sheet(
    result: ReconciliationResult,
    generated_at: Optional[datetime] = None,
    locale: Optional[str] = None
) -> str:
    """
    Render the human-readable cheat sheet.

    Only rows with at least one winner are listed. Winners are taken from the
    matrix as resolved, never recomputed here.

    Args:
        result: Reconciliation result
        generated_at: Moment shown in the date header (default: now)
        locale: Locale code ("en", "ru")

    Returns:
        Cheat-sheet text
    """
    strings = get_export_locale(locale)
    moment = generated_at or datetime.now()

    lines = [
        strings["cheat_sheet_title"],
        strings["separator"],
        f"{strings['date_marker']} {format_period(moment, strings)}",
        "",
    ]

    for row in result.winning_rows:
        lines.append(format_winner_line(row, strings))

    lines.append("")
    lines.append(strings["separator"])
    lines.append(strings["footer"])

    return "\n".join(lines)
