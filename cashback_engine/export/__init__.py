"""
Export Module for the Cashback Reconciliation Engine.

Renders a reconciled matrix as:
- Tab-separated text for spreadsheets
- A localized cheat sheet of winning banks
- pandas DataFrames and a Plotly chart for the viewer
"""

from .formatting import format_number, format_percentage, format_period
from .tabular import export_tabular
from .cheat_sheet import export_cheat_sheet, format_winner_line
from .dataframe import matrix_to_dataframe, winners_to_dataframe
from .charts import build_winner_chart

__all__ = [
    "format_number",
    "format_percentage",
    "format_period",
    "export_tabular",
    "export_cheat_sheet",
    "format_winner_line",
    "matrix_to_dataframe",
    "winners_to_dataframe",
    "build_winner_chart",
]
