"""
Plotly chart of the best pick per category.
"""

from typing import Mapping, Optional

import plotly.express as px
import plotly.graph_objects as go

from ..models import Bank, BankConfig, ReconciliationResult
from ..config.reconciliation_config import DEFAULT_BANK_CONFIG
from .dataframe import winners_to_dataframe


def build_winner_chart(
    result: ReconciliationResult,
    bank_config: Optional[Mapping[Bank, BankConfig]] = None
) -> go.Figure:
    """
    Bar chart of winning percentages per category, coloured by bank.

    Args:
        result: Reconciliation result
        bank_config: Source of each bank's display colour

    Returns:
        Plotly figure (empty with a title when no row has a winner)
    """
    config = bank_config if bank_config is not None else DEFAULT_BANK_CONFIG
    winners_df = winners_to_dataframe(result)

    if winners_df.empty:
        fig = go.Figure()
        fig.update_layout(title="Best Pick per Category")
        return fig

    color_map = {
        bank.value: settings.display_color
        for bank, settings in config.items()
        if settings.display_color
    }

    fig = px.bar(
        winners_df,
        x="Category",
        y="Percentage",
        color="Bank",
        barmode="group",
        title="Best Pick per Category",
        color_discrete_map=color_map,
    )
    fig.update_yaxes(ticksuffix="%")
    return fig
