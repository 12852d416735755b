"""
Cashback Matrix Viewer
Streamlit-based read-only viewer for reconciled cashback offers.
"""

import io
import csv
from datetime import datetime

import streamlit as st

from cashback_engine import (
    CashbackSession,
    DEFAULT_BANK_CONFIG,
    EXPORT_LOCALES,
    build_winner_chart,
    export_cheat_sheet,
    export_tabular,
    get_alias_policy,
    matrix_to_dataframe,
    winners_to_dataframe,
)
from cashback_engine.config import bank_config_from_rows
from cashback_engine.normalisation import ALIAS_POLICIES


# Page configuration
st.set_page_config(
    page_title="Cashback Matrix",
    page_icon="💳",
    layout="wide",
    initial_sidebar_state="expanded"
)


def main():
    """Main application entry point."""

    st.title("💳 Cashback Matrix")
    st.markdown("Which category to pick in which bank this period")

    with st.sidebar:
        st.header("⚙️ View Options")

        locale = st.selectbox(
            "Export language",
            options=sorted(EXPORT_LOCALES),
            index=sorted(EXPORT_LOCALES).index("en"),
        )

        policy_name = st.selectbox(
            "Bank alias matching",
            options=sorted(ALIAS_POLICIES),
            index=sorted(ALIAS_POLICIES).index("default"),
            help="'legacy' applies the original case-sensitive alias table"
        )

        config_file = st.file_uploader(
            "Bank configuration (CSV)",
            type=["csv"],
            help="Columns: bank, enabled, limit, display_color"
        )

    uploaded_files = st.file_uploader(
        "Extraction results (JSON)",
        type=["json"],
        accept_multiple_files=True,
        help="Each file is one oracle response: an array of {bankName, category, percentage}"
    )

    if not uploaded_files:
        st.info("👆 Upload extraction results to see the matrix")
        return

    bank_config = dict(DEFAULT_BANK_CONFIG)
    if config_file is not None:
        try:
            text = config_file.getvalue().decode("utf-8")
            bank_config = bank_config_from_rows(csv.DictReader(io.StringIO(text)))
        except (UnicodeDecodeError, ValueError) as e:
            st.error(f"Invalid bank configuration, using defaults: {e}")

    session = CashbackSession(bank_config=bank_config, alias_policy=get_alias_policy(policy_name))
    for uploaded_file in uploaded_files:
        added = session.add_extraction(uploaded_file.getvalue(), source="screenshot")
        if session.last_error:
            st.warning(f"Skipped {uploaded_file.name}: {session.last_error}")
        else:
            st.caption(f"• {uploaded_file.name}: {added} offers")

    result = session.reconcile()

    if not result.rows:
        st.warning("No offers from enabled banks")
        return

    render_matrix(result, locale)
    render_winners(result, bank_config)
    render_downloads(result, locale)


def render_matrix(result, locale: str):
    """Render the category x bank matrix."""
    st.subheader("📋 Matrix")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Categories", len(result.rows))
    with col2:
        st.metric("Selected Offers", len(result.selections))
    with col3:
        st.metric("Categories with a Winner", len(result.winning_rows))

    st.dataframe(
        matrix_to_dataframe(result, locale=locale, formatted=True),
        use_container_width=True,
        hide_index=True
    )


def render_winners(result, bank_config):
    """Render the best pick per category."""
    st.subheader("🏆 Best Picks")

    col1, col2 = st.columns([1, 2])
    with col1:
        st.dataframe(winners_to_dataframe(result), use_container_width=True, hide_index=True)
    with col2:
        st.plotly_chart(build_winner_chart(result, bank_config), use_container_width=True)


def render_downloads(result, locale: str):
    """Render download buttons for both exports."""
    st.subheader("💾 Export")

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📥 Download Matrix (TSV)",
            data=export_tabular(result, locale=locale),
            file_name=f"cashback_matrix_{datetime.now().strftime('%Y%m%d_%H%M%S')}.tsv",
            mime="text/tab-separated-values"
        )
    with col2:
        st.download_button(
            label="📥 Download Cheat Sheet",
            data=export_cheat_sheet(result, locale=locale),
            file_name="cashback_pamyatka.txt",
            mime="text/plain"
        )


if __name__ == "__main__":
    main()
