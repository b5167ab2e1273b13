"""
Export View
===========
CSV and Excel downloads of the displayed month.
"""
import streamlit as st

from app.state.session import SessionStateManager
from shiftboard.models.rules import RULES


def render_downloads(state: SessionStateManager):
    """Render the download buttons."""
    board = state.board
    col1, col2 = st.columns(2)

    with col1:
        st.download_button(
            "📥 CSV出力",
            board.export_csv().encode("utf-8"),
            RULES.csv_filename,
            "text/csv",
            key="download_csv",
        )

    with col2:
        st.download_button(
            "📥 Excel出力",
            board.export_excel(),
            RULES.excel_filename,
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key="download_xlsx",
        )
