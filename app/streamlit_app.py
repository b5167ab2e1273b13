"""
Shift Board: Streamlit Web UI
=============================
Monthly attendance grid with coverage and fairness statistics.
"""
import os
import sys

import streamlit as st

# Add src and project root to python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from app.components.sidebar import render_logo, render_roster_editor, render_settings
from app.components.styling import apply_styling
from app.state.session import SessionStateManager
from app.views.dashboard import render_fairness, render_kpis
from app.views.export import render_downloads
from app.views.schedule import render_grid, render_month_header
from shiftboard.utils.logging_setup import setup_logging


def main():
    st.set_page_config(page_title="Shift Board", page_icon="📅", layout="wide")

    # 1. Init
    SessionStateManager.init_state()
    state = SessionStateManager()
    if "logging_ready" not in st.session_state:
        cfg = state.board.config
        setup_logging(level=cfg.log_level, log_file=cfg.log_file)
        st.session_state["logging_ready"] = True
    apply_styling()

    st.title("📅 SMART SHIFT MANAGER")

    # 2. Sidebar
    render_logo()
    render_roster_editor(state)
    render_settings(state)

    # 3. Main area
    render_month_header(state)
    stats = state.board.stats()
    render_kpis(state, stats)

    t1, t2, t3 = st.tabs(["📊 シフト表", "✅ 公平性", "📥 出力"])
    with t1:
        render_grid(state, stats)
    with t2:
        render_fairness(state, stats)
    with t3:
        render_downloads(state)

    st.divider()
    st.caption(
        "[保存について] データは自動保存されます。過去の月はいつでも参照でき、"
        f"{state.board.config.forward_month_limit}ヶ月先までのシフトを事前に計画できます。"
    )


if __name__ == "__main__":
    main()
