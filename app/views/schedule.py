"""
Schedule View
=============
Month header with navigation and the clickable staff × day grid.
"""
import streamlit as st

from app.components.styling import cell_container_key
from app.state.session import SessionStateManager
from shiftboard.analytics.coverage import CoverageStats
from shiftboard.models.rules import RULES

STAFF_COL_WIDTH = 4
TOTAL_COL_WIDTH = 2


def render_month_header(state: SessionStateManager):
    """◀ 2026年 10月 ▶"""
    board = state.board
    c1, c2, c3 = st.columns([1, 6, 1])
    with c1:
        st.button("◀", key="month_prev", on_click=state.shift_month, args=(-1,))
    with c2:
        st.markdown(
            f"<h2 style='text-align:center;color:#4338CA;margin:0'>{board.current_month.title}</h2>",
            unsafe_allow_html=True,
        )
    with c3:
        st.button("▶", key="month_next", on_click=state.shift_month, args=(1,))

    notice = state.pop_notice()
    if notice:
        st.warning(notice)


def _day_header(day_index: int, stats: CoverageStats) -> str:
    css = "day-head understaffed" if stats.is_understaffed(day_index) else "day-head"
    return f"<div class='{css}'>{day_index + 1}</div>"


def render_grid(state: SessionStateManager, stats: CoverageStats):
    """One row per roster member; each cell is a button cycling its status."""
    board = state.board
    month = board.current_month
    schedule = board.month_schedule()
    days = month.days_in_month
    widths = [STAFF_COL_WIDTH] + [1] * days + [TOTAL_COL_WIDTH]

    # Header row
    cols = st.columns(widths)
    cols[0].markdown(f"**{RULES.staff_column_header}**")
    for d in range(days):
        cols[1 + d].markdown(_day_header(d, stats), unsafe_allow_html=True)
    cols[-1].markdown("**合計**")

    # Staff rows
    for member in board.staff():
        cols = st.columns(widths)
        cols[0].markdown(f"**{member.name}**")
        for d, status in enumerate(schedule[member.id]):
            cell_id = f"{month}_{member.id}_{d}"
            with cols[1 + d].container(key=cell_container_key(status.value, cell_id)):
                st.button(
                    status.code,
                    key=f"cell_{cell_id}",
                    help=f"{member.name} {d + 1}日: {status.label}",
                    on_click=state.toggle,
                    args=(member.id, d),
                )
        cols[-1].markdown(f"**{stats.staff_total[member.id]}**")

    # Daily count row
    cols = st.columns(widths)
    cols[0].markdown("**日計(人)**")
    for d, count in enumerate(stats.daily_count):
        css = "day-count understaffed" if stats.is_understaffed(d) else "day-count"
        cols[1 + d].markdown(f"<div class='{css}'>{count}</div>", unsafe_allow_html=True)

    st.caption("出 = 出勤 ・ ー = 休み ・ 希 = 希望休 (クリックで切り替え)")
