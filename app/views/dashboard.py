"""
Dashboard View
==============
KPIs (staff count, understaffed days, threshold) and the fairness chart.
"""
import plotly.express as px
import streamlit as st

from app.state.session import SessionStateManager
from shiftboard.analytics.coverage import CoverageStats, coverage_to_dataframe, fairness_to_dataframe


def render_kpis(state: SessionStateManager, stats: CoverageStats):
    """Render the three headline metrics."""
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("👥 スタッフ数", f"{len(state.board.roster)} 名")
    with col2:
        understaffed = len(stats.understaffed_days)
        st.metric(
            "⚠️ 要注意日（不足）", f"{understaffed} 日",
            delta="❌" if understaffed > 0 else None,
            delta_color="inverse",
        )
    with col3:
        st.metric("ℹ️ 1日の最低必要人数", f"{stats.min_staff_per_day} 名")


def render_fairness(state: SessionStateManager, stats: CoverageStats):
    """Per-staff WORK days as bars, plus the daily coverage line."""
    st.subheader("✅ 勤務公平性スコア（月間出勤日数）")

    df = fairness_to_dataframe(stats, state.board.staff())
    if df.empty:
        st.info("スタッフが登録されていません。")
        return

    for _, row in df.iterrows():
        c1, c2 = st.columns([1, 3])
        with c1:
            st.markdown(f"**{row['スタッフ名']}**  \n{row['出勤日数']} 日 / {stats.days_in_month} 日")
        with c2:
            st.progress(min(max(float(row["割合(%)"]) / 100.0, 0.0), 1.0))

    with st.expander("📈 日別の出勤人数", expanded=False):
        cov = coverage_to_dataframe(stats)
        fig = px.bar(
            cov, x="日", y="出勤人数",
            color=cov["不足"].map({True: "不足", False: "充足"}),
            color_discrete_map={"不足": "#EF4444", "充足": "#6366F1"},
        )
        fig.add_hline(y=stats.min_staff_per_day, line_dash="dash", line_color="#F59E0B")
        fig.update_layout(margin=dict(l=20, r=20, t=30, b=20), height=300, legend_title_text="")
        st.plotly_chart(fig, width="stretch")
