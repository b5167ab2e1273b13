"""
Sidebar Components
==================
Roster editing (add, rename, remove with confirmation) and settings display.
"""
import streamlit as st

from app.state.session import SessionStateManager


def render_logo():
    st.sidebar.markdown("### 📅 SMART SHIFT MANAGER")
    st.sidebar.caption("クリックでシフト調整・充足度と公平性を自動解析")


def render_roster_editor(state: SessionStateManager):
    """One line per staff member with edit / delete actions."""
    board = state.board
    st.sidebar.header("👥 スタッフ")

    for member in board.staff():
        if state.editing_staff_id == member.id:
            # The callback reads the input from session state: args are bound at render time
            st.sidebar.text_input("名前", value=member.name, key=state.edit_name_key(member.id))
            st.sidebar.button(
                "💾 保存", key=f"save_{member.id}",
                on_click=state.save_staff_name, args=(member.id,),
            )
            continue

        c1, c2, c3 = st.sidebar.columns([4, 1, 1])
        c1.markdown(f"**{member.name}**")
        c2.button("✏️", key=f"edit_{member.id}", on_click=state.start_edit, args=(member.id,))
        c3.button("🗑️", key=f"remove_{member.id}", on_click=state.request_removal, args=(member.id,))

        if state.pending_removal_id == member.id:
            st.sidebar.warning("このスタッフを削除しますか？過去のデータも表示されなくなります。")
            k1, k2 = st.sidebar.columns(2)
            k1.button("削除する", key=f"confirm_remove_{member.id}", type="primary", on_click=state.confirm_removal)
            k2.button("キャンセル", key=f"cancel_remove_{member.id}", on_click=state.cancel_removal)

    st.sidebar.button("➕ スタッフ追加", key="add_staff", on_click=state.add_staff, width="stretch")


def render_settings(state: SessionStateManager):
    cfg = state.board.config
    with st.sidebar.expander("⚙️ 設定", expanded=False):
        st.write(f"1日の最低必要人数: **{cfg.min_staff_per_day}名**")
        st.write(f"作成可能期間: **{cfg.forward_month_limit}ヶ月先まで**")
        st.caption(f"保存先: {cfg.storage} ({cfg.data_dir})")
