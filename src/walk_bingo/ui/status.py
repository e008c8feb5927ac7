from __future__ import annotations

import streamlit as st

from src.walk_bingo.app.state import BingoState


def render_status(state: BingoState) -> None:
    """ライン数と案内メッセージを描画する。"""
    c1, c2 = st.columns([1, 4])
    with c1:
        st.metric("ライン数", state.line_count)
    with c2:
        if state.line_count > 0:
            st.success(state.status_message)
        else:
            st.info(state.status_message)


def render_load_error(message: str) -> None:
    """初期化失敗時の案内を出す（再試行はしない）。"""
    st.error(message)
