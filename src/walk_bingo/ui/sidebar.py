from __future__ import annotations

import streamlit as st

from src.walk_bingo.app.state import BingoState
from src.walk_bingo.services.presentation import lines_dataframe


def render_sidebar(state: BingoState) -> None:
    """サイドバーにライン一覧と項目数を描画する。

    - ライン一覧は開始前でも表示する（全て 0/5）。
    - ページリンクは利用可能な場合のみ表示する。
    """
    with st.sidebar:
        st.subheader("ラインの状況")
        st.dataframe(lines_dataframe(state), hide_index=True, use_container_width=True)
        st.caption(f"項目プール: {len(state.items)} 件")

        # 環境により自動のページ切替UIが表示されますが、見つけやすいよう明示リンクを併設します。
        try:
            if hasattr(st.sidebar, "page_link"):
                st.divider()
                st.page_link("pages/how_to_play.py", label="遊び方")
                st.page_link("pages/items_list.py", label="項目一覧")
        except Exception:
            # 未対応環境ではデフォルトのページ切替UIを利用してもらう
            st.info("ページ切替は画面左上のページメニューから行えます。")
