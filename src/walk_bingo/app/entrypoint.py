import logging

import streamlit as st

from src.walk_bingo.adapters.session_store_streamlit import StSessionStore
from src.walk_bingo.app.state import load_settings
from src.walk_bingo.services import app_state, data_access
from src.walk_bingo.services.config_loader import get_app_title, load_config_file
from src.walk_bingo.services.gameplay import MESSAGE_LOAD_FAILED
from src.walk_bingo.services.presentation import cell_views
from src.walk_bingo.ui.board import handle_click, render_board
from src.walk_bingo.ui.header import render_header
from src.walk_bingo.ui.sidebar import render_sidebar
from src.walk_bingo.ui.status import render_load_error, render_status

logger = logging.getLogger(__name__)


def main():
    # set_page_config は最初に 1 度だけ呼ぶ必要があるため、設定読込より先に固定タイトルで呼ぶ。
    default_title = "散歩ビンゴ"
    st.set_page_config(page_title=default_title, layout="centered")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    title_shown = False
    try:
        load_config_file()
        settings = load_settings()
        store = StSessionStore()
        state = app_state.initialize_state(store, settings.items_source)

        st.title(get_app_title(default_title))
        title_shown = True

        # サイドバー: ライン一覧・ページリンク
        render_sidebar(state)

        # ヘッダー操作（リロール + 開始）
        render_header(store, state, shuffle_enabled=settings.shuffle)

        # ライン数と案内
        render_status(state)

        # 盤面
        st.divider()
        render_board(
            cell_views(state),
            lambda index: handle_click(store, index),
            shuffle_token=data_access.get_shuffle_token(store) if not state.is_started else None,
            step_ms=settings.shuffle_step_ms,
        )
    except Exception:
        # 初回描画の失敗も読み込み失敗として扱う（再試行はしない）
        logger.exception("initApp: 初期化または描画に失敗しました")
        if not title_shown:
            st.title(default_title)
        render_load_error(MESSAGE_LOAD_FAILED)
