from __future__ import annotations

import uuid

import streamlit as st

from src.walk_bingo.adapters.session_store_streamlit import StSessionStore
from src.walk_bingo.app.state import BingoState
from src.walk_bingo.services import data_access
from src.walk_bingo.services.gameplay import handle_reroll as _svc_handle_reroll
from src.walk_bingo.services.gameplay import handle_start as _svc_handle_start


def _on_reroll(store: StSessionStore, shuffle_enabled: bool) -> None:
    def _on_shuffle() -> None:
        data_access.set_shuffle_token(store, uuid.uuid4().hex[:8])

    _svc_handle_reroll(store, on_shuffle=_on_shuffle if shuffle_enabled else None)


def _on_start(store: StSessionStore) -> None:
    # 開始後は演出を止める
    data_access.set_shuffle_token(store, None)
    _svc_handle_start(store)


def render_header(store: StSessionStore, state: BingoState, shuffle_enabled: bool = True) -> None:
    """メインヘッダー（リロール / 開始ボタン）を描画する。

    - どちらのボタンも開始後は無効化する。
    - リロール時は演出用トークンを発行し、盤面描画側でアニメーションさせる。
    - 処理はコールバックで行い、次の再実行で新しい状態が描画される。
    """
    c1, c2, _ = st.columns([1, 1, 6])
    with c1:
        st.button(
            "リロール",
            key="reroll",
            disabled=state.is_started,
            use_container_width=True,
            on_click=_on_reroll,
            args=(store, shuffle_enabled),
        )
    with c2:
        st.button(
            "開始",
            key="start",
            type="primary",
            disabled=state.is_started,
            use_container_width=True,
            on_click=_on_start,
            args=(store,),
        )
