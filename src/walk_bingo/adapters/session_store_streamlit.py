"""Streamlit セッション状態アダプタ。

- `st.session_state` を `SessionStore` ポートとして見せる。
- UI コードで `StSessionStore` を生成し、ゲーム操作（リロール/開始/タップ）へ渡す。
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.walk_bingo.app.ports.session_store import SessionStore


class StSessionStore(SessionStore):
    """st.session_state を背後に持つ SessionStore。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 状態値は任意型
        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 状態値は任意型
        st.session_state[key] = value
