from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.walk_bingo.adapters.session_store_streamlit import StSessionStore
from src.walk_bingo.domain import GRID_SIZE
from src.walk_bingo.services.gameplay import handle_cell_click as _svc_handle_cell_click
from src.walk_bingo.services.presentation import CellView

# マスの見た目（Streamlit はキー付き要素に st-key-<key> クラスを付与する）
_BASE_CSS = """
<style>
  div[class*="st-key-cell-"] button { min-height: 4.5rem; white-space: normal; font-size: 0.95rem; }
  div[class*="st-key-cell-"] button:disabled { opacity: 0.75; cursor: default; }
</style>
"""
_STYLE_BY_CLASS = {
    "bingoCell--free": "background:#fff3c4; font-weight:700;",
    "bingoCell--marked": "background:#ffd9d9; border:2px solid #e05555;",
    "bingoCell--bingo": "background:#ffb347; border:2px solid #d9822b; font-weight:700;",
}


def _cell_key(index: int) -> str:
    return f"cell-{index}"


def _cell_label(view: CellView) -> str:
    if view.marked and not view.free:
        return f"◯ {view.text}"
    return view.text


def build_cell_css(views: list[CellView], shuffle_token: str | None = None, step_ms: int = 30) -> str:
    """マスごとの状態クラスと、リロール時のシャッフル演出を CSS にする。

    演出はトークンごとに keyframes 名を変えて再生させる（完了を待つ処理はない）。
    """
    rules: list[str] = []
    for v in views:
        styles = "".join(_STYLE_BY_CLASS.get(c, "") for c in v.css_classes)
        if styles:
            rules.append(f".st-key-{_cell_key(v.index)} button {{ {styles} }}")
    if shuffle_token:
        name = f"bingo-shuffle-{shuffle_token}"
        rules.append(
            f"@keyframes {name} {{ 0% {{ transform: rotateY(90deg); opacity: 0.2; }}"
            " 100% { transform: rotateY(0deg); opacity: 1; } }"
        )
        for v in views:
            rules.append(
                f".st-key-{_cell_key(v.index)} button {{ animation: {name} 0.3s ease-out both;"
                f" animation-delay: {v.index * step_ms}ms; }}"
            )
    return "<style>" + "\n".join(rules) + "</style>"


def render_board(
    views: list[CellView],
    on_click: Callable[[int], None],
    shuffle_token: str | None = None,
    step_ms: int = 30,
) -> None:
    """5×5 の盤面を描画し、クリックで on_click(index) を呼び出す。"""
    st.markdown(_BASE_CSS, unsafe_allow_html=True)
    st.markdown(build_cell_css(views, shuffle_token, step_ms), unsafe_allow_html=True)
    for r in range(GRID_SIZE):
        cols = st.columns(GRID_SIZE)
        for c in range(GRID_SIZE):
            view = views[r * GRID_SIZE + c]
            # コールバックは次の再実行の冒頭で呼ばれるため st.rerun は不要
            cols[c].button(
                _cell_label(view),
                key=_cell_key(view.index),
                use_container_width=True,
                disabled=view.disabled,
                on_click=on_click,
                args=(view.index,),
            )


def handle_click(store: StSessionStore, index: int) -> None:
    """盤面セルクリック時の処理をサービスに委譲する。"""
    _svc_handle_cell_click(store, index)
