from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import replace

from src.walk_bingo.app.ports.session_store import SessionStore
from src.walk_bingo.app.state import BingoState, Phase
from src.walk_bingo.domain import (
    FREE_CELL_INDEX,
    TOTAL_CELLS,
    count_completed_lines,
    generate_card_items,
    new_marks,
)
from src.walk_bingo.services import data_access

# UI コンポーネントからのイベント（セルのタップ、リロール、開始）を受け取り、
# BingoState の遷移を一箇所に集約する。
# 遷移関数は新しい BingoState を返す純粋関数。handle_* はセッションとの橋渡しだけを行う。
# 不正な操作（開始前のタップ、FREE マスのタップ、開始後のリロール/開始）は何もしない。

MESSAGE_BEFORE_START = "「リロール」で項目を入れ替え、「開始」でビンゴスタート！"
MESSAGE_TAP_CELLS = "マスをタップして◯をつけよう！"
MESSAGE_LOAD_FAILED = "アプリの読み込みに失敗しました。ページを再読み込みしてください。"


def status_message_for(phase: Phase, line_count: int) -> str:
    if phase is not Phase.STARTED:
        return MESSAGE_BEFORE_START
    if line_count > 0:
        return f"🎉 {line_count}ライン達成！すごい！"
    return MESSAGE_TAP_CELLS


def _evaluate(state: BingoState) -> BingoState:
    """marked からライン判定をやり直し、件数と案内文を揃えた状態を返す。"""
    count, completed = count_completed_lines(state.marked)
    return replace(
        state,
        completed_lines=completed,
        line_count=count,
        status_message=status_message_for(state.phase, count),
    )


def new_game(items: Sequence[str], rng: random.Random | None = None) -> BingoState:
    """項目プールから開始前のカードを作る。"""
    pool = tuple(items)
    return BingoState(
        items=pool,
        card=tuple(generate_card_items(list(pool), rng)),
        marked=tuple(new_marks()),
        phase=Phase.NOT_STARTED,
        completed_lines=frozenset(),
        line_count=0,
        status_message=MESSAGE_BEFORE_START,
    )


def reroll(
    state: BingoState,
    rng: random.Random | None = None,
    on_shuffle: Callable[[], None] | None = None,
) -> BingoState:
    """開始前のみ、カードを作り直してマーク・ライン・案内文を初期化する。

    on_shuffle は見た目の演出用フック。状態の正しさはこの呼び出しに依存しない。
    """
    if state.is_started:
        return state
    rerolled = new_game(state.items, rng)
    if on_shuffle is not None:
        on_shuffle()
    return rerolled


def start(state: BingoState) -> BingoState:
    """ゲームを開始し、カードを確定する。FREE マスを自動でマーク済みにする。"""
    if state.is_started:
        return state
    marked = list(state.marked)
    marked[FREE_CELL_INDEX] = True
    # FREE マスだけでは通常 0 ライン
    return _evaluate(replace(state, phase=Phase.STARTED, marked=tuple(marked)))


def tap_cell(state: BingoState, index: int) -> BingoState:
    """マスのマークをトグルする。開始前と FREE マスは何もしない。"""
    if not state.is_started:
        return state
    if index == FREE_CELL_INDEX or not 0 <= index < TOTAL_CELLS:
        return state
    marked = list(state.marked)
    marked[index] = not marked[index]
    return _evaluate(replace(state, marked=tuple(marked)))


def handle_reroll(
    store: SessionStore,
    rng: random.Random | None = None,
    on_shuffle: Callable[[], None] | None = None,
) -> None:
    """リロールボタン押下時の処理を行う。"""
    state = data_access.get_state(store)
    if state is None:
        return
    data_access.set_state(store, reroll(state, rng, on_shuffle))


def handle_start(store: SessionStore) -> None:
    """開始ボタン押下時の処理を行う。"""
    state = data_access.get_state(store)
    if state is None:
        return
    data_access.set_state(store, start(state))


def handle_cell_click(store: SessionStore, index: int) -> None:
    """盤面セルのタップ時の処理を行う。"""
    state = data_access.get_state(store)
    if state is None:
        return
    data_access.set_state(store, tap_cell(state, index))
