from __future__ import annotations

import logging
import random

from src.walk_bingo.app.ports.session_store import SessionStore
from src.walk_bingo.app.state import BingoState
from src.walk_bingo.services import data_access
from src.walk_bingo.services.gameplay import new_game
from src.walk_bingo.services.item_loader import load_items

logger = logging.getLogger(__name__)


def initialize_state(
    store: SessionStore,
    items_source: str | None = None,
    rng: random.Random | None = None,
) -> BingoState:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きしない。項目の読み込みはセッションにつき 1 回だけ。
    """
    items = data_access.get_items(store)
    if not items:
        items = load_items(items_source)
        data_access.set_items(store, items)

    state = data_access.get_state(store)
    if state is None:
        state = reset_state(store, items, rng)
        logger.info(f"initialize_state: 初期化完了（項目数: {len(items)}）")
    return state


def reset_state(
    store: SessionStore,
    items: list[str],
    rng: random.Random | None = None,
) -> BingoState:
    """新しいカードで開始前の状態を作り、セッションに保存する。

    演出トークンも破棄する。開始後のゲームを途中で戻す操作は UI に置かない。
    """
    state = new_game(items, rng)
    data_access.set_state(store, state)
    data_access.set_shuffle_token(store, None)
    return state
