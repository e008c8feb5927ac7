from __future__ import annotations

from src.walk_bingo.app.ports.session_store import SessionStore
from src.walk_bingo.app.state import BingoState

# セッション内のキー名
STATE_KEY = "bingo"
ITEMS_KEY = "items"
SHUFFLE_TOKEN_KEY = "shuffle_token"


def get_state(store: SessionStore) -> BingoState | None:
    """セッションの BingoState を返す。未初期化なら None。"""
    state = store.get(STATE_KEY)
    return state if isinstance(state, BingoState) else None


def set_state(store: SessionStore, state: BingoState) -> None:
    """セッションに BingoState を保存する。

    - UI やサービス層からは本関数経由で設定することで、参照箇所の統一を図る。
    """
    store.set(STATE_KEY, state)


def get_items(store: SessionStore) -> list[str]:
    """セッションの項目プールを返す（未設定時は空リスト）。"""
    return list(store.get(ITEMS_KEY) or [])


def set_items(store: SessionStore, items: list[str]) -> None:
    store.set(ITEMS_KEY, list(items))


# ---- シャッフル演出 ----


def get_shuffle_token(store: SessionStore) -> str | None:
    """直近のリロールで発行された演出トークン。None なら演出なし。"""
    return store.get(SHUFFLE_TOKEN_KEY)


def set_shuffle_token(store: SessionStore, token: str | None) -> None:
    store.set(SHUFFLE_TOKEN_KEY, token)
