"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- サービス層は BingoState を入力・出力し、副作用を局所化する。

使い方:
- UI でセッションから BingoState を取り出し描画に渡す。
- ユーザー操作はサービス関数に渡し、新しい BingoState を受け取って保存する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.walk_bingo.domain import ITEMS_FILE_PATH, SHUFFLE_STEP_MS, new_marks


class Phase(Enum):
    """ゲームの進行段階。NOT_STARTED → STARTED の一方向のみ。"""

    NOT_STARTED = "not_started"
    STARTED = "started"


@dataclass
class Settings:
    """画面構成や動作に関する設定。

    現状の契約:
    - items_source は項目データの場所（ローカルパスまたは http(s) URL）。
    - shuffle はリロール時の演出の有無。
    - shuffle_step_ms は演出のマスごとの遅延。
    """

    items_source: str = ITEMS_FILE_PATH
    shuffle: bool = True
    shuffle_step_ms: int = SHUFFLE_STEP_MS


@dataclass(frozen=True)
class BingoState:
    """ビンゴ1枚分の状態。

    現状の契約:
    - items は読み込んだ全項目（起動後は変更しない）。
    - card は 25 マス分の表示テキスト。
    - marked は card とインデックスが揃った 25 個のマーク状態。
    - phase は開始前/開始後。
    - completed_lines/line_count は marked から導出した値（直接は変更しない）。
    - status_message は画面に出す案内文。
    """

    items: tuple[str, ...] = ()
    card: tuple[str, ...] = ()
    marked: tuple[bool, ...] = field(default_factory=lambda: tuple(new_marks()))
    phase: Phase = Phase.NOT_STARTED
    completed_lines: frozenset[str] = frozenset()
    line_count: int = 0
    status_message: str = ""

    @property
    def is_started(self) -> bool:
        return self.phase is Phase.STARTED


def load_settings() -> Settings:
    """設定ファイル由来の Settings を返す（読み込み失敗時はコード既定値）。"""
    try:
        from src.walk_bingo.services.config_loader import load_default_settings

        return load_default_settings()
    except Exception:
        # 何らかの読み込み失敗時はコード既定値
        return Settings()
