"""
アプリケーション層のポート: セッションストア

目的:
- ビンゴの状態をどこに保持するか（例: Streamlit の session_state）をサービス層から隠す。
- サービス層は本ポート（Protocol）にのみ依存し、テストでは辞書実装に差し替える。
"""

from __future__ import annotations

from typing import Any, Protocol


class SessionStore(Protocol):
    """セッション状態へのアクセス抽象。

    契約:
    - dict 風の get/set を提供する。
    - "bingo" キーに BingoState、"items" キーに項目プールを置く想定。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 状態値は任意型
        """キーに対応する値を取得する。存在しない場合は default を返す。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 状態値は任意型
        """キーに値を設定する。"""
