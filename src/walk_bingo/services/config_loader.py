from __future__ import annotations

import logging
import os
import pathlib
import tomllib
from typing import TYPE_CHECKING, Any

from src.walk_bingo.domain import ITEMS_FILE_PATH, SHUFFLE_STEP_MS

logger = logging.getLogger(__name__)

# 設定ファイルの既定パス（作業ディレクトリ基準）。環境変数で差し替え可能。
CONFIG_PATH_ENV = "WALK_BINGO_CONFIG"
DEFAULT_CONFIG_PATH = "config.toml"

DEFAULT_HOW_TO_PLAY = """
1. 「リロール」で気に入るまでカードの項目を入れ替えます。
2. 「開始」を押すとカードが確定し、中央の FREE マスに◯がつきます。
3. 散歩中に見つけたもののマスをタップして◯をつけます（もう一度タップで取り消し）。
4. 縦・横・斜めのどれか 1 列がそろうと 1 ライン達成です。
"""


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時に有効な設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> None:
    """TOML バイト列から実行時設定を反映する。壊れている場合は解除して警告を出す。"""
    try:
        text = data.decode("utf-8")
        cfg = tomllib.loads(text)
        set_runtime_config(cfg if isinstance(cfg, dict) else None)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"設定ファイルを解釈できません。既定値を使用します: {e}")
        set_runtime_config(None)


def config_path() -> pathlib.Path:
    return pathlib.Path(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_config_file(path: str | pathlib.Path | None = None) -> bool:
    """設定ファイルを読み込んで実行時設定に反映する。

    ファイルが無いのはエラーではない（既定値で動く）。読み込めたら True を返す。
    """
    p = pathlib.Path(path) if path is not None else config_path()
    if not p.is_file():
        set_runtime_config(None)
        return False
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning(f"設定ファイルを読み込めません: {p} ({e})")
        set_runtime_config(None)
        return False
    set_runtime_toml_bytes(data)
    return _RUNTIME_STORE.config is not None


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。未設定なら空辞書（呼び出し側で既定値にフォールバック）。"""
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def _get_section(name: str) -> dict[str, Any]:
    section = _get_config().get(name) or {}
    return section if isinstance(section, dict) else {}


def get_app_title(default: str = "散歩ビンゴ") -> str:
    title = _get_config().get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_items_source(default: str | None = None) -> str:
    v = _get_section("items").get("source")
    if isinstance(v, str) and v.strip():
        return v.strip()
    return default if default is not None else ITEMS_FILE_PATH


def get_shuffle_enabled(default: bool = True) -> bool:
    v = _get_section("effects").get("shuffle")
    # bool 以外（"yes" など）は既定値
    if isinstance(v, bool):
        return v
    return default


def get_shuffle_step_ms(default: int | None = None) -> int:
    v = _get_section("effects").get("shuffle_step_ms")
    # bool は int のサブクラスなので除外する
    if isinstance(v, int) and not isinstance(v, bool) and v >= 0:
        return v
    return default if default is not None else SHUFFLE_STEP_MS


def get_how_to_play_text(default: str = DEFAULT_HOW_TO_PLAY) -> str:
    v = _get_section("pages").get("how_to_play")
    if isinstance(v, str) and v.strip():
        return v.strip()
    return default.strip()


if TYPE_CHECKING:
    from src.walk_bingo.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.walk_bingo.app.state import Settings  # 局所インポートで循環回避

    return Settings(
        items_source=get_items_source(),
        shuffle=get_shuffle_enabled(),
        shuffle_step_ms=get_shuffle_step_ms(),
    )
