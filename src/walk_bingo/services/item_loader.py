"""
項目データ読み込みサービス（Streamlit 非依存）

契約:
- 入力はローカルパスまたは http(s) URL（未指定なら設定値 → data/items.txt）。
- 1 回だけ読み込みを試みる（リトライ・タイムアウトなし）。
- 読み込み失敗や項目数不足（24 未満）のときは既定項目（40 件）を返す。
  これはエラーではなく、警告ログを残すだけの縮退動作。
"""

from __future__ import annotations

import logging
import pathlib

import requests

from src.walk_bingo.domain import REQUIRED_ITEMS, fallback_items, has_enough_items, parse_items
from src.walk_bingo.services.config_loader import get_items_source

logger = logging.getLogger(__name__)


def _is_url(src: str) -> bool:
    return src.startswith("http://") or src.startswith("https://")


def read_items_text(source: str | pathlib.Path) -> str:
    """項目テキストを読み込んで返す。失敗時は例外をそのまま送出する。"""
    src = str(source)
    if _is_url(src):
        response = requests.get(src)
        # 2xx 以外は HTTPError
        response.raise_for_status()
        # text/plain の既定文字コード推定に頼らず UTF-8 として扱う（先頭 BOM は除去）
        return response.content.decode("utf-8-sig")
    return pathlib.Path(src).read_text(encoding="utf-8-sig")


def load_items(source: str | pathlib.Path | None = None) -> list[str]:
    """項目プールを読み込む。使えない場合は既定項目にフォールバックする。"""
    src = str(source) if source is not None else get_items_source()
    try:
        text = read_items_text(src)
    except (requests.RequestException, OSError, UnicodeDecodeError) as e:
        logger.warning(f"load_items: 項目ファイルの読み込みに失敗しました: {src} ({e}) フォールバック項目を使用します。")
        return fallback_items()

    items = parse_items(text)
    if not has_enough_items(items):
        logger.warning(
            f"load_items: 項目数が不足しています（必要: {REQUIRED_ITEMS}、取得: {len(items)}）。"
            "フォールバック項目を使用します。"
        )
        return fallback_items()

    logger.debug(f"load_items: {len(items)} 件を読み込みました: {src}")
    return items
