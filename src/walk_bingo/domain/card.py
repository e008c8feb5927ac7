from __future__ import annotations

import random

from src.walk_bingo.domain.constants import (
    FREE_CELL_INDEX,
    FREE_CELL_TEXT,
    REQUIRED_ITEMS,
    TOTAL_CELLS,
)

# Card の型は、25 マス分の表示テキスト（index 12 は常に FREE）
Card = list[str]


def shuffle_items(items: list[str], rng: random.Random | None = None) -> list[str]:
    """項目をシャッフルした新しいリストを返す（元のリストは変更しない）。

    random.shuffle は末尾から 1 まで [0, i] の一様乱数と入れ替える Fisher-Yates。
    """
    shuffled = list(items)
    if rng is None:
        random.shuffle(shuffled)
    else:
        rng.shuffle(shuffled)
    return shuffled


def pick_random_items(items: list[str], count: int, rng: random.Random | None = None) -> list[str]:
    """ランダムに count 個を非復元抽出して返す。"""
    return shuffle_items(items, rng)[:count]


def generate_card_items(pool: list[str], rng: random.Random | None = None) -> Card:
    """項目プールから 24 個を選び、中央に FREE を挿入した 25 マスを返す。

    契約:
    - pool は REQUIRED_ITEMS 以上（フォールバックは呼び出し側で適用済み）
    - 選出順の前半 12 個が 0..11、後半 12 個が 13..24 に入る
    - カード内の重複テキストは除去しない（プール側の重複はそのまま現れうる）
    """
    if len(pool) < REQUIRED_ITEMS:
        raise ValueError(f"項目数が不足しています（必要: {REQUIRED_ITEMS}、取得: {len(pool)}）")
    selected = pick_random_items(pool, REQUIRED_ITEMS, rng)
    return [*selected[:FREE_CELL_INDEX], FREE_CELL_TEXT, *selected[FREE_CELL_INDEX:]]


def new_marks() -> list[bool]:
    """全マス未マークの状態を返す（フリーマスも未マーク）。"""
    return [False] * TOTAL_CELLS
