"""ドメイン層（純粋ロジック/データモデル）。

提供物:
- カード生成（card）
- ライン判定（lines）
- 項目テキストの解釈と既定項目（items）
"""

from src.walk_bingo.domain.card import Card, generate_card_items, new_marks, shuffle_items
from src.walk_bingo.domain.constants import (
    FREE_CELL_INDEX,
    FREE_CELL_TEXT,
    GRID_SIZE,
    ITEMS_FILE_PATH,
    REQUIRED_ITEMS,
    SHUFFLE_STEP_MS,
    TOTAL_CELLS,
)
from src.walk_bingo.domain.items import FALLBACK_ITEMS, fallback_items, has_enough_items, parse_items
from src.walk_bingo.domain.lines import Line, cells_in_lines, count_completed_lines, get_all_lines

__all__ = [
    # card
    "Card",
    "generate_card_items",
    "new_marks",
    "shuffle_items",
    # lines
    "Line",
    "get_all_lines",
    "count_completed_lines",
    "cells_in_lines",
    # items
    "FALLBACK_ITEMS",
    "fallback_items",
    "has_enough_items",
    "parse_items",
    # constants
    "GRID_SIZE",
    "TOTAL_CELLS",
    "FREE_CELL_INDEX",
    "FREE_CELL_TEXT",
    "REQUIRED_ITEMS",
    "ITEMS_FILE_PATH",
    "SHUFFLE_STEP_MS",
]
