"""
表示用モデルの組み立て（UI フレームワーク非依存）。

目的:
- BingoState を、描画側がそのまま使える形（マスごとの見た目フラグ、ライン一覧表）に変換する。
- 描画側は本モジュールの戻り値を読むだけで、ゲームのルールを持たない。
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from src.walk_bingo.app.state import BingoState
from src.walk_bingo.domain import FREE_CELL_INDEX, cells_in_lines, get_all_lines

_KIND_LABELS = {"row": "横", "col": "縦", "diag": "斜め"}


@dataclass(frozen=True)
class CellView:
    """1 マス分の表示情報。"""

    index: int
    text: str
    free: bool
    marked: bool
    bingo: bool  # 完成ラインに含まれる
    disabled: bool  # タップしても何も起きない

    @property
    def css_classes(self) -> list[str]:
        classes = ["bingoCell"]
        if self.free:
            classes.append("bingoCell--free")
        if self.marked:
            classes.append("bingoCell--marked")
        if self.bingo:
            classes.append("bingoCell--bingo")
        if self.disabled:
            classes.append("bingoCell--disabled")
        return classes


def cell_views(state: BingoState) -> list[CellView]:
    """カードの各マスを CellView にして返す（index 順）。"""
    bingo_cells = cells_in_lines(state.completed_lines)
    views: list[CellView] = []
    for i, text in enumerate(state.card):
        views.append(
            CellView(
                index=i,
                text=text,
                free=i == FREE_CELL_INDEX,
                marked=bool(state.marked[i]),
                bingo=i in bingo_cells,
                # 開始前は全マス、開始後は FREE マスのみ無効
                disabled=not state.is_started or i == FREE_CELL_INDEX,
            )
        )
    return views


def lines_dataframe(state: BingoState) -> pd.DataFrame:
    """ラインごとの進み具合を 1 行 1 ラインの DataFrame で返す。

    列: ライン, 種類, マーク数, 達成
    """
    rows: list[dict[str, object]] = []
    for line in get_all_lines():
        marked = sum(1 for i in line.cells if state.marked[i])
        rows.append(
            {
                "ライン": line.id,
                "種類": _KIND_LABELS.get(line.kind, line.kind),
                "マーク数": f"{marked}/{len(line.cells)}",
                "達成": line.id in state.completed_lines,
            }
        )
    return pd.DataFrame(rows)


def items_dataframe(items: list[str]) -> pd.DataFrame:
    """項目プールを一覧表示用の DataFrame にする（1 始まりの番号付き）。"""
    df = pd.DataFrame({"項目": list(items)})
    df.insert(0, "No.", list(range(1, len(df) + 1)))
    return df
