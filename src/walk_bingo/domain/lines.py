from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.walk_bingo.domain.constants import GRID_SIZE


@dataclass(frozen=True)
class Line:
    """ビンゴ判定の1ライン。

    現状の契約:
    - id: "row-0".."row-4", "col-0".."col-4", "diag-0", "diag-1"
    - cells: ラインに含まれるセルインデックス（5 個、0..24）
    """

    id: str
    cells: tuple[int, ...]

    @property
    def kind(self) -> str:
        """row / col / diag のいずれか。"""
        return self.id.split("-", 1)[0]


def get_all_lines() -> list[Line]:
    """全ビンゴラインを固定順で返す（5行 + 5列 + 2対角線 = 12）。"""
    lines: list[Line] = []
    for row in range(GRID_SIZE):
        lines.append(Line(f"row-{row}", tuple(row * GRID_SIZE + col for col in range(GRID_SIZE))))
    for col in range(GRID_SIZE):
        lines.append(Line(f"col-{col}", tuple(row * GRID_SIZE + col for row in range(GRID_SIZE))))
    # 左上→右下
    lines.append(Line("diag-0", tuple(i * GRID_SIZE + i for i in range(GRID_SIZE))))
    # 右上→左下
    lines.append(Line("diag-1", tuple(i * GRID_SIZE + (GRID_SIZE - 1 - i) for i in range(GRID_SIZE))))
    return lines


def is_line_completed(line: Line, marked: Sequence[bool]) -> bool:
    return all(marked[i] for i in line.cells)


def count_completed_lines(marked: Sequence[bool]) -> tuple[int, frozenset[str]]:
    """完成したライン数とライン ID 集合を返す。

    毎回全ラインを走査し直す（差分更新はしない）。件数は常に集合の要素数と一致する。
    """
    completed = frozenset(line.id for line in get_all_lines() if is_line_completed(line, marked))
    return len(completed), completed


def cells_in_lines(line_ids: Iterable[str]) -> set[int]:
    """指定ラインに含まれるセルインデックスの和集合を返す（ハイライト用）。"""
    wanted = set(line_ids)
    cells: set[int] = set()
    for line in get_all_lines():
        if line.id in wanted:
            cells.update(line.cells)
    return cells
