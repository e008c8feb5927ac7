"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# ビンゴカードの行・列数
GRID_SIZE: int = 5

# ビンゴカードの総マス数
TOTAL_CELLS: int = GRID_SIZE * GRID_SIZE

# フリーマスのインデックス（中央）
FREE_CELL_INDEX: int = TOTAL_CELLS // 2

# カードに必要な項目数（フリーマスを除く）
REQUIRED_ITEMS: int = TOTAL_CELLS - 1

# フリーマスの表示テキスト
FREE_CELL_TEXT: str = "FREE"

# 項目データファイルの既定パス（作業ディレクトリ基準）
ITEMS_FILE_PATH: str = "data/items.txt"

# シャッフル演出の1マスあたり遅延ミリ秒
SHUFFLE_STEP_MS: int = 30
