from __future__ import annotations

from src.walk_bingo.domain.constants import REQUIRED_ITEMS

# items.txt が使えない場合の既定項目（40件）
FALLBACK_ITEMS: tuple[str, ...] = (
    "赤い花", "白い猫", "自動販売機", "郵便ポスト", "鳥の鳴き声",
    "ベンチ", "石の階段", "落ち葉", "電柱", "雲の形",
    "犬の散歩", "自転車", "水たまり", "蝶々", "看板",
    "煙突", "橋", "鉄塔", "紫陽花", "タンポポ",
    "カラス", "すずめ", "消火栓", "マンホール", "公園の遊具",
    "木の実", "苔", "蜘蛛の巣", "風見鶏", "噴水",
    "時計台", "銅像", "鯉のぼり", "猫じゃらし", "石垣",
    "トンネル", "踏切", "川", "池", "畑",
)  # fmt: skip


def parse_items(text: str) -> list[str]:
    """改行区切りテキストから項目リストを作る。

    - 各行の前後空白を除去する
    - 空行は捨てる
    - 重複は統合しない（読み込み順を保持）
    """
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def has_enough_items(items: list[str]) -> bool:
    """カード1枚を作るのに十分な項目数か。"""
    return len(items) >= REQUIRED_ITEMS


def fallback_items() -> list[str]:
    """既定項目のコピーを返す。"""
    return list(FALLBACK_ITEMS)
