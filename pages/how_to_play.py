"""
遊び方ページ
- 既定の説明文を表示します。config.toml の [pages] how_to_play で差し替えられます。
"""

import streamlit as st

from src.walk_bingo.services.config_loader import get_how_to_play_text, load_config_file

# ページ設定
st.set_page_config(page_title="遊び方", layout="centered")
st.title("遊び方")

load_config_file()
st.markdown(get_how_to_play_text())
