import streamlit as st

from src.walk_bingo.adapters.session_store_streamlit import StSessionStore
from src.walk_bingo.services import data_access
from src.walk_bingo.services.config_loader import load_config_file
from src.walk_bingo.services.item_loader import load_items
from src.walk_bingo.services.presentation import items_dataframe

# ページ設定
st.set_page_config(page_title="項目一覧", layout="centered")
st.title("項目一覧")
st.caption("カードはこの中からランダムに 24 個が選ばれます。")

store = StSessionStore()
# トップページ未訪問のセッションではここで読み込む
items = data_access.get_items(store)
if not items:
    load_config_file()
    items = load_items()
    data_access.set_items(store, items)

st.dataframe(items_dataframe(items), hide_index=True, use_container_width=True)
