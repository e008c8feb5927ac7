import random
from typing import Any

import pytest

from src.walk_bingo.services import config_loader


class DictSessionStore:
    """テスト用の SessionStore（辞書実装）。"""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


@pytest.fixture
def store():
    """Empty in-memory session store."""
    return DictSessionStore()


@pytest.fixture
def rng():
    """Seeded RNG so card layouts are reproducible."""
    return random.Random(1234)


@pytest.fixture
def pool24():
    """Exactly REQUIRED_ITEMS distinct items."""
    return [f"item-{i:02d}" for i in range(24)]


@pytest.fixture(autouse=True)
def clear_runtime_config():
    """Runtime config is module-level; reset it around every test."""
    config_loader.set_runtime_config(None)
    yield
    config_loader.set_runtime_config(None)
