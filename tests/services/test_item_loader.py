"""
Unit tests for services.item_loader.

Test Coverage:
- local file read, URL read via requests (mocked)
- fallback on missing file, HTTP error, network error, short list
"""

import logging

import pytest
import requests

from src.walk_bingo.domain import FALLBACK_ITEMS, generate_card_items
from src.walk_bingo.services import config_loader, item_loader


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


def _lines(n):
    return "\n".join(f"項目{i}" for i in range(n)) + "\n"


class TestLoadItemsFromFile:
    def test_load_items_when_enough_lines_then_returns_parsed(self, tmp_path):
        # Arrange
        path = tmp_path / "items.txt"
        path.write_text("\n" + _lines(30) + "\n  \n", encoding="utf-8")

        # Act
        items = item_loader.load_items(path)

        # Assert
        assert items == [f"項目{i}" for i in range(30)]

    def test_load_items_when_file_missing_then_fallback_with_warning(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            items = item_loader.load_items(tmp_path / "missing.txt")

        assert items == list(FALLBACK_ITEMS)
        assert "フォールバック" in caplog.text

    def test_load_items_when_ten_items_then_fallback_and_card_generated(self, tmp_path, caplog):
        """Scenario E."""
        # Arrange
        path = tmp_path / "items.txt"
        path.write_text(_lines(10), encoding="utf-8")

        # Act
        with caplog.at_level(logging.WARNING):
            items = item_loader.load_items(path)
        card = generate_card_items(items)

        # Assert
        assert len(items) == 40
        assert len(card) == 25
        assert "項目数が不足" in caplog.text

    def test_load_items_when_exactly_24_then_used(self, tmp_path):
        path = tmp_path / "items.txt"
        path.write_text(_lines(24), encoding="utf-8")

        assert len(item_loader.load_items(path)) == 24

    def test_load_items_when_source_omitted_then_config_source_used(self, tmp_path):
        # Arrange
        path = tmp_path / "configured.txt"
        path.write_text(_lines(25), encoding="utf-8")
        config_loader.set_runtime_config({"items": {"source": str(path)}})

        # Act
        items = item_loader.load_items()

        # Assert
        assert len(items) == 25

    def test_load_items_when_file_has_bom_then_first_item_clean(self, tmp_path):
        # Arrange: Notepad などが付ける BOM 付き UTF-8
        path = tmp_path / "items.txt"
        path.write_text(_lines(30), encoding="utf-8-sig")

        # Act
        items = item_loader.load_items(path)

        # Assert
        assert items[0] == "項目0"
        assert not any("\ufeff" in item for item in items)


class TestLoadItemsFromUrl:
    def test_load_items_when_url_ok_then_decoded_utf8(self, monkeypatch):
        # Arrange
        calls = []

        def fake_get(url):
            calls.append(url)
            return _FakeResponse(_lines(26).encode("utf-8"))

        monkeypatch.setattr(item_loader.requests, "get", fake_get)

        # Act
        items = item_loader.load_items("https://example.com/items.txt")

        # Assert
        assert calls == ["https://example.com/items.txt"]
        assert items[0] == "項目0"
        assert len(items) == 26

    def test_load_items_when_http_error_then_fallback(self, monkeypatch):
        monkeypatch.setattr(item_loader.requests, "get", lambda url: _FakeResponse(b"", 404))

        assert item_loader.load_items("http://example.com/items.txt") == list(FALLBACK_ITEMS)

    def test_load_items_when_connection_error_then_fallback_single_attempt(self, monkeypatch):
        # Arrange
        calls = []

        def fake_get(url):
            calls.append(url)
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(item_loader.requests, "get", fake_get)

        # Act
        items = item_loader.load_items("https://example.com/items.txt")

        # Assert
        assert items == list(FALLBACK_ITEMS)
        assert len(calls) == 1


class TestReadItemsText:
    def test_read_items_text_when_url_has_bom_then_stripped(self, monkeypatch):
        monkeypatch.setattr(
            item_loader.requests, "get", lambda url: _FakeResponse("\ufeffa\nb".encode("utf-8"))
        )

        assert item_loader.read_items_text("https://example.com/items.txt") == "a\nb"

    def test_read_items_text_when_missing_then_raises(self, tmp_path):
        with pytest.raises(OSError):
            item_loader.read_items_text(tmp_path / "nope.txt")
