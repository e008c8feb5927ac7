"""
Unit tests for services.config_loader.
"""

import logging

from src.walk_bingo.app.state import Settings
from src.walk_bingo.domain import ITEMS_FILE_PATH, SHUFFLE_STEP_MS
from src.walk_bingo.services import config_loader


class TestGetters:
    def test_getters_when_no_config_then_defaults(self):
        assert config_loader.get_app_title() == "散歩ビンゴ"
        assert config_loader.get_items_source() == ITEMS_FILE_PATH
        assert config_loader.get_shuffle_enabled() is True
        assert config_loader.get_shuffle_step_ms() == SHUFFLE_STEP_MS
        assert "FREE" in config_loader.get_how_to_play_text()

    def test_getters_when_valid_config_then_values_used(self):
        config_loader.set_runtime_config(
            {
                "title": "  朝の散歩  ",
                "items": {"source": "https://example.com/items.txt"},
                "effects": {"shuffle": False, "shuffle_step_ms": 50},
                "pages": {"how_to_play": "自由に遊ぼう"},
            }
        )

        assert config_loader.get_app_title() == "朝の散歩"
        assert config_loader.get_items_source() == "https://example.com/items.txt"
        assert config_loader.get_shuffle_enabled() is False
        assert config_loader.get_shuffle_step_ms() == 50
        assert config_loader.get_how_to_play_text() == "自由に遊ぼう"

    def test_getters_when_invalid_types_then_defaults(self):
        config_loader.set_runtime_config(
            {
                "title": 3,
                "items": "not-a-table",
                "effects": {"shuffle": "yes", "shuffle_step_ms": True},
            }
        )

        assert config_loader.get_app_title() == "散歩ビンゴ"
        assert config_loader.get_items_source() == ITEMS_FILE_PATH
        assert config_loader.get_shuffle_enabled() is True
        assert config_loader.get_shuffle_step_ms() == SHUFFLE_STEP_MS

    def test_get_shuffle_step_ms_when_negative_then_default(self):
        config_loader.set_runtime_config({"effects": {"shuffle_step_ms": -5}})

        assert config_loader.get_shuffle_step_ms() == SHUFFLE_STEP_MS


class TestLoadConfigFile:
    def test_load_config_file_when_missing_then_false_and_defaults(self, tmp_path):
        assert config_loader.load_config_file(tmp_path / "config.toml") is False
        assert config_loader.get_app_title() == "散歩ビンゴ"

    def test_load_config_file_when_valid_then_applied(self, tmp_path):
        # Arrange
        path = tmp_path / "config.toml"
        path.write_text('title = "公園ビンゴ"\n[effects]\nshuffle = false\n', encoding="utf-8")

        # Act
        loaded = config_loader.load_config_file(path)

        # Assert
        assert loaded is True
        assert config_loader.get_app_title() == "公園ビンゴ"
        assert config_loader.load_default_settings() == Settings(shuffle=False)

    def test_load_config_file_when_malformed_then_warning_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.toml"
        path.write_text("title = [unclosed\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            loaded = config_loader.load_config_file(path)

        assert loaded is False
        assert config_loader.get_app_title() == "散歩ビンゴ"
        assert "設定ファイル" in caplog.text

    def test_load_config_file_when_env_var_then_path_used(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text('title = "環境変数"\n', encoding="utf-8")
        monkeypatch.setenv(config_loader.CONFIG_PATH_ENV, str(path))

        assert config_loader.load_config_file() is True
        assert config_loader.get_app_title() == "環境変数"
