"""
Tests for configuration resolution.
"""

import json

import pytest

from config import ConfigError, TrelloConfig, load_settings, resolve_config


ENV = {
    "TRELLO_API_KEY": "env-key",
    "TRELLO_API_TOKEN": "env-token",
    "TRELLO_BOARD_ID": "env-board",
}


class TestResolveConfig:
    """Tests for resolve_config."""

    def test_from_environment(self):
        """All required fields can come from the environment."""
        config = resolve_config({}, ENV)

        assert config == TrelloConfig("env-key", "env-token", "env-board", None)

    def test_default_list_from_environment(self):
        config = resolve_config({}, {**ENV, "TRELLO_DEFAULT_LIST_ID": "list9"})

        assert config.default_list_id == "list9"

    def test_settings_win_over_environment(self):
        """Host settings take priority field by field."""
        config = resolve_config({"board_id": "settings-board"}, ENV)

        assert config.board_id == "settings-board"
        assert config.api_key == "env-key"

    def test_missing_fields_are_named(self):
        with pytest.raises(ConfigError) as exc_info:
            resolve_config({"api_token": "t"}, {})

        message = str(exc_info.value)
        assert exc_info.value.missing == ["api_key", "board_id"]
        assert "TRELLO_API_KEY" in message
        assert "TRELLO_BOARD_ID" in message
        assert "TRELLO_API_TOKEN" not in message
        assert "trello_setup" in message

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(ConfigError):
            resolve_config({}, {**ENV, "TRELLO_API_KEY": ""})

    def test_default_list_is_optional(self):
        config = resolve_config({}, ENV)

        assert config.default_list_id is None


class TestLoadSettings:
    """Tests for reading the settings file."""

    def test_reads_trello_section(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"trello": {"board_id": "b1"}, "other": {}}))
        monkeypatch.setenv("TRELLO_MCP_CONFIG", str(path))

        assert load_settings() == {"board_id": "b1"}

    def test_missing_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TRELLO_MCP_CONFIG", str(tmp_path / "nope.json"))

        assert load_settings() == {}

    def test_corrupt_file_is_empty(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        monkeypatch.setenv("TRELLO_MCP_CONFIG", str(path))

        assert load_settings() == {}
