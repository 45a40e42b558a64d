"""Tests for the typed AppConfig dataclass."""

import pytest

from kp_trades_bot.config import DEFAULT_GEMINI_MODEL, AppConfig, ConfigError, describe_presence


class TestFromEnv:
    def test_all_settings(self):
        c = AppConfig.from_env({
            "ALLOWED_CHANNEL_ID": "123456789",
            "BOT_TOKEN": "discord-token",
            "GEMINI_API_KEY": "gemini-key",
            "GEMINI_MODEL": "gemini-2.0-flash",
        })
        assert c.allowed_channel_id == 123456789
        assert c.bot_token == "discord-token"
        assert c.gemini_api_key == "gemini-key"
        assert c.gemini_model == "gemini-2.0-flash"

    def test_only_channel_required(self):
        c = AppConfig.from_env({"ALLOWED_CHANNEL_ID": " 42 "})
        assert c.allowed_channel_id == 42
        assert c.bot_token == ""
        assert c.gemini_api_key == ""
        assert c.gemini_model == DEFAULT_GEMINI_MODEL

    def test_default_model_is_served(self):
        assert DEFAULT_GEMINI_MODEL == "gemini-2.5-flash"
        assert AppConfig(allowed_channel_id=1).gemini_model == "gemini-2.5-flash"

    def test_blank_model_falls_back(self):
        c = AppConfig.from_env({"ALLOWED_CHANNEL_ID": "1", "GEMINI_MODEL": "  "})
        assert c.gemini_model == DEFAULT_GEMINI_MODEL

    def test_missing_channel(self):
        with pytest.raises(ConfigError, match="ALLOWED_CHANNEL_ID"):
            AppConfig.from_env({"BOT_TOKEN": "t"})

    def test_empty_channel(self):
        with pytest.raises(ConfigError):
            AppConfig.from_env({"ALLOWED_CHANNEL_ID": ""})

    def test_non_numeric_channel(self):
        with pytest.raises(ConfigError, match="numeric"):
            AppConfig.from_env({"ALLOWED_CHANNEL_ID": "general"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_CHANNEL_ID", "777")
        monkeypatch.setenv("BOT_TOKEN", "tok")
        c = AppConfig.from_env()
        assert c.allowed_channel_id == 777
        assert c.bot_token == "tok"


class TestDescribePresence:
    def test_reports_without_secrets(self):
        c = AppConfig(allowed_channel_id=1, bot_token="secret-token", gemini_api_key="")
        report = "\n".join(describe_presence(c))
        assert "Bot Token found: True" in report
        assert "Gemini Key found: False" in report
        assert "Channel ID found: True" in report
        assert "secret-token" not in report


def test_config_is_immutable():
    c = AppConfig(allowed_channel_id=1)
    with pytest.raises(AttributeError):
        c.allowed_channel_id = 2
