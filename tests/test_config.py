"""Test configuration loading."""

import pytest

from helperbot.config import Config, load_config
from helperbot.errors import ConfigurationError


def test_defaults(monkeypatch):
    """Test default values."""
    monkeypatch.delenv("PORT", raising=False)
    cfg = Config(telegram_bot_token="", finnhub_api_key="")

    assert cfg.port == 5000
    assert cfg.leetcode.graphql_url == "https://leetcode.com/graphql"
    assert cfg.leetcode.timeout == 10.0
    assert cfg.finnhub.base_url == "https://finnhub.io/api/v1"
    assert cfg.finnhub.timeout == 10.0
    assert cfg.bot.reply_unknown_commands is False


def test_secrets_from_environment(monkeypatch):
    """Test flat environment variable names."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:ABC")
    monkeypatch.setenv("FINNHUB_API_KEY", "fh-key")
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("BOT__REPLY_UNKNOWN_COMMANDS", "true")

    cfg = Config()

    assert cfg.telegram_bot_token == "123:ABC"
    assert cfg.finnhub_api_key == "fh-key"
    assert cfg.port == 8081
    assert cfg.bot.reply_unknown_commands is True
    assert cfg.require_telegram_token() == "123:ABC"


@pytest.mark.parametrize("token", ["", "   "])
def test_require_telegram_token(token):
    """Test missing token raises ConfigurationError."""
    with pytest.raises(ConfigurationError):
        Config(telegram_bot_token=token).require_telegram_token()


def test_from_yaml(tmp_path, monkeypatch):
    """Test YAML file with hyphenated keys."""
    monkeypatch.setenv("FINNHUB_API_KEY", "from-env")
    path = tmp_path / "settings.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "  json-format: true\n"
        "telegram:\n"
        "  poll-timeout: 50\n"
        "bot:\n"
        "  reply-unknown-commands: true\n"
    )

    cfg = Config.from_yaml(path)

    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.json_format is True
    assert cfg.telegram.poll_timeout == 50
    assert cfg.bot.reply_unknown_commands is True
    assert cfg.finnhub_api_key == "from-env"


def test_from_yaml_missing_file(tmp_path):
    """Test missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(tmp_path / "nope.yaml")


def test_load_config_falls_back_to_environment(tmp_path, monkeypatch):
    """Test load_config works without a settings file."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "env-token")

    cfg = load_config(tmp_path / "missing.yaml")

    assert cfg.telegram_bot_token == "env-token"
