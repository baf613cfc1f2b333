"""Configuration management using Pydantic Settings v2."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from ruamel.yaml import YAML

from helperbot.errors import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    file: str = Field(default="", description="Log file path (empty disables the file sink)")
    rotation: str = Field(default="10 MB", description="Log rotation size")
    retention: str = Field(default="7 days", description="Log retention period")
    json_format: bool = Field(default=False, description="Use JSON log format")


class TelegramConfig(BaseModel):
    """Telegram Bot API configuration."""

    api_base: str = Field(default="https://api.telegram.org", description="Bot API base URL")
    poll_timeout: int = Field(default=30, ge=0, description="Long-poll timeout in seconds")
    error_backoff_seconds: float = Field(
        default=5.0, ge=0, description="Pause after a failed getUpdates call"
    )


class LeetCodeConfig(BaseModel):
    """LeetCode GraphQL configuration."""

    graphql_url: str = Field(
        default="https://leetcode.com/graphql", description="GraphQL endpoint"
    )
    problems_base_url: str = Field(
        default="https://leetcode.com/problems", description="Base URL for problem links"
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class FinnhubConfig(BaseModel):
    """Finnhub API configuration."""

    base_url: str = Field(default="https://finnhub.io/api/v1", description="API base URL")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class BotConfig(BaseModel):
    """Command handling behaviour."""

    reply_unknown_commands: bool = Field(
        default=False, description="Reply to unrecognised commands instead of ignoring them"
    )


class HealthCheckConfig(BaseModel):
    """Health check configuration."""

    enabled: bool = Field(default=True, description="Serve the health endpoint")
    unhealthy_threshold: int = Field(
        default=3, ge=1, description="Consecutive polling failures before unhealthy"
    )


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    telegram_bot_token: str = Field(default="", description="Telegram bot token")
    finnhub_api_key: str = Field(default="", description="Finnhub API key")
    port: int = Field(default=5000, ge=1, le=65535, description="Health server port")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    leetcode: LeetCodeConfig = Field(default_factory=LeetCodeConfig)
    finnhub: FinnhubConfig = Field(default_factory=FinnhubConfig)
    bot: BotConfig = Field(default_factory=BotConfig)
    health: HealthCheckConfig = Field(default_factory=HealthCheckConfig)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Values present in the file take precedence; anything it leaves out is
        read from the environment (and ``.env``).

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        yaml = YAML(typ="safe")
        with open(config_path) as f:
            config_dict = yaml.load(f) or {}

        return cls(**cls._normalize_keys(config_dict))

    @staticmethod
    def _normalize_keys(data: dict) -> dict:
        """Convert hyphenated keys to underscored for Python compatibility.

        Args:
            data: Dictionary with possibly hyphenated keys

        Returns:
            Dictionary with normalized keys
        """
        normalized = {}
        for key, value in data.items():
            new_key = key.replace("-", "_")
            if isinstance(value, dict):
                normalized[new_key] = Config._normalize_keys(value)
            else:
                normalized[new_key] = value
        return normalized

    def require_telegram_token(self) -> str:
        """Return the bot token.

        Raises:
            ConfigurationError: If TELEGRAM_BOT_TOKEN is not set
        """
        token = self.telegram_bot_token.strip()
        if not token:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN environment variable is required")
        return token


def load_config(config_path: str | Path = "config/settings.yaml") -> Config:
    """Load application configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        Config instance, built from the environment alone when the file is absent
    """
    try:
        return Config.from_yaml(config_path)
    except FileNotFoundError:
        return Config()


config: Config = load_config()
