"""Configuration loaded from the environment (.env supported)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


class ConfigError(Exception):
    """Required setting missing or malformed. Fatal at startup."""


@dataclass(frozen=True)
class AppConfig:
    """Typed process configuration."""

    allowed_channel_id: int
    bot_token: str = ""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables.

        Only ALLOWED_CHANNEL_ID is validated here; the token and API key are
        checked by the services that consume them.
        """
        env = os.environ if environ is None else environ

        raw_channel = env.get("ALLOWED_CHANNEL_ID", "").strip()
        if not raw_channel:
            raise ConfigError(
                "ALLOWED_CHANNEL_ID is not set in the .env file. The bot cannot start."
            )
        try:
            channel_id = int(raw_channel)
        except ValueError:
            raise ConfigError(
                f"ALLOWED_CHANNEL_ID must be a numeric channel id, got {raw_channel!r}"
            ) from None

        return cls(
            allowed_channel_id=channel_id,
            bot_token=env.get("BOT_TOKEN", ""),
            gemini_api_key=env.get("GEMINI_API_KEY", ""),
            gemini_model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_GEMINI_MODEL,
        )


def describe_presence(config: AppConfig) -> List[str]:
    """Startup report of which settings were found. Never echoes secrets."""
    return [
        "--- CHECKING ENVIRONMENT VARIABLES ---",
        f"Bot Token found: {bool(config.bot_token)}",
        f"Gemini Key found: {bool(config.gemini_api_key)}",
        f"Channel ID found: {bool(config.allowed_channel_id)}",
        f"Model: {config.gemini_model}",
        "------------------------------------",
    ]
