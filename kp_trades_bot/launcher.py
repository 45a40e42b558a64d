"""Launcher for the KP Trades analyst bot."""

import sys
from typing import Optional

from kp_trades_bot.adapters.discord.adapter import DiscordRelayBot
from kp_trades_bot.adapters.http.image_fetcher import AiohttpImageFetcher
from kp_trades_bot.adapters.llm.gemini_adapter import GeminiAdapter
from kp_trades_bot.config import AppConfig, ConfigError, describe_presence
from kp_trades_bot.domain.persona import BOT_PERSONA
from kp_trades_bot.domain.router import MessageRouter
from kp_trades_bot.ports.outbound import LLMPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def load_config() -> AppConfig:
    """Load config or terminate the process before any client exists."""
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        _log(f"FATAL ERROR: {e}")
        sys.exit(1)
    for line in describe_presence(config):
        _log(line)
    return config


def build_bot(config: AppConfig, executor: Optional[LLMPort] = None) -> DiscordRelayBot:
    """Wire router, adapters and Discord client."""
    router = MessageRouter(
        allowed_channel_id=config.allowed_channel_id,
        executor=executor or GeminiAdapter(api_key=config.gemini_api_key, default_model=config.gemini_model),
        image_fetcher=AiohttpImageFetcher(),
        persona=BOT_PERSONA,
        model=config.gemini_model,
    )
    return DiscordRelayBot(router)


def main():
    config = load_config()
    bot = build_bot(config)
    bot.run(config.bot_token)


if __name__ == "__main__":
    main()
