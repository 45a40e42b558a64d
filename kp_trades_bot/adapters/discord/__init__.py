"""Discord adapters."""

from kp_trades_bot.adapters.discord.actions import (
    DiscordInteractionActions,
    DiscordMessageActions,
    DiscordSessionThread,
)
from kp_trades_bot.adapters.discord.adapter import DiscordRelayBot
from kp_trades_bot.adapters.discord.views import build_close_view

__all__ = [
    "DiscordInteractionActions",
    "DiscordMessageActions",
    "DiscordSessionThread",
    "DiscordRelayBot",
    "build_close_view",
]
