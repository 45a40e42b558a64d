"""KP Trades Bot — Discord market-analyst relay on Gemini."""

from kp_trades_bot.config import AppConfig, ConfigError, __version__
from kp_trades_bot.domain.persona import BOT_PERSONA, DISCLAIMER
from kp_trades_bot.domain.router import MessageRouter, classify_message
from kp_trades_bot.domain.session_control import CloseSessionControl
from kp_trades_bot.ports.inbound import Attachment, ButtonActivation, EventKind, IncomingMessage

__all__ = [
    "__version__",
    "AppConfig",
    "ConfigError",
    "BOT_PERSONA",
    "DISCLAIMER",
    "MessageRouter",
    "classify_message",
    "CloseSessionControl",
    "Attachment",
    "ButtonActivation",
    "EventKind",
    "IncomingMessage",
]
