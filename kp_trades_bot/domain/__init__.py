"""Domain layer — pure Python, no framework dependencies."""

from kp_trades_bot.domain.models import ContentPart, ImagePart, RouteDecision, TextPart
from kp_trades_bot.domain.persona import BOT_PERSONA, DISCLAIMER
from kp_trades_bot.domain.prompt import (
    first_image_attachment,
    split_message,
    strip_mention,
    thread_name_for,
)
from kp_trades_bot.domain.router import MessageRouter, classify_message
from kp_trades_bot.domain.session_control import CloseSessionControl

__all__ = [
    "ContentPart",
    "ImagePart",
    "RouteDecision",
    "TextPart",
    "BOT_PERSONA",
    "DISCLAIMER",
    "first_image_attachment",
    "split_message",
    "strip_mention",
    "thread_name_for",
    "MessageRouter",
    "classify_message",
    "CloseSessionControl",
]
