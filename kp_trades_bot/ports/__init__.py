"""Port interfaces (Hexagonal Architecture)."""

from kp_trades_bot.ports.inbound import Attachment, ButtonActivation, EventKind, IncomingMessage
from kp_trades_bot.ports.outbound import (
    ImageFetcherPort,
    InteractionActions,
    LLMPort,
    MessageActions,
    SessionThread,
)

__all__ = [
    "Attachment",
    "ButtonActivation",
    "EventKind",
    "IncomingMessage",
    "ImageFetcherPort",
    "InteractionActions",
    "LLMPort",
    "MessageActions",
    "SessionThread",
]
