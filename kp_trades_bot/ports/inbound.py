"""Inbound port — platform-agnostic event representation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class EventKind(Enum):
    """Event types the router subscribes to."""

    NEW_MESSAGE = "new_message"
    BUTTON_ACTIVATED = "button_activated"
    READY = "ready"


@dataclass(frozen=True)
class Attachment:
    content_type: Optional[str]
    url: str

    @property
    def is_image(self) -> bool:
        return bool(self.content_type) and self.content_type.startswith("image/")


@dataclass(frozen=True)
class IncomingMessage:
    """Discord-agnostic message representation.

    ``parent_channel_id`` is only meaningful when ``is_thread`` is set.
    """

    content: str
    channel_id: int
    author_id: int
    author_name: str
    is_own_message: bool = False
    mentions_bot: bool = False
    is_thread: bool = False
    parent_channel_id: Optional[int] = None
    attachments: Tuple[Attachment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ButtonActivation:
    """A click on a message component button."""

    custom_id: str
    user_id: int
    channel_id: int
