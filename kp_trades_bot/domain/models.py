"""Domain data models — pure Python dataclasses."""

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    """Inline image content; ``data`` is base64 text."""

    mime_type: str
    data: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "ImagePart":
        return cls(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii"))

    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.data)


ContentPart = Union[TextPart, ImagePart]


class RouteDecision(Enum):
    """What the router does with one incoming message."""

    IGNORE = "ignore"
    ENFORCE_HYGIENE = "enforce_hygiene"
    RELAY_NEW_SESSION = "relay_new_session"  # main channel → new private thread
    RELAY_IN_THREAD = "relay_in_thread"  # already inside an allowed thread
