"""Prompt assembly helpers.

Pure Python, no framework dependencies.
"""

import re
from typing import List, Optional, Sequence

from kp_trades_bot.ports.inbound import Attachment

# First user mention token (<@id> or legacy nickname form <@!id>) and trailing whitespace
MENTION_RE = re.compile(r"<@!?\d+>\s*")

MESSAGE_LIMIT = 2000
THREAD_NAME_LIMIT = 100


def strip_mention(content: str) -> str:
    """Remove the leading mention token and surrounding whitespace."""
    return MENTION_RE.sub("", content, count=1).strip()


def first_image_attachment(attachments: Sequence[Attachment]) -> Optional[Attachment]:
    for attachment in attachments:
        if attachment.is_image:
            return attachment
    return None


def thread_name_for(author_name: str) -> str:
    return f"Private Chat with {author_name}"[:THREAD_NAME_LIMIT]


def split_message(text: str, limit: int = MESSAGE_LIMIT) -> List[str]:
    """Split a message into chunks that fit Discord's character limit"""
    if len(text) <= limit:
        return [text]
    chunks = []
    while text:
        chunks.append(text[:limit])
        text = text[limit:]
    return chunks
