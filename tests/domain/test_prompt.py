"""Tests for domain/prompt.py and content part models."""

import base64

from kp_trades_bot.domain.models import ImagePart
from kp_trades_bot.domain.prompt import (
    MESSAGE_LIMIT,
    first_image_attachment,
    split_message,
    strip_mention,
    thread_name_for,
)
from kp_trades_bot.ports.inbound import Attachment


class TestStripMention:
    def test_leading_mention(self):
        assert strip_mention("<@999> Analyze AAPL") == "Analyze AAPL"

    def test_nickname_mention(self):
        assert strip_mention("<@!999>   Analyze AAPL  ") == "Analyze AAPL"

    def test_only_first_mention_removed(self):
        assert strip_mention("<@999> compare with <@123>") == "compare with <@123>"

    def test_mention_only(self):
        assert strip_mention("<@999>") == ""

    def test_no_mention(self):
        assert strip_mention("  plain text ") == "plain text"

    def test_channel_and_role_tokens_untouched(self):
        assert strip_mention("<#555> <@&777> hi") == "<#555> <@&777> hi"


class TestFirstImageAttachment:
    def test_picks_first_image(self):
        attachments = [
            Attachment(content_type="application/pdf", url="a"),
            Attachment(content_type="image/jpeg", url="b"),
            Attachment(content_type="image/png", url="c"),
        ]
        assert first_image_attachment(attachments).url == "b"

    def test_missing_content_type(self):
        assert first_image_attachment([Attachment(content_type=None, url="a")]) is None

    def test_empty(self):
        assert first_image_attachment(()) is None


class TestImagePart:
    def test_encoding_fidelity(self):
        raw = bytes(range(256)) * 3
        part = ImagePart.from_bytes(raw, "image/webp")
        assert part.mime_type == "image/webp"
        assert base64.b64decode(part.data) == raw
        assert part.raw_bytes() == raw

    def test_data_is_text(self):
        assert ImagePart.from_bytes(b"abc", "image/png").data == "YWJj"


class TestThreadName:
    def test_name(self):
        assert thread_name_for("A") == "Private Chat with A"

    def test_truncated_to_limit(self):
        assert len(thread_name_for("n" * 200)) == 100


class TestSplitMessage:
    def test_short_text(self):
        assert split_message("hello") == ["hello"]

    def test_exact_limit(self):
        text = "a" * MESSAGE_LIMIT
        assert split_message(text) == [text]

    def test_over_limit(self):
        chunks = split_message("a" * 4500)
        assert [len(c) for c in chunks] == [2000, 2000, 500]
        assert "".join(chunks) == "a" * 4500
