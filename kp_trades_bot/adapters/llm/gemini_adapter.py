"""Gemini adapter — implements LLMPort on the google-genai SDK."""

import sys
from datetime import datetime
from typing import List, Optional, Sequence

from google import genai
from google.genai import types

from kp_trades_bot.config import DEFAULT_GEMINI_MODEL
from kp_trades_bot.domain.models import ContentPart, ImagePart, TextPart


class GenerationError(RuntimeError):
    """Model call finished without usable text."""


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_gemini_parts(parts: Sequence[ContentPart]) -> List[types.Part]:
    """Convert domain content parts to SDK parts, keeping their order."""
    converted = []
    for part in parts:
        if isinstance(part, TextPart):
            converted.append(types.Part.from_text(text=part.text))
        elif isinstance(part, ImagePart):
            converted.append(types.Part.from_bytes(data=part.raw_bytes(), mime_type=part.mime_type))
        else:
            raise TypeError(f"unsupported content part: {type(part).__name__}")
    return converted


class GeminiAdapter:
    """Calls a Gemini text/vision model. Implements LLMPort protocol."""

    def __init__(
        self,
        api_key: str = "",
        default_model: str = DEFAULT_GEMINI_MODEL,
        client: Optional[genai.Client] = None,
    ):
        self._api_key = api_key
        self._client = client
        self.default_model = default_model

    @property
    def client(self) -> genai.Client:
        # Built on first use; a missing key surfaces as a failed request
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key or None)
        return self._client

    async def execute(
        self,
        parts: Sequence[ContentPart],
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        model = model or self.default_model
        config = None
        if system_prompt:
            config = types.GenerateContentConfig(system_instruction=system_prompt)

        _log(f"[{datetime.now().isoformat()}] Executing with Gemini ({model})")
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=to_gemini_parts(parts),
            config=config,
        )
        text = response.text
        if not text:
            raise GenerationError("Gemini returned an empty response")
        _log(f"[{datetime.now().isoformat()}] Completed")
        return text
