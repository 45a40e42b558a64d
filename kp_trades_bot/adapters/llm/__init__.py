"""LLM adapters — Gemini executor."""

from kp_trades_bot.adapters.llm.gemini_adapter import GeminiAdapter, GenerationError, to_gemini_parts

__all__ = [
    "GeminiAdapter",
    "GenerationError",
    "to_gemini_parts",
]
