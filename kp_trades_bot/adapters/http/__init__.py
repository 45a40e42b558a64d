"""HTTP adapters."""

from kp_trades_bot.adapters.http.image_fetcher import AiohttpImageFetcher

__all__ = ["AiohttpImageFetcher"]
