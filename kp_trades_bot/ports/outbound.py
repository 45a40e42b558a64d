"""Outbound ports — interfaces for external system adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from kp_trades_bot.domain.models import ContentPart
    from kp_trades_bot.domain.session_control import CloseSessionControl


@runtime_checkable
class LLMPort(Protocol):
    """Interface for generative model backends."""

    async def execute(
        self,
        parts: Sequence[ContentPart],
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str: ...


@runtime_checkable
class ImageFetcherPort(Protocol):
    """Interface for downloading attachment bytes."""

    async def fetch(self, url: str) -> bytes: ...


@runtime_checkable
class SessionThread(Protocol):
    """A freshly created private thread."""

    @property
    def id(self) -> int: ...

    async def send(self, text: str, control: Optional[CloseSessionControl] = None) -> None: ...


@runtime_checkable
class MessageActions(Protocol):
    """Platform operations bound to one incoming message."""

    async def delete(self) -> None: ...
    async def notify_author(self, text: str) -> None: ...
    async def reply(self, text: str) -> None: ...
    async def send_typing(self) -> None: ...
    async def start_private_thread(self, name: str) -> SessionThread: ...


@runtime_checkable
class InteractionActions(Protocol):
    """Platform operations bound to one button activation."""

    async def respond_ephemeral(self, text: str) -> None: ...
    async def delete_channel(self) -> None: ...
