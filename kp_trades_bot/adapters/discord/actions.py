"""discord.py implementations of the outbound action ports."""

from typing import Optional

import discord

from kp_trades_bot.adapters.discord.views import build_close_view
from kp_trades_bot.domain.session_control import CloseSessionControl


class DiscordSessionThread:
    """SessionThread implementation wrapping a discord.Thread."""

    def __init__(self, thread: discord.Thread):
        self._thread = thread

    @property
    def id(self) -> int:
        return self._thread.id

    async def send(self, text: str, control: Optional[CloseSessionControl] = None) -> None:
        if control is None:
            await self._thread.send(text)
        else:
            view = build_close_view(control)
            await self._thread.send(text, view=view)
            # Clicks are routed by custom id; drop the view from the client's store
            view.stop()


class DiscordMessageActions:
    """MessageActions implementation bound to one discord.Message."""

    def __init__(self, message: discord.Message):
        self._message = message

    async def delete(self) -> None:
        await self._message.delete()

    async def notify_author(self, text: str) -> None:
        await self._message.author.send(text)

    async def reply(self, text: str) -> None:
        await self._message.reply(text)

    async def send_typing(self) -> None:
        await self._message.channel.typing()

    async def start_private_thread(self, name: str) -> DiscordSessionThread:
        # Threads started from a message are always public, so the private
        # thread hangs off the channel and the author is added explicitly.
        thread = await self._message.channel.create_thread(
            name=name,
            type=discord.ChannelType.private_thread,
            invitable=False,
        )
        await thread.add_user(self._message.author)
        return DiscordSessionThread(thread)


class DiscordInteractionActions:
    """InteractionActions implementation bound to one discord.Interaction."""

    def __init__(self, interaction: discord.Interaction):
        self._interaction = interaction

    async def respond_ephemeral(self, text: str) -> None:
        await self._interaction.response.send_message(text, ephemeral=True)

    async def delete_channel(self) -> None:
        await self._interaction.channel.delete()
