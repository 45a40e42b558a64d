"""Discord adapter — bridges discord.Client to MessageRouter.

DiscordRelayBot converts Discord events into platform-agnostic values
(IncomingMessage, ButtonActivation), binds the matching action port, and
hands both to the router.
"""

import sys

import discord

from kp_trades_bot.adapters.discord.actions import DiscordInteractionActions, DiscordMessageActions
from kp_trades_bot.domain.router import MessageRouter
from kp_trades_bot.ports.inbound import Attachment, ButtonActivation, EventKind, IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordRelayBot(discord.Client):
    """Thin Discord adapter that delegates to MessageRouter."""

    def __init__(self, router: MessageRouter, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self._router = router

    def _mentions_bot(self, message: discord.Message) -> bool:
        # Explicit user mentions only; role and @everyone mentions do not count
        return any(user.id == self.user.id for user in message.mentions)

    def to_incoming(self, message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        channel = message.channel
        is_thread = isinstance(channel, discord.Thread)
        return IncomingMessage(
            content=message.content,
            channel_id=channel.id,
            author_id=message.author.id,
            author_name=message.author.display_name,
            is_own_message=message.author == self.user,
            mentions_bot=self._mentions_bot(message),
            is_thread=is_thread,
            parent_channel_id=channel.parent_id if is_thread else None,
            attachments=tuple(
                Attachment(content_type=a.content_type, url=a.url) for a in message.attachments
            ),
        )

    @staticmethod
    def to_activation(interaction: discord.Interaction):
        """Convert a button click to ButtonActivation; None for other interactions."""
        if interaction.type != discord.InteractionType.component:
            return None
        data = interaction.data or {}
        if data.get("component_type") != discord.ComponentType.button.value:
            return None
        return ButtonActivation(
            custom_id=data.get("custom_id", ""),
            user_id=interaction.user.id,
            channel_id=interaction.channel_id,
        )

    async def on_ready(self):
        await self._router.dispatch(EventKind.READY, str(self.user))

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user:
            return
        await self._router.dispatch(
            EventKind.NEW_MESSAGE,
            self.to_incoming(message),
            DiscordMessageActions(message),
        )

    async def on_interaction(self, interaction: discord.Interaction):
        activation = self.to_activation(interaction)
        if activation is None:
            return
        await self._router.dispatch(
            EventKind.BUTTON_ACTIVATED,
            activation,
            DiscordInteractionActions(interaction),
        )
