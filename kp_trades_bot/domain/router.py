"""MessageRouter — forwarding and moderation policy, no framework dependencies.

Handles:
- Channel hygiene: unmentioned messages in the allowed channel are removed
- Relay: mentions are sent to the model and answered in a private thread
- Close Session buttons: only the thread owner may delete the thread
"""

import sys
from typing import List, Optional, Union

from kp_trades_bot.domain.models import ContentPart, ImagePart, RouteDecision, TextPart
from kp_trades_bot.domain.persona import BOT_PERSONA
from kp_trades_bot.domain.prompt import (
    first_image_attachment,
    split_message,
    strip_mention,
    thread_name_for,
)
from kp_trades_bot.domain.session_control import CloseSessionControl
from kp_trades_bot.ports.inbound import ButtonActivation, EventKind, IncomingMessage
from kp_trades_bot.ports.outbound import (
    ImageFetcherPort,
    InteractionActions,
    LLMPort,
    MessageActions,
)

BOT_NAME = "KPTradesBot"

HYGIENE_NOTICE = (
    "Your message in the <#{channel_id}> channel was removed. Please only use this "
    "channel to start a new session by mentioning the bot (@KP Trades Bot)."
)
EMPTY_PROMPT_REPLY = "Please provide a prompt when you mention me!"
FAILURE_REPLY = "An error occurred while processing your request. Please try again later."
ANSWER_TEMPLATE = "<@{author_id}>, here is your analysis: \n\n{text}"
NOT_AUTHORIZED_REPLY = "You are not authorized to close this session."
CLOSING_REPLY = "🔒 This session has been closed. Deleting thread..."
READY_LINE = "Bot is logged in as {tag} and ready to serve in your designated channel!"


def _log(msg: str):
    print(msg, file=sys.stderr)


def classify_message(msg: IncomingMessage, allowed_channel_id: int) -> RouteDecision:
    """Decide what to do with a message. First match wins."""
    if msg.is_own_message:
        return RouteDecision.IGNORE

    in_main = msg.channel_id == allowed_channel_id
    in_thread = msg.is_thread and msg.parent_channel_id == allowed_channel_id

    if in_main and not msg.mentions_bot:
        return RouteDecision.ENFORCE_HYGIENE
    if not in_main and not in_thread:
        return RouteDecision.IGNORE
    if in_thread and not msg.mentions_bot:
        return RouteDecision.IGNORE

    return RouteDecision.RELAY_NEW_SESSION if in_main else RouteDecision.RELAY_IN_THREAD


class MessageRouter:
    """Pure routing logic — no discord import, testable with mock ports."""

    def __init__(
        self,
        allowed_channel_id: int,
        executor: LLMPort,
        image_fetcher: ImageFetcherPort,
        persona: str = BOT_PERSONA,
        model: Optional[str] = None,
    ):
        self.allowed_channel_id = allowed_channel_id
        self.executor = executor
        self.image_fetcher = image_fetcher
        self.persona = persona
        self.model = model
        self._ready_logged = False

    async def dispatch(
        self,
        kind: EventKind,
        event: Union[IncomingMessage, ButtonActivation, str],
        actions: Union[MessageActions, InteractionActions, None] = None,
    ) -> None:
        """Route one platform event to its handler."""
        if kind is EventKind.NEW_MESSAGE:
            await self.handle_message(event, actions)
        elif kind is EventKind.BUTTON_ACTIVATED:
            await self.handle_button(event, actions)
        elif kind is EventKind.READY:
            self.handle_ready(event)
        else:
            raise ValueError(f"unknown event kind: {kind!r}")

    # -- New message --

    async def handle_message(self, msg: IncomingMessage, actions: MessageActions) -> RouteDecision:
        decision = classify_message(msg, self.allowed_channel_id)
        if decision is RouteDecision.ENFORCE_HYGIENE:
            await self._enforce_hygiene(msg, actions)
        elif decision in (RouteDecision.RELAY_NEW_SESSION, RouteDecision.RELAY_IN_THREAD):
            await self._relay(msg, actions, new_session=decision is RouteDecision.RELAY_NEW_SESSION)
        return decision

    async def _enforce_hygiene(self, msg: IncomingMessage, actions: MessageActions):
        try:
            await actions.delete()
            await actions.notify_author(HYGIENE_NOTICE.format(channel_id=msg.channel_id))
        except Exception as e:
            _log(f"[{BOT_NAME}] could not delete message or DM user {msg.author_id}: {e}")

    async def build_parts(self, msg: IncomingMessage) -> List[ContentPart]:
        """Text part first, then the first image attachment if any."""
        parts = [TextPart(text=strip_mention(msg.content))]
        image = first_image_attachment(msg.attachments)
        if image is not None:
            raw = await self.image_fetcher.fetch(image.url)
            parts.append(ImagePart.from_bytes(raw, image.content_type))
        return parts

    async def _relay(self, msg: IncomingMessage, actions: MessageActions, new_session: bool):
        try:
            await actions.send_typing()

            parts = await self.build_parts(msg)
            if not parts[0].text and len(parts) == 1:
                await actions.reply(EMPTY_PROMPT_REPLY)
                return

            text = await self.executor.execute(parts, system_prompt=self.persona, model=self.model)

            if new_session:
                await self._open_session(msg, actions, text)
            else:
                for chunk in split_message(text):
                    await actions.reply(chunk)
        except Exception as e:
            _log(f"[{BOT_NAME}] relay failed for message from {msg.author_id}: {e}")
            try:
                await actions.reply(FAILURE_REPLY)
            except Exception as reply_error:
                _log(f"[{BOT_NAME}] failure notice not delivered: {reply_error}")

    async def _open_session(self, msg: IncomingMessage, actions: MessageActions, text: str):
        thread = await actions.start_private_thread(thread_name_for(msg.author_name))
        control = CloseSessionControl(owner_id=msg.author_id)

        chunks = split_message(ANSWER_TEMPLATE.format(author_id=msg.author_id, text=text))
        for i, chunk in enumerate(chunks):
            is_last = i == len(chunks) - 1
            await thread.send(chunk, control=control if is_last else None)

        # Source message goes only after the answer is safely in the thread
        await actions.delete()
        _log(f"[{BOT_NAME}] session thread {thread.id} opened for {msg.author_id}")

    # -- Close Session button --

    async def handle_button(self, activation: ButtonActivation, actions: InteractionActions) -> bool:
        """Return True when the thread was closed."""
        control = CloseSessionControl.parse(activation.custom_id)
        if control is None:
            return False

        try:
            if not control.is_owner(activation.user_id):
                await actions.respond_ephemeral(NOT_AUTHORIZED_REPLY)
                return False

            await actions.respond_ephemeral(CLOSING_REPLY)
            await actions.delete_channel()
        except Exception as e:
            _log(f"[{BOT_NAME}] failed to close thread {activation.channel_id}: {e}")
            return False
        return True

    # -- Ready --

    def handle_ready(self, tag: str):
        # on_ready fires again after a reconnect that could not resume
        if self._ready_logged:
            return
        self._ready_logged = True
        _log(READY_LINE.format(tag=tag))
