"""Message components for session threads."""

import discord

from kp_trades_bot.domain.session_control import CloseSessionControl

CLOSE_LABEL = "Close Session"
CLOSE_EMOJI = "🔒"


def build_close_view(control: CloseSessionControl) -> discord.ui.View:
    """One danger-styled "Close Session" button carrying the owner's id.

    Clicks are routed by custom id in DiscordRelayBot.on_interaction, so the
    view needs no callback and never times out. The sender stops it once the
    message is out so the client does not keep it.
    """
    view = discord.ui.View(timeout=None)
    view.add_item(
        discord.ui.Button(
            style=discord.ButtonStyle.danger,
            label=CLOSE_LABEL,
            emoji=CLOSE_EMOJI,
            custom_id=control.to_custom_id(),
        )
    )
    return view
