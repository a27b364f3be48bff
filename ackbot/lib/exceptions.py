from typing import Any, Optional, Type

from discord import AllowedMentions, Interaction

__all__ = (
    "MalformedData",
    "ResponsiveException",
)


class MalformedData(Exception):
    def __init__(self, cls: Type, data: Any):
        super().__init__(f"Cannot create {cls.__name__} from {type(data).__name__}")


class ResponsiveException(Exception):
    """An error whose message is shown to the user who ran the app command."""

    def __init__(
        self,
        *args,
        allowed_mentions: Optional[AllowedMentions] = None,
    ):
        self.allowed_mentions: Optional[AllowedMentions] = allowed_mentions
        super().__init__(*args)

    async def respond(
        self,
        interaction: Interaction,
        allowed_mentions: Optional[AllowedMentions] = None,
    ):
        allowed_mentions = (
            allowed_mentions or self.allowed_mentions or AllowedMentions.none()
        )

        # Deferred or already answered, so the error goes out as a follow-up
        if interaction.response.is_done():
            await interaction.followup.send(
                str(self), allowed_mentions=allowed_mentions, ephemeral=True
            )
            return

        await interaction.response.send_message(
            str(self), allowed_mentions=allowed_mentions, ephemeral=True
        )
