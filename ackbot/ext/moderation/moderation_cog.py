from typing import Optional

from discord import Interaction, Member, Permissions, User
from discord.app_commands import (
    allowed_contexts,
    allowed_installs,
    choices,
    command,
    default_permissions,
    describe,
)
from discord.app_commands.checks import bot_has_permissions
from discord.app_commands.models import Choice
from discord.ext.commands import Bot, Cog

from ackbot.ext.acknowledgement.acknowledgement_cog import AcknowledgementCog
from ackbot.ext.acknowledgement.acknowledgement_options import AcknowledgementOptions
from ackbot.ext.acknowledgement.acknowledgement_reason import format_reason_line
from ackbot.ext.acknowledgement.acknowledgement_service import AcknowledgementService
from ackbot.ext.moderation.moderation_exceptions import (
    CannotBanBotOrSelf,
    CannotBanElevatedUsers,
    CannotKickBotOrSelf,
    CannotKickElevatedUsers,
    CannotUnbanSelf,
)
from ackbot.lib import MemberOrUser

DEFAULT_REASON = "No reason given"


class ModerationCog(Cog, name="ackbot.ext.moderation"):
    def __init__(self, bot: Bot):
        self.bot: Bot = bot
        self._fallback_service: Optional[AcknowledgementService] = None

    @property
    def acknowledgements(self) -> AcknowledgementService:
        # Share the configured service when the acknowledgement extension is loaded
        cog = self.bot.get_cog("ackbot.ext.acknowledgement")
        if isinstance(cog, AcknowledgementCog):
            return cog.service

        if not self._fallback_service:
            self._fallback_service = AcknowledgementService(AcknowledgementOptions())
        return self._fallback_service

    def _user_is_bot_or_interaction_user(
        self, user: MemberOrUser, interaction: Interaction
    ) -> bool:
        return user == self.bot.user or user == interaction.user

    def _is_elevated(self, user: Member) -> bool:
        return (user.guild_permissions & Permissions.elevated()).value != 0

    def _action_text(self, user: MemberOrUser, action: str, reason: Optional[str]):
        reason_line = format_reason_line(reason or DEFAULT_REASON)
        return f"User {user.mention} has been {action}\n{reason_line}"

    @command(name="kick", description="Kick a user from this server")
    @describe(user="The user to kick", reason="The reason for the kick")
    @allowed_installs(guilds=True)
    @allowed_contexts(guilds=True)
    @default_permissions(kick_members=True)
    @bot_has_permissions(kick_members=True)
    async def cmd_kick(
        self, interaction: Interaction, user: Member, reason: Optional[str]
    ):
        # Make sure we aren't trying to kick the bot or the user running the command
        if self._user_is_bot_or_interaction_user(user, interaction):
            raise CannotKickBotOrSelf

        # Make sure we aren't trying to kick users with elevated permissions
        if self._is_elevated(user):
            raise CannotKickElevatedUsers

        # Defer first, the acknowledgement then replaces the deferred response
        await interaction.response.defer(thinking=True)

        # Actually kick the user
        await user.kick(reason=reason or DEFAULT_REASON)

        # Acknowledge the kick with an editable reason
        await self.acknowledgements.send(
            interaction,
            self._action_text(user, "kicked", reason),
            has_reason_button=True,
            correlation_id=f"kick_{user.id}",
        )

    @command(name="ban", description="Ban a user from this server")
    @describe(
        user="The user to ban",
        reason="The reason for the ban",
        delete_message_history="The amount of message history to delete",
    )
    @choices(
        delete_message_history=[
            Choice(name="Don't delete any", value=0),
            Choice(name="Previous hour", value=3600),
            Choice(name="Previous 6 hours", value=21600),
            Choice(name="Previous 12 hours", value=43200),
            Choice(name="Previous 24 hours", value=86400),
            Choice(name="Previous 3 days", value=259200),
            Choice(name="Previous 7 days", value=604800),
        ]
    )
    @allowed_installs(guilds=True)
    @allowed_contexts(guilds=True)
    @default_permissions(ban_members=True)
    @bot_has_permissions(ban_members=True)
    async def cmd_ban(
        self,
        interaction: Interaction,
        user: Member,
        reason: Optional[str],
        delete_message_history: Optional[int],
    ):
        # Make sure we aren't trying to ban the bot or the user running the command
        if self._user_is_bot_or_interaction_user(user, interaction):
            raise CannotBanBotOrSelf

        # Make sure we aren't trying to ban users with elevated permissions
        if self._is_elevated(user):
            raise CannotBanElevatedUsers

        # Defer first, the acknowledgement then replaces the deferred response
        await interaction.response.defer(thinking=True)

        # Actually ban the user
        await user.ban(
            delete_message_seconds=delete_message_history or 0,
            reason=reason or DEFAULT_REASON,
        )

        # Acknowledge the ban with an editable reason
        await self.acknowledgements.send(
            interaction,
            self._action_text(user, "banned", reason),
            has_reason_button=True,
            correlation_id=f"ban_{user.id}",
        )

    @command(name="unban", description="Unban a user from this server")
    @describe(user="The user to unban", reason="The reason for the unban")
    @allowed_installs(guilds=True)
    @allowed_contexts(guilds=True)
    @default_permissions(ban_members=True)
    @bot_has_permissions(ban_members=True)
    async def cmd_unban(
        self, interaction: Interaction, user: User, reason: Optional[str]
    ):
        # Banned users can't run commands in the server they're banned from
        if user == interaction.user:
            raise CannotUnbanSelf

        guild = interaction.guild
        assert guild

        # Unbanning and logging take two requests, so answer the interaction first
        await interaction.response.defer(ephemeral=True, thinking=True)

        # Actually unban the user
        await guild.unban(user, reason=reason or DEFAULT_REASON)

        # Log the unban and let the moderator know it went through
        await self.acknowledgements.send_unban_acknowledgement(
            guild, user, interaction.user, reason or DEFAULT_REASON
        )
        await self.acknowledgements.send(
            interaction,
            f"User {user.mention} has been unbanned",
            ephemeral=True,
        )
