from unittest.mock import AsyncMock, MagicMock

import pytest
from discord import Member, Permissions, User

from ackbot.ext.acknowledgement.acknowledgement_cog import AcknowledgementCog
from ackbot.ext.acknowledgement.acknowledgement_service import AcknowledgementService
from ackbot.ext.moderation.moderation_cog import ModerationCog
from ackbot.ext.moderation.moderation_exceptions import (
    CannotBanBotOrSelf,
    CannotKickElevatedUsers,
    CannotUnbanSelf,
)
from tests.conftest import make_interaction


@pytest.fixture()
def moderation_ctx():
    bot = MagicMock()
    bot.get_cog.return_value = None
    cog = ModerationCog(bot)

    service = MagicMock()
    service.send = AsyncMock()
    service.send_unban_acknowledgement = AsyncMock()
    cog._fallback_service = service

    interaction = make_interaction()
    member = MagicMock(spec=Member)
    member.id = 99
    member.mention = "<@99>"
    member.guild_permissions = Permissions.none()
    member.kick = AsyncMock()
    member.ban = AsyncMock()
    return cog, service, interaction, member


def test_uses_acknowledgement_cog_service():
    bot = MagicMock()
    ack_cog = AcknowledgementCog(bot)
    bot.get_cog.return_value = ack_cog

    assert ModerationCog(bot).acknowledgements is ack_cog.service


def test_falls_back_to_default_service():
    bot = MagicMock()
    bot.get_cog.return_value = None
    cog = ModerationCog(bot)

    service = cog.acknowledgements

    assert isinstance(service, AcknowledgementService)
    assert cog.acknowledgements is service


@pytest.mark.asyncio
async def test_kick_command(moderation_ctx):
    cog, service, interaction, member = moderation_ctx

    await cog.cmd_kick.callback(cog, interaction, member, "spamming")

    member.kick.assert_awaited_once_with(reason="spamming")
    service.send.assert_awaited_once_with(
        interaction,
        "User <@99> has been kicked\n**Reason:** spamming",
        has_reason_button=True,
        correlation_id="kick_99",
    )


@pytest.mark.asyncio
async def test_kick_elevated_member(moderation_ctx):
    cog, service, interaction, member = moderation_ctx
    member.guild_permissions = Permissions(administrator=True)

    with pytest.raises(CannotKickElevatedUsers):
        await cog.cmd_kick.callback(cog, interaction, member, None)

    member.kick.assert_not_awaited()
    service.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_ban_command(moderation_ctx):
    cog, service, interaction, member = moderation_ctx

    await cog.cmd_ban.callback(cog, interaction, member, None, 3600)

    member.ban.assert_awaited_once_with(
        delete_message_seconds=3600, reason="No reason given"
    )
    args, kwargs = service.send.call_args
    assert args[1] == "User <@99> has been banned\n**Reason:** No reason given"
    assert kwargs["has_reason_button"] is True


@pytest.mark.asyncio
async def test_ban_self(moderation_ctx):
    cog, service, interaction, member = moderation_ctx

    with pytest.raises(CannotBanBotOrSelf):
        await cog.cmd_ban.callback(cog, interaction, interaction.user, None, None)

    service.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_unban_command(moderation_ctx):
    cog, service, interaction, _ = moderation_ctx
    guild = MagicMock()
    guild.unban = AsyncMock()
    interaction.guild = guild
    user = MagicMock(spec=User)
    user.mention = "<@99>"

    await cog.cmd_unban.callback(cog, interaction, user, "appeal accepted")

    guild.unban.assert_awaited_once_with(user, reason="appeal accepted")
    service.send_unban_acknowledgement.assert_awaited_once_with(
        guild, user, interaction.user, "appeal accepted"
    )
    service.send.assert_awaited_once_with(
        interaction, "User <@99> has been unbanned", ephemeral=True
    )


@pytest.mark.asyncio
async def test_unban_self(moderation_ctx):
    cog, service, interaction, _ = moderation_ctx

    with pytest.raises(CannotUnbanSelf):
        await cog.cmd_unban.callback(cog, interaction, interaction.user, None)


def record_calls(**mocks) -> MagicMock:
    calls = MagicMock()
    for name, mock in mocks.items():
        calls.attach_mock(mock, name)
    return calls


@pytest.mark.asyncio
async def test_kick_defers_then_acts_then_acknowledges(moderation_ctx):
    cog, service, interaction, member = moderation_ctx
    calls = record_calls(
        defer=interaction.response.defer, kick=member.kick, send=service.send
    )

    await cog.cmd_kick.callback(cog, interaction, member, None)

    assert [name for name, _, _ in calls.mock_calls] == ["defer", "kick", "send"]


@pytest.mark.asyncio
async def test_ban_defers_then_acts_then_acknowledges(moderation_ctx):
    cog, service, interaction, member = moderation_ctx
    calls = record_calls(
        defer=interaction.response.defer, ban=member.ban, send=service.send
    )

    await cog.cmd_ban.callback(cog, interaction, member, None, None)

    assert [name for name, _, _ in calls.mock_calls] == ["defer", "ban", "send"]


@pytest.mark.asyncio
async def test_unban_defers_before_any_request(moderation_ctx):
    cog, service, interaction, _ = moderation_ctx
    guild = MagicMock()
    guild.unban = AsyncMock()
    interaction.guild = guild
    user = MagicMock(spec=User)
    user.mention = "<@99>"
    calls = record_calls(
        defer=interaction.response.defer,
        unban=guild.unban,
        log=service.send_unban_acknowledgement,
        send=service.send,
    )

    await cog.cmd_unban.callback(cog, interaction, user, None)

    assert [name for name, _, _ in calls.mock_calls] == [
        "defer",
        "unban",
        "log",
        "send",
    ]
    interaction.response.defer.assert_awaited_once_with(ephemeral=True, thinking=True)


@pytest.mark.asyncio
async def test_failed_checks_do_not_defer(moderation_ctx):
    cog, _, interaction, member = moderation_ctx
    member.guild_permissions = Permissions(administrator=True)

    with pytest.raises(CannotKickElevatedUsers):
        await cog.cmd_kick.callback(cog, interaction, member, None)

    interaction.response.defer.assert_not_awaited()
