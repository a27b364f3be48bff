from unittest.mock import MagicMock

import pytest
from discord.app_commands import CommandInvokeError

from ackbot.core.ack_bot import AckBot
from ackbot.core.config import Config
from ackbot.ext.moderation.moderation_exceptions import CannotKickBotOrSelf
from tests.conftest import make_interaction


@pytest.fixture()
def bot() -> AckBot:
    return AckBot(Config.from_data({"command_prefix": "!"}))


@pytest.mark.asyncio
async def test_responsive_exceptions_respond_to_the_user(bot):
    interaction = make_interaction()
    error = CommandInvokeError(MagicMock(), CannotKickBotOrSelf())

    await bot.on_app_command_error(interaction, error)

    interaction.response.send_message.assert_awaited_once()
    (content,), kwargs = interaction.response.send_message.call_args
    assert content == "😳 I don't think you want to do that..."
    assert kwargs["ephemeral"] is True


@pytest.mark.asyncio
async def test_responsive_exceptions_follow_up_when_answered(bot):
    interaction = make_interaction(is_done=True)

    await bot.on_app_command_error(interaction, CannotKickBotOrSelf())

    interaction.followup.send.assert_awaited_once()
    interaction.response.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_unexpected_errors_get_a_generic_reply(bot):
    interaction = make_interaction()

    await bot.on_app_command_error(interaction, RuntimeError("boom"))

    interaction.response.send_message.assert_awaited_once_with(
        "🔥 Something went wrong trying to do that", ephemeral=True
    )
