from discord.ext.commands import Bot

from ackbot.core.utils import is_ack_bot
from ackbot.ext.acknowledgement.acknowledgement_cog import AcknowledgementCog


async def setup(bot: Bot):
    assert is_ack_bot(bot)
    await bot.add_configured_cog(__name__, AcknowledgementCog)
